"""Pytest configuration and shared fixtures for docgeom tests.

This module provides:
- Common fixtures for all tests (page, sample_bboxes, sample_words, etc.)
- A minimal box-owning entity used to exercise HasBoundingBox inputs
- Test configuration and path setup
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

# Ensure project root is importable when running tests via python -m pytest
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from docgeom.types import BoundingBox, SpatialObject  # noqa: E402


@dataclass
class Word:
    """Document entity owning a bounding box, as produced by a response parser."""

    text: str
    bbox: BoundingBox | None


# ==================== Sample Data Fixtures ====================


@pytest.fixture
def page() -> SpatialObject:
    """Create a page frame (800x600).

    Returns:
        SpatialObject representing a page
    """
    return SpatialObject(width=800, height=600)


@pytest.fixture
def sample_bboxes(page: SpatialObject) -> list[BoundingBox]:
    """Create sample boxes on the page fixture.

    Returns:
        List of BoundingBox objects (a title line and two body lines)
    """
    return [
        BoundingBox(100, 50, 300, 30, page),
        BoundingBox(100, 100, 500, 20, page),
        BoundingBox(80, 130, 520, 20, page),
    ]


@pytest.fixture
def sample_words(page: SpatialObject) -> list[Word]:
    """Create sample word entities on the page fixture.

    Returns:
        List of Word objects with bounding boxes
    """
    return [
        Word("Chapter", BoundingBox(100, 50, 80, 20, page)),
        Word("1", BoundingBox(190, 50, 10, 20, page)),
        Word("Introduction", BoundingBox(100, 80, 150, 20, page)),
    ]

