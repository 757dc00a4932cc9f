"""Geometry type definitions for docgeom.

This module provides:
- SpatialObject: Frame of reference with a width and a height (e.g. a page)
- BoundingBox: Axis-aligned box positioned on a SpatialObject
- HasBoundingBox: Interface of entities that own a BoundingBox
"""

from .bbox import BoundingBox
from .interfaces import HasBoundingBox
from .spatial import SpatialObject

__all__ = [
    # Core data models
    "SpatialObject",
    "BoundingBox",
    # Entity interfaces
    "HasBoundingBox",
]
