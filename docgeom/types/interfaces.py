"""Interface definitions for entities that own a bounding box."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .bbox import BoundingBox


@runtime_checkable
class HasBoundingBox(Protocol):
    """Document entity (word, line, cell, table, ...) that owns one bounding box.

    Entities delegate all geometric reasoning to their box; BoundingBox.enclosing_bbox
    accepts them in place of raw boxes.

    Attributes:
        bbox: Location of the entity on its page

    Example:
        >>> @dataclass
        ... class Word:
        ...     text: str
        ...     bbox: BoundingBox
        >>> isinstance(Word("hi", BoundingBox(0, 0, 10, 5)), HasBoundingBox)
        True
    """

    bbox: BoundingBox | None
