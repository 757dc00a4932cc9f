"""BoundingBox class for document region geometry.

Internal format: (x, y, width, height) - top-left corner plus extent
Coordinates are denormalized: x in [0, page_width], y in [0, page_height]
"""

from __future__ import annotations

import logging
import math
import weakref
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..constants import DEFAULT_FALLBACK_BBOX
from ..exceptions import MissingFrameError, TypeMismatchError
from .interfaces import HasBoundingBox
from .spatial import SpatialObject

logger = logging.getLogger(__name__)


@dataclass(frozen=True, init=False, repr=False)
class BoundingBox(SpatialObject):
    """Axis-aligned bounding box of a document element.

    A BoundingBox is a SpatialObject with a position. Coordinates are
    denormalized (same units as the page it belongs to) and never rescaled
    after construction.

    Width and height may be negative. Such a box is degenerate: its stored
    dimensions are kept as-is and area() reports 0.

    The page the box is expressed against is held through a weak reference, so
    a box never keeps its page alive. Equality and hashing only consider
    (x, y, width, height). dataclasses.replace() keeps the page reference;
    pickling drops it, since the page is not part of the box.

    Create a BoundingBox like shown below:
        Directly:       BoundingBox(x, y, width, height, page)
        From corners:   BoundingBox.from_denormalized_corners(x1, y1, x2, y2, page)
        From dict:      BoundingBox.from_denormalized_dict({"x": x, "y": y, "width": w, "height": h})

    Example:
        >>> page = SpatialObject(width=800, height=600)
        >>> bbox = BoundingBox(100, 50, 200, 150, page)
        >>> bbox.area()
        30000
        >>> str(bbox)
        'x: 100, y: 50, width: 200, height: 150'
    """

    x: float
    y: float
    _frame_ref: weakref.ref[SpatialObject] | None = field(default=None, compare=False)

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        spatial_object: SpatialObject | None = None,
        *,
        _frame_ref: weakref.ref[SpatialObject] | None = None,
    ) -> None:
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "width", width)
        object.__setattr__(self, "height", height)
        # dataclasses.replace() hands the existing handle back through _frame_ref
        if spatial_object is not None:
            _frame_ref = weakref.ref(spatial_object)
        object.__setattr__(self, "_frame_ref", _frame_ref)

    def __reduce__(self) -> tuple[type[BoundingBox], tuple[float, float, float, float]]:
        return (self.__class__, (self.x, self.y, self.width, self.height))

    def __copy__(self) -> BoundingBox:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> BoundingBox:
        return self

    @property
    def spatial_object(self) -> SpatialObject | None:
        """Page (or image) the coordinates are expressed against.

        Returns:
            The referenced SpatialObject, or None if none was given or it
            has been garbage-collected
        """
        if self._frame_ref is None:
            return None
        return self._frame_ref()

    # ==================== FROM Conversions (Format → BoundingBox) ====================

    @classmethod
    def from_denormalized_xywh(
        cls,
        x: float,
        y: float,
        width: float,
        height: float,
        spatial_object: SpatialObject | None = None,
    ) -> BoundingBox:
        """Create from top-left, width and height in page units.

        Args:
            x: Left ~ [0, page_width]
            y: Top ~ [0, page_height]
            width: Width ~ [0, page_width]
            height: Height ~ [0, page_height]
            spatial_object: Page the box belongs to

        Returns:
            BoundingBox with the given coordinates
        """
        return cls(x, y, width, height, spatial_object)

    @classmethod
    def from_denormalized_corners(
        cls,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        spatial_object: SpatialObject | None = None,
    ) -> BoundingBox:
        """Create from top-left and bottom-right corners in page units.

        The corners are not reordered: if x2 < x1 or y2 < y1 the resulting box
        has a negative width or height.

        Args:
            x1: Left
            y1: Top
            x2: Right
            y2: Bottom
            spatial_object: Page the box belongs to

        Returns:
            BoundingBox with width = x2 - x1 and height = y2 - y1

        Example:
            >>> BoundingBox.from_denormalized_corners(100, 50, 300, 200).to_xyxy()
            (100, 50, 300, 200)
        """
        return cls(x1, y1, x2 - x1, y2 - y1, spatial_object)

    @classmethod
    def from_denormalized_borders(
        cls,
        left: float,
        top: float,
        right: float,
        bottom: float,
        spatial_object: SpatialObject | None = None,
    ) -> BoundingBox:
        """Create from left, top, right and bottom borders (alias of from_denormalized_corners)."""
        return cls.from_denormalized_corners(left, top, right, bottom, spatial_object)

    @classmethod
    def from_denormalized_dict(
        cls,
        box: Mapping[str, float],
        spatial_object: SpatialObject | None = None,
    ) -> BoundingBox:
        """Create from a dict like {"x": x, "y": y, "width": width, "height": height}.

        Args:
            box: Coordinates in page units
            spatial_object: Page the box belongs to

        Returns:
            BoundingBox with the given coordinates

        Raises:
            KeyError: If one of the four keys is missing
        """
        return cls(box["x"], box["y"], box["width"], box["height"], spatial_object)

    @classmethod
    def from_dict(
        cls,
        box: Mapping[str, float],
        spatial_object: SpatialObject | None = None,
    ) -> BoundingBox:
        """Create from an analysis-response geometry dict {"Left", "Top", "Width", "Height"}.

        Values are taken as-is; no scaling by spatial_object is applied.

        Args:
            box: Geometry dict with capitalized keys
            spatial_object: Page the box belongs to

        Returns:
            BoundingBox with the given coordinates

        Raises:
            KeyError: If one of the four keys is missing
        """
        return cls(box["Left"], box["Top"], box["Width"], box["Height"], spatial_object)

    @classmethod
    def from_normalized_dict(
        cls,
        box: Mapping[str, float],
        spatial_object: SpatialObject | None,
    ) -> BoundingBox:
        """Create from an analysis-response geometry dict, keeping its coordinates unscaled.

        Reads the same keys as from_dict and, like it, does not multiply by the
        page extent. Callers that need page units should scale explicitly:

            >>> coords = BoundingBox.denormalize(box["Left"], box["Top"], box["Width"], box["Height"], page)
            >>> bbox = BoundingBox.from_denormalized_dict(coords, page)

        Args:
            box: Geometry dict with capitalized keys
            spatial_object: Page the box belongs to

        Returns:
            BoundingBox with the given coordinates
        """
        return cls.from_dict(box, spatial_object)

    @staticmethod
    def denormalize(
        x: float,
        y: float,
        width: float,
        height: float,
        spatial_object: SpatialObject,
    ) -> dict[str, float]:
        """Scale normalized coordinates to page units.

        Args:
            x: Normalized left ~ [0, 1]
            y: Normalized top ~ [0, 1]
            width: Normalized width ~ [0, 1]
            height: Normalized height ~ [0, 1]
            spatial_object: Page (any object with width and height)

        Returns:
            Dict with keys x, y, width, height in page units

        Example:
            >>> BoundingBox.denormalize(0.5, 0.5, 0.5, 0.5, SpatialObject(200, 100))
            {'x': 100.0, 'y': 50.0, 'width': 100.0, 'height': 50.0}
        """
        return {
            "x": x * spatial_object.width,
            "y": y * spatial_object.height,
            "width": width * spatial_object.width,
            "height": height * spatial_object.height,
        }

    # ==================== Aggregation ====================

    @classmethod
    def enclosing_bbox(
        cls,
        bboxes: Iterable[BoundingBox | HasBoundingBox | None],
        spatial_object: SpatialObject | None = None,
        fallback: tuple[float, float, float, float] | None = None,
    ) -> BoundingBox:
        """Compute the smallest box covering every input box.

        Inputs are either all BoundingBox objects or all entities exposing a
        ``bbox`` attribute; the first non-None input decides which. None
        inputs (and entities whose bbox is None) are skipped.

        Args:
            bboxes: Boxes or box-owning entities
            spatial_object: Page of the result. Defaults to the page of the first box
            fallback: (x, y, width, height) returned when no box is available.
                Defaults to DEFAULT_FALLBACK_BBOX

        Returns:
            Enclosing BoundingBox

        Raises:
            TypeMismatchError: If an input is neither a BoundingBox nor an entity exposing one

        Example:
            >>> BoundingBox.enclosing_bbox([BoundingBox(0, 0, 2, 2), BoundingBox(5, 5, 1, 1)])
            BoundingBox(x=0, y=0, width=6, height=6)
        """
        items = [item for item in bboxes if item is not None]

        if items and not isinstance(items[0], BoundingBox):
            items = [cls._project_bbox(item) for item in items]
            items = [item for item in items if item is not None]
        else:
            for item in items:
                if not isinstance(item, BoundingBox):
                    raise TypeMismatchError(
                        f"bboxes must be of type list[BoundingBox] or of entities exposing a bbox, "
                        f"got {type(item).__name__}"
                    )

        if not items:
            logger.warning("At least one bounding box needs to be non-null; returning fallback box")
            x, y, width, height = fallback if fallback is not None else DEFAULT_FALLBACK_BBOX
            return cls(x, y, width, height, spatial_object)

        if spatial_object is None:
            spatial_object = items[0].spatial_object

        x1 = min(bbox.x for bbox in items)
        y1 = min(bbox.y for bbox in items)
        x2 = max(bbox.x + bbox.width for bbox in items)
        y2 = max(bbox.y + bbox.height for bbox in items)

        return cls.from_denormalized_corners(x1, y1, x2, y2, spatial_object)

    @staticmethod
    def _project_bbox(item: Any) -> BoundingBox | None:
        if not isinstance(item, HasBoundingBox) or not (item.bbox is None or isinstance(item.bbox, BoundingBox)):
            raise TypeMismatchError(
                f"bboxes must be of type list[BoundingBox] or of entities exposing a bbox, "
                f"got {type(item).__name__}"
            )
        return item.bbox

    # ==================== Predicates ====================

    @staticmethod
    def is_inside(box_a: BoundingBox, box_b: BoundingBox) -> bool:
        """Check if box_a lies entirely within box_b.

        Edges are compared inclusively, so touching borders count as inside
        and every box is inside itself.

        Args:
            box_a: Candidate inner box
            box_b: Candidate outer box

        Returns:
            True if box_a is within box_b
        """
        return (
            box_a.x >= box_b.x
            and box_a.x + box_a.width <= box_b.x + box_b.width
            and box_a.y >= box_b.y
            and box_a.y + box_a.height <= box_b.y + box_b.height
        )

    @staticmethod
    def center_is_inside(box_a: BoundingBox, box_b: BoundingBox) -> bool:
        """Check if the center point of box_a lies within box_b (edges inclusive)."""
        cx, cy = box_a.center
        return box_b.x <= cx <= box_b.x + box_b.width and box_b.y <= cy <= box_b.y + box_b.height

    # ==================== Measurements ====================

    def area(self) -> float:
        """Get bbox area.

        Returns:
            width * height, or 0 for a box with a negative dimension
        """
        if self.width < 0 or self.height < 0:
            return 0
        return self.width * self.height

    @property
    def center(self) -> tuple[float, float]:
        """Get center point (cx, cy).

        Example:
            >>> BoundingBox(100, 50, 200, 150).center
            (200.0, 125.0)
        """
        return (self.x + self.width / 2, self.y + self.height / 2)

    def get_intersection(self, other: BoundingBox) -> BoundingBox:
        """Build the overlap of this box and another.

        The result is not clamped: when the boxes are disjoint its width
        and/or height is negative (area() is 0). Boxes that only touch
        produce a zero width or height.

        Args:
            other: Another BoundingBox

        Returns:
            Intersection box on this box's page

        Example:
            >>> BoundingBox(0, 0, 10, 10).get_intersection(BoundingBox(5, 5, 10, 10))
            BoundingBox(x=5, y=5, width=5, height=5)
        """
        return BoundingBox.from_denormalized_corners(
            max(self.x, other.x),
            max(self.y, other.y),
            min(self.x + self.width, other.x + other.width),
            min(self.y + self.height, other.y + other.height),
            self.spatial_object,
        )

    def get_distance(self, other: BoundingBox) -> float:
        """Euclidean distance between the centers of this box and another."""
        cx, cy = self.center
        other_cx, other_cy = other.center
        return math.sqrt((cx - other_cx) ** 2 + (cy - other_cy) ** 2)

    # ==================== TO Conversions (BoundingBox → Format) ====================

    def to_xyxy(self) -> tuple[float, float, float, float]:
        """Convert to (x0, y0, x1, y1) corners."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    def as_dict(self) -> dict[str, float]:
        """Convert to a dict {"x", "y", "width", "height"} in page units.

        Example:
            >>> BoundingBox(100, 50, 200, 150).as_dict()
            {'x': 100, 'y': 50, 'width': 200, 'height': 150}
        """
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }

    def as_normalized_dict(self) -> dict[str, float]:
        """Convert to a dict {"x", "y", "width", "height"} as fractions of the page extent.

        Returns:
            Coordinates divided by the page width/height

        Raises:
            MissingFrameError: If the box has no page attached (or it no longer exists)
            ValueError: If the page has a zero width or height
        """
        frame = self.spatial_object
        if frame is None:
            raise MissingFrameError("Cannot normalize a BoundingBox without a spatial object")
        if frame.width == 0 or frame.height == 0:
            raise ValueError(f"Cannot normalize against a spatial object of size {frame.width}x{frame.height}")
        return {
            "x": self.x / frame.width,
            "y": self.y / frame.height,
            "width": self.width / frame.width,
            "height": self.height / frame.height,
        }

    # ==================== Display ====================

    def __str__(self) -> str:
        return f"x: {self.x}, y: {self.y}, width: {self.width}, height: {self.height}"

    def __repr__(self) -> str:
        return f"BoundingBox(x={self.x}, y={self.y}, width={self.width}, height={self.height})"
