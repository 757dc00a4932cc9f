"""SpatialObject dataclass - a frame of reference with an extent."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SpatialObject:
    """Object with a width and a height, such as a page or a page image.

    Used as the calibrator that BoundingBox coordinates are expressed against.
    It carries an extent only, never a position.
    """

    width: float
    height: float
