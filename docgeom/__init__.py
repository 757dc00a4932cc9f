"""docgeom - bounding box geometry for document analysis results."""

from .config import GeometryConfig
from .exceptions import (
    ConfigurationError,
    GeometryError,
    InvalidConfigError,
    MissingFrameError,
    TypeMismatchError,
)
from .log import setup_logging
from .types import BoundingBox, HasBoundingBox, SpatialObject

__version__ = "0.1.0"

__all__ = [
    "BoundingBox",
    "SpatialObject",
    "HasBoundingBox",
    "GeometryConfig",
    "setup_logging",
    "GeometryError",
    "ConfigurationError",
    "InvalidConfigError",
    "TypeMismatchError",
    "MissingFrameError",
]
