"""Custom exception classes for docgeom.

Exception Hierarchy:
    GeometryError (base)
    ├── ConfigurationError
    │   └── InvalidConfigError
    ├── TypeMismatchError
    └── MissingFrameError

Usage:
    try:
        bbox = BoundingBox.enclosing_bbox(words)
    except TypeMismatchError as e:
        logger.error("Cannot aggregate boxes: %s", e)
"""

from __future__ import annotations


class GeometryError(Exception):
    """Base exception for all docgeom errors.

    All custom exceptions in the package inherit from this class, so callers
    can catch every geometry-specific error with a single handler.
    """


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(GeometryError):
    """Base exception for configuration-related errors."""


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid or malformed.

    Examples:
        - Fallback box that is not four numbers
        - Unknown log level name
    """


# ============================================================================
# Geometry Errors
# ============================================================================


class TypeMismatchError(GeometryError, TypeError):
    """Raised when aggregation input is neither a BoundingBox nor an entity exposing one.

    Also a ``TypeError`` so generic type-handling code keeps working.
    """


class MissingFrameError(GeometryError):
    """Raised when an operation needs the reference frame of a box and none is attached.

    Examples:
        - Normalizing a box built without a spatial object
        - Normalizing a box whose page object has been garbage-collected
    """
