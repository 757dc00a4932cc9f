"""Shared constants for docgeom."""

# =============================================================================
# Aggregation
# =============================================================================
DEFAULT_FALLBACK_BBOX = (0, 0, 1, 1)
"""(x, y, width, height) returned by enclosing_bbox when no input box is available."""

# =============================================================================
# Logging
# =============================================================================
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
"""Format string used by setup_logging."""

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
"""Accepted log level names (case-insensitive)."""
