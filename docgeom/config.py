"""Geometry configuration module.

This module provides:
- GeometryConfig: Dataclass for library-level settings
- YAML configuration file loading
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .constants import DEFAULT_FALLBACK_BBOX, VALID_LOG_LEVELS
from .exceptions import InvalidConfigError

logger = logging.getLogger(__name__)


def _load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load YAML configuration file with error handling.

    Args:
        config_path: Path to YAML config file

    Returns:
        Configuration dict, or empty dict if file not found or invalid
    """
    try:
        if config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                logger.warning("Config file %s does not contain a mapping, ignoring it", config_path)
                return {}
            return data
        logger.debug("Config file not found: %s", config_path)
        return {}
    except yaml.YAMLError as e:
        logger.warning("Failed to parse config file %s: %s", config_path, e)
        return {}
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read config file %s: %s", config_path, e)
        return {}


@dataclass
class GeometryConfig:
    """Library-level settings.

    Configuration Sources (in order of precedence):
    1. Constructor arguments / overrides (highest priority)
    2. YAML configuration files via from_yaml()
    3. Default values (lowest priority)

    Example:
        >>> config = GeometryConfig.from_yaml(Path("settings/geometry.yaml"))
        >>> config.validate()
        >>> setup_logging(config.log_level)
        >>> BoundingBox.enclosing_bbox(words, page, fallback=config.fallback_bbox)
    """

    # (x, y, width, height) used by enclosing_bbox when no box is available
    fallback_bbox: tuple[float, float, float, float] = DEFAULT_FALLBACK_BBOX
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Convert YAML lists to tuples."""
        if isinstance(self.fallback_bbox, list):
            self.fallback_bbox = tuple(self.fallback_bbox)

    @classmethod
    def from_dict(cls, data: dict[str, Any], **overrides: Any) -> GeometryConfig:
        """Create GeometryConfig from dict, ignoring unknown keys.

        Args:
            data: Configuration values
            **overrides: Values that take precedence over data

        Returns:
            GeometryConfig instance
        """
        known = {"fallback_bbox", "log_level"}
        unknown = set(data) - known
        if unknown:
            logger.debug("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))

        kwargs: dict[str, Any] = {key: value for key, value in data.items() if key in known}
        kwargs.update(overrides)
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, config_path: str | Path, **overrides: Any) -> GeometryConfig:
        """Load configuration from YAML file.

        Args:
            config_path: Path to YAML configuration file
            **overrides: Values to override from file

        Returns:
            GeometryConfig instance (defaults if the file is missing or invalid)
        """
        return cls.from_dict(_load_yaml_config(Path(config_path)), **overrides)

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            InvalidConfigError: If fallback_bbox is not four numbers or log_level is unknown
        """
        fallback = self.fallback_bbox
        if not isinstance(fallback, tuple) or len(fallback) != 4:
            raise InvalidConfigError(f"fallback_bbox must have 4 values (x, y, width, height), got {fallback!r}")
        if not all(isinstance(v, int | float) and not isinstance(v, bool) for v in fallback):
            raise InvalidConfigError(f"fallback_bbox values must be numbers, got {fallback!r}")

        if not isinstance(self.log_level, str) or self.log_level.upper() not in VALID_LOG_LEVELS:
            raise InvalidConfigError(
                f"Invalid log_level: {self.log_level}. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )
