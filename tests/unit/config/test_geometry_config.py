"""Tests for GeometryConfig class.

Tests cover:
- Basic creation and defaults
- Configuration validation
- from_dict and from_yaml methods
"""

from __future__ import annotations

import pytest

from docgeom.config import GeometryConfig
from docgeom.exceptions import ConfigurationError, InvalidConfigError
from docgeom.types import BoundingBox


class TestGeometryConfigCreation:
    """Tests for GeometryConfig creation and defaults."""

    def test_default_values(self):
        """Test default configuration values."""
        config = GeometryConfig()

        assert config.fallback_bbox == (0, 0, 1, 1)
        assert config.log_level == "INFO"

    def test_list_fallback_converted(self):
        """Test list fallback (as loaded from YAML) becomes a tuple."""
        config = GeometryConfig(fallback_bbox=[0, 0, 800, 600])  # type: ignore[arg-type]

        assert config.fallback_bbox == (0, 0, 800, 600)

    def test_from_dict(self):
        """Test creation from dict with overrides."""
        config = GeometryConfig.from_dict(
            {"fallback_bbox": [1, 2, 3, 4], "log_level": "DEBUG", "unknown": True},
            log_level="WARNING",
        )

        assert config.fallback_bbox == (1, 2, 3, 4)
        assert config.log_level == "WARNING"

    def test_fallback_feeds_enclosing_bbox(self):
        """Test configured fallback is used by enclosing_bbox."""
        config = GeometryConfig(fallback_bbox=(0, 0, 800, 600))

        assert BoundingBox.enclosing_bbox([None], fallback=config.fallback_bbox) == BoundingBox(0, 0, 800, 600)


class TestGeometryConfigValidation:
    """Tests for GeometryConfig.validate()."""

    def test_valid_config(self):
        """Test default config validates."""
        GeometryConfig().validate()

    def test_lowercase_log_level(self):
        """Test log level is case-insensitive."""
        GeometryConfig(log_level="debug").validate()

    def test_invalid_log_level(self):
        """Test unknown log level raises error."""
        with pytest.raises(InvalidConfigError, match="Invalid log_level"):
            GeometryConfig(log_level="VERBOSE").validate()

    def test_fallback_wrong_length(self):
        """Test fallback with wrong number of values raises error."""
        with pytest.raises(InvalidConfigError, match="4 values"):
            GeometryConfig(fallback_bbox=(0, 0, 1)).validate()  # type: ignore[arg-type]

    def test_fallback_non_numeric(self):
        """Test fallback with non-numeric values raises error."""
        with pytest.raises(InvalidConfigError, match="must be numbers"):
            GeometryConfig(fallback_bbox=(0, 0, "1", 1)).validate()  # type: ignore[arg-type]

    def test_error_is_configuration_error(self):
        """Test InvalidConfigError is a ConfigurationError."""
        with pytest.raises(ConfigurationError):
            GeometryConfig(log_level="nope").validate()


class TestGeometryConfigFromYaml:
    """Tests for GeometryConfig.from_yaml()."""

    def test_from_yaml(self, tmp_path):
        """Test loading configuration from YAML."""
        config_file = tmp_path / "geometry.yaml"
        config_file.write_text("fallback_bbox: [0, 0, 612, 792]\nlog_level: DEBUG\n", encoding="utf-8")

        config = GeometryConfig.from_yaml(config_file)

        assert config.fallback_bbox == (0, 0, 612, 792)
        assert config.log_level == "DEBUG"
        config.validate()

    def test_from_yaml_with_overrides(self, tmp_path):
        """Test overrides take precedence over file values."""
        config_file = tmp_path / "geometry.yaml"
        config_file.write_text("log_level: DEBUG\n", encoding="utf-8")

        config = GeometryConfig.from_yaml(config_file, log_level="ERROR")

        assert config.log_level == "ERROR"

    def test_missing_file_uses_defaults(self, tmp_path):
        """Test missing file yields defaults."""
        config = GeometryConfig.from_yaml(tmp_path / "missing.yaml")

        assert config == GeometryConfig()

    def test_malformed_yaml_uses_defaults(self, tmp_path, caplog):
        """Test malformed YAML yields defaults and logs a warning."""
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("fallback_bbox: [0, 0\nlog_level: :\n", encoding="utf-8")

        config = GeometryConfig.from_yaml(config_file)

        assert config == GeometryConfig()
        assert "Failed to parse config file" in caplog.text

    def test_non_mapping_yaml_uses_defaults(self, tmp_path):
        """Test YAML that is not a mapping yields defaults."""
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- 1\n- 2\n", encoding="utf-8")

        assert GeometryConfig.from_yaml(config_file) == GeometryConfig()

    def test_empty_yaml_uses_defaults(self, tmp_path):
        """Test empty YAML file yields defaults."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("", encoding="utf-8")

        assert GeometryConfig.from_yaml(config_file) == GeometryConfig()
