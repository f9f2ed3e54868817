"""Tests for configuration module."""

import os
from unittest.mock import patch

import pytest

from steam_catalog.config import CatalogConfig, DemoConfig, LoggingConfig, Settings


class TestCatalogConfig:
    """Tests for catalog configuration."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            config = CatalogConfig()

        assert config.page_size == 10
        assert config.recommended_limit == 10

    def test_env_override(self) -> None:
        """Test that values are read from the environment."""
        with patch.dict(os.environ, {"CATALOG_PAGE_SIZE": "25"}):
            config = CatalogConfig()

        assert config.page_size == 25

    def test_page_size_bounds(self) -> None:
        """Test page_size validation bounds."""
        with patch.dict(os.environ, {"CATALOG_PAGE_SIZE": "0"}), pytest.raises(ValueError):
            CatalogConfig()

        with patch.dict(os.environ, {"CATALOG_PAGE_SIZE": "101"}), pytest.raises(ValueError):
            CatalogConfig()


class TestLoggingConfig:
    """Tests for logging configuration."""

    def test_valid_levels(self) -> None:
        """Test valid log levels."""
        for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            with patch.dict(os.environ, {"LOG_LEVEL": level}):
                config = LoggingConfig()
                assert config.level == level

    def test_valid_formats(self) -> None:
        """Test valid log formats."""
        for fmt in ["json", "console"]:
            with patch.dict(os.environ, {"LOG_FORMAT": fmt}):
                config = LoggingConfig()
                assert config.format == fmt

    def test_invalid_format(self) -> None:
        """Test that unknown formats are rejected."""
        with patch.dict(os.environ, {"LOG_FORMAT": "xml"}), pytest.raises(ValueError):
            LoggingConfig()


class TestSettings:
    """Tests for aggregated settings."""

    def test_sections(self) -> None:
        """Test that every section is populated."""
        with patch.dict(os.environ, {"DEMO_SEED": "7"}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.is_production is False
        assert settings.demo.seed == 7
        assert isinstance(settings.catalog, CatalogConfig)
        assert isinstance(settings.demo, DemoConfig)
