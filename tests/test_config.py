"""Tests for configuration and logging setup."""

import logging
from unittest.mock import patch

import pytest
import structlog
from pydantic import ValidationError

from tool_output.config import OutputFormat, Settings
from tool_output.logging_config import configure_logging


class TestSettings:
    """Tests for Settings configuration."""

    def test_default_settings(self) -> None:
        """Test default settings values."""
        with patch.dict("os.environ", {}, clear=True):
            settings = Settings()
            assert settings.output_format is OutputFormat.TABULAR
            assert settings.max_depth == 100
            assert settings.log_level == "INFO"

    def test_settings_from_env(self) -> None:
        """Test settings from environment variables."""
        env_vars = {
            "OUTPUT_FORMAT": "json",
            "MAX_DEPTH": "12",
            "LOG_LEVEL": "DEBUG",
        }
        with patch.dict("os.environ", env_vars, clear=False):
            settings = Settings()
            assert settings.output_format is OutputFormat.JSON
            assert settings.max_depth == 12
            assert settings.log_level == "DEBUG"

    def test_invalid_output_format(self) -> None:
        """Unknown formats are rejected."""
        with patch.dict("os.environ", {"OUTPUT_FORMAT": "yaml"}, clear=False):
            with pytest.raises(ValidationError):
                Settings()

    def test_max_depth_must_be_positive(self) -> None:
        """A depth limit below one is rejected."""
        with pytest.raises(ValidationError):
            Settings(max_depth=0)


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.fixture(autouse=True)
    def reset_logging(self):
        """Restore logging defaults after each test."""
        yield
        structlog.reset_defaults()
        logging.getLogger().setLevel(logging.WARNING)

    def test_explicit_level(self) -> None:
        """The given level is applied to the root logger."""
        configure_logging("debug")
        assert logging.getLogger().level == logging.DEBUG
        assert structlog.is_configured()

    def test_level_from_settings(self) -> None:
        """The level defaults to settings.log_level."""
        with patch(
            "tool_output.logging_config.settings",
            Settings(log_level="WARNING"),
        ):
            configure_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self) -> None:
        """Unknown level names fall back to INFO."""
        configure_logging("chatty")
        assert logging.getLogger().level == logging.INFO
