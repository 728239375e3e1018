"""
Tests for EngineConfig.
"""

import logging

import pytest
from pydantic import ValidationError

from ..config import DEFAULT_BASE_CLASS, LOG_FORMAT, EngineConfig, configure_logging


class TestDefaults:
    """Tests for default values."""

    def test_defaults(self):
        """Unbounded history, default marker class, WARNING logs."""
        config = EngineConfig()

        assert config.history_limit is None
        assert config.base_class == DEFAULT_BASE_CLASS == "headless-component"
        assert config.log_level == "WARNING"

    def test_frozen(self):
        """Configs cannot be mutated after creation."""
        config = EngineConfig()

        with pytest.raises(ValidationError):
            config.base_class = "other"


class TestValidation:
    """Tests for rejected values."""

    @pytest.mark.parametrize("values", [
        {"history_limit": 0},
        {"history_limit": -3},
        {"base_class": ""},
        {"log_level": "chatty"},
    ])
    def test_invalid_values(self, values):
        """Out-of-range values raise ValidationError."""
        with pytest.raises(ValidationError):
            EngineConfig(**values)

    def test_log_level_is_normalised(self):
        """Log levels are case-insensitive."""
        assert EngineConfig(log_level="debug").log_level == "DEBUG"


class TestFromEnv:
    """Tests for environment loading."""

    def test_empty_environment(self):
        """No variables means defaults."""
        assert EngineConfig.from_env() == EngineConfig()

    def test_reads_variables(self, monkeypatch):
        """HEADLESS_* variables populate the config."""
        monkeypatch.setenv("HEADLESS_HISTORY_LIMIT", "25")
        monkeypatch.setenv("HEADLESS_BASE_CLASS", "ui")
        monkeypatch.setenv("HEADLESS_LOG_LEVEL", "info")

        config = EngineConfig.from_env()

        assert config.history_limit == 25
        assert config.base_class == "ui"
        assert config.log_level == "INFO"

    def test_empty_variable_is_ignored(self, monkeypatch):
        """An empty string leaves the default in place."""
        monkeypatch.setenv("HEADLESS_HISTORY_LIMIT", "")

        assert EngineConfig.from_env().history_limit is None

    def test_invalid_variable(self, monkeypatch):
        """Bad values surface as ValidationError."""
        monkeypatch.setenv("HEADLESS_HISTORY_LIMIT", "lots")

        with pytest.raises(ValidationError):
            EngineConfig.from_env()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_passes_level_and_format(self, monkeypatch):
        """Levels are upper-cased and the shared format is used."""
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging("debug")
        configure_logging(logging.INFO)

        assert calls == [
            {"level": "DEBUG", "format": LOG_FORMAT},
            {"level": logging.INFO, "format": LOG_FORMAT},
        ]
