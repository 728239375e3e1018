"""
Engine Configuration - Environment-driven settings for components.

Environment variables:
    HEADLESS_HISTORY_LIMIT   Max commands kept per component (unset = unbounded)
    HEADLESS_BASE_CLASS      Base marker class in every CSS projection
    HEADLESS_LOG_LEVEL       Log level used by the CLI

The library never configures logging on import; configure_logging() is
called by entry points (the CLI) only.
"""

from __future__ import annotations
import logging
import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator


DEFAULT_BASE_CLASS = "headless-component"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class EngineConfig(BaseModel):
    """Settings shared by every component instance that receives them."""
    history_limit: Optional[int] = Field(
        default=None,
        ge=1,
        description="Maximum number of commands kept; None keeps everything",
    )
    base_class: str = Field(default=DEFAULT_BASE_CLASS, min_length=1)
    log_level: str = "WARNING"

    model_config = {"frozen": True}

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Build a config from HEADLESS_* environment variables."""
        values = {}
        limit = os.getenv("HEADLESS_HISTORY_LIMIT")
        if limit:
            values["history_limit"] = limit
        base_class = os.getenv("HEADLESS_BASE_CLASS")
        if base_class:
            values["base_class"] = base_class
        log_level = os.getenv("HEADLESS_LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level
        return cls(**values)


def configure_logging(level: str | int = "WARNING") -> None:
    """Install a root handler for command-line use."""
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
