"""
Runtime settings for the stopwatch tools.

Values come from environment variables when set:
    STOPWATCH_LOG_LEVEL, STOPWATCH_DEMO_DELAY, STOPWATCH_PRECISION
Pydantic validates them, so a bad value fails at load time rather than
half-way through a timing run.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StopwatchSettings(BaseModel):
    log_level: str = Field(default_factory=lambda: os.getenv("STOPWATCH_LOG_LEVEL", "WARNING"))
    demo_delay: float = Field(default_factory=lambda: os.getenv("STOPWATCH_DEMO_DELAY", "1.0"), ge=0.0)
    precision: int = Field(default_factory=lambda: os.getenv("STOPWATCH_PRECISION", "6"), ge=0, le=9)

    model_config = ConfigDict(validate_default=True)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level

    def format_seconds(self, seconds: float) -> str:
        return f"{seconds:.{self.precision}f}"


# ---------- Singleton access ----------

_settings_singleton: Optional[StopwatchSettings] = None

def get_settings(force_refresh: bool = False) -> StopwatchSettings:
    """
    Return cached settings, re-reading the environment when asked to.
    """
    global _settings_singleton
    if force_refresh or _settings_singleton is None:
        _settings_singleton = StopwatchSettings()
    return _settings_singleton


__all__ = ["StopwatchSettings", "get_settings"]
