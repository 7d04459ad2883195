"""
Environment configuration using pydantic-settings.

Environment variables (prefix: SOLAROPOLY_):
    SOLAROPOLY_LEGACY_CLAMP - use the historical position clamp (default: false)
    SOLAROPOLY_LOG_LEVEL    - logging level name (default: INFO)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class BoardSettings(BaseSettings):
    """Runtime settings for the board engine."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="SOLAROPOLY_",
    )

    legacy_clamp: bool = Field(
        default=False,
        description="Keep negative position inputs and zero non-negative ones.",
    )
    log_level: str = Field(default="INFO", description="Logging level name.")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Optional[str]) -> str:
        """Upper-case the level and reject unknown names."""
        if not value:
            return "INFO"
        level = str(value).strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> BoardSettings:
    """Return cached board settings instance."""
    return BoardSettings()


def configure_logging(settings: Optional[BoardSettings] = None) -> None:
    """Apply the configured log level to the root logger."""
    settings = settings or get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level))
