"""
customgroups.settings - Centralized Configuration

Loads from .env files and environment variables using pydantic-settings.
All CUSTOMGROUPS_* prefixed env vars are picked up automatically.

Usage:
    >>> from customgroups.settings import get_settings
    >>> settings = get_settings()
    >>> settings.log_level
    'INFO'
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CustomGroupsSettings(BaseSettings):
    """Custom groups configuration loaded from .env / environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CUSTOMGROUPS_",
        extra="ignore",
    )

    # -- Logging ---------------------------------------------------------------
    log_level: str = "INFO"

    # -- Search ----------------------------------------------------------------
    # Upper bound on page size passed to the handler; None leaves requests as-is.
    max_search_limit: int | None = Field(default=None, ge=1)

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    def apply_log_level(self) -> None:
        """Set the configured level on the customgroups logger hierarchy."""
        logging.getLogger("customgroups").setLevel(self.log_level)


# ---------------------------------------------------------------------------
# Singleton accessor
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_settings() -> CustomGroupsSettings:
    """Return the cached CustomGroupsSettings singleton."""
    return CustomGroupsSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
