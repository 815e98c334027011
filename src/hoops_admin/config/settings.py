"""Configuration using pydantic-settings.

Loads configuration from environment variables with sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ValidationSettings(BaseSettings):
    """Configuration for the form validation engine and its CLI.

    All settings can be overridden via environment variables.
    The prefix HOOPS_ADMIN_ is used for all settings.

    Example:
        export HOOPS_ADMIN_TIMEZONE=Europe/Rome
        export HOOPS_ADMIN_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="HOOPS_ADMIN_",
        case_sensitive=False,
    )

    # IANA zone that decides what "today" is for the future-date check
    timezone: str = "UTC"

    log_level: str = "WARNING"

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> ValidationSettings:
    """Get cached settings instance.

    Returns:
        ValidationSettings loaded from environment.
    """
    return ValidationSettings()
