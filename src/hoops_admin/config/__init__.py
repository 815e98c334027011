"""Configuration management."""

from hoops_admin.config.settings import ValidationSettings, get_settings

__all__ = [
    "ValidationSettings",
    "get_settings",
]
