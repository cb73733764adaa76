"""Configuration management."""

from .settings import (
    PaginationSettings,
    Settings,
    SettingsManager,
    SourceSettings,
    get_settings,
)

__all__ = [
    "PaginationSettings",
    "Settings",
    "SettingsManager",
    "SourceSettings",
    "get_settings",
]
