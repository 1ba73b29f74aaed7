"""Configuration management using pydantic-settings."""

from .settings import (
    ContainerSettings,
    FrozencaseSettings,
    LoggingSettings,
    MonadSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "ContainerSettings",
    "FrozencaseSettings",
    "LoggingSettings",
    "MonadSettings",
    "clear_settings_cache",
    "get_settings",
]
