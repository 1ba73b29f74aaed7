"""Environment-based configuration using pydantic-settings.

Example:
    >>> from frozencase.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # FROZENCASE_LOG_LEVEL=DEBUG
    # FROZENCASE_MONADS_LOG_CAPTURED_FAULTS=true
    # FROZENCASE_CONTAINERS_PARALLEL_WORKERS=8
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveInt, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FROZENCASE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["console", "json", "none"] = "console"


class MonadSettings(BaseSettings):
    """Behaviour of the Try and Lazy chains."""

    model_config = SettingsConfigDict(
        env_prefix="FROZENCASE_MONADS_",
        extra="ignore",
    )

    log_captured_faults: bool = Field(
        default=False,
        description="Emit a debug log entry each time a Try run absorbs a fault",
    )


class ContainerSettings(BaseSettings):
    """Defaults for container traversal."""

    model_config = SettingsConfigDict(
        env_prefix="FROZENCASE_CONTAINERS_",
        extra="ignore",
    )

    parallel_workers: PositiveInt | None = Field(
        default=None,
        description="Worker threads for parallel_map; None uses the pool default",
    )


class FrozencaseSettings(BaseSettings):
    """Root settings, loaded from FROZENCASE_* environment variables and .env."""

    model_config = SettingsConfigDict(
        env_prefix="FROZENCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Force DEBUG logging")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    monads: MonadSettings = Field(default_factory=MonadSettings)
    containers: ContainerSettings = Field(default_factory=ContainerSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> FrozencaseSettings:
    """Get the global settings instance (cached)."""
    return FrozencaseSettings()


def clear_settings_cache() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
