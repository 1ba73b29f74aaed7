"""Foundation - error taxonomy, Result union and configuration."""

from __future__ import annotations

__all__ = [
    # Errors
    "ErrorCode", "FaultReport", "classify_exception", "is_fatal", "check_not_none",
    "FrozencaseError", "InvalidArgumentError", "IndexOutOfRangeError", "EmptyContainerError",
    "UnsupportedOperationError", "DuplicateKeyError",
    "Result", "Ok", "Err",
    # Config
    "FrozencaseSettings", "LoggingSettings", "MonadSettings", "ContainerSettings",
    "get_settings", "clear_settings_cache",
]


def __getattr__(name: str):
    """Lazy imports so importing errors never pulls in pydantic-settings."""
    if name in ("FrozencaseSettings", "LoggingSettings", "MonadSettings", "ContainerSettings",
                "get_settings", "clear_settings_cache"):
        from . import config
        return getattr(config, name)

    if name in __all__:
        from . import errors
        return getattr(errors, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
