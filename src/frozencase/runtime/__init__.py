"""Runtime - logging and thread pool support shared by containers and chains."""

from .concurrency import DEFAULT_THREAD_WORKERS, ThreadPool, parallel_map
from .observability import (
    BoundLogger,
    configure_from_settings,
    configure_logging,
    get_logger,
    log_context,
)

__all__ = [
    "ThreadPool", "parallel_map", "DEFAULT_THREAD_WORKERS",
    "BoundLogger", "configure_logging", "configure_from_settings", "get_logger", "log_context",
]
