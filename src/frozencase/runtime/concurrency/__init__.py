"""Concurrency - thread pool backing parallel container traversal."""

from .pool import DEFAULT_THREAD_WORKERS, ThreadPool, parallel_map, resolve_workers

__all__ = ["ThreadPool", "parallel_map", "resolve_workers", "DEFAULT_THREAD_WORKERS"]
