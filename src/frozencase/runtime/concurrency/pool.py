"""Thread pool used for order-preserving parallel traversal.

Containers are read-only, so fanning a mapper out over their elements needs
no locking; the pool only has to keep results in input order.

Example:
    >>> with ThreadPool(max_workers=4) as pool:
    ...     squares = pool.map(lambda x: x * x, [1, 2, 3])
    >>> squares
    [1, 4, 9]

    >>> # One-off execution, worker count from settings
    >>> parallel_map(str.upper, ["a", "b"])
    ['A', 'B']
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Iterable, TypeVar

from frozencase.foundation.errors import InvalidArgumentError
from frozencase.runtime.observability import get_logger

if TYPE_CHECKING:
    from types import TracebackType

T = TypeVar("T")
U = TypeVar("U")

__all__ = [
    "ThreadPool",
    "parallel_map",
    "resolve_workers",
    "DEFAULT_THREAD_WORKERS",
]

DEFAULT_THREAD_WORKERS = min(32, (os.cpu_count() or 1) + 4)


def _check_workers(count: int) -> int:
    if count < 1:
        raise InvalidArgumentError(f"max_workers must be >= 1, got {count}")
    return count


@dataclass(slots=True)
class ThreadPool:
    """ThreadPoolExecutor with an ordered map and scoped lifetime.

    The executor is started lazily and closed when the ``with`` block exits.
    A pool built by from_executor() borrows the executor and never closes it.
    """

    max_workers: int = DEFAULT_THREAD_WORKERS
    thread_name_prefix: str = "frozencase-"
    _executor: ThreadPoolExecutor | None = field(default=None, repr=False)
    _borrowed: bool = field(default=False, repr=False)

    def __post_init__(self) -> None:
        _check_workers(self.max_workers)

    @classmethod
    def from_executor(cls, executor: ThreadPoolExecutor) -> ThreadPool:
        """Borrow a running executor; its shutdown stays with the caller."""
        workers = getattr(executor, "_max_workers", DEFAULT_THREAD_WORKERS)
        return cls(max_workers=workers, thread_name_prefix="", _executor=executor, _borrowed=True)

    @property
    def executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(self.max_workers, self.thread_name_prefix)
        return self._executor

    def map(self, func: Callable[[T], U], items: Iterable[T]) -> list[U]:
        """Apply func to every item across the pool; results keep input order.

        The first fault raised by func propagates once all submitted work has
        been scheduled.
        """
        return list(self.executor.map(func, items))

    def shutdown(self, wait: bool = True, *, cancel_futures: bool = False) -> None:
        """Close an owned executor; a borrowed one is only detached."""
        executor, self._executor = self._executor, None
        if executor is not None and not self._borrowed:
            executor.shutdown(wait=wait, cancel_futures=cancel_futures)

    def __enter__(self) -> ThreadPool:
        self.executor
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.shutdown(cancel_futures=exc_type is not None)


def resolve_workers(max_workers: int | None = None) -> int:
    """Explicit count, else FROZENCASE_CONTAINERS_PARALLEL_WORKERS, else the default."""
    if max_workers is not None:
        return _check_workers(max_workers)
    from frozencase.foundation.config import get_settings
    return get_settings().containers.parallel_workers or DEFAULT_THREAD_WORKERS


def parallel_map(
    func: Callable[[T], U],
    items: Iterable[T],
    max_workers: int | None = None,
    *,
    executor: ThreadPoolExecutor | None = None,
) -> list[U]:
    """Order-preserving map over a short-lived pool, or over the caller's executor.

    A supplied executor is borrowed: it is neither resized nor shut down, and
    max_workers is ignored.
    """
    items = list(items)
    if not items:
        return []
    if executor is not None:
        get_logger("frozencase.pool").debug("parallel traversal", items=len(items), executor="borrowed")
        with ThreadPool.from_executor(executor) as pool:
            return pool.map(func, items)
    workers = min(resolve_workers(max_workers), len(items))
    get_logger("frozencase.pool").debug("parallel traversal", items=len(items), workers=workers)
    with ThreadPool(max_workers=workers) as pool:
        return pool.map(func, items)
