"""Lazy: a deferred computation that lets faults propagate.

Nothing runs until ``calculate()`` (or iteration). Unlike Try, faults reach
the caller unchanged. ``memoized()`` turns a chain into one that computes at
most once and replays the value afterwards.

Example:
    >>> calls = []
    >>> lazy = Lazy.of(lambda: calls.append(1) or 21).map(lambda x: x * 2)
    >>> calls
    []
    >>> lazy.calculate()
    42
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from frozencase.foundation.errors import InvalidArgumentError, check_not_none

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")

_UNSET: object = object()


class CachedSupplier(Generic[T]):
    """Supplier computing its value once, under a lock.

    A fault is not cached: the next call runs the wrapped supplier again.
    """

    __slots__ = ("_supplier", "_value", "_lock")

    def __init__(self, supplier: Callable[[], T]) -> None:
        self._supplier = supplier
        self._value: object = _UNSET
        self._lock = threading.Lock()

    @property
    def is_computed(self) -> bool:
        return self._value is not _UNSET

    def __call__(self) -> T:
        if self._value is _UNSET:
            with self._lock:
                if self._value is _UNSET:
                    self._value = self._supplier()
        return self._value  # type: ignore[return-value]


class Lazy(Generic[T]):
    """Deferred computation; every calculate() re-runs the chain unless memoized."""

    __slots__ = ("_supplier",)

    def __init__(self, supplier: Callable[[], T]) -> None:
        self._supplier = supplier

    @classmethod
    def of(cls, supplier: Callable[[], T]) -> Lazy[T]:
        return cls(check_not_none(supplier, "supplier"))

    def map(self, mapper: Callable[[T], U]) -> Lazy[U]:
        check_not_none(mapper, "mapper")
        return Lazy(lambda: mapper(self._supplier()))

    def flat_map(self, mapper: Callable[[T], Lazy[U]]) -> Lazy[U]:
        check_not_none(mapper, "mapper")

        def run() -> U:
            nested = mapper(self._supplier())
            if not isinstance(nested, Lazy):
                raise InvalidArgumentError(f"flat_map mapper must return a Lazy, got {type(nested).__name__}")
            return nested.calculate()

        return Lazy(run)

    def memoized(self) -> Lazy[T]:
        """Chain computing at most once (thread-safe); later calls replay the value."""
        if isinstance(self._supplier, CachedSupplier):
            return self
        return Lazy(CachedSupplier(self._supplier))

    def calculate(self) -> T:
        return self._supplier()

    def __iter__(self) -> Iterator[T]:
        yield self.calculate()

    def stream(self) -> Iterator[T]:
        return iter(self)

    def __repr__(self) -> str:
        if isinstance(self._supplier, CachedSupplier) and self._supplier.is_computed:
            return f"Lazy({self._supplier()!r})"
        return "Lazy(<pending>)"
