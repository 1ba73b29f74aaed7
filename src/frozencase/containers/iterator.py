"""Read-only traversal cursor handed out by every container."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from frozencase.foundation.errors import UnsupportedOperationError

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")

_EXHAUSTED = object()


class UnmodifiableIterator(Generic[T]):
    """Iterator over a container that refuses removal.

    Supports both the Python protocol (``next(it)``) and an explicit
    ``has_next()``/``next()`` pair; the two share one lookahead slot.
    """

    __slots__ = ("_source", "_peeked")

    def __init__(self, source: Iterator[T]) -> None:
        self._source = source
        self._peeked: object = _EXHAUSTED

    def __iter__(self) -> UnmodifiableIterator[T]:
        return self

    def __next__(self) -> T:
        if self._peeked is not _EXHAUSTED:
            value, self._peeked = self._peeked, _EXHAUSTED
            return value  # type: ignore[return-value]
        return next(self._source)

    def has_next(self) -> bool:
        if self._peeked is _EXHAUSTED:
            self._peeked = next(self._source, _EXHAUSTED)
        return self._peeked is not _EXHAUSTED

    def next(self) -> T:
        return self.__next__()

    def for_each_remaining(self, action: Callable[[T], object]) -> None:
        for item in self:
            action(item)

    def remove(self) -> None:
        raise UnsupportedOperationError("Elements cannot be removed through an immutable container's iterator")
