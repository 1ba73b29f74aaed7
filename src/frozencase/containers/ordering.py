"""Ordering: the comparator identity carried by navigable containers.

A comparator is a plain ``cmp(a, b) -> int`` callable (negative, zero,
positive). ``None`` means natural order via ``<``. Ordering adapts either form
to ``functools.cmp_to_key`` so sorting and bisection share one definition of
"before".

Example:
    >>> by_len = Ordering(comparing(len))
    >>> by_len.compare("aa", "b")
    1
    >>> by_len.reversed().compare("aa", "b")
    -1
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

Comparator = Callable[[Any, Any], int]


def natural_compare(a: Any, b: Any) -> int:
    """Three-way comparison through ``<``; raises TypeError for incomparable values."""
    return (b < a) - (a < b)


def comparing(key: Callable[[T], Any]) -> Comparator:
    """Comparator ordering elements by a key function."""
    def compare(a: T, b: T) -> int:
        return natural_compare(key(a), key(b))
    return compare


class _Reversed:
    """Comparator inverting another (or natural order when original is None)."""

    __slots__ = ("original",)

    def __init__(self, original: Comparator | None) -> None:
        self.original = original

    def __call__(self, a: Any, b: Any) -> int:
        return natural_compare(b, a) if self.original is None else self.original(b, a)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Reversed) and self.original == other.original

    def __hash__(self) -> int:
        return hash((_Reversed, self.original))

    def __repr__(self) -> str:
        return f"reversed({self.original!r})" if self.original is not None else "reversed(natural)"


def reverse_order(comparator: Comparator | None = None) -> Comparator:
    """Inverse of comparator; reversing twice hands back the original."""
    if isinstance(comparator, _Reversed):
        return comparator.original or natural_compare
    return _Reversed(comparator)


class Ordering(Generic[T]):
    """Wraps a comparator (or natural order) for sorting, search and reversal."""

    __slots__ = ("_comparator", "_key")

    def __init__(self, comparator: Comparator | None = None) -> None:
        self._comparator = comparator
        self._key: Callable[[T], Any] | None = None if comparator is None else cmp_to_key(comparator)

    @property
    def comparator(self) -> Comparator | None:
        """The caller's comparator, or None for natural order."""
        return self._comparator

    @property
    def is_natural(self) -> bool:
        return self._comparator is None

    def compare(self, a: T, b: T) -> int:
        return natural_compare(a, b) if self._comparator is None else self._comparator(a, b)

    def probe(self, value: T) -> Any:
        """Value in the form bisect compares against (identity for natural order)."""
        return value if self._key is None else self._key(value)

    def probes(self, values: list[T]) -> list[Any]:
        """Bisection keys for an already sorted list; the list itself for natural order."""
        return values if self._key is None else [self._key(v) for v in values]

    def sorted(self, values: list[T], key: Callable[[Any], T] | None = None) -> list[T]:
        """Stable sort. ``key`` extracts the ordered part (e.g. the key of an entry)."""
        if key is None:
            return sorted(values, key=self._key)
        if self._key is None:
            return sorted(values, key=key)
        wrap = self._key
        return sorted(values, key=lambda v: wrap(key(v)))

    def reversed(self) -> Ordering[T]:
        if isinstance(self._comparator, _Reversed):
            return Ordering(self._comparator.original)
        return Ordering(_Reversed(self._comparator))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Ordering) and self._comparator == other._comparator

    def __hash__(self) -> int:
        return hash(self._comparator)

    def __repr__(self) -> str:
        return f"Ordering({self._comparator!r})" if self._comparator is not None else "Ordering(natural)"
