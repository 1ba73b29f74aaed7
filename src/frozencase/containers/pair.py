"""Pair: immutable key/value entry used by mappings and zips."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True, slots=True)
class Pair(Generic[K, V]):
    """Immutable (key, value) entry. Equality and hash cover both fields.

    Unpacks like a 2-tuple:
        >>> key, value = Pair("a", 1)
    """

    key: K
    value: V

    @classmethod
    def of(cls, key: K, value: V) -> Pair[K, V]:
        return cls(key, value)

    def __iter__(self) -> Iterator[K | V]:
        yield self.key
        yield self.value

    def to_tuple(self) -> tuple[K, V]:
        return (self.key, self.value)
