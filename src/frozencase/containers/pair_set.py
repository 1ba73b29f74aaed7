"""PairSet: the entry view of a mapping.

Membership goes through the owning mapping's key lookup rather than hashing
whole pairs, so a mapping whose values are unhashable still answers
``pair in m.pair_set()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, Iterable, TypeVar

from frozencase.foundation.errors import check_not_none

from .hash_set import ImmutableHashSet, ImmutableSet
from .pair import Pair

if TYPE_CHECKING:
    from collections.abc import Iterator

K = TypeVar("K")
V = TypeVar("V")
R = TypeVar("R")

PairLookup = Callable[[K], "Pair[K, V] | None"]


class PairSet(ImmutableSet[Pair[K, V]], Generic[K, V]):
    """Immutable set of a mapping's entries, in the mapping's iteration order."""

    __slots__ = ("_pairs", "_lookup")

    def __init__(self, pairs: list[Pair[K, V]], lookup: PairLookup) -> None:
        self._pairs = pairs
        self._lookup = lookup

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[Pair[K, V]]:
        return iter(self._pairs)

    def __contains__(self, element: object) -> bool:
        if not isinstance(element, Pair):
            return False
        try:
            stored = self._lookup(element.key)
        except TypeError:
            return False
        return stored is not None and stored.value == element.value

    def concat_with(self, elements: Iterable[Pair[K, V]]) -> ImmutableHashSet[Pair[K, V]]:
        check_not_none(elements, "elements to concatenate")
        return ImmutableHashSet._adopt({*self._pairs, *elements})

    def map(self, mapper: Callable[[Pair[K, V]], R]) -> ImmutableHashSet[R]:
        check_not_none(mapper, "mapper")
        return ImmutableHashSet._adopt({mapper(p) for p in self._pairs})

    def flat_map(self, mapper: Callable[[Pair[K, V]], Iterable[R]]) -> ImmutableHashSet[R]:
        check_not_none(mapper, "mapper")
        return ImmutableHashSet._adopt({r for p in self._pairs for r in mapper(p)})

    def filter(self, predicate: Callable[[Pair[K, V]], bool]) -> ImmutableHashSet[Pair[K, V]]:
        check_not_none(predicate, "predicate")
        return ImmutableHashSet._adopt({p for p in self._pairs if predicate(p)})
