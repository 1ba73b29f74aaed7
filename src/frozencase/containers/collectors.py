"""Collectors: reduce any iterable into an immutable container.

A Collector is the four-part recipe supplier / accumulator / combiner /
finisher. ``collect`` folds a single iterable; ``collect_chunks`` folds each
chunk into its own partial container and combines the partials, which is
how work split across threads is brought back together. Finishers hand
their freshly built storage to the containers without copying.

Example:
    >>> to_list().collect(x * 2 for x in range(3))
    ImmutableArrayList([0, 2, 4])
    >>> to_map(str.lower, len).collect(["A", "bb"])["bb"]
    2
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Generic, Iterable, TypeVar

from frozencase.foundation.errors import DuplicateKeyError, check_not_none

from .array_list import ImmutableArrayList
from .hash_map import ImmutableHashMap
from .hash_set import ImmutableHashSet
from .ordering import Comparator, Ordering
from .traits import ImmutableCollection
from .tree_map import ImmutableTreeMap
from .tree_set import ImmutableTreeSet, dedupe_sorted

T = TypeVar("T")
A = TypeVar("A")
R = TypeVar("R")
K = TypeVar("K")
V = TypeVar("V")
C = TypeVar("C", bound=ImmutableCollection[Any])


@dataclass(frozen=True, slots=True)
class Collector(Generic[T, A, R]):
    """Mutable-reduction recipe producing an immutable result.

    Attributes:
        supplier: Creates an empty accumulation container
        accumulator: Folds one element into a container
        combiner: Merges the second container into the first and returns it
        finisher: Turns the accumulation container into the result
    """

    supplier: Callable[[], A]
    accumulator: Callable[[A, T], None]
    combiner: Callable[[A, A], A]
    finisher: Callable[[A], R]

    def collect(self, elements: Iterable[T]) -> R:
        check_not_none(elements, "elements to collect")
        return self.finisher(self._accumulate(elements))

    def collect_chunks(self, chunks: Iterable[Iterable[T]]) -> R:
        """Accumulate each chunk separately, then combine the partials in order."""
        check_not_none(chunks, "chunks to collect")
        partials = [self._accumulate(chunk) for chunk in chunks]
        return self.finisher(reduce(self.combiner, partials) if partials else self.supplier())

    def _accumulate(self, elements: Iterable[T]) -> A:
        container = self.supplier()
        for e in elements:
            self.accumulator(container, e)
        return container


def _extend(first: list[T], second: list[T]) -> list[T]:
    first.extend(second)
    return first


def to_collection(factory: Callable[[list[T]], C]) -> Collector[T, list[T], C]:
    """Gather into a list and hand it to factory."""
    check_not_none(factory, "collection factory")
    return Collector(list, list.append, _extend, factory)


def to_list() -> Collector[T, list[T], ImmutableArrayList[T]]:
    return to_collection(ImmutableArrayList._adopt)


def to_set() -> Collector[T, list[T], ImmutableHashSet[T]]:
    return to_collection(lambda gathered: ImmutableHashSet._adopt(set(gathered)))


def to_tree_set(comparator: Comparator | None = None) -> Collector[T, list[T], ImmutableTreeSet[T]]:
    ordering: Ordering[T] = Ordering(comparator)
    return to_collection(lambda gathered: ImmutableTreeSet._adopt(ordering, dedupe_sorted(ordering, ordering.sorted(gathered))))


def _put_unique(target: dict[K, V], key: K, value: V) -> None:
    if key in target:
        raise DuplicateKeyError(key, target[key], value)
    target[key] = value


def to_map(
    key_mapper: Callable[[T], K], value_mapper: Callable[[T], V],
) -> Collector[T, dict[K, V], ImmutableHashMap[K, V]]:
    """Collect into a hash map; two elements mapping to one key raise DuplicateKeyError."""
    check_not_none(key_mapper, "key mapper")
    check_not_none(value_mapper, "value mapper")

    def accumulate(target: dict[K, V], element: T) -> None:
        _put_unique(target, key_mapper(element), value_mapper(element))

    def combine(first: dict[K, V], second: dict[K, V]) -> dict[K, V]:
        for key, value in second.items():
            _put_unique(first, key, value)
        return first

    return Collector(dict, accumulate, combine, ImmutableHashMap._adopt)


def to_tree_map(
    key_mapper: Callable[[T], K], value_mapper: Callable[[T], V], comparator: Comparator | None = None,
) -> Collector[T, list[tuple[K, V]], ImmutableTreeMap[K, V]]:
    """Collect into a tree map; keys comparing equal raise DuplicateKeyError."""
    check_not_none(key_mapper, "key mapper")
    check_not_none(value_mapper, "value mapper")
    ordering: Ordering[K] = Ordering(comparator)

    def accumulate(target: list[tuple[K, V]], element: T) -> None:
        target.append((key_mapper(element), value_mapper(element)))

    def finish(gathered: list[tuple[K, V]]) -> ImmutableTreeMap[K, V]:
        entries = ordering.sorted(gathered, key=lambda kv: kv[0])
        for (k1, v1), (k2, v2) in zip(entries, entries[1:]):
            if ordering.compare(k1, k2) == 0:
                raise DuplicateKeyError(k2, v1, v2)
        return ImmutableTreeMap._adopt(ordering, [k for k, _ in entries], [v for _, v in entries])

    return Collector(list, accumulate, _extend, finish)
