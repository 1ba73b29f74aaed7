"""ImmutableTreeMap: comparator-ordered navigable mapping.

Keys are kept sorted in a list searched with ``bisect``, with values in a
parallel list. Keys comparing equal under the ordering collapse: the first key
object is kept and the last value wins. Keys only need to be comparable, not
hashable.

Example:
    >>> m = ImmutableTreeMap({"b": 2, "a": 1, "c": 3})
    >>> m.first_key(), m.higher_key("a"), m.floor_pair("bb")
    ('a', 'b', Pair(key='b', value=2))
    >>> list(m.tail_map("b"))
    ['b', 'c']
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from .array_list import ImmutableArrayList
from .mapping import ImmutableMap, MapSource, iter_entries
from .ordering import Comparator, Ordering
from .pair import Pair
from .pair_set import PairSet
from .traits import RangeNavigable
from .tree_set import ImmutableTreeSet

if TYPE_CHECKING:
    from collections.abc import Iterator

K = TypeVar("K")
V = TypeVar("V")


def _collapse(ordering: Ordering[K], entries: list[tuple[K, V]]) -> tuple[list[K], list[V]]:
    """Split stably sorted entries into keys and values, merging runs of equal keys."""
    keys: list[K] = []
    values: list[Any] = []
    for key, value in entries:
        if keys and ordering.compare(keys[-1], key) == 0:
            values[-1] = value
        else:
            keys.append(key)
            values.append(value)
    return keys, values


class ImmutableTreeMap(RangeNavigable[K], ImmutableMap[K, V]):
    """Immutable sorted mapping under a key comparator, or natural order when None."""

    __slots__ = ("_ordering", "_keys", "_probes", "_values", "_key_set", "_value_list", "_pairs")

    def __init__(self, entries: MapSource[K, V] = (), comparator: Comparator | None = None) -> None:
        ordering: Ordering[K] = Ordering(comparator)
        items = ordering.sorted(list(iter_entries(entries)), key=lambda kv: kv[0])
        self._set_storage(ordering, *_collapse(ordering, items))

    @classmethod
    def _adopt(cls, ordering: Ordering[K], keys: list[K], values: list[V]) -> ImmutableTreeMap[K, V]:
        """Wrap sorted, deduplicated parallel lists without copying."""
        instance = cls.__new__(cls)
        instance._set_storage(ordering, keys, values)
        return instance

    def _set_storage(self, ordering: Ordering[K], keys: list[K], values: list[V]) -> None:
        self._ordering = ordering
        self._keys = keys
        self._probes = ordering.probes(keys)
        self._values = values
        self._key_set = ImmutableTreeSet._adopt(ordering, keys)
        self._value_list = ImmutableArrayList._adopt(list(values))
        pairs = [Pair(k, v) for k, v in zip(keys, values)]
        self._pairs = PairSet(pairs, lambda key: None if (i := self._find_index(key)) is None else pairs[i])

    def _view(self, lo: int, hi: int) -> ImmutableTreeMap[K, V]:
        return ImmutableTreeMap._adopt(self._ordering, self._keys[lo:hi], self._values[lo:hi])

    # ─── Protocol ────────────────────────────────────────────────────

    def __getitem__(self, key: K) -> V:
        i = self._find_index(key)
        if i is None:
            raise KeyError(key)
        return self._values[i]

    def __iter__(self) -> Iterator[K]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return self._find_index(key) is not None

    # ─── Views ───────────────────────────────────────────────────────

    def key_set(self) -> ImmutableTreeSet[K]:
        return self._key_set

    def navigable_key_set(self) -> ImmutableTreeSet[K]:
        return self._key_set

    def reversed_order_key_set(self) -> ImmutableTreeSet[K]:
        return self._key_set.reversed_order_set()

    def values(self) -> ImmutableArrayList[V]:  # type: ignore[override]
        """Values in key order."""
        return self._value_list

    def pair_set(self) -> PairSet[K, V]:
        return self._pairs

    # ─── Navigation ──────────────────────────────────────────────────

    def _key_at(self, index: int | None) -> K | None:
        return None if index is None else self._keys[index]

    def _pair_at(self, index: int | None) -> Pair[K, V] | None:
        return None if index is None else self._pairs._pairs[index]

    def lower_key(self, key: K) -> K | None:
        return self._key_at(self._lower_index(key))

    def floor_key(self, key: K) -> K | None:
        return self._key_at(self._floor_index(key))

    def ceiling_key(self, key: K) -> K | None:
        return self._key_at(self._ceiling_index(key))

    def higher_key(self, key: K) -> K | None:
        return self._key_at(self._higher_index(key))

    def lower_pair(self, key: K) -> Pair[K, V] | None:
        return self._pair_at(self._lower_index(key))

    def floor_pair(self, key: K) -> Pair[K, V] | None:
        return self._pair_at(self._floor_index(key))

    def ceiling_pair(self, key: K) -> Pair[K, V] | None:
        return self._pair_at(self._ceiling_index(key))

    def higher_pair(self, key: K) -> Pair[K, V] | None:
        return self._pair_at(self._higher_index(key))

    def first_key(self) -> K | None:
        return self._keys[0] if self._keys else None

    def last_key(self) -> K | None:
        return self._keys[-1] if self._keys else None

    def first_pair(self) -> Pair[K, V] | None:
        return self._pair_at(0) if self._keys else None

    def last_pair(self) -> Pair[K, V] | None:
        return self._pair_at(len(self._keys) - 1) if self._keys else None

    # ─── Range views ─────────────────────────────────────────────────

    def sub_map(
        self, from_key: K, to_key: K, *, from_inclusive: bool = True, to_inclusive: bool = False,
    ) -> ImmutableTreeMap[K, V]:
        return self._view(*self._range_bounds(from_key, to_key, from_inclusive, to_inclusive))

    def head_map(self, to_key: K, inclusive: bool = False) -> ImmutableTreeMap[K, V]:
        return self._view(*self._head_bounds(to_key, inclusive))

    def tail_map(self, from_key: K, inclusive: bool = True) -> ImmutableTreeMap[K, V]:
        return self._view(*self._tail_bounds(from_key, inclusive))

    def reversed_order_map(self) -> ImmutableTreeMap[K, V]:
        """Same entries under the inverse key ordering."""
        return ImmutableTreeMap._adopt(self._ordering.reversed(), self._keys[::-1], self._values[::-1])
