"""ImmutableHashMap: key/value mapping backed by a private dict."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from .array_list import ImmutableArrayList
from .hash_set import ImmutableHashSet
from .mapping import ImmutableMap, MapSource, iter_entries
from .pair import Pair
from .pair_set import PairSet

if TYPE_CHECKING:
    from collections.abc import Iterator

K = TypeVar("K")
V = TypeVar("V")


class ImmutableHashMap(ImmutableMap[K, V]):
    """Immutable dict. Accepts a mapping or an iterable of pairs / 2-tuples.

    Later duplicates of a key override earlier ones, as with ``dict``.

    Example:
        >>> m = ImmutableHashMap({"a": 1})
        >>> m.concat_with(ImmutableHashMap({"a": 2}), lambda k, x, y: x + y)["a"]
        3
    """

    __slots__ = ("_entries", "_keys", "_values", "_pairs")

    _entries: dict[K, V]

    def __init__(self, entries: MapSource[K, V] = ()) -> None:
        self._init(dict(iter_entries(entries)))

    @classmethod
    def _adopt(cls, entries: dict[K, V]) -> ImmutableHashMap[K, V]:
        """Wrap a freshly built dict without copying."""
        instance = cls.__new__(cls)
        instance._init(entries)
        return instance

    def _init(self, entries: dict[K, V]) -> None:
        self._entries = entries
        self._keys = ImmutableHashSet._adopt(set(entries))
        self._values = ImmutableArrayList._adopt(list(entries.values()))
        by_key = {k: Pair(k, v) for k, v in entries.items()}
        self._pairs = PairSet(list(by_key.values()), by_key.get)

    def __getitem__(self, key: K) -> V:
        try:
            return self._entries[key]
        except TypeError:
            raise KeyError(key) from None

    def __iter__(self) -> Iterator[K]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def key_set(self) -> ImmutableHashSet[K]:
        return self._keys

    def values(self) -> ImmutableArrayList[V]:  # type: ignore[override]
        return self._values

    def pair_set(self) -> PairSet[K, V]:
        return self._pairs

    def to_mutable_map(self) -> dict[K, V]:
        return dict(self._entries)
