"""ImmutableMap: shared behaviour of the hash and tree mappings.

Concrete mappings build three derived views once, at construction, and hand
the same objects back for the mapping's lifetime: ``key_set()``, ``values()``
and ``pair_set()``. Merging never touches either input and always produces an
ImmutableHashMap.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, TypeVar, Union

from frozencase.foundation.errors import InvalidArgumentError, check_not_none

from .pair import Pair

if TYPE_CHECKING:
    from .array_list import ImmutableArrayList
    from .hash_map import ImmutableHashMap
    from .hash_set import ImmutableSet
    from .pair_set import PairSet

K = TypeVar("K")
V = TypeVar("V")

_MISSING: Any = object()

MapSource = Union[Mapping[K, V], Iterable[Union[Pair[K, V], tuple[K, V]]]]


def iter_entries(source: MapSource[K, V]) -> Iterable[tuple[K, V]]:
    """(key, value) tuples from a mapping or an iterable of pairs / 2-tuples."""
    check_not_none(source, "entries")
    if isinstance(source, Mapping):
        return source.items()
    return (_as_entry(e) for e in source)


def _as_entry(entry: object) -> tuple[Any, Any]:
    if isinstance(entry, Pair):
        return entry.key, entry.value
    try:
        key, value = entry  # type: ignore[misc]
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Expected a Pair or (key, value) tuple, got {entry!r}") from e
    return key, value


class ImmutableMap(Mapping, Generic[K, V]):
    """Read-only mapping contract.

    Subclasses supply ``__getitem__`` (raising KeyError, including for keys
    the store cannot hash or compare), ``__iter__``, ``__len__`` and the three
    derived views.
    """

    __slots__ = ()

    # ─── Size ────────────────────────────────────────────────────────

    def size(self) -> int:
        return len(self)

    def is_empty(self) -> bool:
        return len(self) == 0

    def is_not_empty(self) -> bool:
        return len(self) != 0

    # ─── Lookup ──────────────────────────────────────────────────────

    def get_or_default(self, key: object, default: V) -> V:
        return self.get(key, default)  # type: ignore[return-value]

    def contains_key(self, key: object) -> bool:
        return key in self

    def not_contains_key(self, key: object) -> bool:
        return key not in self

    def contains_value(self, value: object) -> bool:
        return value in self.values()

    def not_contains_value(self, value: object) -> bool:
        return not self.contains_value(value)

    def contains_pair(self, pair: Pair[K, V]) -> bool:
        """True when pair.key is present and maps to a value equal to pair.value."""
        check_not_none(pair, "pair")
        return pair in self.pair_set()

    def not_contains_pair(self, pair: Pair[K, V]) -> bool:
        return not self.contains_pair(pair)

    # ─── Views ───────────────────────────────────────────────────────

    @abstractmethod
    def key_set(self) -> ImmutableSet[K]: ...

    @abstractmethod
    def values(self) -> ImmutableArrayList[V]: ...  # type: ignore[override]

    @abstractmethod
    def pair_set(self) -> PairSet[K, V]: ...

    def for_each(self, action: Callable[[K, V], object]) -> None:
        check_not_none(action, "action")
        for pair in self.pair_set():
            action(pair.key, pair.value)

    def to_mutable_map(self) -> dict[K, V]:
        """Fresh dict copy; keys must be hashable."""
        return {p.key: p.value for p in self.pair_set()}

    # ─── Merges ──────────────────────────────────────────────────────

    def concat_with_override(self, other: Mapping[K, V]) -> ImmutableHashMap[K, V]:
        """Merge where other's value wins on a shared key."""
        return self.concat_with(other, lambda key, mine, theirs: theirs)

    def concat_without_override(self, other: Mapping[K, V]) -> ImmutableHashMap[K, V]:
        """Merge where this mapping's value wins on a shared key."""
        return self.concat_with(other, lambda key, mine, theirs: mine)

    def concat_with(self, other: Mapping[K, V], resolver: Callable[[K, V, V], V]) -> ImmutableHashMap[K, V]:
        """Merge with other; resolver(key, this_value, other_value) runs only on shared keys."""
        from .hash_map import ImmutableHashMap
        check_not_none(other, "mapping to concatenate with")
        check_not_none(resolver, "resolver")
        merged = self.to_mutable_map()
        for key, value in other.items():
            mine = self.get(key, _MISSING)
            merged[key] = value if mine is _MISSING else resolver(key, mine, value)
        return ImmutableHashMap._adopt(merged)

    # ─── Equality ────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Mapping):
            return NotImplemented
        if len(self) != len(other):
            return False
        for pair in self.pair_set():
            try:
                theirs = other.get(pair.key, _MISSING)
            except TypeError:
                return False
            if theirs is _MISSING or theirs != pair.value:
                return False
        return True

    def __hash__(self) -> int:
        return self.pair_set()._hash()

    def __repr__(self) -> str:
        body = ", ".join(f"{p.key!r}: {p.value!r}" for p in self.pair_set())
        return f"{type(self).__name__}({{{body}}})"
