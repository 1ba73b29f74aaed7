"""Factory helpers: build containers from varargs, with shared empty instances.

Example:
    >>> list_of(1, 2, 3).get(-1)
    3
    >>> map_of(a=1, b=2)["b"]
    2
    >>> empty_list() is empty_list()
    True
"""

from __future__ import annotations

from typing import Any, TypeVar

from .array_list import ImmutableArrayList
from .hash_map import ImmutableHashMap
from .hash_set import ImmutableHashSet
from .mapping import MapSource, iter_entries
from .ordering import Comparator
from .tree_map import ImmutableTreeMap
from .tree_set import ImmutableTreeSet

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

_EMPTY_LIST: ImmutableArrayList[Any] = ImmutableArrayList._adopt([])
_EMPTY_SET: ImmutableHashSet[Any] = ImmutableHashSet._adopt(set())
_EMPTY_MAP: ImmutableHashMap[Any, Any] = ImmutableHashMap._adopt({})


def list_of(*elements: T) -> ImmutableArrayList[T]:
    return ImmutableArrayList._adopt(list(elements))


def set_of(*elements: T) -> ImmutableHashSet[T]:
    return ImmutableHashSet._adopt(set(elements))


def map_of(entries: MapSource[K, V] = (), /, **kwargs: V) -> ImmutableHashMap[K, V]:
    """Hash map from a mapping or (key, value) pairs, then keyword entries (which win)."""
    built = dict(iter_entries(entries))
    built.update(kwargs)  # type: ignore[arg-type]
    return ImmutableHashMap._adopt(built)


def tree_set_of(*elements: T, comparator: Comparator | None = None) -> ImmutableTreeSet[T]:
    return ImmutableTreeSet(elements, comparator)


def tree_map_of(entries: MapSource[K, V] = (), /, *, comparator: Comparator | None = None) -> ImmutableTreeMap[K, V]:
    return ImmutableTreeMap(entries, comparator)


def empty_list() -> ImmutableArrayList[Any]:
    return _EMPTY_LIST


def empty_set() -> ImmutableHashSet[Any]:
    return _EMPTY_SET


def empty_map() -> ImmutableHashMap[Any, Any]:
    return _EMPTY_MAP
