"""Capability traits composed by the concrete containers.

- ImmutableCollection: read-only query and transformation contract
- IndexOrdered: positional access helpers shared by sequences
- ComparatorOrdered: containers carrying an Ordering
- RangeNavigable: bisect-backed navigation over a sorted key list

Each container picks the traits it needs instead of inheriting a deep chain:
ImmutableArrayList is IndexOrdered, ImmutableTreeSet is ComparatorOrdered and
RangeNavigable, and all of them are ImmutableCollections.
"""

from __future__ import annotations

import functools
from abc import abstractmethod
from bisect import bisect_left, bisect_right
from collections.abc import Collection
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, TypeVar

from frozencase.foundation.errors import check_not_none, is_fatal
from frozencase.runtime.observability import get_logger

from .iterator import UnmodifiableIterator
from .ordering import Comparator, Ordering

if TYPE_CHECKING:
    from collections.abc import Iterator
    from concurrent.futures import ThreadPoolExecutor

    from .array_list import ImmutableArrayList
    from .hash_set import ImmutableHashSet

T = TypeVar("T")
R = TypeVar("R")

_MISSING: Any = object()


class ImmutableCollection(Collection, Generic[T]):
    """Read-only collection contract.

    Subclasses supply ``__iter__``, ``__len__``, ``__contains__`` (returning
    False for values their store cannot hash or compare) and the four
    transformations. Everything else is derived here.
    """

    __slots__ = ()

    # ─── Size & membership ───────────────────────────────────────────

    def size(self) -> int:
        return len(self)

    def is_empty(self) -> bool:
        return len(self) == 0

    def is_not_empty(self) -> bool:
        return len(self) != 0

    def contains(self, element: object) -> bool:
        return element in self

    def not_contains(self, element: object) -> bool:
        return element not in self

    def contains_all(self, elements: Iterable[object]) -> bool:
        check_not_none(elements, "elements to test for presence")
        return all(e in self for e in elements)

    def contains_any(self, elements: Iterable[object]) -> bool:
        check_not_none(elements, "elements to test for presence")
        return any(e in self for e in elements)

    # ─── Predicates ──────────────────────────────────────────────────

    def all_match(self, predicate: Callable[[T], bool]) -> bool:
        check_not_none(predicate, "predicate")
        return all(predicate(e) for e in self)

    def any_match(self, predicate: Callable[[T], bool]) -> bool:
        check_not_none(predicate, "predicate")
        return any(predicate(e) for e in self)

    def none_match(self, predicate: Callable[[T], bool]) -> bool:
        check_not_none(predicate, "predicate")
        return not any(predicate(e) for e in self)

    # ─── Reductions ──────────────────────────────────────────────────

    def reduce(self, accumulator: Callable[[T, T], T], identity: T = _MISSING) -> T | None:
        """Fold left. Without identity an empty collection reduces to None."""
        check_not_none(accumulator, "accumulator")
        if identity is _MISSING:
            return functools.reduce(accumulator, self) if len(self) else None
        return functools.reduce(accumulator, self, identity)

    def min(self, comparator: Comparator | None = None) -> T | None:
        if not len(self):
            return None
        return min(self, key=cmp_to_key(comparator)) if comparator is not None else min(self)

    def max(self, comparator: Comparator | None = None) -> T | None:
        if not len(self):
            return None
        return max(self, key=cmp_to_key(comparator)) if comparator is not None else max(self)

    def find_first(self, predicate: Callable[[T], bool] | None = None) -> T | None:
        """First element (in iteration order) matching predicate, or None."""
        if predicate is None:
            return next(iter(self), None)
        return next((e for e in self if predicate(e)), None)

    def for_each(self, action: Callable[[T], object]) -> None:
        check_not_none(action, "action")
        for e in self:
            action(e)

    # ─── Conversions ─────────────────────────────────────────────────

    def to_list(self) -> ImmutableArrayList[T]:
        from .array_list import ImmutableArrayList
        return ImmutableArrayList._adopt(list(self))

    def to_set(self) -> ImmutableHashSet[T]:
        from .hash_set import ImmutableHashSet
        return ImmutableHashSet._adopt(set(self))

    def to_mutable_list(self) -> list[T]:
        return list(self)

    def to_mutable_set(self) -> set[T]:
        return set(self)

    def iterator(self) -> UnmodifiableIterator[T]:
        return UnmodifiableIterator(iter(self))

    def stream(self) -> Iterator[T]:
        return iter(self)

    def parallel_map(
        self,
        mapper: Callable[[T], R],
        max_workers: int | None = None,
        *,
        executor: ThreadPoolExecutor | None = None,
    ) -> ImmutableArrayList[R]:
        """Apply mapper across a thread pool; results keep iteration order.

        Pass executor to run on a caller-owned pool instead of a short-lived one.
        """
        from frozencase.runtime.concurrency import parallel_map

        from .array_list import ImmutableArrayList
        check_not_none(mapper, "mapper")
        return ImmutableArrayList._adopt(parallel_map(mapper, self, max_workers, executor=executor))

    # ─── Transformations ─────────────────────────────────────────────

    @abstractmethod
    def map(self, mapper: Callable[[T], R]) -> ImmutableCollection[R]: ...

    @abstractmethod
    def flat_map(self, mapper: Callable[[T], Iterable[R]]) -> ImmutableCollection[R]: ...

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> ImmutableCollection[T]: ...

    @abstractmethod
    def concat_with(self, elements: Iterable[T]) -> ImmutableCollection[T]: ...


class IndexOrdered(Generic[T]):
    """Positional helpers over ``get(i)``/``__len__``/``__iter__``."""

    __slots__ = ()

    @abstractmethod
    def get(self, index: int) -> T: ...

    def index_of(self, element: object) -> int | None:
        """Index of the first equal element, or None."""
        return next((i for i, e in enumerate(self) if e == element), None)  # type: ignore[call-overload]

    def last_index_of(self, element: object) -> int | None:
        """Index of the last equal element, or None."""
        for i in range(len(self) - 1, -1, -1):  # type: ignore[arg-type]
            if self.get(i) == element:
                return i
        return None

    def for_each_indexed(self, action: Callable[[int, T], object]) -> None:
        check_not_none(action, "action")
        for i, e in enumerate(self):  # type: ignore[call-overload]
            action(i, e)


class ComparatorOrdered(Generic[T]):
    """Containers ordered by an Ordering held in ``_ordering``."""

    __slots__ = ()

    _ordering: Ordering[T]

    @property
    def ordering(self) -> Ordering[T]:
        return self._ordering

    def comparator(self) -> Comparator | None:
        """The caller's comparator, or None for natural order."""
        return self._ordering.comparator


class RangeNavigable(ComparatorOrdered[T]):
    """Bisection over ``_keys`` (sorted, deduplicated) and their ``_probes``.

    Index helpers return positions into ``_keys``; the concrete container
    maps positions back to elements or entries. A bound the ordering cannot
    compare (None, a value of another type, a comparator that raises) never
    escapes: navigation answers None and range bounds collapse to ``(0, 0)``.
    """

    __slots__ = ()

    _keys: list[T]
    _probes: list[Any]

    def _guarded(self, operation: str, compute: Callable[[], R], fallback: R) -> R:
        """Run compute; a recoverable fault degrades to fallback, a fatal one propagates."""
        try:
            return compute()
        except Exception as e:
            if is_fatal(e):
                raise
            get_logger("frozencase.containers").debug(
                "navigation fault absorbed", container=type(self).__name__,
                operation=operation, error_type=type(e).__qualname__, error=str(e),
            )
            return fallback

    def _position(self, operation: str, compute: Callable[[], int | None]) -> int | None:
        return self._guarded(operation, compute, None)

    def _lower_index(self, key: T) -> int | None:
        def compute() -> int | None:
            i = bisect_left(self._probes, self._ordering.probe(key)) - 1
            return i if i >= 0 else None
        return self._position("lower", compute)

    def _floor_index(self, key: T) -> int | None:
        def compute() -> int | None:
            i = bisect_right(self._probes, self._ordering.probe(key)) - 1
            return i if i >= 0 else None
        return self._position("floor", compute)

    def _ceiling_index(self, key: T) -> int | None:
        def compute() -> int | None:
            i = bisect_left(self._probes, self._ordering.probe(key))
            return i if i < len(self._keys) else None
        return self._position("ceiling", compute)

    def _higher_index(self, key: T) -> int | None:
        def compute() -> int | None:
            i = bisect_right(self._probes, self._ordering.probe(key))
            return i if i < len(self._keys) else None
        return self._position("higher", compute)

    def _find_index(self, key: object) -> int | None:
        """Position of an element comparing equal to key; None when absent or incomparable."""
        try:
            i = bisect_left(self._probes, self._ordering.probe(key))  # type: ignore[arg-type]
            if i < len(self._keys) and self._ordering.compare(self._keys[i], key) == 0:  # type: ignore[arg-type]
                return i
        except TypeError:
            pass
        return None

    def _head_end(self, to_key: T, inclusive: bool) -> int:
        return (bisect_right if inclusive else bisect_left)(self._probes, self._ordering.probe(to_key))

    def _tail_start(self, from_key: T, inclusive: bool) -> int:
        return (bisect_left if inclusive else bisect_right)(self._probes, self._ordering.probe(from_key))

    def _head_bounds(self, to_key: T, inclusive: bool) -> tuple[int, int]:
        return self._guarded("head", lambda: (0, self._head_end(to_key, inclusive)), (0, 0))

    def _tail_bounds(self, from_key: T, inclusive: bool) -> tuple[int, int]:
        return self._guarded("tail", lambda: (self._tail_start(from_key, inclusive), len(self._keys)), (0, 0))

    def _range_bounds(self, from_key: T, to_key: T, from_inclusive: bool, to_inclusive: bool) -> tuple[int, int]:
        """Slice bounds for a range view; an inverted or incomparable range degrades to (0, 0)."""
        def compute() -> tuple[int, int]:
            if self._ordering.compare(from_key, to_key) > 0:
                get_logger("frozencase.containers").debug(
                    "range degraded to empty", container=type(self).__name__,
                    from_key=repr(from_key), to_key=repr(to_key),
                )
                return 0, 0
            lo = self._tail_start(from_key, from_inclusive)
            return lo, max(lo, self._head_end(to_key, to_inclusive))
        return self._guarded("range", compute, (0, 0))
