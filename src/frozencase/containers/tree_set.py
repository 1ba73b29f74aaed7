"""ImmutableTreeSet: comparator-ordered navigable set.

Elements live in a sorted list searched with ``bisect``; elements that
compare equal under the ordering collapse to the first one seen. Range views
are evaluated eagerly into new sets sharing the ordering, and an inverted
range gives an empty set rather than an error.

Example:
    >>> s = ImmutableTreeSet([5, 1, 3])
    >>> s.ceiling(2), s.floor(2), s.higher(5)
    (3, 1, None)
    >>> list(s.head_set(3, inclusive=True))
    [1, 3]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, TypeVar

from frozencase.foundation.errors import check_not_none

from .hash_set import ImmutableHashSet, ImmutableSet
from .iterator import UnmodifiableIterator
from .ordering import Comparator, Ordering
from .traits import RangeNavigable

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
R = TypeVar("R")


def dedupe_sorted(ordering: Ordering[T], elements: list[T]) -> list[T]:
    """Drop elements comparing equal to their predecessor (stable input keeps the first)."""
    result: list[T] = []
    for e in elements:
        if not result or ordering.compare(result[-1], e) != 0:
            result.append(e)
    return result


class ImmutableTreeSet(RangeNavigable[T], ImmutableSet[T]):
    """Immutable sorted set under a comparator, or natural order when None."""

    __slots__ = ("_ordering", "_keys", "_probes")

    def __init__(self, elements: Iterable[T] = (), comparator: Comparator | None = None) -> None:
        check_not_none(elements, "elements")
        ordering: Ordering[T] = Ordering(comparator)
        self._set_storage(ordering, dedupe_sorted(ordering, ordering.sorted(list(elements))))

    @classmethod
    def _adopt(cls, ordering: Ordering[T], elements: list[T]) -> ImmutableTreeSet[T]:
        """Wrap an already sorted, deduplicated list without copying."""
        instance = cls.__new__(cls)
        instance._set_storage(ordering, elements)
        return instance

    def _set_storage(self, ordering: Ordering[T], elements: list[T]) -> None:
        self._ordering = ordering
        self._keys = elements
        self._probes = ordering.probes(elements)

    def _view(self, lo: int, hi: int) -> ImmutableTreeSet[T]:
        return ImmutableTreeSet._adopt(self._ordering, self._keys[lo:hi])

    def _from_iterable(self, elements: Iterable[T]) -> ImmutableTreeSet[T]:
        return ImmutableTreeSet(elements, self._ordering.comparator)

    # ─── Protocol ────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[T]:
        return iter(self._keys)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._keys)

    def __contains__(self, element: object) -> bool:
        return self._find_index(element) is not None

    # ─── Navigation ──────────────────────────────────────────────────

    def _at(self, index: int | None) -> T | None:
        return None if index is None else self._keys[index]

    def lower(self, element: T) -> T | None:
        """Greatest element strictly before element."""
        return self._at(self._lower_index(element))

    def floor(self, element: T) -> T | None:
        """Greatest element at or before element."""
        return self._at(self._floor_index(element))

    def ceiling(self, element: T) -> T | None:
        """Least element at or after element."""
        return self._at(self._ceiling_index(element))

    def higher(self, element: T) -> T | None:
        """Least element strictly after element."""
        return self._at(self._higher_index(element))

    def first(self) -> T | None:
        return self._keys[0] if self._keys else None

    def last(self) -> T | None:
        return self._keys[-1] if self._keys else None

    # ─── Range views ─────────────────────────────────────────────────

    def sub_set(
        self, from_element: T, to_element: T, *, from_inclusive: bool = True, to_inclusive: bool = False,
    ) -> ImmutableTreeSet[T]:
        return self._view(*self._range_bounds(from_element, to_element, from_inclusive, to_inclusive))

    def head_set(self, to_element: T, inclusive: bool = False) -> ImmutableTreeSet[T]:
        return self._view(*self._head_bounds(to_element, inclusive))

    def tail_set(self, from_element: T, inclusive: bool = True) -> ImmutableTreeSet[T]:
        return self._view(*self._tail_bounds(from_element, inclusive))

    def reversed_order_set(self) -> ImmutableTreeSet[T]:
        """Same elements under the inverse ordering."""
        return ImmutableTreeSet._adopt(self._ordering.reversed(), self._keys[::-1])

    def reversed_order_iterator(self) -> UnmodifiableIterator[T]:
        return UnmodifiableIterator(reversed(self._keys))

    # ─── Transformations ─────────────────────────────────────────────

    def concat_with(self, elements: Iterable[T]) -> ImmutableTreeSet[T]:
        """Union under this set's ordering; existing elements win ties."""
        check_not_none(elements, "elements to concatenate")
        return ImmutableTreeSet([*self._keys, *elements], self._ordering.comparator)

    def map(self, mapper: Callable[[T], R]) -> ImmutableHashSet[R]:
        check_not_none(mapper, "mapper")
        return ImmutableHashSet._adopt({mapper(e) for e in self._keys})

    def flat_map(self, mapper: Callable[[T], Iterable[R]]) -> ImmutableHashSet[R]:
        check_not_none(mapper, "mapper")
        return ImmutableHashSet._adopt({r for e in self._keys for r in mapper(e)})

    def filter(self, predicate: Callable[[T], bool]) -> ImmutableTreeSet[T]:
        check_not_none(predicate, "predicate")
        return ImmutableTreeSet._adopt(self._ordering, [e for e in self._keys if predicate(e)])

    def to_mutable_list(self) -> list[T]:
        return list(self._keys)
