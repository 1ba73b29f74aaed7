"""ImmutableArrayList: the ordered sequence.

Indices may be negative and count from the end (``-1`` is the last element,
``-size`` the first). ``get`` is strict about bounds; ``slice``/``step`` only
require the starting index to exist and stop quietly at the edges.

Example:
    >>> lst = ImmutableArrayList([1, 2, 3, 4, 5])
    >>> lst.get(-1)
    5
    >>> lst.slice(1, 4).to_mutable_list()
    [2, 3, 4]
    >>> lst.step(-2).to_mutable_list()
    [5, 3, 1]
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import cmp_to_key
from typing import TYPE_CHECKING, Callable, Iterable, TypeVar, overload

from frozencase.foundation.errors import IndexOutOfRangeError, InvalidArgumentError, check_not_none

from .pair import Pair
from .traits import ImmutableCollection, IndexOrdered

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .ordering import Comparator

T = TypeVar("T")
R = TypeVar("R")


class ImmutableArrayList(ImmutableCollection[T], IndexOrdered[T], Sequence):
    """Immutable list backed by a private Python list.

    The constructor copies its argument, so later changes to the caller's
    iterable are never visible here.
    """

    __slots__ = ("_elements",)

    _elements: list[T]

    def __init__(self, elements: Iterable[T] = ()) -> None:
        check_not_none(elements, "elements")
        self._elements = list(elements)

    @classmethod
    def _adopt(cls, elements: list[T]) -> ImmutableArrayList[T]:
        """Wrap a freshly built list without copying. Caller must drop its reference."""
        instance = cls.__new__(cls)
        instance._elements = elements
        return instance

    # ─── Protocol ────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._elements)

    def __contains__(self, element: object) -> bool:
        try:
            return element in self._elements
        except TypeError:
            return False

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> ImmutableArrayList[T]: ...

    def __getitem__(self, index: int | slice) -> T | ImmutableArrayList[T]:
        if isinstance(index, slice):
            return ImmutableArrayList._adopt(self._elements[index])
        return self.get(index)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ImmutableArrayList):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self) -> int:
        return hash(tuple(self._elements))

    def __repr__(self) -> str:
        return f"ImmutableArrayList({self._elements!r})"

    # ─── Positional access ───────────────────────────────────────────

    def _normalize(self, index: int) -> int:
        return index + len(self._elements) if index < 0 else index

    def _check_index(self, index: int) -> int:
        normalized = self._normalize(index)
        if not 0 <= normalized < len(self._elements):
            raise IndexOutOfRangeError(index, len(self._elements))
        return normalized

    def get(self, index: int) -> T:
        """Element at index; negative indices count from the end."""
        return self._elements[self._check_index(index)]

    def index_of(self, element: object) -> int | None:
        try:
            return self._elements.index(element)  # type: ignore[arg-type]
        except ValueError:
            return None

    def slice(self, from_index: int, to_index: int | None = None, step_size: int | None = None) -> ImmutableArrayList[T]:
        """Walk from ``from_index`` toward ``to_index`` (exclusive) by ``step_size``.

        With only ``from_index`` the walk runs to the end. With two indices the
        direction is inferred from their normalized order. A step pointing
        away from ``to_index`` yields an empty list.

        Raises:
            InvalidArgumentError: step_size is 0
            IndexOutOfRangeError: normalized from_index is outside the list
        """
        size = len(self._elements)
        if to_index is None:
            if step_size is None:
                return self.slice(from_index, size, 1)
            return self.step(from_index, step_size)
        if step_size is None:
            step_size = 1 if self._normalize(from_index) <= self._normalize(to_index) else -1
        if step_size == 0:
            raise InvalidArgumentError("Step size cannot be 0")
        start = self._check_index(from_index)
        stop = self._normalize(to_index)
        stop = min(stop, size) if step_size > 0 else max(stop, -1)
        return ImmutableArrayList._adopt([self._elements[i] for i in range(start, stop, step_size)])

    @overload
    def step(self, step_size: int, /) -> ImmutableArrayList[T]: ...
    @overload
    def step(self, from_index: int, step_size: int, /) -> ImmutableArrayList[T]: ...

    def step(self, *args: int) -> ImmutableArrayList[T]:
        """Every ``step``-th element: ``step(s)`` or ``step(from_index, s)``.

        ``step(s)`` starts at the first element for positive ``s`` and at the
        last for negative ``s``; on an empty list it returns an empty list.
        """
        if len(args) == 1:
            (step_size,) = args
            if step_size == 0:
                raise InvalidArgumentError("Step size cannot be 0")
            if not self._elements:
                return ImmutableArrayList._adopt([])
            return self.step(0 if step_size > 0 else -1, step_size)
        if len(args) != 2:
            raise InvalidArgumentError(f"step() takes 1 or 2 arguments ({len(args)} given)")
        from_index, step_size = args
        if step_size == 0:
            raise InvalidArgumentError("Step size cannot be 0")
        size = len(self._elements)
        return self.slice(from_index, size if step_size > 0 else -size - 1, step_size)

    def limit(self, size: int) -> ImmutableArrayList[T]:
        if size < 0:
            raise InvalidArgumentError(f"Limit size is less than zero: {size}")
        return ImmutableArrayList._adopt(self._elements[:size])

    def skip(self, size: int) -> ImmutableArrayList[T]:
        if size < 0:
            raise InvalidArgumentError(f"Skip size is less than zero: {size}")
        return ImmutableArrayList._adopt(self._elements[size:])

    def reversed(self) -> ImmutableArrayList[T]:
        return self.step(-1)

    # ─── Zips ────────────────────────────────────────────────────────

    def zip_with(self, other: Sequence[R]) -> ImmutableArrayList[Pair[T | None, R | None]]:
        """Pairs by position up to the longer length; the short side pads with None."""
        check_not_none(other, "list to zip with")
        n, m = len(self._elements), len(other)
        return ImmutableArrayList._adopt([
            Pair(self._elements[i] if i < n else None, other[i] if i < m else None)
            for i in range(max(n, m))
        ])

    def zip_with_next(self) -> ImmutableArrayList[Pair[T, T]]:
        """Adjacent pairs; empty when there are fewer than two elements."""
        return ImmutableArrayList._adopt([Pair(a, b) for a, b in zip(self._elements, self._elements[1:])])

    # ─── Transformations ─────────────────────────────────────────────

    def concat_with(self, elements: Iterable[T]) -> ImmutableArrayList[T]:
        check_not_none(elements, "elements to concatenate")
        return ImmutableArrayList._adopt([*self._elements, *elements])

    def map(self, mapper: Callable[[T], R]) -> ImmutableArrayList[R]:
        check_not_none(mapper, "mapper")
        return ImmutableArrayList._adopt([mapper(e) for e in self._elements])

    def map_indexed(self, mapper: Callable[[int, T], R]) -> ImmutableArrayList[R]:
        check_not_none(mapper, "mapper")
        return ImmutableArrayList._adopt([mapper(i, e) for i, e in enumerate(self._elements)])

    def flat_map(self, mapper: Callable[[T], Iterable[R]]) -> ImmutableArrayList[R]:
        check_not_none(mapper, "mapper")
        return ImmutableArrayList._adopt([r for e in self._elements for r in mapper(e)])

    def flat_map_indexed(self, mapper: Callable[[int, T], Iterable[R]]) -> ImmutableArrayList[R]:
        check_not_none(mapper, "mapper")
        return ImmutableArrayList._adopt([r for i, e in enumerate(self._elements) for r in mapper(i, e)])

    def filter(self, predicate: Callable[[T], bool]) -> ImmutableArrayList[T]:
        check_not_none(predicate, "predicate")
        return ImmutableArrayList._adopt([e for e in self._elements if predicate(e)])

    def filter_indexed(self, predicate: Callable[[int, T], bool]) -> ImmutableArrayList[T]:
        check_not_none(predicate, "predicate")
        return ImmutableArrayList._adopt([e for i, e in enumerate(self._elements) if predicate(i, e)])

    def sorted(self, comparator: Comparator | None = None) -> ImmutableArrayList[T]:
        """Stably sorted copy; natural order when comparator is None."""
        key = cmp_to_key(comparator) if comparator is not None else None
        return ImmutableArrayList._adopt(sorted(self._elements, key=key))

    def to_list(self) -> ImmutableArrayList[T]:
        return self
