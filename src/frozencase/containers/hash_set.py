"""ImmutableSet base and ImmutableHashSet.

Set algebra (``|``, ``&``, ``-``, ``^``, ``<=``, ``isdisjoint``...) comes from
``collections.abc.Set`` and always produces a new immutable set through
``_from_iterable``.
"""

from __future__ import annotations

from collections.abc import Set
from typing import TYPE_CHECKING, Callable, Iterable, TypeVar

from frozencase.foundation.errors import check_not_none

from .traits import ImmutableCollection

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
R = TypeVar("R")


class ImmutableSet(ImmutableCollection[T], Set):
    """Common base of the hash, tree and pair sets. Equality is set equality."""

    __slots__ = ()

    def _from_iterable(self, elements: Iterable[T]) -> ImmutableSet[T]:
        return ImmutableHashSet._adopt(set(elements))

    def __hash__(self) -> int:
        return self._hash()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({{{', '.join(map(repr, self))}}})" if len(self) else f"{type(self).__name__}()"

    def to_set(self) -> ImmutableHashSet[T]:
        return ImmutableHashSet._adopt(set(self))


class ImmutableHashSet(ImmutableSet[T]):
    """Immutable set backed by a private Python set. Iteration order is unspecified.

    Example:
        >>> s = ImmutableHashSet([1, 2, 2, 3])
        >>> len(s), 2 in s
        (3, True)
        >>> sorted(s.map(lambda x: x % 2))
        [0, 1]
    """

    __slots__ = ("_elements",)

    _elements: set[T]

    def __init__(self, elements: Iterable[T] = ()) -> None:
        check_not_none(elements, "elements")
        self._elements = set(elements)

    @classmethod
    def _adopt(cls, elements: set[T]) -> ImmutableHashSet[T]:
        """Wrap a freshly built set without copying."""
        instance = cls.__new__(cls)
        instance._elements = elements
        return instance

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __contains__(self, element: object) -> bool:
        try:
            return element in self._elements
        except TypeError:
            return False

    def concat_with(self, elements: Iterable[T]) -> ImmutableHashSet[T]:
        """Union with elements."""
        check_not_none(elements, "elements to concatenate")
        return ImmutableHashSet._adopt(self._elements.union(elements))

    def map(self, mapper: Callable[[T], R]) -> ImmutableHashSet[R]:
        check_not_none(mapper, "mapper")
        return ImmutableHashSet._adopt({mapper(e) for e in self._elements})

    def flat_map(self, mapper: Callable[[T], Iterable[R]]) -> ImmutableHashSet[R]:
        check_not_none(mapper, "mapper")
        return ImmutableHashSet._adopt({r for e in self._elements for r in mapper(e)})

    def filter(self, predicate: Callable[[T], bool]) -> ImmutableHashSet[T]:
        check_not_none(predicate, "predicate")
        return ImmutableHashSet._adopt({e for e in self._elements if predicate(e)})

    def to_set(self) -> ImmutableHashSet[T]:
        return self

    def to_mutable_set(self) -> set[T]:
        return set(self._elements)
