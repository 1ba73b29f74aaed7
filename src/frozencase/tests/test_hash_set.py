"""Tests for ImmutableHashSet and the shared set algebra."""

from __future__ import annotations

import pytest

from frozencase.containers import ImmutableHashSet, empty_set, set_of
from frozencase.foundation.errors import InvalidArgumentError


def test_constructor_copies_and_dedupes() -> None:
    source = [1, 2, 2, 3]
    s = ImmutableHashSet(source)
    source.append(4)
    assert len(s) == 3
    assert s == {1, 2, 3}


def test_unhashable_membership_is_false() -> None:
    """Values the backing set cannot hash are simply absent."""
    s = set_of(1, 2)
    assert not s.contains([1])
    assert s.not_contains({"a": 1})
    assert [1] not in s


def test_map_collapses_equal_outputs() -> None:
    assert set_of(1, 2, 3, 4).map(lambda x: x % 2) == {0, 1}


def test_filter_flat_map_concat() -> None:
    s = set_of(1, 2, 3)
    assert s.filter(lambda x: x > 1) == {2, 3}
    assert s.flat_map(lambda x: [x, -x]) == {1, -1, 2, -2, 3, -3}
    assert s.concat_with([3, 4]) == {1, 2, 3, 4}
    assert s == {1, 2, 3}


def test_set_algebra_returns_immutable_sets() -> None:
    a, b = set_of(1, 2, 3), set_of(2, 3, 4)
    for result, expected in [(a | b, {1, 2, 3, 4}), (a & b, {2, 3}), (a - b, {1}), (a ^ b, {1, 4})]:
        assert isinstance(result, ImmutableHashSet)
        assert result == expected
    assert set_of(2) <= a
    assert a.isdisjoint(set_of(9))


def test_algebra_with_builtin_sets() -> None:
    assert isinstance({1, 5} & set_of(1, 2), ImmutableHashSet)
    assert set_of(1, 2) == {1, 2}
    assert {1, 2} == set_of(1, 2)


def test_equality_ignores_order_and_hash_matches() -> None:
    assert set_of(3, 1, 2) == ImmutableHashSet([1, 2, 3])
    assert hash(set_of(3, 1, 2)) == hash(ImmutableHashSet([1, 2, 3]))
    assert set_of(1) != set_of(2)


def test_empty_singleton() -> None:
    assert empty_set() is empty_set()
    assert empty_set().is_empty()
    assert repr(empty_set()) == "ImmutableHashSet()"


def test_to_mutable_set_is_detached() -> None:
    s = set_of(1)
    copy = s.to_mutable_set()
    copy.add(2)
    assert s.size() == 1
    assert s.to_set() is s


def test_transformations_reject_none() -> None:
    with pytest.raises(InvalidArgumentError):
        set_of(1).map(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        set_of(1).concat_with(None)  # type: ignore[arg-type]
