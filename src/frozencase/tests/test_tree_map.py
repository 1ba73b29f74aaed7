"""Tests for ImmutableTreeMap: key navigation, range views and views."""

from __future__ import annotations

import pytest

from frozencase.containers import (
    ImmutableArrayList,
    ImmutableHashMap,
    ImmutableTreeMap,
    ImmutableTreeSet,
    Pair,
    comparing,
    reverse_order,
    tree_map_of,
)


@pytest.fixture
def letters() -> ImmutableTreeMap[str, int]:
    return ImmutableTreeMap({"d": 4, "b": 2, "a": 1, "c": 3})


# ═════════════════════════════════════════════════════════════════════════════
# Construction
# ═════════════════════════════════════════════════════════════════════════════


def test_keys_iterate_in_order(letters: ImmutableTreeMap[str, int]) -> None:
    assert list(letters) == ["a", "b", "c", "d"]
    assert list(letters.values()) == [1, 2, 3, 4]
    assert letters.comparator() is None


def test_equal_keys_keep_first_key_and_last_value() -> None:
    m = ImmutableTreeMap([("aa", 1), ("b", 2), ("cc", 3)], comparing(len))
    assert list(m) == ["b", "aa"]
    assert m["zz"] == 3
    assert m.get("x") == 2


def test_unhashable_keys_are_supported() -> None:
    m = tree_map_of([([2], "two"), ([1], "one")])
    assert m.first_key() == [1]
    assert m[[2]] == "two"
    assert Pair([1], "one") in m.pair_set()


def test_constructor_copies_source() -> None:
    source = {"a": 1}
    m = ImmutableTreeMap(source)
    source["b"] = 2
    assert len(m) == 1


def test_incomparable_lookup_is_lenient(letters: ImmutableTreeMap[str, int]) -> None:
    assert not letters.contains_key(1)
    assert letters.get(1) is None
    with pytest.raises(KeyError):
        letters[1]  # type: ignore[index]


# ═════════════════════════════════════════════════════════════════════════════
# Navigation
# ═════════════════════════════════════════════════════════════════════════════


def test_key_navigation(letters: ImmutableTreeMap[str, int]) -> None:
    assert letters.lower_key("c") == "b"
    assert letters.floor_key("bb") == "b"
    assert letters.ceiling_key("bb") == "c"
    assert letters.higher_key("c") == "d"
    assert letters.higher_key("d") is None
    assert letters.lower_key("a") is None


def test_pair_navigation(letters: ImmutableTreeMap[str, int]) -> None:
    assert letters.lower_pair("c") == Pair("b", 2)
    assert letters.floor_pair("c") == Pair("c", 3)
    assert letters.ceiling_pair("0") == Pair("a", 1)
    assert letters.higher_pair("z") is None


def test_extremes(letters: ImmutableTreeMap[str, int]) -> None:
    assert letters.first_key() == "a"
    assert letters.last_key() == "d"
    assert letters.first_pair() == Pair("a", 1)
    assert letters.last_pair() == Pair("d", 4)
    empty = ImmutableTreeMap()
    assert empty.first_key() is None
    assert empty.last_pair() is None


# ═════════════════════════════════════════════════════════════════════════════
# Range Views
# ═════════════════════════════════════════════════════════════════════════════


def test_sub_head_tail(letters: ImmutableTreeMap[str, int]) -> None:
    assert list(letters.sub_map("b", "d")) == ["b", "c"]
    assert list(letters.sub_map("b", "d", from_inclusive=False, to_inclusive=True)) == ["c", "d"]
    assert list(letters.head_map("c")) == ["a", "b"]
    assert list(letters.head_map("c", inclusive=True)) == ["a", "b", "c"]
    assert list(letters.tail_map("c")) == ["c", "d"]
    assert list(letters.tail_map("c", inclusive=False)) == ["d"]
    assert letters.sub_map("b", "d")["c"] == 3


def test_inverted_range_is_empty(letters: ImmutableTreeMap[str, int]) -> None:
    view = letters.sub_map("d", "a")
    assert isinstance(view, ImmutableTreeMap)
    assert view.is_empty()


def test_incomparable_bounds_degrade_to_empty() -> None:
    """Bounds the keys cannot be compared with give empty views and absent neighbours."""
    m = ImmutableTreeMap({1: "a", 3: "c"})
    tail = m.tail_map("x")  # type: ignore[arg-type]
    assert isinstance(tail, ImmutableTreeMap)
    assert tail.is_empty()
    assert m.head_map(None).is_empty()  # type: ignore[arg-type]
    assert m.sub_map(1, "x").is_empty()  # type: ignore[arg-type]
    assert m.lower_key("x") is None  # type: ignore[arg-type]
    assert m.floor_key(None) is None  # type: ignore[arg-type]
    assert m.ceiling_pair("x") is None  # type: ignore[arg-type]
    assert m.higher_pair(None) is None  # type: ignore[arg-type]
    assert m.first_pair() == Pair(1, "a")
    assert m.tail_map(2).to_mutable_map() == {3: "c"}


# ═════════════════════════════════════════════════════════════════════════════
# Views & Reversal
# ═════════════════════════════════════════════════════════════════════════════


def test_views_are_cached(letters: ImmutableTreeMap[str, int]) -> None:
    assert letters.key_set() is letters.navigable_key_set()
    assert isinstance(letters.key_set(), ImmutableTreeSet)
    assert isinstance(letters.values(), ImmutableArrayList)
    assert letters.pair_set() is letters.pair_set()
    assert list(letters.pair_set()) == [Pair("a", 1), Pair("b", 2), Pair("c", 3), Pair("d", 4)]


def test_reversed_order_views(letters: ImmutableTreeMap[str, int]) -> None:
    rev = letters.reversed_order_map()
    assert list(rev) == ["d", "c", "b", "a"]
    assert rev.higher_key("c") == "b"
    assert list(letters.reversed_order_key_set()) == ["d", "c", "b", "a"]
    twice = rev.reversed_order_map()
    assert twice == letters
    assert twice.comparator() is None


def test_reverse_ordered_construction() -> None:
    m = ImmutableTreeMap({1: "a", 3: "c", 2: "b"}, reverse_order())
    assert list(m) == [3, 2, 1]
    assert list(m.head_map(2)) == [3]


# ═════════════════════════════════════════════════════════════════════════════
# Mapping Contract
# ═════════════════════════════════════════════════════════════════════════════


def test_merges_return_hash_maps(letters: ImmutableTreeMap[str, int]) -> None:
    merged = letters.concat_with_override({"a": 10, "e": 5})
    assert isinstance(merged, ImmutableHashMap)
    assert merged["a"] == 10
    assert merged["e"] == 5
    assert letters["a"] == 1


def test_equality_across_map_kinds(letters: ImmutableTreeMap[str, int]) -> None:
    assert letters == ImmutableHashMap({"a": 1, "b": 2, "c": 3, "d": 4})
    assert letters == {"a": 1, "b": 2, "c": 3, "d": 4}
    assert letters != {"a": 1}


def test_contains_value_and_to_mutable_map(letters: ImmutableTreeMap[str, int]) -> None:
    assert letters.contains_value(3)
    assert letters.not_contains_value(30)
    assert letters.contains_pair(Pair("d", 4))
    copy = letters.to_mutable_map()
    copy["z"] = 0
    assert "z" not in letters
