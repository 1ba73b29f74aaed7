"""Tests for ImmutableHashMap: lookups, merges and cached views."""

from __future__ import annotations

import pytest

from frozencase.containers import (
    ImmutableArrayList,
    ImmutableHashMap,
    ImmutableHashSet,
    Pair,
    PairSet,
    empty_map,
    map_of,
)
from frozencase.foundation.errors import InvalidArgumentError


# ═════════════════════════════════════════════════════════════════════════════
# Construction & Lookup
# ═════════════════════════════════════════════════════════════════════════════


def test_constructor_copies_source() -> None:
    source = {"a": 1}
    m = ImmutableHashMap(source)
    source["b"] = 2
    assert m.size() == 1
    assert m.not_contains_key("b")


def test_accepts_pairs_and_tuples() -> None:
    m = ImmutableHashMap([Pair("a", 1), ("b", 2)])
    assert m.to_mutable_map() == {"a": 1, "b": 2}


def test_rejects_malformed_entries() -> None:
    with pytest.raises(InvalidArgumentError):
        ImmutableHashMap([("a", 1, 2)])  # type: ignore[list-item]
    with pytest.raises(InvalidArgumentError):
        ImmutableHashMap(None)  # type: ignore[arg-type]


def test_get_variants() -> None:
    m = map_of(a=1)
    assert m.get("a") == 1
    assert m.get("z") is None
    assert m.get("z", 0) == 0
    assert m.get_or_default("z", 7) == 7
    assert m["a"] == 1
    with pytest.raises(KeyError):
        m["z"]


def test_unhashable_key_lookups_are_lenient() -> None:
    m = map_of(a=1)
    assert not m.contains_key(["a"])
    assert m.get(["a"]) is None
    with pytest.raises(KeyError):
        m[["a"]]  # type: ignore[index]


def test_contains_value_and_pair() -> None:
    m = map_of(a=1, b=[2])
    assert m.contains_value([2])
    assert m.not_contains_value(3)
    assert m.contains_pair(Pair("a", 1))
    assert m.contains_pair(Pair("b", [2]))
    assert m.not_contains_pair(Pair("a", 2))
    assert m.not_contains_pair(Pair("z", 1))
    with pytest.raises(InvalidArgumentError):
        m.contains_pair(None)  # type: ignore[arg-type]


# ═════════════════════════════════════════════════════════════════════════════
# Merges
# ═════════════════════════════════════════════════════════════════════════════


def test_merge_conflict_resolution() -> None:
    """{"a": 1} vs {"a": 2}: override -> 2, without override -> 1, resolver sum -> 3."""
    left, right = map_of(a=1), map_of(a=2)
    assert left.concat_with_override(right)["a"] == 2
    assert left.concat_without_override(right)["a"] == 1
    assert left.concat_with(right, lambda key, mine, theirs: mine + theirs)["a"] == 3


def test_merge_resolver_only_runs_on_collisions() -> None:
    calls: list[str] = []

    def resolve(key: str, mine: int, theirs: int) -> int:
        calls.append(key)
        return theirs

    merged = map_of(a=1, b=2).concat_with(map_of(b=3, c=4), resolve)
    assert calls == ["b"]
    assert merged.to_mutable_map() == {"a": 1, "b": 3, "c": 4}


def test_merge_leaves_inputs_untouched() -> None:
    left, right = map_of(a=1), map_of(b=2)
    merged = left.concat_with_override(right)
    assert isinstance(merged, ImmutableHashMap)
    assert left.to_mutable_map() == {"a": 1}
    assert right.to_mutable_map() == {"b": 2}


# ═════════════════════════════════════════════════════════════════════════════
# Views & Equality
# ═════════════════════════════════════════════════════════════════════════════


def test_views_are_cached_and_typed() -> None:
    m = map_of(a=1, b=2)
    assert m.key_set() is m.key_set()
    assert m.values() is m.values()
    assert m.pair_set() is m.pair_set()
    assert isinstance(m.key_set(), ImmutableHashSet)
    assert isinstance(m.values(), ImmutableArrayList)
    assert isinstance(m.pair_set(), PairSet)
    assert m.key_set() == {"a", "b"}
    assert sorted(m.values()) == [1, 2]
    assert m.pair_set() == {Pair("a", 1), Pair("b", 2)}


def test_pair_set_with_unhashable_values() -> None:
    m = map_of(a=[1])
    assert Pair("a", [1]) in m.pair_set()
    assert Pair("a", [2]) not in m.pair_set()
    assert "a" not in m.pair_set()


def test_for_each_and_mapping_protocol() -> None:
    seen: dict[str, int] = {}
    m = map_of({"x": 1}, y=2)
    m.for_each(lambda k, v: seen.__setitem__(k, v))
    assert seen == {"x": 1, "y": 2}
    assert dict(m) == {"x": 1, "y": 2}
    assert sorted(m) == ["x", "y"]


def test_equality_and_hash() -> None:
    assert map_of(a=1, b=2) == ImmutableHashMap({"b": 2, "a": 1})
    assert hash(map_of(a=1, b=2)) == hash(ImmutableHashMap({"b": 2, "a": 1}))
    assert map_of(a=1) == {"a": 1}
    assert map_of(a=1) != map_of(a=2)
    assert map_of(a=1) != map_of(a=1, b=2)


def test_empty_singleton() -> None:
    assert empty_map() is empty_map()
    assert empty_map().is_empty()
    assert not map_of(a=1).is_empty()
