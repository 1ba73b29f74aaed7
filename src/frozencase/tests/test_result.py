"""Tests for the Result union that Try runs resolve to.

Validates:
- Functor and monad laws for map/flat_map
- Extraction and fallback helpers
- Equality, truthiness and iteration
"""

from __future__ import annotations

from typing import Callable

import pytest

from frozencase.foundation.errors import Err, Ok, Result


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Functor & Monad Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    """Functor law: fmap id = id"""
    result: Result[int, str] = Ok(42)
    assert result.map(lambda x: x) == result

    err_result: Result[int, str] = Err("fail")
    assert err_result.map(lambda x: x) == err_result


def test_functor_composition() -> None:
    """Functor law: fmap (f . g) = fmap f . fmap g"""
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2
    result: Result[int, str] = Ok(5)
    assert result.map(lambda x: f(g(x))) == result.map(g).map(f)


def test_monad_left_identity() -> None:
    """Monad law: return a >>= f = f a"""
    f: Callable[[int], Result[int, str]] = lambda x: Ok(x * 2)
    assert Ok(42).flat_map(f) == f(42)


def test_monad_right_identity() -> None:
    """Monad law: m >>= return = m"""
    m: Result[int, str] = Ok(42)
    assert m.flat_map(lambda x: Ok(x)) == m


def test_monad_associativity() -> None:
    """Monad law: (m >>= f) >>= g = m >>= (\\x -> f x >>= g)"""
    m: Result[int, str] = Ok(5)
    f: Callable[[int], Result[int, str]] = lambda x: Ok(x + 1)
    g: Callable[[int], Result[int, str]] = lambda x: Ok(x * 2)
    assert m.flat_map(f).flat_map(g) == m.flat_map(lambda x: f(x).flat_map(g))


# ═════════════════════════════════════════════════════════════════════════════
# Unit Tests - Variants & Extraction
# ═════════════════════════════════════════════════════════════════════════════


def test_ok_construction() -> None:
    result: Result[int, str] = Ok(42)
    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap() == 42
    assert result.ok() == 42
    assert result.err() is None


def test_err_construction() -> None:
    result: Result[int, str] = Err("error")
    assert result.is_err()
    assert result.unwrap_err() == "error"
    assert result.ok() is None


def test_unwrap_err_chains_cause() -> None:
    cause = ValueError("bad")
    with pytest.raises(RuntimeError) as exc_info:
        Err(cause).unwrap()
    assert exc_info.value.__cause__ is cause
    with pytest.raises(RuntimeError):
        Ok(1).unwrap_err()


def test_flat_map_err_short_circuits() -> None:
    calls: list[int] = []
    result: Result[int, str] = Err("fail")
    assert result.flat_map(lambda x: calls.append(x) or Ok(x)) == result
    assert calls == []


def test_fallbacks() -> None:
    assert Err("fail").unwrap_or(0) == 0
    assert Ok(1).unwrap_or(0) == 1
    assert Err("fail").unwrap_or_else(len) == 4
    assert Err("fail").or_else(lambda e: Ok(len(e))) == Ok(4)
    assert Ok(1).or_else(lambda e: Ok(0)) == Ok(1)


def test_match() -> None:
    assert Ok(2).match(ok=lambda v: v * 10, err=lambda e: -1) == 20
    assert Err("x").match(ok=lambda v: v, err=lambda e: f"error: {e}") == "error: x"


def test_truthiness_equality_iteration() -> None:
    assert Ok(1)
    assert not Err("x")
    assert Ok(1) == Ok(1)
    assert Ok(1) != Err(1)
    assert hash(Ok(1)) == hash(Ok(1))
    assert list(Ok(3)) == [3]
    assert list(Err("x")) == []
    assert repr(Ok(1)) == "Ok(1)"
    assert repr(Err("x")) == "Err('x')"
