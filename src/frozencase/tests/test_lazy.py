"""Tests for Lazy and CachedSupplier."""

from __future__ import annotations

import threading

import pytest

from frozencase.foundation.errors import InvalidArgumentError
from frozencase.monads import CachedSupplier, Lazy


def test_deferral() -> None:
    """Nothing runs until calculate(); every calculate() re-runs the chain."""
    calls: list[str] = []
    lazy = Lazy.of(lambda: calls.append("run") or 3).map(lambda x: x * 2)
    assert calls == []
    assert lazy.calculate() == 6
    assert lazy.calculate() == 6
    assert calls == ["run", "run"]


def test_flat_map() -> None:
    assert Lazy.of(lambda: 2).flat_map(lambda x: Lazy.of(lambda: x + 1)).calculate() == 3
    with pytest.raises(InvalidArgumentError):
        Lazy.of(lambda: 2).flat_map(lambda x: x).calculate()  # type: ignore[arg-type,return-value]


def test_faults_propagate() -> None:
    lazy = Lazy.of(lambda: 1 / 0)
    with pytest.raises(ZeroDivisionError):
        lazy.calculate()


def test_iteration_yields_single_result() -> None:
    assert list(Lazy.of(lambda: "x")) == ["x"]
    assert list(Lazy.of(lambda: None).stream()) == [None]


def test_memoized_computes_once() -> None:
    calls: list[str] = []
    lazy = Lazy.of(lambda: calls.append("run") or 5).memoized()
    assert repr(lazy) == "Lazy(<pending>)"
    assert lazy.calculate() == 5
    assert lazy.calculate() == 5
    assert calls == ["run"]
    assert repr(lazy) == "Lazy(5)"
    assert lazy.memoized() is lazy


def test_memoized_does_not_cache_faults() -> None:
    attempts: list[int] = []

    def flaky() -> str:
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("first attempt")
        return "ok"

    lazy = Lazy.of(flaky).memoized()
    with pytest.raises(RuntimeError):
        lazy.calculate()
    assert lazy.calculate() == "ok"
    assert lazy.calculate() == "ok"
    assert len(attempts) == 2


def test_cached_supplier_is_thread_safe() -> None:
    calls: list[int] = []
    gate = threading.Barrier(8)

    def slow() -> int:
        calls.append(1)
        return 42

    supplier = CachedSupplier(slow)

    def worker(results: list[int]) -> None:
        gate.wait()
        results.append(supplier())

    results: list[int] = []
    threads = [threading.Thread(target=worker, args=(results,)) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert results == [42] * 8
    assert calls == [1]
    assert supplier.is_computed


def test_none_supplier_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        Lazy.of(None)  # type: ignore[arg-type]
