"""Try: a deferred computation whose recoverable faults become values.

Building a chain (``of``, ``map``, ``flat_map``, ``filter``, ``or_else_try``)
runs nothing. Each terminal call (``or_else``, ``get``, ``is_present``,
iteration...) runs the whole chain from the start and resolves it to a
``Result``: ``Ok(value)`` when every stage succeeded, ``Err(reason)`` when a
stage raised. Only non-fatal ``Exception``s are captured; ``MemoryError``,
``SystemError`` and BaseExceptions such as ``KeyboardInterrupt`` propagate.

Example:
    >>> Try.of(lambda: 1 / 0).or_else(-1)
    -1
    >>> Try.of(lambda: 4).map(lambda x: x + 1).get()
    5
    >>> Try.of(lambda: int("x")).reason_of_emptiness()
    ValueError("invalid literal for int() with base 10: 'x'")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, Iterable, TypeVar

from frozencase.foundation.errors import (
    EmptyContainerError,
    Err,
    FaultReport,
    InvalidArgumentError,
    Ok,
    Result,
    check_not_none,
    is_fatal,
)
from frozencase.runtime.observability import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")

CONTAINER_IS_EMPTY = "Container is empty"

Outcome = Result[T, Exception]


def _fault_logging_enabled() -> bool:
    from frozencase.foundation.config import get_settings
    return get_settings().monads.log_captured_faults


def capture(supplier: Callable[[], T]) -> Outcome[T]:
    """Run supplier; a recoverable fault becomes Err, a fatal one propagates."""
    try:
        return Ok(supplier())
    except Exception as e:
        if is_fatal(e):
            raise
        if _fault_logging_enabled():
            get_logger("frozencase.try").debug(
                "fault captured", error_type=type(e).__qualname__, error=str(e),
            )
        return Err(e)


def _expect_try(value: object) -> Try[U]:
    if not isinstance(value, Try):
        raise InvalidArgumentError(f"flat_map mapper must return a Try, got {type(value).__name__}")
    return value


class Try(Generic[T]):
    """Deferred, re-runnable computation that captures recoverable faults.

    Equality is identity: two chains are the same only if they are the same
    object, since comparing them would mean running both.
    """

    __slots__ = ("_run",)

    def __init__(self, run: Callable[[], Outcome[T]]) -> None:
        self._run = run

    # ─── Construction ────────────────────────────────────────────────

    @classmethod
    def of(cls, supplier: Callable[[], T]) -> Try[T]:
        check_not_none(supplier, "supplier")
        return cls(lambda: capture(supplier))

    @classmethod
    def success(cls, value: T) -> Try[T]:
        outcome: Outcome[T] = Ok(value)
        return cls(lambda: outcome)

    @classmethod
    def empty(cls, reason: Exception | None = None) -> Try[T]:
        """Try that always resolves empty, with reason (default: "Container is empty")."""
        outcome: Outcome[T] = Err(reason if reason is not None else EmptyContainerError(CONTAINER_IS_EMPTY))
        return cls(lambda: outcome)

    @classmethod
    def get_first(cls, suppliers: Iterable[Callable[[], T]]) -> Try[T]:
        """First supplier to succeed wins; empty when all of them fail."""
        check_not_none(suppliers, "suppliers")
        candidates = list(suppliers)

        def run() -> Outcome[T]:
            for supplier in candidates:
                if (outcome := capture(supplier)).is_ok():
                    return outcome
            return Err(EmptyContainerError(CONTAINER_IS_EMPTY))

        return cls(run)

    # ─── Chain building ──────────────────────────────────────────────

    def map(self, mapper: Callable[[T], U]) -> Try[U]:
        check_not_none(mapper, "mapper")

        def run() -> Outcome[U]:
            outcome = self._run()
            if outcome.is_err():
                return outcome  # type: ignore[return-value]
            value = outcome.unwrap()
            return capture(lambda: mapper(value))

        return Try(run)

    def flat_map(self, mapper: Callable[[T], Try[U]]) -> Try[U]:
        check_not_none(mapper, "mapper")

        def run() -> Outcome[U]:
            outcome = self._run()
            if outcome.is_err():
                return outcome  # type: ignore[return-value]
            value = outcome.unwrap()
            return capture(lambda: _expect_try(mapper(value))).flat_map(lambda nested: nested._run())

        return Try(run)

    def filter(self, predicate: Callable[[T], bool]) -> Try[T]:
        """Empty (EmptyContainerError) when predicate rejects the value."""
        check_not_none(predicate, "predicate")

        def run() -> Outcome[T]:
            outcome = self._run()
            if outcome.is_err():
                return outcome
            value = outcome.unwrap()
            verdict = capture(lambda: predicate(value))
            if verdict.is_err():
                return verdict  # type: ignore[return-value]
            if verdict.unwrap():
                return outcome
            return Err(EmptyContainerError(f"Predicate {predicate!r} has returned false"))

        return Try(run)

    def or_else_try(self, supplier: Callable[[], T]) -> Try[T]:
        """Fall back to supplier's computation when this chain resolves empty."""
        check_not_none(supplier, "supplier")

        def run() -> Outcome[T]:
            outcome = self._run()
            return outcome if outcome.is_ok() else capture(supplier)

        return Try(run)

    # ─── Terminals ───────────────────────────────────────────────────

    def to_result(self) -> Result[T, Exception]:
        """Run the chain and return its Ok/Err outcome."""
        return self._run()

    def is_present(self) -> bool:
        return self._run().is_ok()

    def is_empty(self) -> bool:
        return self._run().is_err()

    def get(self) -> T:
        """Value, or EmptyContainerError chained to the reason of emptiness."""
        outcome = self._run()
        if outcome.is_err():
            raise EmptyContainerError(CONTAINER_IS_EMPTY) from outcome.unwrap_err()
        return outcome.unwrap()

    def or_else(self, default: T) -> T:
        return self._run().unwrap_or(default)

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        check_not_none(supplier, "supplier")
        return self._run().unwrap_or_else(lambda _: supplier())

    def or_else_recover(self, recover: Callable[[Exception], T]) -> T:
        """Value, or recover(reason) when empty."""
        check_not_none(recover, "recover")
        return self._run().unwrap_or_else(recover)

    def or_else_throw(self, exception_supplier: Callable[[], BaseException]) -> T:
        """Value, or raise exception_supplier() chained to the reason of emptiness."""
        check_not_none(exception_supplier, "exception supplier")
        outcome = self._run()
        if outcome.is_err():
            raise exception_supplier() from outcome.unwrap_err()
        return outcome.unwrap()

    def if_present(self, consumer: Callable[[T], object]) -> None:
        check_not_none(consumer, "consumer")
        outcome = self._run()
        if outcome.is_ok():
            consumer(outcome.unwrap())

    def if_empty(self, consumer: Callable[[Exception], object]) -> None:
        """Call consumer with the reason of emptiness when empty."""
        check_not_none(consumer, "consumer")
        outcome = self._run()
        if outcome.is_err():
            consumer(outcome.unwrap_err())

    def reason_of_emptiness(self) -> Exception | None:
        return self._run().err()

    def fault_report(self, *, include_trace: bool = False) -> FaultReport | None:
        """Structured description of the reason of emptiness, or None when present."""
        reason = self._run().err()
        return None if reason is None else FaultReport.from_exception(reason, include_trace=include_trace)

    def __iter__(self) -> Iterator[T]:
        """Lazily runs on first next(); yields the value, or nothing when empty."""
        outcome = self._run()
        if outcome.is_ok():
            yield outcome.unwrap()

    def stream(self) -> Iterator[T]:
        return iter(self)

    def __repr__(self) -> str:
        return "Try(<pending>)"
