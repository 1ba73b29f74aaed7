"""Error taxonomy for immutable containers and evaluation chains.

Every fault the library raises derives from FrozencaseError and carries an
ErrorCode. FaultReport is the structured, serializable view of any exception
(ours or a caller's) and is what Try hands back when asked why it is empty.
"""

from __future__ import annotations

import traceback
from enum import StrEnum
from typing import Annotated, ClassVar, Self, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
)

T = TypeVar("T")


class ErrorCode(StrEnum):
    """Machine-readable fault classification."""
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
    EMPTY_CONTAINER = "EMPTY_CONTAINER"
    UNSUPPORTED_OPERATION = "UNSUPPORTED_OPERATION"
    DUPLICATE_KEY = "DUPLICATE_KEY"
    COMPUTATION_FAILED = "COMPUTATION_FAILED"
    FATAL = "FATAL"
    UNKNOWN = "UNKNOWN"


# Faults that must never be absorbed into a value, even though they are Exceptions
FATAL_EXCEPTIONS: tuple[type[BaseException], ...] = (MemoryError, SystemError)


def is_fatal(exc: BaseException) -> bool:
    """True for faults a Try chain must re-raise instead of capturing."""
    return isinstance(exc, FATAL_EXCEPTIONS) or not isinstance(exc, Exception)


# ═══════════════════════════════════════════════════════════════════════════════
# Exceptions
# ═══════════════════════════════════════════════════════════════════════════════


class FrozencaseError(Exception):
    """Base class for every fault raised by the library."""

    code: ClassVar[ErrorCode] = ErrorCode.UNKNOWN

    def report(self, *, include_trace: bool = False) -> FaultReport:
        return FaultReport.from_exception(self, include_trace=include_trace)


class InvalidArgumentError(FrozencaseError, ValueError):
    """Precondition violation known before any work starts (None, negative size, zero step)."""

    code = ErrorCode.INVALID_ARGUMENT


class IndexOutOfRangeError(FrozencaseError, IndexError):
    """Index or computed range endpoint outside ``[-size, size)``."""

    code = ErrorCode.INDEX_OUT_OF_RANGE

    def __init__(self, index: int, size: int) -> None:
        self.index, self.size = index, size
        super().__init__(f"Index {index} is out of bounds for size {size}")


class EmptyContainerError(FrozencaseError, LookupError):
    """Value requested from an empty Try."""

    code = ErrorCode.EMPTY_CONTAINER


class UnsupportedOperationError(FrozencaseError, TypeError):
    """Mutation attempted through a read-only surface."""

    code = ErrorCode.UNSUPPORTED_OPERATION


class DuplicateKeyError(FrozencaseError, ValueError):
    """Two elements mapped to the same key while collecting into a mapping."""

    code = ErrorCode.DUPLICATE_KEY

    def __init__(self, key: object, existing: object, incoming: object) -> None:
        self.key = key
        super().__init__(f"Duplicate key {key!r} (attempted merging values {existing!r} and {incoming!r})")


def check_not_none(value: T | None, what: str) -> T:
    """Return value, raising InvalidArgumentError when it is None."""
    if value is None:
        raise InvalidArgumentError(f"{what} cannot be None")
    return value


def classify_exception(exc: BaseException) -> ErrorCode:
    """Map any exception to an ErrorCode."""
    if isinstance(exc, FrozencaseError):
        return exc.code
    if is_fatal(exc):
        return ErrorCode.FATAL
    return ErrorCode.COMPUTATION_FAILED


# ═══════════════════════════════════════════════════════════════════════════════
# Structured report
# ═══════════════════════════════════════════════════════════════════════════════


class FaultReport(BaseModel):
    """Structured description of a fault.

    Attributes:
        message: Human-readable message
        code: Machine-readable classification
        exception_type: Qualified name of the exception class
        recoverable: Whether a Try chain may absorb this fault
        details: Optional formatted traceback
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "title": "Fault Report",
            "examples": [{
                "message": "division by zero",
                "code": "COMPUTATION_FAILED",
                "exception_type": "ZeroDivisionError",
                "recoverable": True,
            }],
        },
    )

    message: Annotated[str, Field(description="Human-readable fault message")]
    code: ErrorCode = Field(default=ErrorCode.UNKNOWN)
    exception_type: Annotated[str, Field(min_length=1)] = "Exception"
    recoverable: bool = True
    details: str | None = Field(default=None, repr=False)

    @field_validator("message", mode="before")
    @classmethod
    def _ensure_message(cls, v: str | BaseException) -> str:
        return str(v) if isinstance(v, BaseException) else v

    @computed_field
    @property
    def is_fatal(self) -> bool:
        return self.code is ErrorCode.FATAL

    @classmethod
    def from_exception(cls, exc: BaseException, *, include_trace: bool = False) -> Self:
        code = classify_exception(exc)
        details = None
        if include_trace and exc.__traceback__ is not None:
            details = "".join(traceback.format_exception(exc))
        return cls(
            message=str(exc) or type(exc).__name__,
            code=code,
            exception_type=type(exc).__qualname__,
            recoverable=code is not ErrorCode.FATAL,
            details=details,
        )

    def render(self) -> str:
        parts = [f"{self.exception_type} [{self.code}]: {self.message}"]
        if self.details:
            parts.append(f"\n{self.details}")
        return "".join(parts)

    __str__ = render
