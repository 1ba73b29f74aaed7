"""Unified error handling for frozencase.

- ErrorCode: Fault classification
- FrozencaseError and subclasses: Faults raised by containers and chains
- FaultReport: Structured, serializable fault description
- Result/Ok/Err: Tagged outcome of a Try run
"""

from .errors import (
    FATAL_EXCEPTIONS,
    DuplicateKeyError,
    EmptyContainerError,
    ErrorCode,
    FaultReport,
    FrozencaseError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    UnsupportedOperationError,
    check_not_none,
    classify_exception,
    is_fatal,
)
from .result import Err, Ok, Result

__all__ = [
    # Taxonomy
    "ErrorCode", "FaultReport", "classify_exception", "is_fatal", "FATAL_EXCEPTIONS", "check_not_none",
    # Exceptions
    "FrozencaseError", "InvalidArgumentError", "IndexOutOfRangeError", "EmptyContainerError",
    "UnsupportedOperationError", "DuplicateKeyError",
    # Result
    "Result", "Ok", "Err",
]
