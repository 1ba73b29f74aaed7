"""Deferred computation chains.

- Try: captures recoverable faults as values; resolves to a Result per run
- Lazy: defers work, lets faults propagate, optionally memoizes

Example:
    >>> from frozencase.monads import Try, Lazy
    >>> Try.of(lambda: 1 / 0).or_else(-1)
    -1
    >>> Lazy.of(lambda: 2).map(lambda x: x * 3).calculate()
    6
"""

from frozencase.foundation.errors import Err, Ok, Result

from .attempt import Try, capture
from .lazy import CachedSupplier, Lazy

__all__ = ["Try", "Lazy", "CachedSupplier", "capture", "Result", "Ok", "Err"]
