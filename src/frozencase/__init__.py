"""Frozencase - immutable, functional-style containers and evaluation chains.

Read-only list, set and mapping types (hash-based and comparator-ordered)
with functional transformations, plus Try and Lazy for deferred computation.
Constructors copy their input; every transformation returns a new container.

Quick Start (Containers):
    >>> from frozencase import list_of, map_of, ImmutableTreeSet
    >>>
    >>> nums = list_of(1, 2, 3, 4, 5)
    >>> nums.get(-1), nums.slice(-2).to_mutable_list()
    (5, [4, 5])
    >>> nums.filter(lambda x: x % 2).map(lambda x: x * 10).to_mutable_list()
    [10, 30, 50]
    >>>
    >>> merged = map_of(a=1).concat_with(map_of(a=2), lambda key, mine, theirs: mine + theirs)
    >>> merged["a"]
    3
    >>>
    >>> ImmutableTreeSet([10, 30, 20]).ceiling(15)
    20

Evaluation Chains:
    >>> from frozencase import Try, Lazy
    >>>
    >>> Try.of(lambda: 1 / 0).or_else(-1)
    -1
    >>> Try.of(lambda: 4).map(lambda x: x + 1).get()
    5
    >>> Lazy.of(lambda: "computed").memoized().calculate()
    'computed'

Configuration (environment, FROZENCASE_ prefix):
    >>> from frozencase import configure_from_settings
    >>> renderer = configure_from_settings()  # FROZENCASE_LOG_LEVEL, FROZENCASE_LOG_FORMAT
"""

from __future__ import annotations

__version__ = "0.1.0"

# Containers
from .containers import (
    Collector,
    Comparator,
    ImmutableArrayList,
    ImmutableCollection,
    ImmutableHashMap,
    ImmutableHashSet,
    ImmutableMap,
    ImmutableSet,
    ImmutableTreeMap,
    ImmutableTreeSet,
    Ordering,
    Pair,
    PairSet,
    UnmodifiableIterator,
    comparing,
    empty_list,
    empty_map,
    empty_set,
    list_of,
    map_of,
    reverse_order,
    set_of,
    to_collection,
    to_list,
    to_map,
    to_set,
    to_tree_map,
    to_tree_set,
    tree_map_of,
    tree_set_of,
)

# Errors
from .foundation.errors import (
    DuplicateKeyError,
    EmptyContainerError,
    ErrorCode,
    FaultReport,
    FrozencaseError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    UnsupportedOperationError,
    classify_exception,
)

# Config
from .foundation.config import FrozencaseSettings, clear_settings_cache, get_settings

# Monads
from .monads import Err, Lazy, Ok, Result, Try

# Logging
from .runtime.observability import configure_from_settings, configure_logging, get_logger

__all__ = [
    # Version
    "__version__",
    # Containers
    "ImmutableCollection",
    "ImmutableSet",
    "ImmutableMap",
    "ImmutableArrayList",
    "ImmutableHashSet",
    "ImmutableHashMap",
    "ImmutableTreeSet",
    "ImmutableTreeMap",
    "Pair",
    "PairSet",
    "UnmodifiableIterator",
    "Ordering",
    "Comparator",
    "comparing",
    "reverse_order",
    # Factories
    "list_of",
    "set_of",
    "map_of",
    "tree_set_of",
    "tree_map_of",
    "empty_list",
    "empty_set",
    "empty_map",
    # Collectors
    "Collector",
    "to_collection",
    "to_list",
    "to_set",
    "to_map",
    "to_tree_set",
    "to_tree_map",
    # Errors
    "ErrorCode",
    "FaultReport",
    "FrozencaseError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    "EmptyContainerError",
    "UnsupportedOperationError",
    "DuplicateKeyError",
    "classify_exception",
    # Monads
    "Try",
    "Lazy",
    "Result",
    "Ok",
    "Err",
    # Config
    "FrozencaseSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
]
