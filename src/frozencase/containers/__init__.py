"""Immutable containers: list, hash set/map, comparator-ordered tree set/map.

Every public constructor copies its input; transformations return new
containers and never modify the receiver.
"""

from .array_list import ImmutableArrayList
from .collectors import Collector, to_collection, to_list, to_map, to_set, to_tree_map, to_tree_set
from .factory import empty_list, empty_map, empty_set, list_of, map_of, set_of, tree_map_of, tree_set_of
from .hash_map import ImmutableHashMap
from .hash_set import ImmutableHashSet, ImmutableSet
from .iterator import UnmodifiableIterator
from .mapping import ImmutableMap
from .ordering import Comparator, Ordering, comparing, natural_compare, reverse_order
from .pair import Pair
from .pair_set import PairSet
from .traits import ComparatorOrdered, ImmutableCollection, IndexOrdered, RangeNavigable
from .tree_map import ImmutableTreeMap
from .tree_set import ImmutableTreeSet

__all__ = [
    # Contracts
    "ImmutableCollection", "IndexOrdered", "ComparatorOrdered", "RangeNavigable",
    "ImmutableSet", "ImmutableMap",
    # Containers
    "ImmutableArrayList", "ImmutableHashSet", "ImmutableHashMap", "ImmutableTreeSet", "ImmutableTreeMap",
    "Pair", "PairSet", "UnmodifiableIterator",
    # Ordering
    "Ordering", "Comparator", "comparing", "natural_compare", "reverse_order",
    # Factories
    "list_of", "set_of", "map_of", "tree_set_of", "tree_map_of", "empty_list", "empty_set", "empty_map",
    # Collectors
    "Collector", "to_collection", "to_list", "to_set", "to_map", "to_tree_set", "to_tree_map",
]
