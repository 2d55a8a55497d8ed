"""
skiplist_collections - Ordered containers built on probabilistic skip lists

This package provides a sorted container with expected logarithmic search,
insertion and deletion, backed by a randomized multi-level linked list
instead of a balanced tree.
"""

__version__ = "0.1.0"

# Tier 0: Configuration
from skiplist_collections._config import (
    config,
    Config,
    ConfigurationError,
    DuplicatePolicy,
    DEFAULT_LEVELS,
)

# Tier 1: Ordering
from skiplist_collections._comparator import (
    Comparator,
    ComparatorType,
    resolve_comparator,
)

# Tier 2: Building blocks
from skiplist_collections._levels import LevelGenerator

from skiplist_collections._node import (
    NodeKind,
    HeadNode,
    ElementNode,
)

from skiplist_collections._iterator import (
    LevelIterator,
    UnsupportedOperationError,
)

# Tier 3: Containers
from skiplist_collections._skiplist import SkipList

from skiplist_collections._skiplistset import SkipListSet

# Tier 4: Diagnostics
from skiplist_collections._stats import (
    LevelStats,
    expected_probabilities,
    sample_levels,
)

__all__ = [
    # Version
    "__version__",
    # Tier 0: config
    "config",
    "Config",
    "ConfigurationError",
    "DuplicatePolicy",
    "DEFAULT_LEVELS",
    # Tier 1: comparator
    "Comparator",
    "ComparatorType",
    "resolve_comparator",
    # Tier 2: building blocks
    "LevelGenerator",
    "NodeKind",
    "HeadNode",
    "ElementNode",
    "LevelIterator",
    "UnsupportedOperationError",
    # Tier 3: containers
    "SkipList",
    "SkipListSet",
    # Tier 4: diagnostics
    "LevelStats",
    "expected_probabilities",
    "sample_levels",
]
