"""
BK-tree - metric tree for discrete metric spaces
================================================

A set-like container answering radius queries ("every stored value within
distance ``r`` of ``q``") without scanning the whole data set.

Modules:
- tree: the public ``BKTree`` container
- node: tree nodes holding insertion, lookup and pruned search
- distance: ready-made metrics (Levenshtein, Hamming, absolute difference)
- exceptions: error taxonomy
- config / utils: configuration, environment overrides, word list loading
- benchmark: tree versus linear scan report

Usage:
    from bktree import BKTree, levenshtein_distance

    tree = BKTree(levenshtein_distance, ["example", "sample", "simple"])
    tree.nearest_neighbors("exaple", 2)
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .tree import BKTree
from .node import BKTreeNode

from .distance import (
    DistanceFunction,
    CountingDistance,
    absolute_difference,
    hamming_distance,
    levenshtein_distance,
    get_metric,
)

from .exceptions import (
    BKTreeError,
    InvalidArgumentError,
    TypeMismatchError,
    UnsupportedOperationError,
)

from .utils import (
    load_word_list,
    brute_force_search,
    ensure_unicode,
)

__all__ = [
    # Tree
    "BKTree",
    "BKTreeNode",

    # Distance functions
    "DistanceFunction",
    "CountingDistance",
    "absolute_difference",
    "hamming_distance",
    "levenshtein_distance",
    "get_metric",

    # Errors
    "BKTreeError",
    "InvalidArgumentError",
    "TypeMismatchError",
    "UnsupportedOperationError",

    # Utilities
    "load_word_list",
    "brute_force_search",
    "ensure_unicode",
]
