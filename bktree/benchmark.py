"""Compare BK-tree radius queries against a linear scan."""

import logging
import time
from typing import Callable, Dict, Iterable, List, Optional

import pandas as pd

from .distance import CountingDistance, hamming_distance, levenshtein_distance
from .tree import BKTree
from .utils import brute_force_search

logger = logging.getLogger(__name__)


def evaluate(
    words: Iterable[str],
    queries: Iterable[str],
    radius: int,
    distance_func: Optional[Callable[[str, str], int]] = None,
    same_length: Optional[bool] = None,
) -> pd.DataFrame:
    """Run every query against a BK-tree and a linear scan of ``words``.

    Parameters
    ----------
    words : iterable of str
        Values stored in the tree.
    queries : iterable of str
        Query values.
    radius : int
        Maximum distance for a match.
    distance_func : callable, optional
        Metric to use, Levenshtein distance by default.
    same_length : bool, optional
        Only compare each query with the words of its own length, using one
        tree per length. Defaults to ``True`` for the Hamming distance, which
        is undefined between strings of different lengths.

    Returns
    -------
    pandas.DataFrame
        One row per query with the match count, the number of distance
        evaluations and the elapsed time for both strategies, the share of
        evaluations the tree avoided and whether both found the same values.
    """

    metric = distance_func or levenshtein_distance
    if same_length is None:
        same_length = metric is hamming_distance

    counter = CountingDistance(metric)
    words = list(words)
    trees: Dict[Optional[int], BKTree] = {}

    def tree_for(query: str) -> BKTree:
        key = len(query) if same_length else None
        if key not in trees:
            candidates: List[str] = (
                [word for word in words if len(word) == key] if same_length else words
            )
            trees[key] = BKTree(counter, candidates)
        return trees[key]

    rows = []
    for query in queries:
        tree = tree_for(query)
        stored = tree.to_list()

        counter.reset()
        start = time.perf_counter()
        tree_matches = tree.search(query, radius)
        tree_seconds = time.perf_counter() - start
        tree_calls = counter.calls

        counter.reset()
        start = time.perf_counter()
        scan_matches = brute_force_search(stored, query, radius, counter)
        scan_seconds = time.perf_counter() - start
        scan_calls = counter.calls

        consistent = sorted(tree_matches) == sorted(scan_matches)
        if not consistent:
            logger.warning(
                "Tree and scan disagree for %r (radius %d): is the metric valid?",
                query,
                radius,
            )

        rows.append(
            {
                "query": query,
                "radius": radius,
                "matches": len(tree_matches),
                "tree_calls": tree_calls,
                "scan_calls": scan_calls,
                "pruned_ratio": 1 - tree_calls / scan_calls if scan_calls else 0.0,
                "tree_seconds": tree_seconds,
                "scan_seconds": scan_seconds,
                "consistent": consistent,
            }
        )

    return pd.DataFrame(
        rows,
        columns=[
            "query",
            "radius",
            "matches",
            "tree_calls",
            "scan_calls",
            "pruned_ratio",
            "tree_seconds",
            "scan_seconds",
            "consistent",
        ],
    )
