"""Helpers for the Streamlit lookup page.

They hold the formatting and validation logic of ``main.py`` so that it can be
tested without Streamlit.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

from .distance import CountingDistance
from .tree import BKTree
from .utils import get_max_radius


def clamp_radius(radius: Any, max_radius: Optional[int] = None) -> int:
    """Return ``radius`` as an int within ``[0, max_radius]``.

    Values that cannot be converted fall back to 0. ``max_radius`` defaults
    to :func:`bktree.utils.get_max_radius`.
    """
    upper = max_radius if max_radius is not None else get_max_radius()
    try:
        value = int(radius)
    except (TypeError, ValueError):
        return 0
    return max(0, min(value, upper))


def results_to_records(
    results: Iterable[Tuple[Any, int]], limit: Optional[int] = None
) -> List[Dict[str, Any]]:
    """Convert ``(value, distance)`` pairs into table rows.

    Parameters
    ----------
    results:
        Pairs as returned by :meth:`bktree.tree.BKTree.search`.
    limit:
        Maximum number of rows to keep, all rows when ``None``.
    """
    records = [{"neighbor": value, "distance": dist} for value, dist in results]
    if limit is not None:
        records = records[: max(0, limit)]
    return records


def format_pruning_ratio(calls: int, total: int) -> str:
    """Describe the share of the data set the search did not have to compare."""
    if total <= 0:
        return "N/A"
    skipped = max(0, total - calls) / total
    return f"{skipped * 100:.1f}%"


def counted_search(tree: BKTree, query: Any, radius: int) -> Tuple[List[Tuple[Any, int]], int]:
    """Run ``tree.search`` and count the distance evaluations it needed.

    The search runs through a view that shares the nodes of ``tree`` but wraps
    its metric in a new :class:`bktree.distance.CountingDistance`, so sessions
    sharing a cached tree never see each other's counts.
    """
    counter = CountingDistance(tree.distance_function)
    view = BKTree(counter, element_type=tree.element_type)
    view.root = tree.root
    return view.search(query, radius), counter.calls
