"""
Discrete distance functions for use with :class:`bktree.tree.BKTree`.

Every function here is a metric on its domain. String metrics are backed by
rapidfuzz.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Protocol, TypeVar

from rapidfuzz.distance import Hamming, Levenshtein

T_contra = TypeVar("T_contra", contravariant=True)


class DistanceFunction(Protocol[T_contra]):
    """Callable returning the discrete distance between two points."""

    def __call__(self, first: T_contra, second: T_contra) -> int:
        ...


def absolute_difference(first: int, second: int) -> int:
    return abs(first - second)


def levenshtein_distance(first: str, second: str) -> int:
    """Edit distance counting insertions, deletions and substitutions."""
    return Levenshtein.distance(first, second)


def hamming_distance(first: str, second: str) -> int:
    """Number of differing positions between two strings of equal length.

    Raises
    ------
    ValueError
        If the strings do not have the same length.
    """
    if len(first) != len(second):
        raise ValueError(
            f"Hamming distance requires equal lengths ({len(first)} != {len(second)})"
        )
    return Hamming.distance(first, second)


class CountingDistance:
    """Wrap a distance function and count how many times it is evaluated."""

    def __init__(self, func: Callable[[Any, Any], int]) -> None:
        self.func = func
        self.calls = 0

    def __call__(self, first, second) -> int:
        self.calls += 1
        return self.func(first, second)

    def reset(self) -> None:
        self.calls = 0

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", repr(self.func))
        return f"CountingDistance({name}, calls={self.calls})"


DISTANCE_FUNCTIONS: Dict[str, Callable] = {
    "levenshtein": levenshtein_distance,
    "hamming": hamming_distance,
    "absolute": absolute_difference,
}


def get_metric(name: str) -> Callable:
    """Return the distance function registered under ``name``."""
    try:
        return DISTANCE_FUNCTIONS[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown metric: {name} (available: {', '.join(sorted(DISTANCE_FUNCTIONS))})"
        ) from None
