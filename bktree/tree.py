"""
BK-tree container for discrete metric spaces.

A BK-tree stores values under their parent according to the exact integer
distance between them, which lets radius queries skip whole subtrees through
the triangle inequality. Any distance function obeying the metric-space rules
can be used:

1. ``d(x, y) >= 0``
2. ``d(x, y) == 0`` if and only if ``x == y``
3. ``d(x, y) == d(y, x)``
4. ``d(x, z) <= d(x, y) + d(y, z)``

The tree does not check these rules. A function that breaks them leaves
insertion intact but makes search results unreliable.

Two values at distance 0 are the same element as far as the tree is
concerned: the second one is silently ignored by :meth:`BKTree.add`.

The tree is not synchronized. When several threads share a tree and at least
one of them adds or clears, every call must be guarded by an external lock.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterable, Iterator, List, Optional, Tuple

from .exceptions import InvalidArgumentError, TypeMismatchError, UnsupportedOperationError
from .node import BKTreeNode, E

logger = logging.getLogger(__name__)


class BKTree(Generic[E]):
    """Set-like BK-tree that does not allow ``None`` elements or removals.

    Parameters
    ----------
    distance_function: callable
        Metric used for every comparison, ``distance_function(a, b) -> int``.
    values: iterable, optional
        Initial elements, inserted in iteration order.
    element_type: type, optional
        When given, :meth:`add`, :meth:`contains` and :meth:`search` reject
        values that are not instances of this type with :class:`TypeMismatchError`.
    """

    def __init__(
        self,
        distance_function: Callable[[E, E], int],
        values: Optional[Iterable[E]] = (),
        element_type: Optional[type] = None,
    ) -> None:
        if distance_function is None or not callable(distance_function):
            raise InvalidArgumentError("Distance function must be a callable, not None.")
        if values is None:
            raise InvalidArgumentError(
                "Initial collection of elements may be empty, but must not be None."
            )
        self._distance_function = distance_function
        self.element_type = element_type
        self.root: Optional[BKTreeNode[E]] = None
        self.add_all(values)

    @property
    def distance_function(self) -> Callable[[E, E], int]:
        return self._distance_function

    def get_distance_function(self) -> Callable[[E, E], int]:
        """Return the distance function supplied at construction."""
        return self._distance_function

    def _check_element(self, value: object) -> None:
        if value is None:
            raise InvalidArgumentError("BK-trees do not accept None elements.")
        if self.element_type is not None and not isinstance(value, self.element_type):
            raise TypeMismatchError(
                f"Expected {self.element_type.__name__}, got {type(value).__name__}"
            )

    def _compatible(self, value: object) -> bool:
        if self.element_type is not None:
            return isinstance(value, self.element_type)
        if self.root is None:
            return True
        stored = self.root.value
        return isinstance(value, type(stored)) or isinstance(stored, type(value))

    def _type_mismatch(self, value: object, error: TypeError) -> TypeError:
        # A TypeError on a value of the stored type comes from the metric itself
        if self._compatible(value):
            return error
        return TypeMismatchError(
            f"Value {value!r} is incompatible with the elements of this tree"
        )

    # === SIZE ===

    def size(self) -> int:
        return self.root.size() if self.root is not None else 0

    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self.root is not None

    # === INSERTION ===

    def add(self, value: E) -> bool:
        """Add ``value`` if no element at distance 0 is already present.

        Returns
        -------
        bool
            ``True`` if the value was newly added.
        """
        self._check_element(value)
        if self.root is None:
            self.root = BKTreeNode(value)
            return True
        return self.root.add(value, self._distance_function)

    def add_all(self, values: Iterable[E]) -> bool:
        """Add every element of ``values``.

        The whole batch is validated before the first insertion, so a ``None``
        element leaves the tree untouched.

        Returns
        -------
        bool
            ``True`` if at least one element was newly added.
        """
        if values is None:
            raise InvalidArgumentError("Collection of elements must not be None.")
        batch = list(values)
        for value in batch:
            self._check_element(value)

        added_any = False
        for value in batch:
            added_any = self.add(value) or added_any
        return added_any

    def update(self, *iterables: Iterable[E]) -> None:
        for values in iterables:
            self.add_all(values)

    # === MEMBERSHIP ===

    def contains(self, value: object) -> bool:
        self._check_element(value)
        if self.root is None:
            return False
        try:
            return self.root.contains(value, self._distance_function)
        except TypeError as e:
            error = self._type_mismatch(value, e)
            if error is e:
                raise
            raise error from e

    def contains_all(self, values: Iterable[object]) -> bool:
        if values is None:
            raise InvalidArgumentError("Collection of elements must not be None.")
        return all(self.contains(value) for value in values)

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    # === REMOVAL (unsupported) ===

    def remove(self, value: object) -> bool:
        raise UnsupportedOperationError("Elements may not be removed from a BK-tree.")

    def discard(self, value: object) -> None:
        raise UnsupportedOperationError("Elements may not be removed from a BK-tree.")

    def remove_all(self, values: Iterable[object]) -> bool:
        raise UnsupportedOperationError("Elements may not be removed from a BK-tree.")

    def retain_all(self, values: Iterable[object]) -> bool:
        raise UnsupportedOperationError("Elements may not be removed from a BK-tree.")

    def clear(self) -> None:
        self.root = None
        logger.debug("BK-tree cleared")

    # === SEARCH ===

    def search(self, query: E, radius: int) -> List[Tuple[E, int]]:
        """Return ``(value, distance)`` pairs within ``radius`` of ``query``.

        Values are included when their distance is less than *or equal to*
        ``radius``. Pairs are sorted by ascending distance; the order inside a
        distance band is undefined.
        """
        if query is None:
            raise InvalidArgumentError("Query must not be None.")
        if radius is None:
            raise InvalidArgumentError("Radius must not be None.")
        self._check_element(query)

        results: List[Tuple[E, int]] = []
        if self.root is not None and radius >= 0:
            try:
                self.root.nearest_neighbors(query, radius, results, self._distance_function)
            except TypeError as e:
                error = self._type_mismatch(query, e)
                if error is e:
                    raise
                raise error from e
        results.sort(key=lambda item: item[1])
        logger.debug("search(%r, %s) matched %d elements", query, radius, len(results))
        return results

    def nearest_neighbors(self, query: E, radius: int) -> List[E]:
        """Return the values within ``radius`` of ``query``, nearest first."""
        return [value for value, _ in self.search(query, radius)]

    # === SNAPSHOTS ===

    def to_list(self) -> List[E]:
        """Return a new list holding every element, in no particular order."""
        if self.root is None:
            return []
        return list(self.root.iter_values())

    def __iter__(self) -> Iterator[E]:
        return iter(self.to_list())

    def __repr__(self) -> str:
        return f"BKTree(size={self.size()}, distance_function={self._distance_function!r})"
