from __future__ import annotations

from typing import Callable, Dict, Generic, Iterator, List, Tuple, TypeVar

E = TypeVar("E")


class BKTreeNode(Generic[E]):
    """A single BK-tree node.

    Children are keyed by their exact distance from this node's value, so
    ``distance_func(node.value, child.value) == key`` holds for every child.
    All operations walk the tree with explicit loops rather than recursion.
    """

    __slots__ = ("value", "children")

    def __init__(self, value: E) -> None:
        self.value = value
        self.children: Dict[int, BKTreeNode[E]] = {}

    def add(self, value: E, distance_func: Callable[[E, E], int]) -> bool:
        node = self
        while True:
            dist = distance_func(value, node.value)
            if dist == 0:
                return False
            child = node.children.get(dist)
            if child is None:
                node.children[dist] = BKTreeNode(value)
                return True
            node = child

    def contains(self, value: E, distance_func: Callable[[E, E], int]) -> bool:
        node = self
        while True:
            dist = distance_func(value, node.value)
            if dist == 0:
                return True
            child = node.children.get(dist)
            if child is None:
                return False
            node = child

    def size(self) -> int:
        count = 0
        nodes: List[BKTreeNode[E]] = [self]
        while nodes:
            node = nodes.pop()
            count += 1
            nodes.extend(node.children.values())
        return count

    def nearest_neighbors(
        self,
        query: E,
        radius: int,
        results: List[Tuple[E, int]],
        distance_func: Callable[[E, E], int],
    ) -> None:
        """Append ``(value, distance)`` for every value within ``radius`` of ``query``.

        Only children whose key lies in ``[dist - radius, dist + radius]`` can
        hold a match (triangle inequality), so the others are never visited.
        """
        nodes: List[BKTreeNode[E]] = [self]
        while nodes:
            node = nodes.pop()
            dist = distance_func(query, node.value)
            if dist <= radius:
                results.append((node.value, dist))
            low = max(0, dist - radius)
            high = dist + radius
            for key, child in node.children.items():
                if low <= key <= high:
                    nodes.append(child)

    def iter_values(self) -> Iterator[E]:
        """Yield every value in the subtree, pre-order, children by increasing key."""
        nodes: List[BKTreeNode[E]] = [self]
        while nodes:
            node = nodes.pop()
            yield node.value
            for key in sorted(node.children, reverse=True):
                nodes.append(node.children[key])

    def __repr__(self) -> str:
        return f"BKTreeNode({self.value!r}, children={sorted(self.children)})"
