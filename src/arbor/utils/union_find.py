"""
Union-Find (disjoint set union) structure.

Used to check that a set of edges is acyclic when treated as undirected:
an edge whose endpoints are already connected closes a cycle.
"""

from collections.abc import Hashable
from typing import Dict


class UnionFind[T: Hashable]:
    """
    Union-Find with path compression and union by rank.

    Elements are lazily initialized on first use.

    Example:
        >>> uf = UnionFind[str]()
        >>> uf.union("a", "b")
        True
        >>> uf.connected("a", "b")
        True
        >>> uf.union("b", "a")
        False
    """

    def __init__(self) -> None:
        self._parent: Dict[T, T] = {}
        self._rank: Dict[T, int] = {}

    def _ensure_exists(self, element: T) -> None:
        if element not in self._parent:
            self._parent[element] = element
            self._rank[element] = 0

    def find(self, element: T) -> T:
        """Find the representative of the set containing ``element``."""
        self._ensure_exists(element)
        root = element
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[element] != root:
            self._parent[element], element = root, self._parent[element]
        return root

    def union(self, first: T, second: T) -> bool:
        """
        Merge the sets containing two elements.

        Returns:
            bool: False if they were already in the same set
        """
        root_a = self.find(first)
        root_b = self.find(second)
        if root_a == root_b:
            return False
        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1
        return True

    def connected(self, first: T, second: T) -> bool:
        """Check whether two elements are in the same set."""
        return self.find(first) == self.find(second)
