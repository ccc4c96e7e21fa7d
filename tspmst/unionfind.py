"""Weighted union-find over the elements 1..n."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets of the elements ``1`` to ``n`` inclusive."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must not be negative: {n}")
        self._parent = list(range(n))
        self._weight = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _index(self, a: int) -> int:
        if not 1 <= a <= len(self._parent):
            raise IndexError(f"element {a} is out of range 1..{len(self._parent)}")
        return a - 1

    def find(self, a: int) -> int:
        """Return the representative of the set holding ``a`` (1-based)."""
        parent = self._parent
        i = self._index(a)
        while i != parent[i]:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i + 1

    def union(self, a: int, b: int) -> None:
        """Merge the sets holding ``a`` and ``b``, hanging the lighter under the heavier."""
        ar = self.find(a) - 1
        br = self.find(b) - 1
        if self._weight[ar] >= self._weight[br]:
            self._parent[br] = ar
            self._weight[ar] += self._weight[br]
        else:
            self._parent[ar] = br
            self._weight[br] += self._weight[ar]

    def connected(self, a: int, b: int) -> bool:
        """Return whether ``a`` and ``b`` are in the same set."""
        return self.find(a) == self.find(b)