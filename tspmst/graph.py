"""Undirected graph with a depth-first walk."""

from __future__ import annotations


class Graph:
    """An undirected simple graph on the vertices ``0`` to ``n - 1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"vertex count must not be negative: {n}")
        self._adjacent: list[set[int]] = [set() for _ in range(n)]

    def __len__(self) -> int:
        return len(self._adjacent)

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._adjacent):
            raise IndexError(f"vertex {v} is out of range 0..{len(self._adjacent) - 1}")

    def add_edge(self, a: int, b: int) -> None:
        """Join vertices ``a`` and ``b``; a loop is ignored."""
        self._check(a)
        self._check(b)
        if a == b:
            return
        self._adjacent[a].add(b)
        self._adjacent[b].add(a)

    def is_adjacent(self, a: int, b: int) -> bool:
        """Return whether ``a`` and ``b`` are joined by an edge."""
        self._check(a)
        self._check(b)
        return b in self._adjacent[a]

    def dfs(self) -> list[int]:
        """Walk depth-first from vertex 0, lowest neighbour first.

        Returns the visited vertices in order, numbered from 1.
        """
        n = len(self._adjacent)
        if n == 0:
            return []
        visited = [False] * n
        visited[0] = True
        order = [1]
        stack = [iter(sorted(self._adjacent[0]))]
        while stack and len(order) < n:
            for neighbour in stack[-1]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    order.append(neighbour + 1)
                    stack.append(iter(sorted(self._adjacent[neighbour])))
                    break
            else:
                stack.pop()
        return order