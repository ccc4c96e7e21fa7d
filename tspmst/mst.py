"""Complete Euclidean graphs and Kruskal's minimum spanning tree."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations

from tspmst.edges import Edge
from tspmst.graph import Graph
from tspmst.points import PlanePoint
from tspmst.unionfind import UnionFind


def calculate_edges(points: Iterable[PlanePoint]) -> list[Edge]:
    """Return every edge of the complete graph on ``points``, ids from 1."""
    return [
        Edge(i + 1, j + 1, p.distance_to(q))
        for (i, p), (j, q) in combinations(enumerate(points), 2)
    ]


def minimum_spanning_tree(edges: Iterable[Edge], n: int) -> tuple[Graph, list[Edge]]:
    """Run Kruskal's algorithm over ``edges``, already in non-decreasing weight order.

    Returns the tree as a graph on vertices ``0..n-1`` and the chosen edges
    in the order they were taken.
    """
    graph = Graph(n)
    sets = UnionFind(n)
    tree: list[Edge] = []
    for edge in edges:
        if len(tree) >= n - 1:
            break
        if not sets.connected(edge.a, edge.b):
            sets.union(edge.a, edge.b)
            tree.append(edge)
            graph.add_edge(edge.a - 1, edge.b - 1)
    return graph, tree