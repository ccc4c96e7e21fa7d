"""Weighted edges between 1-based vertex ids."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import cmp_to_key

TOLERANCE = 1e-6


@dataclass(frozen=True)
class Edge:
    """An undirected edge from vertex ``a`` to vertex ``b`` with a weight."""

    a: int
    b: int
    weight: float


def compare_edges(first: Edge, second: Edge) -> int:
    """Compare two edges by weight; weights closer than 1e-6 are equal."""
    if abs(first.weight - second.weight) < TOLERANCE:
        return 0
    return -1 if first.weight < second.weight else 1


def sort_edges(edges: Iterable[Edge]) -> list[Edge]:
    """Return the edges in non-decreasing order of weight."""
    return sorted(edges, key=cmp_to_key(compare_edges))