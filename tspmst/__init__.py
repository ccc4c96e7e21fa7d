"""Euclidean complete graphs, Kruskal minimum spanning trees, DFS tours and in-place sorts."""

__version__ = "0.1.0"