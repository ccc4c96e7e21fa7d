import random

import pytest

from tspmst.edges import Edge, compare_edges, sort_edges


def test_compare_lighter_first():
    assert compare_edges(Edge(1, 2, 1.0), Edge(1, 3, 2.0)) == -1


def test_compare_heavier_first():
    assert compare_edges(Edge(1, 2, 3.5), Edge(1, 3, 2.0)) == 1


def test_compare_within_tolerance_is_equal():
    assert compare_edges(Edge(1, 2, 1.0), Edge(2, 3, 1.0 + 1e-7)) == 0
    assert compare_edges(Edge(1, 2, 1.0 + 1e-7), Edge(2, 3, 1.0)) == 0


def test_compare_just_outside_tolerance():
    assert compare_edges(Edge(1, 2, 1.0), Edge(2, 3, 1.0 + 1e-5)) == -1


def test_compare_is_antisymmetric():
    a, b = Edge(1, 2, 4.0), Edge(3, 4, 9.0)
    assert compare_edges(a, b) == -compare_edges(b, a)


def test_sort_is_non_decreasing_permutation():
    rng = random.Random(7)
    edges = [Edge(i, i + 1, rng.uniform(0, 100)) for i in range(1, 60)]
    result = sort_edges(edges)
    assert sorted(result, key=lambda e: e.a) == sorted(edges, key=lambda e: e.a)
    assert all(x.weight <= y.weight for x, y in zip(result, result[1:]))


def test_sort_accepts_iterables_and_leaves_input():
    edges = [Edge(1, 2, 5.0), Edge(2, 3, 1.0), Edge(1, 3, 3.0)]
    original = list(edges)
    result = sort_edges(iter(edges))
    assert [e.weight for e in result] == [1.0, 3.0, 5.0]
    assert edges == original


def test_sort_empty():
    assert sort_edges([]) == []


def test_edge_is_frozen():
    e = Edge(1, 2, 1.0)
    with pytest.raises(AttributeError):
        e.weight = 2.0
    assert e.weight == 1.0
    assert compare_edges(e, Edge(1, 2, 1.0)) == 0