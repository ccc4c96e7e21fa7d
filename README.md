# tspmst

Building blocks for an approximate tour of points in the plane: the complete
Euclidean graph on the points, its minimum spanning tree by Kruskal's
algorithm, and a depth-first walk of that tree.

## Installation

```
pip install .
```

## Use

```python
from tspmst.points import PlanePoint
from tspmst.mst import calculate_edges, minimum_spanning_tree
from tspmst.edges import sort_edges

points = [PlanePoint(0, 0), PlanePoint(3, 0), PlanePoint(0, 4), PlanePoint(3, 4)]
edges = sort_edges(calculate_edges(points))
graph, tree = minimum_spanning_tree(edges, len(points))
tour = graph.dfs()
```

- `tspmst.points.PlanePoint(x, y)` is a frozen point; `distance_to(other)`
  gives the Euclidean distance.
- `tspmst.mst.calculate_edges(points)` returns every edge of the complete
  graph as `Edge(a, b, weight)`, with vertex ids counted from 1 and `a < b`.
- `tspmst.edges.sort_edges(edges)` returns the edges in non-decreasing
  weight order; `compare_edges` treats weights closer than `1e-6` as equal.
- `tspmst.mst.minimum_spanning_tree(edges, n)` expects edges already sorted
  and returns a `Graph` on vertices `0..n-1` together with the list of
  chosen edges, in the order they were taken.
- `tspmst.graph.Graph` is an undirected graph with `add_edge`,
  `is_adjacent` and `dfs`. `dfs()` walks from vertex 0, lowest neighbour
  first, and returns the visited vertices numbered from 1.
- `tspmst.unionfind.UnionFind(n)` is a weighted union-find over the
  elements `1..n` with `find`, `union` and `connected`.
- `tspmst.sorting` holds in-place sorts driven by a three-way compare
  function: `insertion_sort`, `heap_sort`, `quick_sort` and `intro_sort`.

## What it does not do

The package has no command-line program, does not read TSPLIB instance
files and does not write `.mst` or `.tour` files. Points must be built in
code, and the tree edges and tour it returns are left to the caller to
store or print.

## Tests

```
pip install ".[test]"
pytest
```