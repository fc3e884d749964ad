# classicalgos

A small collection of classic algorithms in plain Python, with no
dependencies beyond the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `classicalgos.sorting` | `heap_sort`, `merge_sort`, `quick_sort`, and `timed_sort` to time any of them |
| `classicalgos.shortest_paths` | `dijkstra` (single source), `floyd_warshall` (all pairs), plus `format_distances` and `format_distance_matrix` for tabular output |
| `classicalgos.spanning_trees` | `Edge`, `kruskal`, `prim`, `tree_cost` and `format_tree` |
| `classicalgos.knapsack` | `Item`, `Selection`, `fractional_knapsack` (greedy by profit/weight ratio) and `knapsack_01` (dynamic programming) |
| `classicalgos.permutations` | `johnson_trotter`, which yields every permutation of `1..n` by adjacent swaps |
| `classicalgos.nqueens` | `solve_n_queens` and `format_board` |
| `classicalgos.toposort` | `topological_sort` (Kahn's algorithm) and `CycleError` |
| `classicalgos.cli` | `main`, the command line front end |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from classicalgos.sorting import merge_sort
from classicalgos.knapsack import Item, fractional_knapsack, knapsack_01
from classicalgos.shortest_paths import dijkstra, format_distances

print(merge_sort([5, 2, 9, 1]))                          # [1, 2, 5, 9]
print(knapsack_01(50, [10, 20, 30], [60, 100, 120]))     # 220

selections, total = fractional_knapsack(
    [Item(10, 60), Item(20, 100), Item(30, 120)], 50
)
print(total)                                             # 240.0

graph = [
    [0, 4, 0, 0, 0, 0],
    [4, 0, 8, 0, 0, 0],
    [0, 8, 0, 7, 0, 4],
    [0, 0, 7, 0, 9, 14],
    [0, 0, 0, 9, 0, 10],
    [0, 0, 4, 14, 10, 0],
]
print(format_distances(dijkstra(graph, 0)))
```

Notes on inputs and results:

- The sorts take any iterable and return a new ascending list;
  `timed_sort(sort, values)` returns the sorted list and the CPU seconds
  the sort took.
- `dijkstra` and `prim` take adjacency matrices in which `0` means
  "no edge". `dijkstra` gives `math.inf` for unreachable vertices; `prim`
  raises `ValueError` if the graph is not connected.
- `floyd_warshall` takes a matrix in which a missing edge is `math.inf`;
  `format_distance_matrix` prints such entries as `INF`.
- `kruskal(vertex_count, edges)` takes a list of `Edge(u, v, weight)` and
  returns the chosen edges in the order picked (a spanning forest if the
  graph is not connected). `tree_cost` sums their weights and
  `format_tree` renders them with the total cost.
- `fractional_knapsack(items, capacity)` returns a list of `Selection`
  values (each with `item`, `fraction`, `weight` and `profit`) and the
  total profit. `knapsack_01(capacity, weights, values)` returns the best
  total value.
- `johnson_trotter(n)` is a generator of tuples, starting with the
  identity permutation.
- `solve_n_queens(n)` returns the first placement found as a board of
  booleans indexed `board[row][col]`, or `None` when no placement exists;
  `format_board` renders it with `Q` and `.`.
- `topological_sort(vertex_count, edges)` takes directed `(u, v)` pairs
  and returns an order of all vertices. It raises `CycleError` when the
  graph has a cycle; the error's `order` attribute holds the vertices
  that could be ordered.

## Command line

The package installs a `classicalgos` command with three sub-commands:

```
classicalgos sort {heap,merge,quick} COUNT [--seed SEED]
classicalgos permutations N
classicalgos toposort [FILE]
```

- `sort` generates `COUNT` random integers below 10000, sorts them with
  the chosen algorithm, and prints the sorted values and the time taken.
- `permutations` prints every permutation of `1..N` in Johnson–Trotter
  order, one per line.
- `toposort` reads whitespace-separated integers from `FILE` (or standard
  input): the vertex count, the edge count, then one `u v` pair per edge.
  It prints the topological order, or reports a cycle and exits with
  status 1.

See all options with:

```
classicalgos --help
```

The shortest path, spanning tree, knapsack and N-queens algorithms are
available from the library only; the command line does not run them.