# algolab

A small collection of classic algorithms in plain Python, with no
third-party dependencies.

| Module | Contents |
| --- | --- |
| `algolab.mst` | Minimum spanning trees over weighted adjacency matrices: `kruskal`, `kruskal_by_scan`, `prim`, plus `Edge`, `total_weight` and `format_matrix` |
| `algolab.paths` | `floyd_warshall` (all-pairs shortest paths), `transitive_closure` (Warshall), `dijkstra` (single source), `format_distances` and the `INF` constant |
| `algolab.toposort` | `Digraph` with `add_edge` and `topological_order`, and the shortcut `topological_sort(vertices, edges)` |
| `algolab.knapsack` | `knapsack_01` (exact, dynamic programming), `greedy_discrete` and `fractional` over `Item` objects |
| `algolab.backtracking` | `n_queens`, `queens_board` and the generator `subset_sums` |
| `algolab.sorting` | `selection_sort`, `quick_sort`, `merge_sort` (each returns a sorted copy) and `random_array` |
| `algolab.benchmark` | `time_sort`, `write_csv`, the `Timing` record and the `algolab-bench` command |

## Conventions

- In the spanning-tree functions and in `dijkstra`, a zero matrix entry means
  there is no edge. `floyd_warshall` instead takes a matrix in which
  `INF` (99999, or the `inf` argument) marks a missing edge; unreachable pairs
  stay `INF` in the result. `dijkstra` reports unreachable vertices as `INF`.
- `kruskal` and `prim` number vertices from 0; `kruskal_by_scan` numbers them
  from 1.
- `kruskal_by_scan` and `prim` raise `ValueError` when the graph is not
  connected; `kruskal` returns a spanning forest instead. Non-square matrices
  raise `ValueError` everywhere.
- `topological_order` returns vertices in reverse depth-first finishing order,
  visiting vertices in ascending order. It does not detect cycles.
- `n_queens(n)` returns the column of the queen in each row for the
  lexicographically first solution, or `None` if there is none.
- `subset_sums` assumes non-negative values and yields each subset in the
  order of the input.

## Installation

```
pip install .
```

## Command line

`algolab` runs the worked example of each algorithm and prints the result.
With no command it runs all of them; otherwise name one:

```
algolab
algolab kruskal
algolab kruskal-scan
algolab prim
algolab floyd
algolab closure
algolab dijkstra --source 2
algolab toposort
algolab knapsack
algolab greedy
algolab subset --target 15
algolab queens 8
```

The example graphs and items are fixed; only the Dijkstra source vertex, the
subset target and the board size can be chosen.

`algolab-bench` times one sorting algorithm on random arrays of growing size,
prints each timing and writes them to a CSV file with the header
`n,Time taken (ms)`:

```
algolab-bench --algorithm merge --output sorting_times.csv --seed 1
```

Options: `--algorithm` (`selection`, `quick` or `merge`; default `quick`),
`--output` (default `sorting_times.csv`), `--start`, `--stop`, `--step`
(sizes run from start to stop inclusive; defaults 1000–10000 by 1000 for
selection sort and 5000–10000 by 500 for the others), `--min` and `--max`
(value range, default 1–10000) and `--seed`. Times are CPU time measured
with `time.process_time`. The command writes CSV only; it draws no charts.

## Library use

```python
from algolab.mst import kruskal, prim, total_weight
from algolab.paths import dijkstra
from algolab.toposort import topological_sort
from algolab.knapsack import Item, fractional, knapsack_01
from algolab.backtracking import n_queens, subset_sums

graph = [
    [0, 4, 4, 0, 0, 0],
    [4, 0, 2, 0, 0, 0],
    [4, 2, 0, 3, 4, 2],
    [0, 0, 3, 0, 3, 0],
    [0, 0, 4, 3, 0, 3],
    [0, 0, 2, 0, 3, 0],
]
tree = kruskal(graph)
for edge in tree:
    print(edge)            # e.g. "2 - 1 : 2"
print(total_weight(tree))

print(dijkstra(graph, 0))
print(topological_sort(6, [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]))
print(knapsack_01(50, [10, 20, 30], [60, 100, 120]))
print(fractional([Item(10, 60), Item(20, 100), Item(30, 120)], 50))
print(n_queens(8))
print(list(subset_sums([12, 4, 5, 6, 7, 2, 3, 8, 9], 15)))
```

## Running the tests

```
pip install .[test]
pytest
```