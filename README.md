# algoshelf

A small library of classic algorithms written in plain Python. It depends
on nothing beyond the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is on the shelf

| Module | Contents |
| --- | --- |
| `algoshelf.strings` | `is_scramble`, `is_match` (wildcard `?` / `*`), `reverse_with_stack`, `BoundedStack` |
| `algoshelf.numbers` | `to_decimal`, `from_decimal`, `digit_value`, `digit_char`, bit helpers (`get_bit`, `set_bit`, `clear_bit`, `update_bit`, `count_ones`, `is_power_of_two`), `subsets`, `best_shift` |
| `algoshelf.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `wave_sort`, `counting_sort` |
| `algoshelf.arrays` | `max_subarray_sum`, `kth_largest_and_smallest`, `subset_sums`, `binary_search`, `linear_search` |
| `algoshelf.graph` | `Graph` (BFS, DFS component count, bridges, articulation points, Bellman-Ford, lazy Dijkstra, Floyd-Warshall, Prim, Tarjan SCC, topological sort, DAG shortest path, Euler path), `reconstruct_path`, `tsp_table`, `tsp_path`, `INF` |
| `algoshelf.matrix` | `floyd_warshall_matrix`, `format_distances`, `INF` (the sentinel `99999`) |
| `algoshelf.grid` | `flood_fill` |
| `algoshelf.dsu` | `DisjointSetUnion` (tracks vertices and edges per component) |
| `algoshelf.mst` | `kruskal`, `prim_matrix` |
| `algoshelf.cycles` | `has_cycle_colored`, `has_cycle_from`, `has_cycle_directed` |
| `algoshelf.adjacency` | `AdjacencyList`, `build_undirected` |
| `algoshelf.components` | `kosaraju_components`, `mother_vertex`, `count_connected_components`, `is_bipartite` |
| `algoshelf.petersen` | `petersen_walk` |

## Examples

```python
from algoshelf.strings import is_match, is_scramble
from algoshelf.sorting import merge_sort
from algoshelf.arrays import max_subarray_sum, binary_search
from algoshelf.graph import Graph, reconstruct_path

is_match("adceb", "*a*b")          # True
is_scramble("great", "rgeat")      # True
merge_sort([12, 11, 13, 5, 6, 7])  # [5, 6, 7, 11, 12, 13]
max_subarray_sum([-2, -3, 4, -1, -2, 1, 5, -3])  # 7
binary_search([2, 5, 6, 8], 7)     # None

g = Graph(4, directed=False)
g.add_edge(1, 2, 1)
g.add_edge(2, 3, 1)
g.add_edge(3, 4, 1)
prev = g.bfs(1)
reconstruct_path(prev, 1, 4)       # [1, 2, 3, 4]
```

## Conventions

- The sorting functions take any iterable and return a new sorted list;
  the input is not changed. `counting_sort` sorts the characters of a
  string and accepts only code points below 256.
- The searches return an index, or `None` when the key is absent.
- `to_decimal` raises `ValueError` for a digit that is not valid in the
  given base; `from_decimal` returns `""` for zero and negative numbers.
- `Graph` numbers its nodes from 1 and uses `math.inf` for unreachable
  distances (`-inf` where `bellman_ford` finds a negative cycle).
  `has_eulerian_path` and `euler_path` work on directed graphs only, and
  `euler_path` raises `ValueError` when no path exists.
- `cycles` and `components` accept either a mapping from node to
  neighbours or a sequence of neighbour lists indexed from 0.
  `AdjacencyList`, `count_connected_components`, `kruskal` and
  `DisjointSetUnion` number vertices from 0.
- `flood_fill` returns a new grid and leaves the input unchanged.

## What it does not do

The package is a library only: it has no command-line programs, and it
reads no input and prints nothing. Results are returned as values; the
only text formatting offered is `format_distances` and
`AdjacencyList.format`.