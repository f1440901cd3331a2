# algokit

A small collection of classic algorithms in plain Python, with no
dependencies beyond the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `merge`, `merge_sort`, `quick_sort`, `insertion_sort`, `selection_sort` |
| `algokit.shortest_paths` | `bellman_ford`, `dijkstra`, `floyd_warshall`, `Edge`, `NegativeCycleError` |
| `algokit.spanning_trees` | `prim_mst`, `kruskal_mst`, `DisjointSet` |
| `algokit.knapsack` | `fractional_knapsack`, `knapsack_01`, `Item`, `Portion`, `KnapsackResult` |
| `algokit.string_search` | `lps_table`, `kmp_search`, `rabin_karp` |
| `algokit.backtracking` | `graph_colorings`, `hamiltonian_cycles`, `n_queens`, `render_board`, `subset_sums` |
| `algokit.dynamic` | `lcs_length`, `matrix_chain_order` |
| `algokit.divide_conquer` | `find_min_max`, `binary_search`, `strassen_multiply`, `MinMax` |
| `algokit.cli` | `main`, the `algokit` command |

The sorting functions accept any iterable and return a new list; the input
is left untouched.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Sorting:

```python
from algokit.sorting import merge_sort, quick_sort

merge_sort([5, 3, 8, 4, 2, 7, 1, 6])   # [1, 2, 3, 4, 5, 6, 7, 8]
quick_sort([5, 3, 8, 4, 2, 7, 1, 6])   # [1, 2, 3, 4, 5, 6, 7, 8]
```

Pattern search returns the start index of every match:

```python
from algokit.string_search import kmp_search, rabin_karp

kmp_search("ABABCABAB", "ABABDABACDABABCABAB")   # [10]
rabin_karp("GEEK", "GEEKS FOR GEEKS")            # [0, 10]
```

Both raise `ValueError` for an empty pattern.

Shortest paths. `dijkstra` takes an adjacency matrix in which `0` means
"no edge"; unreachable vertices get `math.inf`:

```python
from algokit.shortest_paths import dijkstra

graph = [
    [0, 6, 0, 1, 0],
    [6, 0, 5, 2, 2],
    [0, 5, 0, 0, 5],
    [1, 2, 0, 0, 1],
    [0, 2, 5, 1, 0],
]
dijkstra(graph, 0)                     # [0, 3, 7, 1, 2]
```

`bellman_ford` takes a vertex count and a list of `Edge` values or
`(src, dest, weight)` tuples, and raises `NegativeCycleError` when a
negative-weight cycle is reachable from the source:

```python
from algokit.shortest_paths import bellman_ford

edges = [(0, 1, 6), (0, 3, 1), (1, 2, 5), (1, 3, 2),
         (1, 4, 2), (2, 4, 5), (3, 4, 1), (4, 2, -2)]
bellman_ford(5, edges, 0)              # [0, 6, 0, 1, 2]
```

`floyd_warshall` takes a square matrix with `math.inf` for missing edges and
returns a new matrix of all-pairs distances.

Spanning trees. `prim_mst` returns a list of `Edge` values (and raises
`ValueError` for a disconnected graph); `kruskal_mst` returns the chosen
edges together with their total weight:

```python
from algokit.spanning_trees import kruskal_mst

edges = [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)]
chosen, cost = kruskal_mst(4, edges)   # cost == 19
```

Knapsack. Both functions return a `KnapsackResult` with `total_value` and
the `portions` taken:

```python
from algokit.knapsack import fractional_knapsack, knapsack_01

fractional_knapsack(50, [(10, 60), (20, 100), (30, 120)]).total_value  # 240.0
knapsack_01(50, [10, 20, 30], [60, 100, 120]).total_value              # 220
```

Dynamic programming:

```python
from algokit.dynamic import lcs_length, matrix_chain_order

lcs_length("ABCBDAB", "BDCABA")        # 4
matrix_chain_order([1, 4, 5, 2])       # 30
```

Divide and conquer:

```python
from algokit.divide_conquer import binary_search, find_min_max, strassen_multiply

find_min_max([3, 7, 1, 9, 4, 2, 8])               # MinMax(minimum=1, maximum=9)
binary_search([1, 2, 3, 4, 7, 8, 9], 4)           # 3  (-1 when absent)
strassen_multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])  # [[19, 22], [43, 50]]
```

Backtracking searches are generators that yield every solution:

```python
from algokit.backtracking import n_queens, render_board, subset_sums

list(subset_sums([2, 3, 5, 6, 1], 7))  # [(2, 5), (6, 1)]

for columns in n_queens(5):
    print(render_board(columns))
    print()
```

`graph_colorings(graph, num_colors)` yields colourings as tuples of colours
`1..num_colors`, and `hamiltonian_cycles(graph, start)` yields cycles that
begin and end at `start`; vertices count from 0.

## Command line

Installing the package provides an `algokit` command with two subcommands.

```
algokit lcs ABCBDAB BDCABA
```

prints `Length of LCS: 4`. Either string may be left out, in which case it
is read from standard input after a prompt.

```
algokit sort --method merge 9 4 7 1
```

prints `Sorted array: 1 4 7 9`. `--method` is `quick` (the default) or
`merge`; with no numbers the array `5 3 8 4 2 7 1 6` is sorted.

The other algorithms are available only from Python; the command does not
expose them.