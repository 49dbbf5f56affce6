# cpkit

A small collection of the algorithms that come up again and again in
competitive programming, in plain Python with no runtime dependencies,
plus a `cpkit` command that solves a few classic problems straight from
contest-style input on standard input.

## What is inside

| Module                  | Contents |
|-------------------------|----------|
| `cpkit.numtheory`       | `MOD`, `base_rep`, `binpow`, `gcd_extended`, `is_prime`, `prime_factors`, `sieve_of_eratosthenes`, `SmallestPrimeFactorSieve` |
| `cpkit.grid`            | `MOVES`, `yesno`, `in_bounds`, `neighbours` for four-directional grid work |
| `cpkit.search`          | `partition_point`, a binary search over a monotone predicate |
| `cpkit.dsu`             | `UnionFind` with path compression and union by size |
| `cpkit.dp`              | `knapsack_01`, `subset_sum` |
| `cpkit.traversal`       | `bfs_order`, `dfs_order`, `is_bipartite`, `has_cycle_bfs`, `has_cycle_dfs`, `has_cycle`, `euler_tour` |
| `cpkit.shortest_paths`  | `INF`, `bellman_ford`, `dijkstra`, `floyd_warshall`, `NegativeCycleError` |
| `cpkit.ordering`        | `kahn_toposort`, `dfs_toposort`, `strongly_connected_components`, `kosaraju_scc_count` |
| `cpkit.mst`             | `kruskal_mst_weight` |
| `cpkit.cli`             | `main`, the entry point of the `cpkit` command |

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Library use

```python
from cpkit.numtheory import base_rep, binpow, gcd_extended, is_prime, prime_factors
from cpkit.dsu import UnionFind
from cpkit.dp import knapsack_01, subset_sum

base_rep(10, 2)          # "1010"
binpow(2, 10)            # 1024
is_prime(97)             # True
prime_factors(360)       # [(2, 3), (3, 2), (5, 1)]
g, x, y = gcd_extended(30, 12)   # g == 6 and 30*x + 12*y == 6

uf = UnionFind(5)
uf.join(0, 1)
uf.join(3, 4)
uf.connected(0, 1)       # True
uf.connected(1, 3)       # False

knapsack_01([1, 3, 4], [15, 20, 30], 4)   # 35
subset_sum([3, 34, 4, 12, 5, 2], 9)       # True
```

Graphs are given as adjacency lists: `adj[u]` lists the neighbours of
vertex `u`, with vertices numbered from 0. Weighted graphs for `dijkstra`
and `kruskal_mst_weight` hold `(neighbour, weight)` pairs; `bellman_ford`
and `floyd_warshall` take a list of `(a, b, weight)` edges.

```python
from cpkit.traversal import bfs_order, is_bipartite
from cpkit.ordering import kahn_toposort
from cpkit.shortest_paths import dijkstra

adj = [[1, 2], [0, 3], [0, 3], [1, 2]]
bfs_order(adj, 0)        # [0, 1, 2, 3]
is_bipartite(adj)        # True

dag = [[1], [2], []]
kahn_toposort(dag)       # [0, 1, 2]

dijkstra(3, [[(1, 4), (2, 1)], [], [(1, 2)]], 0)   # [0, 3, 1]
```

Some behaviour worth knowing:

- Unreachable distances are `math.inf` (exported as `INF`).
- `bellman_ford` raises `NegativeCycleError` when a negative cycle is
  reachable from the source; its `cycle` attribute lists the cycle's nodes.
- `dijkstra` raises `ValueError` on a negative edge weight.
- `floyd_warshall` treats its edges as undirected and marks distances made
  unbounded by a negative cycle as `-math.inf`.
- `kahn_toposort` leaves out nodes on or behind a cycle, so a result shorter
  than the node count means the graph is not acyclic.
- `strongly_connected_components` returns the components in topological
  order of the condensed graph.
- `yesno` prints `YES` or `NO` on its own line and also returns it.

## Command line

Installing the package adds a `cpkit` command. It reads whitespace-separated
integers from standard input; node labels in the input are numbered from 1.

```
cpkit --help
```

| Subcommand   | Input | Output |
|--------------|-------|--------|
| `floyd`      | `n m q`, then `m` undirected edges `x y w`, then `q` queries `x y` | one distance per query; `-1` if unreachable, `-1000000000000000000` if unbounded by a negative cycle |
| `kahn`       | `n m`, then `m` directed edges `x y` | a topological order by in-degrees, labels from 1 |
| `toposort`   | `n m`, then `m` directed edges `x y` | a topological order by depth-first search, labels from 1 |
| `bfs`        | `n m`, then `m` undirected edges `x y` | breadth-first order starting at node 1 |
| `knapsack`   | `n W`, then `n` weights, then `n` values | the best total value |
| `subset-sum` | `n`, then `n` values, then the target | `1` if some subset reaches the target, else `0` |

For example:

```
echo "3 4  1 3 4  15 20 30" | cpkit knapsack
```

prints `35`. On malformed input the command prints `error: ...` to standard
error and exits with status 1.

## What it does not do

The `cpkit` command covers only the six problems above; the rest of the
toolkit (Bellman-Ford, Dijkstra, strongly connected components, minimum
spanning trees, number theory and the rest) is available from Python only.