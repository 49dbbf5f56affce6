"""Minimum spanning tree weight by Kruskal's algorithm."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cpkit.dsu import UnionFind

__all__ = ["kruskal_mst_weight"]


def kruskal_mst_weight(n: int, adj: Sequence[Iterable[tuple[int, int]]]) -> int:
    """Return the weight of a minimum spanning forest.

    ``adj[u]`` holds ``(v, weight)`` pairs for the undirected graph on nodes
    ``0 .. n-1``; an edge may be listed from both ends.
    """
    if len(adj) != n:
        raise ValueError(f"adjacency has {len(adj)} rows for {n} nodes")
    edges = sorted(
        (weight, node, neighbour)
        for node in range(n)
        for neighbour, weight in adj[node]
    )
    sets = UnionFind(n)
    total = 0
    for weight, u, v in edges:
        if sets.join(u, v):
            total += weight
    return total