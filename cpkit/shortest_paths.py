"""Shortest paths: Bellman-Ford, Dijkstra and Floyd-Warshall.

Unreachable distances are ``math.inf``; Floyd-Warshall marks distances that a
negative cycle makes unbounded as ``-math.inf``.
"""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence

__all__ = ["INF", "NegativeCycleError", "bellman_ford", "dijkstra", "floyd_warshall"]

INF = math.inf

Edge = tuple[int, int, int]


class NegativeCycleError(ValueError):
    """A negative cycle is reachable from the source.

    ``cycle`` lists its nodes in edge order, beginning and ending with the same node.
    """

    def __init__(self, cycle: Sequence[int]) -> None:
        self.cycle = list(cycle)
        super().__init__("negative cycle: " + " ".join(map(str, self.cycle)))


def _check_source(n: int, source: int) -> None:
    if not 0 <= source < n:
        raise IndexError(f"source {source} out of range 0..{n - 1}")


def bellman_ford(n: int, edges: Iterable[Edge], source: int) -> list[float]:
    """Return shortest distances from ``source`` over directed ``(a, b, cost)`` edges.

    Raises NegativeCycleError if a negative cycle is reachable from ``source``.
    """
    _check_source(n, source)
    edges = list(edges)
    dist: list[float] = [INF] * n
    dist[source] = 0
    pred = [-1] * n
    last = -1
    for _ in range(n):
        last = -1
        for a, b, cost in edges:
            if dist[a] < INF and dist[a] + cost < dist[b]:
                dist[b] = dist[a] + cost
                pred[b] = a
                last = b
        if last == -1:
            break
    if last == -1:
        return dist

    y = last
    for _ in range(n):
        y = pred[y]
    cycle = [y]
    cur = pred[y]
    while True:
        cycle.append(cur)
        if cur == y:
            break
        cur = pred[cur]
    cycle.reverse()
    raise NegativeCycleError(cycle)


def dijkstra(
    n: int, adj: Sequence[Iterable[tuple[int, int]]], source: int
) -> list[float]:
    """Return shortest distances from ``source``; ``adj[u]`` holds ``(v, weight)`` pairs."""
    _check_source(n, source)
    dist: list[float] = [INF] * n
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for neighbour, weight in adj[node]:
            if weight < 0:
                raise ValueError(f"negative edge weight {weight} from {node} to {neighbour}")
            if d + weight < dist[neighbour]:
                dist[neighbour] = d + weight
                heapq.heappush(heap, (dist[neighbour], neighbour))
    return dist


def floyd_warshall(n: int, edges: Iterable[Edge]) -> list[list[float]]:
    """Return the all-pairs distance matrix for undirected ``(x, y, weight)`` edges."""
    if n < 0:
        raise ValueError(f"node count must be non-negative, got {n}")
    dp: list[list[float]] = [[INF] * n for _ in range(n)]
    for i in range(n):
        dp[i][i] = 0
    for x, y, w in edges:
        if not (0 <= x < n and 0 <= y < n):
            raise IndexError(f"edge ({x}, {y}) out of range 0..{n - 1}")
        dp[x][y] = min(dp[x][y], w)
        dp[y][x] = min(dp[y][x], w)

    for k in range(n):
        row_k = dp[k]
        for i in range(n):
            dik = dp[i][k]
            if dik == INF:
                continue
            row_i = dp[i]
            for j in range(n):
                if row_k[j] < INF and dik + row_k[j] < row_i[j]:
                    row_i[j] = dik + row_k[j]

    for i in range(n):
        if dp[i][i] < 0:
            for j in range(n):
                if dp[j][i] < INF:
                    for k in range(n):
                        if dp[i][k] < INF:
                            dp[j][k] = -INF
    return dp