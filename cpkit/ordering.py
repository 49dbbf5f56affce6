"""Orderings of directed graphs: topological sorts and strongly connected components."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

__all__ = [
    "kahn_toposort",
    "dfs_toposort",
    "strongly_connected_components",
    "kosaraju_scc_count",
]

Adjacency = Sequence[Sequence[int]]


def _check_edges(adj: Adjacency) -> None:
    n = len(adj)
    for u, targets in enumerate(adj):
        for v in targets:
            if not 0 <= v < n:
                raise IndexError(f"edge ({u}, {v}) out of range 0..{n - 1}")


def kahn_toposort(adj: Adjacency) -> list[int]:
    """Return a topological order of the directed graph using in-degree counting.

    Nodes on or behind a cycle never reach in-degree zero and are left out, so a
    result shorter than the node count means the graph has a cycle.
    """
    _check_edges(adj)
    indegree = [0] * len(adj)
    for targets in adj:
        for v in targets:
            indegree[v] += 1
    queue = deque(node for node, deg in enumerate(indegree) if deg == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for v in adj[node]:
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    return order


def _finish_order(adj: Adjacency) -> list[int]:
    """Return nodes in the order their depth-first searches finish."""
    visited = [False] * len(adj)
    finished = []
    for start in range(len(adj)):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adj[start]))]
        while stack:
            node, targets = stack[-1]
            for v in targets:
                if not visited[v]:
                    visited[v] = True
                    stack.append((v, iter(adj[v])))
                    break
            else:
                stack.pop()
                finished.append(node)
    return finished


def dfs_toposort(adj: Adjacency) -> list[int]:
    """Return a topological order of a directed acyclic graph by reversed DFS finishing time."""
    _check_edges(adj)
    return _finish_order(adj)[::-1]


def strongly_connected_components(adj: Adjacency) -> list[list[int]]:
    """Return the strongly connected components found by Kosaraju's algorithm.

    Components come in topological order of the condensed graph: every edge
    between two components runs from an earlier one to a later one.
    """
    _check_edges(adj)
    n = len(adj)
    transposed: list[list[int]] = [[] for _ in range(n)]
    for u, targets in enumerate(adj):
        for v in targets:
            transposed[v].append(u)

    visited = [False] * n
    components = []
    for start in reversed(_finish_order(adj)):
        if visited[start]:
            continue
        visited[start] = True
        component = [start]
        stack = [start]
        while stack:
            node = stack.pop()
            for v in transposed[node]:
                if not visited[v]:
                    visited[v] = True
                    component.append(v)
                    stack.append(v)
        components.append(component)
    return components


def kosaraju_scc_count(adj: Adjacency) -> int:
    """Return the number of strongly connected components."""
    return len(strongly_connected_components(adj))