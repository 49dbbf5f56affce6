"""Graph traversals: BFS/DFS orders, bipartiteness, undirected cycle detection, Euler tour."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

__all__ = [
    "bfs_order",
    "dfs_order",
    "is_bipartite",
    "has_cycle_bfs",
    "has_cycle_dfs",
    "has_cycle",
    "euler_tour",
]

Adjacency = Sequence[Sequence[int]]


def _check_node(adj: Adjacency, node: int) -> None:
    if not 0 <= node < len(adj):
        raise IndexError(f"node {node} out of range 0..{len(adj) - 1}")


def bfs_order(adj: Adjacency, start: int) -> list[int]:
    """Return the nodes reachable from ``start`` in breadth-first order."""
    _check_node(adj, start)
    visited = [False] * len(adj)
    visited[start] = True
    order = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adj[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return order


def dfs_order(adj: Adjacency, start: int) -> list[int]:
    """Return the nodes reachable from ``start`` in depth-first preorder."""
    _check_node(adj, start)
    visited = [False] * len(adj)
    visited[start] = True
    order = [start]
    stack = [iter(adj[start])]
    while stack:
        for neighbour in stack[-1]:
            if not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                stack.append(iter(adj[neighbour]))
                break
        else:
            stack.pop()
    return order


def is_bipartite(adj: Adjacency) -> bool:
    """Tell whether the undirected graph can be two-coloured."""
    colour: list[int | None] = [None] * len(adj)
    for first in range(len(adj)):
        if colour[first] is not None:
            continue
        colour[first] = 1
        queue = deque([first])
        while queue:
            u = queue.popleft()
            for v in adj[u]:
                if colour[v] is None:
                    colour[v] = 3 - colour[u]
                    queue.append(v)
                elif colour[v] == colour[u]:
                    return False
    return True


def _cycle_bfs(adj: Adjacency, src: int, visited: list[bool]) -> bool:
    visited[src] = True
    queue = deque([(src, -1)])
    while queue:
        node, parent = queue.popleft()
        for neighbour in adj[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append((neighbour, node))
            elif neighbour != parent:
                return True
    return False


def _cycle_dfs(adj: Adjacency, src: int, visited: list[bool]) -> bool:
    visited[src] = True
    stack = [(src, -1, iter(adj[src]))]
    while stack:
        node, parent, neighbours = stack[-1]
        for neighbour in neighbours:
            if not visited[neighbour]:
                visited[neighbour] = True
                stack.append((neighbour, node, iter(adj[neighbour])))
                break
            if neighbour != parent:
                return True
        else:
            stack.pop()
    return False


def has_cycle_bfs(adj: Adjacency, src: int) -> bool:
    """Tell, by breadth-first search, whether the undirected component of ``src`` has a cycle."""
    _check_node(adj, src)
    return _cycle_bfs(adj, src, [False] * len(adj))


def has_cycle_dfs(adj: Adjacency, src: int) -> bool:
    """Tell, by depth-first search, whether the undirected component of ``src`` has a cycle."""
    _check_node(adj, src)
    return _cycle_dfs(adj, src, [False] * len(adj))


def has_cycle(adj: Adjacency) -> bool:
    """Tell whether any connected component of the undirected graph has a cycle."""
    visited = [False] * len(adj)
    return any(
        not visited[node] and _cycle_dfs(adj, node, visited) for node in range(len(adj))
    )


def euler_tour(tree: Adjacency, root: int) -> tuple[list[int], list[int]]:
    """Return ``(entry, exit)`` times of an Euler tour of ``tree`` from ``root``.

    Times start at 1 and one clock ticks on every entry and exit; nodes not
    reached from ``root`` keep time 0.
    """
    _check_node(tree, root)
    entry = [0] * len(tree)
    exit_ = [0] * len(tree)
    timer = 1
    entry[root] = timer
    stack = [(root, -1, iter(tree[root]))]
    while stack:
        node, parent, children = stack[-1]
        for child in children:
            if child != parent:
                timer += 1
                entry[child] = timer
                stack.append((child, node, iter(tree[child])))
                break
        else:
            stack.pop()
            timer += 1
            exit_[node] = timer
    return entry, exit_