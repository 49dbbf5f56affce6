"""Command-line solvers that read judge-style input from stdin."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable

from cpkit.dp import knapsack_01, subset_sum
from cpkit.ordering import dfs_toposort, kahn_toposort
from cpkit.shortest_paths import floyd_warshall
from cpkit.traversal import bfs_order

__all__ = ["main"]

NEGATIVE_CYCLE_MARK = -(10**18)
UNREACHABLE_MARK = -1


class _Tokens:
    """Whitespace-separated integers read one at a time."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def next_int(self) -> int:
        try:
            token = next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None
        return int(token)

    def ints(self, count: int) -> list[int]:
        return [self.next_int() for _ in range(count)]


def _node(tokens: _Tokens, n: int) -> int:
    """Read a 1-based node label and return it 0-based."""
    label = tokens.next_int()
    if not 1 <= label <= n:
        raise ValueError(f"node {label} out of range 1..{n}")
    return label - 1


def _format_distance(value: float) -> str:
    if value == math.inf:
        return str(UNREACHABLE_MARK)
    if value == -math.inf:
        return str(NEGATIVE_CYCLE_MARK)
    return str(int(value))


def _floyd(tokens: _Tokens) -> list[str]:
    n, m, q = tokens.ints(3)
    edges = []
    for _ in range(m):
        x = _node(tokens, n)
        y = _node(tokens, n)
        edges.append((x, y, tokens.next_int()))
    dist = floyd_warshall(n, edges)
    lines = []
    for _ in range(q):
        x = _node(tokens, n)
        y = _node(tokens, n)
        lines.append(_format_distance(dist[x][y]))
    return lines


def _read_digraph(tokens: _Tokens) -> list[list[int]]:
    vertices, edges = tokens.ints(2)
    adj: list[list[int]] = [[] for _ in range(vertices)]
    for _ in range(edges):
        x = _node(tokens, vertices)
        y = _node(tokens, vertices)
        adj[x].append(y)
    return adj


def _labels(order: list[int], offset: int = 1) -> list[str]:
    return [" ".join(str(node + offset) for node in order)]


def _kahn(tokens: _Tokens) -> list[str]:
    return _labels(kahn_toposort(_read_digraph(tokens)))


def _toposort(tokens: _Tokens) -> list[str]:
    return _labels(dfs_toposort(_read_digraph(tokens)))


def _bfs(tokens: _Tokens) -> list[str]:
    vertices, edges = tokens.ints(2)
    adj: list[list[int]] = [[] for _ in range(vertices + 1)]
    for _ in range(edges):
        x = _node(tokens, vertices) + 1
        y = _node(tokens, vertices) + 1
        adj[x].append(y)
        adj[y].append(x)
    if vertices < 1:
        raise ValueError("graph has no node 1 to start from")
    return _labels(bfs_order(adj, 1), offset=0)


def _knapsack(tokens: _Tokens) -> list[str]:
    n, capacity = tokens.ints(2)
    weights = tokens.ints(n)
    values = tokens.ints(n)
    return [str(knapsack_01(weights, values, capacity))]


def _subset_sum(tokens: _Tokens) -> list[str]:
    n = tokens.next_int()
    values = tokens.ints(n)
    target = tokens.next_int()
    return ["1" if subset_sum(values, target) else "0"]


_COMMANDS: dict[str, tuple[Callable[[_Tokens], list[str]], str]] = {
    "floyd": (_floyd, "all-pairs shortest paths: n m q, m edges 'x y w', q queries 'x y'"),
    "kahn": (_kahn, "topological order by in-degrees: n m, m directed edges 'x y'"),
    "toposort": (_toposort, "topological order by DFS: n m, m directed edges 'x y'"),
    "bfs": (_bfs, "breadth-first order from node 1: n m, m undirected edges 'x y'"),
    "knapsack": (_knapsack, "0/1 knapsack: n W, n weights, n values"),
    "subset-sum": (_subset_sum, "subset sum: n, n values, target"),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cpkit", description="Solve a classic problem from input on stdin."
    )
    sub = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        sub.add_parser(name, help=help_text)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the chosen solver on stdin and print its answer; return the exit status."""
    args = _parser().parse_args(argv)
    solver, _ = _COMMANDS[args.command]
    try:
        lines = solver(_Tokens(sys.stdin.read()))
    except (ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())