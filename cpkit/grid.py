"""Small helpers for grid problems and judge-style answers."""

from __future__ import annotations

import sys
from collections.abc import Iterator

__all__ = ["MOVES", "yesno", "in_bounds", "neighbours"]

MOVES: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, -1), (0, 1))


def yesno(flag: bool) -> str:
    """Write ``YES`` or ``NO`` on its own line to standard output and return it."""
    answer = "YES" if flag else "NO"
    sys.stdout.write(answer + "\n")
    return answer


def in_bounds(i: int, j: int, rows: int, cols: int) -> bool:
    """Tell whether cell ``(i, j)`` lies inside a ``rows`` x ``cols`` grid."""
    return 0 <= i < rows and 0 <= j < cols


def neighbours(i: int, j: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    """Yield the orthogonal neighbours of ``(i, j)`` that lie inside the grid, in ``MOVES`` order."""
    for di, dj in MOVES:
        ni, nj = i + di, j + dj
        if in_bounds(ni, nj, rows, cols):
            yield ni, nj