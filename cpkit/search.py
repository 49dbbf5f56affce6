"""Binary search over a monotone predicate."""

from __future__ import annotations

from collections.abc import Callable

__all__ = ["partition_point"]


def partition_point(lo: int, hi: int, check: Callable[[int], bool]) -> int:
    """Return the first index in ``(lo, hi]`` where ``check`` holds.

    ``check`` must be monotone (false then true) on ``(lo, hi)``; it is assumed
    false at ``lo`` and true at ``hi`` and is never called on either end.
    """
    while lo + 1 < hi:
        mid = lo + (hi - lo) // 2
        if check(mid):
            hi = mid
        else:
            lo = mid
    return hi