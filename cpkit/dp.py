"""Classic dynamic-programming solutions: 0/1 knapsack and subset sum."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["knapsack_01", "subset_sum"]


def knapsack_01(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Return the best total value of items, each used at most once, fitting in ``capacity``."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    if any(w < 0 for w in weights):
        raise ValueError("weights must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for w in range(capacity, weight - 1, -1):
            best[w] = max(best[w], best[w - weight] + value)
    return best[capacity]


def subset_sum(values: Sequence[int], target: int) -> bool:
    """Tell whether some subset of ``values`` sums exactly to ``target``."""
    if target < 0:
        raise ValueError(f"target must be non-negative, got {target}")
    if any(v < 0 for v in values):
        raise ValueError("values must be non-negative")
    reachable = [False] * (target + 1)
    reachable[0] = True
    for v in values:
        for j in range(target, max(v, 1) - 1, -1):
            if reachable[j - v]:
                reachable[j] = True
    return reachable[target]