"""Disjoint-set union with path compression and union by size."""

from __future__ import annotations

__all__ = ["UnionFind"]


class UnionFind:
    """Disjoint sets over the elements ``0 .. n-1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self._parent = list(range(n))
        self._size = [1] * n

    def _check(self, u: int) -> None:
        if not 0 <= u < len(self._parent):
            raise IndexError(f"element {u} out of range 0..{len(self._parent) - 1}")

    def find(self, u: int) -> int:
        """Return the representative of the set containing ``u``."""
        self._check(u)
        parent = self._parent
        root = u
        while parent[root] != root:
            root = parent[root]
        while parent[u] != root:
            parent[u], u = root, parent[u]
        return root

    def connected(self, u: int, v: int) -> bool:
        """Tell whether ``u`` and ``v`` are in the same set."""
        return self.find(u) == self.find(v)

    def join(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; return False if they were already one."""
        u = self.find(u)
        v = self.find(v)
        if u == v:
            return False
        if self._size[u] <= self._size[v]:
            self._size[v] += self._size[u]
            self._parent[u] = v
        else:
            self._size[u] += self._size[v]
            self._parent[v] = u
        return True