"""Algorithms for competitive programming: number theory, graphs, union-find, DP and a small CLI."""

__version__ = "0.1.0"