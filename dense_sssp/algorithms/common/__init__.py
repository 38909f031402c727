"""Numba kernels shared by the engine."""

from .dijkstra import all_pairs_distances, dijkstra_distances

__all__ = [
    "dijkstra_distances",
    "all_pairs_distances",
]
