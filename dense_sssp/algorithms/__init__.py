"""Shortest-path algorithms over dense cost matrices."""

from .engine import ShortestPathEngine, build_cost_matrix
from .common.dijkstra import all_pairs_distances, dijkstra_distances

__all__ = [
    "ShortestPathEngine",
    "build_cost_matrix",
    "dijkstra_distances",
    "all_pairs_distances",
]
