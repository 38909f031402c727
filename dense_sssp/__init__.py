"""Dense-matrix single-source shortest paths."""

from .algorithms import ShortestPathEngine
from .exceptions import DenseSSSPError, InvalidGraphError, OutOfRangeError, PluginStateError
from .fake_data import generate_random_cost_matrix, reference_cost_matrix
from .plugin import DijkstraPlugin, GraphPlugin

__all__ = [
    "ShortestPathEngine",
    "DenseSSSPError",
    "InvalidGraphError",
    "OutOfRangeError",
    "PluginStateError",
    "GraphPlugin",
    "DijkstraPlugin",
    "generate_random_cost_matrix",
    "reference_cost_matrix",
]
