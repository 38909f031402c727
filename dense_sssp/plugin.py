"""Plugin-style wrapper: load a graph, run it, emit the results."""

from abc import ABC, abstractmethod
from typing import Optional, TextIO

import numpy as np

from .algorithms.engine import CostMatrixLike, ShortestPathEngine
from .exceptions import PluginStateError

TABLE_HEADER = "Vertex\t\tDistance"


def format_distance(value: float) -> str:
    """Render a distance the way the table prints it (``-1``, ``2.5``, ``inf``)."""

    return f"{float(value):g}"


class GraphPlugin(ABC):
    """Host-facing interface for shortest-path plugins."""

    @abstractmethod
    def load(self, cost_matrix: CostMatrixLike) -> None:
        ...

    @abstractmethod
    def run(self, source: int) -> np.ndarray:
        ...

    @abstractmethod
    def emit(self, distances: np.ndarray, sink: TextIO) -> None:
        ...


class DijkstraPlugin(GraphPlugin):
    """:class:`GraphPlugin` backed by :class:`ShortestPathEngine`."""

    def __init__(self) -> None:
        self._engine: Optional[ShortestPathEngine] = None

    @property
    def engine(self) -> ShortestPathEngine:
        if self._engine is None:
            raise PluginStateError("no graph loaded; call load() first")
        return self._engine

    def load(self, cost_matrix: CostMatrixLike) -> None:
        self._engine = ShortestPathEngine(cost_matrix)

    def run(self, source: int) -> np.ndarray:
        return self.engine.distances_from(source)

    def emit(self, distances: np.ndarray, sink: TextIO) -> None:
        """Write a tab-separated ``(vertex, distance)`` table to ``sink``."""

        sink.write(TABLE_HEADER + "\n")
        for vertex, value in enumerate(distances):
            sink.write(f"{vertex}\t\t{format_distance(value)}\n")
