"""Shortest-path engine holding an immutable dense cost matrix."""

import operator
from typing import Sequence, Union

import numpy as np

from ..exceptions import InvalidGraphError, OutOfRangeError
from .common.dijkstra import all_pairs_distances, dijkstra_distances

CostMatrixLike = Union[np.ndarray, Sequence[Sequence[float]]]


def _check_rows_are_square(cost_matrix: Sequence[Sequence[float]]) -> list:
    """Reject ragged nested sequences before numpy sees them."""

    try:
        rows = list(cost_matrix)
        n_rows = len(rows)
        for row_idx, row in enumerate(rows):
            if len(row) != n_rows:
                raise InvalidGraphError(
                    f"cost matrix must be square: row {row_idx} has {len(row)} "
                    f"entries, expected {n_rows}"
                )
    except TypeError as exc:
        raise InvalidGraphError("cost matrix must be a sequence of rows") from exc
    return rows


def build_cost_matrix(cost_matrix: CostMatrixLike) -> tuple[np.ndarray, np.ndarray]:
    """Copy ``cost_matrix`` into a float64 array plus a boolean edge mask.

    Zero entries mean "no edge" unless ``cost_matrix`` is a masked array,
    in which case masked cells are the absent edges and every unmasked
    cell, zero included, is an edge.
    """

    explicit_mask = np.ma.isMaskedArray(cost_matrix)
    if explicit_mask:
        absent = np.ma.getmaskarray(cost_matrix)
        values = cost_matrix.filled(0)
    else:
        if isinstance(cost_matrix, np.ndarray):
            values = cost_matrix
        else:
            values = _check_rows_are_square(cost_matrix)

    try:
        costs = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidGraphError(f"cost matrix must be numeric: {exc}") from exc

    if costs.ndim == 1 and costs.shape[0] == 0:
        costs = costs.reshape(0, 0)

    if costs.ndim != 2 or costs.shape[0] != costs.shape[1]:
        raise InvalidGraphError(f"cost matrix must be square, got shape {costs.shape}")

    if explicit_mask:
        edge_mask = ~np.asarray(absent, dtype=np.bool_).reshape(costs.shape)
    else:
        edge_mask = costs != 0.0

    return np.ascontiguousarray(costs), np.ascontiguousarray(edge_mask)


class ShortestPathEngine:
    """Single-source shortest distances over a fixed dense cost matrix.

    The engine copies the matrix on construction and never changes it, so
    every call to :meth:`distances_from` is independent of the others.
    Negative weights are accepted but not checked; results for them follow
    the plain Dijkstra relaxation and are not true shortest paths.
    """

    def __init__(self, cost_matrix: CostMatrixLike) -> None:
        self._cost_matrix, self._edge_mask = build_cost_matrix(cost_matrix)
        self._n_vertices = int(self._cost_matrix.shape[0])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n_vertices={self._n_vertices})"

    @property
    def n_vertices(self) -> int:
        return self._n_vertices

    @property
    def cost_matrix(self) -> np.ndarray:
        return self._cost_matrix.copy()

    @property
    def edge_mask(self) -> np.ndarray:
        return self._edge_mask.copy()

    def _check_source(self, source: int) -> int:
        try:
            index = operator.index(source)
        except TypeError as exc:
            raise OutOfRangeError(f"source vertex must be an integer, got {source!r}") from exc

        if self._n_vertices == 0 and index == 0:
            return index
        if not 0 <= index < self._n_vertices:
            raise OutOfRangeError(
                f"source vertex {index} out of range [0, {self._n_vertices})"
            )
        return index

    def distances_from(self, source: int) -> np.ndarray:
        """Return the distance from ``source`` to every vertex.

        Unreached vertices get ``np.inf``. On an empty graph, source ``0``
        yields an empty vector.
        """

        index = self._check_source(source)
        return dijkstra_distances(self._cost_matrix, self._edge_mask, index)

    def all_distances(self) -> np.ndarray:
        """Stack :meth:`distances_from` for every source into an N x N matrix."""

        return all_pairs_distances(self._cost_matrix, self._edge_mask)
