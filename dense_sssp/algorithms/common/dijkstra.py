"""Dijkstra distance kernel over a dense cost matrix."""

import numpy as np
from numba import njit


@njit
def _min_distance_vertex(dist: np.ndarray, processed: np.ndarray) -> int:
    """Return the unprocessed vertex with the smallest distance.

    Ties go to the last vertex seen in index order.
    """

    min_val = np.inf
    u = 0
    for i in range(dist.shape[0]):
        if (not processed[i]) and (dist[i] <= min_val):
            min_val = dist[i]
            u = i
    return u


@njit
def dijkstra_distances(
    cost_matrix: np.ndarray,
    edge_mask: np.ndarray,
    source: int,
) -> np.ndarray:
    """Compute single-source distances using O(n^2) Dijkstra.

    ``edge_mask[u, v]`` tells whether the edge ``u -> v`` exists; absent
    edges are never relaxed through.
    """

    n_nodes = cost_matrix.shape[0]
    dist = np.full(n_nodes, np.inf)
    processed = np.zeros(n_nodes, dtype=np.bool_)

    if n_nodes == 0:
        return dist

    dist[source] = 0.0

    for _ in range(n_nodes - 1):
        u = _min_distance_vertex(dist, processed)
        processed[u] = True

        if dist[u] == np.inf:
            continue

        row = cost_matrix[u]
        for v in range(n_nodes):
            if processed[v] or not edge_mask[u, v]:
                continue
            alt = dist[u] + row[v]
            if alt < dist[v]:
                dist[v] = alt

    return dist


@njit
def all_pairs_distances(cost_matrix: np.ndarray, edge_mask: np.ndarray) -> np.ndarray:
    """Run the kernel once per source and stack the rows."""

    n_nodes = cost_matrix.shape[0]
    out = np.full((n_nodes, n_nodes), np.inf)
    for source in range(n_nodes):
        out[source] = dijkstra_distances(cost_matrix, edge_mask, source)
    return out
