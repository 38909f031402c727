"""Synthetic cost matrix generation utilities."""

from typing import Dict

import networkx as nx
import numpy as np


def reference_cost_matrix() -> np.ndarray:
    """Return the 4-node demo graph, negative edges included."""

    inf = np.inf
    return np.array(
        [
            [0.0, inf, -2.0, inf],
            [4.0, 0.0, 3.0, inf],
            [inf, inf, 0.0, 2.0],
            [inf, -1.0, inf, 0.0],
        ]
    )


def generate_random_cost_matrix(
    n_nodes: int = 20,
    edge_probability: float = 0.3,
    weight_low: int = 1,
    weight_high: int = 20,
    seed: int = 42,
    directed: bool = True,
) -> Dict[str, object]:
    """Generate a G(n, p) random graph and its dense integer cost matrix.

    Missing edges are stored as ``0``.
    """

    rng = np.random.default_rng(seed)

    # =============== 1. Random graph ===============
    G = nx.gnp_random_graph(n_nodes, edge_probability, seed=seed, directed=directed)

    # =============== 2. Weights ===============
    edges = list(G.edges())
    m = len(edges)
    edge_weight = rng.integers(weight_low, weight_high + 1, size=m).astype(float)

    cost_matrix = np.zeros((n_nodes, n_nodes), dtype=float)
    for k, (u, v) in enumerate(edges):
        w = edge_weight[k]
        G[u][v]["weight"] = w
        cost_matrix[u, v] = w
        if not directed:
            cost_matrix[v, u] = w

    data = dict(
        graph=G,
        cost_matrix=cost_matrix,
        n_nodes=n_nodes,
        n_edges=m,
    )

    return data
