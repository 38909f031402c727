"""Tests for synthetic cost matrix generation."""

import networkx as nx
import numpy as np

from dense_sssp import ShortestPathEngine
from dense_sssp.fake_data import generate_random_cost_matrix, reference_cost_matrix


def test_reference_cost_matrix_shape():
    graph = reference_cost_matrix()
    assert graph.shape == (4, 4)
    assert graph[0, 2] == -2.0
    assert graph[3, 1] == -1.0
    assert np.isinf(graph[0, 1])


def test_random_matrix_layout():
    data = generate_random_cost_matrix(n_nodes=15, edge_probability=0.4, weight_low=2, weight_high=9, seed=7)
    cost_matrix = data["cost_matrix"]

    assert cost_matrix.shape == (15, 15)
    assert data["n_nodes"] == 15
    assert isinstance(data["graph"], nx.DiGraph)
    assert np.all(np.diag(cost_matrix) == 0.0)

    present = cost_matrix[cost_matrix != 0.0]
    assert present.size == data["n_edges"]
    assert np.all((present >= 2) & (present <= 9))
    assert np.all(present == np.round(present))


def test_random_matrix_is_reproducible():
    first = generate_random_cost_matrix(n_nodes=10, seed=3)
    second = generate_random_cost_matrix(n_nodes=10, seed=3)
    np.testing.assert_array_equal(first["cost_matrix"], second["cost_matrix"])


def test_undirected_matrix_is_symmetric():
    data = generate_random_cost_matrix(n_nodes=12, edge_probability=0.5, seed=11, directed=False)
    cost_matrix = data["cost_matrix"]
    np.testing.assert_array_equal(cost_matrix, cost_matrix.T)


def test_random_matrix_feeds_engine_with_networkx_agreement():
    data = generate_random_cost_matrix(n_nodes=20, edge_probability=0.2, seed=5)
    engine = ShortestPathEngine(data["cost_matrix"])
    result = engine.distances_from(0)

    lengths = nx.single_source_dijkstra_path_length(data["graph"], 0, weight="weight")
    for vertex in range(data["n_nodes"]):
        if vertex in lengths:
            assert result[vertex] == lengths[vertex]
        else:
            assert np.isinf(result[vertex])
