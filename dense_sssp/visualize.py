"""Plotly-based visualization helpers for cost matrices and distances."""

from typing import Optional

import networkx as nx
import numpy as np
import plotly.graph_objects as go

from .plugin import format_distance


def _finite_or_nan(values: np.ndarray) -> np.ndarray:
    values = np.asarray(values, dtype=float)
    return np.where(np.isfinite(values), values, np.nan)


def _cost_matrix_to_digraph(cost_matrix: np.ndarray, edge_mask: Optional[np.ndarray]) -> nx.DiGraph:
    n_nodes = cost_matrix.shape[0]
    if edge_mask is None:
        edge_mask = cost_matrix != 0.0

    G = nx.DiGraph()
    G.add_nodes_from(range(n_nodes))
    for u in range(n_nodes):
        for v in range(n_nodes):
            if u == v or not edge_mask[u, v] or not np.isfinite(cost_matrix[u, v]):
                continue
            G.add_edge(u, v, weight=float(cost_matrix[u, v]))
    return G


def visualize_distance_heatmap(
    distances: np.ndarray,
    title: str = "Shortest distances",
    return_fig: bool = False,
) -> go.Figure | None:
    """Heatmap of an all-pairs distance matrix; unreachable cells are left blank."""

    distances = np.atleast_2d(np.asarray(distances, dtype=float))
    n_rows, n_cols = distances.shape
    text = [[format_distance(distances[i, j]) for j in range(n_cols)] for i in range(n_rows)]

    fig = go.Figure(
        go.Heatmap(
            z=_finite_or_nan(distances),
            x=list(range(n_cols)),
            y=list(range(n_rows)),
            text=text,
            texttemplate="%{text}",
            colorscale="Viridis",
            colorbar=dict(title="distance"),
            hovertemplate="source %{y} -> %{x}: %{text}<extra></extra>",
        )
    )
    fig.update_layout(
        title=title,
        xaxis=dict(title="target vertex", dtick=1),
        yaxis=dict(title="source vertex", dtick=1, autorange="reversed"),
        template="plotly_white",
    )

    if return_fig:
        return fig
    fig.show(renderer="browser")
    return None


def visualize_cost_graph(
    cost_matrix: np.ndarray,
    edge_mask: Optional[np.ndarray] = None,
    distances: Optional[np.ndarray] = None,
    node_size: int = 18,
    seed: int = 42,
    title: str = "Cost graph",
    return_fig: bool = False,
) -> go.Figure | None:
    """Draw the directed graph behind ``cost_matrix`` with a spring layout.

    When ``distances`` is given, nodes are coloured by distance from the source.
    """

    cost_matrix = np.asarray(cost_matrix, dtype=float)
    G = _cost_matrix_to_digraph(cost_matrix, edge_mask)
    pos = nx.spring_layout(G, seed=seed)

    edge_x: list[float | None] = []
    edge_y: list[float | None] = []
    label_x: list[float] = []
    label_y: list[float] = []
    label_text: list[str] = []
    for u, v, attrs in G.edges(data=True):
        x0, y0 = pos[u]
        x1, y1 = pos[v]
        edge_x += [x0, x1, None]
        edge_y += [y0, y1, None]
        label_x.append((x0 + x1) / 2.0)
        label_y.append((y0 + y1) / 2.0)
        label_text.append(format_distance(attrs["weight"]))

    edge_lines_trace = go.Scatter(
        x=edge_x,
        y=edge_y,
        mode="lines",
        line=dict(width=1.5, color="#888"),
        hoverinfo="none",
        showlegend=False,
    )
    edge_label_trace = go.Scatter(
        x=label_x,
        y=label_y,
        mode="text",
        text=label_text,
        textfont=dict(size=10, color="#444"),
        hoverinfo="none",
        showlegend=False,
    )

    nodes = list(G.nodes())
    node_x = [pos[n][0] for n in nodes]
    node_y = [pos[n][1] for n in nodes]
    marker = dict(size=node_size, line=dict(width=1, color="#333"))
    hover = [f"vertex {n}" for n in nodes]
    if distances is not None:
        marker.update(
            color=_finite_or_nan(distances),
            colorscale="Viridis",
            showscale=True,
            colorbar=dict(title="distance"),
        )
        hover = [f"vertex {n}: {format_distance(distances[n])}" for n in nodes]

    node_trace = go.Scatter(
        x=node_x,
        y=node_y,
        mode="markers+text",
        text=[str(n) for n in nodes],
        textposition="top center",
        marker=marker,
        hoverinfo="text",
        hovertext=hover,
        showlegend=False,
    )

    fig = go.Figure(data=[edge_lines_trace, edge_label_trace, node_trace])
    fig.update_layout(
        title=title,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        template="plotly_white",
    )

    if return_fig:
        return fig
    fig.show(renderer="browser")
    return None
