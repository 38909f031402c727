"""Demo entry point: print shortest distances for a small hardcoded graph."""

import os
import sys

import numpy as np

from .fake_data import generate_random_cost_matrix, reference_cost_matrix
from .plugin import DijkstraPlugin
from .visualize import visualize_distance_heatmap

# Parameters
RANDOM_N_NODES = 12
RANDOM_EDGE_PROBABILITY = 0.25
RANDOM_SEED = 42
WRITE_HTML = False


def main() -> None:
    # ============================================================
    # 1. Reference graph, every source
    # ============================================================
    print("=== Reference Graph ===")
    plugin = DijkstraPlugin()
    plugin.load(reference_cost_matrix())
    for source in range(plugin.engine.n_vertices):
        print(f"\n--- source {source} ---")
        plugin.emit(plugin.run(source), sys.stdout)

    # ============================================================
    # 2. Random graph
    # ============================================================
    print("\n=== Random Graph ===")
    data = generate_random_cost_matrix(
        n_nodes=RANDOM_N_NODES,
        edge_probability=RANDOM_EDGE_PROBABILITY,
        seed=RANDOM_SEED,
    )
    plugin.load(data["cost_matrix"])
    all_distances = plugin.engine.all_distances()
    reachable = np.isfinite(all_distances)
    print(f"  nodes: {data['n_nodes']}, edges: {data['n_edges']}")
    print(f"  reachable pairs: {int(reachable.sum())} / {all_distances.size}")
    if reachable.any():
        print(f"  longest finite distance: {all_distances[reachable].max():g}")

    # ============================================================
    # 3. Optional HTML export
    # ============================================================
    if WRITE_HTML:
        output_path = os.path.join(os.path.dirname(__file__), "..", "distances.html")
        output_path = os.path.abspath(output_path)
        fig = visualize_distance_heatmap(all_distances, title="Random graph distances", return_fig=True)
        fig.write_html(output_path)
        print(f"  saved heatmap to: {output_path}")


if __name__ == "__main__":
    main()
