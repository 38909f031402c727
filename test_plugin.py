"""Tests for the plugin wrapper and its table output."""

import io

import numpy as np
import pytest

from dense_sssp import DijkstraPlugin, GraphPlugin, OutOfRangeError, PluginStateError
from dense_sssp.fake_data import reference_cost_matrix
from dense_sssp.plugin import format_distance


def test_graph_plugin_is_abstract():
    with pytest.raises(TypeError):
        GraphPlugin()


def test_run_before_load_fails():
    plugin = DijkstraPlugin()
    with pytest.raises(PluginStateError):
        plugin.run(0)


def test_load_then_run():
    plugin = DijkstraPlugin()
    plugin.load(reference_cost_matrix())
    np.testing.assert_array_equal(plugin.run(1), [4.0, 0.0, 3.0, 5.0])
    assert plugin.engine.n_vertices == 4


def test_reload_replaces_the_graph():
    plugin = DijkstraPlugin()
    plugin.load(reference_cost_matrix())
    plugin.load([[0, 7], [0, 0]])
    np.testing.assert_array_equal(plugin.run(0), [0.0, 7.0])


def test_run_propagates_range_errors():
    plugin = DijkstraPlugin()
    plugin.load(reference_cost_matrix())
    with pytest.raises(OutOfRangeError):
        plugin.run(4)


def test_emit_writes_tab_separated_table():
    plugin = DijkstraPlugin()
    plugin.load(reference_cost_matrix())
    sink = io.StringIO()
    plugin.emit(plugin.run(0), sink)
    assert sink.getvalue() == (
        "Vertex\t\tDistance\n"
        "0\t\t0\n"
        "1\t\t-1\n"
        "2\t\t-2\n"
        "3\t\t0\n"
    )


def test_emit_renders_unreachable_as_inf():
    plugin = DijkstraPlugin()
    plugin.load([[0, 0], [3, 0]])
    sink = io.StringIO()
    plugin.emit(plugin.run(0), sink)
    assert sink.getvalue().splitlines()[-1] == "1\t\tinf"


@pytest.mark.parametrize(
    "value, text",
    [(0.0, "0"), (-1.0, "-1"), (2.5, "2.5"), (np.inf, "inf"), (np.float64(12.0), "12")],
)
def test_format_distance(value, text):
    assert format_distance(value) == text
