from convo_bot.catalog import build_catalogs
from convo_bot.graph import ContextGraph, render_graph
from convo_bot.models import Characteristic, Solution


def _scenario_graph() -> ContextGraph:
    characteristics, solutions = build_catalogs(
        ["Exercise", "Therapy"],
        [
            {
                "name": "Anxiety",
                "affinities": [
                    {"solution": "Therapy", "multiplier": 2.0},
                    {"solution": "Exercise", "multiplier": 1.0},
                ],
            }
        ],
    )
    return ContextGraph(characteristics, solutions)


def test_render_lists_center_characteristic_and_solution_sections() -> None:
    graph = _scenario_graph()
    graph.increment(Characteristic("Anxiety"), 3.0)
    graph.increment(Characteristic("Anxiety"), 3.0)

    lines = render_graph(graph).splitlines()

    assert lines[0].startswith("Center node:")
    assert lines[1] == "\t[centerNode, 6.0 : 0.0*1.0=0.0, edge enabled : Anxiety, 6.0, node enabled]"
    assert lines[3].startswith("Characteristic nodes:")
    assert lines[4] == (
        "\t[Anxiety, 6.0, node enabled; Therapy, 12.0, node enabled : 6.0*2.0=12.0, edge enabled; "
        "Exercise, 6.0, node enabled : 6.0*1.0=6.0, edge enabled]"
    )
    assert lines[6].startswith("Solution nodes:")
    assert lines[7] == "\t[Exercise, 6.0, node enabled; Anxiety, 6.0, node enabled : 6.0*1.0=6.0, edge enabled]"
    assert lines[8] == "\t[Therapy, 12.0, node enabled; Anxiety, 6.0, node enabled : 6.0*2.0=12.0, edge enabled]"


def test_render_shows_stale_edge_values_and_disabled_flags() -> None:
    graph = _scenario_graph()
    graph.increment(Characteristic("Anxiety"), 1.0)
    graph.set_edge_enabled(Characteristic("Anxiety"), Solution("Therapy"), False)
    graph.set_node_enabled(Solution("Exercise"), False)
    graph.increment(Characteristic("Anxiety"), 1.0)

    dump = str(graph)

    assert "Therapy, 2.0, node enabled : 1.0*2.0=2.0, edge disabled" in dump
    assert "Exercise, 1.0, node disabled : 1.0*1.0=1.0, edge enabled" in dump
