import pytest

from sixdegrees.comparison import (
    compare_average_shortest_paths,
    comparison_to_dict,
    format_comparison,
)
from sixdegrees.graph import ReviewGraph, build_undirected


def test_shorter_path_graph_wins():
    graph1 = build_undirected([("A", "B"), ("B", "C")])
    graph2 = build_undirected([("A", "B"), ("B", "D"), ("D", "E")])
    comparison = compare_average_shortest_paths(graph1, graph2)

    assert comparison.average_1 == pytest.approx(8 / 6)
    assert comparison.average_2 == pytest.approx(20 / 12)
    assert comparison.average_1 < comparison.average_2
    assert comparison.shorter == 1
    assert comparison.holds_1 is True
    assert comparison.holds_2 is True

    lines = format_comparison(comparison)
    assert lines == [
        "Graph 1: Average Shortest Path Length = 1.33",
        "Six degrees of separation hold true for Graph 1.",
        "Graph 2: Average Shortest Path Length = 1.67",
        "Six degrees of separation hold true for Graph 2.",
        "Graph 1 has a shorter average shortest path.",
    ]


def test_threshold_is_inclusive():
    # a path of n nodes averages (n + 1) / 3: 17 nodes -> 6.0, 18 nodes -> 6.33
    long_path = build_undirected((f"n{i}", f"n{i + 1}") for i in range(16))
    longer_path = build_undirected((f"n{i}", f"n{i + 1}") for i in range(17))
    comparison = compare_average_shortest_paths(long_path, longer_path)

    assert comparison.average_1 == pytest.approx(6.0)
    assert comparison.holds_1 is True
    assert comparison.holds_2 is False
    assert comparison.shorter == 1
    assert "Six degrees of separation do not hold true for Graph 2." in format_comparison(comparison)


def test_custom_threshold(path_graph):
    comparison = compare_average_shortest_paths(path_graph, path_graph, threshold=1.5)
    assert comparison.holds_1 is False
    assert comparison.shorter == 0
    assert format_comparison(comparison)[-1] == "Both graphs have the same average shortest path."


def test_undefined_average_is_not_compared(path_graph):
    empty = ReviewGraph()
    comparison = compare_average_shortest_paths(path_graph, empty)

    assert comparison.average_2 is None
    assert comparison.holds_2 is None
    assert comparison.shorter is None
    lines = format_comparison(comparison)
    assert "Graph 2: Average Shortest Path Length = undefined (no connected pairs)" in lines
    assert lines[-1] == "Average shortest paths cannot be compared."


def test_comparison_to_dict(path_graph):
    graph2 = build_undirected([("A", "B")])
    data = comparison_to_dict(compare_average_shortest_paths(path_graph, graph2))

    assert data["threshold"] == 6.0
    assert data["shorter_graph"] == 2
    assert data["graphs"][0]["summary"]["nodes"] == 4
    assert data["graphs"][1]["path_statistics"]["average_path_length"] == 1.0
    assert data["graphs"][1]["six_degrees_hold"] is True
