import math

import pytest

from spbench.astar import astar, heuristic


W01, W12, W02, W23, W13 = 4, 3, 10, 2, 8

GRAPH = [
    [(1, W01), (2, W02)],
    [(2, W12), (3, W13)],
    [(3, W23)],
    [],
    [(0, 1)],
]

ZERO_LOCATIONS = [(0.0, 0.0)] * len(GRAPH)

# Points along a line: straight-line distances never exceed the edge weights.
LINE_LOCATIONS = [(0.0, 0.0), (2.0, 0.0), (3.0, 0.0), (4.0, 0.0), (-1.0, 0.0)]


def test_heuristic_pythagorean_triple():
    assert heuristic((0.0, 0.0), (3.0, 4.0)) == pytest.approx(4.5)


def test_heuristic_is_symmetric():
    a, b = (1.5, -2.0), (7.25, 3.0)
    assert heuristic(a, b) == pytest.approx(heuristic(b, a))


def test_heuristic_same_point():
    assert heuristic((5.0, 5.0), (5.0, 5.0)) == 0


def test_shortest_path_with_zero_heuristic():
    assert astar(0, 3, GRAPH, ZERO_LOCATIONS) == W01 + W12 + W23


def test_shortest_path_with_admissible_heuristic():
    assert astar(0, 3, GRAPH, LINE_LOCATIONS) == W01 + W12 + W23


def test_heuristic_does_not_change_result():
    for start in range(len(GRAPH)):
        for goal in range(len(GRAPH)):
            assert astar(start, goal, GRAPH, ZERO_LOCATIONS) == astar(
                start, goal, GRAPH, LINE_LOCATIONS
            )


def test_start_equals_goal():
    assert astar(2, 2, GRAPH, LINE_LOCATIONS) == 0


def test_unreachable_goal_returns_none():
    assert astar(3, 0, GRAPH, LINE_LOCATIONS) is None


def test_path_through_extra_node():
    assert astar(4, 2, GRAPH, LINE_LOCATIONS) == 1 + W01 + W12


def test_distance_is_truncated_to_int():
    graph = [[(1, 2.75)], []]
    result = astar(0, 1, graph, [(0.0, 0.0), (0.0, 0.0)])
    assert result == math.floor(2.75)


def test_out_of_range_node_raises():
    with pytest.raises(IndexError):
        astar(0, 10, GRAPH, LINE_LOCATIONS)