"""A* search over an adjacency-list graph with a Euclidean heuristic."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence

Location = tuple[float, float]
Graph = Sequence[Iterable[tuple[int, float]]]

HEURISTIC_FACTOR = 0.9


def heuristic(node_location: Location, goal_location: Location) -> float:
    """Estimate the remaining distance as 0.9 times the straight-line distance."""
    dx = goal_location[0] - node_location[0]
    dy = goal_location[1] - node_location[1]
    return math.hypot(dx, dy) * HEURISTIC_FACTOR


def astar(start: int, goal: int, graph: Graph, locations: Sequence[Location]) -> int | None:
    """Return the shortest distance from ``start`` to ``goal``.

    ``graph[node]`` yields ``(neighbour, weight)`` pairs and ``locations[node]``
    holds the projected ``(easting, northing)`` of the node. Returns ``None``
    when ``goal`` cannot be reached from ``start``.
    """
    goal_location = locations[goal]
    g_cost: dict[int, float] = {start: 0}
    queue: list[tuple[float, int]] = [(heuristic(locations[start], goal_location), start)]
    visited: set[int] = set()

    while queue:
        _, node = heapq.heappop(queue)

        if node == goal:
            return int(g_cost[goal])

        if node in visited:
            continue
        visited.add(node)

        base = g_cost[node]
        for neighbour, weight in graph[node]:
            if neighbour in visited:
                continue
            tentative = base + weight
            if tentative < g_cost.get(neighbour, math.inf):
                g_cost[neighbour] = tentative
                estimate = tentative + heuristic(locations[neighbour], goal_location)
                heapq.heappush(queue, (estimate, neighbour))

    return None