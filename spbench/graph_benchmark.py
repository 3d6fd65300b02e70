"""Timing of shortest-distance searches run directly on a graph."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence

from .astar import Location, astar
from .benchmark import BenchmarkResult, benchmark, benchmark_with_mapping

Graph = Sequence[Iterable[tuple[int, float]]]
Search = Callable[[int, int, Graph], "int | None"]


def graph_benchmark(
    trips: Sequence[tuple[int, int]], graph: Graph, search: Search
) -> BenchmarkResult:
    """Answer every trip with ``search(source, target, graph)`` and time it.

    ``search`` is a plain graph search such as Dijkstra's algorithm; it returns
    the shortest distance or None when the target is unreachable.
    """
    return benchmark(trips, lambda source, target: search(source, target, graph))


def graph_benchmark_with_mapping(
    trips: Sequence[tuple[int, int]],
    graph: Graph,
    search: Search,
    mapping: Mapping[int, int],
) -> BenchmarkResult:
    """Like :func:`graph_benchmark`, but trips use original node IDs.

    ``mapping`` translates original IDs to graph indices; a missing ID raises
    KeyError.
    """
    return benchmark_with_mapping(
        trips, lambda source, target: search(source, target, graph), mapping
    )


def astar_benchmark(
    trips: Sequence[tuple[int, int]], graph: Graph, locations: Sequence[Location]
) -> BenchmarkResult:
    """Answer every trip with A* using the projected node ``locations``."""
    return benchmark(
        trips, lambda source, target: astar(source, target, graph, locations)
    )


def astar_benchmark_with_mapping(
    trips: Sequence[tuple[int, int]],
    graph: Graph,
    locations: Sequence[Location],
    mapping: Mapping[int, int],
) -> BenchmarkResult:
    """Like :func:`astar_benchmark`, but trips use original node IDs."""
    return benchmark_with_mapping(
        trips,
        lambda source, target: astar(source, target, graph, locations),
        mapping,
    )