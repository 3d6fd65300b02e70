"""Timing of distance queries answered by a prepared query structure."""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field

DistanceQuery = Callable[[int, int], "int | None"]


@dataclass
class BenchmarkResult:
    """Distances returned for a set of trips and the time spent answering them."""

    seconds: float
    distances: list[int | None] = field(default_factory=list)

    @property
    def queries(self) -> int:
        return len(self.distances)

    @property
    def seconds_per_query(self) -> float:
        return self.seconds / self.queries if self.distances else 0.0


def benchmark(
    trips: Sequence[tuple[int, int]], find_distance: DistanceQuery
) -> BenchmarkResult:
    """Answer every ``(source, target)`` trip with ``find_distance`` and time it.

    ``find_distance`` may be the query method of a distance matrix, a contraction
    hierarchy or a transit node routing structure. The distances are returned in
    trip order and are not validated here.
    """
    started = time.perf_counter()
    distances = [find_distance(source, target) for source, target in trips]
    elapsed = time.perf_counter() - started
    return BenchmarkResult(seconds=elapsed, distances=distances)


def benchmark_with_mapping(
    trips: Sequence[tuple[int, int]],
    find_distance: DistanceQuery,
    mapping: Mapping[int, int],
) -> BenchmarkResult:
    """Like :func:`benchmark`, but trips use original node IDs.

    ``mapping`` translates original IDs to the internal IDs ``find_distance``
    expects. A trip naming an ID missing from the mapping raises KeyError.
    """
    started = time.perf_counter()
    distances = [
        find_distance(mapping[source], mapping[target]) for source, target in trips
    ]
    elapsed = time.perf_counter() - started
    return BenchmarkResult(seconds=elapsed, distances=distances)