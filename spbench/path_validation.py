"""Checks that reconstructed shortest paths exist in the input graph."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

Graph = Sequence[Iterable[tuple[int, int]]]
PathFinder = Callable[[int, int], tuple["int | None", Sequence[tuple[int, int]]]]


@dataclass
class PathValidationReport:
    """Outcome of validating reconstructed paths for a set of trips."""

    trips: int
    valid: bool = True
    invalid_trip: int | None = None
    seconds: float | None = None
    messages: list[str] = field(default_factory=list)

    @property
    def seconds_per_query(self) -> float | None:
        if self.seconds is None:
            return None
        return self.seconds / self.trips if self.trips else 0.0


def edge_weight(graph: Graph, source: int, target: int) -> int | None:
    """Return the weight of the first edge ``source -> target``, or None if absent."""
    return next((weight for node, weight in graph[source] if node == target), None)


def _validate(
    graph: Graph,
    distance: int | None,
    path: Sequence[tuple[int, int]],
    note: Callable[[str], None],
) -> bool:
    if distance is None and not path:
        return True

    total = 0
    for source, target in path:
        weight = edge_weight(graph, source, target)
        if weight is None:
            note(
                f"Path contains edge '{source} -> {target}' "
                "which does not exist in the input graph."
            )
            return False
        total += weight

    if total != distance:
        note(
            "Sum of edge weights of the path does not match the returned distance.\n"
            f"Returned distance: {distance}, sum of weights: {total}"
        )
        return False
    return True


def validate_path(
    graph: Graph, distance: int | None, path: Sequence[tuple[int, int]]
) -> bool:
    """Return True if ``path`` exists in ``graph`` and its weights sum to ``distance``.

    ``path`` is a sequence of ``(source, target)`` edges; an unreachable target
    is reported as distance None with an empty path, which is valid.
    """
    return _validate(graph, distance, path, print)


def validate_paths(
    graph: Graph, find_path: PathFinder, trips: Sequence[tuple[int, int]]
) -> PathValidationReport:
    """Validate the path returned by ``find_path`` for every trip, then time the queries.

    ``find_path(source, target)`` returns ``(distance, edges)``. Validation stops
    at the first invalid path; only when all paths are valid are the queries
    run again and timed.
    """
    report = PathValidationReport(trips=len(trips))

    def note(message: str) -> None:
        report.messages.append(message)
        print(message)

    for index, (source, target) in enumerate(trips):
        distance, path = find_path(source, target)
        if not _validate(graph, distance, path, note):
            note(f"Path returned for trip {index} is not valid!")
            report.valid = False
            report.invalid_trip = index
            return report

    note(
        f"Validated {len(trips)} trips. "
        "All computed paths were valid in the input graph."
    )

    started = time.perf_counter()
    for source, target in trips:
        find_path(source, target)
    report.seconds = time.perf_counter() - started

    note(f"Performed {len(trips)} path queries in {report.seconds} seconds.")
    note(f"One query took {report.seconds_per_query} seconds.")
    return report