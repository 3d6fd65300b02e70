"""Comparison of query results and checks of unpacked shortest paths."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

Graph = Sequence[Iterable[tuple[int, int]]]
Edge = tuple[int, int, int]
PathFinder = Callable[[int, int], tuple["int | None", Sequence[Edge]]]


def _check_lengths(a: Sequence, b: Sequence) -> None:
    if len(b) < len(a):
        raise ValueError(f"second sequence has {len(b)} values, expected at least {len(a)}")


def validate(a: Sequence[int | None], b: Sequence[int | None]) -> bool:
    """Return True if every value of ``a`` equals the value of ``b`` at the same position."""
    _check_lengths(a, b)
    return all(x == y for x, y in zip(a, b))


def validate_verbose(a: Sequence[int | None], b: Sequence[int | None]) -> bool:
    """Print every mismatch between ``a`` and ``b`` and their count.

    Always returns True; the printed report is the result.
    """
    _check_lengths(a, b)
    mismatches = 0
    for index, (x, y) in enumerate(zip(a, b)):
        if x != y:
            print(f"Found mismatch at trip {index} (indexing trips from 0).")
            print(f"Sequence 'a' contains: {x}, while sequence 'b' contains: {y}.")
            mismatches += 1
    print(f"Mismatches: {mismatches}")
    return True


@dataclass
class UnpackingReport:
    """Outcome of checking unpacked paths against the input graph."""

    trips: int
    path_mismatches: int = 0
    distance_sum_mismatches: int = 0
    messages: list[str] = field(default_factory=list)

    def _percent(self, count: int) -> float:
        return count / self.trips * 100 if self.trips else 0.0

    @property
    def path_mismatch_percent(self) -> float:
        return self._percent(self.path_mismatches)

    @property
    def distance_sum_mismatch_percent(self) -> float:
        return self._percent(self.distance_sum_mismatches)

    def summary(self) -> str:
        return (
            "Finished paths validation.\n"
            f"Found '{self.path_mismatches}' path mismatches "
            f"({self.path_mismatch_percent} %)\n"
            f"Found '{self.distance_sum_mismatches}' distance sum mismatches "
            f"({self.distance_sum_mismatch_percent} %)"
        )


def _first_weight(graph: Graph, source: int, target: int) -> int | None:
    return next((weight for node, weight in graph[source] if node == target), None)


def check_unpacked_paths(
    trips: Sequence[tuple[int, int]], find_path: PathFinder, graph: Graph
) -> UnpackingReport:
    """Check that the paths returned by ``find_path`` exist in ``graph``.

    ``find_path(source, target)`` returns ``(distance, edges)`` where ``distance``
    is None for unreachable targets and ``edges`` is a sequence of
    ``(source, target, weight)`` triples. ``graph[node]`` yields
    ``(neighbour, weight)`` pairs. Messages are printed and kept in the report.
    """
    report = UnpackingReport(trips=len(trips))

    def note(message: str) -> None:
        report.messages.append(message)
        print(message)

    for trip_index, (source, target) in enumerate(trips):
        reported, edges = find_path(source, target)

        for edge_source, edge_target, edge_weight in edges:
            actual = _first_weight(graph, edge_source, edge_target)
            if actual is None:
                note(
                    f"Found mismatch in trip '{trip_index}': CH reported edge "
                    f"'{edge_source} -> {edge_target}' which doesn't exist in the input graph."
                )
                report.path_mismatches += 1
                break
            if actual != edge_weight:
                note(
                    f"Found mismatch in trip '{trip_index}': length of edge "
                    f"'{edge_source} -> {edge_target}' reported by CH was {edge_weight}, "
                    f"actual length is {actual}."
                )
                report.path_mismatches += 1

        total = sum(weight for _, _, weight in edges)
        if reported is not None and total != reported:
            note(
                f"Found mismatch in trip '{trip_index}': Reported distance was {reported} "
                f"while the sum of all the reported edges was {total}"
            )
            report.distance_sum_mismatches += 1

    print(report.summary())
    return report