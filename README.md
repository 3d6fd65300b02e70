# spbench

Tools for measuring and checking shortest-path query engines on road-like graphs.
The package is plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Graphs

Graphs are adjacency lists. `graph[node]` yields `(neighbour, weight)` pairs, and nodes are
the integers `0 .. len(graph) - 1`. A distance of `None` means that the target cannot be
reached.

## Modules

### `spbench.astar`

- `astar(start, goal, graph, locations)` returns the shortest distance from `start` to `goal`
  as an `int`. It returns `None` when `goal` cannot be reached.
- `locations[node]` holds the projected `(easting, northing)` of each node.
- `heuristic(node_location, goal_location)` is the estimate A* uses: 0.9 times the
  straight-line distance between the two points.

### `spbench.benchmark`

- `benchmark(trips, find_distance)` calls `find_distance(source, target)` for every trip and
  times the whole run.
- `benchmark_with_mapping(trips, find_distance, mapping)` does the same for trips written in
  external node IDs. `mapping` translates each external ID to the internal ID that
  `find_distance` expects. An ID missing from the mapping raises `KeyError`.
- Both return a `BenchmarkResult`. It holds `seconds` and the `distances` in trip order, and it
  also gives `queries` and `seconds_per_query`.

### `spbench.graph_benchmark`

- `graph_benchmark(trips, graph, search)` times a search that runs directly on a graph. It calls
  `search(source, target, graph)` for each trip.
- `graph_benchmark_with_mapping(trips, graph, search, mapping)` does the same for trips in
  external node IDs.
- `astar_benchmark(trips, graph, locations)` and
  `astar_benchmark_with_mapping(trips, graph, locations, mapping)` do the same with `astar`.

### `spbench.validation`

- `validate(a, b)` returns `True` when every value of `a` equals the value at the same position
  in `b`. It raises `ValueError` if `b` is shorter than `a`.
- `validate_verbose(a, b)` prints every mismatch and the mismatch count, and always returns
  `True`.
- `check_unpacked_paths(trips, find_path, graph)` checks unpacked paths against the graph.
  - `find_path(source, target)` must return `(distance, edges)`, where `edges` are
    `(source, target, weight)` triples.
  - Each edge must exist in `graph` with the same weight.
  - The weights must add up to the reported distance.
  - The function prints its findings and returns an `UnpackingReport` with the mismatch counts,
    their percentages and the messages.

### `spbench.path_validation`

- `edge_weight(graph, source, target)` returns the weight of the first edge from `source` to
  `target`, or `None` if there is no such edge.
- `validate_path(graph, distance, path)` checks a path of `(source, target)` edges. Every edge
  must exist in the graph and the weights must add up to `distance`. A distance of `None` with an
  empty path counts as valid.
- `validate_paths(graph, find_path, trips)` validates the path found for every trip and stops
  at the first invalid one. When all the paths are valid, it runs the queries again and times
  them. It returns a `PathValidationReport`.

### `spbench.projection`

- `utm_zone(longitude)` returns the UTM zone number for a longitude in degrees.
- `transform_locations(gps_locations)` projects `(longitude, latitude)` pairs on WGS84 to
  `(easting, northing)` in metres.
  - Every point uses the zone of the first location.
  - It raises `ValueError` for an empty list.

### `spbench.memory`

- `MemoryTracker(ballast_kib=131072)` reports the peak memory use of the process in KiB.
  - Call `init()` first. It records the current peak and allocates a ballast buffer.
  - Then call `max_memory_usage()`. It returns the peak without the ballast, or `0` if the peak
    did not grow.
  - Calling `max_memory_usage()` before `init()` raises `RuntimeError`.
  - The module needs the `resource` module, which is available on Unix-like systems.

## Example

```python
from spbench.astar import astar
from spbench.graph_benchmark import astar_benchmark
from spbench.validation import validate

graph = [[(1, 5)], [(2, 5)], []]
locations = [(0.0, 0.0), (5.0, 0.0), (10.0, 0.0)]

print(astar(0, 2, graph, locations))   # 10
result = astar_benchmark([(0, 2), (2, 0)], graph, locations)
print(result.distances)                # [10, None]
print(validate(result.distances, [10, None]))  # True
```

## What the package does not do

- It does not read graph files or mapping files. Graphs, trips, locations and mappings are
  passed in as Python objects.
- It has no Dijkstra, contraction hierarchy or transit node routing engine of its own. The
  benchmark and validation functions take any callable that answers the queries.
- It provides no command-line program.