"""Shortest-path query benchmarking, A* search, path validation, UTM projection and memory measurement."""

__version__ = "0.1.0"
__all__ = [
    "astar",
    "benchmark",
    "graph_benchmark",
    "memory",
    "path_validation",
    "projection",
    "validation",
]