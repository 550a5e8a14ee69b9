"""Graph algorithms: shortest path and minimum spanning tree."""

from pathgraph.algorithms.mst import SpanningTree, minimum_spanning_tree
from pathgraph.algorithms.spf import (
    PathResult,
    PathStatus,
    find_path,
    shortest_path,
    shortest_path_costs,
)
from pathgraph.algorithms.union_find import DisjointSet

__all__ = [
    "DisjointSet",
    "PathResult",
    "PathStatus",
    "SpanningTree",
    "find_path",
    "minimum_spanning_tree",
    "shortest_path",
    "shortest_path_costs",
]
