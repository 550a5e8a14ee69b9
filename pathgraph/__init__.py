"""pathgraph: shortest paths and minimum spanning trees on weighted graphs.

Primary API:
    Graph, Node, Arc - Graph model (undirected edges stored as arc pairs)
    Path - Ordered walk of arcs with running cost
    shortest_path() - Minimum-cost path between two nodes
    find_path() - Same search with an explicit FOUND / NO_PATH / SAME_NODE status
    minimum_spanning_tree() - Minimum-cost spanning tree (or forest)
    from_networkx() / to_networkx() - NetworkX interop

Example:
    from pathgraph import Graph, shortest_path, minimum_spanning_tree

    g = Graph.from_edges([("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])
    path = shortest_path(g, "A", "C")      # A -> B -> C, cost 2
    tree = minimum_spanning_tree(g)        # {A-B, B-C}, cost 2
"""

from __future__ import annotations

from pathgraph import logging
from pathgraph._version import __version__
from pathgraph.algorithms import (
    DisjointSet,
    PathResult,
    PathStatus,
    SpanningTree,
    find_path,
    minimum_spanning_tree,
    shortest_path,
    shortest_path_costs,
)
from pathgraph.config import ENGINE_CONFIG, EngineConfig
from pathgraph.graph import Arc, Graph, Node
from pathgraph.nx import from_networkx, to_networkx, to_undirected_networkx
from pathgraph.path import Path

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "Node",
    "Arc",
    "Path",
    # Algorithms
    "shortest_path",
    "find_path",
    "shortest_path_costs",
    "PathResult",
    "PathStatus",
    "minimum_spanning_tree",
    "SpanningTree",
    "DisjointSet",
    # Configuration
    "EngineConfig",
    "ENGINE_CONFIG",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    "to_undirected_networkx",
    # Utilities
    "logging",
]
