"""Shortest-path search over partial paths.

Dijkstra-style best-first search where each frontier entry is a whole
``Path`` rather than a node label. The heap is ordered by
``(total_cost, insertion_sequence)``, so equal-cost candidates leave the
frontier in the order they were pushed (FIFO). A node is finalized once, at
the cost of the first path that reaches it off the heap; with non-negative
arc costs that is its minimum cost.

Arc costs are assumed non-negative and are not checked here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Optional, Tuple

from pathgraph.graph import Graph
from pathgraph.logging import get_logger
from pathgraph.path import Path
from pathgraph.types import Cost, NodeName

LOGGER = get_logger(__name__)


class PathStatus(IntEnum):
    """Outcome of a shortest-path query."""

    #: A non-empty optimal path was found.
    FOUND = 1
    #: ``finish`` is unreachable from ``start``.
    NO_PATH = 2
    #: ``start`` and ``finish`` are the same node; the path is empty.
    SAME_NODE = 3


@dataclass(frozen=True)
class PathResult:
    """Tri-state shortest-path result.

    Attributes:
        status: Which of the three outcomes occurred.
        path: The optimal path for FOUND, otherwise an empty Path.
    """

    status: PathStatus
    path: Path = field(default_factory=Path)

    @property
    def found(self) -> bool:
        return self.status == PathStatus.FOUND

    @property
    def cost(self) -> Cost:
        return self.path.total_cost

    def __bool__(self) -> bool:
        return self.found


def _check_node(graph: Graph, name: NodeName, role: str) -> None:
    if name not in graph:
        raise KeyError(f"{role} node '{name}' is not in the graph.")


def _search(
    graph: Graph, start: NodeName, finish: Optional[NodeName]
) -> Tuple[Optional[Path], Dict[NodeName, Cost]]:
    """Run the frontier search from ``start``.

    Stops as soon as a path ending at ``finish`` is dequeued. With
    ``finish=None`` the search runs until the frontier is exhausted.

    Returns:
        (path, finalized): the optimal path to ``finish`` or None if it was
        not reached, and the node -> finalized cost map built so far.
    """
    finalized: Dict[NodeName, Cost] = {start: 0}
    seq = count()
    frontier: List[Tuple[Cost, int, Path]] = []

    def expand(path: Path, node: NodeName) -> None:
        for arc in graph.out_arcs(node):
            if arc.finish not in finalized:
                candidate = path.extended(arc)
                heappush(frontier, (candidate.total_cost, next(seq), candidate))

    expand(Path(), start)
    popped = 0
    while frontier:
        cost, _, path = heappop(frontier)
        popped += 1
        node = path.endpoint
        if node in finalized:
            continue
        finalized[node] = cost
        if node == finish:
            LOGGER.debug(
                "Path %s -> %s found: cost=%s, hops=%d, finalized=%d",
                start,
                finish,
                cost,
                len(path),
                len(finalized),
            )
            return path, finalized
        expand(path, node)

    LOGGER.debug(
        "Frontier from %s exhausted after %d candidates; %d nodes finalized",
        start,
        popped,
        len(finalized),
    )
    return None, finalized


def find_path(graph: Graph, start: NodeName, finish: NodeName) -> PathResult:
    """
    Find the minimum-cost path from ``start`` to ``finish``.

    Unlike ``shortest_path``, the result tells "no path" apart from
    "start equals finish".

    Args:
        graph: The graph to search. Not modified.
        start: Name of the origin node.
        finish: Name of the destination node.

    Returns:
        A PathResult with status FOUND, NO_PATH or SAME_NODE.

    Raises:
        KeyError: If ``start`` or ``finish`` is not in the graph.
    """
    _check_node(graph, start, "Start")
    _check_node(graph, finish, "Finish")

    if start == finish:
        return PathResult(PathStatus.SAME_NODE)

    path, _ = _search(graph, start, finish)
    if path is None:
        return PathResult(PathStatus.NO_PATH)
    return PathResult(PathStatus.FOUND, path)


def shortest_path(graph: Graph, start: NodeName, finish: NodeName) -> Path:
    """
    Return the minimum-cost path from ``start`` to ``finish``.

    An empty Path (no arcs, cost 0) is returned both when ``finish`` is
    unreachable and when ``start == finish``. Use ``find_path`` to tell
    those cases apart.

    Among equal-cost optimal paths, the one whose final candidate was pushed
    onto the frontier first wins.

    Raises:
        KeyError: If ``start`` or ``finish`` is not in the graph.
    """
    return find_path(graph, start, finish).path


def shortest_path_costs(graph: Graph, start: NodeName) -> Dict[NodeName, Cost]:
    """
    Return the minimum cost from ``start`` to every reachable node.

    Unreachable nodes are absent from the mapping; ``start`` maps to 0.

    Raises:
        KeyError: If ``start`` is not in the graph.
    """
    _check_node(graph, start, "Start")
    _, finalized = _search(graph, start, None)
    return finalized
