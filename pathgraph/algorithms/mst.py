"""Minimum spanning tree / forest by global greedy arc selection (Kruskal)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Set, Tuple

from pathgraph.algorithms.union_find import DisjointSet
from pathgraph.graph import Arc, Graph
from pathgraph.logging import get_logger
from pathgraph.types import Cost, NodeName

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class SpanningTree:
    """
    Arcs selected by the spanning-tree engine.

    For a connected graph this is a spanning tree; for a disconnected one it
    is a spanning forest with one tree per component.

    Attributes:
        arcs: Accepted arcs in acceptance (non-decreasing cost) order.
        nodes: Every node of the input graph, including isolated ones.
        num_components: Number of trees in the forest.
    """

    arcs: Tuple[Arc, ...]
    nodes: FrozenSet[NodeName]
    num_components: int

    @property
    def total_cost(self) -> Cost:
        return sum(arc.cost for arc in self.arcs)

    def is_spanning_tree(self) -> bool:
        """True if the arcs connect every node into a single tree."""
        return self.num_components <= 1

    def arc_set(self) -> Set[Arc]:
        return set(self.arcs)

    def __len__(self) -> int:
        return len(self.arcs)


def minimum_spanning_tree(graph: Graph) -> SpanningTree:
    """
    Select a minimum-cost cycle-free arc set connecting all nodes.

    Arcs are considered in order of ``(cost, arc.id)``, so ties go to the arc
    inserted first. An arc is accepted when its endpoints lie in different
    components of the partition, and the two components are then merged.
    The reverse twin of an accepted arc always finds both endpoints in the
    same component and is rejected.

    Args:
        graph: The graph to span. Not modified.

    Returns:
        SpanningTree with ``len(graph) - num_components`` arcs.
    """
    partition: DisjointSet[NodeName] = DisjointSet(graph.get_nodes())
    accepted = []
    target = len(partition) - 1

    for arc in sorted(graph.get_arcs(), key=lambda a: (a.cost, a.id)):
        if partition.union(arc.start, arc.finish):
            accepted.append(arc)
            # A single tree cannot grow further
            if len(accepted) == target:
                break

    LOGGER.debug(
        "Spanning forest: %d arcs selected from %d, %d component(s)",
        len(accepted),
        graph.num_arcs,
        partition.num_sets,
    )
    return SpanningTree(
        arcs=tuple(accepted),
        nodes=frozenset(graph.get_nodes()),
        num_components=partition.num_sets,
    )
