"""Weighted graph model with Node, Arc and Graph classes.

Undirected input edges are stored as pairs of opposite-direction arcs. The
graph acts as an arena: nodes are keyed by name and arcs by a stable integer
id assigned in insertion order, so paths and partitions can refer to them
without owning them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Set, Tuple

from pathgraph.config import ENGINE_CONFIG, EngineConfig
from pathgraph.logging import get_logger
from pathgraph.types import Cost, Location, NodeName

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class Arc:
    """One directed, costed arc between two nodes.

    Attributes:
        id (int): Stable arena index, unique within the owning graph.
        start (str): Name of the node the arc leaves.
        finish (str): Name of the node the arc enters.
        cost (Cost): Non-negative traversal cost.
        edge_id (int): Id of the logical undirected edge. Both arcs of a
            reciprocal pair share it.
    """

    id: int
    start: NodeName
    finish: NodeName
    cost: Cost
    edge_id: int

    def __str__(self) -> str:
        return f"{self.start} -> {self.finish}"


@dataclass
class Node:
    """A named vertex with a location and its outgoing arcs.

    Attributes:
        name (str): Unique identifier for the node.
        loc (Location): 2-D location, carried as opaque data.
        attrs (Dict[str, Any]): Additional metadata.
        arcs (List[Arc]): Outgoing arcs, in insertion order.
    """

    name: NodeName
    loc: Location = (0.0, 0.0)
    attrs: Dict[str, Any] = field(default_factory=dict)
    arcs: List[Arc] = field(default_factory=list, repr=False, compare=False)


class Graph:
    """Arena of nodes and arcs.

    This class enforces:
      - No duplicate node names.
      - No arcs between nodes that do not exist.
      - No negative arc costs, unless the config allows them.

    The algorithms only read from a graph; all mutation happens through
    ``add_node``, ``add_edge`` and ``add_arc`` while the graph is built.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or ENGINE_CONFIG
        self._nodes: Dict[NodeName, Node] = {}
        self._arcs: List[Arc] = []
        self._next_edge_id = 0

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[NodeName, NodeName, Cost]],
        nodes: Optional[Iterable[NodeName]] = None,
        config: Optional[EngineConfig] = None,
    ) -> Graph:
        """Build a graph from ``(u, v, cost)`` triples.

        Nodes listed in ``nodes`` are added first, in order; endpoints not yet
        present are created on the fly.

        Args:
            edges: Undirected edges as (u, v, cost).
            nodes: Optional node names to create up front (e.g. isolated nodes).
            config: Optional configuration override.

        Returns:
            A new Graph with a reciprocal arc pair per edge.
        """
        graph = cls(config=config)
        for name in nodes or ():
            graph.add_node(name)
        for u, v, cost in edges:
            for name in (u, v):
                if name not in graph:
                    graph.add_node(name)
            graph.add_edge(u, v, cost)
        LOGGER.debug("Built %r from edge list", graph)
        return graph

    #
    # Construction
    #
    def add_node(
        self, name: NodeName, loc: Location = (0.0, 0.0), **attrs: Any
    ) -> Node:
        """Add a node, disallowing duplicates.

        Raises:
            ValueError: If a node with the same name already exists.
        """
        if name in self._nodes:
            raise ValueError(f"Node '{name}' already exists in this graph.")
        node = Node(name=name, loc=loc, attrs=dict(attrs))
        self._nodes[name] = node
        return node

    def add_edge(self, u: NodeName, v: NodeName, cost: Cost) -> Tuple[Arc, Arc]:
        """Add an undirected edge as two reciprocal arcs.

        Returns:
            The (u -> v, v -> u) arc pair.

        Raises:
            ValueError: If either node is missing or the cost is rejected.
        """
        self._check_endpoints(u, v, cost)
        edge_id = self._new_edge_id()
        forward = self._append_arc(u, v, cost, edge_id)
        reverse = self._append_arc(v, u, cost, edge_id)
        return forward, reverse

    def add_arc(
        self, u: NodeName, v: NodeName, cost: Cost, edge_id: Optional[int] = None
    ) -> Arc:
        """Add a single directed arc.

        Args:
            u: Start node.
            v: Finish node.
            cost: Arc cost.
            edge_id: Logical edge to join, e.g. the id returned on the twin
                arc of a reciprocal pair. A new id is allocated when omitted.

        Raises:
            ValueError: If either node is missing, the cost is rejected, or
                ``edge_id`` was never allocated by this graph.
        """
        self._check_endpoints(u, v, cost)
        if edge_id is None:
            edge_id = self._new_edge_id()
        elif not 0 <= edge_id < self._next_edge_id:
            raise ValueError(f"Edge id {edge_id} has not been allocated.")
        return self._append_arc(u, v, cost, edge_id)

    def clear(self) -> None:
        """Remove all nodes and arcs."""
        self._nodes.clear()
        self._arcs.clear()
        self._next_edge_id = 0

    def _check_endpoints(self, u: NodeName, v: NodeName, cost: Cost) -> None:
        if u not in self._nodes:
            raise ValueError(f"Source node '{u}' does not exist.")
        if v not in self._nodes:
            raise ValueError(f"Target node '{v}' does not exist.")
        if self.config.reject_negative_costs and cost < 0:
            raise ValueError(f"Arc {u} -> {v} has negative cost {cost}.")

    def _new_edge_id(self) -> int:
        edge_id = self._next_edge_id
        self._next_edge_id += 1
        return edge_id

    def _append_arc(self, u: NodeName, v: NodeName, cost: Cost, edge_id: int) -> Arc:
        arc = Arc(id=len(self._arcs), start=u, finish=v, cost=cost, edge_id=edge_id)
        self._arcs.append(arc)
        self._nodes[u].arcs.append(arc)
        return arc

    #
    # Queries
    #
    def node(self, name: NodeName) -> Node:
        """Return the node called ``name``.

        Raises:
            KeyError: If the node does not exist.
        """
        try:
            return self._nodes[name]
        except KeyError:
            raise KeyError(f"Node '{name}' is not in the graph.") from None

    def arc(self, arc_id: int) -> Arc:
        """Return the arc with the given arena id."""
        return self._arcs[arc_id]

    def out_arcs(self, name: NodeName) -> List[Arc]:
        """Return the outgoing arcs of ``name`` in insertion order."""
        return self.node(name).arcs

    def get_nodes(self) -> Dict[NodeName, Node]:
        """Return the name -> Node mapping (insertion ordered)."""
        return self._nodes

    def get_arcs(self) -> List[Arc]:
        """Return every arc, ordered by id."""
        return self._arcs

    def node_set(self) -> Set[NodeName]:
        return set(self._nodes)

    def arc_set(self) -> Set[Arc]:
        return set(self._arcs)

    def edges(self) -> List[Arc]:
        """Return one representative arc per logical edge.

        The representative is the first arc inserted for that edge.
        """
        seen: Set[int] = set()
        result: List[Arc] = []
        for arc in self._arcs:
            if arc.edge_id not in seen:
                seen.add(arc.edge_id)
                result.append(arc)
        return result

    @property
    def num_arcs(self) -> int:
        return len(self._arcs)

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __iter__(self) -> Iterator[NodeName]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, arcs={len(self._arcs)})"
