"""NetworkX graph conversion utilities.

Converts between NetworkX graphs and ``pathgraph.graph.Graph``.

Example:
    >>> import networkx as nx
    >>> from pathgraph.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B", cost=1)
    >>> G.add_edge("B", "C", cost=2)
    >>>
    >>> graph = from_networkx(G)   # two arcs per undirected edge
    >>> multi = to_networkx(graph)  # MultiDiGraph keyed by arc id
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

import networkx as nx

from pathgraph.config import ENGINE_CONFIG, EngineConfig
from pathgraph.graph import Graph
from pathgraph.logging import get_logger

LOGGER = get_logger(__name__)

NxGraph = Union[nx.Graph, nx.DiGraph, nx.MultiGraph, nx.MultiDiGraph]


def to_networkx(graph: Graph) -> nx.MultiDiGraph:
    """Convert a Graph to a NetworkX MultiDiGraph.

    Every arc becomes one directed edge keyed by its arc id, with ``cost`` and
    ``edge_id`` attributes. Nodes carry ``loc`` plus their own attrs.

    Args:
        graph: Graph to convert.

    Returns:
        A new MultiDiGraph; modifying it does not affect ``graph``.
    """
    nx_graph = nx.MultiDiGraph()
    for name, node in graph.get_nodes().items():
        nx_graph.add_node(name, loc=node.loc, **node.attrs)
    for arc in graph.get_arcs():
        nx_graph.add_edge(
            arc.start, arc.finish, key=arc.id, cost=arc.cost, edge_id=arc.edge_id
        )
    return nx_graph


def to_undirected_networkx(graph: Graph, weight_attr: str = "weight") -> nx.Graph:
    """Collapse a Graph into a simple undirected NetworkX graph.

    Reciprocal arcs and parallel edges between the same pair of nodes become a
    single edge carrying the minimum cost under ``weight_attr``. Self-loops
    are dropped.
    """
    nx_graph = nx.Graph()
    for name, node in graph.get_nodes().items():
        nx_graph.add_node(name, loc=node.loc)
    for arc in graph.get_arcs():
        if arc.start == arc.finish:
            continue
        existing = nx_graph.get_edge_data(arc.start, arc.finish)
        if existing is None or arc.cost < existing[weight_attr]:
            nx_graph.add_edge(arc.start, arc.finish, **{weight_attr: arc.cost})
    return nx_graph


def from_networkx(
    nx_graph: NxGraph,
    cost_attr: str = "cost",
    default_cost: Optional[float] = None,
    loc_attr: str = "loc",
    edge_id_attr: str = "edge_id",
    config: Optional[EngineConfig] = None,
) -> Graph:
    """Build a Graph from a NetworkX graph.

    Undirected inputs produce a reciprocal arc pair per edge. Directed inputs
    produce one arc per edge, preserving direction; edges that carry the same
    ``edge_id_attr`` value join one logical edge, so the output of
    ``to_networkx`` converts back with its reciprocal pairs intact. Node names
    are used as-is.

    Args:
        nx_graph: Source graph (any of the four NetworkX graph classes).
        cost_attr: Edge attribute holding the cost.
        default_cost: Cost for edges missing ``cost_attr``; defaults to the
            config's ``default_cost``.
        loc_attr: Node attribute holding the location; other node attributes
            are copied into ``Node.attrs``. A missing or None location
            becomes (0.0, 0.0).
        edge_id_attr: Edge attribute grouping directed edges into logical
            edges. Only consulted for directed inputs.
        config: Optional configuration override.

    Returns:
        A new Graph.

    Raises:
        ValueError: If an edge cost is rejected by the graph.
    """
    cfg = config or ENGINE_CONFIG
    if default_cost is None:
        default_cost = cfg.default_cost

    graph = Graph(config=cfg)
    for name, data in nx_graph.nodes(data=True):
        loc = data.get(loc_attr)
        node = graph.add_node(name, loc=(0.0, 0.0) if loc is None else tuple(loc))
        node.attrs.update((k, v) for k, v in data.items() if k != loc_attr)

    directed = nx_graph.is_directed()
    # Input edge_id value -> logical edge id allocated in ``graph``
    edge_ids: Dict[Any, int] = {}
    missing = 0
    for u, v, data in nx_graph.edges(data=True):
        if cost_attr not in data:
            missing += 1
        cost = data.get(cost_attr, default_cost)
        if not directed:
            graph.add_edge(u, v, cost)
            continue
        key = data.get(edge_id_attr)
        arc = graph.add_arc(u, v, cost, edge_id=edge_ids.get(key))
        if key is not None:
            edge_ids.setdefault(key, arc.edge_id)

    if missing:
        LOGGER.debug(
            "%d edge(s) without '%s'; used default cost %s",
            missing,
            cost_attr,
            default_cost,
        )
    return graph
