import pytest

from pathgraph.config import EngineConfig
from pathgraph.graph import Arc, Graph, Node


def test_init_empty_graph():
    g = Graph()
    assert len(g) == 0
    assert g.num_arcs == 0
    assert g.get_arcs() == []
    assert g.edges() == []


def test_add_node():
    g = Graph()
    node = g.add_node("A", loc=(3.0, 4.0), region="west")
    assert isinstance(node, Node)
    assert "A" in g
    assert g.node("A") is node
    assert node.loc == (3.0, 4.0)
    assert node.attrs == {"region": "west"}
    assert node.arcs == []


def test_add_node_duplicate():
    g = Graph()
    g.add_node("A")
    with pytest.raises(ValueError, match="already exists"):
        g.add_node("A")


def test_add_edge_creates_reciprocal_arcs():
    g = Graph()
    g.add_node("A")
    g.add_node("B")
    forward, reverse = g.add_edge("A", "B", 2.5)

    assert (forward.start, forward.finish, forward.cost) == ("A", "B", 2.5)
    assert (reverse.start, reverse.finish, reverse.cost) == ("B", "A", 2.5)
    assert forward.edge_id == reverse.edge_id
    assert (forward.id, reverse.id) == (0, 1)
    assert g.out_arcs("A") == [forward]
    assert g.out_arcs("B") == [reverse]
    assert g.arc(1) is reverse
    assert g.num_arcs == 2
    assert g.edges() == [forward]


def test_add_arc_is_one_way():
    g = Graph()
    g.add_node("A")
    g.add_node("B")
    arc = g.add_arc("A", "B", 1)
    assert g.out_arcs("A") == [arc]
    assert g.out_arcs("B") == []


def test_edges_have_distinct_ids():
    g = Graph.from_edges([("A", "B", 1), ("A", "B", 2)])
    assert [a.edge_id for a in g.get_arcs()] == [0, 0, 1, 1]
    assert [a.cost for a in g.edges()] == [1, 2]


@pytest.mark.parametrize("u,v,missing", [("X", "A", "Source"), ("A", "X", "Target")])
def test_add_edge_missing_node(u, v, missing):
    g = Graph()
    g.add_node("A")
    with pytest.raises(ValueError, match=f"{missing} node 'X' does not exist"):
        g.add_edge(u, v, 1)
    assert g.num_arcs == 0


def test_negative_cost_rejected_by_default():
    g = Graph.from_edges([], nodes=["A", "B"])
    with pytest.raises(ValueError, match="negative cost"):
        g.add_edge("A", "B", -1)
    with pytest.raises(ValueError, match="negative cost"):
        g.add_arc("A", "B", -0.5)


def test_negative_cost_allowed_when_configured():
    g = Graph(config=EngineConfig(reject_negative_costs=False))
    g.add_node("A")
    g.add_node("B")
    forward, _ = g.add_edge("A", "B", -1)
    assert forward.cost == -1


def test_from_edges():
    g = Graph.from_edges([("A", "B", 1), ("B", "C", 2)], nodes=["Z"])
    assert list(g) == ["Z", "A", "B", "C"]
    assert g.num_arcs == 4
    assert g.node_set() == {"A", "B", "C", "Z"}
    assert len(g.arc_set()) == 4


def test_node_lookup_error():
    g = Graph()
    with pytest.raises(KeyError, match="Node 'nope' is not in the graph"):
        g.node("nope")
    with pytest.raises(KeyError):
        g.out_arcs("nope")


def test_arcs_are_frozen_values():
    g = Graph.from_edges([("A", "B", 1)])
    arc = g.get_arcs()[0]
    with pytest.raises(AttributeError):
        arc.cost = 5
    assert arc == Arc(id=0, start="A", finish="B", cost=1, edge_id=0)
    assert str(arc) == "A -> B"


def test_clear():
    g = Graph.from_edges([("A", "B", 1)])
    g.clear()
    assert len(g) == 0
    assert g.num_arcs == 0
    g.add_node("A")
    g.add_node("B")
    forward, _ = g.add_edge("A", "B", 1)
    assert forward.id == 0
    assert forward.edge_id == 0


def test_repr():
    g = Graph.from_edges([("A", "B", 1)])
    assert repr(g) == "Graph(nodes=2, arcs=2)"


def test_add_arc_joins_existing_edge():
    g = Graph.from_edges([], nodes=["A", "B"])
    there = g.add_arc("A", "B", 2)
    back = g.add_arc("B", "A", 2, edge_id=there.edge_id)
    assert back.edge_id == there.edge_id
    assert g.edges() == [there]

    fresh = g.add_arc("A", "B", 5)
    assert fresh.edge_id == there.edge_id + 1


@pytest.mark.parametrize("edge_id", [-1, 1, 7])
def test_add_arc_rejects_unallocated_edge_id(edge_id):
    g = Graph.from_edges([], nodes=["A", "B"])
    g.add_arc("A", "B", 1)
    with pytest.raises(ValueError, match=f"Edge id {edge_id} has not been allocated"):
        g.add_arc("B", "A", 1, edge_id=edge_id)
    assert g.num_arcs == 1
