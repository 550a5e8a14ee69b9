import copy

import pytest

from pathgraph.config import EngineConfig
from pathgraph.graph import Graph
from pathgraph.path import Path


@pytest.fixture
def arcs():
    g = Graph.from_edges([("A", "B", 1), ("B", "C", 2.5), ("C", "D", 4)])
    ab = g.out_arcs("A")[0]
    # B's first outgoing arc is B->A; pick the forward ones explicitly
    bc = next(a for a in g.out_arcs("B") if a.finish == "C")
    cd = next(a for a in g.out_arcs("C") if a.finish == "D")
    return ab, bc, cd


def test_empty_path():
    p = Path()
    assert p.size() == 0
    assert len(p) == 0
    assert p.total_cost == 0
    assert p.visited_nodes() == frozenset()
    assert p.origin is None
    assert p.endpoint is None
    assert p.nodes_seq == ()
    assert p.is_empty()
    assert not p
    assert p.render() == ""


def test_append_accumulates(arcs):
    ab, bc, cd = arcs
    p = Path()
    p.append(ab)
    assert p.visited_nodes() == {"A", "B"}
    assert p.total_cost == 1
    p.append(bc)
    p.append(cd)
    assert p.size() == 3
    assert p.total_cost == 7.5
    assert p.visited_nodes() == {"A", "B", "C", "D"}
    assert p.nodes_seq == ("A", "B", "C", "D")
    assert p.origin == "A"
    assert p.endpoint == "D"


def test_constructor_appends_in_order(arcs):
    p = Path(arcs)
    assert p.arcs == arcs
    assert p.total_cost == 7.5


def test_append_must_continue_walk(arcs):
    ab, _, cd = arcs
    p = Path([ab])
    with pytest.raises(ValueError, match="does not start at path endpoint 'B'"):
        p.append(cd)
    # Failed append leaves the path unchanged
    assert p.size() == 1
    assert p.total_cost == 1


def test_visited_nodes_on_a_cycle():
    g = Graph.from_edges([("A", "B", 1)])
    there, back = g.get_arcs()
    p = Path([there, back])
    assert p.visited_nodes() == {"A", "B"}
    assert p.nodes_seq == ("A", "B", "A")
    assert p.total_cost == 2


def test_arc_at_and_indexing(arcs):
    p = Path(arcs)
    assert p.arc_at(0) == arcs[0]
    assert p.arc_at(2) == arcs[2]
    assert p[1] == arcs[1]
    assert list(p) == list(arcs)


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_arc_at_out_of_range(arcs, index):
    p = Path(arcs)
    with pytest.raises(IndexError, match="out of range"):
        p.arc_at(index)
    with pytest.raises(IndexError):
        p[index]


def test_arc_at_on_empty_path():
    with pytest.raises(IndexError):
        Path().arc_at(0)


def test_copy_is_independent(arcs):
    ab, bc, cd = arcs
    original = Path([ab, bc])
    for duplicate in (original.copy(), copy.copy(original), copy.deepcopy(original)):
        duplicate.append(cd)
        assert duplicate.total_cost == 7.5
        assert duplicate.size() == 3
        assert original.total_cost == 3.5
        assert original.arcs == (ab, bc)
        assert original.visited_nodes() == {"A", "B", "C"}


def test_extended_leaves_receiver_untouched(arcs):
    ab, bc, _ = arcs
    base = Path([ab])
    longer = base.extended(bc)
    assert base.size() == 1
    assert base.endpoint == "B"
    assert longer.size() == 2
    assert longer.endpoint == "C"


def test_siblings_from_shared_prefix():
    g = Graph.from_edges([("A", "B", 1), ("B", "C", 2), ("B", "D", 3)])
    ab = g.out_arcs("A")[0]
    to_c = next(a for a in g.out_arcs("B") if a.finish == "C")
    to_d = next(a for a in g.out_arcs("B") if a.finish == "D")

    prefix = Path([ab])
    left = prefix.extended(to_c)
    right = prefix.extended(to_d)
    assert left.nodes_seq == ("A", "B", "C")
    assert right.nodes_seq == ("A", "B", "D")
    assert left.total_cost == 3
    assert right.total_cost == 4
    assert prefix.nodes_seq == ("A", "B")


def test_render(arcs):
    p = Path(arcs)
    assert p.render() == "A -> B (1)\nB -> C (2.5)\nC -> D (4)\n"
    assert str(p) == p.render()


def test_render_with_precision():
    g = Graph.from_edges([("X", "Y", 1 / 3)])
    p = Path([g.out_arcs("X")[0]])
    assert p.render(EngineConfig(cost_precision=2)) == "X -> Y (0.33)\n"


def test_equality_hash_and_ordering(arcs):
    ab, bc, _ = arcs
    p1 = Path([ab])
    p2 = Path([ab])
    p3 = Path([ab, bc])
    assert p1 == p2
    assert p1 != p3
    assert len({p1, p2, p3}) == 2
    assert p1 < p3
    assert not (p3 < p1)


def test_repr(arcs):
    r = repr(Path(arcs))
    assert "Path" in r
    assert "cost=7.5" in r


def test_ordering_is_by_cost_only():
    g = Graph.from_edges([("A", "B", 1), ("A", "C", 1)])
    to_b = Path([g.out_arcs("A")[0]])
    to_c = Path([g.out_arcs("A")[1]])

    assert to_b.total_cost == to_c.total_cost
    assert not (to_b < to_c)
    assert not (to_c < to_b)
    assert to_b != to_c
    assert sorted([to_c, to_b]) == [to_c, to_b]
