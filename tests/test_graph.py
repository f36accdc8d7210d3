"""
Unit tests for Graph.
"""

import networkx as nx
import pytest

from nodeinfluence.core import GraphError, NegativeWeightError, NodeOutOfRangeError
from nodeinfluence.graph import Graph


def test_new_graph_has_no_edges():
    g = Graph(4)

    assert g.node_count == 4
    assert len(g) == 4
    assert g.edge_count == 0
    assert all(g.neighbors(n) == () for n in g.nodes())


@pytest.mark.parametrize("bad", [0, -3, 2.5, "3", True])
def test_construct_rejects_invalid_node_count(bad):
    with pytest.raises(GraphError):
        Graph(bad)


def test_add_edge_is_symmetric_and_ordered():
    g = Graph(3)
    g.add_edge(0, 1, 2.0)
    g.add_edge(0, 2)
    g.add_edge(2, 1, 0.5)

    assert g.neighbors(0) == ((1, 2.0), (2, 1.0))
    assert g.neighbors(1) == ((0, 2.0), (2, 0.5))
    assert g.neighbors(2) == ((0, 1.0), (1, 0.5))
    assert list(g.edges()) == [(0, 1, 2.0), (0, 2, 1.0), (2, 1, 0.5)]


def test_parallel_edges_are_kept():
    g = Graph(2)
    g.add_edge(0, 1, 3.0)
    g.add_edge(0, 1, 1.0)

    assert g.edge_count == 2
    assert g.neighbors(0) == ((1, 3.0), (1, 1.0))
    assert g.neighbors(1) == ((0, 3.0), (0, 1.0))


def test_self_loop_lists_node_twice():
    g = Graph(2)
    g.add_edge(0, 0, 1.0)

    assert g.neighbors(0) == ((0, 1.0), (0, 1.0))
    assert g.neighbors(1) == ()


@pytest.mark.parametrize("u,v", [(-1, 0), (0, -1), (3, 0), (0, 3), (10, 10)])
def test_add_edge_out_of_range(u, v):
    g = Graph(3)

    with pytest.raises(NodeOutOfRangeError) as exc:
        g.add_edge(u, v)

    assert exc.value.details["node_count"] == 3
    # nothing was inserted
    assert g.edge_count == 0


@pytest.mark.parametrize("weight", [-1.0, -0.001, float("nan"), float("inf"), float("-inf")])
def test_add_edge_rejects_negative_weight(weight):
    g = Graph(2)

    with pytest.raises(NegativeWeightError):
        g.add_edge(0, 1, weight)

    assert g.neighbors(0) == ()


def test_zero_weight_is_allowed():
    g = Graph(2)
    g.add_edge(0, 1, 0.0)

    assert g.neighbors(0) == ((1, 0.0),)


def test_neighbors_returns_copy():
    g = Graph(2)
    g.add_edge(0, 1)

    out = g.neighbors(0)
    assert isinstance(out, tuple)
    g.add_edge(0, 1)

    # earlier snapshot is unaffected
    assert out == ((1, 1.0),)


def test_neighbors_out_of_range():
    with pytest.raises(NodeOutOfRangeError):
        Graph(2).neighbors(2)


def test_is_weighted():
    g = Graph(3)
    g.add_edge(0, 1)
    assert not g.is_weighted

    g.add_edge(1, 2, 2.5)
    assert g.is_weighted


def test_to_networkx_keeps_parallel_edges():
    g = Graph(3)
    g.add_edge(0, 1, 2.0)
    g.add_edge(0, 1, 4.0)
    g.add_edge(1, 2)

    nxg = g.to_networkx()

    assert isinstance(nxg, nx.MultiGraph)
    assert set(nxg.nodes()) == {0, 1, 2}
    assert nxg.number_of_edges() == 3
    assert sorted(d["weight"] for _, _, d in nxg.edges(0, data=True)) == [2.0, 4.0]
