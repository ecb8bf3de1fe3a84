"""
Tests for core graph functionality.
"""

import pytest

from arbor.core.graph import Graph
from arbor.core.models import Edge


def test_add_node(directed_graph):
    """Test adding nodes, including a repeated node."""
    assert directed_graph.add_node("A")
    assert directed_graph.contains_node("A")
    assert "A" in directed_graph
    assert not directed_graph.add_node("A")  # Node should not be added again
    assert directed_graph.num_nodes() == 1


def test_add_edge_directed(directed_graph):
    """Test that directed edges are one-way."""
    directed_graph.add_node("A")
    directed_graph.add_node("B")

    assert directed_graph.add_edge("A", "B", 5)
    assert directed_graph.contains_edge("A", "B")
    assert not directed_graph.contains_edge("B", "A")


def test_add_edge_undirected(undirected_graph):
    """Test that undirected edges are stored in both directions."""
    undirected_graph.add_node("A")
    undirected_graph.add_node("B")

    assert undirected_graph.add_edge("A", "B", 5)
    assert undirected_graph.contains_edge("A", "B")
    assert undirected_graph.contains_edge("B", "A")
    assert undirected_graph.get_label("B", "A") == 5
    assert undirected_graph.num_edges() == 1


def test_add_edge_missing_endpoint(directed_graph):
    """Test that edges need both endpoints in the graph."""
    directed_graph.add_node("A")

    assert not directed_graph.add_edge("A", "B", 1)
    assert not directed_graph.add_edge("B", "A", 1)
    assert directed_graph.num_edges() == 0
    assert directed_graph.get_outgoing_edges("A") == []


def test_add_duplicate_edge_rejected(directed_graph):
    """Test that a second edge between the same ordered pair is refused."""
    directed_graph.add_node("A")
    directed_graph.add_node("B")
    assert directed_graph.add_edge("A", "B", 1)

    assert not directed_graph.add_edge("A", "B", 9)
    assert directed_graph.get_label("A", "B") == 1
    assert directed_graph.num_edges() == 1


def test_reverse_edge_rejected_in_undirected_graph(undirected_graph):
    """Test that the mirror of an existing undirected edge is a duplicate."""
    undirected_graph.add_node("A")
    undirected_graph.add_node("B")
    undirected_graph.add_edge("A", "B", 1)

    assert not undirected_graph.add_edge("B", "A", 1)
    assert len(undirected_graph.get_edges()) == 2
    assert undirected_graph.num_edges() == 1


def test_undirected_self_loop_stored_once(undirected_graph):
    """Test that a self-loop does not get a duplicate mirror record."""
    undirected_graph.add_node("A")

    assert undirected_graph.add_edge("A", "A", 3)
    assert undirected_graph.get_outgoing_edges("A") == [Edge("A", "A", 3)]
    assert undirected_graph.num_edges() == 1


def test_remove_node(directed_graph):
    """Test removing a node drops its edges and edges pointing at it."""
    for node in ("A", "B", "C"):
        directed_graph.add_node(node)
    directed_graph.add_edge("A", "B", 5)
    directed_graph.add_edge("C", "B", 2)
    directed_graph.add_edge("C", "A", 4)

    assert directed_graph.remove_node("B")
    assert not directed_graph.contains_node("B")
    assert "B" not in directed_graph.get_nodes()
    assert not directed_graph.contains_edge("A", "B")
    assert not directed_graph.contains_edge("C", "B")
    assert directed_graph.contains_edge("C", "A")
    assert all(edge.end != "B" for edge in directed_graph.get_edges())


def test_remove_missing_node(directed_graph):
    """Test removing a node that is not present."""
    assert not directed_graph.remove_node("Z")


def test_remove_edge(directed_graph):
    """Test removing a directed edge."""
    directed_graph.add_node("A")
    directed_graph.add_node("B")
    directed_graph.add_edge("A", "B", 5)

    assert directed_graph.remove_edge("A", "B")
    assert not directed_graph.contains_edge("A", "B")
    assert not directed_graph.remove_edge("A", "B")
    assert not directed_graph.remove_edge("X", "B")


def test_remove_edge_undirected(undirected_graph):
    """Test that removing an undirected edge removes both records."""
    undirected_graph.add_node("A")
    undirected_graph.add_node("B")
    undirected_graph.add_edge("A", "B", 5)

    assert undirected_graph.remove_edge("B", "A")
    assert not undirected_graph.contains_edge("A", "B")
    assert not undirected_graph.contains_edge("B", "A")
    assert undirected_graph.num_edges() == 0


def test_num_nodes_and_edges(directed_graph):
    """Test node and edge counts."""
    for node in ("A", "B", "C"):
        directed_graph.add_node(node)
    directed_graph.add_edge("A", "B", 1)
    directed_graph.add_edge("B", "C", 2)

    assert directed_graph.num_nodes() == 3
    assert directed_graph.num_edges() == 2
    assert len(directed_graph) == 3


def test_get_neighbours(undirected_graph):
    """Test retrieving the neighbours of a node."""
    for node in ("A", "B", "C"):
        undirected_graph.add_node(node)
    undirected_graph.add_edge("A", "B", 1)
    undirected_graph.add_edge("A", "C", 2)

    assert undirected_graph.get_neighbours("A") == ["B", "C"]
    assert undirected_graph.get_neighbours("B") == ["A"]
    assert undirected_graph.get_neighbours("missing") == []
    assert undirected_graph.get_degree("A") == 2
    assert undirected_graph.get_degree("missing") == 0


def test_get_label(directed_graph):
    """Test label lookup, including the reverse of a directed edge."""
    directed_graph.add_node("A")
    directed_graph.add_node("B")
    directed_graph.add_edge("A", "B", 10)

    assert directed_graph.get_label("A", "B") == 10
    assert directed_graph.get_label("B", "A") is None
    assert directed_graph.get_label("missing", "A") is None


def test_unlabelled_graph():
    """Test that unlabelled graphs store no labels."""
    graph: Graph[str, None] = Graph(directed=False, labelled=False)
    graph.add_node("A")
    graph.add_node("B")

    assert graph.add_edge("A", "B", 42)
    assert graph.contains_edge("A", "B")
    assert graph.contains_edge("B", "A")
    assert graph.get_label("A", "B") is None
    assert not graph.is_labelled()


def test_get_edges_is_snapshot(triangle_graph):
    """Test that the edge list returned is a copy."""
    edges = triangle_graph.get_edges()
    assert len(edges) == 6
    edges.clear()

    # internal structure must remain intact
    assert len(triangle_graph.get_edges()) == 6
    assert triangle_graph.num_edges() == 3


def test_get_nodes_insertion_order(triangle_graph):
    """Test that nodes are returned in the order they were added."""
    assert triangle_graph.get_nodes() == ["A", "B", "C"]


def test_get_edge(triangle_graph):
    """Test retrieving specific edge records."""
    edge = triangle_graph.get_edge("C", "A")
    assert edge is not None
    assert edge.as_tuple() == ("C", "A", 5)
    assert triangle_graph.get_edge("C", "Z") is None


@pytest.mark.parametrize("directed,expected", [(True, 2), (False, 2)])
def test_from_edges(directed, expected):
    """Test building a graph from edge values."""
    graph = Graph.from_edges([Edge("A", "B", 1), Edge("B", "C", 2)], directed=directed)

    assert graph.get_nodes() == ["A", "B", "C"]
    assert graph.num_edges() == expected
    assert graph.contains_edge("B", "A") is not directed


def test_integer_nodes():
    """Test that any hashable value can be a node."""
    graph: Graph[int, float] = Graph(directed=True)
    graph.add_node(1)
    graph.add_node(2)
    graph.add_edge(1, 2, 0.5)

    assert graph.get_neighbours(1) == [2]
    assert graph.get_label(1, 2) == pytest.approx(0.5)
