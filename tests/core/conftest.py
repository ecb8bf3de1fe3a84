"""Shared test fixtures."""

import pytest

from arbor.core.graph import Graph
from arbor.core.priority_queue import IndexedPriorityQueue, natural_order


@pytest.fixture
def directed_graph() -> Graph[str, int]:
    """Fixture providing an empty directed labelled graph."""
    return Graph(directed=True, labelled=True)


@pytest.fixture
def undirected_graph() -> Graph[str, int]:
    """Fixture providing an empty undirected labelled graph."""
    return Graph(directed=False, labelled=True)


@pytest.fixture
def triangle_graph() -> Graph[str, int]:
    """Fixture providing the undirected triangle A-B:1, B-C:2, A-C:5."""
    graph: Graph[str, int] = Graph(directed=False, labelled=True)
    for node in ("A", "B", "C"):
        graph.add_node(node)
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 2)
    graph.add_edge("A", "C", 5)
    return graph


@pytest.fixture
def disconnected_graph() -> Graph[str, int]:
    """Fixture providing two components {A-B:1} and {C-D:1}."""
    graph: Graph[str, int] = Graph(directed=False, labelled=True)
    for node in ("A", "B", "C", "D"):
        graph.add_node(node)
    graph.add_edge("A", "B", 1)
    graph.add_edge("C", "D", 1)
    return graph


@pytest.fixture
def int_queue() -> IndexedPriorityQueue[int]:
    """Fixture providing an empty queue of integers in natural order."""
    return IndexedPriorityQueue(natural_order)
