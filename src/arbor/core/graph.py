"""
Core graph data structure with an adjacency list representation.

This module provides the generic Graph class. Nodes are any hashable values
supplied by the caller; each node maps to the list of edges that start at it.
A graph is either directed or undirected, and either labelled or unlabelled.

In undirected mode every connection is stored twice, once under each
endpoint, as two independent Edge records. Removing an edge through the graph
removes both records; nothing else keeps them in sync.

Mutations that cannot be applied (missing endpoint, duplicate edge, unknown
node) return False and leave the graph untouched.
"""

from collections.abc import Hashable
import logging
from typing import Dict, Iterable, List, Optional

from .models import Edge

logger = logging.getLogger(__name__)


class Graph[V: Hashable, L]:
    """
    Generic graph over hashable node identifiers.

    Attributes:
        _adjacency (Dict[V, List[Edge[V, L]]]): Outgoing edges per node, in
            insertion order
        _directed (bool): Whether edges are one-way
        _labelled (bool): Whether edges carry labels
    """

    def __init__(self, directed: bool = False, labelled: bool = True):
        """
        Initialize an empty graph.

        Args:
            directed (bool): Store edges one-way only (default: False)
            labelled (bool): Keep edge labels; unlabelled graphs store None
                (default: True)
        """
        self._adjacency: Dict[V, List[Edge[V, L]]] = {}
        self._directed = directed
        self._labelled = labelled

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def labelled(self) -> bool:
        return self._labelled

    def is_directed(self) -> bool:
        """Check if the graph is directed."""
        return self._directed

    def is_labelled(self) -> bool:
        """Check if the graph keeps edge labels."""
        return self._labelled

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return (
            f"Graph(directed={self._directed}, labelled={self._labelled}, "
            f"nodes={self.num_nodes()}, edges={self.num_edges()})"
        )

    def add_node(self, node: V) -> bool:
        """
        Add a node with no edges.

        Returns:
            bool: False if the node was already present
        """
        if node in self._adjacency:
            logger.debug(f"Node {node!r} already present")
            return False
        self._adjacency[node] = []
        return True

    def add_edge(self, from_node: V, to_node: V, label: Optional[L] = None) -> bool:
        """
        Add an edge between two existing nodes.

        In undirected mode the mirror edge is stored under ``to_node`` as
        well, unless that node already holds an edge back to ``from_node``
        (which is always the case for a self-loop).

        Args:
            from_node (V): Start node, must already be in the graph
            to_node (V): End node, must already be in the graph
            label (Optional[L]): Edge label, discarded for unlabelled graphs

        Returns:
            bool: False if an endpoint is missing or the edge already exists
        """
        if from_node not in self._adjacency or to_node not in self._adjacency:
            logger.debug(f"Cannot add edge {from_node!r} -> {to_node!r}: missing endpoint")
            return False
        if not self._labelled:
            label = None

        edge = Edge(from_node, to_node, label)
        if edge in self._adjacency[from_node]:
            logger.debug(f"Edge {from_node!r} -> {to_node!r} already present")
            return False
        self._adjacency[from_node].append(edge)

        if not self._directed:
            mirror = edge.reversed()
            if mirror not in self._adjacency[to_node]:
                self._adjacency[to_node].append(mirror)
        return True

    def contains_node(self, node: V) -> bool:
        """Check if a node exists in the graph."""
        return node in self._adjacency

    def contains_edge(self, from_node: V, to_node: V) -> bool:
        """Check if an edge exists from ``from_node`` to ``to_node``."""
        return self.get_edge(from_node, to_node) is not None

    def remove_node(self, node: V) -> bool:
        """
        Remove a node, its outgoing edges and every edge that ends at it.

        Returns:
            bool: False if the node was not in the graph
        """
        if node not in self._adjacency:
            logger.debug(f"Cannot remove node {node!r}: not found")
            return False
        del self._adjacency[node]
        for source, edges in self._adjacency.items():
            self._adjacency[source] = [edge for edge in edges if edge.end != node]
        return True

    def remove_edge(self, from_node: V, to_node: V) -> bool:
        """
        Remove the edge from ``from_node`` to ``to_node``.

        In undirected mode the mirror edge is removed too when present.

        Returns:
            bool: Whether the edge from ``from_node`` to ``to_node`` was removed
        """
        if from_node not in self._adjacency:
            logger.debug(f"Cannot remove edge {from_node!r} -> {to_node!r}: no such node")
            return False
        removed = self._discard(from_node, to_node)
        if not self._directed and to_node in self._adjacency:
            self._discard(to_node, from_node)
        return removed

    def _discard(self, from_node: V, to_node: V) -> bool:
        edges = self._adjacency[from_node]
        kept = [edge for edge in edges if edge.end != to_node]
        self._adjacency[from_node] = kept
        return len(kept) != len(edges)

    def num_nodes(self) -> int:
        """Get the number of nodes."""
        return len(self._adjacency)

    def num_edges(self) -> int:
        """
        Get the number of edges.

        Undirected connections are counted once even though two records are
        stored; a self-loop has a single record and counts once.
        """
        records = 0
        loops = 0
        for edges in self._adjacency.values():
            records += len(edges)
            loops += sum(1 for edge in edges if edge.is_self_loop)
        if self._directed:
            return records
        return (records - loops) // 2 + loops

    def get_nodes(self) -> List[V]:
        """Get all nodes in insertion order."""
        return list(self._adjacency)

    def get_edges(self) -> List[Edge[V, L]]:
        """Get a snapshot of every stored edge record."""
        return [edge for edges in self._adjacency.values() for edge in edges]

    def get_outgoing_edges(self, node: V) -> List[Edge[V, L]]:
        """Get a snapshot of the edges that start at ``node``."""
        return list(self._adjacency.get(node, []))

    def get_neighbours(self, node: V) -> List[V]:
        """Get the end nodes of the edges leaving ``node``."""
        return [edge.end for edge in self._adjacency.get(node, [])]

    def get_degree(self, node: V) -> int:
        """Get the number of edges leaving ``node``."""
        return len(self._adjacency.get(node, []))

    def get_edge(self, from_node: V, to_node: V) -> Optional[Edge[V, L]]:
        """Get the edge between two nodes if it exists."""
        for edge in self._adjacency.get(from_node, []):
            if edge.end == to_node:
                return edge
        return None

    def get_label(self, from_node: V, to_node: V) -> Optional[L]:
        """Get the label of an edge, or None if there is no such edge."""
        edge = self.get_edge(from_node, to_node)
        return edge.label if edge is not None else None

    @classmethod
    def from_edges(
        cls, edges: Iterable[Edge[V, L]], directed: bool = False, labelled: bool = True
    ) -> "Graph[V, L]":
        """Create a Graph from edges, adding their endpoints as nodes."""
        graph: Graph[V, L] = cls(directed=directed, labelled=labelled)
        for edge in edges:
            graph.add_node(edge.start)
            graph.add_node(edge.end)
            graph.add_edge(edge.start, edge.end, edge.label)
        return graph
