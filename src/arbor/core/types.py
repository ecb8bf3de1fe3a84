"""
Core type definitions and protocols.

This module provides the type aliases and protocols shared by the graph,
the priority queue and the spanning forest algorithm.
"""

from typing import Callable, Iterable, List, Optional, Protocol

from .models import Edge

# Three-way comparison: negative, zero or positive as the first argument is
# less than, equal to or greater than the second
type Comparator[E] = Callable[[E, E], int]

# Maps an edge to its numeric weight
type WeightFunc = Callable[[Edge], float]


class GraphProtocol(Protocol):
    """Protocol defining the graph operations the spanning algorithm needs."""

    def get_nodes(self) -> Iterable:
        """Get all nodes in insertion order."""
        ...

    def get_outgoing_edges(self, node) -> List[Edge]:
        """Get the edges stored under a node."""
        ...

    def contains_edge(self, from_node, to_node) -> bool:
        """Check if edge exists between nodes."""
        ...

    def get_edge(self, from_node, to_node) -> Optional[Edge]:
        """Get edge between two nodes if it exists."""
        ...
