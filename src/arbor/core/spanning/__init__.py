"""
Minimum spanning tree and forest computation.

This package provides Prim's algorithm on top of the indexed priority queue,
plus the result and metrics models it returns.

Example:
    >>> graph = Graph(directed=False)
    >>> for node in "ABC":
    ...     _ = graph.add_node(node)
    >>> _ = graph.add_edge("A", "B", 1)
    >>> _ = graph.add_edge("B", "C", 2)
    >>> _ = graph.add_edge("A", "C", 5)
    >>> [edge.as_tuple() for edge in minimum_spanning_forest(graph)]
    [('A', 'B', 1), ('B', 'C', 2)]
"""

from .models import PerformanceMetrics, SpanningResult
from .prim import PrimFinder, minimum_spanning_forest
from .utils import MemoryManager, calculate_total_weight, get_edge_weight

__all__ = [
    "MemoryManager",
    "PerformanceMetrics",
    "PrimFinder",
    "SpanningResult",
    "calculate_total_weight",
    "get_edge_weight",
    "minimum_spanning_forest",
]
