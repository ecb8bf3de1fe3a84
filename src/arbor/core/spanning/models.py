"""
Data models for spanning forest computations.

This module provides:
- SpanningResult: Accepted edges of a spanning forest with their total weight
- PerformanceMetrics: Counters and timings for a single run

Example:
    >>> result = PrimFinder(graph).find()
    >>> result.total_weight
    3.0
    >>> sorted(result.nodes)
    ['A', 'B', 'C']
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Set, Union

from ...utils import UnionFind
from ..exceptions import ValidationError
from ..models import Edge
from ..types import GraphProtocol, WeightFunc
from .utils import EPSILON, calculate_total_weight


@dataclass
class PerformanceMetrics:
    """
    Container for spanning forest performance metrics.

    Attributes:
        operation: Name of the operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        edges_examined: Number of edges popped from the queue
        edges_discarded: Popped edges rejected because both ends were included
        max_memory_used: Peak memory usage during operation (bytes)
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    edges_examined: int = 0
    edges_discarded: int = 0
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")
        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """Operation duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "edges_examined": self.edges_examined,
            "edges_discarded": self.edges_discarded,
            "max_memory_used": self.max_memory_used,
        }


@dataclass
class SpanningResult:
    """
    Edges accepted by a spanning forest run, in acceptance order.

    Attributes:
        edges: Accepted edges
        total_weight: Sum of the accepted edge weights
        components: Number of trees grown (isolated start nodes count)
        metrics: Counters collected during the run
    """

    edges: List[Edge]
    total_weight: float
    components: int = 0
    metrics: Optional[PerformanceMetrics] = field(default=None, compare=False)

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.edges, list):
            raise TypeError("edges must be a list")
        if not all(isinstance(edge, Edge) for edge in self.edges):
            raise TypeError("edges must contain only Edge objects")
        if not isinstance(self.total_weight, (int, float)):
            raise TypeError("total_weight must be a numeric value")

    def __len__(self) -> int:
        return len(self.edges)

    def __getitem__(self, index: int) -> Edge:
        return self.edges[index]

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    @property
    def nodes(self) -> Set[Any]:
        """Endpoints touched by the accepted edges."""
        touched = set()
        for edge in self.edges:
            touched.add(edge.start)
            touched.add(edge.end)
        return touched

    def validate(
        self,
        graph: GraphProtocol,
        weight_func: Optional[WeightFunc] = None,
        weight_epsilon: float = EPSILON,
    ) -> None:
        """
        Check the result against the graph it was computed from.

        Checks:
        - Every accepted edge exists in the graph
        - The edges form no cycle when read as undirected
        - The stored total weight matches the edge weights

        Raises:
            ValidationError: If any check fails
        """
        forest = UnionFind()
        for edge in self.edges:
            if not graph.contains_edge(edge.start, edge.end):
                raise ValidationError(f"Edge {edge.start!r} -> {edge.end!r} not found in graph")
            if not forest.union(edge.start, edge.end):
                raise ValidationError(f"Edge {edge.start!r} -> {edge.end!r} closes a cycle")

        calculated = calculate_total_weight(self.edges, weight_func)
        if abs(calculated - self.total_weight) > weight_epsilon:
            raise ValidationError(
                f"Weight mismatch: calculated {calculated} != stored {self.total_weight}"
            )
