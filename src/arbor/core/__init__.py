"""Core graph functionality."""

from .exceptions import (
    EmptyQueueError,
    GraphOperationError,
    QueueError,
    RecordFormatError,
    ValidationError,
)
from .models import Edge, EdgeRecord
from .types import Comparator, GraphProtocol, WeightFunc
from .graph import Graph
from .priority_queue import IndexedPriorityQueue, comparing, natural_order
from .spanning import PrimFinder, SpanningResult, minimum_spanning_forest

__all__ = [
    "Comparator",
    "Edge",
    "EdgeRecord",
    "EmptyQueueError",
    "Graph",
    "GraphOperationError",
    "GraphProtocol",
    "IndexedPriorityQueue",
    "PrimFinder",
    "QueueError",
    "RecordFormatError",
    "SpanningResult",
    "ValidationError",
    "WeightFunc",
    "comparing",
    "minimum_spanning_forest",
    "natural_order",
]
