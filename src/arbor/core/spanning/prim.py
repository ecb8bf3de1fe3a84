"""
Prim's algorithm for minimum spanning trees and forests.

The search starts from the first node in graph iteration order. Every edge
leaving an included node towards a node not yet included is pushed onto a
shared IndexedPriorityQueue ordered by weight. The cheapest edge is popped
repeatedly; if both of its endpoints are already included it would close a
cycle and is dropped, otherwise it is accepted and the newly reached node's
edges are queued in turn.

Stale edges are not removed from the queue when their end node gets included
through a cheaper edge. They are discarded when popped instead, so the queue
only ever needs push and pop.

By default only the component of the start node is spanned. Passing
``span_all_components=True`` restarts the search from every node still
outside the tree once the queue runs dry, which yields one tree per
connected component.
"""

from contextlib import contextmanager
import logging
from time import time
from typing import Any, Dict, List, Optional, Set

from ...constants import MEMORY_SAMPLE_INTERVAL, MST_OPERATION
from ..exceptions import GraphOperationError
from ..models import Edge
from ..priority_queue import IndexedPriorityQueue, comparing
from ..types import GraphProtocol, WeightFunc
from .models import PerformanceMetrics, SpanningResult
from .utils import MemoryManager, calculate_total_weight, get_edge_weight

logger = logging.getLogger(__name__)


class PrimFinder:
    """Computes minimum spanning forests of a graph with Prim's algorithm."""

    def __init__(
        self,
        graph: GraphProtocol,
        max_memory_mb: Optional[float] = None,
        memory_sample_interval: int = MEMORY_SAMPLE_INTERVAL,
    ):
        """Initialize finder with optional memory limit and sampling interval in pops."""
        self.graph = graph
        self.memory_manager = MemoryManager(max_memory_mb, sample_every=memory_sample_interval)

    @contextmanager
    def _search_context(self):
        """Baseline memory on entry and take a closing sample on exit."""
        self.memory_manager.start()
        try:
            yield
        finally:
            self.memory_manager.sample(enforce=False)

    def find(
        self,
        span_all_components: bool = False,
        weight_func: Optional[WeightFunc] = None,
    ) -> SpanningResult:
        """
        Compute the minimum spanning tree (or forest) of the graph.

        Args:
            span_all_components: Grow a tree in every connected component
                instead of only the start node's component
            weight_func: Maps an edge to its weight; defaults to the
                edge label converted to float

        Returns:
            SpanningResult with the accepted edges in acceptance order

        Raises:
            GraphOperationError: If weight_func is not callable
            ValidationError: If an edge reached by the search has no numeric weight
            MemoryError: If the memory budget is exceeded
        """
        if weight_func is not None and not callable(weight_func):
            raise GraphOperationError(f"weight_func must be callable, got {type(weight_func).__name__}")

        metrics = PerformanceMetrics(operation=MST_OPERATION, start_time=time())
        weights: Dict[Edge, float] = {}
        queue: IndexedPriorityQueue[Edge] = IndexedPriorityQueue(comparing(weights.__getitem__))
        included: Set[Any] = set()
        accepted: List[Edge] = []
        components = 0

        with self._search_context():
            try:
                nodes = list(self.graph.get_nodes())
                if not nodes:
                    logger.debug("Empty graph, nothing to span")
                else:
                    roots = nodes if span_all_components else nodes[:1]
                    for root in roots:
                        if root in included:
                            continue
                        if components:
                            logger.debug(f"Restarting from {root!r} for a new component")
                        components += 1
                        self._grow_tree(root, included, queue, weights, accepted, weight_func, metrics)
            finally:
                metrics.end_time = time()

        metrics.max_memory_used = self.memory_manager.peak_memory

        total = calculate_total_weight(accepted, weight_func)
        logger.debug(
            f"Spanning forest has {len(accepted)} edges over {components} component(s), "
            f"total weight {total}"
        )
        return SpanningResult(
            edges=accepted, total_weight=total, components=components, metrics=metrics
        )

    def _grow_tree(
        self,
        root: Any,
        included: Set[Any],
        queue: IndexedPriorityQueue[Edge],
        weights: Dict[Edge, float],
        accepted: List[Edge],
        weight_func: Optional[WeightFunc],
        metrics: PerformanceMetrics,
    ) -> None:
        """Grow one tree from ``root`` until the queue is empty."""
        included.add(root)
        self._enqueue_edges_from(root, included, queue, weights, weight_func)

        while not queue.empty():
            self.memory_manager.check_memory()
            edge = queue.pop()
            metrics.edges_examined += 1

            if edge.start in included and edge.end in included:
                metrics.edges_discarded += 1
                logger.debug(f"Discarding {edge.start!r} -> {edge.end!r}: both ends included")
                continue

            accepted.append(edge)
            new_node = edge.end if edge.start in included else edge.start
            included.add(new_node)
            logger.debug(f"Accepted {edge.start!r} -> {edge.end!r} ({weights[edge]})")
            self._enqueue_edges_from(new_node, included, queue, weights, weight_func)

    def _enqueue_edges_from(
        self,
        node: Any,
        included: Set[Any],
        queue: IndexedPriorityQueue[Edge],
        weights: Dict[Edge, float],
        weight_func: Optional[WeightFunc],
    ) -> None:
        """Queue the edges leaving ``node`` whose end is not yet included."""
        for edge in self.graph.get_outgoing_edges(node):
            if edge.end in included:
                continue
            if edge not in weights:
                weights[edge] = get_edge_weight(edge, weight_func)
            queue.push(edge)


def minimum_spanning_forest(
    graph: GraphProtocol,
    span_all_components: bool = False,
    weight_func: Optional[WeightFunc] = None,
) -> List[Edge]:
    """
    Compute the edges of a minimum spanning tree (or forest) of ``graph``.

    Returns an empty list for an empty graph. See PrimFinder.find for the
    meaning of the arguments.
    """
    return PrimFinder(graph).find(
        span_all_components=span_all_components, weight_func=weight_func
    ).edges
