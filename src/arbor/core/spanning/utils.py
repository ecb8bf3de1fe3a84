"""
Utility functions for spanning forest computations.
"""

import math
from typing import Iterable, Optional

import psutil

from ...constants import MEMORY_SAMPLE_INTERVAL
from ..exceptions import ValidationError
from ..models import Edge
from ..types import WeightFunc

# Floating point comparison tolerance
EPSILON = 1e-9


def get_edge_weight(edge: Edge, weight_func: Optional[WeightFunc] = None) -> float:
    """
    Get the numeric weight of an edge.

    Without a weight function the label itself is converted to float.

    Raises:
        ValidationError: If the weight is missing, not numeric or NaN
    """
    raw = weight_func(edge) if weight_func is not None else edge.label
    try:
        weight = float(raw)
    except (TypeError, ValueError):
        raise ValidationError(
            f"Edge {edge.start!r} -> {edge.end!r} has non-numeric weight {raw!r}"
        )
    if math.isnan(weight):
        raise ValidationError(f"Edge {edge.start!r} -> {edge.end!r} has NaN weight")
    return weight


def calculate_total_weight(
    edges: Iterable[Edge], weight_func: Optional[WeightFunc] = None
) -> float:
    """Sum the weights of a collection of edges."""
    return math.fsum(get_edge_weight(edge, weight_func) for edge in edges)


class MemoryManager:
    """
    Samples resident memory of the process while a spanning forest is grown.

    ``start`` takes a baseline sample. The search loop calls ``check_memory``
    once per queue pop, which samples on every ``sample_every``-th call. The
    budget, when set, bounds growth above the baseline.
    """

    def __init__(
        self,
        max_memory_mb: Optional[float] = None,
        sample_every: int = MEMORY_SAMPLE_INTERVAL,
    ):
        if sample_every < 1:
            raise ValueError("sample_every must be at least 1")
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.sample_every = sample_every
        self.start_memory = 0
        self.samples = 0
        self._peak_memory = 0
        self._pops = 0
        self.start()

    def start(self) -> None:
        """Take a baseline sample and restart peak tracking from it."""
        self._pops = 0
        self.samples = 0
        self.start_memory = self.sample(enforce=False)
        self._peak_memory = self.start_memory

    def check_memory(self) -> None:
        """
        Record one queue pop, sampling on every ``sample_every``-th call.

        Raises:
            MemoryError: If growth above the baseline exceeds the budget
        """
        self._pops += 1
        if self._pops % self.sample_every == 0:
            self.sample()

    def sample(self, enforce: bool = True) -> int:
        """
        Read current memory usage and fold it into the peak.

        Args:
            enforce: Raise when the budget is exceeded

        Returns:
            Current resident memory in bytes
        """
        current = get_memory_usage()
        self.samples += 1
        self._peak_memory = max(self._peak_memory, current)
        if enforce and self.max_memory and current - self.start_memory > self.max_memory:
            raise MemoryError(
                f"Spanning run grew by {(current - self.start_memory)/1024/1024:.1f}MB "
                f"after {self._pops} pops, over the "
                f"{self.max_memory/1024/1024:.1f}MB budget"
            )
        return current

    @property
    def peak_memory(self) -> int:
        """Peak memory usage seen so far, in bytes."""
        return self._peak_memory

    @property
    def peak_memory_mb(self) -> float:
        return self._peak_memory / 1024 / 1024


def get_memory_usage() -> int:
    """Get current resident memory of this process in bytes."""
    return psutil.Process().memory_info().rss
