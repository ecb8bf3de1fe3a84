"""
Core domain models package.

This package provides the value types shared by the graph, the priority
queue and the spanning forest algorithm.
"""

from .edge import Edge
from .record import EdgeRecord

__all__ = [
    "Edge",
    "EdgeRecord",
]
