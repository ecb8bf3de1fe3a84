"""
Arbor - Generic graphs, indexed priority queues and minimum spanning forests

This package provides:

- A generic adjacency-list graph, directed or undirected, labelled or not
- An indexed binary min-heap with O(1) membership and O(log n) removal
- Prim's algorithm for minimum spanning trees and forests
- A command-line driver that spans graphs read from CSV edge lists
"""

__version__ = "0.1.0"
__author__ = "Arbor Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("Arbor requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.graph import Graph
from .core.models import Edge
from .core.priority_queue import IndexedPriorityQueue
from .core.spanning import minimum_spanning_forest

__all__ = [
    "Graph",
    "Edge",
    "IndexedPriorityQueue",
    "minimum_spanning_forest",
]
