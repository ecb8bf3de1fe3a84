"""
Edge model for the graph toolkit.

An edge is an immutable value connecting a start node to an end node, with an
optional label. Two edges are the same edge when their endpoints match; the
label is carried along but plays no part in equality or hashing, so a graph or
a priority queue treats ``Edge("A", "B", 1)`` and ``Edge("A", "B", 7)`` as one
element.
"""

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Edge[V: Hashable, L]:
    """
    Directed, optionally labelled connection between two nodes.

    Attributes:
        start (V): Source node
        end (V): Target node
        label (Optional[L]): Edge label, ``None`` for unlabelled graphs
    """

    start: V
    end: V
    label: Optional[L] = field(default=None, compare=False)

    @property
    def is_self_loop(self) -> bool:
        """Whether the edge starts and ends at the same node."""
        return self.start == self.end

    def reversed(self) -> "Edge[V, L]":
        """Return the mirror edge, carrying the same label."""
        return Edge(self.end, self.start, self.label)

    def as_tuple(self) -> Tuple[V, V, Optional[L]]:
        return (self.start, self.end, self.label)
