"""
Input record model for edge lists read from CSV files.

Each record describes one undirected connection ``from,to,distance``. Node names
are taken as written, so an empty name is a valid node. Any value ``float``
accepts is a valid distance, ``nan`` included; the driver decides what to do
with non-finite distances.
"""

from dataclasses import dataclass
from typing import Sequence

from ...constants import CSV_FIELD_COUNT
from ..exceptions import RecordFormatError


@dataclass(frozen=True)
class EdgeRecord:
    """
    One parsed line of an edge list.

    Attributes:
        from_node (str): Starting node name
        to_node (str): Ending node name
        distance (float): Distance between the two nodes
    """

    from_node: str
    to_node: str
    distance: float

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "EdgeRecord":
        """
        Build a record from a raw CSV row.

        Fields are stripped of surrounding whitespace before parsing.

        Raises:
            RecordFormatError: If the row does not have exactly three fields
                or the distance is not numeric
        """
        if len(row) != CSV_FIELD_COUNT:
            raise RecordFormatError(
                f"expected {CSV_FIELD_COUNT} fields, got {len(row)}: {list(row)}"
            )
        from_node, to_node, raw_distance = (value.strip() for value in row)
        try:
            distance = float(raw_distance)
        except ValueError:
            raise RecordFormatError(f"invalid distance {raw_distance!r}")
        return cls(from_node=from_node, to_node=to_node, distance=distance)
