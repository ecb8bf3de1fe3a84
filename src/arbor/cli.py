"""Command Line Interface for computing minimum spanning forests of CSV edge lists.

The input file holds one undirected connection per line as ``from,to,distance``.
Trailing empty fields are dropped first, so ``a,b,1,`` is read as three fields.
Lines that then do not have exactly three fields are skipped, as are lines whose
distance parses as ``nan``. A distance that is not a number aborts the run.
The accepted edges are written to the output file as ``start,end,distance``
with three decimals, and a summary is printed to stderr with the total weight
converted from metres to kilometres.

Example Usage:
    python -m arbor mst data/italian_dist_graph.csv mst.csv
    python -m arbor mst graph.csv mst.csv --all-components --log-level DEBUG
"""

import argparse
import csv
import logging
import math
import sys
from typing import List, Optional, Sequence, TextIO

from .config import SpanningConfig
from .constants import (
    CSV_FIELD_COUNT,
    DEFAULT_LOG_LEVEL,
    KILOMETRE_DIVISOR,
    LABEL_PRECISION,
    LOG_FORMAT,
)
from .core.exceptions import RecordFormatError
from .core.graph import Graph
from .core.models import Edge, EdgeRecord
from .core.spanning import PrimFinder, SpanningResult

logger = logging.getLogger(__name__)


def read_records(source: TextIO) -> List[EdgeRecord]:
    """Parse edge records from CSV text.

    Args:
        source (TextIO): Open text stream positioned at the first line.

    Returns:
        List[EdgeRecord]: One record per well-formed line, in file order.

    Raises:
        RecordFormatError: If a three-field line has a non-numeric distance.
    """
    records = []
    for line_number, row in enumerate(csv.reader(source), start=1):
        while row and not row[-1]:
            row.pop()
        if len(row) != CSV_FIELD_COUNT:
            logger.debug(f"Skipping line {line_number}: {len(row)} fields")
            continue
        try:
            record = EdgeRecord.from_row(row)
        except RecordFormatError as e:
            raise RecordFormatError(f"line {line_number}: {e.args[0]}")
        if math.isnan(record.distance):
            logger.debug(f"Skipping line {line_number}: distance is not a number")
            continue
        records.append(record)
    return records


def build_graph(records: Sequence[EdgeRecord]) -> Graph[str, float]:
    """Build an undirected labelled graph from edge records."""
    graph: Graph[str, float] = Graph(directed=False, labelled=True)
    for record in records:
        graph.add_node(record.from_node)
        graph.add_node(record.to_node)
        if not graph.add_edge(record.from_node, record.to_node, record.distance):
            logger.debug(f"Duplicate connection {record.from_node} - {record.to_node} ignored")
    return graph


def format_edge(edge: Edge) -> str:
    return f"{edge.start},{edge.end},{edge.label:.{LABEL_PRECISION}f}"


def write_edges(edges: Sequence[Edge], target: TextIO) -> None:
    """Write one ``start,end,label`` line per edge."""
    for edge in edges:
        target.write(format_edge(edge) + "\n")


def format_summary(result: SpanningResult) -> str:
    """Summary line reported on stderr after a run."""
    return (
        f"Minimum Spanning Forest generated with {len(result.nodes)} nodes, "
        f"{len(result)} edges, and a total weight of "
        f"{result.total_weight / KILOMETRE_DIVISOR:.{LABEL_PRECISION}f} km"
    )


def run_mst(input_path: str, output_path: str, config: SpanningConfig) -> int:
    """Read the input graph, span it and write the result.

    Returns:
        int: Process exit code, 0 on success and 1 on any input/output failure.
    """
    try:
        with open(input_path, newline="") as f:
            records = read_records(f)
    except FileNotFoundError:
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1
    except RecordFormatError as e:
        print(f"Error: Incorrect number format in CSV file ({e})", file=sys.stderr)
        return 1

    graph = build_graph(records)
    logger.info(f"Loaded graph with {graph.num_nodes()} nodes and {graph.num_edges()} edges")

    finder = PrimFinder(graph, max_memory_mb=config.max_memory_mb)
    try:
        result = finder.find(span_all_components=config.span_all_components)
    except MemoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if result.metrics is not None:
        logger.info(f"Spanning metrics: {result.metrics.to_dict()}")

    try:
        with open(output_path, "w", newline="") as f:
            write_edges(result.edges, f)
    except OSError as e:
        print(f"Error: Unable to write to output file: {e}", file=sys.stderr)
        return 1

    print(format_summary(result), file=sys.stderr)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arbor", description="Minimum spanning forests of CSV edge lists"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    mst_parser = subparsers.add_parser("mst", help="Compute a minimum spanning forest")
    mst_parser.add_argument("input_csv", help="Edge list with from,to,distance lines")
    mst_parser.add_argument("output_csv", help="Destination for the accepted edges")
    mst_parser.add_argument(
        "--all-components",
        action="store_true",
        help="Span every connected component instead of only the first node's",
    )
    mst_parser.add_argument(
        "--max-memory-mb", type=float, default=None, help="Memory budget for the run"
    )
    mst_parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, configure logging and dispatch the command."""
    args = build_parser().parse_args(argv)
    config = SpanningConfig(
        span_all_components=args.all_components,
        max_memory_mb=args.max_memory_mb,
        log_level=args.log_level,
    )
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
    logger.debug(f"Running {args.command} with {config!r}")

    if args.command == "mst":
        return run_mst(args.input_csv, args.output_csv, config)
    return 1
