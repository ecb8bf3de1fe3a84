"""
Custom exceptions for the arbor graph toolkit.

This module defines the exceptions raised by the graph, priority queue and
spanning forest components. Recoverable conditions such as adding a duplicate
edge or removing an absent element are reported through boolean return values
instead; the exceptions below cover contract violations and malformed input.
"""


class ValidationError(Exception):
    """
    Raised when data validation fails.

    Examples:
        * Edge label that cannot be read as a number
        * Spanning result that does not match its graph
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class RecordFormatError(ValidationError):
    """
    Raised when an input record cannot be parsed.

    Examples:
        * Non-numeric distance field
        * Row with the wrong number of fields
    """


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    Examples:
        * Spanning forest requested with a weight function that is not callable
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class QueueError(Exception):
    """
    Raised when priority queue operations fail.

    Examples:
        * Heap property violated
        * Position index out of sync with the heap
    """


class EmptyQueueError(QueueError):
    """Raised when the top of an empty queue is read or popped."""
