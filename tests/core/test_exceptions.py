"""
Tests for custom exceptions.
"""

from arbor.core.exceptions import (
    EmptyQueueError,
    GraphOperationError,
    QueueError,
    RecordFormatError,
    ValidationError,
)


def test_validation_error_message():
    """Test validation error message formatting."""
    error = ValidationError("test message")
    assert str(error) == "Validation Error: test message"


def test_record_format_error_message():
    """Test that record errors share the validation prefix."""
    error = RecordFormatError("bad row")
    assert str(error) == "Validation Error: bad row"


def test_graph_operation_error_message():
    """Test graph operation error message formatting."""
    error = GraphOperationError("test message")
    assert str(error) == "Graph Operation Error: test message"


def test_empty_queue_error_message():
    """Test empty queue errors keep the plain message."""
    error = EmptyQueueError("Queue is empty.")
    assert isinstance(error, QueueError)
    assert str(error) == "Queue is empty."
