"""
Tests for custom exceptions.
"""

from waypoint.core.exceptions import (
    EdgeNotFoundError,
    GraphOperationError,
    InvalidWeightError,
    ResourceNotFoundError,
    VertexNotFoundError,
)


def test_graph_operation_error_message():
    """Test graph operation error message formatting."""
    error = GraphOperationError("test message")
    assert str(error) == "Graph Operation Error: test message"


def test_invalid_weight_error_hierarchy():
    """Test that invalid weights are both graph and value errors."""
    error = InvalidWeightError("negative")
    assert isinstance(error, GraphOperationError)
    assert isinstance(error, ValueError)
    assert str(error) == "Graph Operation Error: negative"


def test_not_found_hierarchy():
    """Test the not-found exception hierarchy."""
    assert issubclass(VertexNotFoundError, ResourceNotFoundError)
    assert issubclass(EdgeNotFoundError, ResourceNotFoundError)
    assert not issubclass(VertexNotFoundError, GraphOperationError)
