"""
Tests for custom exceptions.
"""

from undigraph.core.exceptions import (
    ConfigurationError,
    GraphIntegrityError,
    GraphOperationError,
    InvalidOperationError,
    MissingVertexError,
    ResourceNotFoundError,
    SelfLoopError,
)
from undigraph.core.models import Vertex


def test_graph_operation_error_message():
    """Test graph operation error message formatting."""
    error = GraphOperationError("test message")
    assert str(error) == "Graph Operation Error: test message"


def test_configuration_error_message():
    """Test configuration error message formatting."""
    error = ConfigurationError("test message")
    assert str(error) == "Configuration Error: test message"


def test_missing_vertex_error():
    """Test the default missing vertex message and hierarchy."""
    vertex = Vertex("A")
    error = MissingVertexError(vertex)

    assert error.vertex is vertex
    assert isinstance(error, ResourceNotFoundError)
    assert isinstance(error, GraphOperationError)
    assert str(error) == (
        "Graph Operation Error: must add vertices to graph before creating edge "
        "between them: Vertex<Content:A> not found"
    )


def test_missing_vertex_error_custom_message():
    """Test overriding the missing vertex message."""
    error = MissingVertexError(Vertex("A"), "custom")
    assert str(error) == "Graph Operation Error: custom"


def test_self_loop_error():
    """Test self-loop error message and hierarchy."""
    error = SelfLoopError(Vertex("A"))

    assert isinstance(error, InvalidOperationError)
    assert str(error) == "Graph Operation Error: self-loops are not allowed: Vertex<Content:A>"


def test_graph_integrity_error():
    """Test that integrity errors keep every violation."""
    error = GraphIntegrityError(["first", "second"])

    assert error.violations == ["first", "second"]
    assert str(error) == "Graph Operation Error: first; second"
