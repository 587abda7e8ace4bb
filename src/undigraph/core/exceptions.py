"""
Custom exceptions for the undirected graph library.

This module defines the hierarchy of exceptions raised by graph operations.
Each exception type corresponds to a specific category of error so callers
can handle failures in a structured way. Operations that fail with one of
these exceptions never leave the graph partially modified.
"""

from typing import Any, List, Optional


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This is the base class for every error raised while operating on a graph
    structure, such as invalid vertex/edge operations or integrity violations.

    Examples:
        * Edge creation between unregistered vertices
        * Rejected self-loops
        * Graph integrity violations
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ResourceNotFoundError(GraphOperationError):
    """
    Raised when a requested graph resource is not found.

    Examples:
        * Vertex not registered in the graph
    """


class MissingVertexError(ResourceNotFoundError):
    """
    Raised when an edge references a vertex that is not in the graph.

    The check happens before any adjacency write, so the graph is left
    untouched when this is raised.

    Attributes:
        vertex: The endpoint that was not registered
    """

    def __init__(self, vertex: Any, message: Optional[str] = None):
        self.vertex = vertex
        super().__init__(
            message
            or f"must add vertices to graph before creating edge between them: {vertex} not found"
        )


class InvalidOperationError(GraphOperationError):
    """
    Raised when an operation is invalid in the current context.

    Examples:
        * Self-loop edges on a graph that does not allow them
        * Unsupported operations
    """


class SelfLoopError(InvalidOperationError):
    """
    Raised when adding an edge whose source and sink are the same vertex.

    Attributes:
        vertex: The vertex that would have been connected to itself
    """

    def __init__(self, vertex: Any):
        self.vertex = vertex
        super().__init__(f"self-loops are not allowed: {vertex}")


class GraphIntegrityError(GraphOperationError):
    """
    Raised when the graph structure violates one of its invariants.

    Only raised when integrity checking is enabled in the graph configuration.

    Examples:
        * Asymmetric adjacency entries
        * Adjacency entries referencing unregistered vertices
        * Registered vertices without an adjacency entry

    Attributes:
        violations (List[str]): Description of every violation found
    """

    def __init__(self, violations: List[str]):
        self.violations = list(violations)
        super().__init__("; ".join(self.violations))


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown configuration keys
        * Values of the wrong type
        * Unparseable environment variables
    """

    def __str__(self) -> str:
        """Format configuration error message."""
        return f"Configuration Error: {super().__str__()}"
