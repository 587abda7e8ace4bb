"""Core undirected graph functionality."""

from .exceptions import (
    ConfigurationError,
    GraphIntegrityError,
    GraphOperationError,
    InvalidOperationError,
    MissingVertexError,
    ResourceNotFoundError,
    SelfLoopError,
)
from .models import Edge, Vertex, create_vertices
from .graph import Graph, UndirectedGraph

__all__ = [
    "ConfigurationError",
    "Edge",
    "Graph",
    "GraphIntegrityError",
    "GraphOperationError",
    "InvalidOperationError",
    "MissingVertexError",
    "ResourceNotFoundError",
    "SelfLoopError",
    "UndirectedGraph",
    "Vertex",
    "create_vertices",
]
