"""
Core domain models package for the undirected graph.

This package provides the vertex identity model and the edge argument type.
"""

from .edge import Edge
from .vertex import Vertex, create_vertices

__all__ = [
    "Edge",
    "Vertex",
    "create_vertices",
]
