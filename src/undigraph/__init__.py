"""
undigraph - In-memory undirected graph data structure

This package provides an undirected graph over content-bearing vertices. It
includes:

- The UndirectedGraph data structure and the Vertex identity model
- A thread-safe Graph wrapper with transactions and change events
- Structural integrity validation
- Configuration loading and logging setup
"""

__version__ = "0.1.0"
__author__ = "undigraph Team"
__license__ = "UNLICENSED"

# Version compatibility check
import sys

if sys.version_info < (3, 10):
    raise RuntimeError("undigraph requires Python 3.10 or higher")

# Import commonly used components for easier access
from .core import (
    Edge,
    Graph,
    MissingVertexError,
    SelfLoopError,
    UndirectedGraph,
    Vertex,
    create_vertices,
)
from .config import GraphConfig, configure_logging

__all__ = [
    "Edge",
    "Graph",
    "GraphConfig",
    "MissingVertexError",
    "SelfLoopError",
    "UndirectedGraph",
    "Vertex",
    "configure_logging",
    "create_vertices",
]
