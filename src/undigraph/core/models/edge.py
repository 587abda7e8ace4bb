"""
Edge model for the undirected graph.

An edge is a transient pairing of two vertices passed to ``add_edge``. The
graph does not keep edge objects; it records the relation in its adjacency
sets instead.
"""

from dataclasses import dataclass

from .vertex import Vertex


@dataclass(frozen=True)
class Edge:
    """
    Ordered pair of vertices.

    Attributes:
        source (Vertex): First endpoint
        sink (Vertex): Second endpoint
    """

    source: Vertex
    sink: Vertex

    def is_self_loop(self) -> bool:
        """Check whether both endpoints are the same graph entity."""
        return self.source == self.sink
