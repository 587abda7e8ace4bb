"""
Core undirected graph data structure.

This module provides the UndirectedGraph class that stores content-bearing
vertices and the symmetric adjacency relation between them.

Vertices are deduplicated by their string key. Internally each registered
vertex is given an integer handle, and adjacency is kept as a mapping from
handle to the set of neighbouring handles. The structure maintains three
invariants:

- symmetry: ``a`` is adjacent to ``b`` iff ``b`` is adjacent to ``a``
- referential integrity: every handle in an adjacency set is registered
- every registered vertex has an adjacency entry, possibly empty

The implementation is pure and unsynchronised. Locking, transactions and
events are handled by ``undigraph.core.graph.Graph``.
"""

import logging
from typing import Dict, Iterable, Iterator, Optional, Set, Tuple

from ...config import GraphConfig
from ..exceptions import MissingVertexError, SelfLoopError
from ..models.edge import Edge
from ..models.vertex import Vertex
from .integrity import GraphIntegrityValidator

logger = logging.getLogger(__name__)


class UndirectedGraph:
    """
    Undirected graph over content-bearing vertices.

    Attributes:
        config (GraphConfig): Behaviour settings for this graph
        _handles (Dict[str, int]): Vertex key to handle
        _vertices (Dict[int, Vertex]): Handle to registered vertex
        _adjacency (Dict[int, Set[int]]): Handle to neighbour handles
        _next_handle (int): Next handle to assign; handles are never reused
    """

    def __init__(
        self,
        vertices: Optional[Iterable[Vertex]] = None,
        edges: Optional[Iterable[Edge]] = None,
        config: Optional[GraphConfig] = None,
    ):
        """
        Create a graph, optionally seeded with vertices and edges.

        All vertices are registered before any edge is added.

        Args:
            vertices (Optional[Iterable[Vertex]]): Initial vertices. Duplicates
                are ignored.
            edges (Optional[Iterable[Edge]]): Initial edges

        Raises:
            MissingVertexError: If an initial edge names a vertex that is not
                among the initial vertices
            SelfLoopError: If an initial edge is a self-loop and the
                configuration does not allow them
        """
        self.config = config or GraphConfig()
        self._handles: Dict[str, int] = {}
        self._vertices: Dict[int, Vertex] = {}
        self._adjacency: Dict[int, Set[int]] = {}
        self._next_handle = 0

        for vertex in vertices or ():
            self.add_vertex(vertex)
        for edge in edges or ():
            self.add_edge(edge)

    def __repr__(self) -> str:
        return f"UndirectedGraph(vertices={self.vertex_count()}, edges={self.edge_count()})"

    def _check_integrity(self) -> None:
        if self.config.check_integrity:
            GraphIntegrityValidator.assert_valid(self)

    def handle_of(self, vertex: Vertex) -> Optional[int]:
        """
        Get the handle the graph assigned to a vertex.

        Args:
            vertex (Vertex): The vertex to look up

        Returns:
            Optional[int]: The handle, or None if the vertex is not registered
        """
        return self._handles.get(vertex.key)

    # -----------------
    # VERTEX OPERATIONS
    # -----------------

    def add_vertex(self, vertex: Vertex) -> bool:
        """
        Add the given vertex to the graph if it is not already present.

        Args:
            vertex (Vertex): The vertex to add

        Returns:
            bool: True if the vertex was added, False if a vertex with the
                same key was already registered. Nothing changes in that case.
        """
        key = vertex.key
        if key in self._handles:
            return False

        handle = self._next_handle
        self._next_handle += 1
        self._handles[key] = handle
        self._vertices[handle] = vertex
        self._adjacency[handle] = set()
        logger.debug(f"Added vertex {key} as handle {handle}")

        self._check_integrity()
        return True

    def remove_vertex(self, vertex: Vertex) -> bool:
        """
        Remove the given vertex and every edge incident to it.

        Args:
            vertex (Vertex): The vertex to remove

        Returns:
            bool: True if the vertex was removed, False if it was not in the graph
        """
        key = vertex.key
        handle = self._handles.get(key)
        if handle is None:
            logger.debug(f"Ignoring removal of absent vertex {key}")
            return False

        self.remove_all_edges(vertex)
        del self._adjacency[handle]  # empty at this point
        del self._vertices[handle]
        del self._handles[key]
        logger.debug(f"Removed vertex {key} (handle {handle})")

        self._check_integrity()
        return True

    def contains_vertex(self, vertex: Vertex) -> bool:
        """Check if a vertex with the same key is registered."""
        return vertex.key in self._handles

    def get_vertices(self) -> Set[Vertex]:
        """
        Get all vertices in the graph.

        Returns:
            Set[Vertex]: The registered vertices, in no particular order
        """
        return set(self._vertices.values())

    def vertex_count(self) -> int:
        """Get the number of registered vertices."""
        return len(self._vertices)

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def add_edge(self, edge: Edge) -> bool:
        """
        Add an undirected edge between ``edge.source`` and ``edge.sink``.

        Both endpoints are checked before anything is written, so a failed
        call leaves the graph unchanged. Adding an existing edge is a no-op.

        Args:
            edge (Edge): The endpoints to connect

        Returns:
            bool: True if the edge is new, False if it already existed

        Raises:
            MissingVertexError: If either endpoint is not in the graph
            SelfLoopError: If both endpoints are the same vertex and the
                configuration does not allow self-loops
        """
        source_handle = self._handles.get(edge.source.key)
        if source_handle is None:
            logger.warning(f"Rejected edge: source {edge.source.key} is not in the graph")
            raise MissingVertexError(edge.source)

        sink_handle = self._handles.get(edge.sink.key)
        if sink_handle is None:
            logger.warning(f"Rejected edge: sink {edge.sink.key} is not in the graph")
            raise MissingVertexError(edge.sink)

        if edge.is_self_loop() and not self.config.allow_self_loops:
            logger.warning(f"Rejected self-loop on {edge.source.key}")
            raise SelfLoopError(edge.source)

        if sink_handle in self._adjacency[source_handle]:
            return False

        self._adjacency[source_handle].add(sink_handle)
        self._adjacency[sink_handle].add(source_handle)
        logger.debug(f"Added edge {edge.source.key} -- {edge.sink.key}")

        self._check_integrity()
        return True

    def remove_edge(self, vertex1: Vertex, vertex2: Vertex) -> bool:
        """
        Remove the edge between two vertices.

        Removing an edge that does not exist, or one whose endpoints are not
        in the graph, does nothing.

        Args:
            vertex1 (Vertex): One endpoint
            vertex2 (Vertex): The other endpoint

        Returns:
            bool: True if an edge was removed, False otherwise
        """
        handle1 = self._handles.get(vertex1.key)
        handle2 = self._handles.get(vertex2.key)
        if handle1 is None or handle2 is None or handle2 not in self._adjacency[handle1]:
            return False

        self._adjacency[handle1].discard(handle2)
        self._adjacency[handle2].discard(handle1)
        logger.debug(f"Removed edge {vertex1.key} -- {vertex2.key}")

        self._check_integrity()
        return True

    def remove_all_edges(self, vertex: Vertex) -> int:
        """
        Remove every edge between the given vertex and other vertices.

        Args:
            vertex (Vertex): The vertex whose edges are removed

        Returns:
            int: Number of edges removed. 0 if the vertex has no edges or is
                not in the graph.
        """
        handle = self._handles.get(vertex.key)
        if handle is None:
            return 0

        # Snapshot first; remove_edge mutates the set being read.
        neighbors = [self._vertices[neighbor] for neighbor in self._adjacency[handle]]
        removed = 0
        for neighbor in neighbors:
            if self.remove_edge(vertex, neighbor):
                removed += 1
        return removed

    def contains_edge(self, vertex1: Vertex, vertex2: Vertex) -> bool:
        """
        Check if there is an edge between two vertices.

        Returns:
            bool: True if the edge exists, False otherwise, including when
                either vertex is not in the graph
        """
        handle1 = self._handles.get(vertex1.key)
        handle2 = self._handles.get(vertex2.key)
        if handle1 is None or handle2 is None:
            return False
        return handle2 in self._adjacency[handle1]

    def edge_count(self) -> int:
        """
        Get the number of undirected edges in the graph.

        Every ordinary edge appears in two adjacency sets and a self-loop in
        one, so self-loops are added once more before halving.

        Returns:
            int: Number of undirected edges
        """
        directed = sum(len(neighbors) for neighbors in self._adjacency.values())
        loops = sum(1 for handle, neighbors in self._adjacency.items() if handle in neighbors)
        return (directed + loops) // 2

    # -----------------
    # QUERIES
    # -----------------

    def get_neighbors(self, vertex: Vertex) -> Set[Vertex]:
        """
        Get all vertices adjacent to the given vertex.

        Returns:
            Set[Vertex]: Neighbouring vertices, empty if the vertex is absent
        """
        handle = self._handles.get(vertex.key)
        if handle is None:
            return set()
        return {self._vertices[neighbor] for neighbor in self._adjacency[handle]}

    def get_degree(self, vertex: Vertex) -> int:
        """
        Get the number of edges incident to a vertex.

        A self-loop counts once. Absent vertices have degree 0.
        """
        handle = self._handles.get(vertex.key)
        if handle is None:
            return 0
        return len(self._adjacency[handle])

    def get_edges(self) -> Iterator[Tuple[Vertex, Vertex]]:
        """
        Iterate over every undirected edge exactly once.

        Yields:
            Tuple[Vertex, Vertex]: The two endpoints of an edge
        """
        for handle, neighbors in self._adjacency.items():
            for neighbor in neighbors:
                if neighbor >= handle:
                    yield self._vertices[handle], self._vertices[neighbor]

    def clear(self) -> None:
        """Remove all vertices and edges. Handles are not reused afterwards."""
        self._handles.clear()
        self._vertices.clear()
        self._adjacency.clear()
        logger.debug("Cleared graph")

    def copy(self) -> "UndirectedGraph":
        """
        Create an independent copy of the graph structure.

        Vertices are shared with the original since they are immutable.

        Returns:
            UndirectedGraph: New graph with the same vertices, edges, handles
                and configuration
        """
        duplicate = UndirectedGraph(config=self.config)
        duplicate._handles = dict(self._handles)
        duplicate._vertices = dict(self._vertices)
        duplicate._adjacency = {
            handle: set(neighbors) for handle, neighbors in self._adjacency.items()
        }
        duplicate._next_handle = self._next_handle
        return duplicate
