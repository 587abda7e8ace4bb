"""
Graph module for the undigraph library.

This module provides the undirected graph implementation with support for:
- Identity-deduplicated vertices with integer-handle adjacency sets
- Thread-safe state management and transactions
- Event system for graph modifications
- Optional structural integrity checks after every mutation
"""

from contextlib import contextmanager
from typing import Generator, Iterable, Iterator, List, Optional, Set, Tuple

from ...config import GraphConfig
from ..models.edge import Edge
from ..models.vertex import Vertex
from .base import UndirectedGraph
from .events import (
    GraphEvent,
    GraphEventDetails,
    GraphEventListener,
    GraphEventManager,
)
from .integrity import GraphIntegrityValidator, ValidationResult
from .state import GraphStateManager, GraphStateView


class Graph:
    """
    High-level, thread-safe graph interface combining all components.

    This class wraps an UndirectedGraph with a state manager that serialises
    access and an event manager that notifies listeners of every change that
    actually modified the graph. It exposes the same operations as
    UndirectedGraph.
    """

    def __init__(
        self,
        vertices: Optional[Iterable[Vertex]] = None,
        edges: Optional[Iterable[Edge]] = None,
        config: Optional[GraphConfig] = None,
    ):
        """
        Initialize the graph with its components.

        Args:
            vertices (Optional[Iterable[Vertex]]): Initial vertices
            edges (Optional[Iterable[Edge]]): Initial edges
            config (Optional[GraphConfig]): Behaviour settings
        """
        self.config = config or GraphConfig()
        self.state_manager = GraphStateManager(UndirectedGraph(vertices, edges, self.config))
        self.event_manager = GraphEventManager()
        self._pending: Optional[List[Tuple[GraphEvent, GraphEventDetails]]] = None

    def __repr__(self) -> str:
        with self.state_manager.locked() as graph:
            return f"Graph(vertices={graph.vertex_count()}, edges={graph.edge_count()})"

    def add_listener(self, listener: GraphEventListener) -> None:
        """Register a listener for graph events."""
        self.event_manager.add_listener(listener)

    def remove_listener(self, listener: GraphEventListener) -> None:
        """Unregister a graph event listener."""
        self.event_manager.remove_listener(listener)

    def _emit(self, event: GraphEvent, details: GraphEventDetails) -> None:
        # Inside a transaction events wait for the commit.
        if self._pending is not None:
            self._pending.append((event, details))
            return
        self.event_manager.notify(event, details.to_dict())

    @contextmanager
    def transaction(self) -> Generator["Graph", None, None]:
        """
        Context manager for atomic groups of graph operations.

        If the block raises, every change made inside it is rolled back and
        no events are sent for them. Otherwise the events are sent when the
        outermost transaction exits.

        Yields:
            Graph: This graph
        """
        with self.state_manager.transaction():
            outermost = self._pending is None
            if outermost:
                self._pending = []
            mark = len(self._pending)
            try:
                yield self
            except BaseException:
                del self._pending[mark:]
                if outermost:
                    self._pending = None
                raise
            if outermost:
                pending, self._pending = self._pending, None
                for event, details in pending:
                    self.event_manager.notify(event, details.to_dict())

    def view(self) -> GraphStateView:
        """Get a read-only view of this graph."""
        return GraphStateView(self.state_manager)

    def snapshot(self) -> UndirectedGraph:
        """Get an independent, unsynchronised copy of the current graph."""
        return self.state_manager.snapshot()

    def validate(self) -> ValidationResult:
        """Run the structural integrity checks on the current graph."""
        with self.state_manager.locked() as graph:
            return GraphIntegrityValidator.validate(graph)

    # -----------------
    # VERTEX OPERATIONS
    # -----------------

    def add_vertex(self, vertex: Vertex) -> bool:
        """Add a vertex if it is not already present."""
        with self.state_manager.locked() as graph:
            added = graph.add_vertex(vertex)
            if added:
                details = GraphEventDetails()
                details.add_vertex(vertex)
                self._emit(GraphEvent.VERTEX_ADDED, details)
            return added

    def remove_vertex(self, vertex: Vertex) -> bool:
        """Remove a vertex and its incident edges."""
        with self.state_manager.locked() as graph:
            neighbors = graph.get_neighbors(vertex)
            if not graph.remove_vertex(vertex):
                return False
            details = GraphEventDetails()
            details.add_vertex(vertex)
            for neighbor in neighbors:
                details.add_edge(vertex, neighbor)
            details.add_metadata("removed_edges", len(neighbors))
            self._emit(GraphEvent.VERTEX_REMOVED, details)
            return True

    def contains_vertex(self, vertex: Vertex) -> bool:
        """Check if a vertex is in the graph."""
        with self.state_manager.locked() as graph:
            return graph.contains_vertex(vertex)

    def get_vertices(self) -> Set[Vertex]:
        """Get all vertices in the graph."""
        with self.state_manager.locked() as graph:
            return graph.get_vertices()

    def vertex_count(self) -> int:
        """Get the number of vertices in the graph."""
        with self.state_manager.locked() as graph:
            return graph.vertex_count()

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def add_edge(self, edge: Edge) -> bool:
        """Add an undirected edge between two registered vertices."""
        with self.state_manager.locked() as graph:
            added = graph.add_edge(edge)
            if added:
                details = GraphEventDetails()
                details.add_edge(edge.source, edge.sink)
                details.add_vertex(edge.source)
                details.add_vertex(edge.sink)
                self._emit(GraphEvent.EDGE_ADDED, details)
            return added

    def remove_edge(self, vertex1: Vertex, vertex2: Vertex) -> bool:
        """Remove the edge between two vertices if it exists."""
        with self.state_manager.locked() as graph:
            removed = graph.remove_edge(vertex1, vertex2)
            if removed:
                details = GraphEventDetails()
                details.add_edge(vertex1, vertex2)
                self._emit(GraphEvent.EDGE_REMOVED, details)
            return removed

    def remove_all_edges(self, vertex: Vertex) -> int:
        """Remove every edge incident to a vertex."""
        with self.state_manager.locked() as graph:
            neighbors = graph.get_neighbors(vertex)
            removed = graph.remove_all_edges(vertex)
            if removed:
                details = GraphEventDetails()
                for neighbor in neighbors:
                    details.add_edge(vertex, neighbor)
                self._emit(GraphEvent.EDGE_REMOVED, details)
            return removed

    def contains_edge(self, vertex1: Vertex, vertex2: Vertex) -> bool:
        """Check if an edge exists between two vertices."""
        with self.state_manager.locked() as graph:
            return graph.contains_edge(vertex1, vertex2)

    def edge_count(self) -> int:
        """Get the number of undirected edges in the graph."""
        with self.state_manager.locked() as graph:
            return graph.edge_count()

    # -----------------
    # QUERIES
    # -----------------

    def get_neighbors(self, vertex: Vertex) -> Set[Vertex]:
        """Get all neighbours of a vertex."""
        with self.state_manager.locked() as graph:
            return graph.get_neighbors(vertex)

    def get_degree(self, vertex: Vertex) -> int:
        """Get the degree of a vertex."""
        with self.state_manager.locked() as graph:
            return graph.get_degree(vertex)

    def get_edges(self) -> Iterator[Tuple[Vertex, Vertex]]:
        """Get all edges in the graph, each once."""
        with self.state_manager.locked() as graph:
            return iter(list(graph.get_edges()))

    def clear(self) -> None:
        """Clear the graph. Clearing an empty graph dispatches nothing."""
        with self.state_manager.locked() as graph:
            if not graph.vertex_count():
                return
            graph.clear()
            self._emit(GraphEvent.GRAPH_CLEARED, GraphEventDetails())


__all__ = [
    "Graph",
    "GraphEvent",
    "GraphEventDetails",
    "GraphEventListener",
    "GraphEventManager",
    "GraphIntegrityValidator",
    "GraphStateManager",
    "GraphStateView",
    "UndirectedGraph",
    "ValidationResult",
]
