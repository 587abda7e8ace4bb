"""
Graph state management and transactions.

This module provides thread-safe state management and transactional operations
for the undirected graph. It serialises access behind a single re-entrant lock
and restores a snapshot when a transaction fails.
"""

import logging
from contextlib import contextmanager
from threading import RLock
from typing import Generator, Optional, Set

from .base import UndirectedGraph
from ..models.vertex import Vertex

logger = logging.getLogger(__name__)


class GraphStateManager:
    """
    Manages graph state and provides transactional operations.

    Attributes:
        _graph (UndirectedGraph): The managed graph instance
        _lock (RLock): Thread lock for synchronization
    """

    def __init__(self, graph: Optional[UndirectedGraph] = None):
        """
        Initialize the state manager.

        Args:
            graph (Optional[UndirectedGraph]): Initial graph instance.
                If None, creates a new empty graph.
        """
        self._graph = graph if graph is not None else UndirectedGraph()
        self._lock = RLock()

    @contextmanager
    def locked(self) -> Generator[UndirectedGraph, None, None]:
        """
        Hold the lock and yield the live graph.

        Single graph operations either succeed or fail before mutating, so
        they need the lock but not a snapshot.
        """
        with self._lock:
            yield self._graph

    @contextmanager
    def transaction(self) -> Generator[UndirectedGraph, None, None]:
        """
        Context manager for atomic graph operations.

        Changes made within the transaction are atomic: if an exception
        escapes the block, the graph is restored to its state at entry and
        the exception is re-raised.

        Yields:
            UndirectedGraph: The current graph state for modification
        """
        with self._lock:
            state_backup = self._graph.copy()
            try:
                yield self._graph
            except BaseException:
                logger.debug("Transaction failed, restoring graph snapshot")
                self._graph = state_backup
                raise

    def snapshot(self) -> UndirectedGraph:
        """
        Get a copy of the current graph state.

        Returns:
            UndirectedGraph: Independent copy of the managed graph
        """
        with self._lock:
            return self._graph.copy()


class GraphStateView:
    """
    Provides a read-only view of the graph state.

    Every query takes the state manager's lock, so reads never observe a
    half-finished mutation.

    Attributes:
        _state_manager (GraphStateManager): The underlying state manager
    """

    def __init__(self, state_manager: GraphStateManager):
        self._state_manager = state_manager

    def get_vertices(self) -> Set[Vertex]:
        """Get all vertices in the graph."""
        with self._state_manager.locked() as graph:
            return graph.get_vertices()

    def get_neighbors(self, vertex: Vertex) -> Set[Vertex]:
        """Get all neighbours of a vertex."""
        with self._state_manager.locked() as graph:
            return graph.get_neighbors(vertex)

    def contains_vertex(self, vertex: Vertex) -> bool:
        """Check if a vertex exists in the graph."""
        with self._state_manager.locked() as graph:
            return graph.contains_vertex(vertex)

    def contains_edge(self, vertex1: Vertex, vertex2: Vertex) -> bool:
        """Check if an edge exists between two vertices."""
        with self._state_manager.locked() as graph:
            return graph.contains_edge(vertex1, vertex2)

    def vertex_count(self) -> int:
        """Get the total number of vertices in the graph."""
        with self._state_manager.locked() as graph:
            return graph.vertex_count()

    def edge_count(self) -> int:
        """Get the total number of edges in the graph."""
        with self._state_manager.locked() as graph:
            return graph.edge_count()

    def get_degree(self, vertex: Vertex) -> int:
        """Get the degree of a vertex."""
        with self._state_manager.locked() as graph:
            return graph.get_degree(vertex)
