"""
Graph event system.

This module provides an event system for graph operations, allowing components
to subscribe to and be notified of changes in the graph state. It supports
multiple listeners and thread-safe event dispatch.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from threading import RLock
from typing import Any, Dict, List, Protocol, Set as SetType, Tuple

from ..models.vertex import Vertex

logger = logging.getLogger(__name__)


class GraphEvent(Enum):
    """Events that can occur in the graph."""

    VERTEX_ADDED = auto()
    VERTEX_REMOVED = auto()
    EDGE_ADDED = auto()
    EDGE_REMOVED = auto()
    GRAPH_CLEARED = auto()


class GraphEventListener(Protocol):
    """Protocol for objects that listen to graph state changes."""

    def on_state_change(self, event: GraphEvent, details: Dict) -> None:
        """
        Called when the graph state changes.

        Args:
            event (GraphEvent): Type of event that occurred
            details (Dict): Additional information about the event
        """
        ...


@dataclass
class GraphEventManager:
    """
    Manages graph event subscriptions and notifications.

    This class handles the registration of event listeners and the dispatch
    of events to those listeners in a thread-safe manner.

    Attributes:
        _listeners (List[GraphEventListener]): Registered event listeners
        _lock (RLock): Thread lock for synchronization
    """

    _listeners: List[GraphEventListener] = field(default_factory=list)
    _lock: RLock = field(default_factory=RLock)

    def add_listener(self, listener: GraphEventListener) -> None:
        """
        Add a listener for graph events.

        Args:
            listener (GraphEventListener): The listener to add
        """
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def remove_listener(self, listener: GraphEventListener) -> None:
        """
        Remove a graph event listener.

        Args:
            listener (GraphEventListener): The listener to remove
        """
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def notify(self, event: GraphEvent, details: Dict) -> None:
        """
        Notify all listeners of a graph event.

        A failing listener is logged and does not prevent the remaining
        listeners from being notified.

        Args:
            event (GraphEvent): The type of event that occurred
            details (Dict): Additional information about the event
        """
        with self._lock:
            listeners = self._listeners.copy()

        for listener in listeners:
            try:
                listener.on_state_change(event, details)
            except Exception as e:
                logger.error(f"Error notifying listener {listener} of {event.name}: {str(e)}")

    def clear_listeners(self) -> None:
        """Remove all event listeners."""
        with self._lock:
            self._listeners.clear()


@dataclass
class GraphEventDetails:
    """
    Container for graph event details.

    Attributes:
        vertices (Set[Vertex]): Affected vertices
        edges (Set[Tuple[Vertex, Vertex]]): Affected edges as endpoint pairs
        metadata (Dict): Additional event metadata
    """

    vertices: SetType[Vertex] = field(default_factory=set)
    edges: SetType[Tuple[Vertex, Vertex]] = field(default_factory=set)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_vertex(self, vertex: Vertex) -> None:
        """Add an affected vertex."""
        self.vertices.add(vertex)

    def add_edge(self, vertex1: Vertex, vertex2: Vertex) -> None:
        """Add an affected edge."""
        self.edges.add((vertex1, vertex2))

    def add_metadata(self, key: str, value: Any) -> None:
        """Add additional metadata."""
        self.metadata[key] = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert event details to dictionary format."""
        return {
            "vertices": sorted(vertex.key for vertex in self.vertices),
            "edges": [
                {"source": source.key, "sink": sink.key}
                for source, sink in sorted(self.edges, key=lambda e: (e[0].key, e[1].key))
            ],
            "metadata": self.metadata,
        }
