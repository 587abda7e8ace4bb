"""Shared test fixtures."""

from typing import List

import pytest

from undigraph.config import GraphConfig
from undigraph.core.graph import UndirectedGraph
from undigraph.core.models import Edge, Vertex, create_vertices


class Point:
    """Content type whose string form identifies it."""

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@pytest.fixture
def points() -> List[Point]:
    """Fixture providing the content for four vertices A, B, C, D."""
    return [Point(0, 0), Point(1, 0), Point(1, 1), Point(2, 3)]


@pytest.fixture
def vertices(points) -> List[Vertex]:
    """Fixture providing vertices A, B, C, D."""
    return create_vertices(points)


@pytest.fixture
def edges(vertices) -> List[Edge]:
    """Fixture providing edges (A,B), (A,C), (C,D)."""
    a, b, c, d = vertices
    return [Edge(a, b), Edge(a, c), Edge(c, d)]


@pytest.fixture
def graph(vertices, edges) -> UndirectedGraph:
    """Fixture providing the four-vertex, three-edge graph."""
    return UndirectedGraph(vertices, edges)


@pytest.fixture
def checked_config() -> GraphConfig:
    """Fixture providing a configuration with integrity checks enabled."""
    return GraphConfig(check_integrity=True)
