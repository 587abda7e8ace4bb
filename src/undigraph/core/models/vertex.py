"""
Vertex model for the undirected graph.

A vertex wraps an arbitrary, caller-supplied content value. Graph membership
is decided by the vertex key, which is derived from ``str(content)``: two
vertices whose contents render to the same string are the same graph entity.
Content types must therefore provide a ``__str__`` that is deterministic and
unique per logically distinct value.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List


@dataclass(frozen=True, eq=False)
class Vertex:
    """
    Immutable vertex wrapping caller-supplied content.

    The content is never copied or modified. Equality and hashing go through
    ``key`` so that vertices holding unhashable content can still be stored
    in sets and used as dictionary keys.

    Attributes:
        content (Any): Opaque caller value
    """

    content: Any

    @property
    def key(self) -> str:
        """
        Identity string used for graph membership.

        Raises:
            Exception: Whatever the content's ``__str__`` raises
        """
        return f"Vertex<Content:{self.content}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return self.key


def create_vertices(contents: Iterable[Any]) -> List[Vertex]:
    """
    Create one vertex per content value, preserving order.

    Args:
        contents (Iterable[Any]): Content values to wrap

    Returns:
        List[Vertex]: Vertices in the same order as ``contents``
    """
    return [Vertex(content) for content in contents]
