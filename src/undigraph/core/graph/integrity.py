"""
Structural integrity validation for undirected graphs.

This module checks that a graph's internal registries and adjacency sets are
consistent with each other. It verifies:

- adjacency symmetry
- that adjacency sets only reference registered vertices
- that every registered vertex has an adjacency entry
- that the key registry and the vertex arena agree

Graphs run these checks after every mutation when ``check_integrity`` is
enabled in their configuration.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from ..exceptions import GraphIntegrityError

if TYPE_CHECKING:
    from .base import UndirectedGraph


@dataclass
class ValidationResult:
    """
    Container for validation results.

    Attributes:
        is_valid (bool): Whether the validation passed successfully
        errors (List[str]): List of validation error messages
        warnings (List[str]): List of validation warning messages
        context (Optional[Dict[str, Any]]): Additional context about the validation
    """

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    context: Optional[Dict[str, Any]] = None


class GraphIntegrityValidator:
    """
    Validator for the structural invariants of an UndirectedGraph.

    All methods are static; the validator holds no state.
    """

    @staticmethod
    def _validate_registry(graph: "UndirectedGraph") -> List[str]:
        """Check that the key registry and vertex arena describe the same vertices."""
        errors = []
        if set(graph._handles.values()) != set(graph._vertices):
            errors.append("Key registry and vertex arena hold different handles")
        for key, handle in graph._handles.items():
            vertex = graph._vertices.get(handle)
            if vertex is not None and vertex.key != key:
                errors.append(f"Handle {handle} is registered as {key} but holds {vertex.key}")
        return errors

    @staticmethod
    def _validate_adjacency_entries(graph: "UndirectedGraph") -> List[str]:
        """Check that adjacency entries and registered vertices match one to one."""
        errors = []
        for handle in graph._vertices:
            if handle not in graph._adjacency:
                errors.append(f"Vertex handle {handle} has no adjacency entry")
        for handle in graph._adjacency:
            if handle not in graph._vertices:
                errors.append(f"Adjacency entry for unregistered handle {handle}")
        return errors

    @staticmethod
    def _validate_neighbors(graph: "UndirectedGraph") -> List[str]:
        """Check referential integrity and symmetry of every adjacency set."""
        errors = []
        for handle, neighbors in graph._adjacency.items():
            for neighbor in neighbors:
                if neighbor not in graph._vertices:
                    errors.append(f"Handle {handle} is adjacent to unregistered handle {neighbor}")
                elif handle not in graph._adjacency.get(neighbor, ()):
                    errors.append(f"Edge {handle} -> {neighbor} has no reverse entry")
        return errors

    @staticmethod
    def validate(graph: "UndirectedGraph") -> ValidationResult:
        """
        Validate the structure of a graph.

        Args:
            graph: The graph to validate

        Returns:
            ValidationResult: Result with every violation found. Self-loops
                are reported as warnings.
        """
        errors = GraphIntegrityValidator._validate_registry(graph)
        errors.extend(GraphIntegrityValidator._validate_adjacency_entries(graph))
        errors.extend(GraphIntegrityValidator._validate_neighbors(graph))

        warnings = [
            f"Handle {handle} has a self-loop"
            for handle, neighbors in graph._adjacency.items()
            if handle in neighbors
        ]

        return ValidationResult(
            is_valid=not errors,
            errors=errors,
            warnings=warnings,
            context={
                "vertex_count": len(graph._vertices),
                "adjacency_entries": len(graph._adjacency),
            },
        )

    @staticmethod
    def assert_valid(graph: "UndirectedGraph") -> None:
        """
        Validate a graph and raise if it is inconsistent.

        Raises:
            GraphIntegrityError: If any invariant is violated
        """
        result = GraphIntegrityValidator.validate(graph)
        if not result.is_valid:
            raise GraphIntegrityError(result.errors)
