"""
Core type definitions and protocols.

This module provides the protocols and aliases shared by the graph and the
path finding algorithms.
"""

from typing import Any, Callable, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class Identifiable(Protocol):
    """Protocol for vertex values: a stable, unique string identifier."""

    @property
    def id(self) -> str:
        """Get the identifier used as the vertex key."""
        ...


# Type alias for weight functions mapping an edge payload to a weight
WeightFunc = Callable[[Any], float]


class GraphProtocol(Protocol):
    """Protocol defining the read operations path finders rely on."""

    def get_vertex_by_id(self, vertex_id: str) -> Optional[Any]:
        """Get the registered vertex with the given id."""
        ...

    def get_neighbours(self, vertex: Any) -> Optional[List[Any]]:
        """Get outgoing neighbours of a vertex."""
        ...

    def get_edge(self, from_vertex: Any, to_vertex: Any) -> Optional[Any]:
        """Get edge between two vertices if it exists."""
        ...

    def has_edge(self, from_vertex: Any, to_vertex: Any) -> bool:
        """Check if edge exists between vertices."""
        ...
