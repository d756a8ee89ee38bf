"""
Data models for graph path finding.

This module provides the core data structures returned by the path searches:
- Path: Container for a discovered route, its weight and the visited vertices
- SearchMetrics: Container for search performance metrics
- PathValidationError: Exception for path validation failures

Example:
    >>> path = graph.breadth_first_search("UK", "LUX")
    >>> path.ids
    ['UK', 'BE', 'LUX']
    >>> path.validate(graph)  # Ensures path consistency
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union

from ..types import WeightFunc


class PathValidationError(Exception):
    """
    Raised when a path fails validation checks.

    This exception indicates issues such as:
    - Discontinuities in the path (consecutive vertices not connected)
    - Vertices missing from the graph
    - Weight inconsistencies
    """

    pass


@dataclass
class SearchMetrics:
    """
    Container for path search performance metrics.

    Attributes:
        operation: Name of the search operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        path_length: Number of vertices on the found path (if any)
        nodes_explored: Number of vertices expanded during the search
        max_memory_used: Peak resident memory observed during the search (bytes)

    Example:
        >>> metrics = SearchMetrics(operation="dijkstra", start_time=time())
        >>> # ... perform search ...
        >>> metrics.end_time = time()
        >>> print(f"Search took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    path_length: Optional[int] = None
    nodes_explored: int = 0
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """
        Calculate operation duration in milliseconds.

        Returns:
            Duration of the operation in milliseconds
        """
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """
        Convert metrics to dictionary format.

        Returns:
            Dictionary containing all metrics
        """
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "path_length": self.path_length,
            "nodes_explored": self.nodes_explored,
            "max_memory_used": self.max_memory_used,
        }


@dataclass
class Path[V]:
    """
    Result of a path search.

    A path is an ordered sequence of vertices, each connected to the next by a
    directed edge in the graph. A path with one vertex has no edges; a path
    without vertices is empty.

    ``total_weight`` and ``visited`` are search bookkeeping rather than
    properties of the route itself: the weight is only accumulated by weighted
    searches, and ``visited`` holds every vertex the search examined, keyed by
    id in discovery order.

    Attributes:
        vertices: Vertices from start to target, inclusive
        total_weight: Accumulated edge weight along the path
        visited: Vertices examined by the search, keyed by id
        metrics: Performance metrics of the search that produced the path
    """

    vertices: List[V] = field(default_factory=list)
    total_weight: float = 0.0
    visited: Dict[str, V] = field(default_factory=dict)
    metrics: Optional[SearchMetrics] = field(default=None, repr=False, compare=False)

    def __len__(self) -> int:
        """Return the number of vertices in the path."""
        return len(self.vertices)

    def __iter__(self) -> Iterator[V]:
        """Return an iterator over the path vertices."""
        return iter(self.vertices)

    def __getitem__(self, index: int) -> V:
        """Get a vertex from the path by index."""
        return self.vertices[index]

    def __str__(self) -> str:
        ids = ", ".join(self.ids)
        return (
            f"Weight={self.total_weight:f} Length={len(self.vertices)} "
            f"visited={len(self.visited)} ({ids})"
        )

    @property
    def ids(self) -> List[str]:
        """Get the sequence of vertex ids in the path."""
        return [vertex.id for vertex in self.vertices]

    @property
    def start(self) -> Optional[V]:
        """First vertex of the path, if any."""
        return self.vertices[0] if self.vertices else None

    @property
    def target(self) -> Optional[V]:
        """Last vertex of the path, if any."""
        return self.vertices[-1] if self.vertices else None

    @property
    def hop_count(self) -> int:
        """Number of edges traversed by the path."""
        return max(len(self.vertices) - 1, 0)

    def was_visited(self, vertex: Union[V, str]) -> bool:
        """Check whether the search examined a vertex (object or id)."""
        vertex_id = vertex if isinstance(vertex, str) else vertex.id
        return vertex_id in self.visited

    def validate(
        self,
        graph: Any,
        weight_func: Optional[WeightFunc] = None,
        weight_epsilon: float = 1e-9,
    ) -> None:
        """
        Validate the path's consistency against a graph.

        Performs the following checks:
        - Every vertex is registered in the graph
        - Each vertex is connected to the next by a directed edge
        - Every path vertex appears in the visited set
        - Total weight matches the sum of edge weights (if weight_func given)

        Args:
            graph: The graph instance to validate against
            weight_func: Optional function computing the weight of an edge
            weight_epsilon: Precision for weight comparisons (default: 1e-9)

        Raises:
            PathValidationError: If any validation check fails
            ValueError: If weight_epsilon is not positive
        """
        if weight_epsilon <= 0:
            raise ValueError("weight_epsilon must be positive")

        for vertex in self.vertices:
            if graph.get_vertex_by_id(vertex.id) is None:
                raise PathValidationError(f"Vertex {vertex.id} not found in graph")
            if vertex.id not in self.visited:
                raise PathValidationError(f"Vertex {vertex.id} missing from visited set")

        for i in range(len(self.vertices) - 1):
            from_id, to_id = self.vertices[i].id, self.vertices[i + 1].id
            if not graph.has_edge(from_id, to_id):
                raise PathValidationError(
                    f"Path discontinuity between vertices {i} and {i+1}: "
                    f"no edge from {from_id} to {to_id}"
                )

        if weight_func is not None:
            try:
                calculated_weight = sum(
                    weight_func(graph.get_edge(self.vertices[i].id, self.vertices[i + 1].id))
                    for i in range(len(self.vertices) - 1)
                )
            except Exception as e:
                raise PathValidationError(f"Error calculating path weight: {str(e)}")

            if math.isnan(calculated_weight) or (
                abs(calculated_weight - self.total_weight) > weight_epsilon
            ):
                raise PathValidationError(
                    f"Weight mismatch: calculated {calculated_weight} != stored {self.total_weight}"
                )
