"""
Custom exceptions for the directed graph package.

Lookups and searches on the graph report missing vertices and edges through
``None``/``False`` return values. The exceptions below are reserved for the
explicitly raising accessors and for callers breaking an input contract, such
as a weight function producing negative weights.
"""


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is the base for errors raised by graph operations and
    path searches.

    Examples:
        * Invalid edge weights supplied to a weighted search
        * Inconsistent search state
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    This exception is raised by the raising accessors when the requested
    vertex or edge does not exist in the graph.
    """


class VertexNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested vertex is not found.

    Examples:
        * ``get_vertex_safe`` with an unknown id
        * ``get_edge_safe`` with an unknown endpoint
    """


class EdgeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested edge is not found.

    Examples:
        * ``get_edge_safe`` for an ordered pair without an edge
    """


class InvalidWeightError(GraphOperationError, ValueError):
    """
    Raised when a weight function returns an unusable value.

    Dijkstra's algorithm requires every edge weight to be a finite,
    non-negative number.

    Examples:
        * Negative weights
        * NaN or infinite weights
        * Non-numeric weights
    """
