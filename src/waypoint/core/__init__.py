"""Core graph functionality."""

from .events import GraphEvent, GraphEventListener, GraphEventManager
from .exceptions import (
    EdgeNotFoundError,
    GraphOperationError,
    InvalidWeightError,
    ResourceNotFoundError,
    VertexNotFoundError,
)
from .types import GraphProtocol, Identifiable, WeightFunc
from .graph import DirectedGraph
from .graph_paths import Path, PathValidationError, SearchMetrics

__all__ = [
    "DirectedGraph",
    "EdgeNotFoundError",
    "GraphEvent",
    "GraphEventListener",
    "GraphEventManager",
    "GraphOperationError",
    "GraphProtocol",
    "Identifiable",
    "InvalidWeightError",
    "Path",
    "PathValidationError",
    "ResourceNotFoundError",
    "SearchMetrics",
    "VertexNotFoundError",
    "WeightFunc",
]
