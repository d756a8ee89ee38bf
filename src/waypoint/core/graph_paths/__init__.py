"""Graph path finding functionality."""

from .algorithms import BreadthFirstFinder, DepthFirstFinder, DijkstraFinder
from .base import PathFinder
from .models import Path, PathValidationError, SearchMetrics
from .utils import calculate_path_weight, get_edge_weight

__all__ = [
    "BreadthFirstFinder",
    "DepthFirstFinder",
    "DijkstraFinder",
    "Path",
    "PathFinder",
    "PathValidationError",
    "SearchMetrics",
    "calculate_path_weight",
    "get_edge_weight",
]
