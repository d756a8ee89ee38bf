"""
Waypoint - Generic directed graph with path searches

This package provides a directed graph keyed by string vertex ids with opaque
edge payloads. It includes:

- Vertex and edge management with duplicate rejection
- Depth-first, breadth-first and Dijkstra shortest path searches
- Path results carrying the route, its weight and the visited vertices
- State change events for mutation listeners
"""

__version__ = "0.1.0"
__author__ = "Waypoint Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("Waypoint requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.graph import DirectedGraph
from .core.graph_paths.models import Path
from .core.types import Identifiable

__all__ = [
    "DirectedGraph",
    "Identifiable",
    "Path",
]
