"""Path search algorithm implementations."""

from .breadth_first import BreadthFirstFinder
from .depth_first import DepthFirstFinder
from .shortest_path import DijkstraFinder

__all__ = [
    "BreadthFirstFinder",
    "DepthFirstFinder",
    "DijkstraFinder",
]
