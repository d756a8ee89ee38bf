"""
Depth-first path search.

The search follows the first unexplored neighbour as deep as it can and
backtracks at dead ends, returning the first path that reaches the target.
The result is not necessarily the shortest path.
"""

from typing import Any, Iterator, List, Optional, Tuple

from ..base import PathFinder
from ..models import Path, SearchMetrics


class DepthFirstFinder(PathFinder[Any]):
    """Depth-first search using an explicit stack.

    Each stack frame holds a vertex and the iterator over its remaining
    neighbours, which reproduces the exploration order of the recursive
    formulation without being bound by the interpreter recursion limit.
    """

    operation = "depth_first_search"

    def _search(self, start: Any, target: Any, metrics: SearchMetrics, **kwargs) -> Optional[Path]:
        path: Path = Path()
        path.visited[start.id] = start
        metrics.nodes_explored = 1

        if start.id == target.id:
            path.vertices.append(start)
            return path

        stack: List[Tuple[Any, Iterator[Any]]] = [(start, iter(self.graph.get_neighbours(start)))]

        while stack:
            self.memory_manager.check_memory()
            _, neighbours = stack[-1]
            neighbour = next(neighbours, None)

            if neighbour is None:
                # All neighbours explored: backtrack
                stack.pop()
                continue

            if neighbour.id in path.visited:
                continue

            path.visited[neighbour.id] = neighbour
            metrics.nodes_explored += 1

            if neighbour.id == target.id:
                path.vertices = [vertex for vertex, _ in stack]
                path.vertices.append(neighbour)
                return path

            stack.append((neighbour, iter(self.graph.get_neighbours(neighbour))))

        return None
