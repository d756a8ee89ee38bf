"""
Breadth-first path search.

Returns a path with the minimum number of edges between two vertices.
"""

from collections import deque
from typing import Any, Deque, Dict, Optional

from ..base import PathFinder
from ..models import Path, SearchMetrics
from ..utils import reconstruct_ids


class BreadthFirstFinder(PathFinder[Any]):
    """Queue based breadth-first search.

    Vertices are marked visited when they are enqueued, so no vertex is
    queued twice and the visited set only holds discovered vertices.
    """

    operation = "breadth_first_search"

    def _search(self, start: Any, target: Any, metrics: SearchMetrics, **kwargs) -> Optional[Path]:
        path: Path = Path()
        path.visited[start.id] = start

        if start.id == target.id:
            path.vertices.append(start)
            return path

        queue: Deque[Any] = deque([start])
        predecessors: Dict[str, Optional[str]] = {start.id: None}

        while queue:
            self.memory_manager.check_memory()
            current = queue.popleft()
            metrics.nodes_explored += 1

            for neighbour in self.graph.get_neighbours(current):
                if neighbour.id in path.visited:
                    continue

                path.visited[neighbour.id] = neighbour
                predecessors[neighbour.id] = current.id
                queue.append(neighbour)

                if neighbour.id == target.id:
                    path.vertices = [
                        path.visited[vertex_id]
                        for vertex_id in reconstruct_ids(predecessors, target.id)
                    ]
                    return path

        return None
