"""
Dijkstra's shortest path algorithm.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..base import PathFinder
from ..models import Path, SearchMetrics
from ..utils import (
    PriorityQueue,
    calculate_path_weight,
    get_edge_weight,
    is_better_cost,
    reconstruct_ids,
)
from ...types import WeightFunc

logger = logging.getLogger(__name__)


@dataclass
class VertexState:
    """Search state of a discovered vertex."""

    __slots__ = ("vertex", "predecessor", "weight_sum_to", "finalized")

    vertex: Any
    predecessor: Optional[str]
    weight_sum_to: float
    finalized: bool


class DijkstraFinder(PathFinder[Any]):
    """Edge-weighted shortest path search.

    Weights come from a caller supplied function of the edge payload and
    must be finite and non-negative.
    """

    operation = "dijkstra_shortest_path"

    def find_path(
        self, start_id: str, target_id: str, weight_func: Optional[WeightFunc] = None, **kwargs
    ) -> Optional[Path]:
        """Find the path with the smallest total weight."""
        if weight_func is None:
            raise TypeError("weight_func is required for dijkstra_shortest_path")
        return super().find_path(start_id, target_id, weight_func=weight_func, **kwargs)

    def _search(
        self,
        start: Any,
        target: Any,
        metrics: SearchMetrics,
        weight_func: Optional[WeightFunc] = None,
        **kwargs,
    ) -> Optional[Path]:
        path: Path = Path()
        path.visited[start.id] = start

        if start.id == target.id:
            path.vertices.append(start)
            return path

        states: Dict[str, VertexState] = {start.id: VertexState(start, None, 0.0, False)}
        pq = PriorityQueue()
        pq.add_or_update(start.id, 0.0)

        while not pq.empty():
            self.memory_manager.check_memory()
            entry = pq.pop()
            if entry is None:
                break

            _, current_id = entry
            current = states[current_id]
            metrics.nodes_explored += 1

            if current_id == target.id:
                ids = reconstruct_ids(
                    {vertex_id: state.predecessor for vertex_id, state in states.items()},
                    target.id,
                )
                path.vertices = [states[vertex_id].vertex for vertex_id in ids]
                path.total_weight = calculate_path_weight(self.graph, ids, weight_func)
                return path

            current.finalized = True
            logger.debug(f"Finalized {current_id} at weight {current.weight_sum_to}")

            for neighbour in self.graph.get_neighbours(current.vertex):
                state = states.get(neighbour.id)
                if state is not None and state.finalized:
                    continue

                edge = self.graph.get_edge(current_id, neighbour.id)
                candidate = current.weight_sum_to + get_edge_weight(edge, weight_func)

                if state is None:
                    states[neighbour.id] = VertexState(neighbour, current_id, candidate, False)
                    path.visited[neighbour.id] = neighbour
                    pq.add_or_update(neighbour.id, candidate)
                elif is_better_cost(candidate, state.weight_sum_to):
                    state.predecessor = current_id
                    state.weight_sum_to = candidate
                    pq.add_or_update(neighbour.id, candidate)

        return None
