"""
Generic directed graph with path searches.

This module provides the DirectedGraph class, a directed graph over vertices
identified by a string id and carrying opaque edge payloads. Vertices live in
a registry keyed by id; edges live in a single flat table keyed by the
(from-id, to-id) pair, with an outgoing index per vertex for neighbour lookups.

Mutations and lookups report missing vertices and duplicate edges through
return values (``None``/``False``) rather than exceptions. The graph is not
synchronized: callers sharing a graph between threads must serialize
mutations against running searches themselves.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from .events import GraphEvent, GraphEventListener, GraphEventManager
from .exceptions import EdgeNotFoundError, VertexNotFoundError
from .graph_paths.algorithms import BreadthFirstFinder, DepthFirstFinder, DijkstraFinder
from .graph_paths.models import Path
from .types import Identifiable, WeightFunc

logger = logging.getLogger(__name__)


@dataclass
class GraphState:
    """Encapsulates the state of a graph.

    Invariants:
        * ``vertices`` and ``outgoing`` have the same key set
        * every key of ``edges`` joins two ids present in ``vertices``
        * ``outgoing[a]`` lists exactly the ids ``b`` with ``(a, b)`` in ``edges``
    """

    vertices: Dict[str, Any] = field(default_factory=dict)
    edges: Dict[Tuple[str, str], Any] = field(default_factory=dict)
    outgoing: Dict[str, List[str]] = field(default_factory=dict)


class DirectedGraph[V: Identifiable, E]:
    """
    Directed graph keyed by vertex id with typed edge payloads.

    At most one directed edge exists from any vertex to any other. A
    bidirectional connection is modelled as two directed edges, which may
    share the same payload instance.

    Every operation that takes a vertex accepts either the vertex object or
    its id.

    Attributes:
        _state (GraphState): Vertex registry, edge table and outgoing index
        _events (GraphEventManager): State change listeners
        _max_search_memory_mb (Optional[float]): Memory limit applied to searches
    """

    def __init__(self, max_search_memory_mb: Optional[float] = None):
        """
        Initialize an empty graph.

        Args:
            max_search_memory_mb (Optional[float]): Maximum growth of process
                memory allowed during a single search before it is aborted
                with MemoryError. None disables the limit.
        """
        self._state = GraphState()
        self._events = GraphEventManager()
        self._max_search_memory_mb = max_search_memory_mb

    def add_state_listener(self, listener: GraphEventListener) -> None:
        """Add a listener for state changes."""
        self._events.add_listener(listener)

    def remove_state_listener(self, listener: GraphEventListener) -> None:
        """Remove a state change listener."""
        self._events.remove_listener(listener)

    def _resolve(self, vertex: Union[V, str, None]) -> Optional[V]:
        """Find the registered vertex for a vertex object or id."""
        if vertex is None:
            return None
        vertex_id = vertex if isinstance(vertex, str) else vertex.id
        return self._state.vertices.get(vertex_id)

    def get_vertex_by_id(self, vertex_id: str) -> Optional[V]:
        """Get the vertex registered under vertex_id, or None."""
        return self._state.vertices.get(vertex_id)

    def get_vertex_safe(self, vertex_id: str) -> V:
        """Get the vertex registered under vertex_id, raising an error if it doesn't exist."""
        vertex = self.get_vertex_by_id(vertex_id)
        if vertex is None:
            raise VertexNotFoundError(f"Vertex '{vertex_id}' not found in the graph")
        return vertex

    def get_vertices(self) -> List[V]:
        """Get all vertices in insertion order."""
        return list(self._state.vertices.values())

    def has_vertex(self, vertex: Union[V, str]) -> bool:
        """Check if a vertex (object or id) is registered."""
        return self._resolve(vertex) is not None

    def __contains__(self, vertex: Union[V, str]) -> bool:
        return self.has_vertex(vertex)

    def add_or_get_vertex(self, new_vertex: V) -> V:
        """
        Register new_vertex unless a vertex with the same id already exists.

        Args:
            new_vertex (V): The vertex to add

        Returns:
            V: The already registered vertex with the same id, or new_vertex
                itself if it has been added.
        """
        existing = self._state.vertices.get(new_vertex.id)
        if existing is not None:
            return existing

        self._state.vertices[new_vertex.id] = new_vertex
        self._state.outgoing[new_vertex.id] = []
        self._events.notify(GraphEvent.VERTEX_ADDED, {"vertex": new_vertex})
        return new_vertex

    def add_edge(self, from_vertex: Union[V, str], to_vertex: Union[V, str], new_edge: E) -> bool:
        """
        Add a directed edge from from_vertex to to_vertex.

        Vertex objects that are not yet registered are added first. Ids must
        refer to registered vertices. No change is made if an edge already
        exists in this direction.

        Args:
            from_vertex: Start vertex (object or id) of the directed edge
            to_vertex: Target vertex (object or id) of the directed edge
            new_edge: The edge payload

        Returns:
            bool: Whether the edge has been added
        """
        for vertex in (from_vertex, to_vertex):
            if isinstance(vertex, str) and vertex not in self._state.vertices:
                logger.debug(f"Cannot add edge {from_vertex!s} -> {to_vertex!s}: unknown id")
                return False

        source = self._register(from_vertex)
        target = self._register(to_vertex)
        key = (source.id, target.id)

        if key in self._state.edges:
            logger.debug(f"Edge {source.id} -> {target.id} already exists")
            return False

        self._state.edges[key] = new_edge
        self._state.outgoing[source.id].append(target.id)
        self._events.notify(
            GraphEvent.EDGE_ADDED, {"from_vertex": source, "to_vertex": target, "edge": new_edge}
        )
        return True

    def _register(self, vertex: Union[V, str]) -> V:
        if isinstance(vertex, str):
            return self._state.vertices[vertex]
        return self.add_or_get_vertex(vertex)

    def add_connection(self, vertex1: Union[V, str], vertex2: Union[V, str], new_edge: E) -> bool:
        """
        Add two directed edges, vertex1 -> vertex2 and vertex2 -> vertex1, sharing new_edge.

        The reverse edge is only attempted if the forward edge was added, and
        a failing reverse edge does not roll back the forward one. A False
        result may therefore leave a one-directional edge in the graph.

        Returns:
            bool: Whether both edges have been added
        """
        return self.add_edge(vertex1, vertex2, new_edge) and self.add_edge(
            vertex2, vertex1, new_edge
        )

    def remove_edge(self, from_vertex: Union[V, str], to_vertex: Union[V, str]) -> bool:
        """
        Remove the directed edge from from_vertex to to_vertex.

        Returns:
            bool: Whether an edge has been removed
        """
        source, target = self._resolve(from_vertex), self._resolve(to_vertex)
        if source is None or target is None:
            return False

        key = (source.id, target.id)
        if key not in self._state.edges:
            return False

        edge = self._state.edges.pop(key)
        self._state.outgoing[source.id].remove(target.id)
        self._events.notify(
            GraphEvent.EDGE_REMOVED, {"from_vertex": source, "to_vertex": target, "edge": edge}
        )
        return True

    def get_edge(self, from_vertex: Union[V, str], to_vertex: Union[V, str]) -> Optional[E]:
        """Get the edge from from_vertex to to_vertex, or None if there is none."""
        source, target = self._resolve(from_vertex), self._resolve(to_vertex)
        if source is None or target is None:
            return None
        return self._state.edges.get((source.id, target.id))

    def get_edge_safe(self, from_vertex: Union[V, str], to_vertex: Union[V, str]) -> E:
        """Get the edge between two vertices, raising an error if it doesn't exist."""
        source, target = self._resolve(from_vertex), self._resolve(to_vertex)
        if source is None:
            raise VertexNotFoundError(f"Source vertex '{from_vertex!s}' not found in the graph")
        if target is None:
            raise VertexNotFoundError(f"Target vertex '{to_vertex!s}' not found in the graph")

        key = (source.id, target.id)
        if key not in self._state.edges:
            raise EdgeNotFoundError(f"No edge exists from '{source.id}' to '{target.id}'")
        return self._state.edges[key]

    def has_edge(self, from_vertex: Union[V, str], to_vertex: Union[V, str]) -> bool:
        """Check if an edge exists from from_vertex to to_vertex."""
        source, target = self._resolve(from_vertex), self._resolve(to_vertex)
        if source is None or target is None:
            return False
        return (source.id, target.id) in self._state.edges

    def get_neighbours(self, from_vertex: Union[V, str]) -> Optional[List[V]]:
        """
        Get the vertices reachable by one outgoing edge from from_vertex.

        Returns:
            None if from_vertex is not in the graph, an empty list if it has
            no outgoing edges.
        """
        source = self._resolve(from_vertex)
        if source is None:
            return None
        return [self._state.vertices[to_id] for to_id in self._state.outgoing[source.id]]

    def get_edges(self, from_vertex: Union[V, str]) -> Optional[List[E]]:
        """
        Get the payloads of the outgoing edges of from_vertex.

        Returns:
            None if from_vertex is not in the graph, an empty list if it has
            no outgoing edges.
        """
        source = self._resolve(from_vertex)
        if source is None:
            return None
        return [self._state.edges[(source.id, to_id)] for to_id in self._state.outgoing[source.id]]

    def iter_edges(self) -> Iterator[Tuple[V, V, E]]:
        """Iterate over all edges as (from_vertex, to_vertex, edge) triples."""
        vertices = self._state.vertices
        for (from_id, to_id), edge in self._state.edges.items():
            yield vertices[from_id], vertices[to_id], edge

    def get_num_vertices(self) -> int:
        """Get the total number of vertices in the graph."""
        return len(self._state.vertices)

    def get_num_edges(self) -> int:
        """Get the total number of directed edges in the graph."""
        return len(self._state.edges)

    def remove_unconnected_vertices(self) -> int:
        """
        Remove vertices without any incoming or outgoing edge.

        A vertex that is only the target of edges keeps its place in the graph.

        Returns:
            int: Number of vertices removed
        """
        targets = {to_id for _, to_id in self._state.edges}
        unconnected = [
            vertex_id
            for vertex_id, successors in self._state.outgoing.items()
            if not successors and vertex_id not in targets
        ]

        for vertex_id in unconnected:
            del self._state.outgoing[vertex_id]
            vertex = self._state.vertices.pop(vertex_id)
            self._events.notify(GraphEvent.VERTEX_REMOVED, {"vertex": vertex})

        if unconnected:
            logger.debug(f"Removed {len(unconnected)} unconnected vertices")
        return len(unconnected)

    def depth_first_search(self, start_id: str, target_id: str) -> Optional[Path[V]]:
        """
        Find a path from start to target by depth-first search.

        All vertices examined by the search are registered in the path's
        visited set.

        Returns:
            The path from start to target, or None if either id is unknown
            or the target is unreachable.
        """
        finder = DepthFirstFinder(self, self._max_search_memory_mb)
        return finder.find_path(start_id, target_id)

    def breadth_first_search(self, start_id: str, target_id: str) -> Optional[Path[V]]:
        """
        Find a path with the fewest edges from start to target by breadth-first search.

        Returns:
            The path from start to target, or None if either id is unknown
            or the target is unreachable.
        """
        finder = BreadthFirstFinder(self, self._max_search_memory_mb)
        return finder.find_path(start_id, target_id)

    def dijkstra_shortest_path(
        self, start_id: str, target_id: str, weight_func: WeightFunc
    ) -> Optional[Path[V]]:
        """
        Find the path with the smallest total edge weight from start to target.

        Args:
            start_id: Id of the start vertex of the search
            target_id: Id of the target vertex of the search
            weight_func: Function mapping an edge payload to a finite,
                non-negative weight

        Returns:
            The shortest path with its total weight, or None if either id is
            unknown or the target is unreachable.

        Raises:
            InvalidWeightError: If weight_func returns an unusable weight
        """
        finder = DijkstraFinder(self, self._max_search_memory_mb)
        return finder.find_path(start_id, target_id, weight_func=weight_func)

    def __str__(self) -> str:
        lines = []
        for vertex_id, vertex in self._state.vertices.items():
            edges = ",".join(
                f"{self._state.vertices[to_id]}({self._state.edges[(vertex_id, to_id)]})"
                for to_id in self._state.outgoing[vertex_id]
            )
            lines.append(f"{vertex}: [{edges}]")
        return "{ " + ",\n  ".join(lines) + "\n}"
