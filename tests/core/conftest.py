"""Shared test fixtures."""

from dataclasses import dataclass

import pytest

from waypoint.core.graph import DirectedGraph


@dataclass(frozen=True)
class Country:
    """Minimal vertex type identified by its name."""

    name: str

    @property
    def id(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


class RecordingListener:
    """Graph listener collecting every event it receives."""

    def __init__(self):
        self.events = []

    def on_state_change(self, event, details):
        self.events.append((event, details))


def assert_representation_invariants(graph: DirectedGraph) -> None:
    """Check registry/adjacency consistency of a graph."""
    vertices = graph.get_vertices()
    assert len(vertices) == graph.get_num_vertices()
    assert sum(len(graph.get_edges(v)) for v in vertices) == graph.get_num_edges()
    for vertex in vertices:
        assert graph.get_vertex_by_id(vertex.id) is vertex
        for neighbour in graph.get_neighbours(vertex):
            assert graph.get_vertex_by_id(neighbour.id) is neighbour


@pytest.fixture
def europe() -> DirectedGraph:
    """
    Fixture providing eight countries joined by bidirectional borders.

    RO and HU form a component disconnected from the other six countries.
    """
    graph: DirectedGraph[Country, int] = DirectedGraph()
    graph.add_or_get_vertex(Country("NL"))
    graph.add_or_get_vertex(Country("BE"))
    graph.add_connection("BE", "NL", 100)
    graph.add_or_get_vertex(Country("DE"))
    graph.add_connection("NL", "DE", 200)
    graph.add_connection("BE", "DE", 30)
    graph.add_or_get_vertex(Country("LUX"))
    graph.add_connection("LUX", "BE", 60)
    graph.add_connection("LUX", "DE", 50)
    graph.add_or_get_vertex(Country("FR"))
    graph.add_connection("FR", "LUX", 30)
    graph.add_connection("FR", "BE", 110)
    graph.add_connection("FR", "DE", 50)
    graph.add_or_get_vertex(Country("UK"))
    graph.add_connection("UK", "BE", 70)
    graph.add_connection("UK", "FR", 150)
    graph.add_connection("UK", "NL", 250)
    graph.add_or_get_vertex(Country("RO"))
    graph.add_or_get_vertex(Country("HU"))
    graph.add_connection("RO", "HU", 250)
    return graph


@pytest.fixture
def empty_graph() -> DirectedGraph:
    """Fixture providing a graph without vertices."""
    return DirectedGraph()


@pytest.fixture
def country():
    """Fixture providing the Country vertex type."""
    return Country


@pytest.fixture
def listener() -> RecordingListener:
    """Fixture providing a listener that records graph events."""
    return RecordingListener()


@pytest.fixture
def check_invariants():
    """Fixture providing the representation invariant check."""
    return assert_representation_invariants
