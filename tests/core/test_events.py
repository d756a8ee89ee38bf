"""
Tests for the graph event manager.
"""

from waypoint.core.events import GraphEvent, GraphEventManager


def test_add_and_remove_listener(listener):
    """Test listener registration."""
    manager = GraphEventManager()
    manager.add_listener(listener)
    manager.add_listener(listener)  # Registered once
    assert manager.listener_count == 1

    manager.notify(GraphEvent.VERTEX_ADDED, {"vertex": "A"})
    assert listener.events == [(GraphEvent.VERTEX_ADDED, {"vertex": "A"})]

    manager.remove_listener(listener)
    manager.remove_listener(listener)  # Unknown listeners are ignored
    assert manager.listener_count == 0

    manager.notify(GraphEvent.VERTEX_REMOVED, {"vertex": "A"})
    assert len(listener.events) == 1


def test_listener_may_unsubscribe_during_notification():
    """Test that listeners can remove themselves while being notified."""
    manager = GraphEventManager()
    received = []

    class OneShot:
        def on_state_change(self, event, details):
            received.append(event)
            manager.remove_listener(self)

    manager.add_listener(OneShot())
    manager.notify(GraphEvent.EDGE_ADDED, {})
    manager.notify(GraphEvent.EDGE_REMOVED, {})
    assert received == [GraphEvent.EDGE_ADDED]
