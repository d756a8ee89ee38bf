"""
Graph event system.

This module provides an event system for graph mutations, allowing components
such as renderers or indexes to subscribe to and be notified of changes in
the graph state.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Protocol


class GraphEvent(Enum):
    """Events that can occur in the graph."""

    VERTEX_ADDED = auto()
    VERTEX_REMOVED = auto()
    EDGE_ADDED = auto()
    EDGE_REMOVED = auto()


class GraphEventListener(Protocol):
    """Protocol for objects that listen to graph state changes."""

    def on_state_change(self, event: GraphEvent, details: Dict[str, Any]) -> None:
        """
        Called when the graph state changes.

        Args:
            event (GraphEvent): Type of event that occurred
            details (Dict[str, Any]): Additional information about the event
        """
        ...


@dataclass
class GraphEventManager:
    """
    Manages graph event subscriptions and notifications.

    Listeners are notified synchronously, in registration order.

    Attributes:
        _listeners (List[GraphEventListener]): Registered event listeners
    """

    _listeners: List[GraphEventListener] = field(default_factory=list)

    def add_listener(self, listener: GraphEventListener) -> None:
        """
        Add a listener for graph events.

        Args:
            listener (GraphEventListener): The listener to add
        """
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: GraphEventListener) -> None:
        """
        Remove a graph event listener.

        Args:
            listener (GraphEventListener): The listener to remove
        """
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self, event: GraphEvent, details: Dict[str, Any]) -> None:
        """
        Notify all listeners of an event.

        Args:
            event (GraphEvent): The event that occurred
            details (Dict[str, Any]): Additional event information
        """
        for listener in list(self._listeners):
            listener.on_state_change(event, details)

    @property
    def listener_count(self) -> int:
        """Get the number of registered listeners."""
        return len(self._listeners)
