"""Simple synchronous event bus for object lifecycle events."""

from typing import Any, Callable


class EventBus:
    """Synchronous publish-subscribe event bus.

    The host emits a :class:`~stylesheet.events.types.ViewReady` event when an
    object becomes ready for styling; the root style registry listens for it.
    Events are dispatched synchronously in registration order.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Callable]] = {}

    def subscribe(self, event_type: type, callback: Callable) -> None:
        """Register a callback for a specific event type."""
        self._listeners.setdefault(event_type, []).append(callback)

    def unsubscribe(self, event_type: type, callback: Callable) -> None:
        """Remove a callback registered with :meth:`subscribe`, if present."""
        listeners = self._listeners.get(event_type, [])
        if callback in listeners:
            listeners.remove(callback)

    def emit(self, event: Any) -> None:
        """Dispatch an event to all listeners for its type."""
        for cb in list(self._listeners.get(type(event), [])):
            cb(event)
