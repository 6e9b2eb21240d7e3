"""Event system: bus and lifecycle event types."""

from stylesheet.events.bus import EventBus
from stylesheet.events.types import StyleApplied, ViewReady

__all__ = [
    "EventBus",
    "StyleApplied",
    "ViewReady",
]
