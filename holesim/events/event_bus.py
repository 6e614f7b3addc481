"""Synchronous event bus for simulation events.

Handlers run immediately, in registration order, inside the frame step that
emitted the event. Emitting with no subscribers is a single dict lookup.
"""

from __future__ import annotations

from collections import defaultdict
from typing import TypeVar
from collections.abc import Callable

T = TypeVar("T")


class EventBus:
    """Synchronous pub/sub keyed by event type.

    Example:
        bus = EventBus()
        bus.subscribe(ScoreChangedEvent, hud.on_score)
        bus.emit(ScoreChangedEvent(score=1, frame=12))
    """

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable]] = defaultdict(list)
        self._emitted: int = 0

    @property
    def emitted_count(self) -> int:
        """Total number of events emitted since construction."""
        return self._emitted

    def emit(self, event: object) -> None:
        """Dispatch an event to every handler subscribed to its exact type.

        Args:
            event: The event instance to dispatch
        """
        self._emitted += 1
        handlers = self._handlers.get(type(event))
        if handlers:
            for handler in list(handlers):
                handler(event)

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        """Register a handler for an event type."""
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> bool:
        """Remove a handler.

        Returns:
            True if the handler was registered and has been removed
        """
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def clear_subscribers(self) -> None:
        self._handlers.clear()

    def subscriber_count(self, event_type: type) -> int:
        return len(self._handlers.get(event_type, []))
