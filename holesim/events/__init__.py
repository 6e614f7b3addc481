"""Events module for notifying the presentation layer.

The EventBus decouples the simulation core from whatever draws it; the core
emits typed, frozen events and never calls back into the front end directly.
"""

from holesim.events.domain_events import (
    AgentCapturedEvent,
    AgentRemovedEvent,
    HoleGrewEvent,
    ModeChangedEvent,
    ScoreChangedEvent,
)
from holesim.events.event_bus import EventBus

__all__ = [
    "AgentCapturedEvent",
    "AgentRemovedEvent",
    "EventBus",
    "HoleGrewEvent",
    "ModeChangedEvent",
    "ScoreChangedEvent",
]
