"""Tests for the EventBus and the simulation's domain events."""

import dataclasses

import pytest

from holesim.events import (
    AgentRemovedEvent,
    EventBus,
    HoleGrewEvent,
    ModeChangedEvent,
    ScoreChangedEvent,
)
from holesim.modes import ModeType


class TestEventBus:
    """Test suite for EventBus functionality."""

    def test_emit_reaches_subscriber(self) -> None:
        bus = EventBus()
        received: list = []
        bus.subscribe(ScoreChangedEvent, received.append)

        event = ScoreChangedEvent(score=3, frame=100)
        bus.emit(event)

        assert received == [event]
        assert received[0] is event

    def test_no_subscribers_no_crash(self) -> None:
        bus = EventBus()
        bus.emit(AgentRemovedEvent(agent_id=1, frame=5))
        assert bus.subscriber_count(AgentRemovedEvent) == 0
        assert bus.emitted_count == 1

    def test_handlers_run_in_registration_order(self) -> None:
        bus = EventBus()
        calls: list = []
        bus.subscribe(ScoreChangedEvent, lambda e: calls.append("first"))
        bus.subscribe(ScoreChangedEvent, lambda e: calls.append("second"))

        bus.emit(ScoreChangedEvent(score=1, frame=1))

        assert calls == ["first", "second"]

    def test_dispatch_is_by_exact_type(self) -> None:
        bus = EventBus()
        scores: list = []
        bus.subscribe(ScoreChangedEvent, scores.append)

        bus.emit(AgentRemovedEvent(agent_id=1, frame=1))
        bus.emit(HoleGrewEvent(mode=ModeType.NORMAL, hole_scale=1.2, score=20, frame=1))

        assert scores == []

    def test_unsubscribe(self) -> None:
        bus = EventBus()
        received: list = []
        bus.subscribe(ScoreChangedEvent, received.append)

        assert bus.unsubscribe(ScoreChangedEvent, received.append)
        assert not bus.unsubscribe(ScoreChangedEvent, received.append)

        bus.emit(ScoreChangedEvent(score=1, frame=1))
        assert received == []

    def test_handler_may_unsubscribe_during_dispatch(self) -> None:
        bus = EventBus()
        calls: list = []

        def once(event):
            calls.append("once")
            bus.unsubscribe(ScoreChangedEvent, once)

        bus.subscribe(ScoreChangedEvent, once)
        bus.subscribe(ScoreChangedEvent, lambda e: calls.append("always"))

        bus.emit(ScoreChangedEvent(score=1, frame=1))
        bus.emit(ScoreChangedEvent(score=2, frame=2))

        assert calls == ["once", "always", "always"]

    def test_clear_subscribers(self) -> None:
        bus = EventBus()
        bus.subscribe(ScoreChangedEvent, lambda e: None)
        bus.subscribe(ModeChangedEvent, lambda e: None)
        bus.clear_subscribers()
        assert bus.subscriber_count(ScoreChangedEvent) == 0
        assert bus.subscriber_count(ModeChangedEvent) == 0


class TestDomainEvents:
    def test_events_are_frozen(self) -> None:
        event = ModeChangedEvent(
            previous=ModeType.NORMAL, current=ModeType.SHAPE, hole_scale=1.0, frame=3
        )
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.current = ModeType.SHADER  # type: ignore[misc]

    def test_simulation_emits_on_its_bus(self, simulation, swallow) -> None:
        received: list = []
        simulation.events.subscribe(ScoreChangedEvent, received.append)
        swallow(simulation, 2)
        assert [e.score for e in received] == [1, 2]
