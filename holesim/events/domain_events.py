"""Event definitions emitted by the simulation core.

All events are frozen dataclasses carrying everything a handler needs, so
the presentation layer never has to query the core back mid-dispatch.
"""

from __future__ import annotations

from dataclasses import dataclass

from holesim.modes.interfaces import ModeType


@dataclass(frozen=True)
class ScoreChangedEvent:
    """The score went up by one.

    Attributes:
        score: The new score
        frame: Simulation frame when this occurred
    """

    score: int
    frame: int


@dataclass(frozen=True)
class ModeChangedEvent:
    """The active hole mode switched.

    Attributes:
        previous: Mode that was deactivated
        current: Mode that is now active
        hole_scale: Hole scale the new mode was activated at
        frame: Simulation frame when this occurred
    """

    previous: ModeType
    current: ModeType
    hole_scale: float
    frame: int


@dataclass(frozen=True)
class AgentCapturedEvent:
    """An agent passed the containment test and started its dying transition."""

    agent_id: int
    mode: ModeType
    frame: int


@dataclass(frozen=True)
class AgentRemovedEvent:
    """An agent finished its dying transition and was removed for good."""

    agent_id: int
    frame: int


@dataclass(frozen=True)
class HoleGrewEvent:
    """A growth rule changed the hole.

    Attributes:
        mode: Mode whose rule fired
        hole_scale: Hole scale after the rule (unchanged for Shape growth)
        score: Score that triggered the rule
        frame: Simulation frame when this occurred
    """

    mode: ModeType
    hole_scale: float
    score: int
    frame: int
