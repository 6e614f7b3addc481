"""Consumption lifecycle: Free -> Dying -> Removed.

An overlap candidate is accepted only if the active mode's ``contains`` says
so; rejected agents stay free and are simply tested again next frame.

An accepted agent gets a TransitionRecord. For ``duration_ms`` it slides to
the hole's *current* center, shrinks to zero and turns a quarter turn
against its direction of travel. When the transition completes the agent is
removed, the score goes up by exactly one, a ScoreChangedEvent fires and the
growth rule runs, all before the record is dropped. Transitions cannot be
cancelled.
"""

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Tuple

from holesim.events import AgentCapturedEvent, AgentRemovedEvent, ScoreChangedEvent
from holesim.math_utils import lerp
from holesim.systems.base import BaseSystem, SystemResult
from holesim.update_phases import UpdatePhase, runs_in_phase

if TYPE_CHECKING:
    from holesim.entities import Agent
    from holesim.simulation.state import SimulationState
    from holesim.systems.growth import GrowthController
    from holesim.systems.population import PopulationSystem
    from holesim.update_phases import PhaseContext

logger = logging.getLogger(__name__)


def target_rotation_for(velocity_x: float, start_rotation: float) -> float:
    """Rotation a swallowed agent ends at.

    Facing right (vx > 0) turns -90 degrees, facing left turns +90 degrees,
    and a purely vertical or stationary agent keeps its rotation.
    """
    if velocity_x > 0:
        return math.radians(-90)
    if velocity_x < 0:
        return math.radians(90)
    return start_rotation


@dataclass(frozen=True)
class TransitionRecord:
    """Captured start pose of a dying agent.

    Attributes:
        agent_id: Arena id of the agent
        start_time: Clock (ms) at acceptance
        start_x: Position at acceptance
        start_y: Position at acceptance
        start_scale_x: Sprite scale at acceptance
        start_scale_y: Sprite scale at acceptance
        start_rotation: Rotation (radians) at acceptance
        target_rotation: Rotation (radians) at completion
        duration_ms: Transition length
    """

    agent_id: int
    start_time: float
    start_x: float
    start_y: float
    start_scale_x: float
    start_scale_y: float
    start_rotation: float
    target_rotation: float
    duration_ms: float

    def progress(self, now: float) -> float:
        """Normalised time in [0, 1]."""
        return min(1.0, max(0.0, (now - self.start_time) / self.duration_ms))


@runs_in_phase(UpdatePhase.CONSUMPTION)
class ConsumptionSystem(BaseSystem):
    """Accepts overlapping agents and animates them into the hole."""

    def __init__(
        self,
        state: "SimulationState",
        population: "PopulationSystem",
        growth: "GrowthController",
        duration_ms: float,
    ) -> None:
        super().__init__(state, "Consumption")
        self._population = population
        self._growth = growth
        self._duration_ms = duration_ms
        self._records: List[TransitionRecord] = []

    @property
    def records(self) -> Tuple[TransitionRecord, ...]:
        return tuple(self._records)

    @property
    def duration_ms(self) -> float:
        return self._duration_ms

    def try_capture(self, agent: "Agent", now: float) -> bool:
        """Accept ``agent`` if it is free and inside the active mode's boundary."""
        if not agent.is_free:
            return False
        state = self._state
        if not state.active_mode.contains(agent):
            return False

        self._population.mark_dying(agent)
        self._records.append(
            TransitionRecord(
                agent_id=agent.agent_id,
                start_time=now,
                start_x=agent.x,
                start_y=agent.y,
                start_scale_x=agent.scale_x,
                start_scale_y=agent.scale_y,
                start_rotation=agent.rotation,
                target_rotation=target_rotation_for(agent.vel.x, agent.rotation),
                duration_ms=self._duration_ms,
            )
        )
        logger.debug(
            "Agent %d captured in %s mode at (%.1f, %.1f)",
            agent.agent_id,
            state.mode.value,
            agent.x,
            agent.y,
        )
        state.events.emit(
            AgentCapturedEvent(agent_id=agent.agent_id, mode=state.mode, frame=state.frame)
        )
        return True

    def process_overlaps(self, candidates: Iterable["Agent"], now: float) -> int:
        """Run the acceptance test on every candidate, in the order given.

        Returns:
            Number of agents accepted
        """
        return sum(1 for agent in candidates if self.try_capture(agent, now))

    def _do_update(self, context: "PhaseContext") -> SystemResult:
        state = self._state
        hole = state.hole
        now = context.now
        remaining: List[TransitionRecord] = []
        completed = 0
        events = 0

        for record in self._records:
            agent = self._population.get(record.agent_id)
            t = record.progress(now)

            agent.pos.update(lerp(record.start_x, hole.x, t), lerp(record.start_y, hole.y, t))
            agent.scale_x = lerp(record.start_scale_x, 0.0, t)
            agent.scale_y = lerp(record.start_scale_y, 0.0, t)
            agent.rotation = lerp(record.start_rotation, record.target_rotation, t)

            if t < 1.0:
                remaining.append(record)
                continue

            self._population.mark_removed(agent)
            state.score += 1
            state.events.emit(ScoreChangedEvent(score=state.score, frame=state.frame))
            state.events.emit(AgentRemovedEvent(agent_id=agent.agent_id, frame=state.frame))
            events += 2
            if self._growth.apply_growth(now):
                events += 1
            completed += 1

        self._records = remaining
        return SystemResult(
            agents_affected=len(remaining) + completed,
            agents_removed=completed,
            events_emitted=events,
            details={"completed": completed, "in_flight": len(remaining)},
        )
