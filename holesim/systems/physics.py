"""Minimal arcade physics substrate.

Integrates the hole's drag velocity and the free agents' wander velocity,
reflects agents off the world bounds, and answers the broad-phase question
"which free agents overlap the hole body this frame". There is no mass or
friction; the bounce is perfectly elastic.
"""

import logging
from typing import TYPE_CHECKING, List

from holesim.math_utils import distance
from holesim.modes import PolygonBoundary
from holesim.systems.base import BaseSystem, SystemResult
from holesim.update_phases import UpdatePhase, runs_in_phase

if TYPE_CHECKING:
    from holesim.config.simulation_config import WorldConfig
    from holesim.entities import Agent
    from holesim.simulation.state import SimulationState
    from holesim.systems.population import PopulationSystem
    from holesim.update_phases import PhaseContext

logger = logging.getLogger(__name__)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@runs_in_phase(UpdatePhase.MOVEMENT)
class PhysicsSystem(BaseSystem):
    """Moves bodies and reports hole/agent overlaps.

    Disabled agents (those already being swallowed) are neither moved nor
    reported.
    """

    def __init__(
        self,
        state: "SimulationState",
        population: "PopulationSystem",
        world: "WorldConfig",
        hitbox_size: float,
    ) -> None:
        super().__init__(state, "Physics")
        self._population = population
        self._world = world
        self._hitbox_half = hitbox_size / 2.0

    def _do_update(self, context: "PhaseContext") -> SystemResult:
        dt = context.delta_time
        if dt <= 0:
            return SystemResult.empty()

        hole = self._state.hole
        hole.pos.update(
            _clamp(hole.x + hole.vel.x * dt, 0.0, self._world.width),
            _clamp(hole.y + hole.vel.y * dt, 0.0, self._world.height),
        )

        moved = 0
        bounces = 0
        for agent in self._population.free_agents():
            if agent.disabled:
                continue
            bounces += self._move_agent(agent, dt)
            moved += 1

        return SystemResult(agents_affected=moved, details={"bounces": bounces})

    def _move_agent(self, agent: "Agent", dt: float) -> int:
        x = agent.x + agent.vel.x * dt
        y = agent.y + agent.vel.y * dt
        vx, vy = agent.vel.x, agent.vel.y
        bounces = 0

        if x < 0:
            x, vx = 0.0, abs(vx)
            bounces += 1
        elif x > self._world.width:
            x, vx = self._world.width, -abs(vx)
            bounces += 1
        if y < 0:
            y, vy = 0.0, abs(vy)
            bounces += 1
        elif y > self._world.height:
            y, vy = self._world.height, -abs(vy)
            bounces += 1

        agent.pos.update(x, y)
        agent.vel.update(vx, vy)
        return bounces

    def boundary_extent(self) -> float:
        """Farthest reach of the active boundary from the hole center.

        A circular boundary reaches the scaled radius; a polygon reaches its
        farthest vertex, which grows past that radius as vertices are pushed out.
        """
        hole = self._state.hole
        boundary = self._state.active_mode.boundary()
        if isinstance(boundary, PolygonBoundary) and boundary.points:
            return max(distance(hole.x, hole.y, x, y) for x, y in boundary.points)
        return hole.scaled_radius

    def overlap_candidates(self) -> List["Agent"]:
        """Free agents whose hitbox touches the disc enclosing the active boundary."""
        hole = self._state.hole
        reach = self.boundary_extent() + self._hitbox_half
        return [
            agent
            for agent in self._population.free_agents()
            if not agent.disabled and distance(hole.x, hole.y, agent.x, agent.y) <= reach
        ]
