"""Agent population management.

Agents live in a dense arena: ``agents[i].agent_id == i`` and slots are never
reused or deleted, only re-tagged FREE -> DYING -> REMOVED. Anything holding
an agent id can always look it up and check its state.

Each frame this system steers the free agents:
- Agents closer than ``avoid_radius_factor`` hole radii flee straight away
  from the hole center at ``avoid_speed``; others keep their wander velocity.
- Sprites face the direction of horizontal travel (no change at vx == 0).
- Draw depth is the agent's y coordinate.
"""

import logging
import random
from typing import TYPE_CHECKING, Iterator, List, Optional

from holesim.entities import Agent, AgentState
from holesim.math_utils import Vector2, distance
from holesim.systems.base import BaseSystem, SystemResult
from holesim.update_phases import UpdatePhase, runs_in_phase
from holesim.util.rng import require_rng_param

if TYPE_CHECKING:
    from holesim.config.simulation_config import PopulationConfig, WorldConfig
    from holesim.simulation.state import SimulationState
    from holesim.update_phases import PhaseContext

logger = logging.getLogger(__name__)


def avoidance_velocity(
    hole_x: float, hole_y: float, agent_x: float, agent_y: float, speed: float
) -> Vector2:
    """Velocity pointing from the hole center through the agent at ``speed``.

    An agent sitting exactly on the center flees along +x.
    """
    return Vector2(agent_x - hole_x, agent_y - hole_y).scale_to_length(speed)


@runs_in_phase(UpdatePhase.STEERING)
class PopulationSystem(BaseSystem):
    """Owns every agent and steers the free ones."""

    def __init__(
        self,
        state: "SimulationState",
        config: "PopulationConfig",
        world: "WorldConfig",
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(state, "Population")
        self._config = config
        self._world = world
        self._rng = require_rng_param(rng, "PopulationSystem.__init__")
        self._agents: List[Agent] = []
        self._free_count = 0
        self._dying_count = 0

    # ------------------------------------------------------------------
    # Arena
    # ------------------------------------------------------------------

    @property
    def agents(self) -> List[Agent]:
        """Every agent ever added, indexed by id (includes removed ones)."""
        return self._agents

    @property
    def free_count(self) -> int:
        return self._free_count

    @property
    def dying_count(self) -> int:
        return self._dying_count

    @property
    def removed_count(self) -> int:
        return len(self._agents) - self._free_count - self._dying_count

    def get(self, agent_id: int) -> Agent:
        return self._agents[agent_id]

    def free_agents(self) -> Iterator[Agent]:
        return (agent for agent in self._agents if agent.state is AgentState.FREE)

    def add_agent(
        self,
        x: float,
        y: float,
        vx: float = 0.0,
        vy: float = 0.0,
        width: Optional[float] = None,
    ) -> Agent:
        """Append a free agent to the arena and return it."""
        agent = Agent(
            agent_id=len(self._agents),
            pos=Vector2(x, y),
            vel=Vector2(vx, vy),
            width=self._config.agent_width if width is None else width,
            depth=y,
        )
        self._agents.append(agent)
        self._free_count += 1
        return agent

    def spawn(self, count: int) -> List[Agent]:
        """Scatter ``count`` agents over the world with random wander velocities."""
        speed = self._config.wander_speed
        spawned = []
        for _ in range(count):
            spawned.append(
                self.add_agent(
                    self._rng.uniform(0, self._world.width),
                    self._rng.uniform(0, self._world.height),
                    self._rng.uniform(-speed, speed),
                    self._rng.uniform(-speed, speed),
                )
            )
        logger.info("Spawned %d agents (%d free)", count, self._free_count)
        return spawned

    def mark_dying(self, agent: Agent) -> None:
        if agent.state is not AgentState.FREE:
            raise ValueError(f"Agent {agent.agent_id} is {agent.state.value}, expected free")
        agent.state = AgentState.DYING
        agent.disabled = True
        self._free_count -= 1
        self._dying_count += 1

    def mark_removed(self, agent: Agent) -> None:
        if agent.state is not AgentState.DYING:
            raise ValueError(f"Agent {agent.agent_id} is {agent.state.value}, expected dying")
        agent.state = AgentState.REMOVED
        self._dying_count -= 1

    # ------------------------------------------------------------------
    # Steering
    # ------------------------------------------------------------------

    def _do_update(self, context: "PhaseContext") -> SystemResult:
        hole = self._state.hole
        threshold = self._config.avoid_radius_factor * hole.scaled_radius
        avoid_speed = self._config.avoid_speed
        avoiding = 0

        for agent in self.free_agents():
            if distance(hole.x, hole.y, agent.x, agent.y) < threshold:
                flee = avoidance_velocity(hole.x, hole.y, agent.x, agent.y, avoid_speed)
                agent.vel.update(flee.x, flee.y)
                avoiding += 1

            if agent.vel.x > 0:
                agent.flip_x = True
            elif agent.vel.x < 0:
                agent.flip_x = False

            agent.depth = agent.y

        return SystemResult(agents_affected=avoiding, details={"avoiding": avoiding})

    def describe(self):
        info = super().describe()
        info.update(
            {
                "free": self._free_count,
                "dying": self._dying_count,
                "removed": self.removed_count,
            }
        )
        return info
