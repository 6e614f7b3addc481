"""The simulation root.

``HoleSimulation`` owns all mutable state and advances it once per rendered
frame through ``update(now)``. It is a coordinator: each phase delegates to
one system, and the order is fixed (see ``holesim.update_phases``).

Front ends talk to it through three narrow channels:
- input: ``set_hole_drag`` / ``release_hole_drag`` / ``advance_mode``,
  queued and applied at the start of the next frame
- output: ``snapshot()`` for drawing and ``events`` for notifications
- clock: the ``now`` (milliseconds) passed to ``update``
"""

import logging
import random
from typing import Any, Dict, Optional

from holesim.config.simulation_config import SimulationConfig
from holesim.entities import Agent, Hole
from holesim.events import EventBus
from holesim.exceptions import SimulationError
from holesim.math_utils import Vector2
from holesim.modes import ContainmentStrategy, ModeType, create_modes
from holesim.simulation.state import SimulationState
from holesim.snapshots import FrameSnapshot, build_frame_snapshot
from holesim.systems import (
    ConsumptionSystem,
    GrowthController,
    PhysicsSystem,
    PopulationSystem,
    SystemResult,
)
from holesim.update_phases import PhaseContext, UpdatePhase
from holesim.util.rng import make_rng

logger = logging.getLogger(__name__)


class HoleSimulation:
    """A headless hole-and-zombies simulation.

    Architecture:
        HoleSimulation (coordinator)
        ├── SimulationState (hole, score, mode, event bus)
        ├── GrowthController (INPUT: mode switches; growth rules)
        ├── PopulationSystem (STEERING: agent arena, avoidance)
        ├── PhysicsSystem (MOVEMENT: integration, bounce, overlaps)
        └── ConsumptionSystem (COLLISION/CONSUMPTION: dying transitions)

    Attributes:
        config: Simulation configuration
        rng: Shared random number generator
        state: Shared mutable state
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        spawn_agents: bool = True,
    ) -> None:
        """Build a simulation.

        Args:
            config: Aggregate configuration (defaults are the game's tuning)
            rng: Shared RNG for deterministic runs
            seed: Seed used when ``rng`` is not given (overrides config.seed)
            spawn_agents: Scatter ``config.population.count`` agents at start

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config or SimulationConfig()
        self.config.validate()
        if rng is None:
            rng = make_rng(seed if seed is not None else self.config.seed)
        self.rng = rng

        hole_config = self.config.hole
        hole = Hole(pos=Vector2(hole_config.start_x, hole_config.start_y), radius=hole_config.radius)
        self.state = SimulationState(
            hole=hole,
            modes=create_modes(hole, hole_config, rng),
            events=EventBus(),
        )

        self.growth = GrowthController(self.state, hole_config)
        self.population = PopulationSystem(
            self.state, self.config.population, self.config.world, rng
        )
        self.physics = PhysicsSystem(
            self.state,
            self.population,
            self.config.world,
            self.config.population.hitbox_size,
        )
        self.consumption = ConsumptionSystem(
            self.state, self.population, self.growth, hole_config.swallow_duration_ms
        )

        self._last_now: Optional[float] = None
        self._pending_drag: Optional[Vector2] = None

        if spawn_agents:
            self.population.spawn(self.config.population.count)
        self.state.active_mode.activate(0.0)
        logger.info(
            "Simulation ready: hole at (%.0f, %.0f) radius %.0f, %d agents, mode %s",
            hole.x,
            hole.y,
            hole.radius,
            self.population.free_count,
            self.state.mode.value,
        )

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def hole(self) -> Hole:
        return self.state.hole

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def mode(self) -> ModeType:
        return self.state.mode

    @property
    def active_mode(self) -> ContainmentStrategy:
        return self.state.active_mode

    @property
    def hole_scale(self) -> float:
        return self.state.hole.scale

    @property
    def events(self) -> EventBus:
        return self.state.events

    @property
    def frame_count(self) -> int:
        return self.state.frame

    def snapshot(self) -> FrameSnapshot:
        return build_frame_snapshot(self.state, self.population.agents)

    # ------------------------------------------------------------------
    # Input (queued until the next frame)
    # ------------------------------------------------------------------

    def advance_mode(self) -> None:
        """Request the next mode in the cycle."""
        self.growth.request_mode_advance()

    def set_hole_drag(self, vx: float, vy: float) -> None:
        """Set the hole's drag velocity in units per second."""
        self._pending_drag = Vector2(vx, vy)

    def release_hole_drag(self) -> None:
        self._pending_drag = Vector2(0.0, 0.0)

    def add_agent(
        self, x: float, y: float, vx: float = 0.0, vy: float = 0.0, width: Optional[float] = None
    ) -> Agent:
        return self.population.add_agent(x, y, vx, vy, width)

    # ------------------------------------------------------------------
    # Frame step
    # ------------------------------------------------------------------

    def update(self, now: float) -> SystemResult:
        """Advance the simulation to clock ``now`` (milliseconds).

        Args:
            now: Monotonic simulation clock in milliseconds

        Returns:
            Combined SystemResult of every phase

        Raises:
            SimulationError: If ``now`` is earlier than the previous frame's clock
            DegeneratePolygonError: If a queued switch into Shape mode fails.
                The frame counter and clock have already advanced; the previous
                mode stays active and the remaining queued switches are dropped.
        """
        state = self.state
        if self._last_now is not None and now < self._last_now:
            raise SimulationError(
                f"Clock went backwards: frame {state.frame + 1} at {now} ms, "
                f"previous frame at {self._last_now} ms"
            )
        delta = 0.0 if self._last_now is None else (now - self._last_now) / 1000.0
        self._last_now = now
        state.frame += 1
        state.now = now

        context = PhaseContext(frame=state.frame, phase=UpdatePhase.INPUT, now=now, delta_time=delta)
        result = SystemResult.empty()

        # INPUT
        if self._pending_drag is not None:
            state.hole.vel.update(self._pending_drag.x, self._pending_drag.y)
            self._pending_drag = None
        result += self.growth.update(context)

        # STEERING
        context.phase = UpdatePhase.STEERING
        result += self.population.update(context)

        # MOVEMENT: the hole may have moved, so the boundary must follow before
        # any containment test this frame.
        context.phase = UpdatePhase.MOVEMENT
        result += self.physics.update(context)
        state.active_mode.refresh_boundary(now)

        # COLLISION
        context.phase = UpdatePhase.COLLISION
        captured = self.consumption.process_overlaps(self.physics.overlap_candidates(), now)
        result += SystemResult(agents_affected=captured, details={"captured": captured})

        # CONSUMPTION
        context.phase = UpdatePhase.CONSUMPTION
        result += self.consumption.update(context)

        # BOUNDARY
        context.phase = UpdatePhase.BOUNDARY
        state.active_mode.refresh_boundary(now)

        return result

    def run_headless(
        self,
        max_frames: int,
        frame_ms: float = 1000.0 / 60.0,
        stats_interval: int = 600,
        mode_every: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Step the simulation without a window and return summary stats.

        The hole wanders on its own: every ``stats_interval`` frames it picks a
        new random drag velocity, and it turns back when it runs into a world
        edge instead of staying pinned there until the next pick.

        Args:
            max_frames: Number of frames to run
            frame_ms: Simulated milliseconds per frame
            stats_interval: Log progress every N frames
            mode_every: Advance the mode every N frames (never if None)
        """
        drag_speed = self.config.population.avoid_speed * 2
        for index in range(max_frames):
            if index % max(1, stats_interval) == 0:
                self.set_hole_drag(
                    self.rng.uniform(-drag_speed, drag_speed),
                    self.rng.uniform(-drag_speed, drag_speed),
                )
            if mode_every and index > 0 and index % mode_every == 0:
                self.advance_mode()

            self.update(index * frame_ms)
            self._turn_drag_off_walls()

            if stats_interval and self.state.frame % stats_interval == 0:
                logger.info(
                    "frame %d: score=%d mode=%s scale=%.3f free=%d dying=%d",
                    self.state.frame,
                    self.state.score,
                    self.state.mode.value,
                    self.state.hole.scale,
                    self.population.free_count,
                    self.population.dying_count,
                )

        return self.get_stats()

    def _turn_drag_off_walls(self) -> None:
        hole = self.state.hole
        world = self.config.world
        vx, vy = hole.vel.x, hole.vel.y
        if (hole.x <= 0 and vx < 0) or (hole.x >= world.width and vx > 0):
            vx = -vx
        if (hole.y <= 0 and vy < 0) or (hole.y >= world.height and vy > 0):
            vy = -vy
        if (vx, vy) != (hole.vel.x, hole.vel.y):
            self.set_hole_drag(vx, vy)

    def get_stats(self) -> Dict[str, Any]:
        return {
            "frame": self.state.frame,
            "score": self.state.score,
            "mode": self.state.mode.value,
            "hole_scale": self.state.hole.scale,
            "hole_position": self.state.hole.pos.as_tuple(),
            "free_agents": self.population.free_count,
            "dying_agents": self.population.dying_count,
            "removed_agents": self.population.removed_count,
        }
