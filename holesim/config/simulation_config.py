"""Simulation configuration dataclasses."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from holesim.config.agents import (
    AGENT_COUNT,
    AGENT_HITBOX_SIZE,
    AGENT_WIDTH,
    AVOID_RADIUS_FACTOR,
    AVOID_SPEED,
    WANDER_SPEED,
)
from holesim.config.display import FRAME_RATE, WORLD_HEIGHT, WORLD_WIDTH
from holesim.config.hole import (
    CAPTURE_MARGIN,
    HOLE_RADIUS,
    HOLE_START_X,
    HOLE_START_Y,
    LEGACY_SHAPE_MAX_SIDES,
    LEGACY_SHAPE_MIN_RADIUS_RATIO,
    LEGACY_SHAPE_MIN_SIDES,
    NORMAL_GROWTH_FACTOR,
    NORMAL_GROWTH_THRESHOLDS,
    SHADER_GROWTH_FACTOR,
    SHADER_SPIN_PERIOD_MS,
    SHAPE_SIDES,
    SHAPE_VERTEX_GROWTH,
    SWALLOW_DURATION_MS,
)
from holesim.exceptions import ConfigurationError


@dataclass
class WorldConfig:
    """World bounds and frame pacing."""

    width: float = WORLD_WIDTH
    height: float = WORLD_HEIGHT
    frame_rate: int = FRAME_RATE

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(f"World size must be positive, got {self.width}x{self.height}")
        if self.frame_rate <= 0:
            raise ConfigurationError(f"frame_rate must be positive, got {self.frame_rate}")


@dataclass
class HoleConfig:
    """Hole geometry, capture and growth tuning.

    Attributes:
        start_x: Initial hole center x
        start_y: Initial hole center y
        radius: Base radius before scaling
        capture_margin: Clearance required inside circular boundaries
        swallow_duration_ms: Length of the dying transition
        normal_thresholds: Scores at which Normal mode grows the hole
        normal_growth_factor: Scale multiplier applied at a Normal threshold
        shader_growth_factor: Scale multiplier applied per Shader swallow
        shader_spin_period_ms: Time for one full turn of the Shader overlay
        shape_vertex_growth: Radial growth of one vertex per Shape swallow
        shape_sides: Vertex count of the regular Shape polygon
        legacy_shape: Use the random 5-8 sided generator instead
    """

    start_x: float = HOLE_START_X
    start_y: float = HOLE_START_Y
    radius: float = HOLE_RADIUS
    capture_margin: float = CAPTURE_MARGIN
    swallow_duration_ms: float = SWALLOW_DURATION_MS
    normal_thresholds: Tuple[int, ...] = NORMAL_GROWTH_THRESHOLDS
    normal_growth_factor: float = NORMAL_GROWTH_FACTOR
    shader_growth_factor: float = SHADER_GROWTH_FACTOR
    shader_spin_period_ms: float = SHADER_SPIN_PERIOD_MS
    shape_vertex_growth: float = SHAPE_VERTEX_GROWTH
    shape_sides: int = SHAPE_SIDES
    legacy_shape: bool = False
    legacy_min_sides: int = LEGACY_SHAPE_MIN_SIDES
    legacy_max_sides: int = LEGACY_SHAPE_MAX_SIDES
    legacy_min_radius_ratio: float = LEGACY_SHAPE_MIN_RADIUS_RATIO

    def validate(self) -> None:
        if self.radius <= 0:
            raise ConfigurationError(f"Hole radius must be positive, got {self.radius}")
        if self.swallow_duration_ms <= 0:
            raise ConfigurationError(
                f"swallow_duration_ms must be positive, got {self.swallow_duration_ms}"
            )
        if list(self.normal_thresholds) != sorted(set(self.normal_thresholds)):
            raise ConfigurationError(
                f"normal_thresholds must be strictly ascending, got {self.normal_thresholds}"
            )
        if self.normal_growth_factor < 1.0 or self.shader_growth_factor < 1.0:
            raise ConfigurationError("Growth factors must be >= 1.0 (the hole never shrinks)")
        if self.shape_vertex_growth < 0:
            raise ConfigurationError(
                f"shape_vertex_growth must be non-negative, got {self.shape_vertex_growth}"
            )
        if self.shape_sides < 3:
            raise ConfigurationError(f"shape_sides must be >= 3, got {self.shape_sides}")
        if not 3 <= self.legacy_min_sides <= self.legacy_max_sides:
            raise ConfigurationError(
                "legacy side range must satisfy 3 <= min <= max, got "
                f"{self.legacy_min_sides}..{self.legacy_max_sides}"
            )
        if not 0.0 < self.legacy_min_radius_ratio <= 1.0:
            raise ConfigurationError(
                f"legacy_min_radius_ratio must be in (0, 1], got {self.legacy_min_radius_ratio}"
            )


@dataclass
class PopulationConfig:
    """Agent population tuning."""

    count: int = AGENT_COUNT
    agent_width: float = AGENT_WIDTH
    wander_speed: float = WANDER_SPEED
    avoid_speed: float = AVOID_SPEED
    avoid_radius_factor: float = AVOID_RADIUS_FACTOR
    hitbox_size: float = AGENT_HITBOX_SIZE

    def validate(self) -> None:
        if self.count < 0:
            raise ConfigurationError(f"Agent count must be non-negative, got {self.count}")
        if self.agent_width <= 0:
            raise ConfigurationError(f"agent_width must be positive, got {self.agent_width}")
        if self.wander_speed < 0 or self.avoid_speed < 0:
            raise ConfigurationError("Speeds must be non-negative")


@dataclass
class SimulationConfig:
    """Aggregate configuration for a hole simulation.

    Attributes:
        seed: Optional seed for the simulation RNG
        world: World bounds and frame rate
        hole: Hole geometry and growth rules
        population: Agent population tuning
    """

    seed: Optional[int] = None
    world: WorldConfig = field(default_factory=WorldConfig)
    hole: HoleConfig = field(default_factory=HoleConfig)
    population: PopulationConfig = field(default_factory=PopulationConfig)

    def validate(self) -> None:
        """Validate every section, raising ConfigurationError on the first problem."""
        self.world.validate()
        self.hole.validate()
        self.population.validate()
