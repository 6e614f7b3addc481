"""Hole modes (containment strategies) and their construction."""

from __future__ import annotations

import random
from functools import partial
from typing import TYPE_CHECKING, Dict

from holesim.modes.animated import AnimatedCircularMode
from holesim.modes.circular import CircularMode, circle_contains
from holesim.modes.interfaces import (
    MODE_CYCLE,
    Boundary,
    CircleBoundary,
    ContainmentStrategy,
    ModeType,
    PolygonBoundary,
    next_mode,
)
from holesim.modes.polygon import (
    PolygonMode,
    normalize_area,
    random_polygon_offsets,
    regular_polygon_offsets,
)

if TYPE_CHECKING:
    from holesim.config.simulation_config import HoleConfig
    from holesim.entities import Hole


def create_modes(
    hole: "Hole", config: "HoleConfig", rng: random.Random
) -> Dict[ModeType, ContainmentStrategy]:
    """Build one instance of every mode variant for ``hole``."""
    if config.legacy_shape:
        vertex_factory = partial(
            _legacy_vertices,
            min_sides=config.legacy_min_sides,
            max_sides=config.legacy_max_sides,
            min_radius_ratio=config.legacy_min_radius_ratio,
        )
    else:
        vertex_factory = partial(_regular_vertices, sides=config.shape_sides)

    return {
        ModeType.NORMAL: CircularMode(hole, config.capture_margin),
        ModeType.SHAPE: PolygonMode(hole, rng, vertex_factory),
        ModeType.SHADER: AnimatedCircularMode(
            hole, config.capture_margin, config.shader_spin_period_ms
        ),
    }


def _regular_vertices(radius: float, rng: random.Random, *, sides: int):
    return regular_polygon_offsets(radius, sides)


def _legacy_vertices(
    radius: float,
    rng: random.Random,
    *,
    min_sides: int,
    max_sides: int,
    min_radius_ratio: float,
):
    return random_polygon_offsets(radius, rng, min_sides, max_sides, min_radius_ratio)


__all__ = [
    "MODE_CYCLE",
    "AnimatedCircularMode",
    "Boundary",
    "CircleBoundary",
    "CircularMode",
    "ContainmentStrategy",
    "ModeType",
    "PolygonBoundary",
    "PolygonMode",
    "circle_contains",
    "create_modes",
    "next_mode",
    "normalize_area",
    "random_polygon_offsets",
    "regular_polygon_offsets",
]
