"""The hole that swallows agents."""

from __future__ import annotations

from dataclasses import dataclass, field

from holesim.math_utils import Vector2


@dataclass
class Hole:
    """The single consuming entity.

    ``scale`` is the cumulative growth factor; it starts at 1.0 and only
    the growth controller multiplies it. Position changes through the drag
    velocity that the physics step integrates.

    Attributes:
        pos: Center of the hole
        radius: Base radius before scaling
        scale: Cumulative growth factor (never decreases)
        vel: Current drag velocity in units per second
    """

    pos: Vector2
    radius: float
    scale: float = 1.0
    vel: Vector2 = field(default_factory=Vector2)

    @property
    def x(self) -> float:
        return self.pos.x

    @property
    def y(self) -> float:
        return self.pos.y

    @property
    def scaled_radius(self) -> float:
        return self.radius * self.scale

    def grow(self, factor: float) -> None:
        if factor < 1.0:
            raise ValueError(f"Hole growth factor must be >= 1.0, got {factor}")
        self.scale *= factor
