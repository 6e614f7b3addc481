"""Shader mode: circular containment with a spinning overlay.

The overlay angle is purely visual; containment is the same circle test as
Normal mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from holesim.modes.circular import circle_contains
from holesim.modes.interfaces import CircleBoundary, ModeType

if TYPE_CHECKING:
    from holesim.entities import Agent, Hole


class AnimatedCircularMode:
    """Circle test plus an overlay rotating once per ``spin_period_ms``."""

    mode_type = ModeType.SHADER

    def __init__(self, hole: "Hole", margin: float, spin_period_ms: float) -> None:
        self._hole = hole
        self._margin = margin
        self._spin_period_ms = spin_period_ms
        self._spin_started_at: Optional[float] = None
        self._overlay_angle = 0.0
        self._boundary = CircleBoundary(center=(hole.x, hole.y), radius=hole.scaled_radius)

    @property
    def active(self) -> bool:
        return self._spin_started_at is not None

    @property
    def overlay_angle(self) -> float:
        return self._overlay_angle

    def activate(self, now: float) -> None:
        self._spin_started_at = now
        self.refresh_boundary(now)

    def deactivate(self) -> None:
        self._spin_started_at = None
        self._overlay_angle = 0.0

    def contains(self, agent: "Agent") -> bool:
        return circle_contains(self._hole, agent, self._margin)

    def refresh_boundary(self, now: float) -> None:
        if self._spin_started_at is not None and self._spin_period_ms > 0:
            elapsed = max(0.0, now - self._spin_started_at)
            self._overlay_angle = (elapsed / self._spin_period_ms * 360.0) % 360.0
        self._boundary = CircleBoundary(
            center=(self._hole.x, self._hole.y),
            radius=self._hole.scaled_radius,
            overlay_angle=self._overlay_angle,
        )

    def boundary(self) -> CircleBoundary:
        return self._boundary
