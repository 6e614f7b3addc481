"""Normal mode: a plain circular hole."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from holesim.math_utils import distance
from holesim.modes.interfaces import CircleBoundary, ModeType

if TYPE_CHECKING:
    from holesim.entities import Agent, Hole

logger = logging.getLogger(__name__)


def circle_contains(hole: "Hole", agent: "Agent", margin: float) -> bool:
    """Whether the whole agent disc fits inside the hole minus ``margin``.

    ``distance + agent_radius <= hole_radius * scale - margin``
    """
    dist = distance(hole.x, hole.y, agent.x, agent.y)
    return dist + agent.radius <= hole.scaled_radius - margin


class CircularMode:
    """Circular containment with a static overlay."""

    mode_type = ModeType.NORMAL

    def __init__(self, hole: "Hole", margin: float) -> None:
        self._hole = hole
        self._margin = margin
        self._active = False
        self._boundary = CircleBoundary(center=(hole.x, hole.y), radius=hole.scaled_radius)

    @property
    def active(self) -> bool:
        return self._active

    def activate(self, now: float) -> None:
        self._active = True
        self.refresh_boundary(now)

    def deactivate(self) -> None:
        self._active = False

    def contains(self, agent: "Agent") -> bool:
        return circle_contains(self._hole, agent, self._margin)

    def refresh_boundary(self, now: float) -> None:
        self._boundary = CircleBoundary(
            center=(self._hole.x, self._hole.y),
            radius=self._hole.scaled_radius,
        )

    def boundary(self) -> CircleBoundary:
        return self._boundary
