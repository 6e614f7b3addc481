"""Hole mode variants and the containment contract they share.

A mode is a tagged variant: ``ModeType`` names it, and each variant has its
own plain class implementing ``ContainmentStrategy``. The simulation picks
the behaviour with an explicit ``match`` on the tag, so there is no mode
base class to subclass.

Cycle order is fixed: NORMAL -> SHAPE -> SHADER -> NORMAL.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol, Tuple, Union

from holesim.math_utils import Point

if TYPE_CHECKING:
    from holesim.entities import Agent


class ModeType(Enum):
    NORMAL = "normal"
    SHAPE = "shape"
    SHADER = "shader"


MODE_CYCLE: Tuple[ModeType, ...] = (ModeType.NORMAL, ModeType.SHAPE, ModeType.SHADER)


def next_mode(current: ModeType) -> ModeType:
    """Return the mode after ``current`` in the fixed cycle, wrapping."""
    index = MODE_CYCLE.index(current)
    return MODE_CYCLE[(index + 1) % len(MODE_CYCLE)]


@dataclass(frozen=True)
class CircleBoundary:
    """Circular boundary as drawn by the presentation layer.

    Attributes:
        center: Hole center
        radius: Visual radius (base radius times hole scale)
        overlay_angle: Rotation of the overlay art in degrees
    """

    center: Point
    radius: float
    overlay_angle: float = 0.0


@dataclass(frozen=True)
class PolygonBoundary:
    """Polygonal boundary in absolute world coordinates."""

    points: Tuple[Point, ...]


Boundary = Union[CircleBoundary, PolygonBoundary]


class ContainmentStrategy(Protocol):
    """What every hole mode must provide."""

    mode_type: ModeType

    @property
    def active(self) -> bool:
        """Whether the mode is currently the active one."""

    def activate(self, now: float) -> None:
        """Make this mode's boundary current at the hole's present scale."""

    def deactivate(self) -> None:
        """Release boundary state. Safe to call on an inactive mode."""

    def contains(self, agent: "Agent") -> bool:
        """Whether ``agent`` is inside the hole under this mode's rule."""

    def refresh_boundary(self, now: float) -> None:
        """Recompute absolute geometry from the hole's current center and scale."""

    def boundary(self) -> Boundary:
        """Snapshot of the boundary for drawing."""
