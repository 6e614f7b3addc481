"""Update phase definitions for explicit execution ordering.

One call to ``HoleSimulation.update(now)`` runs every phase once, in
declaration order:

    1. INPUT: apply queued hole drag and mode-advance triggers
    2. STEERING: avoidance, facing and depth for free agents
    3. MOVEMENT: integrate hole and agent motion, bounce off world bounds
    4. COLLISION: broad-phase overlap and containment acceptance
    5. CONSUMPTION: advance dying transitions, score and growth
    6. BOUNDARY: refresh the active mode's boundary geometry

Input captured between frames is only applied in INPUT, so every frame sees
a consistent order.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, Dict, Optional

__all__ = [
    "UpdatePhase",
    "PhaseContext",
    "PHASE_DESCRIPTIONS",
    "runs_in_phase",
    "get_system_phase",
]

if TYPE_CHECKING:
    from holesim.systems.base import BaseSystem


class UpdatePhase(Enum):
    """Phases of a simulation frame step."""

    INPUT = auto()
    STEERING = auto()
    MOVEMENT = auto()
    COLLISION = auto()
    CONSUMPTION = auto()
    BOUNDARY = auto()


PHASE_DESCRIPTIONS: Dict[UpdatePhase, str] = {
    UpdatePhase.INPUT: "Applying queued drag and mode triggers",
    UpdatePhase.STEERING: "Steering free agents away from the hole",
    UpdatePhase.MOVEMENT: "Moving the hole and free agents",
    UpdatePhase.COLLISION: "Testing overlaps against the active mode",
    UpdatePhase.CONSUMPTION: "Advancing dying transitions",
    UpdatePhase.BOUNDARY: "Refreshing the hole boundary",
}


@dataclass
class PhaseContext:
    """Context passed to systems during a frame step.

    Attributes:
        frame: Current simulation frame number
        phase: Current update phase
        now: Simulation clock in milliseconds
        delta_time: Seconds since the previous frame (0.0 on the first frame)
    """

    frame: int
    phase: UpdatePhase
    now: float
    delta_time: float = 0.0


def runs_in_phase(phase: UpdatePhase) -> Callable:
    """Decorator to declare which phase a system runs in.

    Example:
        @runs_in_phase(UpdatePhase.STEERING)
        class PopulationSystem(BaseSystem):
            ...
    """

    def decorator(cls):
        cls._phase = phase
        return cls

    return decorator


def get_system_phase(system: "BaseSystem") -> Optional[UpdatePhase]:
    """Get the phase a system is declared to run in."""
    return getattr(system, "_phase", None)
