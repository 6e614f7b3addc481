"""Shared mutable state of one simulation.

Score, hole (including its scale) and the current mode live here and are
passed by reference to every system instead of living in module globals.
Only the frame step mutates it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from holesim.entities import Hole
from holesim.events import EventBus
from holesim.modes import ContainmentStrategy, ModeType


@dataclass
class SimulationState:
    """Everything the systems share.

    Attributes:
        hole: The single hole
        modes: One strategy instance per mode variant
        events: Bus the presentation layer subscribes to
        mode: Tag of the active mode
        score: Completed swallows so far
        frame: Frames stepped so far
        now: Clock of the latest frame, in milliseconds
    """

    hole: Hole
    modes: Dict[ModeType, ContainmentStrategy]
    events: EventBus
    mode: ModeType = ModeType.NORMAL
    score: int = 0
    frame: int = 0
    now: float = 0.0

    @property
    def active_mode(self) -> ContainmentStrategy:
        return self.modes[self.mode]

    @property
    def hole_scale(self) -> float:
        return self.hole.scale
