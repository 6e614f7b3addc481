"""Wandering agents (zombies).

Agents live in an arena owned by the population manager. Their id is their
slot index and stays valid after removal, so a stale id never dangles.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from holesim.math_utils import Vector2


class AgentState(Enum):
    """Lifecycle of an agent: FREE -> DYING -> REMOVED."""

    FREE = "free"
    DYING = "dying"
    REMOVED = "removed"


@dataclass
class Agent:
    """A free-roaming entity the hole can swallow.

    Attributes:
        agent_id: Arena slot index
        pos: Current position
        vel: Current velocity (units per second)
        width: Unscaled sprite width
        scale_x: Horizontal sprite scale
        scale_y: Vertical sprite scale
        rotation: Sprite rotation in radians
        flip_x: Whether the sprite is mirrored horizontally
        depth: Draw order key, the agent's y while free
        state: Lifecycle state
        disabled: True once physics must ignore this agent
    """

    agent_id: int
    pos: Vector2
    vel: Vector2
    width: float
    scale_x: float = 1.0
    scale_y: float = 1.0
    rotation: float = 0.0
    flip_x: bool = False
    depth: float = 0.0
    state: AgentState = AgentState.FREE
    disabled: bool = False

    @property
    def x(self) -> float:
        return self.pos.x

    @property
    def y(self) -> float:
        return self.pos.y

    @property
    def radius(self) -> float:
        """Half the on-screen width."""
        return self.width * self.scale_x / 2.0

    @property
    def dying(self) -> bool:
        return self.state is AgentState.DYING

    @property
    def is_free(self) -> bool:
        return self.state is AgentState.FREE
