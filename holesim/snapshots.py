"""Read-only frame snapshots for the presentation layer.

A renderer never touches live entities; it draws a FrameSnapshot built at
the end of the frame step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Tuple

from holesim.modes import Boundary, ModeType

if TYPE_CHECKING:
    from holesim.entities import Agent
    from holesim.simulation.state import SimulationState


@dataclass(frozen=True)
class AgentPose:
    """Where and how to draw one agent sprite."""

    agent_id: int
    x: float
    y: float
    width: float
    scale_x: float
    scale_y: float
    rotation: float
    flip_x: bool
    depth: float
    dying: bool


@dataclass(frozen=True)
class HoleSnapshot:
    x: float
    y: float
    radius: float
    scale: float


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything needed to draw one frame.

    Attributes:
        frame: Simulation frame number
        now: Simulation clock in milliseconds
        score: Current score
        mode: Active mode
        hole: Hole position and size
        boundary: Active mode boundary geometry
        agents: Poses of free and dying agents, sorted by depth
    """

    frame: int
    now: float
    score: int
    mode: ModeType
    hole: HoleSnapshot
    boundary: Boundary
    agents: Tuple[AgentPose, ...]


def pose_of(agent: "Agent") -> AgentPose:
    return AgentPose(
        agent_id=agent.agent_id,
        x=agent.x,
        y=agent.y,
        width=agent.width,
        scale_x=agent.scale_x,
        scale_y=agent.scale_y,
        rotation=agent.rotation,
        flip_x=agent.flip_x,
        depth=agent.depth,
        dying=agent.dying,
    )


def build_frame_snapshot(state: "SimulationState", agents: Iterable["Agent"]) -> FrameSnapshot:
    """Snapshot ``state`` and the visible (non-removed) ``agents``."""
    poses = sorted(
        (pose_of(agent) for agent in agents if agent.is_free or agent.dying),
        key=lambda pose: pose.depth,
    )
    hole = state.hole
    return FrameSnapshot(
        frame=state.frame,
        now=state.now,
        score=state.score,
        mode=state.mode,
        hole=HoleSnapshot(x=hole.x, y=hole.y, radius=hole.radius, scale=hole.scale),
        boundary=state.active_mode.boundary(),
        agents=tuple(poses),
    )
