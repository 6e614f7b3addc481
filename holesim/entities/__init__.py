"""Simulation entities: the hole and the agents it swallows."""

from holesim.entities.agent import Agent, AgentState
from holesim.entities.hole import Hole

__all__ = ["Agent", "AgentState", "Hole"]
