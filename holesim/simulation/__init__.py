"""Simulation root and shared state."""

from holesim.simulation.engine import HoleSimulation
from holesim.simulation.state import SimulationState

__all__ = ["HoleSimulation", "SimulationState"]
