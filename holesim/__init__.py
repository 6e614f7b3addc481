"""A growing hole that swallows wandering zombies.

The package is the simulation core: hole modes, agent lifecycle, growth
rules and the per-frame step. Drawing and input live in ``rendering`` and
``game.py``.
"""

from holesim.config.simulation_config import (
    HoleConfig,
    PopulationConfig,
    SimulationConfig,
    WorldConfig,
)
from holesim.modes import ModeType
from holesim.simulation import HoleSimulation, SimulationState

__version__ = "0.1.0"

__all__ = [
    "HoleConfig",
    "HoleSimulation",
    "ModeType",
    "PopulationConfig",
    "SimulationConfig",
    "SimulationState",
    "WorldConfig",
]
