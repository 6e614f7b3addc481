"""Per-frame systems of the hole simulation."""

from holesim.systems.base import BaseSystem, SystemResult
from holesim.systems.consumption import ConsumptionSystem, TransitionRecord, target_rotation_for
from holesim.systems.growth import GrowthController
from holesim.systems.physics import PhysicsSystem
from holesim.systems.population import PopulationSystem, avoidance_velocity

__all__ = [
    "BaseSystem",
    "ConsumptionSystem",
    "GrowthController",
    "PhysicsSystem",
    "PopulationSystem",
    "SystemResult",
    "TransitionRecord",
    "avoidance_velocity",
    "target_rotation_for",
]
