"""Base class and result type for simulation systems.

Each system owns one concern of the frame step and reads and writes the
shared ``SimulationState`` it was constructed with. ``HoleSimulation`` calls
systems in phase order; the phase a system declares with ``@runs_in_phase``
is what shows up in ``describe()`` and in tests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

from holesim.update_phases import PHASE_DESCRIPTIONS

__all__ = [
    "SystemResult",
    "BaseSystem",
]

if TYPE_CHECKING:
    from holesim.simulation.state import SimulationState
    from holesim.update_phases import PhaseContext, UpdatePhase


@dataclass
class SystemResult:
    """What one system (or a whole frame) did.

    Attributes:
        agents_affected: Agents steered, moved, captured or animated
        agents_removed: Agents that finished their dying transition
        events_emitted: Events put on the bus
        skipped: The system was disabled for this frame
        details: Per-system counters such as ``{"captured": 2}``
    """

    agents_affected: int = 0
    agents_removed: int = 0
    events_emitted: int = 0
    skipped: bool = False
    details: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def skipped_result() -> "SystemResult":
        return SystemResult(skipped=True)

    @staticmethod
    def empty() -> "SystemResult":
        return SystemResult()

    def __add__(self, other: "SystemResult") -> "SystemResult":
        """Merge two results; numeric details with the same key are summed."""
        if other.skipped:
            return self
        if self.skipped:
            return other

        details = dict(self.details)
        for key, value in other.details.items():
            previous = details.get(key)
            if isinstance(previous, (int, float)) and isinstance(value, (int, float)):
                details[key] = previous + value
            else:
                details[key] = value

        return SystemResult(
            agents_affected=self.agents_affected + other.agents_affected,
            agents_removed=self.agents_removed + other.agents_removed,
            events_emitted=self.events_emitted + other.events_emitted,
            details=details,
        )


class BaseSystem(ABC):
    """A per-frame step over the shared simulation state.

    Subclasses implement ``_do_update``. A disabled system is skipped without
    touching state, which lets a test freeze one concern (say, steering)
    while the others run.
    """

    # Set by @runs_in_phase
    _phase: Optional["UpdatePhase"] = None

    def __init__(self, state: "SimulationState", name: str) -> None:
        self._state = state
        self._name = name
        self.enabled = True
        self._frames_updated = 0
        self._last_result = SystemResult.empty()

    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> "SimulationState":
        return self._state

    @property
    def phase(self) -> Optional["UpdatePhase"]:
        return self._phase

    @property
    def frames_updated(self) -> int:
        return self._frames_updated

    @property
    def last_result(self) -> SystemResult:
        return self._last_result

    def update(self, context: "PhaseContext") -> SystemResult:
        """Run this system for one frame.

        Args:
            context: Frame number, clock and delta time for this step

        Returns:
            What the system did, or a skipped result while disabled
        """
        if not self.enabled:
            return SystemResult.skipped_result()

        result = self._do_update(context) or SystemResult.empty()
        self._frames_updated += 1
        self._last_result = result
        return result

    @abstractmethod
    def _do_update(self, context: "PhaseContext") -> Optional[SystemResult]:
        """System-specific frame logic."""

    def describe(self) -> Dict[str, Any]:
        """Debug summary: name, phase and what the latest update did."""
        return {
            "name": self._name,
            "enabled": self.enabled,
            "phase": self._phase.name if self._phase else None,
            "phase_description": PHASE_DESCRIPTIONS.get(self._phase) if self._phase else None,
            "frames_updated": self._frames_updated,
            "last_details": dict(self._last_result.details),
        }

    def __repr__(self) -> str:
        phase = f" in {self._phase.name}" if self._phase else ""
        return f"<{self.__class__.__name__} {self._name!r}{phase}{'' if self.enabled else ' (disabled)'}>"
