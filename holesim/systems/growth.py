"""Score-driven growth rules and the mode state machine.

Mode cycle: NORMAL -> SHAPE -> SHADER -> NORMAL, one step per trigger.
Switching deactivates the outgoing mode and activates the incoming one at
the current hole scale; the switch itself never changes the scale.

Growth, evaluated once per completed swallow after the score increment:
- NORMAL: scale *= normal_growth_factor when the score hits a threshold exactly
- SHADER: scale *= shader_growth_factor every time
- SHAPE: one random polygon vertex moves outward by shape_vertex_growth;
  the scale is untouched
"""

import logging
from typing import TYPE_CHECKING, cast

from holesim.events import HoleGrewEvent, ModeChangedEvent
from holesim.exceptions import DegeneratePolygonError
from holesim.modes import ModeType, PolygonMode, next_mode
from holesim.systems.base import BaseSystem, SystemResult
from holesim.update_phases import UpdatePhase, runs_in_phase

if TYPE_CHECKING:
    from holesim.config.simulation_config import HoleConfig
    from holesim.simulation.state import SimulationState
    from holesim.update_phases import PhaseContext

logger = logging.getLogger(__name__)


@runs_in_phase(UpdatePhase.INPUT)
class GrowthController(BaseSystem):
    """Applies mode-advance triggers and mode-specific growth."""

    def __init__(self, state: "SimulationState", config: "HoleConfig") -> None:
        super().__init__(state, "Growth")
        self._config = config
        self._thresholds = frozenset(config.normal_thresholds)
        self._pending_advances = 0

    @property
    def pending_advances(self) -> int:
        return self._pending_advances

    def request_mode_advance(self) -> None:
        """Queue one mode advance for the next frame's INPUT phase.

        If a queued switch fails, the error propagates out of that frame's
        ``update`` and every advance still queued behind it is discarded.
        """
        self._pending_advances += 1

    def _do_update(self, context: "PhaseContext") -> SystemResult:
        switches = 0
        while self._pending_advances:
            self._pending_advances -= 1
            try:
                self.advance_mode(context.now)
            except DegeneratePolygonError:
                if self._pending_advances:
                    logger.warning(
                        "Dropping %d queued mode advance(s) after a failed switch",
                        self._pending_advances,
                    )
                self._pending_advances = 0
                raise
            switches += 1
        return SystemResult(events_emitted=switches, details={"mode_switches": switches})

    def advance_mode(self, now: float) -> ModeType:
        """Switch to the next mode in the cycle immediately.

        If the incoming mode cannot activate (degenerate polygon), the
        outgoing mode is re-activated and the error propagates.
        """
        state = self._state
        previous = state.mode
        outgoing = state.active_mode
        incoming_type = next_mode(previous)
        incoming = state.modes[incoming_type]

        outgoing.deactivate()
        try:
            incoming.activate(now)
        except DegeneratePolygonError:
            outgoing.activate(now)
            raise

        state.mode = incoming_type
        logger.info(
            "Hole mode %s -> %s at scale %.3f",
            previous.value,
            incoming_type.value,
            state.hole.scale,
        )
        state.events.emit(
            ModeChangedEvent(
                previous=previous,
                current=incoming_type,
                hole_scale=state.hole.scale,
                frame=state.frame,
            )
        )
        return incoming_type

    def apply_growth(self, now: float) -> bool:
        """Run the active mode's growth rule for the current score.

        Returns:
            True if the hole scale or shape changed
        """
        state = self._state
        grew = False

        match state.mode:
            case ModeType.NORMAL:
                if state.score in self._thresholds:
                    state.hole.grow(self._config.normal_growth_factor)
                    grew = True
            case ModeType.SHADER:
                state.hole.grow(self._config.shader_growth_factor)
                grew = True
            case ModeType.SHAPE:
                shape = cast(PolygonMode, state.modes[ModeType.SHAPE])
                grew = shape.grow_one_vertex(self._config.shape_vertex_growth) is not None

        if not grew:
            return False

        state.active_mode.refresh_boundary(now)
        if state.mode is ModeType.NORMAL:
            logger.info("Hole grew to scale %.3f at score %d", state.hole.scale, state.score)
        else:
            logger.debug(
                "Hole grew in %s mode at score %d (scale %.4f)",
                state.mode.value,
                state.score,
                state.hole.scale,
            )
        state.events.emit(
            HoleGrewEvent(
                mode=state.mode,
                hole_scale=state.hole.scale,
                score=state.score,
                frame=state.frame,
            )
        )
        return True
