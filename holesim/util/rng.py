"""RNG utilities for deterministic simulation.

Every pseudo-random choice (spawn positions, wander velocities, which polygon
vertex grows) goes through one injected ``random.Random`` so seeded runs
replay exactly.
"""

import random
from typing import Optional


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but was not provided.

    This indicates a wiring bug: components must receive the simulation's RNG
    rather than create an unseeded fallback.
    """


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Args:
        rng: The RNG that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated RNG

    Raises:
        MissingRNGError: If rng is None

    Example:
        def __init__(self, rng: Optional[random.Random] = None):
            self._rng = require_rng_param(rng, "ShapeMode.__init__")
    """
    if rng is None:
        raise MissingRNGError(
            f"RNG is required but was None (context: {context}). "
            "Pass the simulation's rng explicitly."
        )
    return rng


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create the simulation RNG, seeded when ``seed`` is given."""
    return random.Random(seed)


__all__ = ["MissingRNGError", "make_rng", "require_rng_param"]
