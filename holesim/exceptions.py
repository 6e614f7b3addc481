"""Hole simulation exception hierarchy.

Errors here are configuration or invariant violations, not runtime faults
to be retried.
"""


class HoleSimError(Exception):
    """Root of all hole simulation exceptions."""


class SimulationError(HoleSimError):
    """Errors during a frame step (systems, entities)."""


class ConfigurationError(HoleSimError):
    """Invalid or missing configuration."""


class DegeneratePolygonError(ConfigurationError):
    """A Shape-mode polygon has zero or negative area and cannot be normalised."""
