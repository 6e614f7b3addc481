"""Pytest configuration and fixtures for hole simulation tests."""

import random

import pytest


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def simulation():
    """A seeded simulation with no agents, hole at (400, 300) radius 50, Normal mode."""
    from holesim.simulation import HoleSimulation

    return HoleSimulation(seed=42, spawn_agents=False)


@pytest.fixture
def swallow():
    """Return a helper that feeds ``count`` agents through the full dying transition.

    Each agent is placed on the hole center, captured at the simulation's
    current clock and completed 400 ms later.
    """
    from holesim.update_phases import PhaseContext, UpdatePhase

    def _swallow(sim, count=1):
        for _ in range(count):
            now = sim.state.now
            agent = sim.add_agent(sim.hole.x, sim.hole.y, width=10)
            assert sim.consumption.try_capture(agent, now)
            done_at = now + sim.consumption.duration_ms
            sim.state.now = done_at
            sim.consumption.update(
                PhaseContext(frame=sim.state.frame, phase=UpdatePhase.CONSUMPTION, now=done_at)
            )

    return _swallow
