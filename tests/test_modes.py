"""Tests for the three hole modes and their containment rules."""

import math
import random

import pytest

from holesim.config.simulation_config import HoleConfig
from holesim.entities import Agent, Hole
from holesim.exceptions import DegeneratePolygonError
from holesim.math_utils import Vector2, polygon_area
from holesim.modes import (
    AnimatedCircularMode,
    CircleBoundary,
    CircularMode,
    ModeType,
    PolygonBoundary,
    PolygonMode,
    create_modes,
    next_mode,
    normalize_area,
    random_polygon_offsets,
    regular_polygon_offsets,
)
from holesim.util.rng import MissingRNGError


def make_hole(x=400.0, y=300.0, radius=50.0):
    return Hole(pos=Vector2(x, y), radius=radius)


def make_agent(x, y, width=40.0):
    return Agent(agent_id=0, pos=Vector2(x, y), vel=Vector2(), width=width)


def regular_shape(hole, sides=12, rng=None):
    return PolygonMode(
        hole,
        rng or random.Random(1),
        lambda radius, _rng: regular_polygon_offsets(radius, sides),
    )


class TestModeCycle:
    def test_cycle_order_wraps(self):
        assert next_mode(ModeType.NORMAL) is ModeType.SHAPE
        assert next_mode(ModeType.SHAPE) is ModeType.SHADER
        assert next_mode(ModeType.SHADER) is ModeType.NORMAL

    def test_create_modes_builds_every_variant(self, seeded_rng):
        modes = create_modes(make_hole(), HoleConfig(), seeded_rng)
        assert set(modes) == set(ModeType)
        assert isinstance(modes[ModeType.NORMAL], CircularMode)
        assert isinstance(modes[ModeType.SHAPE], PolygonMode)
        assert isinstance(modes[ModeType.SHADER], AnimatedCircularMode)
        for mode_type, mode in modes.items():
            assert mode.mode_type is mode_type
            assert not mode.active


class TestCircularMode:
    def test_end_to_end_scenario(self):
        """Hole (400, 300) r=50: an agent on the center is in, one 200 away is out."""
        mode = CircularMode(make_hole(), margin=20)
        mode.activate(0)
        assert mode.contains(make_agent(400, 300, width=40))
        assert not mode.contains(make_agent(600, 300, width=40))

    def test_boundary_is_exact(self):
        # radius 50 - margin 20 = 30; agent radius 5 leaves 25 for the center distance
        mode = CircularMode(make_hole(), margin=20)
        assert mode.contains(make_agent(425, 300, width=10))
        assert not mode.contains(make_agent(425.01, 300, width=10))

    def test_agent_scale_shrinks_its_radius(self):
        mode = CircularMode(make_hole(), margin=20)
        agent = make_agent(420, 300, width=40)
        assert not mode.contains(agent)
        agent.scale_x = 0.5
        assert mode.contains(agent)

    def test_hole_scale_widens_containment(self):
        hole = make_hole()
        mode = CircularMode(hole, margin=20)
        agent = make_agent(435, 300, width=10)
        assert not mode.contains(agent)
        hole.grow(1.5)
        assert mode.contains(agent)

    def test_random_points(self, seeded_rng):
        mode = CircularMode(make_hole(), margin=20)
        limit = 25.0  # 50 - 20 - radius 5
        for _ in range(500):
            angle = seeded_rng.uniform(0, 2 * math.pi)
            dist = seeded_rng.uniform(0, 80)
            agent = make_agent(400 + math.cos(angle) * dist, 300 + math.sin(angle) * dist, width=10)
            if dist < limit - 1e-6:
                assert mode.contains(agent)
            elif dist > limit + 1e-6:
                assert not mode.contains(agent)

    def test_refresh_boundary_follows_hole(self):
        hole = make_hole()
        mode = CircularMode(hole, margin=20)
        mode.activate(0)
        hole.pos.update(10, 20)
        hole.grow(1.5)
        mode.refresh_boundary(16)
        boundary = mode.boundary()
        assert isinstance(boundary, CircleBoundary)
        assert boundary.center == (10, 20)
        assert boundary.radius == pytest.approx(75)

    def test_deactivate_is_idempotent(self):
        mode = CircularMode(make_hole(), margin=20)
        mode.deactivate()
        mode.activate(0)
        mode.deactivate()
        mode.deactivate()
        assert not mode.active


class TestAnimatedCircularMode:
    def test_same_containment_as_normal(self):
        hole = make_hole()
        normal = CircularMode(hole, margin=20)
        shader = AnimatedCircularMode(hole, margin=20, spin_period_ms=2000)
        for x in (400, 420, 425, 426, 450, 600):
            agent = make_agent(x, 300, width=10)
            assert shader.contains(agent) == normal.contains(agent)

    def test_overlay_spins_while_active(self):
        mode = AnimatedCircularMode(make_hole(), margin=20, spin_period_ms=2000)
        mode.activate(1000)
        mode.refresh_boundary(1500)
        assert mode.boundary().overlay_angle == pytest.approx(90)
        mode.refresh_boundary(3000)
        assert mode.boundary().overlay_angle == pytest.approx(0)

    def test_deactivate_resets_overlay(self):
        mode = AnimatedCircularMode(make_hole(), margin=20, spin_period_ms=2000)
        mode.activate(0)
        mode.refresh_boundary(500)
        mode.deactivate()
        assert mode.overlay_angle == 0.0
        assert not mode.active
        mode.deactivate()
        assert mode.overlay_angle == 0.0


class TestPolygonGeneration:
    def test_regular_polygon_area_normalised(self):
        offsets = regular_polygon_offsets(50, 12)
        normalize_area(offsets, 50)
        assert polygon_area([p.as_tuple() for p in offsets]) == pytest.approx(math.pi * 50 * 50)

    @pytest.mark.parametrize("seed", range(25))
    def test_legacy_polygon_area_and_vertex_count(self, seed):
        rng = random.Random(seed)
        offsets = random_polygon_offsets(50, rng)
        assert 5 <= len(offsets) <= 8
        normalize_area(offsets, 50)
        assert polygon_area([p.as_tuple() for p in offsets]) == pytest.approx(math.pi * 2500)

    def test_collinear_polygon_is_rejected(self):
        offsets = [Vector2(0, 0), Vector2(1, 1), Vector2(2, 2)]
        with pytest.raises(DegeneratePolygonError):
            normalize_area(offsets, 50)


class TestPolygonMode:
    def test_requires_rng(self):
        with pytest.raises(MissingRNGError):
            PolygonMode(make_hole(), None, lambda radius, rng: regular_polygon_offsets(radius, 12))

    def test_activation_creates_twelve_vertices_with_circle_area(self):
        mode = regular_shape(make_hole())
        assert not mode.initialized
        mode.activate(0)
        assert mode.vertex_count == 12
        assert mode.area() == pytest.approx(math.pi * 50 * 50)
        assert isinstance(mode.boundary(), PolygonBoundary)
        assert len(mode.boundary().points) == 12

    def test_legacy_variant_via_config(self):
        hole = make_hole()
        config = HoleConfig(legacy_shape=True)
        for seed in range(10):
            mode = create_modes(hole, config, random.Random(seed))[ModeType.SHAPE]
            mode.activate(0)
            assert 5 <= mode.vertex_count <= 8
            assert mode.area() == pytest.approx(math.pi * 2500)

    def test_contains_random_points(self, seeded_rng):
        mode = regular_shape(make_hole())
        mode.activate(0)
        # Area pi*r^2 on a regular 12-gon: circumradius ~51.17, apothem ~49.42
        for _ in range(500):
            angle = seeded_rng.uniform(0, 2 * math.pi)
            dist = seeded_rng.uniform(0, 80)
            agent = make_agent(400 + math.cos(angle) * dist, 300 + math.sin(angle) * dist)
            if dist < 49.0:
                assert mode.contains(agent)
            elif dist > 52.0:
                assert not mode.contains(agent)

    def test_contains_ignores_agent_width(self):
        mode = regular_shape(make_hole())
        mode.activate(0)
        assert mode.contains(make_agent(440, 300, width=200))

    def test_polygon_translates_with_hole(self):
        hole = make_hole()
        mode = regular_shape(hole)
        mode.activate(0)
        offsets_before = mode.offsets
        hole.pos.update(1000, 1000)
        assert not mode.contains(make_agent(1000, 1000))
        mode.refresh_boundary(16)
        assert mode.contains(make_agent(1000, 1000))
        assert mode.offsets == offsets_before
        first = mode.boundary().points[0]
        assert first[0] == pytest.approx(1000 + offsets_before[0][0])
        assert first[1] == pytest.approx(1000 + offsets_before[0][1])

    def test_polygon_follows_hole_scale(self):
        hole = make_hole()
        mode = regular_shape(hole)
        mode.activate(0)
        hole.grow(1.2)
        mode.refresh_boundary(16)
        assert mode.area() == pytest.approx(math.pi * 2500 * 1.44)

    def test_shape_persists_across_reactivation(self):
        mode = regular_shape(make_hole())
        mode.activate(0)
        mode.grow_one_vertex(4)
        grown = mode.offsets
        mode.deactivate()
        mode.activate(100)
        assert mode.offsets == grown

    def test_grow_one_vertex_moves_exactly_one_vertex(self):
        mode = regular_shape(make_hole())
        mode.activate(0)
        before = mode.offsets
        index = mode.grow_one_vertex(4)
        after = mode.offsets

        changed = [i for i, (a, b) in enumerate(zip(before, after)) if a != b]
        assert changed == [index]
        old_len = math.hypot(*before[index])
        new_len = math.hypot(*after[index])
        assert new_len == pytest.approx(old_len + 4)
        # Direction is unchanged
        assert math.atan2(after[index][1], after[index][0]) == pytest.approx(
            math.atan2(before[index][1], before[index][0])
        )

    def test_growth_is_cumulative(self):
        mode = regular_shape(make_hole())
        mode.activate(0)
        area = mode.area()
        for _ in range(20):
            mode.grow_one_vertex(4)
            assert mode.area() > area
            area = mode.area()
        assert mode.vertex_count == 12

    def test_grow_before_activation_is_a_noop(self):
        mode = regular_shape(make_hole())
        assert mode.grow_one_vertex(4) is None

    def test_degenerate_polygon_aborts_activation(self):
        mode = PolygonMode(
            make_hole(),
            random.Random(0),
            lambda radius, rng: [Vector2(0, 0), Vector2(radius, 0), Vector2(2 * radius, 0)],
        )
        with pytest.raises(DegeneratePolygonError):
            mode.activate(0)
        assert not mode.active
        assert not mode.initialized
