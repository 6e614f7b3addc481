"""Smoke tests for the pygame renderer on an offscreen surface."""

import pytest

pygame = pytest.importorskip("pygame")

from holesim.config.display import HOLE_COLOR, ZOMBIE_COLOR  # noqa: E402
from holesim.events import ScoreChangedEvent  # noqa: E402
from holesim.modes import ModeType  # noqa: E402
from rendering.renderer import Camera, SceneRenderer  # noqa: E402


@pytest.fixture
def renderer():
    surface = pygame.Surface((800, 600))
    return SceneRenderer(surface, Camera(800, 600, 5000, 5000))


class TestCamera:
    def test_follow_clamps_to_world(self):
        camera = Camera(800, 600, 5000, 5000)
        camera.follow(100, 100)
        assert (camera.left, camera.top) == (0, 0)
        camera.follow(4900, 4900)
        assert (camera.left, camera.top) == (4200, 4400)
        camera.follow(2500, 2500)
        assert (camera.left, camera.top) == (2100, 2200)

    def test_to_screen_and_visibility(self):
        camera = Camera(800, 600, 5000, 5000)
        camera.follow(2500, 2500)
        assert camera.to_screen(2500, 2500) == (400, 300)
        assert camera.is_visible(2100, 2200)
        assert not camera.is_visible(2000, 2200)
        assert camera.is_visible(2000, 2200, margin=100)


class TestSceneRenderer:
    def test_normal_mode_draws_hole(self, renderer, simulation):
        simulation.add_agent(700, 500)
        simulation.update(0)
        renderer.render(simulation.snapshot())
        assert tuple(renderer.screen.get_at((400, 300)))[:3] == HOLE_COLOR

    def test_shape_mode_draws_polygon(self, renderer, simulation):
        simulation.advance_mode()
        simulation.update(0)
        renderer.render(simulation.snapshot())
        assert tuple(renderer.screen.get_at((400, 300)))[:3] == HOLE_COLOR

    def test_every_mode_draws_free_agents(self, renderer, simulation):
        for i in range(3):
            simulation.add_agent(300 + i * 100, 450, vx=(-1) ** i * 10)
        modes = []
        for frame in range(3):
            simulation.advance_mode()
            simulation.update(frame * 500.0)
            snapshot = simulation.snapshot()
            renderer.render(snapshot)

            modes.append(snapshot.mode)
            assert len(snapshot.agents) == 3
            for pose in snapshot.agents:
                pixel = renderer.screen.get_at(renderer.camera.to_screen(pose.x, pose.y))
                assert tuple(pixel)[:3] == ZOMBIE_COLOR

        assert modes == [ModeType.SHAPE, ModeType.SHADER, ModeType.NORMAL]

    def test_dying_agent_with_zero_scale_is_skipped(self, renderer, simulation):
        simulation.add_agent(400, 300, width=10)
        simulation.update(0)
        simulation.update(399.9)
        (pose,) = simulation.snapshot().agents
        assert pose.dying
        assert int(pose.width * pose.scale_x) == 0

        renderer.render(simulation.snapshot())

        for x in range(390, 411):
            for y in range(290, 311):
                assert tuple(renderer.screen.get_at((x, y)))[:3] != ZOMBIE_COLOR
        assert tuple(renderer.screen.get_at((400, 300)))[:3] == HOLE_COLOR

    def test_set_score_updates_hud_text(self, renderer, simulation, swallow):
        simulation.events.subscribe(ScoreChangedEvent, lambda e: renderer.set_score(e.score))
        swallow(simulation, 2)
        assert renderer._score_text == "Score: 2"

