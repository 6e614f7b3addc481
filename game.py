"""Pygame front end: drag the hole around and swallow zombies.

Controls:
  Mouse drag - move the hole (velocity follows the drag offset)
  H          - cycle hole mode (normal -> shape -> shader)
  ESC        - quit
"""

import logging
from typing import Optional, Tuple

import pygame

from holesim.config.display import FRAME_RATE, SCREEN_HEIGHT, SCREEN_WIDTH
from holesim.config.simulation_config import SimulationConfig
from holesim.events import ModeChangedEvent, ScoreChangedEvent
from holesim.simulation import HoleSimulation
from rendering.renderer import Camera, SceneRenderer

logger = logging.getLogger(__name__)


class HoleGame:
    """Window, input and frame pacing around a HoleSimulation.

    Input is only queued on the simulation; it takes effect at the start of
    the next ``update``.
    """

    def __init__(self, config: Optional[SimulationConfig] = None, seed: Optional[int] = None) -> None:
        self.simulation = HoleSimulation(config, seed=seed)
        self.clock = pygame.time.Clock()
        self.screen: Optional[pygame.Surface] = None
        self.renderer: Optional[SceneRenderer] = None
        self._drag_origin: Optional[Tuple[int, int]] = None

    def setup(self) -> None:
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Hole vs Zombies")
        world = self.simulation.config.world
        camera = Camera(SCREEN_WIDTH, SCREEN_HEIGHT, world.width, world.height)
        self.renderer = SceneRenderer(self.screen, camera, pygame.font.Font(None, 28))

        events = self.simulation.events
        events.subscribe(ScoreChangedEvent, lambda event: self.renderer.set_score(event.score))
        events.subscribe(ModeChangedEvent, self._on_mode_changed)

    def _on_mode_changed(self, event: ModeChangedEvent) -> None:
        pygame.display.set_caption(f"Hole vs Zombies - {event.current.value} mode")

    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key == pygame.K_h:
                    self.simulation.advance_mode()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._drag_origin = event.pos
            elif event.type == pygame.MOUSEMOTION and self._drag_origin is not None:
                self.simulation.set_hole_drag(
                    event.pos[0] - self._drag_origin[0],
                    event.pos[1] - self._drag_origin[1],
                )
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self._drag_origin = None
                self.simulation.release_hole_drag()
        return True

    def run(self) -> None:
        self.setup()
        logger.info("Drag to move the hole, H to switch mode, ESC to quit")
        start = pygame.time.get_ticks()
        while self.handle_events():
            self.simulation.update(float(pygame.time.get_ticks() - start))
            self.renderer.render(self.simulation.snapshot())
            pygame.display.flip()
            self.clock.tick(FRAME_RATE)
        logger.info("Final score: %d", self.simulation.score)


def main(seed: Optional[int] = None) -> None:
    pygame.init()
    game = HoleGame(seed=seed)
    try:
        game.run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
