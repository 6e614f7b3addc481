"""Pygame rendering of simulation snapshots.

Draws a FrameSnapshot through a camera that follows the hole: the brick
background, the active hole boundary, the zombies in depth order and the
score HUD. Nothing here reads or writes live simulation state.
"""

from __future__ import annotations

import math
from typing import Dict, Optional, Tuple

import pygame

from holesim.config.display import (
    BACKGROUND_COLOR,
    BRICK_HEIGHT,
    BRICK_LINE_COLOR,
    BRICK_WIDTH,
    HOLE_COLOR,
    HOLE_RIM_COLOR,
    HUD_TEXT_COLOR,
    SHADER_RING_COLOR,
    ZOMBIE_COLOR,
    ZOMBIE_EYE_COLOR,
)
from holesim.modes import CircleBoundary, ModeType, PolygonBoundary
from holesim.snapshots import AgentPose, FrameSnapshot


class Camera:
    """World-to-screen transform centred on a target, clamped to the world."""

    def __init__(self, view_width: int, view_height: int, world_width: float, world_height: float) -> None:
        self.view_width = view_width
        self.view_height = view_height
        self.world_width = world_width
        self.world_height = world_height
        self.left = 0.0
        self.top = 0.0

    def follow(self, x: float, y: float) -> None:
        max_left = max(0.0, self.world_width - self.view_width)
        max_top = max(0.0, self.world_height - self.view_height)
        self.left = min(max(x - self.view_width / 2, 0.0), max_left)
        self.top = min(max(y - self.view_height / 2, 0.0), max_top)

    def to_screen(self, x: float, y: float) -> Tuple[int, int]:
        return (int(x - self.left), int(y - self.top))

    def is_visible(self, x: float, y: float, margin: float = 0.0) -> bool:
        return (
            self.left - margin <= x <= self.left + self.view_width + margin
            and self.top - margin <= y <= self.top + self.view_height + margin
        )


class SceneRenderer:
    """Renders snapshots onto a pygame surface.

    Attributes:
        screen: Surface to render to
        camera: Camera following the hole
        font: Font for the score HUD (optional, HUD skipped without it)
    """

    def __init__(
        self,
        screen: pygame.Surface,
        camera: Camera,
        font: Optional[pygame.font.Font] = None,
    ) -> None:
        self.screen = screen
        self.camera = camera
        self.font = font
        self._zombie_cache: Dict[int, pygame.Surface] = {}
        self._score_text = "Score: 0"

    def set_score(self, score: int) -> None:
        """Score-changed handler; the HUD text only changes on events."""
        self._score_text = f"Score: {score}"

    def render(self, snapshot: FrameSnapshot) -> None:
        self.camera.follow(snapshot.hole.x, snapshot.hole.y)
        self.draw_background()
        self.draw_boundary(snapshot)
        for pose in snapshot.agents:
            self.draw_agent(pose)
        self.draw_hud(snapshot.mode)

    def draw_background(self) -> None:
        self.screen.fill(BACKGROUND_COLOR)
        width, height = self.screen.get_size()
        offset_y = -int(self.camera.top) % BRICK_HEIGHT
        row = int(self.camera.top) // BRICK_HEIGHT
        y = offset_y - BRICK_HEIGHT
        while y < height:
            pygame.draw.line(self.screen, BRICK_LINE_COLOR, (0, y), (width, y))
            shift = (BRICK_WIDTH // 2) if row % 2 else 0
            x = (shift - int(self.camera.left)) % BRICK_WIDTH
            while x < width:
                pygame.draw.line(self.screen, BRICK_LINE_COLOR, (x, y), (x, y + BRICK_HEIGHT))
                x += BRICK_WIDTH
            y += BRICK_HEIGHT
            row += 1

    def draw_boundary(self, snapshot: FrameSnapshot) -> None:
        boundary = snapshot.boundary
        if isinstance(boundary, PolygonBoundary):
            if len(boundary.points) >= 3:
                points = [self.camera.to_screen(x, y) for x, y in boundary.points]
                pygame.draw.polygon(self.screen, HOLE_COLOR, points)
            return

        if not isinstance(boundary, CircleBoundary):
            return
        center = self.camera.to_screen(*boundary.center)
        radius = max(1, int(boundary.radius))
        pygame.draw.circle(self.screen, HOLE_RIM_COLOR, center, radius + 4)
        pygame.draw.circle(self.screen, HOLE_COLOR, center, radius)
        if snapshot.mode is ModeType.SHADER:
            self._draw_spinning_ring(center, radius, boundary.overlay_angle)

    def _draw_spinning_ring(self, center: Tuple[int, int], radius: int, angle_deg: float) -> None:
        spokes = 6
        for i in range(spokes):
            angle = math.radians(angle_deg) + i * (2 * math.pi / spokes)
            end = (
                int(center[0] + math.cos(angle) * radius),
                int(center[1] + math.sin(angle) * radius),
            )
            pygame.draw.line(self.screen, SHADER_RING_COLOR, center, end, 2)
        pygame.draw.circle(self.screen, SHADER_RING_COLOR, center, radius, 2)

    def _zombie_surface(self, width: int) -> pygame.Surface:
        surface = self._zombie_cache.get(width)
        if surface is None:
            surface = pygame.Surface((width, width), pygame.SRCALPHA)
            pygame.draw.ellipse(surface, ZOMBIE_COLOR, (width // 4, 0, width // 2, width))
            eye_radius = max(1, width // 12)
            # Eye on the left side; flip_x mirrors it to face right
            pygame.draw.circle(surface, ZOMBIE_EYE_COLOR, (width // 3, width // 4), eye_radius)
            self._zombie_cache[width] = surface
        return surface

    def draw_agent(self, pose: AgentPose) -> None:
        size = max(1, int(pose.width))
        if not self.camera.is_visible(pose.x, pose.y, margin=size):
            return
        scaled_w = int(size * pose.scale_x)
        scaled_h = int(size * pose.scale_y)
        if scaled_w <= 0 or scaled_h <= 0:
            return

        sprite = self._zombie_surface(size)
        if pose.flip_x:
            sprite = pygame.transform.flip(sprite, True, False)
        if scaled_w != size or scaled_h != size:
            sprite = pygame.transform.smoothscale(sprite, (scaled_w, scaled_h))
        if pose.rotation:
            # pygame rotates counter-clockwise in degrees; the simulation is y-down
            sprite = pygame.transform.rotate(sprite, -math.degrees(pose.rotation))

        rect = sprite.get_rect(center=self.camera.to_screen(pose.x, pose.y))
        self.screen.blit(sprite, rect)

    def draw_hud(self, mode: ModeType) -> None:
        if self.font is None:
            return
        score_surface = self.font.render(self._score_text, True, HUD_TEXT_COLOR)
        self.screen.blit(score_surface, (10, 10))
        mode_surface = self.font.render(f"Mode: {mode.value} (H to switch)", True, HUD_TEXT_COLOR)
        self.screen.blit(mode_surface, (10, 10 + score_surface.get_height() + 4))
