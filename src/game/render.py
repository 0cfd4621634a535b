# src/game/render.py
from __future__ import annotations
import math
from typing import Dict, NamedTuple, Optional, Protocol, Tuple

import pygame

from .config import (
    BG_SCROLL_PX_PER_TICK, GROUND_BAND_H, COLOR_SKY, COLOR_GROUND, COLOR_DIM,
    COLOR_GOLD, COLOR_FG, COLOR_BUTTON, FONT_NAME,
    BANNER_W, BANNER_LIFT, SCORE_TEXT_OFFSET, RESTART_OFFSET, RESTART_W, RESTART_H
)
from .geometry import Box


class TextStyle(NamedTuple):
    size: int = 30
    color: Tuple[int, ...] = COLOR_FG
    bold: bool = False
    align: str = "left"     # "left" | "center"
    font: str = FONT_NAME


class RenderSurface(Protocol):
    """What the game needs from a drawing backend."""
    def clear(self) -> None: ...
    def fill_rect(self, box: Box, color) -> None: ...
    def draw_image(self, handle, box: Box, angle: float = 0.0) -> None: ...
    def draw_text(self, text: str, pos, style: TextStyle) -> None: ...
    def image_size(self, handle) -> Tuple[int, int]: ...


class PygameSurface:
    """RenderSurface over a pygame.Surface (usually the display)."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._fonts: Dict[Tuple[str, int, bool], pygame.font.Font] = {}

    def clear(self):
        self.surface.fill((0, 0, 0))

    def fill_rect(self, box: Box, color):
        r = box.to_pygame()
        if len(color) == 4 and color[3] < 255:
            # draw.rect ignores alpha on a non-alpha target
            overlay = pygame.Surface(r.size, pygame.SRCALPHA)
            overlay.fill(color)
            self.surface.blit(overlay, r.topleft)
        else:
            pygame.draw.rect(self.surface, color[:3], r)

    def draw_image(self, handle: pygame.Surface, box: Box, angle: float = 0.0):
        r = box.to_pygame()
        if r.width <= 0 or r.height <= 0:
            return
        img = pygame.transform.scale(handle, r.size)
        if angle:
            # screen y points down, so a positive angle turns clockwise
            img = pygame.transform.rotate(img, -math.degrees(angle))
            r = img.get_rect(center=r.center)
        self.surface.blit(img, r)

    def draw_text(self, text: str, pos, style: TextStyle):
        img = self._font(style).render(text, True, style.color)
        rect = img.get_rect()
        x, y = int(pos[0]), int(pos[1])
        if style.align == "center":
            rect.midbottom = (x, y)
        else:
            rect.bottomleft = (x, y)
        self.surface.blit(img, rect)

    def image_size(self, handle: pygame.Surface):
        return handle.get_size()

    def _font(self, style: TextStyle) -> pygame.font.Font:
        key = (style.font, style.size, style.bold)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[key] = pygame.font.SysFont(style.font, style.size, bold=style.bold)
        return self._fonts[key]


def aspect_ratio(surface: RenderSurface, handle) -> float:
    w, h = surface.image_size(handle)
    return (w / h) if h else 1.0


class Renderer:
    """
    Composes one frame from simulation state, in a fixed order:
    clear, background, then gates and flyer (running) or the
    dim overlay, banner, final score and restart button (terminal).
    Owns the ground scroll offset, which is display-only.
    """
    def __init__(self, sprites):
        self.sprites = sprites
        self.bg_offset = 0.0

    def draw_frame(self, surface: RenderSurface, sim) -> Optional[Box]:
        """Returns the restart button box on a terminal frame, else None."""
        vp = sim.viewport
        surface.clear()
        self._draw_background(surface, vp.width, vp.height)
        if not sim.session.terminal:
            self._draw_obstacles(surface, sim.obstacles, vp)
            self._draw_flyer(surface, sim.flyer)
            return None
        return self._draw_terminal(surface, vp.width, vp.height, sim.session.score)

    def _draw_background(self, surface, w, h):
        self.bg_offset -= BG_SCROLL_PX_PER_TICK
        if self.bg_offset <= -w:
            self.bg_offset = 0.0
        surface.fill_rect(Box(0, 0, w, h), COLOR_SKY)
        for i in range(2):
            surface.fill_rect(Box(i * w + self.bg_offset, h - GROUND_BAND_H, w, GROUND_BAND_H),
                              COLOR_GROUND)

    def _draw_obstacles(self, surface, stream, vp):
        gw = vp.obstacle_width
        for ob in stream:
            img = self.sprites.obstacles[ob.variant]
            # stretched on purpose, no aspect preservation
            surface.draw_image(img, Box(ob.x, 0, gw, ob.top))
            surface.draw_image(img, Box(ob.x, ob.bottom, gw, vp.height - ob.bottom))

    def _draw_flyer(self, surface, flyer):
        draw_w = flyer.w
        draw_h = draw_w / aspect_ratio(surface, self.sprites.flyer)
        surface.draw_image(self.sprites.flyer,
                           Box.from_center(flyer.x, flyer.y, draw_w, draw_h),
                           angle=flyer.angle)

    def _draw_terminal(self, surface, w, h, score) -> Box:
        surface.fill_rect(Box(0, 0, w, h), COLOR_DIM)

        banner_h = BANNER_W / aspect_ratio(surface, self.sprites.banner)
        surface.draw_image(self.sprites.banner,
                           Box(w / 2 - BANNER_W / 2, h / 2 - banner_h / 2 - BANNER_LIFT,
                               BANNER_W, banner_h))

        surface.draw_text(f"Final Score: {score}",
                          (w / 2, h / 2 + banner_h / 2 + SCORE_TEXT_OFFSET),
                          TextStyle(size=30, color=COLOR_GOLD, bold=True, align="center"))

        button = Box(w / 2 - RESTART_W / 2, h / 2 + banner_h / 2 + RESTART_OFFSET,
                     RESTART_W, RESTART_H)
        surface.fill_rect(button, COLOR_BUTTON)
        surface.draw_text("Restart (R)", (w / 2, button.bottom - 12),
                          TextStyle(size=22, align="center"))
        return button
