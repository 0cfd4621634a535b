# src/game/viewport.py
from __future__ import annotations
import logging

from .config import WIDTH, HEIGHT, MIN_VIEWPORT, OBSTACLE_WIDTH_RATIO

log = logging.getLogger(__name__)


class Viewport:
    """Current display size plus the values derived from it."""

    def __init__(self, width: float = WIDTH, height: float = HEIGHT):
        self.width = float(MIN_VIEWPORT)
        self.height = float(MIN_VIEWPORT)
        self.obstacle_width = self.width * OBSTACLE_WIDTH_RATIO
        self.on_resize(width, height)

    def on_resize(self, width: float, height: float):
        self.width = float(max(MIN_VIEWPORT, width))
        self.height = float(max(MIN_VIEWPORT, height))
        self.obstacle_width = self.width * OBSTACLE_WIDTH_RATIO
        log.debug("viewport %dx%d, gate width %.1f",
                  self.width, self.height, self.obstacle_width)

    @property
    def size(self):
        return (self.width, self.height)
