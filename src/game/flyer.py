# src/game/flyer.py
from __future__ import annotations
from dataclasses import dataclass
from typing import NamedTuple

from .config import (
    FLYER_X, FLYER_START_Y, FLYER_W, FLYER_H,
    GRAVITY, DRAG, FLAP_VY, ANGLE_PER_VY
)
from .geometry import Box


class FlyerStep(NamedTuple):
    ground_hit: bool    # fatal
    ceiling_hit: bool   # soft stop


@dataclass
class Flyer:
    """
    Centre-based flyer at a fixed column:
    - gravity, then drag, then position, every tick
    - bounds are clamped, never rejected
    It knows nothing about the session; callers read the FlyerStep.
    """
    x: float = float(FLYER_X)
    y: float = float(FLYER_START_Y)
    vy: float = 0.0
    w: float = float(FLYER_W)
    h: float = float(FLYER_H)

    @property
    def rect(self) -> Box:
        return Box.from_center(self.x, self.y, self.w, self.h)

    @property
    def angle(self) -> float:
        """Display rotation in radians, nose down when falling."""
        return self.vy * ANGLE_PER_VY

    def flap(self):
        self.vy = FLAP_VY

    def update_physics(self, floor: float) -> FlyerStep:
        """Integrate one tick and clamp against [0, floor]."""
        self.vy += GRAVITY
        self.vy *= DRAG
        self.y += self.vy

        half = self.h / 2
        ground = ceiling = False
        if self.y + half >= floor:
            self.y = floor - half
            ground = True
        if self.y - half <= 0:
            self.y = half
            self.vy = 0.0
            ceiling = True
        return FlyerStep(ground, ceiling)

    def reset(self):
        self.y = float(FLYER_START_Y)
        self.vy = 0.0
