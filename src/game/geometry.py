# src/game/geometry.py
from __future__ import annotations
from dataclasses import dataclass

import pygame


@dataclass(frozen=True)
class Box:
    """Float axis-aligned rectangle (pygame.Rect truncates to ints)."""
    left: float
    top: float
    width: float
    height: float

    @classmethod
    def from_center(cls, cx: float, cy: float, w: float, h: float) -> "Box":
        return cls(cx - w / 2, cy - h / 2, w, h)

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self):
        return (self.left + self.width / 2, self.top + self.height / 2)

    def to_pygame(self) -> pygame.Rect:
        return pygame.Rect(round(self.left), round(self.top),
                           max(0, round(self.width)), max(0, round(self.height)))


def rect_overlap(a: Box, b: Box) -> bool:
    """Strict AABB test: touching edges do not overlap."""
    return (a.left < b.right and b.left < a.right and
            a.top < b.bottom and b.top < a.bottom)


def collides_with_gate(box: Box, gate, gate_width: float) -> bool:
    """
    Gate hit test. `gate` needs .x, .top and .bottom.
    Horizontal overlap with the gate column is required; inside [top, bottom]
    is safe passage, poking above top or below bottom is a hit.
    """
    if not (box.right > gate.x and box.left < gate.x + gate_width):
        return False
    return box.top < gate.top or box.bottom > gate.bottom
