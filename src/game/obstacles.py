# src/game/obstacles.py
from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import List, NamedTuple

from .config import GAP, TOP_MIN, OBSTACLE_VARIANTS
from .geometry import Box, collides_with_gate

log = logging.getLogger(__name__)


@dataclass
class Obstacle:
    """A gate: top barrier down to `top`, bottom barrier from `bottom` down."""
    x: float
    top: float
    gap: float = GAP
    variant: int = 0
    scored: bool = False

    @property
    def bottom(self) -> float:
        # derived so bottom - top == gap for the obstacle's whole life
        return self.top + self.gap

    def right(self, width: float) -> float:
        return self.x + width


class ScoreCheck(NamedTuple):
    collided: bool
    scored: int


class ObstacleStream:
    """
    Ordered list of live gates scrolling left.
    Spawn x is always the right edge and speed is uniform, so list order is
    also left-to-right order. Width is never stored per gate: callers pass
    the current viewport-derived width on every call.
    """
    def __init__(self, seed: int | None = None, gap: float = GAP,
                 variants: int = OBSTACLE_VARIANTS):
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)
        self.gap = gap
        self.variants = variants
        self.obstacles: List[Obstacle] = []

    def __len__(self):
        return len(self.obstacles)

    def __iter__(self):
        return iter(self.obstacles)

    def spawn(self, width: float, height: float) -> Obstacle:
        top = int(self.rng.random() * (height / 2)) + TOP_MIN
        ob = Obstacle(
            x=float(width),
            top=float(top),
            gap=self.gap,
            variant=self.rng.randrange(self.variants),
        )
        self.obstacles.append(ob)
        log.debug("spawn gate x=%.1f top=%.0f bottom=%.0f variant=%d",
                  ob.x, ob.top, ob.bottom, ob.variant)
        return ob

    def advance(self, speed: float, width: float) -> int:
        """Scroll every gate left, then drop the ones fully off screen. Returns evicted count."""
        for ob in self.obstacles:
            ob.x -= speed

        survivors = [ob for ob in self.obstacles if ob.right(width) > 0]
        evicted = len(self.obstacles) - len(survivors)
        self.obstacles = survivors
        if evicted:
            log.debug("evicted %d gate(s), %d live", evicted, len(survivors))
        return evicted

    def check_and_score(self, box: Box, flyer_x: float, width: float) -> ScoreCheck:
        """
        Collision and scoring over every live gate.
        No early exit: a gate can score in the same tick another one is hit,
        and several gates may score at once.
        """
        collided = False
        scored = 0
        for ob in self.obstacles:
            if collides_with_gate(box, ob, width):
                collided = True
            if not ob.scored and ob.right(width) < flyer_x:
                ob.scored = True
                scored += 1
        return ScoreCheck(collided, scored)

    def clear(self):
        self.obstacles = []
