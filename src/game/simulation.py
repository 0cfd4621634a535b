# src/game/simulation.py
from __future__ import annotations
import logging
from typing import Callable, NamedTuple, Optional

from .config import WIDTH, HEIGHT, SCROLL_PX_PER_TICK, SPAWN_EVERY_TICKS
from .flyer import Flyer
from .geometry import Box
from .obstacles import ObstacleStream
from .scheduler import FrameScheduler
from .session import SessionState
from .viewport import Viewport

log = logging.getLogger(__name__)


class TickOutcome(NamedTuple):
    collided: bool
    ground_hit: bool
    scored: int

    @property
    def fatal(self) -> bool:
        return self.collided or self.ground_hit


class Simulation:
    """
    Owns every piece of game state and runs the per-tick pipeline.

    RUNNING tick:  flyer -> scroll/evict gates -> spawn on cadence ->
                   collisions + score -> render -> maybe TERMINAL -> schedule
    TERMINAL tick: render the terminal frame once, show restart, stop.

    The fatal frame is rendered before the phase flips, so the player sees
    what killed them; the terminal frame follows on the next tick.
    Rendering and scheduling are optional so the env and the tests can
    drive tick() by hand.
    """
    def __init__(self,
                 width: float = WIDTH,
                 height: float = HEIGHT,
                 seed: Optional[int] = None,
                 scheduler: Optional[FrameScheduler] = None,
                 surface=None,
                 renderer=None,
                 on_score: Optional[Callable[[int], None]] = None):
        self.viewport = Viewport(width, height)
        self.flyer = Flyer()
        self.obstacles = ObstacleStream(seed)
        self.session = SessionState()

        self.scheduler = scheduler
        self.surface = surface
        self.renderer = renderer
        self.on_score = on_score

        self.restart_visible = False
        self.restart_button: Optional[Box] = None
        self.death_cause: Optional[str] = None   # "obstacle" | "ground" | None
        self._pending = False

    @property
    def seed(self) -> int:
        return self.obstacles.seed

    # -------------------- Inputs --------------------

    def start(self):
        self._schedule()

    def flap(self) -> bool:
        """Impulse request; ignored once the session is over."""
        if self.session.terminal:
            return False
        self.flyer.flap()
        return True

    def resize(self, width: float, height: float):
        self.viewport.on_resize(width, height)

    def restart(self):
        self.obstacles.clear()
        self.session.reset()
        self.flyer.reset()
        self.restart_visible = False
        self.restart_button = None
        self.death_cause = None
        log.info("restart (seed=%s)", self.seed)
        self._notify_score()
        self._schedule()

    # -------------------- Tick --------------------

    def tick(self) -> Optional[TickOutcome]:
        self._pending = False

        if self.session.terminal:
            self.restart_button = self._render()
            self.restart_visible = True
            return None

        outcome = self._update()
        self._render()
        if outcome.fatal:
            self._end(outcome)
        self._schedule()
        return outcome

    def _update(self) -> TickOutcome:
        s = self.session
        vp = self.viewport
        s.tick += 1

        step = self.flyer.update_physics(vp.height)

        self.obstacles.advance(SCROLL_PX_PER_TICK, vp.obstacle_width)
        if s.tick % SPAWN_EVERY_TICKS == 0:
            self.obstacles.spawn(vp.width, vp.height)

        check = self.obstacles.check_and_score(self.flyer.rect, self.flyer.x, vp.obstacle_width)
        if check.scored:
            s.add_score(check.scored)
            self._notify_score()

        return TickOutcome(check.collided, step.ground_hit, check.scored)

    def _end(self, outcome: TickOutcome):
        if self.session.end():
            self.death_cause = "obstacle" if outcome.collided else "ground"
            log.info("session over: score=%d tick=%d cause=%s",
                     self.session.score, self.session.tick, self.death_cause)

    # -------------------- Helpers --------------------

    def _render(self) -> Optional[Box]:
        if self.surface is None or self.renderer is None:
            return None
        return self.renderer.draw_frame(self.surface, self)

    def _schedule(self):
        # never queue a second tick, e.g. restart while one is pending
        if self.scheduler is None or self._pending:
            return
        self._pending = True
        self.scheduler.schedule_next_tick(self.tick)

    def _notify_score(self):
        if self.on_score is not None:
            self.on_score(self.session.score)
