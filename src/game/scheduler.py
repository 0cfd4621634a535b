# src/game/scheduler.py
from __future__ import annotations
from typing import Callable, Optional, Protocol


class FrameScheduler(Protocol):
    def schedule_next_tick(self, fn: Callable[[], object]) -> None: ...


class ManualScheduler:
    """
    Holds at most one pending tick until the host runs it.
    The pygame loop calls run_pending() once per frame; tests call it (or
    Simulation.tick directly) as many times as they need.
    """
    def __init__(self):
        self.pending: Optional[Callable[[], object]] = None

    def schedule_next_tick(self, fn):
        self.pending = fn

    @property
    def has_pending(self) -> bool:
        return self.pending is not None

    def run_pending(self):
        fn, self.pending = self.pending, None
        if fn is None:
            return None
        return fn()
