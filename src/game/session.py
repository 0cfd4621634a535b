# src/game/session.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Phase(Enum):
    RUNNING = "running"
    TERMINAL = "terminal"


@dataclass
class SessionState:
    score: int = 0
    tick: int = 0
    phase: Phase = Phase.RUNNING

    @property
    def terminal(self) -> bool:
        return self.phase is Phase.TERMINAL

    def add_score(self, n: int):
        if n > 0:
            self.score += n

    def end(self) -> bool:
        """RUNNING -> TERMINAL. Returns False if the session was already over."""
        if self.terminal:
            return False
        self.phase = Phase.TERMINAL
        return True

    def reset(self):
        self.score = 0
        self.tick = 0
        self.phase = Phase.RUNNING
