# src/env/flappy_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from src.game.config import WIDTH, HEIGHT, FPS
from src.game.assets import load_sprites
from src.game.render import PygameSurface, Renderer
from src.game.simulation import Simulation
from src.env.observations import OBS_SIZE, build_observation

GATE_REWARD = 5.0


class FlappyEnv(gym.Env):
    """
    Flappy Gates Gymnasium environment (vector observations).
    - One simulation tick per frame, 60 frames per second of play.
    - Agent acts every `frame_skip` ticks (default 2) -> 30 decisions/sec.
    - Observation: shape (8,), float32, see build_observation.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 2,
                 time_limit_seconds: Optional[float] = 60.0,
                 width: int = WIDTH,
                 height: int = HEIGHT):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.width = int(width)
        self.height = int(height)

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(FPS * time_limit_seconds / self.frame_skip)

        # Actions: 0 = NOOP, 1 = FLAP
        self.action_space = gym.spaces.Discrete(2)

        # [y, vy, dx1, top1, bottom1, dx2, top2, bottom2]
        low = np.array([0.0, -1.0] + [0.0, 0.0, 0.0] * 2, dtype=np.float32)
        high = np.ones(OBS_SIZE, dtype=np.float32)
        self.observation_space = gym.spaces.Box(low=low, high=high, dtype=np.float32)

        # --- Runtime state ---
        self.sim: Optional[Simulation] = None
        self.timestep: int = 0                   # decision steps elapsed

        # Rendering
        self.screen = None
        self.clock = None
        self.surface: Optional[PygameSurface] = None
        self.renderer: Optional[Renderer] = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)

        # Same seed -> same gates. Without one, draw from the env's RNG.
        if seed is not None:
            sim_seed = int(seed)
        else:
            sim_seed = int(self.np_random.integers(0, 2**31 - 1))

        self.sim = Simulation(width=self.width, height=self.height, seed=sim_seed)
        self.timestep = 0

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), self._info()

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.sim is not None, "Call reset() before step()"
        sim = self.sim

        if action == 1:
            sim.flap()

        scored = 0
        for _ in range(self.frame_skip):
            if sim.session.terminal:
                break
            scored += sim.tick().scored

        terminated = sim.session.terminal
        reward = (-1.0 if terminated else 1.0) + GATE_REWARD * scored

        self.timestep += 1
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = True

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), float(reward), terminated, truncated, self._info()

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.sim is not None
        return build_observation(self.sim)

    def _info(self) -> Dict[str, Any]:
        sim = self.sim
        return {
            "score": sim.session.score,
            "tick": sim.session.tick,
            "timestep": self.timestep,
            "seed": sim.seed,
            "death_cause": sim.death_cause,
        }

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.sim is None:
            return None

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((self.width, self.height))
                pygame.display.set_caption("Flappy Gates - Gym Env")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((self.width, self.height))
            self.surface = PygameSurface(self.screen)
            self.renderer = Renderer(load_sprites())

        if self.render_mode == "human":
            # Pump the event queue so the OS doesn't think we're hung
            pygame.event.pump()

        self.renderer.draw_frame(self.surface, self.sim)

        if self.render_mode == "human":
            pygame.display.flip()
            self.clock.tick(self.metadata["render_fps"])
            return None

        # (H, W, 3) uint8
        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self.surface = None
            self.renderer = None
