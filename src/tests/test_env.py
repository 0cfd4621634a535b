# src/tests/test_env.py
"""
Quick tests for FlappyEnv (Gymnasium environment).

Usage (from repo root):
  python -m src.tests.test_env
  python -m src.tests.test_env --render
  python -m src.tests.test_env --no-api-check --no-determinism
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Tuple

import numpy as np
from gymnasium.utils.env_checker import check_env

from src.env.flappy_env import FlappyEnv, GATE_REWARD
from src.game.obstacles import Obstacle


def test_api_check(frame_skip: int = 2) -> None:
    """Verify Gym API contract (spaces, step/reset signatures, types)."""
    env = FlappyEnv(frame_skip=frame_skip)
    try:
        check_env(env)
    finally:
        env.close()


def test_smoke(steps: int = 300, seed: int = 123, frame_skip: int = 2) -> None:
    """Short random rollout: no crashes, obs in space, reward type, proper terminations."""
    env = FlappyEnv(frame_skip=frame_skip)
    try:
        obs, info = env.reset(seed=seed)
        assert env.observation_space.contains(obs), "Initial observation not in space"
        assert info["seed"] == seed and info["score"] == 0

        env.action_space.seed(seed)
        for t in range(steps):
            a = env.action_space.sample()
            obs, r, term, trunc, info = env.step(a)
            assert isinstance(r, float), "Reward must be a float"
            assert env.observation_space.contains(obs), f"Step {t}: observation out of bounds"
            if term or trunc:
                break
    finally:
        env.close()


def test_determinism(steps: int = 300, seed: int = 123, frame_skip: int = 2) -> None:
    """Same seed + same action sequence => identical obs/reward/terminal flags."""
    def rollout(seed_val: int, action_seq: List[int]) -> List[Tuple[np.ndarray, float, bool, bool]]:
        env = FlappyEnv(frame_skip=frame_skip)
        traj: List[Tuple[np.ndarray, float, bool, bool]] = []
        try:
            env.reset(seed=seed_val)
            for a in action_seq:
                obs, r, term, trunc, _ = env.step(int(a))
                traj.append((obs.copy(), float(r), bool(term), bool(trunc)))
                if term or trunc:
                    break
        finally:
            env.close()
        return traj

    rng = np.random.RandomState(42)
    action_seq = [int(rng.random_sample() < 0.1) for _ in range(steps)]

    t1 = rollout(seed, action_seq)
    t2 = rollout(seed, action_seq)

    assert len(t1) == len(t2), "Determinism: trajectory length mismatch"
    for i, ((o1, r1, te1, tr1), (o2, r2, te2, tr2)) in enumerate(zip(t1, t2)):
        assert np.allclose(o1, o2), f"Determinism: obs mismatch at step {i}"
        assert (r1, te1, tr1) == (r2, te2, tr2), f"Determinism: transition mismatch at step {i}"


def test_noop_falls_to_ground():
    env = FlappyEnv(frame_skip=2)
    try:
        env.reset(seed=7)
        term = False
        r = 0.0
        info = {}
        for _ in range(100):
            _, r, term, _, info = env.step(0)
            if term:
                break
        assert term, "doing nothing must end on the ground"
        assert r == -1.0
        assert info["death_cause"] == "ground"
    finally:
        env.close()


def test_flap_moves_up_and_gates_pay():
    env = FlappyEnv(frame_skip=1)
    try:
        obs0, _ = env.reset(seed=7)
        obs1, r, *_ = env.step(1)
        assert obs1[1] < 0.0 and obs1[0] < obs0[0]
        assert r == 1.0

        # a gate that has just been passed pays out on the next step
        env.sim.obstacles.obstacles = [Obstacle(x=-30.0, top=100)]
        _, r, term, _, info = env.step(0)
        assert not term
        assert r == 1.0 + GATE_REWARD
        assert info["score"] == 1
    finally:
        env.close()


def test_time_limit_truncates():
    env = FlappyEnv(frame_skip=1, time_limit_seconds=0.05)   # 3 decisions
    try:
        env.reset(seed=1)
        flags = [env.step(0)[3] for _ in range(3)]
        assert flags == [False, False, True]
    finally:
        env.close()


def render_demo(steps: int, seed: int, frame_skip: int) -> None:
    """Open a window and run a short NOOP demo so you can visually verify behavior."""
    env = FlappyEnv(render_mode="human", frame_skip=frame_skip)
    try:
        env.reset(seed=seed)
        for _ in range(steps):
            _, _, term, trunc, _ = env.step(0)
            if term or trunc:
                break
    finally:
        env.close()
    print("✓ Render demo finished")


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=123, help="Episode seed for tests")
    ap.add_argument("--steps", type=int, default=300, help="Max decision steps per test")
    ap.add_argument("--frame-skip", type=int, default=2, help="Sim ticks per decision step")
    ap.add_argument("--render", action="store_true", help="Run a short visual demo")
    ap.add_argument("--no-api-check", action="store_true", help="Skip Gym API compliance check")
    ap.add_argument("--no-smoke", action="store_true", help="Skip smoke test")
    ap.add_argument("--no-determinism", action="store_true", help="Skip determinism test")
    args = ap.parse_args()

    try:
        if not args.no_api_check:
            test_api_check(frame_skip=args.frame_skip)
            print("✓ API check ok")
        if not args.no_smoke:
            test_smoke(steps=args.steps, seed=args.seed, frame_skip=args.frame_skip)
            print("✓ Smoke test ok")
        if not args.no_determinism:
            test_determinism(steps=args.steps, seed=args.seed, frame_skip=args.frame_skip)
            print("✓ Determinism ok")
        for fn in (test_noop_falls_to_ground, test_flap_moves_up_and_gates_pay,
                   test_time_limit_truncates):
            fn()
            print(f"✓ {fn.__name__}")
        if args.render:
            render_demo(steps=min(args.steps, 600), seed=args.seed, frame_skip=args.frame_skip)
    except AssertionError as e:
        print(f"✗ Test failed: {e}", file=sys.stderr)
        sys.exit(1)
    else:
        print("🎉 All selected tests passed")


if __name__ == "__main__":
    main()
