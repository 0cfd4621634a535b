# src/tests/test_flyer.py
"""
Flyer integration and clamping.

Usage (from repo root):
  python -m src.tests.test_flyer
"""
import math

from src.game.config import GRAVITY, DRAG, FLAP_VY, FLYER_START_Y
from src.game.flyer import Flyer

FLOOR = 640.0


def test_one_step():
    f = Flyer()
    step = f.update_physics(FLOOR)
    assert not step.ground_hit and not step.ceiling_hit
    assert math.isclose(f.vy, (0.0 + GRAVITY) * DRAG)
    assert math.isclose(f.y, FLYER_START_Y + (0.0 + GRAVITY) * DRAG)


def test_fall_speed_grows_but_stays_bounded():
    f = Flyer()
    terminal_vy = GRAVITY * DRAG / (1 - DRAG)       # fixed point of (v + g) * d
    prev = f.vy
    for _ in range(200):
        f.update_physics(1e9)
        assert f.vy > prev, "falling speed must keep growing"
        assert f.vy < terminal_vy
        prev = f.vy
    assert terminal_vy - f.vy < 0.5


def test_flap_overwrites_velocity():
    f = Flyer(vy=10.0)
    f.flap()
    assert f.vy == FLAP_VY
    f.flap()
    assert f.vy == FLAP_VY, "impulse is not additive"


def test_ceiling_is_soft_stop():
    f = Flyer(y=13.0, vy=-6.0)
    step = f.update_physics(FLOOR)
    assert step.ceiling_hit and not step.ground_hit
    assert f.y == f.h / 2
    assert f.vy == 0.0


def test_floor_is_reported():
    f = Flyer(y=630.0, vy=5.0)
    step = f.update_physics(FLOOR)
    assert step.ground_hit and not step.ceiling_hit
    assert f.y == FLOOR - f.h / 2


def test_rect_and_angle():
    f = Flyer(vy=-6.0)
    r = f.rect
    assert (r.left, r.top, r.width, r.height) == (33.0, 138.0, 34.0, 24.0)
    assert math.isclose(f.angle, -0.6)


def test_reset():
    f = Flyer(y=500.0, vy=9.0)
    f.reset()
    assert (f.y, f.vy) == (FLYER_START_Y, 0.0)


def main():
    for fn in (test_one_step, test_fall_speed_grows_but_stays_bounded,
               test_flap_overwrites_velocity, test_ceiling_is_soft_stop,
               test_floor_is_reported, test_rect_and_angle, test_reset):
        fn()
        print(f"✓ {fn.__name__}")


if __name__ == "__main__":
    main()
