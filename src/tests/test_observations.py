# src/tests/test_observations.py
import numpy as np

from src.env.observations import OBS_SIZE, NO_GATE, build_observation, gates_ahead
from src.game.obstacles import Obstacle
from src.game.simulation import Simulation


def make_sim(*gates: Obstacle) -> Simulation:
    sim = Simulation(480, 640, seed=1)
    sim.obstacles.obstacles = list(gates)
    return sim


def test_shape_and_empty_sentinels():
    obs = build_observation(make_sim())
    assert isinstance(obs, np.ndarray) and obs.dtype == np.float32 and obs.shape == (OBS_SIZE,)
    assert np.isclose(obs[0], 150 / 640)
    assert obs[1] == 0.0
    assert tuple(obs[2:5]) == NO_GATE and tuple(obs[5:8]) == NO_GATE


def test_next_gate_features():
    passed = Obstacle(x=-60.0, top=50)          # right edge 12, behind the flyer
    nxt = Obstacle(x=200.0, top=100)
    after = Obstacle(x=450.0, top=160)
    sim = make_sim(passed, nxt, after)

    assert gates_ahead(sim) == [nxt, after]
    obs = build_observation(sim)
    assert np.allclose(obs[2:5], [(200 - 50) / 480, 100 / 640, 450 / 640])
    assert np.allclose(obs[5:8], [(450 - 50) / 480, 160 / 640, 510 / 640])


def test_ranges_hold_at_extremes():
    sim = make_sim(Obstacle(x=20.0, top=500))   # overlapping the flyer, opening off screen
    sim.flyer.vy = 40.0
    obs = build_observation(sim)
    assert obs[1] == 1.0
    assert obs[2] == 0.0 and obs[4] == 1.0
    sim.flyer.flap()
    assert -1.0 < build_observation(sim)[1] < 0.0


def main():
    for fn in (test_shape_and_empty_sentinels, test_next_gate_features, test_ranges_hold_at_extremes):
        fn()
    print("✓ observation unit sanity passed")


if __name__ == "__main__":
    main()
