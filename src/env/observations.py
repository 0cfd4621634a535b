# src/env/observations.py
from __future__ import annotations
from typing import List, Tuple
import numpy as np

from src.game.config import FLAP_VY

OBS_SIZE = 8
# |vy| scale: drag caps the fall near 0.3*0.98/0.02 = 14.7 px/tick
VY_SCALE: float = 15.0
GATES_AHEAD = 2
# (dx, top, bottom) when no gate is ahead: far away, whole screen open
NO_GATE: Tuple[float, float, float] = (1.0, 0.0, 1.0)

def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)

def _norm_vy(vy: float, vy_max: float = VY_SCALE) -> float:
    vy_max = float(max(abs(FLAP_VY), vy_max))
    vv = max(-vy_max, min(vy, vy_max))
    return vv / vy_max

def gates_ahead(sim, n: int = GATES_AHEAD) -> List:
    """Next n gates whose right edge has not yet passed the flyer's left edge."""
    gw = sim.viewport.obstacle_width
    left = sim.flyer.rect.left
    return [ob for ob in sim.obstacles if ob.right(gw) >= left][:n]

def build_observation(sim) -> np.ndarray:
    """
    Returns a fixed (8,) float32 vector:
      [ y_norm, vy_norm,
        dx@1, top@1, bottom@1,
        dx@2, top@2, bottom@2 ]
    - y_norm      in [0,1]  (flyer centre / viewport height)
    - vy_norm     in [-1,1] (positive = falling)
    - dx          in [0,1]  (gate left - flyer x, / viewport width)
    - top/bottom  in [0,1]  (gate opening / viewport height)
    Missing gates use NO_GATE.
    """
    vp = sim.viewport
    flyer = sim.flyer

    feats: List[float] = [
        _clamp01(flyer.y / vp.height),
        _norm_vy(flyer.vy),
    ]

    ahead = gates_ahead(sim)
    for i in range(GATES_AHEAD):
        if i < len(ahead):
            ob = ahead[i]
            feats.extend([
                _clamp01((ob.x - flyer.x) / vp.width),
                _clamp01(ob.top / vp.height),
                _clamp01(ob.bottom / vp.height),
            ])
        else:
            feats.extend(NO_GATE)

    return np.asarray(feats, dtype=np.float32)
