# src/game/assets.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import pygame

from .config import FLYER_W, FLYER_H, OBSTACLE_VARIANTS, BANNER_W

log = logging.getLogger(__name__)

GATE_COLORS = [(83, 160, 52), (196, 92, 60), (70, 110, 190)]


@dataclass
class Sprites:
    flyer: pygame.Surface
    obstacles: Tuple[pygame.Surface, ...]
    banner: pygame.Surface


def _placeholder_flyer() -> pygame.Surface:
    s = pygame.Surface((FLYER_W, FLYER_H), pygame.SRCALPHA)
    pygame.draw.ellipse(s, (250, 214, 60), s.get_rect())
    pygame.draw.circle(s, (20, 20, 20), (FLYER_W - 9, FLYER_H // 3), 3)
    pygame.draw.polygon(s, (240, 120, 40),
                        [(FLYER_W - 4, FLYER_H // 2), (FLYER_W, FLYER_H // 2 + 3),
                         (FLYER_W - 4, FLYER_H // 2 + 6)])
    return s


def _placeholder_gate(variant: int) -> pygame.Surface:
    color = GATE_COLORS[variant % len(GATE_COLORS)]
    s = pygame.Surface((64, 256))
    s.fill(color)
    shade = tuple(max(0, c - 40) for c in color)
    for x in range(0, 64, 16):
        pygame.draw.rect(s, shade, (x, 0, 4, 256))
    return s


def _placeholder_banner() -> pygame.Surface:
    s = pygame.Surface((BANNER_W, BANNER_W // 2), pygame.SRCALPHA)
    pygame.draw.rect(s, (235, 90, 70), s.get_rect(), border_radius=16)
    pygame.draw.rect(s, (255, 215, 0), s.get_rect(), width=6, border_radius=16)
    return s


def _load(asset_dir: Optional[Path], name: str, fallback) -> pygame.Surface:
    if asset_dir is not None:
        path = asset_dir / name
        try:
            return pygame.image.load(str(path))
        except (pygame.error, FileNotFoundError) as e:
            log.warning("sprite %s unavailable (%s), using placeholder", path, e)
    return fallback()


def load_sprites(asset_dir: Optional[Path] = None) -> Sprites:
    """
    Loads flyer.png, gate_<i>.png and banner.png from asset_dir.
    Missing files (or no directory) fall back to generated surfaces.
    """
    flyer = _load(asset_dir, "flyer.png", _placeholder_flyer)
    gates = tuple(
        _load(asset_dir, f"gate_{i}.png", lambda i=i: _placeholder_gate(i))
        for i in range(OBSTACLE_VARIANTS)
    )
    banner = _load(asset_dir, "banner.png", _placeholder_banner)
    return Sprites(flyer=flyer, obstacles=gates, banner=banner)
