# src/game/game.py
import sys, argparse, logging
from pathlib import Path

import pygame
from pygame import K_SPACE, K_ESCAPE, K_r

from .config import WIDTH, HEIGHT, FPS, SEED_DEFAULT
from .assets import load_sprites
from .render import PygameSurface, Renderer
from .scheduler import ManualScheduler
from .simulation import Simulation

CAPTION = "Flappy Gates"


def parse_args():
    p = argparse.ArgumentParser()
    p.add_argument("--seed", type=int, default=None,
                   help="Gate seed. Omit for SEED_DEFAULT, use -1 for random each launch.")
    p.add_argument("--width", type=int, default=WIDTH)
    p.add_argument("--height", type=int, default=HEIGHT)
    p.add_argument("--fps", type=int, default=FPS)
    p.add_argument("--assets", type=str, default=None,
                   help="Directory with flyer.png, gate_0..2.png, banner.png")
    p.add_argument("--log-level", type=str, default="INFO")
    return p.parse_args()


def run():
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Resolve seed: None -> use SEED_DEFAULT; -1 -> random
    if args.seed is None:
        seed = SEED_DEFAULT
    elif args.seed == -1:
        seed = None
    else:
        seed = args.seed

    pygame.init()
    pygame.display.set_caption(CAPTION)
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    clock = pygame.time.Clock()

    def show_score(score: int):
        pygame.display.set_caption(f"{CAPTION}  Score: {score}")

    scheduler = ManualScheduler()
    sprites = load_sprites(Path(args.assets) if args.assets else None)
    sim = Simulation(
        width=args.width,
        height=args.height,
        seed=seed,
        scheduler=scheduler,
        surface=PygameSurface(screen),
        renderer=Renderer(sprites),
        on_score=show_score,
    )
    show_score(0)
    sim.start()

    while True:
        clock.tick(args.fps)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.VIDEORESIZE:
                # pygame 2 resizes the display surface in place
                sim.resize(event.w, event.h)
            if event.type == pygame.KEYDOWN:
                if event.key == K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key == K_SPACE:
                    sim.flap()
                if event.key == K_r:
                    sim.restart()
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                button = sim.restart_button
                if sim.restart_visible and button is not None and \
                        button.to_pygame().collidepoint(event.pos):
                    sim.restart()
                else:
                    sim.flap()

        if scheduler.has_pending:
            scheduler.run_pending()
            pygame.display.flip()


if __name__ == "__main__":
    run()
