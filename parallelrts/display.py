"""The game window and its main loop."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from parallelrts.assets import AssetManager, load_default_assets
from parallelrts.geometry import HEIGHT, WIDTH
from parallelrts.gsm import StateManager
from parallelrts.playstate import PlayState

FRAMES_PER_SECOND = 60
DEFAULT_MAP = "data/tilemap.ptm"
WATCHED_KEYS = (pygame.K_a, pygame.K_w, pygame.K_d, pygame.K_s, pygame.K_b, pygame.K_ESCAPE)


def _keys_down() -> set[int]:
    pressed = pygame.key.get_pressed()
    return {key for key in WATCHED_KEYS if pressed[key]}


def _mouse() -> tuple[int, int, int]:
    x, y = pygame.mouse.get_pos()
    left, _middle, right = pygame.mouse.get_pressed(3)
    return x, y, (1 if left else 0) | (2 if right else 0)


def run(asset_dir=".", map_path=DEFAULT_MAP, max_frames=None) -> int:
    """Open the window and play until it is closed or ``max_frames`` have run.

    ``map_path`` is taken relative to ``asset_dir`` unless absolute.
    Returns the number of frames shown.
    """
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        assets = load_default_assets(AssetManager(asset_dir))
        manager = StateManager()
        manager.push(PlayState(manager, assets, str(Path(asset_dir) / map_path)))

        clock = pygame.time.Clock()
        frames = 0
        running = True
        while running and (max_frames is None or frames < max_frames):
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                running = False
                continue
            manager.update(_keys_down(), _mouse())
            manager.render(screen)
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
            frames += 1
        return frames
    finally:
        pygame.quit()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Isometric real-time strategy game.")
    parser.add_argument("--assets", default=".", help="directory holding images/ and data/")
    parser.add_argument("--map", default=DEFAULT_MAP, help="tile map file")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)
    run(args.assets, args.map, args.frames)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())