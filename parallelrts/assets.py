"""Image and font storage for the game's assets."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

log = logging.getLogger(__name__)

FONT_FILE = "basicfont.ttf"

DEFAULT_IMAGES: tuple[tuple[str, str, bool], ...] = (
    ("images/tileset.png", "tileset", False),
    ("images/hover.png", "hover", True),
    ("images/radius.png", "radius", True),
    ("images/castle.png", "castle", True),
    ("images/town_center.png", "towncenter", True),
    ("images/market.png", "market", False),
    ("images/basicbutton.png", "basicbutton", False),
    ("images/productionbg.png", "productionbg", False),
    ("images/flagbg.png", "flagbg", False),
    ("images/x.png", "x", False),
    ("images/miscbg.png", "miscbg", False),
    ("images/resources_menu.png", "resources_menu", False),
    ("images/peasant.png", "peasant", False),
    ("images/merchant.png", "merchant", False),
    ("images/knight.png", "knight", False),
    ("images/popup.png", "popup", False),
    ("images/resources/tile_wheat.png", "tile_wheat", False),
    ("images/resources/tile_rice.png", "tile_rice", False),
    ("images/resources/tile_iron.png", "tile_iron", False),
    ("images/resources/iron.png", "iron", False),
    ("images/resources/cloth.png", "cloth", False),
)


class AssetManager:
    """Keeps loaded images under string keys and hands out fonts."""

    def __init__(self, base_dir=".") -> None:
        self.base_dir = Path(base_dir)
        self._images: dict[str, pygame.Surface] = {}
        self._fonts: dict[int, pygame.font.Font] = {}

    def load_image(self, path, key: str, transparency: bool = False) -> pygame.Surface:
        """Load an image relative to the base directory and store it under ``key``.

        With ``transparency`` set, pure black becomes transparent.
        """
        full_path = self.base_dir / path
        if not full_path.is_file():
            raise FileNotFoundError(f"image not found: {full_path}")
        surface = pygame.image.load(str(full_path))
        if transparency:
            surface.set_colorkey((0, 0, 0))
        self._images[key] = surface
        return surface

    def add_image(self, key: str, surface: pygame.Surface) -> None:
        """Store an already created surface under ``key``."""
        self._images[key] = surface

    def get_image(self, key: str) -> pygame.Surface:
        """Return the image stored under ``key``; raise KeyError if absent."""
        try:
            return self._images[key]
        except KeyError:
            raise KeyError(f"no image loaded under key {key!r}") from None

    def font(self, size: int) -> pygame.font.Font:
        """Return the game font at ``size`` points, falling back to pygame's default."""
        cached = self._fonts.get(size)
        if cached is not None:
            return cached
        if not pygame.font.get_init():
            pygame.font.init()
        font_path = self.base_dir / FONT_FILE
        font = pygame.font.Font(str(font_path) if font_path.is_file() else None, size)
        self._fonts[size] = font
        return font

    def destroy_images(self) -> None:
        """Forget every stored image."""
        self._images.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._images

    def __len__(self) -> int:
        return len(self._images)


def load_default_assets(manager: AssetManager) -> AssetManager:
    """Load every image the game uses into ``manager``."""
    log.info("Loading Images...")
    for path, key, transparency in DEFAULT_IMAGES:
        manager.load_image(path, key, transparency)
    log.info("Done Loading Images...")
    return manager