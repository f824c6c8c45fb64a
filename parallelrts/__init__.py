"""An isometric real-time strategy game built on pygame: tile map, buildings, units and menus."""

__version__ = "0.1.0"