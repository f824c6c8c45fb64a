"""Screen dimensions and a small two-dimensional vector type."""

from __future__ import annotations

from dataclasses import dataclass

WIDTH = 1280
HEIGHT = 720


@dataclass(frozen=True)
class Vector2:
    """An immutable pair of coordinates."""

    x: float = 0
    y: float = 0

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    def __truediv__(self, factor: float) -> Vector2:
        return Vector2(self.x / factor, self.y / factor)

    def __iter__(self):
        yield self.x
        yield self.y