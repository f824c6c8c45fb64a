"""The scrolling camera over the isometric map."""

from __future__ import annotations

from parallelrts.geometry import HEIGHT, WIDTH


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


class Camera:
    """A view position kept inside the diamond-shaped map while it scrolls.

    Set ``left``, ``right``, ``up`` and ``down`` to steer it and call
    ``update`` once per frame.
    """

    def __init__(self, x, y, tile_map) -> None:
        self.x = float(x)
        self.y = float(y)
        self.tile_map = tile_map
        # Even speeds only, or the camera jitters.
        self.move_speed = 10
        self.dx = 0
        self.dy = 0
        self.left = self.right = self.up = self.down = False

        tile_width = tile_map.tile_width
        tile_height = tile_map.tile_height
        cols, rows = tile_map.cols, tile_map.rows
        small, large = min(cols, rows), max(cols, rows)
        self.tile_width = tile_width
        self.map_height_y = small * tile_height + _tdiv(abs(cols - rows) * tile_height, 2) - HEIGHT
        self.map_height_x = (_tdiv(large * tile_width, 2) - _tdiv(small * tile_width, 2)
                             - WIDTH // 2 + _tdiv(tile_width, 2))
        self.map_right_bound = _tdiv(cols * tile_width, 2) - WIDTH + _tdiv(tile_width, 2)
        self.map_left_bound = _tdiv(-rows * tile_width, 2)
        self.offset = -(WIDTH // 4) + _tdiv(tile_width, 4)

    def update(self) -> None:
        """Move one step in the steered directions, sliding along the map edges."""
        x, y = self.x, self.y
        speed = self.move_speed
        half = speed // 2
        top_right = x / 2 + WIDTH // 4 - _tdiv(self.tile_width, 4)
        top_left = -x / 2 + self.offset
        bottom_right = -x / 2 + self.map_height_y + _tdiv(self.map_height_x, 2)
        bottom_left = x / 2 + self.map_height_y - _tdiv(self.map_height_x, 2)
        bottom = self.map_height_y
        dx = dy = 0

        if self.up and y >= 0 and y > top_right and y > top_left:
            dy = -speed
        elif self.up and y >= 0 and y <= top_right and y > top_left:
            dy, dx = -half, -speed
        elif self.up and y >= 0 and y > top_right and y <= top_left:
            dy, dx = -half, speed
        elif self.down and y <= bottom and y < bottom_right and y < bottom_left:
            dy = speed
        elif self.down and y <= bottom and y >= bottom_right and y < bottom_left:
            dy, dx = half, -speed
        elif self.down and y <= bottom and y < bottom_right and y >= bottom_left:
            dy, dx = half, speed

        can_right = self.right and x <= self.map_right_bound
        can_left = self.left and x >= self.map_left_bound
        if can_right and y > top_right and y < bottom_right:
            dx = speed
        elif can_right and y <= top_right and y < bottom_right:
            dy, dx = half, speed
        elif can_right and y > top_right and y >= bottom_right:
            dy, dx = -half, speed
        elif can_left and y > top_left and y < bottom_left:
            dx = -speed
        elif can_left and y <= top_left and y < bottom_left:
            dy, dx = half, -speed
        elif can_left and y > top_left and y >= bottom_left:
            dy, dx = -half, -speed

        self.dx, self.dy = dx, dy
        self.x += dx
        self.y += dy