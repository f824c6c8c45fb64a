"""The isometric tile map: graphic tiles, collision data and occupancy."""

from __future__ import annotations

import logging
from itertools import islice

from parallelrts.geometry import HEIGHT, WIDTH, Vector2

log = logging.getLogger(__name__)


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _chunks(values, size):
    iterator = iter(values)
    while chunk := list(islice(iterator, size)):
        yield chunk


def _leading_int(line: str) -> int:
    fields = line.split()
    if not fields:
        raise ValueError("tile map header is missing a dimension")
    return int(fields[0])


class TileMap:
    """A grid of tiles drawn in isometric projection.

    The map file holds the column count, the row count, a grid of tile ids
    and a grid of collision types, each grid row by row.
    """

    NORMAL = 0
    BLOCKED = 1
    NUM_TILES = 5

    def __init__(self, tile_width: int, tile_height: int) -> None:
        self.tile_width = tile_width
        self.tile_height = tile_height
        self.cols = 0
        self.rows = 0
        self.width = 0
        self.height = 0
        self._tiles: list[list[int]] = []
        self._collision: list[list[int]] = []
        self._occupied: list[list[bool]] = []
        self.tile_set: list[list] = []
        self.resource_set: list = []

    def load_tile_map(self, path) -> None:
        """Read the map dimensions, tile ids and collision types from ``path``."""
        log.info("Loading Tilemap...")
        with open(path, encoding="utf-8") as handle:
            cols = _leading_int(handle.readline())
            rows = _leading_int(handle.readline())
            tokens = handle.read().split()
        cells = rows * cols
        if len(tokens) < 2 * cells:
            raise ValueError(f"tile map {path} holds {len(tokens)} values, expected {2 * cells}")
        values = [int(token) for token in tokens[: 2 * cells]]

        self.cols, self.rows = cols, rows
        self.width = cols * self.tile_width
        self.height = rows * self.tile_height
        log.info("Tilemap is %d x %d.", cols, rows)
        self._tiles = list(_chunks(values[:cells], cols)) if cols else [[] for _ in range(rows)]
        self._collision = list(_chunks(values[cells:], cols)) if cols else [[] for _ in range(rows)]
        self._occupied = [[False] * cols for _ in range(rows)]
        log.info("Finished Loading Tilemap!")

    def load_tile_set(self, tile_sheet) -> None:
        """Cut ``tile_sheet`` into tile-sized sub-images, row by row."""
        sheet_width, sheet_height = tile_sheet.get_size()
        tile_cols = sheet_width // self.tile_width
        tile_rows = sheet_height // self.tile_height
        self.tile_set = [
            [
                tile_sheet.subsurface(
                    (self.tile_width * col, self.tile_height * row, self.tile_width, self.tile_height)
                )
                for col in range(tile_cols)
            ]
            for row in range(tile_rows)
        ]

    def load_resource_set(self, resources, assets) -> None:
        """Load the tile image of each resource, indexed by resource id."""
        log.info("Loading %d Resources.", len(resources))
        self.resource_set = [resource.tile_image(assets) for resource in resources]

    def _cell(self, grid, row: int, col: int):
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"tile ({row}, {col}) is outside the map")
        return grid[row][col]

    def tile_type(self, row: int, col: int) -> int:
        """Collision type of a tile."""
        return self._cell(self._collision, row, col)

    def tile(self, row: int, col: int) -> int:
        """Graphic tile id of a tile; ids from NUM_TILES on are resources."""
        return self._cell(self._tiles, row, col)

    def is_resource(self, row: int, col: int) -> bool:
        return self.tile(row, col) >= self.NUM_TILES

    def check_occupied(self, row: int, col: int) -> bool:
        return self._cell(self._occupied, row, col)

    def set_occupy_status(self, row: int, col: int, status) -> None:
        self._cell(self._occupied, row, col)
        self._occupied[row][col] = bool(status)

    def screen_to_iso(self, x, y) -> Vector2:
        """Map coordinates (x=col, y=row) of a world pixel, clamped to the map."""
        x, y = int(x), int(y)
        across = _tdiv(x, self.tile_width // 2)
        down = _tdiv(y, self.tile_height // 2)
        col = _tdiv(across + down, 2)
        row = _tdiv(down - across, 2)
        if x < 0:
            row += 1  # mouse offset adjustment for negative x
        col = max(col, 0)
        if col > self.cols - 1:
            col = self.cols - 1
        row = max(row, 0)
        if row > self.rows - 1:
            row = self.rows - 1
        return Vector2(col, row)

    def iso_to_screen(self, row: int, col: int) -> Vector2:
        """World pixel position of the top-left corner of a tile's image."""
        row, col = int(row), int(col)
        return Vector2(
            _tdiv((col - row) * self.tile_width, 2),
            _tdiv((col + row) * self.tile_height, 2),
        )

    def update(self) -> None:
        """Per-frame update; the map has no animated state."""

    def render(self, surface, cur_x, cur_y, assets) -> None:
        """Draw the tiles near the camera at (cur_x, cur_y) onto ``surface``."""
        cur_x, cur_y = int(cur_x), int(cur_y)
        centre = self.screen_to_iso(cur_x + WIDTH // 2, cur_y + HEIGHT // 2)
        row_start = max(int(centre.y) - 25, 0)
        col_start = max(int(centre.x) - 25, 0)
        row_end = min(int(centre.y) + 25, self.rows)
        col_end = min(int(centre.x) + 25, self.cols)
        radius = None
        for row in range(row_start, row_end):
            for col in range(col_start, col_end):
                tile_id = self._tiles[row][col]
                screen = self.iso_to_screen(row, col)
                position = (screen.x - cur_x, screen.y - cur_y)
                if tile_id < self.NUM_TILES:
                    sheet_row, sheet_col = divmod(tile_id, self.cols)
                    surface.blit(self.tile_set[sheet_row][sheet_col], position)
                else:
                    surface.blit(self.resource_set[tile_id - self.NUM_TILES], position)
                if self._occupied[row][col]:
                    if radius is None:
                        radius = assets.get_image("radius")
                    surface.blit(radius, position)