"""Units that stand on the tile map."""

from __future__ import annotations

import copy
import logging
from collections import deque

import pygame

from parallelrts.geometry import WIDTH
from parallelrts.tilemap import TileMap

log = logging.getLogger(__name__)

BLACK = (0, 0, 0)
GREEN = (0, 255, 0)

# Fail-safe number of positions examined when looking for a free tile.
SEARCH_LIMIT = 250

# Order in which neighbouring (row, col) offsets are explored.
_NEIGHBOURS = ((0, 1), (1, 1), (1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0), (-1, 1))


def _fill(surface, x1, y1, x2, y2, color) -> None:
    left, top = min(x1, x2), min(y1, y2)
    rect = pygame.Rect(int(left), int(top), int(abs(x2 - x1)), int(abs(y2 - y1)))
    pygame.draw.rect(surface, color, rect)


class Entity:
    """A unit with costs, hit points and a position on the map."""

    def __init__(self, tile_map, tile_cost, food, gold, stone, wood, image=None, x=0, y=0) -> None:
        self.tile_map = tile_map
        self.tile_cost = tile_cost
        self.food_cost = food
        self.gold_cost = gold
        self.stone_cost = stone
        self.wood_cost = wood
        self.image = image
        self.x = x
        self.y = y
        self.row = 0
        self.col = 0
        self.current_hp = 0
        self.max_hp = 0
        self.atk = 0
        self.defense = 0
        self.type_name = ""
        self.required_items: list = []
        self._placed = False

    def clone(self) -> Entity:
        """Return an unplaced copy of this entity."""
        duplicate = copy.copy(self)
        duplicate.required_items = list(self.required_items)
        duplicate._placed = False
        return duplicate

    def update(self) -> None:
        """Per-frame update; plain entities have nothing to do."""

    def render(self, surface, assets) -> None:
        """Draw the entity and its health bar."""
        if self.image is not None:
            surface.blit(self.image, (self.x, self.y))
        self.draw_hp(surface)

    def draw_entity_window(self, surface, assets) -> None:
        """Draw the side window describing this entity."""
        self.draw_entity_window_background(surface, assets)

    def draw_entity_window_background(self, surface, assets) -> None:
        font = assets.font(20)
        title = font.render(self.type_name, True, BLACK)
        surface.blit(title, title.get_rect(midtop=(WIDTH - 145, 175)))
        if self.image is not None:
            surface.blit(pygame.transform.scale(self.image, (50, 50)), (WIDTH - 170, 200))
        self.draw_entity_hp(surface, assets)

    def _hp_fraction(self) -> float:
        return self.current_hp / self.max_hp if self.max_hp else 0.0

    def draw_entity_hp(self, surface, assets) -> None:
        """Draw the large health bar and hit point count in the side window."""
        filled = self._hp_fraction() * 75
        _fill(surface, WIDTH - 190, 255, WIDTH - 95, 270, BLACK)
        _fill(surface, WIDTH - 185, 260, WIDTH - 175 + filled, 265, GREEN)
        text = assets.font(15).render(f"{self.current_hp}/{self.max_hp}", True, BLACK)
        surface.blit(text, (WIDTH - 90, 255))

    def draw_hp(self, surface) -> None:
        """Draw the small health bar above the entity."""
        filled = self._hp_fraction() * 36
        left = self.x + self.tile_map.tile_width // 4
        _fill(surface, left, self.y - 6, left + 36, self.y - 2, BLACK)
        _fill(surface, left + 2, self.y - 5, left + filled - 2, self.y - 3, GREEN)

    def find_nearest_unoccupied_pos(self, row, col):
        """Breadth-first search for a free tile near (row, col).

        Returns ``(row, col)`` or None when none is found within the search limit.
        """
        tile_map = self.tile_map
        queue = deque([(int(row), int(col))])
        iterations = 1
        while queue:
            r, c = queue.popleft()
            iterations += 1
            if not (0 <= r < tile_map.rows and 0 <= c < tile_map.cols):
                continue
            taken = not tile_map.is_resource(r, c) and tile_map.check_occupied(r, c)
            if taken or tile_map.tile_type(r, c) == TileMap.BLOCKED:
                queue.extend((r + dr, c + dc) for dr, dc in _NEIGHBOURS)
            else:
                return (r, c)
            if iterations >= SEARCH_LIMIT:
                return None
        return None

    def set_position(self, row, col) -> bool:
        """Move to the free tile nearest (row, col); False if there is none."""
        found = self.find_nearest_unoccupied_pos(row, col)
        if found is None:
            log.info("Unable to find a spot")
            return False
        new_row, new_col = found
        if self._placed:
            self.tile_map.set_occupy_status(self.row, self.col, TileMap.NORMAL)
        self.tile_map.set_occupy_status(new_row, new_col, TileMap.BLOCKED)
        screen = self.tile_map.iso_to_screen(new_row, new_col)
        self.x, self.y = screen.x, screen.y
        self.row, self.col = new_row, new_col
        self._placed = True
        log.info("Found a spot at row: %d, col: %d", new_row, new_col)
        return True

    def move_to(self, row, col) -> bool:
        return self.set_position(row, col)

    def tile_type(self) -> int:
        """Collision type of the tile the entity stands on."""
        return self.tile_map.tile_type(self.row, self.col)

    def tile_id(self) -> int:
        """Graphic id of the tile the entity stands on."""
        return self.tile_map.tile(self.row, self.col)

    def lose_hp(self, amount) -> None:
        self.current_hp -= amount