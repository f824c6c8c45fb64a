"""Buildings: placement footprint, hit points and the unit training queue."""

from __future__ import annotations

import logging
import time
from enum import Enum

import pygame

from parallelrts.geometry import WIDTH

log = logging.getLogger(__name__)

BLACK = (0, 0, 0)
GREEN = (0, 255, 0)

# Clock ticks (hundredths of a second) needed to train one unit.
TRAINING_TICKS = 1000
MAX_QUEUE = 11


class BuildingType(Enum):
    CASTLE = 0
    TOWNCENTER = 1
    MARKET = 2


def _default_clock():
    start = time.monotonic()
    return lambda: int((time.monotonic() - start) * 100)


def _fill(surface, x1, y1, x2, y2, color) -> None:
    left, top = min(x1, x2), min(y1, y2)
    rect = pygame.Rect(int(left), int(top), int(abs(x2 - x1)), int(abs(y2 - y1)))
    pygame.draw.rect(surface, color, rect)


class Building:
    """A structure covering a block of tiles whose bottom corner is (row, col).

    ``clock`` is a callable returning a tick count in hundredths of a second.
    """

    def __init__(self, image, width, height, clock=None) -> None:
        self.image = image
        self.width = width
        self.height = height
        self.col_width = (width + 63) // 64
        self.row_height = (height + 63) // 64
        self._clock = clock if clock is not None else _default_clock()
        self.x = 0
        self.y = 0
        self.col = 0
        self.row = 0
        self.building_id = 0
        self.stone_cost = 0
        self.wood_cost = 0
        self.food_cost = 0
        self.gold_cost = 0
        self._required: list[tuple] = []
        self.hp = 0
        self.current_hp = 0
        self.level = 0
        self.building_type: BuildingType | None = None
        self.type_name = ""
        self.unit_queue: list = []
        self.start_time = 0
        self.current_entity = None
        self.player = None

    @property
    def top_col(self) -> int:
        return self.col - self.col_width

    @property
    def top_row(self) -> int:
        return self.row - self.row_height

    @property
    def required_items(self) -> list[tuple]:
        """(resource, quantity) pairs needed besides the general costs."""
        return list(self._required)

    def add_required_item(self, resource, quantity) -> None:
        self._required.append((resource, quantity))

    def requires_items(self) -> bool:
        return bool(self._required)

    def lose_hp(self, damage) -> None:
        self.hp -= damage

    def is_standing(self) -> bool:
        return self.hp > 0

    def draw(self, surface, image, x, y) -> None:
        surface.blit(image, (x, y))

    def draw_building_window(self, surface, assets) -> None:
        """Draw the side window describing this building."""
        self.draw_building_window_background(surface, assets)

    def draw_building_hp(self, surface, assets) -> None:
        filled = (self.current_hp / self.hp if self.hp else 0.0) * 75
        _fill(surface, WIDTH - 190, 255, WIDTH - 95, 270, BLACK)
        _fill(surface, WIDTH - 185, 260, WIDTH - 175 + filled, 265, GREEN)
        text = assets.font(15).render(f"{self.current_hp}/{self.hp}", True, BLACK)
        surface.blit(text, (WIDTH - 90, 255))

    def draw_building_window_background(self, surface, assets) -> None:
        font = assets.font(20)
        title = font.render(self.type_name, True, BLACK)
        surface.blit(title, title.get_rect(midtop=(WIDTH - 145, 175)))
        if self.image is not None:
            surface.blit(pygame.transform.scale(self.image, (50, 50)), (WIDTH - 170, 200))
        self.draw_building_hp(surface, assets)
        self.draw_unit_queue(surface, assets)
        surface.blit(font.render("Units", True, BLACK), (WIDTH - 290, 300))
        surface.blit(font.render("Queue", True, BLACK), (WIDTH - 290, 450))

    def draw_unit_queue(self, surface, assets) -> None:
        """Draw the training progress of the unit at the head of the queue."""
        if not self.unit_queue:
            return
        elapsed = self._clock() - self.start_time
        fraction = elapsed / TRAINING_TICKS
        _fill(surface, WIDTH - 190, 495, WIDTH - 95, 510, BLACK)
        _fill(surface, WIDTH - 185, 500, WIDTH - 180 + fraction * 80, 505, GREEN)
        font = assets.font(15)
        surface.blit(font.render(f"{int(fraction * 100)}%", True, BLACK), (WIDTH - 75, 490))
        if self.current_entity is not None:
            surface.blit(font.render(self.current_entity.type_name, True, BLACK), (WIDTH - 190, 480))

    def add_unit(self, entity) -> None:
        """Queue a unit for training; a full queue ignores it."""
        if not self.unit_queue:
            self.start_time = self._clock()
            self.current_entity = entity
        if len(self.unit_queue) >= MAX_QUEUE:
            log.warning("Cannot add unit, too many in queue.")
            return
        self.unit_queue.append(entity)

    def cancel_unit(self, index) -> None:
        """Remove the queued unit at ``index``; IndexError if there is none."""
        del self.unit_queue[index]
        if index == 0 and self.unit_queue:
            self.start_time = self._clock()
        if self.unit_queue:
            self.current_entity = self.unit_queue[0]

    def produce_units(self) -> None:
        """Release the head of the queue once its training time has passed."""
        now = self._clock()
        if not self.unit_queue or now - self.start_time < TRAINING_TICKS:
            return
        entity = self.unit_queue.pop(0)
        if entity.set_position(self.row, self.col):
            log.info("Troops spawned")
            self.player.add_entity(entity)
        self.start_time = now
        if self.unit_queue:
            self.current_entity = self.unit_queue[0]