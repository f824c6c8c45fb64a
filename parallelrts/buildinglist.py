"""The buildings on the map, kept in drawing order."""

from __future__ import annotations

import logging

import pygame

from parallelrts.building import BuildingType
from parallelrts.buildings import Castle, Market, Towncenter
from parallelrts.tilemap import TileMap

log = logging.getLogger(__name__)

PLACING_TINT = (240, 128, 128)

_FACTORIES = {
    BuildingType.CASTLE: Castle,
    BuildingType.TOWNCENTER: Towncenter,
    BuildingType.MARKET: Market,
}


class BuildingList:
    """Placed buildings plus the state of the building being placed.

    ``x``/``y`` are the pixel position and ``col``/``row`` the map tile under
    the cursor where a new building would go.
    """

    def __init__(self, tile_map, assets) -> None:
        self.tile_map = tile_map
        self.assets = assets
        self._buildings: list = []
        self.placing = False
        self.x = 0.0
        self.y = 0.0
        self.col = 0.0
        self.row = 0.0
        self.current_building = None
        self._next_id = 0

    @property
    def buildings(self) -> list:
        """Buildings in drawing order; the first is drawn first."""
        return list(self._buildings)

    def __len__(self) -> int:
        return len(self._buildings)

    def add_building(self, building) -> None:
        """Insert ``building`` before the first building it is not in front of."""
        index = next(
            (i for i, other in enumerate(self._buildings)
             if not self.is_building1_in_front(building, other)),
            len(self._buildings),
        )
        log.info("Inserting building at %d", index)
        self._buildings.insert(index, building)
        building.building_id = self._next_id
        self._next_id += 1

    def pop_building(self, index) -> None:
        """Remove the building at ``index`` in drawing order."""
        del self._buildings[index]

    def clear(self) -> None:
        self._buildings.clear()

    def _footprint(self, building):
        for row in range(building.row, building.top_row - 1, -1):
            for col in range(building.col, building.top_col - 1, -1):
                yield row, col

    def check_placing_bounds(self, building) -> bool:
        """Put ``building`` at the cursor tile; True when it cannot be placed there."""
        building.col = int(self.col)
        building.row = int(self.row)
        if building.top_row < 0 or building.top_col < 0:
            return True
        if building.row >= self.tile_map.rows or building.col >= self.tile_map.cols:
            return True
        tile_map = self.tile_map
        return any(
            tile_map.check_occupied(row, col)
            or tile_map.tile_type(row, col) == TileMap.BLOCKED
            or tile_map.is_resource(row, col)
            for row, col in self._footprint(building)
        )

    def update(self, building, player):
        """Place a new building like ``building`` at the cursor and return it."""
        factory = _FACTORIES.get(building.building_type)
        if factory is not None:
            building = factory(len(self._buildings), self.assets, building._clock)
        building.player = player
        building.x = self.x
        building.y = self.y
        building.col = int(self.col)
        building.row = int(self.row)
        self.add_building(building)
        self.current_building = building
        log.info("Placed building at %d,%d", building.row, building.col)
        for row, col in self._footprint(building):
            self.tile_map.set_occupy_status(row, col, TileMap.BLOCKED)
        return building

    def render(self, surface) -> None:
        for building in self._buildings:
            surface.blit(building.image, (int(building.x), int(building.y)))

    def placing_building(self, surface, building, x, y) -> bool:
        """Draw ``building`` at (x, y), tinted when the spot is blocked.

        Returns True when the spot is blocked.
        """
        blocked = self.check_placing_bounds(building)
        image = building.image
        if blocked:
            image = image.copy()
            image.fill(PLACING_TINT, special_flags=pygame.BLEND_RGB_MULT)
        surface.blit(image, (int(x), int(y)))
        return blocked

    def is_building1_in_front(self, first, second) -> bool:
        """True when ``first`` is drawn in front of ``second``."""
        if first.row <= second.top_row:
            return False
        if second.row <= first.top_row:
            return True
        if first.col <= second.top_col:
            return False
        if second.col <= first.top_col:
            return True
        return False

    def building_at(self, col, row):
        """The building covering tile (row, col), the front one if several; else None."""
        found = None
        for building in self._buildings:
            if building.top_col <= col <= building.col and building.top_row <= row <= building.row:
                found = building
        return found

    def produce_units(self) -> None:
        for building in self._buildings:
            building.produce_units()