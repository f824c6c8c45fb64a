"""A player: inventory and the units on the map."""

from __future__ import annotations

import logging

from parallelrts.inventory import InsufficientResourcesError, Inventory
from parallelrts.resources import ALL_RESOURCES, Resource, ResourceType
from parallelrts.tilemap import TileMap

log = logging.getLogger(__name__)


class Player:
    """Holds the player's inventory and units keyed by (row, col)."""

    def __init__(self) -> None:
        self.inventory = Inventory(0, 0, 0, 0)
        self._entities: dict[tuple[int, int], object] = {}

    @property
    def food(self) -> int:
        return self.inventory.food

    @property
    def gold(self) -> int:
        return self.inventory.gold

    @property
    def wood(self) -> int:
        return self.inventory.wood

    @property
    def stone(self) -> int:
        return self.inventory.stone

    @property
    def entities(self) -> list:
        """Units ordered by (row, col)."""
        return [entity for _key, entity in sorted(self._entities.items())]

    def _pay(self, food, stone, wood, gold) -> bool:
        costs = (
            (ResourceType.FOOD, food),
            (ResourceType.STONE, stone),
            (ResourceType.WOOD, wood),
            (ResourceType.GOLD, gold),
        )
        try:
            for kind, cost in costs:
                if cost and getattr(self.inventory, kind.name.lower()) >= cost:
                    self.inventory.remove_general_resource(kind, cost)
        except InsufficientResourcesError as error:
            log.warning("%s", error)
            return False
        return True

    def buy_building(self, building) -> bool:
        """Take the building's required items and the costs the player can afford."""
        if building.requires_items() and self.inventory.has_items():
            for resource, quantity in building.required_items:
                if self.inventory.has_item(resource.name):
                    self.inventory.remove_misc_resource(resource, quantity)
        return self._pay(building.food_cost, building.stone_cost,
                         building.wood_cost, building.gold_cost)

    def buy_entity(self, entity) -> bool:
        """Take the unit's costs the player can afford."""
        return self._pay(entity.food_cost, entity.stone_cost, entity.wood_cost, entity.gold_cost)

    def add_tile_to_inventory(self, tile_id) -> None:
        """Add the harvest of a resource tile; plain tiles give nothing."""
        if tile_id < TileMap.NUM_TILES:
            return
        resource = ALL_RESOURCES[tile_id - TileMap.NUM_TILES]
        if resource.kind == Resource.GENERAL:
            self.inventory.add_general_resource(resource)
        else:
            self.inventory.add_misc_resource(resource, 1)

    def entity_in_tile(self, row, col):
        """The unit at (row, col), or None."""
        return self._entities.get((int(row), int(col)))

    def render_entities(self, surface, assets) -> None:
        for entity in self.entities:
            entity.render(surface, assets)

    def add_entity(self, entity) -> None:
        """Register a unit at its tile; a tile already taken keeps its unit."""
        log.info("Added new entity at row: %d, col: %d", entity.row, entity.col)
        self._entities.setdefault((int(entity.row), int(entity.col)), entity)

    def remove_entity(self, entity) -> None:
        """Forget a unit; raise KeyError if none is registered at its tile."""
        log.info("%s died", entity.type_name)
        del self._entities[(int(entity.row), int(entity.col))]

    def update(self) -> None:
        for entity in self.entities:
            entity.update()

    def update_entity_position(self, entity, row, col) -> None:
        """Move a unit towards (row, col) and re-register it at its new tile."""
        self._entities.pop((int(entity.row), int(entity.col)), None)
        entity.move_to(row, col)
        self.add_entity(entity)