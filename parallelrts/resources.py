"""Harvestable resources found on map tiles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ResourceType(Enum):
    FOOD = 0
    WOOD = 1
    STONE = 2
    GOLD = 3


@dataclass(frozen=True)
class Resource:
    """A named resource; ``kind`` tells general resources from misc items."""

    GENERAL: ClassVar[int] = 0
    MISC: ClassVar[int] = 1

    name: str

    @property
    def kind(self) -> int:
        raise NotImplementedError

    def tile_image(self, assets):
        """Return the map tile image for this resource."""
        return assets.get_image("tile_" + self.name)


@dataclass(frozen=True)
class MiscResource(Resource):
    """A special item kept as individual pieces in the inventory."""

    description: str = ""

    @property
    def kind(self) -> int:
        return Resource.MISC

    def render(self, surface, assets, x, y) -> None:
        """Draw the item's icon at (x, y)."""
        surface.blit(assets.get_image(self.name), (x, y))


@dataclass(frozen=True)
class GeneralResource(Resource):
    """A resource that adds ``yield_amount`` of one stock per harvest."""

    resource_type: ResourceType = ResourceType.FOOD
    yield_amount: int = 0

    @property
    def kind(self) -> int:
        return Resource.GENERAL


# Yield is the amount gained per harvest while a peasant works the tile.
WHEAT = GeneralResource("wheat", ResourceType.FOOD, 10)
RICE = GeneralResource("rice", ResourceType.FOOD, 15)
CHICKEN = GeneralResource("chicken", ResourceType.FOOD, 10)
MUTTON = GeneralResource("mutton", ResourceType.FOOD, 20)

TREE = GeneralResource("tree", ResourceType.WOOD, 10)
LIGHT_GOLD_ORE = GeneralResource("light_gold", ResourceType.GOLD, 10)
HEAVY_GOLD_ORE = GeneralResource("heavy_gold", ResourceType.GOLD, 50)
LIGHT_STONE_ORE = GeneralResource("light_stone", ResourceType.STONE, 10)
HEAVY_STONE_ORE = GeneralResource("heavy_stone", ResourceType.STONE, 10)

CLOTH = MiscResource("cloth", "Place loom adjacent to harvest")
IRON_ORE = MiscResource("iron", "Place furnace adjacent to harvest")

# A resource tile's id is its index here plus the number of plain map tiles.
ALL_RESOURCES: tuple[Resource, ...] = (WHEAT, RICE, IRON_ORE)