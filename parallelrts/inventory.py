"""A player's stock of general resources and misc items."""

from __future__ import annotations

from collections import defaultdict

from parallelrts.resources import GeneralResource, MiscResource, ResourceType


class InsufficientResourcesError(Exception):
    """Raised when more of a resource is removed than is held."""


class Inventory:
    """Counts of food, gold, wood and stone plus stacks of misc items by name."""

    def __init__(self, food: int = 0, gold: int = 0, wood: int = 0, stone: int = 0) -> None:
        self._amounts = {
            ResourceType.FOOD: food,
            ResourceType.GOLD: gold,
            ResourceType.WOOD: wood,
            ResourceType.STONE: stone,
        }
        self._items: defaultdict[str, list[MiscResource]] = defaultdict(list)

    @property
    def food(self) -> int:
        return self._amounts[ResourceType.FOOD]

    @property
    def gold(self) -> int:
        return self._amounts[ResourceType.GOLD]

    @property
    def wood(self) -> int:
        return self._amounts[ResourceType.WOOD]

    @property
    def stone(self) -> int:
        return self._amounts[ResourceType.STONE]

    def add_general_resource(self, resource: GeneralResource) -> None:
        """Add one harvest's yield of ``resource``."""
        self._amounts[resource.resource_type] += resource.yield_amount

    def add_misc_resource(self, resource: MiscResource, quantity: int) -> None:
        """Add ``quantity`` pieces of ``resource``."""
        self._items[resource.name].extend([resource] * quantity)

    def remove_general_resource(self, kind: ResourceType, quantity: int) -> None:
        """Take ``quantity`` of ``kind``; raise InsufficientResourcesError if short."""
        if self._amounts[kind] < quantity:
            raise InsufficientResourcesError(f"Not enough {kind.name.lower()}!")
        self._amounts[kind] -= quantity

    def remove_misc_resource(self, resource: MiscResource, quantity: int) -> None:
        """Remove up to ``quantity`` pieces of ``resource`` if any are held."""
        if self.has_item(resource.name):
            del self._items[resource.name][:quantity]

    def has_items(self) -> bool:
        """True when any misc item is held."""
        return any(self._items.values())

    def has_item(self, name: str) -> bool:
        """True when at least one piece of the named item is held."""
        return bool(self._items.get(name))

    def misc_resources(self) -> list[list[MiscResource]]:
        """Non-empty item stacks, ordered by item name."""
        return [list(stack) for _name, stack in sorted(self._items.items()) if stack]