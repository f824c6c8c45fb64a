"""The concrete building types: castle, town centre and market."""

from __future__ import annotations

from parallelrts.building import BLACK, Building, BuildingType
from parallelrts.geometry import WIDTH


class Castle(Building):
    """A fortress that trains knights and holds a garrison."""

    def __init__(self, building_id, assets, clock=None) -> None:
        super().__init__(assets.get_image("castle"), 607, 447, clock)
        self.building_id = building_id
        self.stone_cost = 500
        self.gold_cost = 200
        self.wood_cost = 0
        self.food_cost = 0
        self.width = 400
        self.height = 352
        self.building_type = BuildingType.CASTLE
        self.type_name = "Castle"
        self.current_hp = self.hp = 1000
        self.current_garrison = 0
        self.max_garrison = 50

    def draw_building_window(self, surface, assets) -> None:
        """Draw the side window with the garrison count."""
        self.draw_building_window_background(surface, assets)
        text = f"Garrison: {self.current_garrison}/{self.max_garrison}"
        surface.blit(assets.font(15).render(text, True, BLACK), (WIDTH - 290, 275))


class Towncenter(Building):
    """The town centre, where peasants are trained."""

    def __init__(self, building_id, assets, clock=None) -> None:
        super().__init__(assets.get_image("towncenter"), 255, 287, clock)
        self.building_id = building_id
        self.stone_cost = 300
        self.gold_cost = 0
        self.wood_cost = 300
        self.food_cost = 0
        self.width = 255
        self.height = 287
        self.building_type = BuildingType.TOWNCENTER
        self.type_name = "Towncenter"
        self.current_hp = self.hp = 500

    def draw_building_window(self, surface, assets) -> None:
        self.draw_building_window_background(surface, assets)


class Market(Building):
    """A market, where merchants are trained."""

    def __init__(self, building_id, assets, clock=None) -> None:
        super().__init__(assets.get_image("market"), 240, 195, clock)
        self.building_id = building_id
        self.stone_cost = 300
        self.gold_cost = 0
        self.wood_cost = 300
        self.food_cost = 0
        self.width = 240
        self.height = 195
        self.building_type = BuildingType.MARKET
        self.type_name = "Market"
        self.current_hp = self.hp = 500

    def draw_building_window(self, surface, assets) -> None:
        self.draw_building_window_background(surface, assets)