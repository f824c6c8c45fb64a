"""The unit types a player can train."""

from __future__ import annotations

from parallelrts.entity import Entity

# Updates between two harvests at a harvest cooldown of 1.0.
FRAMES_PER_SECOND = 60


class Peasant(Entity):
    """A worker that harvests the resource tile it stands on."""

    def __init__(self, tile_map, player, tile_cost, food, gold, stone, wood, x=0, y=0, image=None) -> None:
        super().__init__(tile_map, tile_cost, food, gold, stone, wood, image, x, y)
        self.player = player
        self.type_name = "Peasant"
        self.current_hp = self.max_hp = 50
        self.harvest_cooldown = 1.0
        self.atk = 5
        self.defense = 1
        self._time = 0.0

    def clone(self) -> Peasant:
        duplicate = super().clone()
        duplicate._time = 0.0
        return duplicate

    def update(self) -> None:
        """Harvest the current tile once per cooldown period."""
        self._time += 1.0
        if self._time / FRAMES_PER_SECOND >= self.harvest_cooldown:
            if self.tile_map.is_resource(self.row, self.col):
                self.player.add_tile_to_inventory(self.tile_map.tile(self.row, self.col))
            self._time = 0.0

    def render(self, surface, assets) -> None:
        if self.image is not None:
            surface.blit(self.image, (self.x + self.tile_map.tile_width // 3, self.y))
        self.draw_hp(surface)

    def draw_entity_window(self, surface, assets) -> None:
        self.draw_entity_window_background(surface, assets)


class Knight(Entity):
    """A sturdy fighting unit."""

    def __init__(self, tile_map, tile_cost, food, gold, stone, wood, x=0, y=0, image=None) -> None:
        super().__init__(tile_map, tile_cost, food, gold, stone, wood, image, x, y)
        self.type_name = "Knight"
        self.current_hp = self.max_hp = 100
        self.atk = 15
        self.defense = 5

    def clone(self) -> Knight:
        return super().clone()

    def update(self) -> None:
        """Knights have no per-frame behaviour."""

    def render(self, surface, assets) -> None:
        if self.image is not None:
            surface.blit(self.image, (self.x, self.y))
        self.draw_hp(surface)

    def draw_entity_window(self, surface, assets) -> None:
        self.draw_entity_window_background(surface, assets)


class Merchant(Entity):
    """A trading unit."""

    def __init__(self, tile_map, tile_cost, food, gold, stone, wood, x=0, y=0, image=None) -> None:
        super().__init__(tile_map, tile_cost, food, gold, stone, wood, image, x, y)
        self.type_name = "Merchant"
        self.current_hp = self.max_hp = 50
        self.atk = 5
        self.defense = 1

    def clone(self) -> Merchant:
        return super().clone()

    def update(self) -> None:
        """Merchants have no per-frame behaviour."""

    def render(self, surface, assets) -> None:
        if self.image is not None:
            surface.blit(self.image, (self.x, self.y))
        self.draw_hp(surface)

    def draw_entity_window(self, surface, assets) -> None:
        self.draw_entity_window_background(surface, assets)