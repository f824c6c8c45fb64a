"""The main play screen: map, camera, buildings, units and the menu."""

from __future__ import annotations

from contextlib import contextmanager

import pygame

from parallelrts.buildinglist import BuildingList
from parallelrts.camera import Camera
from parallelrts.geometry import WIDTH
from parallelrts.gsm import State
from parallelrts.igm import InGameMenu
from parallelrts.inputhandler import InputHandler
from parallelrts.player import Player
from parallelrts.resources import ALL_RESOURCES, Resource
from parallelrts.tilemap import TileMap

TILE_WIDTH = 64
TILE_HEIGHT = 32
CAMERA_START = (1000, 1000)

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YIELD_COLOR = (63, 235, 75)
DESCRIPTION_COLOR = (247, 82, 22)


@contextmanager
def _shifted(items, dx, dy):
    """Temporarily move objects with ``x``/``y`` by (-dx, -dy) into view space."""
    items = list(items)
    for item in items:
        item.x -= dx
        item.y -= dy
    try:
        yield
    finally:
        for item in items:
            item.x += dx
            item.y += dy


class PlayState(State):
    """Runs the game world and draws it through the camera."""

    def __init__(self, manager, assets, map_path) -> None:
        super().__init__(manager)
        self.assets = assets
        self.tile_map = TileMap(TILE_WIDTH, TILE_HEIGHT)
        self.tile_map.load_tile_set(assets.get_image("tileset"))
        self.tile_map.load_resource_set(list(ALL_RESOURCES), assets)
        self.tile_map.load_tile_map(map_path)
        self.camera = Camera(*CAMERA_START, self.tile_map)
        self.building_list = BuildingList(self.tile_map, assets)
        self.player = Player()
        self.menu = InGameMenu(self.player, self.building_list, self.tile_map, assets)
        self.input = InputHandler()

        self.selected_entity = None
        self.hover_entity = None
        self.hover_tile = 0
        self.map_coord = None
        self.screen_coord = None
        self.mouse_x = 0
        self.mouse_y = 0
        self.placing_x = 0
        self.placing_y = 0

    def render(self, surface) -> None:
        """Draw the world under the camera, then the menu and hover popups."""
        surface.fill(BLACK)
        cam_x, cam_y = int(self.camera.x), int(self.camera.y)
        tile_map = self.tile_map

        tile_map.render(surface, cam_x, cam_y, self.assets)
        with _shifted(self.player.entities, cam_x, cam_y):
            self.player.render_entities(surface, self.assets)
        with _shifted(self.building_list.buildings, cam_x, cam_y):
            self.building_list.render(surface)
        self.menu.iso_render(surface)

        world_x = int(self.mouse_x + cam_x)
        world_y = int(self.mouse_y + cam_y)
        map_coord = tile_map.screen_to_iso(world_x, world_y)
        col, row = int(map_coord.x), int(map_coord.y)
        screen_coord = tile_map.iso_to_screen(row, col)
        self.map_coord, self.screen_coord = map_coord, screen_coord

        self.building_list.col = map_coord.x
        self.building_list.row = map_coord.y
        self.menu.current_col = map_coord.x
        self.menu.current_row = map_coord.y

        self.hover_tile = tile_map.tile(row, col)
        self.hover_entity = self.player.entity_in_tile(row, col)

        surface.blit(self.assets.get_image("hover"),
                     (int(screen_coord.x - cam_x), int(screen_coord.y - cam_y)))

        building = self.menu.building
        offset = tile_map.screen_to_iso(building.width // 2, building.height)
        offset = tile_map.iso_to_screen(int(offset.x), int(offset.y))
        self.placing_x = screen_coord.x + offset.x
        self.placing_y = screen_coord.y - offset.y
        self.building_list.x = self.placing_x
        self.building_list.y = self.placing_y
        if self.building_list.placing:
            self.building_list.placing_building(
                surface, building, self.placing_x - cam_x, self.placing_y - cam_y)

        self.menu.static_render(surface)
        self._draw_resource_popup(surface)
        self._draw_entity_popup(surface)

    def _draw_resource_popup(self, surface) -> None:
        if self.hover_tile < TileMap.NUM_TILES:
            return
        resource = ALL_RESOURCES[self.hover_tile - TileMap.NUM_TILES]
        surface.blit(self.assets.get_image("popup"), (WIDTH // 4 - 75, 0))
        name = resource.name[:1].upper() + resource.name[1:]
        title = self.assets.font(20).render(name, True, WHITE)
        surface.blit(title, (WIDTH // 4, 5))
        surface.blit(resource.tile_image(self.assets), (WIDTH // 4 - 70, 10))
        small = self.assets.font(12)
        if resource.kind == Resource.GENERAL:
            line = small.render(f"Yield / Second: {resource.yield_amount}", True, YIELD_COLOR)
        else:
            line = small.render(resource.description, True, DESCRIPTION_COLOR)
        surface.blit(line, (WIDTH // 4, 25))

    def _draw_entity_popup(self, surface) -> None:
        entity = self.hover_entity
        if entity is None or self.selected_entity is not None:
            return
        surface.blit(self.assets.get_image("popup"), (WIDTH // 4 - 75, 0))
        if entity.image is not None:
            surface.blit(entity.image, (WIDTH // 4 - 64, 10))
        label = self.assets.font(12).render(entity.type_name, True, DESCRIPTION_COLOR)
        surface.blit(label, (WIDTH // 4, 15))

    def update(self, keys_down, mouse) -> None:
        """Advance the world one frame; clicks reach the menu one frame late."""
        mouse_x, mouse_y, buttons = mouse
        self.mouse_x, self.mouse_y = mouse_x, mouse_y

        self.tile_map.update()
        self.camera.update()
        self.player.update()
        self.menu.update(self.input.left_click, self.input.right_click, self.input.key_click,
                         self.input.key_pressed, mouse_x, mouse_y)

        self.input.update(keys_down, buttons)

        self.camera.left = pygame.K_a in keys_down
        self.camera.up = pygame.K_w in keys_down
        self.camera.right = pygame.K_d in keys_down
        self.camera.down = pygame.K_s in keys_down