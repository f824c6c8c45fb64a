"""The in-game menu: side windows, buttons and the mouse and keyboard rules."""

from __future__ import annotations

import logging

import pygame

from parallelrts.buildings import Castle, Market, Towncenter
from parallelrts.building import BuildingType
from parallelrts.buttons import (
    BuildButton,
    ButtonManager,
    MenuButton,
    MenuState,
    UnitButton,
    UnitQueueButton,
)
from parallelrts.geometry import WIDTH
from parallelrts.resources import CLOTH, IRON_ORE
from parallelrts.tilemap import TileMap
from parallelrts.units import Knight, Merchant, Peasant

log = logging.getLogger(__name__)

WHITE = (255, 255, 255)
WINDOW_FILL = (255, 204, 0)
WINDOW_BORDER = (153, 77, 0)
BLACK = (0, 0, 0)

# Columns and rows of the unit queue buttons.
_QUEUE_LEFT = WIDTH - 290
_QUEUE_GAP = 55


def _rect(surface, x1, y1, x2, y2, color, width=0) -> None:
    if surface is None:
        return
    left, top = min(x1, x2), min(y1, y2)
    rect = pygame.Rect(int(left), int(top), int(abs(x2 - x1)), int(abs(y2 - y1)))
    pygame.draw.rect(surface, color, rect, width)


def _text(surface, font, text, color, x, y) -> None:
    surface.blit(font.render(text, True, color), (int(x), int(y)))


class InGameMenu:
    """Menu windows and buttons drawn over the map, driven by clicks and keys.

    ``current_col`` and ``current_row`` hold the map tile under the cursor.
    Methods taking ``surface`` accept None to change state without drawing.
    """

    def __init__(self, player, building_list, tile_map, assets) -> None:
        self.player = player
        self.building_list = building_list
        self.tile_map = tile_map
        self.assets = assets

        player.inventory.add_misc_resource(IRON_ORE, 3)
        player.inventory.add_misc_resource(CLOTH, 1)

        self.current_state = MenuState.DEFAULT
        self.prev_state = MenuState.DEFAULT
        self.is_left_window_open = False
        self.is_right_window_open = False
        self.current_col = 0
        self.current_row = 0

        self.sample_castle = Castle(-1, assets)
        self.sample_towncenter = Towncenter(-1, assets)
        self.sample_market = Market(-1, assets)
        self.sample_peasant = Peasant(tile_map, player, 20, 0, 0, 0, 0, 0, 0, assets.get_image("peasant"))
        self.sample_knight = Knight(tile_map, 20, 0, 0, 0, 0, 0, 0, assets.get_image("knight"))
        self.sample_merchant = Merchant(tile_map, 20, 0, 0, 0, 0, 0, 0, assets.get_image("merchant"))

        self.new_building = self.sample_castle
        self.new_building_placeholder = None
        self.selected_building = None
        self.prev_selected_building = None
        self.selected_entity = None
        self.button_index = None

        image = assets.get_image
        self.buttons = ButtonManager()
        self.building_buttons = ButtonManager()

        self.build_button = MenuButton(250, 200, 300, 250, image("basicbutton"), False,
                                       MenuState.PRODUCTION, self)
        self.flag_button = MenuButton(0, 0, 100, 100, image("flagbg"), False, MenuState.OVERVIEW, self)
        self.production_button = MenuButton(0, 100, 50, 150, image("productionbg"), False,
                                            MenuState.BUILD, self)
        self.exit_button = MenuButton(275, 150, 300, 175, image("x"), False, MenuState.DEFAULT, self)
        self.inventory_exit_button = MenuButton(WIDTH - 25, 40, WIDTH, 65, image("x"), False,
                                                MenuState.DEFAULT, self)
        self.misc_button = MenuButton(WIDTH - 50, 0, WIDTH, 50, image("miscbg"), False,
                                      MenuState.INVENTORY, self)
        self.castle_button = BuildButton(15, 200, 65, 250, image("basicbutton"), False,
                                         self.sample_castle, player, self)
        self.towncenter_button = BuildButton(80, 200, 130, 250, image("basicbutton"), False,
                                             self.sample_towncenter, player, self)
        self.market_button = BuildButton(145, 200, 195, 250, image("basicbutton"), False,
                                         self.sample_market, player, self)
        self.right_exit_button = MenuButton(WIDTH - 300, 150, WIDTH - 275, 175, image("x"), False,
                                            MenuState.DEFAULT, self)
        unit_box = (WIDTH - 290, 325, WIDTH - 240, 375)
        self.peasant_button = UnitButton(*unit_box, image("basicbutton"), False,
                                         self.sample_peasant, player, self)
        self.knight_button = UnitButton(*unit_box, image("basicbutton"), False,
                                        self.sample_knight, player, self)
        self.merchant_button = UnitButton(*unit_box, image("basicbutton"), False,
                                          self.sample_merchant, player, self)

        for button in (
            self.build_button, self.flag_button, self.production_button, self.exit_button,
            self.inventory_exit_button, self.misc_button, self.castle_button,
            self.towncenter_button, self.market_button, self.right_exit_button,
            self.peasant_button, self.knight_button, self.merchant_button,
        ):
            self.buttons.add_button(button)

        boxes = [(WIDTH - 290, 475, WIDTH - 240, 525)]
        boxes += [(_QUEUE_LEFT + _QUEUE_GAP * i, 535, _QUEUE_LEFT + _QUEUE_GAP * i + 50, 585)
                  for i in range(5)]
        # The first button of the last row keeps its inverted right edge.
        boxes.append((_QUEUE_LEFT, 595, _QUEUE_LEFT - 50, 645))
        boxes += [(_QUEUE_LEFT + _QUEUE_GAP * i, 595, _QUEUE_LEFT + _QUEUE_GAP * i + 50, 645)
                  for i in range(1, 5)]
        self.button_queue = [
            UnitQueueButton(*box, image("basicbutton"), False, player, self, num)
            for num, box in enumerate(boxes)
        ]
        for button in self.button_queue:
            self.buttons.add_button(button)

    @property
    def building(self):
        """The template building that would be placed next."""
        return self.new_building

    # Menu windows

    def game_background(self, surface=None) -> None:
        """Draw the resource bar and show the always-available buttons."""
        if surface is not None:
            surface.blit(self.assets.get_image("resources_menu"), (WIDTH - 550, 0))
            font = self.assets.font(20)
            amounts = (self.player.food, self.player.gold, self.player.stone, self.player.wood)
            for step, amount in enumerate(amounts):
                _text(surface, font, str(amount), WHITE, WIDTH - 550 + 125 * step + 40, 8)
            _rect(surface, 0, 0, 100, 100, BLACK)
        self.misc_button.visible = True
        self.production_button.visible = True
        self.flag_button.visible = True
        self.is_left_window_open = self.is_right_window_open = False

    def menu_background(self, surface=None) -> None:
        """Draw the left window."""
        _rect(surface, 0, 150, 300, 650, WINDOW_FILL)
        _rect(surface, 1, 150, 300, 650, WINDOW_BORDER, 3)
        self.exit_button.visible = True
        self.is_left_window_open = True

    def default_menu(self, surface=None) -> None:
        self.is_left_window_open = self.is_right_window_open = False

    def overview_menu(self, surface=None) -> None:
        self.menu_background(surface)

    def diplo_menu(self, surface=None) -> None:
        """Diplomacy has no window yet."""

    def production_menu(self, surface=None) -> None:
        """Production opens on the building menu."""
        self.building_menu(surface)

    def building_menu(self, surface=None) -> None:
        self.menu_background(surface)
        for button in (self.build_button, self.castle_button,
                       self.towncenter_button, self.market_button):
            button.visible = True

    def _right_window(self, surface) -> None:
        _rect(surface, WIDTH, 150, WIDTH - 300, 650, WINDOW_FILL)
        _rect(surface, WIDTH - 1, 150, WIDTH - 300, 650, WINDOW_BORDER, 3)
        self.right_exit_button.visible = True

    def building_info_background(self, surface=None) -> None:
        """Draw the right window for the selected building and its training buttons."""
        self._right_window(surface)
        building = self.selected_building
        if building is not None:
            unit_buttons = {
                BuildingType.TOWNCENTER: self.peasant_button,
                BuildingType.CASTLE: self.knight_button,
                BuildingType.MARKET: self.merchant_button,
            }
            button = unit_buttons.get(building.building_type)
            if button is not None:
                button.visible = True
            for queue_button, entity in zip(self.button_queue, building.unit_queue):
                queue_button.visible = True
                queue_button.entity = entity
        self.is_right_window_open = True

    def entity_info_background(self, surface=None) -> None:
        self._right_window(surface)

    def inventory_menu(self, surface=None) -> None:
        """Draw the list of misc items held by the player."""
        self.inventory_exit_button.visible = True
        if surface is None:
            return
        stacks = self.player.inventory.misc_resources()
        bottom = 40 + len(stacks) * 35
        _rect(surface, WIDTH - 550, 40, WIDTH, bottom, WINDOW_FILL)
        _rect(surface, WIDTH - 549, 41, WIDTH - 1, bottom - 1, WINDOW_BORDER, 3)
        font = self.assets.font(20)
        for i, stack in enumerate(stacks):
            h = 50 + i * 25
            name = stack[0].name
            description = f"{name[:1].upper()}{name[1:]} - {len(stack)}"
            stack[0].render(surface, self.assets, WIDTH - 225 - (len(description) * 20 + 28) // 2, h)
            _text(surface, font, description, WHITE,
                  WIDTH - 225 - (len(description) * 20 - 28) // 2, h)

    def set_state(self, state, surface=None) -> None:
        """Switch to ``state`` and set up (and, given a surface, draw) its window."""
        self.current_state = state
        if state in (MenuState.RESET, MenuState.PLACING_BUILDING, MenuState.PLACING_BUILDING_TEST):
            return
        if state is MenuState.OVERVIEW:
            self.overview_menu(surface)
        elif state is MenuState.PRODUCTION:
            self.production_menu(surface)
        elif state is MenuState.BUILD:
            self.building_menu(surface)
        elif state is MenuState.BUILDING_INFO:
            self.building_info_background(surface)
            if surface is not None and self.selected_building is not None:
                self.selected_building.draw_building_window(surface, self.assets)
        elif state is MenuState.ENTITY_INFO:
            self.entity_info_background(surface)
            if surface is not None and self.selected_entity is not None:
                self.selected_entity.draw_entity_window(surface, self.assets)
        elif state is MenuState.INVENTORY:
            self.inventory_menu(surface)
        else:
            self.default_menu(surface)

    # Click handling

    def is_in_window_bounds(self, x, y) -> bool:
        """True when (x, y) lies on an open side window."""
        if self.is_left_window_open:
            return 0 <= x <= 300 and 150 <= y <= 650
        if self.is_right_window_open:
            return WIDTH - 300 <= x <= WIDTH and 150 <= y <= 650
        return False

    def edge_case_states(self, x, y) -> None:
        if self.current_state is MenuState.BUILDING_INFO and not self.is_in_window_bounds(x, y):
            self.current_state = MenuState.DEFAULT
        if self.current_state is MenuState.PLACING_BUILDING:
            self.prev_state = self.current_state = MenuState.PLACING_BUILDING_TEST

    def building_checks(self) -> None:
        """Cancel or complete the placement of a building."""
        placing_test = MenuState.PLACING_BUILDING_TEST
        if (self.prev_state is placing_test and self.current_state is not placing_test
                and self.current_state is not MenuState.PLACING_BUILDING):
            self.building_list.placing = False

        if self.current_state is placing_test:
            if self.building_list.check_placing_bounds(self.new_building):
                log.info("Cannot place in this location")
            else:
                log.info("Placing Building")
                self.building_list.update(self.new_building, self.player)
                self.building_list.placing = False
                self.current_state = MenuState.BUILD

    def iterate_buildings(self, x, y) -> None:
        """Select the building under the cursor unless the click is on a window."""
        if self.is_in_window_bounds(x, y):
            return
        self.selected_building = self.building_list.building_at(self.current_col, self.current_row)
        if self.selected_building is not None:
            self.prev_selected_building = self.selected_building
            if self.current_state is not MenuState.PLACING_BUILDING_TEST:
                self.current_state = MenuState.BUILDING_INFO

    def iterate_entities(self, x, y) -> None:
        """Select the unit under the cursor, or deselect on an empty tile."""
        if self.is_in_window_bounds(x, y):
            return
        clicked = self.player.entity_in_tile(self.current_row, self.current_col)
        if clicked is not None:
            self.selected_entity = clicked
            self.current_state = MenuState.ENTITY_INFO
        elif self.selected_entity is not None:
            self.selected_entity = None
            self.current_state = MenuState.DEFAULT

    def iterate_buttons(self, x, y) -> None:
        """Click every visible button under (x, y); start placing if a build button was hit."""
        for index, button in enumerate(self.buttons):
            if button.is_in_bounds(x, y) and button.visible:
                button.on_click()
                self.button_index = index
        if self.current_state is MenuState.PLACING_BUILDING and self.button_index is not None:
            placeholder = list(self.buttons)[self.button_index]
            if isinstance(placeholder, BuildButton):
                self.new_building_placeholder = placeholder
                self.new_building = placeholder.building
                self.building_list.current_building = self.new_building
                self.building_list.placing = True

    def move_entity(self, x, y) -> None:
        """Move the selected unit to the cursor tile, or attack the unit there."""
        if self.is_in_window_bounds(x, y) or self.selected_entity is None:
            return
        selected = self.selected_entity
        clicked = self.player.entity_in_tile(self.current_row, self.current_col)
        if clicked is None:
            self.player.update_entity_position(selected, self.current_row, self.current_col)
        elif clicked is not selected:
            log.info("Attack! You dealt %d damage, defender dealt %d damage.",
                     selected.atk, clicked.defense)
            clicked.lose_hp(selected.atk)
            selected.lose_hp(clicked.defense)
            if clicked.current_hp <= 0:
                self.tile_map.set_occupy_status(clicked.row, clicked.col, TileMap.NORMAL)
                self.player.remove_entity(clicked)

    def update(self, left_clicked, right_clicked, key_clicked, key, x, y) -> None:
        """Handle one frame of input at cursor (x, y), then advance unit training."""
        self.prev_state = self.current_state

        if left_clicked:
            self.edge_case_states(x, y)
            self.iterate_buildings(x, y)
            self.iterate_entities(x, y)
            self.iterate_buttons(x, y)
            self.building_checks()

        if right_clicked:
            self.move_entity(x, y)

        if key_clicked and key == "esc" and self.current_state in (
                MenuState.PLACING_BUILDING, MenuState.PLACING_BUILDING_TEST):
            self.building_list.placing = False
            self.current_state = MenuState.BUILD

        self.building_list.produce_units()

    # Drawing

    def static_render(self, surface) -> None:
        """Draw the fixed screen-space menu for the current state."""
        for button in self.buttons:
            button.visible = False
        self.game_background(surface)
        self.set_state(self.current_state, surface)
        for button in self.buttons:
            if button.visible:
                button.render(surface)

    def iso_render(self, surface) -> None:
        """Draw the visible buttons that live in map space."""
        for button in self.building_buttons:
            if button.visible:
                button.render(surface)