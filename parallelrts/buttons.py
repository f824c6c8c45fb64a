"""Menu states and the clickable buttons of the in-game menu."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto

import pygame


class MenuState(Enum):
    DEFAULT = auto()
    OVERVIEW = auto()
    BUILD = auto()
    ACTION = auto()
    RESET = auto()
    INVENTORY = auto()
    PLACING_BUILDING = auto()
    PLACING_BUILDING_TEST = auto()
    BUILDING_INFO = auto()
    PRODUCTION = auto()
    ENTITY_INFO = auto()


class Button(ABC):
    """A rectangle from (x1, y1) to (x2, y2) that leads to ``return_state``.

    A label can be shown by setting ``font``, ``font_color`` and ``text``.
    """

    def __init__(self, x1, y1, x2, y2, image, visible=False, return_state=MenuState.DEFAULT) -> None:
        self.x1, self.y1, self.x2, self.y2 = x1, y1, x2, y2
        self.image = image
        self.visible = visible
        self.return_state = return_state
        self.font = None
        self.font_color = (0, 0, 0)
        self.text = ""
        self.font_x, self.font_y = x1, y1

    def _draw_text(self, surface) -> None:
        if self.text and self.font is not None:
            rendered = self.font.render(self.text, True, self.font_color)
            surface.blit(rendered, (int(self.font_x), int(self.font_y)))

    def _draw_inset(self, surface, image, width, height) -> None:
        scaled = pygame.transform.scale(image, (int(width), int(height)))
        surface.blit(scaled, (int(self.x1 + 4), int(self.y1 + 4)))

    def render(self, surface) -> None:
        """Draw the button's image and its text."""
        surface.blit(self.image, (int(self.x1), int(self.y1)))
        self._draw_text(surface)

    @abstractmethod
    def on_click(self) -> None:
        """Act on a click."""

    def is_in_bounds(self, x, y) -> bool:
        """True when (x, y) lies strictly inside the button."""
        return self.x1 < x < self.x2 and self.y1 < y < self.y2


class MenuButton(Button):
    """Switches the menu to its state."""

    def __init__(self, x1, y1, x2, y2, image, visible, return_state, menu) -> None:
        super().__init__(x1, y1, x2, y2, image, visible, return_state)
        self.menu = menu

    def render(self, surface) -> None:
        super().render(surface)

    def on_click(self) -> None:
        self.menu.set_state(self.return_state)


class BuildButton(Button):
    """Buys a building and starts placing it."""

    def __init__(self, x1, y1, x2, y2, image, visible, target, player, menu) -> None:
        super().__init__(x1, y1, x2, y2, image, visible, MenuState.PLACING_BUILDING)
        self.target = target
        self.player = player
        self.menu = menu

    @property
    def building(self):
        """The template building this button places."""
        return self.target

    def render(self, surface) -> None:
        surface.blit(self.image, (int(self.x1), int(self.y1)))
        self._draw_inset(surface, self.target.image, self.x2 - self.x1 - 8, self.y2 - self.y1 - 8)
        self._draw_text(surface)

    def on_click(self) -> None:
        self.player.buy_building(self.target)
        self.menu.set_state(self.return_state)


class UnitButton(Button):
    """Buys a copy of a unit and queues it at the selected building."""

    def __init__(self, x1, y1, x2, y2, image, visible, target, player, menu) -> None:
        super().__init__(x1, y1, x2, y2, image, visible, MenuState.BUILDING_INFO)
        self.target = target
        self.player = player
        self.menu = menu

    def render(self, surface) -> None:
        surface.blit(self.image, (int(self.x1), int(self.y1)))
        if self.target.image is not None:
            self._draw_inset(surface, self.target.image, self.x2 - self.x1 - 8, self.y2 - self.y1 - 8)

    def on_click(self) -> None:
        entity = self.target.clone()
        if self.player.buy_entity(entity):
            self.menu.prev_selected_building.add_unit(entity)
        self.menu.set_state(self.return_state)


class UnitQueueButton(Button):
    """Shows the unit at position ``num`` of a training queue and cancels it."""

    def __init__(self, x1, y1, x2, y2, image, visible, player, menu, num) -> None:
        super().__init__(x1, y1, x2, y2, image, visible, MenuState.BUILDING_INFO)
        self.player = player
        self.menu = menu
        self.num = num
        self.entity = None

    def render(self, surface) -> None:
        surface.blit(self.image, (int(self.x1), int(self.y1)))
        if self.entity is not None and self.entity.image is not None:
            self._draw_inset(surface, self.entity.image, 42, 42)

    def on_click(self) -> None:
        self.menu.prev_selected_building.cancel_unit(self.num)
        self.menu.set_state(self.return_state)


class ButtonManager:
    """An ordered collection of buttons."""

    def __init__(self) -> None:
        self._buttons: list[Button] = []

    def add_button(self, button: Button) -> None:
        self._buttons.append(button)

    def clear_buttons(self) -> None:
        self._buttons.clear()

    def __len__(self) -> int:
        return len(self._buttons)

    def __iter__(self):
        return iter(list(self._buttons))