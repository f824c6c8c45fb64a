"""Turns held mouse buttons and keys into single clicks and presses."""

from __future__ import annotations

import pygame

LEFT_BUTTON = 1
RIGHT_BUTTON = 2


class InputHandler:
    """Reports a click on the frame a mouse button is released.

    ``keys_down`` is a collection of pygame key codes currently held and
    ``mouse_buttons`` a bit mask: 1 for the left button, 2 for the right.
    """

    def __init__(self) -> None:
        self._mouse = 0
        self._key_state = ""
        self.left_click = False
        self.right_click = False
        self.key_click = False
        self.key_pressed = ""

    def update(self, keys_down, mouse_buttons) -> None:
        previous_mouse = self._mouse
        if mouse_buttons & LEFT_BUTTON:
            self._mouse = 1
        elif mouse_buttons & RIGHT_BUTTON:
            self._mouse = 2
        else:
            self._mouse = 0

        changed = previous_mouse != self._mouse
        if changed and previous_mouse == 1:
            self.left_click = True
        elif changed and previous_mouse == 2:
            self.right_click = True
        else:
            self.left_click = self.right_click = False

        previous_key = self._key_state
        # Pressing B records the key, but only escape registers as a click.
        if pygame.K_b in keys_down and previous_key != "b":
            self.key_pressed = "b"

        self._key_state = "esc" if pygame.K_ESCAPE in keys_down else " "
        if previous_key != self._key_state and self._key_state == "esc":
            self.key_pressed = "esc"
            self.key_click = True
        else:
            self.key_click = False