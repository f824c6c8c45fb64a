"""Sprite-sheet animations and named sets of them."""

from __future__ import annotations

import pygame


class Animation:
    """Frames laid side by side on a sprite sheet, advanced every ``delay`` updates."""

    def __init__(self, image, frame_width: int, frame_height: int, delay: int,
                 num_frames: int, x: int = 0, y: int = 0) -> None:
        self.image = image
        self.width = frame_width
        self.height = frame_height
        self.delay = delay
        self.num_frames = num_frames
        self.x = x
        self.y = y
        self.current_frame = 0
        self._frame_count = 0

    def update(self) -> None:
        """Advance the frame counter; a non-positive delay freezes the animation."""
        if self.delay <= 0:
            return
        self._frame_count += 1
        if self._frame_count >= self.delay:
            self._frame_count = 0
            self.current_frame += 1
            if self.current_frame >= self.num_frames:
                self.current_frame = 0

    def render(self, surface, x, y) -> None:
        """Draw the current frame at (x, y)."""
        area = pygame.Rect(self.x + self.current_frame * self.width, self.y, self.width, self.height)
        surface.blit(self.image, (x, y), area)


class AnimationSet:
    """Animations stored by name, one of which is current."""

    def __init__(self) -> None:
        self._animations: dict[str, Animation] = {}
        self.current: Animation | None = None

    def add(self, animation: Animation, key: str) -> None:
        self._animations[key] = animation

    def select(self, key: str) -> Animation:
        """Make the named animation current and return it."""
        try:
            self.current = self._animations[key]
        except KeyError:
            raise KeyError(f"no animation named {key!r}") from None
        return self.current