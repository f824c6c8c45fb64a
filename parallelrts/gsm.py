"""Game states and the stack that decides which one is active."""

from __future__ import annotations

from abc import ABC, abstractmethod


class State(ABC):
    """One screen of the game, driven by the state manager that owns it.

    ``update`` receives the collection of held pygame key codes and the mouse
    as an ``(x, y, buttons)`` triple, ``buttons`` being a bit mask with 1 for
    the left and 2 for the right button.
    """

    def __init__(self, manager) -> None:
        self.manager = manager

    @abstractmethod
    def render(self, surface) -> None:
        """Draw the state onto ``surface``."""

    @abstractmethod
    def update(self, keys_down, mouse) -> None:
        """Advance the state by one frame of input."""


class StateManager:
    """A stack of game states; only the top one is updated and drawn."""

    def __init__(self) -> None:
        self._states: list[State] = []

    def __len__(self) -> int:
        return len(self._states)

    def top(self) -> State:
        """The active state; IndexError when the stack is empty."""
        if not self._states:
            raise IndexError("no active state")
        return self._states[-1]

    def pop(self) -> State:
        """Remove and return the active state."""
        if not self._states:
            raise IndexError("no active state")
        return self._states.pop()

    def push(self, state: State) -> None:
        self._states.append(state)

    def set(self, state: State) -> State:
        """Replace the active state with ``state`` and return the old one."""
        previous = self.pop()
        self._states.append(state)
        return previous

    def render(self, surface) -> None:
        self.top().render(surface)

    def update(self, keys_down, mouse) -> None:
        self.top().update(keys_down, mouse)