"""Keyboard, mouse, cursor and window-size state fed by window events."""

from __future__ import annotations

from enum import IntEnum
from typing import List

__all__ = ["KEY_LAST", "MOUSE_BUTTON_LAST", "Button", "Action", "Input"]

KEY_LAST = 348
MOUSE_BUTTON_LAST = 7


class Button(IntEnum):
    """The state of a key or mouse button as seen by the current frame."""

    RELEASED = 0
    UNPRESSED = 1
    PRESSED = 2
    HELD = 3
    REPEAT = 4


class Action(IntEnum):
    """What happened to a key or button in an event."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


_ACTION_STATES = {
    Action.PRESS: Button.PRESSED,
    Action.RELEASE: Button.RELEASED,
    Action.REPEAT: Button.REPEAT,
}

# How a state moves on when a frame ends.
_NEXT_STATE = {
    Button.RELEASED: Button.UNPRESSED,
    Button.PRESSED: Button.HELD,
    Button.REPEAT: Button.HELD,
}


def _advance(states: List[Button]) -> None:
    states[:] = [_NEXT_STATE.get(state, state) for state in states]


def _lookup(states: List[Button], index: int, what: str) -> Button:
    if not 0 <= index < len(states):
        raise IndexError(f"{what} {index} is out of range")
    return states[index]


class Input:
    """Input state for one window.

    The cursor's y coordinate counts up from the bottom of the window.
    """

    def __init__(self):
        self._keys: List[Button] = [Button.RELEASED] * (KEY_LAST + 1)
        self._mouse: List[Button] = [Button.RELEASED] * (MOUSE_BUTTON_LAST + 1)
        self.cursor_x = 0.0
        self.cursor_y = 0.0
        self.scroll_x = 0.0
        self.scroll_y = 0.0
        self.resized = False
        self.width = 0
        self.height = 0

    def key_pressed(self, key: int) -> bool:
        """Return whether the key went down this frame."""
        return _lookup(self._keys, key, "key") is Button.PRESSED

    def key_down(self, key: int) -> bool:
        """Return whether the key is down at all."""
        return _lookup(self._keys, key, "key") in (
            Button.PRESSED,
            Button.HELD,
            Button.REPEAT,
        )

    def mouse_button(self, button: int) -> Button:
        """Return the state of a mouse button."""
        return _lookup(self._mouse, button, "mouse button")

    def key_event(self, key: int, scancode: int, action: int, mods: int) -> None:
        """Record a key event; keys out of range are ignored."""
        if 0 <= key <= KEY_LAST and action in _ACTION_STATES:
            self._keys[key] = _ACTION_STATES[Action(action)]

    def mouse_button_event(self, button: int, action: int, mods: int) -> None:
        """Record a mouse button event; buttons out of range are ignored."""
        if 0 <= button <= MOUSE_BUTTON_LAST and action in _ACTION_STATES:
            self._mouse[button] = _ACTION_STATES[Action(action)]

    def cursor_moved(self, x: float, y: float) -> None:
        """Record a cursor position given from the top of the window."""
        self.cursor_x = x
        self.cursor_y = self.height - y

    def scrolled(self, x: float, y: float) -> None:
        self.scroll_x = x
        self.scroll_y = y

    def resize(self, width: int, height: int) -> None:
        """Record a new window size and flag it for this frame."""
        self.resized = True
        self.width = width
        self.height = height

    def update(self) -> None:
        """End the frame: clear one-frame flags and move key states on."""
        self.resized = False
        self.scroll_x = 0.0
        self.scroll_y = 0.0
        _advance(self._keys)
        _advance(self._mouse)