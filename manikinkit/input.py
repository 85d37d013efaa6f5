"""Keyboard, special-key and mouse state tracking."""

from __future__ import annotations

from enum import IntEnum

from .geometry import Point2D

KEY_COUNT = 256
MOUSE_BUTTON_COUNT = 3


class KeyState(IntEnum):
    DOWN = 0
    UP = 1


def _key_index(key: int | str) -> int:
    index = ord(key) if isinstance(key, str) else int(key)
    if not 0 <= index < KEY_COUNT:
        raise IndexError(f"key {key!r} outside 0..{KEY_COUNT - 1}")
    return index


class InputManager:
    """Holds the up/down state of keys, special keys and mouse buttons."""

    def __init__(self) -> None:
        self.keys = [KeyState.UP] * KEY_COUNT
        self.special_keys = [KeyState.UP] * KEY_COUNT
        self.mouse = [KeyState.UP] * MOUSE_BUTTON_COUNT
        self.mouse_location = Point2D()

    def press_key(self, key: int | str) -> bool:
        """Mark a key down; return whether it was already down."""
        index = _key_index(key)
        was_down = self.keys[index] is KeyState.DOWN
        self.keys[index] = KeyState.DOWN
        return was_down

    def release_key(self, key: int | str) -> bool:
        """Mark a key up; return whether it had been down."""
        index = _key_index(key)
        was_down = self.keys[index] is KeyState.DOWN
        self.keys[index] = KeyState.UP
        return was_down

    def is_key_down(self, key: int | str) -> bool:
        return self.keys[_key_index(key)] is KeyState.DOWN

    def press_special(self, key: int) -> bool:
        """Mark a special key down; return whether it was already down."""
        index = _key_index(key)
        was_down = self.special_keys[index] is KeyState.DOWN
        self.special_keys[index] = KeyState.DOWN
        return was_down

    def release_special(self, key: int) -> bool:
        """Mark a special key up; return whether it had been down."""
        index = _key_index(key)
        was_down = self.special_keys[index] is KeyState.DOWN
        self.special_keys[index] = KeyState.UP
        return was_down

    def is_special_down(self, key: int) -> bool:
        return self.special_keys[_key_index(key)] is KeyState.DOWN

    def set_mouse_button(self, button: int, state: KeyState) -> KeyState:
        """Set a mouse button's state and return the previous one."""
        if not 0 <= button < MOUSE_BUTTON_COUNT:
            raise IndexError(f"mouse button {button} outside 0..{MOUSE_BUTTON_COUNT - 1}")
        previous = self.mouse[button]
        self.mouse[button] = KeyState(state)
        return previous

    def move_mouse(self, x: float, y: float) -> None:
        self.mouse_location = Point2D(float(x), float(y))