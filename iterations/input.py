"""Per-frame keyboard state with pressed and released edge detection."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import IntEnum

KeyboardSource = Callable[[], Sequence[bool]]


class Scancode(IntEnum):
    """Physical key positions, numbered as the keyboard state array is indexed."""

    A = 4
    D = 7
    S = 22
    W = 26
    RETURN = 40
    ESCAPE = 41
    RIGHT = 79
    LEFT = 80
    DOWN = 81
    UP = 82


def _pygame_keyboard_state() -> tuple[bool, ...]:
    import pygame

    # Iterating the wrapper yields the raw array, indexed by scancode.
    return tuple(bool(pressed) for pressed in pygame.key.get_pressed())


class InputManager:
    """Tracks which keys are held this frame and which were held the frame before.

    Call ``begin_frame`` once per frame after events have been pumped, then
    query the key state anywhere during that frame.
    """

    def __init__(self, source: KeyboardSource | None = None) -> None:
        self._source = source or _pygame_keyboard_state
        self._current = tuple(bool(pressed) for pressed in self._source())
        self._key_count = len(self._current)
        self._previous = self._current

    @property
    def key_count(self) -> int:
        """Number of keys tracked, fixed when the manager is created."""
        return self._key_count

    def begin_frame(self) -> None:
        """Take a new snapshot of the keyboard, keeping the last one as previous."""
        self._previous = self._current
        state = [bool(pressed) for pressed in self._source()[: self._key_count]]
        state.extend([False] * (self._key_count - len(state)))
        self._current = tuple(state)

    def _in_range(self, key: int) -> bool:
        return 0 <= key < self._key_count

    def is_key_down(self, key: int) -> bool:
        """True every frame the key is held."""
        return self._in_range(key) and self._current[key]

    def is_key_just_pressed(self, key: int) -> bool:
        """True only on the first frame the key is held."""
        return self._in_range(key) and self._current[key] and not self._previous[key]

    def is_key_just_released(self, key: int) -> bool:
        """True only on the frame the key stops being held."""
        return self._in_range(key) and not self._current[key] and self._previous[key]