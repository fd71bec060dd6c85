"""Edge-triggered keyboard queries on top of a raw key-state source."""

from __future__ import annotations

from typing import Callable

import pygame

KeyQuery = Callable[[int], bool]

_TOGGLE_MODS = {
    pygame.K_CAPSLOCK: pygame.KMOD_CAPS,
    pygame.K_NUMLOCK: pygame.KMOD_NUM,
}


def _pygame_pressed(key: int) -> bool:
    return bool(pygame.key.get_pressed()[key])


def _pygame_toggled(key: int) -> bool:
    mod = _TOGGLE_MODS.get(key)
    return bool(mod and pygame.key.get_mods() & mod)


class KeyManager:
    """Tracks which keys were down so presses and releases fire once."""

    def __init__(self, is_pressed: KeyQuery | None = None, is_toggled: KeyQuery | None = None) -> None:
        self._is_pressed = is_pressed or _pygame_pressed
        self._is_toggled = is_toggled or _pygame_toggled
        self._key_down: set[int] = set()

    def reset(self) -> None:
        """Forget every remembered key state."""
        self._key_down.clear()

    def is_once_key_up(self, key: int) -> bool:
        """True on the first query after ``key`` is released."""
        if not self._is_pressed(key):
            if key in self._key_down:
                self._key_down.discard(key)
                return True
        else:
            self._key_down.add(key)
        return False

    def is_once_key_down(self, key: int) -> bool:
        """True on the first query after ``key`` is pressed."""
        if self._is_pressed(key):
            if key not in self._key_down:
                self._key_down.add(key)
                return True
        else:
            self._key_down.discard(key)
        return False

    def is_stay_key_down(self, key: int) -> bool:
        """True while ``key`` is held."""
        return bool(self._is_pressed(key))

    def is_toggle_key(self, key: int) -> bool:
        """True while ``key`` is toggled on."""
        return bool(self._is_toggled(key))