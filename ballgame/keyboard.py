"""Keyboard state with per-frame press tracking."""

from __future__ import annotations

from enum import Enum
from typing import Set


class Key(Enum):
    """Keys the game reacts to."""

    G = "g"
    M = "m"
    ESCAPE = "escape"
    SPACE = "space"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    A = "a"
    D = "d"
    W = "w"
    S = "s"


class Keyboard:
    """Tracks which keys are held and which went down during this frame."""

    def __init__(self) -> None:
        self._held: Set[Key] = set()
        self._just: Set[Key] = set()

    def press(self, key: Key) -> None:
        if key not in self._held:
            self._just.add(key)
        self._held.add(key)

    def release(self, key: Key) -> None:
        self._held.discard(key)

    def pressed(self, key: Key) -> bool:
        """True while ``key`` is held down."""
        return key in self._held

    def just_pressed(self, key: Key) -> bool:
        """True only in the frame ``key`` went down."""
        return key in self._just

    def end_frame(self) -> None:
        """Forget this frame's fresh presses; held keys stay held."""
        self._just.clear()