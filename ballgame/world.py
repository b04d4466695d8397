"""Vectors, the window and the entities that live in the game world."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Protocol


class RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass(frozen=True)
class Vec2:
    """A 2-D vector in window coordinates (origin bottom-left, y up)."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vec2":
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> "Vec2":
        """Return the unit vector in the same direction."""
        length = self.length()
        if length == 0 or not math.isfinite(length):
            raise ValueError("cannot normalize a zero-length vector")
        return Vec2(self.x / length, self.y / length)

    def distance(self, other: "Vec2") -> float:
        return (self - other).length()


@dataclass(frozen=True)
class Window:
    """The size of the play area in pixels."""

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("window size must not be negative")


@dataclass
class Enemy:
    """A red ball bouncing around in ``direction``."""

    position: Vec2
    direction: Vec2


@dataclass
class Player:
    """The blue ball the user steers."""

    position: Vec2


@dataclass
class Star:
    """A collectible worth one point."""

    position: Vec2


@dataclass
class World:
    """Everything that exists while a game is on."""

    window: Window
    player: Optional[Player] = None
    enemies: List[Enemy] = field(default_factory=list)
    stars: List[Star] = field(default_factory=list)

    def random_position(self, rng: RandomSource) -> Vec2:
        """A uniformly random point inside the window."""
        x = rng.random() * self.window.width
        y = rng.random() * self.window.height
        return Vec2(x, y)