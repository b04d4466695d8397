"""Spawning and clearing the stars the player collects."""

from __future__ import annotations

from typing import Optional

from .timer import Timer
from .world import RandomSource, Star, World

NUMBER_OF_STARS = 10
STAR_SIZE = 30.0


def spawn_star(world: World, rng: RandomSource) -> Star:
    """Place one star at a random spot."""
    star = Star(world.random_position(rng))
    world.stars.append(star)
    return star


def spawn_stars(world: World, rng: RandomSource) -> None:
    """Place the starting set of stars."""
    for _ in range(NUMBER_OF_STARS):
        spawn_star(world, rng)


def despawn_stars(world: World) -> None:
    world.stars.clear()


def spawn_stars_over_time(
    world: World, timer: Timer, rng: RandomSource
) -> Optional[Star]:
    """Spawn one star in the tick the timer finished."""
    if timer.finished:
        return spawn_star(world, rng)
    return None