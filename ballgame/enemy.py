"""Spawning, moving, bouncing and confining enemies."""

from __future__ import annotations

from typing import Optional

from .timer import Timer
from .world import Enemy, RandomSource, Vec2, World

ENEMY_SIZE = 64.0
ENEMY_SPEED = 200.0
NUMBER_OF_ENEMIES = 4


def _bounds(world: World) -> tuple:
    half = ENEMY_SIZE / 2.0
    return half, world.window.width - half, half, world.window.height - half


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


def spawn_enemy(world: World, rng: RandomSource) -> Enemy:
    """Place one enemy at a random spot heading in a random direction."""
    position = world.random_position(rng)
    direction = Vec2(rng.random(), rng.random()).normalize()
    enemy = Enemy(position, direction)
    world.enemies.append(enemy)
    return enemy


def spawn_enemies(world: World, rng: RandomSource) -> None:
    """Place the starting wave of enemies."""
    for _ in range(NUMBER_OF_ENEMIES):
        spawn_enemy(world, rng)


def despawn_enemies(world: World) -> None:
    world.enemies.clear()


def enemy_movement(world: World, delta: float) -> None:
    """Advance every enemy along its direction."""
    for enemy in world.enemies:
        enemy.position = enemy.position + enemy.direction * (ENEMY_SPEED * delta)


def update_enemy_direction(world: World) -> None:
    """Bounce enemies that have passed an edge of the window."""
    x_min, x_max, y_min, y_max = _bounds(world)
    for enemy in world.enemies:
        pos = enemy.position
        dx, dy = enemy.direction.x, enemy.direction.y
        if pos.x < x_min or pos.x > x_max:
            dx = -dx
        if pos.y < y_min or pos.y > y_max:
            dy = -dy
        enemy.direction = Vec2(dx, dy)


def confine_enemy_movement(world: World) -> None:
    """Keep every enemy fully inside the window."""
    x_min, x_max, y_min, y_max = _bounds(world)
    for enemy in world.enemies:
        pos = enemy.position
        enemy.position = Vec2(_clamp(pos.x, x_min, x_max), _clamp(pos.y, y_min, y_max))


def spawn_enemies_over_time(
    world: World, timer: Timer, rng: RandomSource
) -> Optional[Enemy]:
    """Spawn one enemy in the tick the timer finished."""
    if timer.finished:
        return spawn_enemy(world, rng)
    return None