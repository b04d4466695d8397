"""The player ball: spawning, steering, confinement and collisions."""

from __future__ import annotations

from typing import List

from .enemy import ENEMY_SIZE
from .keyboard import Key, Keyboard
from .score import Score
from .star import STAR_SIZE
from .states import GameOver
from .world import Player, Vec2, World

PLAYER_SPEED = 500.0
PLAYER_SIZE = 64.0

_STEERING = (
    ((Key.LEFT, Key.A), Vec2(-1.0, 0.0)),
    ((Key.RIGHT, Key.D), Vec2(1.0, 0.0)),
    ((Key.UP, Key.W), Vec2(0.0, 1.0)),
    ((Key.DOWN, Key.S), Vec2(0.0, -1.0)),
)


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


def spawn_player(world: World) -> Player:
    """Put the player in the middle of the window."""
    player = Player(Vec2(world.window.width / 2.0, world.window.height / 2.0))
    world.player = player
    return player


def despawn_player(world: World) -> None:
    world.player = None


def player_movement(world: World, keyboard: Keyboard, delta: float) -> None:
    """Move the player at constant speed in the direction of the held keys."""
    player = world.player
    if player is None:
        return
    direction = Vec2()
    for keys, step in _STEERING:
        if any(keyboard.pressed(key) for key in keys):
            direction = direction + step
    if direction.length() > 0.0:
        direction = direction.normalize()
    player.position = player.position + direction * (PLAYER_SPEED * delta)


def confine_player_movement(world: World) -> None:
    """Keep the player fully inside the window."""
    player = world.player
    if player is None:
        return
    half = PLAYER_SIZE / 2.0
    pos = player.position
    player.position = Vec2(
        _clamp(pos.x, half, world.window.width - half),
        _clamp(pos.y, half, world.window.height - half),
    )


def enemy_hit_player(world: World, score: Score) -> List[GameOver]:
    """Remove the player if an enemy touches it; one event per touching enemy."""
    player = world.player
    if player is None:
        return []
    reach = PLAYER_SIZE / 2.0 + ENEMY_SIZE / 2.0
    events: List[GameOver] = []
    for enemy in world.enemies:
        if player.position.distance(enemy.position) < reach:
            print("Enemy hit player! Game Over!")
            world.player = None
            events.append(GameOver(score=score.value))
    return events


def player_hit_star(world: World, score: Score) -> int:
    """Collect every star the player touches; return how many were collected."""
    player = world.player
    if player is None:
        return 0
    reach = PLAYER_SIZE / 2.0 + STAR_SIZE / 2.0
    kept = []
    collected = 0
    for star in world.stars:
        if player.position.distance(star.position) < reach:
            print("Player hit star!")
            score.add_point()
            collected += 1
        else:
            kept.append(star)
    world.stars[:] = kept
    return collected