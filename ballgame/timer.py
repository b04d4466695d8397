"""Countdown timers used for spawning enemies and stars."""

from __future__ import annotations

from enum import Enum

ENEMY_SPAWN_TIME = 5.0
STAR_SPAWN_TIME = 1.0


class TimerMode(Enum):
    ONCE = "once"
    REPEATING = "repeating"


class Timer:
    """A timer that finishes once its elapsed time reaches its duration.

    A repeating timer wraps its elapsed time and reports ``finished`` only for
    the tick in which it wrapped. A one-shot timer stays finished.
    """

    def __init__(self, duration: float, mode: TimerMode = TimerMode.ONCE) -> None:
        if duration < 0:
            raise ValueError("duration must not be negative")
        self.duration = float(duration)
        self.mode = mode
        self.elapsed = 0.0
        self.finished = False
        self.times_finished_this_tick = 0

    @property
    def repeating(self) -> bool:
        return self.mode is TimerMode.REPEATING

    def tick(self, delta: float) -> "Timer":
        """Advance by ``delta`` seconds."""
        if delta < 0:
            raise ValueError("delta must not be negative")
        if not self.repeating and self.finished:
            self.times_finished_this_tick = 0
            return self
        self.elapsed += delta
        self.finished = self.elapsed >= self.duration
        if not self.finished:
            self.times_finished_this_tick = 0
        elif self.repeating:
            if self.duration > 0:
                self.times_finished_this_tick = int(self.elapsed // self.duration)
                self.elapsed %= self.duration
            else:
                self.times_finished_this_tick = 0
                self.elapsed = 0.0
        else:
            self.times_finished_this_tick = 1
            self.elapsed = self.duration
        return self

    def reset(self) -> None:
        self.elapsed = 0.0
        self.finished = False
        self.times_finished_this_tick = 0

    def __repr__(self) -> str:
        return (
            f"Timer(duration={self.duration}, mode={self.mode.name}, "
            f"elapsed={self.elapsed}, finished={self.finished})"
        )


def enemy_spawn_timer() -> Timer:
    """The repeating timer that paces enemy spawns."""
    return Timer(ENEMY_SPAWN_TIME, TimerMode.REPEATING)


def star_spawn_timer() -> Timer:
    """The repeating timer that paces star spawns."""
    return Timer(STAR_SPAWN_TIME, TimerMode.REPEATING)