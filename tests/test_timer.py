import pytest

from ballgame.timer import (
    ENEMY_SPAWN_TIME,
    STAR_SPAWN_TIME,
    Timer,
    TimerMode,
    enemy_spawn_timer,
    star_spawn_timer,
)


def test_spawn_timer_factories():
    enemy = enemy_spawn_timer()
    star = star_spawn_timer()
    assert enemy.duration == ENEMY_SPAWN_TIME == 5.0
    assert star.duration == STAR_SPAWN_TIME == 1.0
    assert enemy.mode is TimerMode.REPEATING
    assert star.mode is TimerMode.REPEATING


def test_tick_below_duration_not_finished():
    timer = Timer(5.0, TimerMode.REPEATING)
    timer.tick(2.0)
    assert not timer.finished
    assert timer.elapsed == pytest.approx(2.0)


def test_repeating_timer_finishes_for_one_tick_and_wraps():
    timer = Timer(5.0, TimerMode.REPEATING)
    timer.tick(3.0).tick(3.0)
    assert timer.finished
    assert timer.times_finished_this_tick == 1
    assert 0.0 <= timer.elapsed < timer.duration
    timer.tick(0.5)
    assert not timer.finished


def test_repeating_counts_multiple_wraps():
    timer = Timer(1.0, TimerMode.REPEATING)
    timer.tick(3.5)
    assert timer.times_finished_this_tick == 3
    assert timer.elapsed == pytest.approx(0.5)


def test_once_timer_stays_finished_and_clamps():
    timer = Timer(2.0)
    timer.tick(5.0)
    assert timer.finished
    assert timer.elapsed == timer.duration
    timer.tick(1.0)
    assert timer.finished
    assert timer.times_finished_this_tick == 0


def test_negative_values_rejected():
    with pytest.raises(ValueError):
        Timer(-1.0)
    with pytest.raises(ValueError):
        Timer(1.0).tick(-0.1)


def test_reset_clears_progress():
    timer = Timer(1.0)
    timer.tick(1.0)
    timer.reset()
    assert not timer.finished
    assert timer.elapsed == 0.0