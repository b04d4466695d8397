import pytest

from ballgame.states import AppState, GameOver, SimulationState, StateMachine


def test_defaults():
    assert AppState.default() is AppState.MAIN_MENU
    assert SimulationState.default() is SimulationState.RUNNING


def test_set_does_not_change_current_until_apply():
    machine = StateMachine(AppState.MAIN_MENU)
    machine.set(AppState.GAME)
    assert machine.current is AppState.MAIN_MENU
    assert machine.pending is AppState.GAME


def test_apply_returns_transition_and_clears_pending():
    machine = StateMachine(AppState.MAIN_MENU)
    machine.set(AppState.GAME)
    assert machine.apply() == (AppState.MAIN_MENU, AppState.GAME)
    assert machine.current is AppState.GAME
    assert machine.pending is None


def test_apply_without_request_returns_none():
    machine = StateMachine(SimulationState.RUNNING)
    assert machine.apply() is None
    assert machine.current is SimulationState.RUNNING


def test_later_request_replaces_earlier():
    machine = StateMachine(AppState.MAIN_MENU)
    machine.set(AppState.GAME)
    machine.set(AppState.GAME_OVER)
    assert machine.apply() == (AppState.MAIN_MENU, AppState.GAME_OVER)


def test_reentering_same_state_is_a_transition():
    machine = StateMachine(AppState.GAME)
    machine.set(AppState.GAME)
    assert machine.apply() == (AppState.GAME, AppState.GAME)


def test_wrong_state_type_rejected():
    machine = StateMachine(AppState.MAIN_MENU)
    with pytest.raises(TypeError):
        machine.set(SimulationState.PAUSED)


def test_game_over_carries_score():
    event = GameOver(score=7)
    assert event.score == 7
    assert event == GameOver(7)