"""Keyboard- and event-driven changes of application and simulation state."""

from __future__ import annotations

from typing import Iterable

from .keyboard import Key, Keyboard
from .states import AppState, GameOver, SimulationState, StateMachine


def transition_to_game_state(keyboard: Keyboard, app_state: StateMachine) -> bool:
    """On G, request the game state unless already in it."""
    if keyboard.just_pressed(Key.G) and app_state.current is not AppState.GAME:
        app_state.set(AppState.GAME)
        print("Entered AppState::Game")
        return True
    return False


def transition_to_main_menu_state(keyboard: Keyboard, app_state: StateMachine) -> bool:
    """On M, request the main menu unless already in it."""
    if keyboard.just_pressed(Key.M) and app_state.current is not AppState.MAIN_MENU:
        app_state.set(AppState.MAIN_MENU)
        print("Entered AppState::MainMenu")
        return True
    return False


def exit_game(keyboard: Keyboard) -> bool:
    """True when Escape was pressed this frame and the app should quit."""
    return keyboard.just_pressed(Key.ESCAPE)


def handle_game_over(events: Iterable[GameOver], app_state: StateMachine) -> None:
    """Report each final score and request the game-over state."""
    for event in events:
        print(f"Your final score is: {event.score}")
        app_state.set(AppState.GAME_OVER)
        print("Entered AppState::GameOver")


def pause_simulation(simulation_state: StateMachine) -> None:
    simulation_state.set(SimulationState.PAUSED)


def resume_simulation(simulation_state: StateMachine) -> None:
    simulation_state.set(SimulationState.RUNNING)


def toggle_simulation(keyboard: Keyboard, simulation_state: StateMachine) -> None:
    """On Space, request the opposite of the current simulation state."""
    if not keyboard.just_pressed(Key.SPACE):
        return
    if simulation_state.current is SimulationState.RUNNING:
        simulation_state.set(SimulationState.PAUSED)
        print("Simulation Paused.")
    if simulation_state.current is SimulationState.PAUSED:
        simulation_state.set(SimulationState.RUNNING)
        print("Simulation Running.")