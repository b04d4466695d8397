"""The whole game: states, world, menus and the per-frame update."""

from __future__ import annotations

import random
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from .enemy import (
    confine_enemy_movement,
    despawn_enemies,
    enemy_movement,
    spawn_enemies,
    spawn_enemies_over_time,
    update_enemy_direction,
)
from .game_over_menu import (
    MAIN_MENU_BUTTON as GAME_OVER_MAIN_MENU_BUTTON,
    QUIT_BUTTON as GAME_OVER_QUIT_BUTTON,
    RESTART_BUTTON,
    build_game_over_menu,
    interact_with_main_menu_button as game_over_main_menu_click,
    interact_with_quit_button as game_over_quit_click,
    interact_with_restart_button,
    update_final_score_text,
)
from .hud import build_hud, update_enemy_text, update_score_text
from .keyboard import Keyboard
from .main_menu import (
    PLAY_BUTTON,
    QUIT_BUTTON as MAIN_MENU_QUIT_BUTTON,
    build_main_menu,
    interact_with_play_button,
    interact_with_quit_button as main_menu_quit_click,
)
from .pause_menu import (
    MAIN_MENU_BUTTON as PAUSE_MAIN_MENU_BUTTON,
    QUIT_BUTTON as PAUSE_QUIT_BUTTON,
    RESUME_BUTTON,
    build_pause_menu,
    interact_with_main_menu_button as pause_main_menu_click,
    interact_with_quit_button as pause_quit_click,
    interact_with_resume_button,
)
from .player import (
    confine_player_movement,
    despawn_player,
    enemy_hit_player,
    player_hit_star,
    player_movement,
    spawn_player,
)
from .score import HighScores, Score, high_scores_updated, update_high_scores, update_score
from .star import despawn_stars, spawn_stars, spawn_stars_over_time
from .states import AppState, GameOver, SimulationState, StateMachine
from .timer import enemy_spawn_timer, star_spawn_timer
from .transitions import (
    exit_game,
    handle_game_over,
    pause_simulation,
    resume_simulation,
    toggle_simulation,
    transition_to_game_state,
    transition_to_main_menu_state,
)
from .widgets import Interaction, Node
from .world import RandomSource, Window, World

DEFAULT_WIDTH = 1280.0
DEFAULT_HEIGHT = 720.0

_Handler = Callable[[Node, Interaction], None]


class Game:
    """Runs the application states, the world and the menus frame by frame.

    State requests made during a frame take effect at the start of the next
    call to :meth:`update`, before any other work of that frame.
    """

    def __init__(
        self,
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.world = World(Window(width, height))
        self.rng: RandomSource = rng if rng is not None else random.Random()
        self.app_state: StateMachine = StateMachine(AppState.default())
        self.simulation_state: StateMachine = StateMachine(SimulationState.default())
        self.score: Optional[Score] = None
        self.high_scores = HighScores()
        self.enemy_timer = enemy_spawn_timer()
        self.star_timer = star_spawn_timer()
        self.main_menu: Optional[Node] = None
        self.hud: Optional[Node] = None
        self.pause_menu: Optional[Node] = None
        self.game_over_menu: Optional[Node] = None
        self.exit_requested = False
        self._events: List[GameOver] = []
        self._enter_app(self.app_state.current)

    # State transitions

    def _enter_app(self, state: AppState) -> None:
        if state is AppState.MAIN_MENU:
            self.main_menu = build_main_menu()
        elif state is AppState.GAME:
            pause_simulation(self.simulation_state)
            spawn_enemies(self.world, self.rng)
            spawn_player(self.world)
            self.score = Score()
            spawn_stars(self.world, self.rng)
            self.hud = build_hud()
        elif state is AppState.GAME_OVER:
            self.game_over_menu = build_game_over_menu()

    def _exit_app(self, state: AppState) -> None:
        if state is AppState.MAIN_MENU:
            self.main_menu = None
        elif state is AppState.GAME:
            despawn_enemies(self.world)
            despawn_player(self.world)
            self.score = None
            despawn_stars(self.world)
            self.hud = None
            resume_simulation(self.simulation_state)
        elif state is AppState.GAME_OVER:
            self.game_over_menu = None

    def _enter_simulation(self, state: SimulationState) -> None:
        if state is SimulationState.PAUSED:
            print("Spawning Pause Menu")
            self.pause_menu = build_pause_menu()

    def _exit_simulation(self, state: SimulationState) -> None:
        if state is SimulationState.PAUSED:
            self.pause_menu = None

    def _apply_transitions(self) -> None:
        transition = self.app_state.apply()
        if transition is not None:
            exited, entered = transition
            self._exit_app(exited)
            self._enter_app(entered)
        transition = self.simulation_state.apply()
        if transition is not None:
            exited, entered = transition
            self._exit_simulation(exited)
            self._enter_simulation(entered)

    # Frame

    def _simulate(self, delta: float, keyboard: Keyboard) -> None:
        score = self.score
        if score is None:
            raise RuntimeError("the game is running without a score")
        world = self.world
        player_movement(world, keyboard, delta)
        confine_player_movement(world)
        self._events.extend(enemy_hit_player(world, score))
        player_hit_star(world, score)
        enemy_movement(world, delta)
        update_enemy_direction(world)
        confine_enemy_movement(world)
        self.enemy_timer.tick(delta)
        spawn_enemies_over_time(world, self.enemy_timer, self.rng)
        self.star_timer.tick(delta)
        spawn_stars_over_time(world, self.star_timer, self.rng)

    def update(self, delta: float, keyboard: Keyboard) -> None:
        """Advance one frame of ``delta`` seconds with the given key state.

        The caller ends the keyboard's frame afterwards.
        """
        if delta < 0:
            raise ValueError("delta must not be negative")
        previous_events, self._events = self._events, []
        self._apply_transitions()

        transition_to_game_state(keyboard, self.app_state)
        transition_to_main_menu_state(keyboard, self.app_state)
        if exit_game(keyboard):
            self.exit_requested = True

        app = self.app_state.current
        if app is AppState.GAME:
            toggle_simulation(keyboard, self.simulation_state)
            if self.simulation_state.current is SimulationState.RUNNING:
                self._simulate(delta, keyboard)

        handle_game_over(self._events, self.app_state)
        update_high_scores(self._events, self.high_scores)
        high_scores_updated(self.high_scores)

        if app is AppState.GAME:
            if self.score is not None:
                update_score(self.score)
                if self.hud is not None:
                    update_score_text(self.hud, self.score)
            if self.hud is not None:
                update_enemy_text(self.hud, self.world)
        elif app is AppState.GAME_OVER and self.game_over_menu is not None:
            update_final_score_text(self.game_over_menu, previous_events + self._events)

    # Menus

    def _request_exit(self, clicked: bool) -> None:
        if clicked:
            self.exit_requested = True

    def _active_buttons(self) -> Iterator[Tuple[Node, Dict[str, _Handler]]]:
        if self.app_state.current is AppState.MAIN_MENU and self.main_menu is not None:
            yield self.main_menu, {
                PLAY_BUTTON: lambda b, i: interact_with_play_button(b, i, self.app_state),
                MAIN_MENU_QUIT_BUTTON: lambda b, i: self._request_exit(
                    main_menu_quit_click(b, i)
                ),
            }
        if (
            self.simulation_state.current is SimulationState.PAUSED
            and self.pause_menu is not None
        ):
            yield self.pause_menu, {
                RESUME_BUTTON: lambda b, i: interact_with_resume_button(
                    b, i, self.simulation_state
                ),
                PAUSE_MAIN_MENU_BUTTON: lambda b, i: pause_main_menu_click(
                    b, i, self.app_state
                ),
                PAUSE_QUIT_BUTTON: lambda b, i: self._request_exit(pause_quit_click(b, i)),
            }
        if self.app_state.current is AppState.GAME_OVER and self.game_over_menu is not None:
            yield self.game_over_menu, {
                RESTART_BUTTON: lambda b, i: interact_with_restart_button(
                    b, i, self.app_state
                ),
                GAME_OVER_MAIN_MENU_BUTTON: lambda b, i: game_over_main_menu_click(
                    b, i, self.app_state
                ),
                GAME_OVER_QUIT_BUTTON: lambda b, i: self._request_exit(
                    game_over_quit_click(b, i)
                ),
            }

    def interact(self, marker: str, interaction: Interaction) -> bool:
        """Apply a pointer interaction to the buttons marked ``marker``.

        Only buttons of menus that currently respond are affected. Returns
        True if any such button was found.
        """
        handled = False
        for menu, handlers in self._active_buttons():
            handler = handlers.get(marker)
            if handler is None:
                continue
            for button in menu.find_all(marker):
                handler(button, interaction)
                handled = True
        return handled

    def active_menu(self) -> Optional[Node]:
        """The top-most menu on screen, or None during play."""
        for menu in (self.game_over_menu, self.pause_menu, self.main_menu):
            if menu is not None:
                return menu
        return None