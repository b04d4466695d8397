"""The game-over menu: final score, Restart, Main Menu and Quit."""

from __future__ import annotations

from typing import Iterable, Optional

from .states import AppState, GameOver, StateMachine
from .widgets import (
    MENU_BACKGROUND_COLOR,
    TITLE_FONT_SIZE,
    Interaction,
    Node,
    button_color,
    button_node,
    text_node,
)

GAME_OVER_MENU = "GameOverMenu"
FINAL_SCORE_TEXT = "FinalScoreText"
RESTART_BUTTON = "RestartButton"
MAIN_MENU_BUTTON = "MainMenuButton"
QUIT_BUTTON = "QuitButton"

TITLE = "Game Over"
FINAL_SCORE_PROMPT = "Your final score was:"
FINAL_SCORE_FONT_SIZE = 48.0

# Drawn above the HUD and the pause menu.
GAME_OVER_MENU_Z_INDEX = 2

GAME_OVER_MENU_STYLE = {
    "position_type": "absolute",
    "display": "flex",
    "justify_content": "center",
    "align_items": "center",
    "size": ("100%", "100%"),
}

GAME_OVER_MENU_CONTAINER_STYLE = {
    "display": "flex",
    "flex_direction": "column",
    "justify_content": "center",
    "align_items": "center",
    "size": ("400px", "400px"),
    "gap": ("8px", "8px"),
}

BUTTON_STYLE = {
    "size": ("200px", "80px"),
    "justify_content": "center",
    "align_items": "center",
}


def build_game_over_menu() -> Node:
    """Build the overlay with its title, score line and three buttons."""
    container = Node(
        style=dict(GAME_OVER_MENU_CONTAINER_STYLE),
        background=MENU_BACKGROUND_COLOR,
        children=[
            text_node(TITLE, TITLE_FONT_SIZE),
            text_node(FINAL_SCORE_PROMPT, FINAL_SCORE_FONT_SIZE, marker=FINAL_SCORE_TEXT),
            button_node("Restart", RESTART_BUTTON, BUTTON_STYLE),
            button_node("Main Menu", MAIN_MENU_BUTTON, BUTTON_STYLE),
            button_node("Quit", QUIT_BUTTON, BUTTON_STYLE),
        ],
    )
    return Node(
        marker=GAME_OVER_MENU,
        style=dict(GAME_OVER_MENU_STYLE),
        z_index=GAME_OVER_MENU_Z_INDEX,
        children=[container],
    )


def interact_with_restart_button(
    button: Node, interaction: Interaction, app_state: StateMachine
) -> bool:
    """Recolour the Restart button; a click requests a new game.

    Returns True when the button was clicked.
    """
    button.background = button_color(interaction)
    if interaction is Interaction.CLICKED:
        app_state.set(AppState.GAME)
        return True
    return False


def interact_with_main_menu_button(
    button: Node, interaction: Interaction, app_state: StateMachine
) -> bool:
    """Recolour the Main Menu button; a click requests the main menu.

    Returns True when the button was clicked.
    """
    button.background = button_color(interaction)
    if interaction is Interaction.CLICKED:
        app_state.set(AppState.MAIN_MENU)
        return True
    return False


def interact_with_quit_button(button: Node, interaction: Interaction) -> bool:
    """Recolour the Quit button; returns True when the app should exit."""
    button.background = button_color(interaction)
    return interaction is Interaction.CLICKED


def update_final_score_text(menu: Node, events: Iterable[GameOver]) -> Optional[str]:
    """Show the score of each game-over event; the last one stays.

    Returns the text written last, or None if there were no events.
    """
    written: Optional[str] = None
    for event in events:
        written = f"Final Score: {event.score}"
        for node in menu.find_all(FINAL_SCORE_TEXT):
            node.text = written
    return written