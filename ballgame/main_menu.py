"""The main menu: its layout and its two buttons."""

from __future__ import annotations

from .states import AppState, StateMachine
from .widgets import (
    BUTTON_FONT_SIZE,
    TITLE_FONT_SIZE,
    Interaction,
    Node,
    button_color,
    button_node,
    image_node,
    text_node,
)

MAIN_MENU = "MainMenu"
PLAY_BUTTON = "PlayButton"
QUIT_BUTTON = "QuitButton"

TITLE = "Bevy Ball Game"

MAIN_MENU_STYLE = {
    "flex_direction": "column",
    "justify_content": "center",
    "align_items": "center",
    "size": ("100%", "100%"),
    "gap": ("8px", "8px"),
}

BUTTON_STYLE = {
    "justify_content": "center",
    "align_items": "center",
    "size": ("200px", "80px"),
}

TITLE_STYLE = {
    "flex_direction": "row",
    "justify_content": "center",
    "align_items": "center",
    "size": ("300px", "120px"),
}

IMAGE_SIZE = 64.0


def build_main_menu() -> Node:
    """Build the title row and the Play and Quit buttons."""
    title = Node(
        style=dict(TITLE_STYLE),
        children=[
            image_node("sprites/ball_blue_large.png", IMAGE_SIZE),
            text_node(TITLE, TITLE_FONT_SIZE),
            image_node("sprites/ball_red_large.png", IMAGE_SIZE),
        ],
    )
    return Node(
        marker=MAIN_MENU,
        style=dict(MAIN_MENU_STYLE),
        children=[
            title,
            button_node("Play", PLAY_BUTTON, BUTTON_STYLE),
            button_node("Quit", QUIT_BUTTON, BUTTON_STYLE),
        ],
    )


def interact_with_play_button(
    button: Node, interaction: Interaction, app_state: StateMachine
) -> bool:
    """Recolour the Play button; a click requests the game state.

    Returns True when the button was clicked.
    """
    button.background = button_color(interaction)
    if interaction is Interaction.CLICKED:
        app_state.set(AppState.GAME)
        return True
    return False


def interact_with_quit_button(button: Node, interaction: Interaction) -> bool:
    """Recolour the Quit button; returns True when the app should exit."""
    button.background = button_color(interaction)
    return interaction is Interaction.CLICKED


# Button font size is shared with other menus; re-exported for renderers.
__all__ = [
    "BUTTON_FONT_SIZE",
    "MAIN_MENU",
    "PLAY_BUTTON",
    "QUIT_BUTTON",
    "build_main_menu",
    "interact_with_play_button",
    "interact_with_quit_button",
]