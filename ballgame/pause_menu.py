"""The pause menu shown while the simulation is paused."""

from __future__ import annotations

from .states import AppState, SimulationState, StateMachine
from .widgets import (
    MENU_BACKGROUND_COLOR,
    TITLE_FONT_SIZE,
    Interaction,
    Node,
    button_color,
    button_node,
    text_node,
)

PAUSE_MENU = "PauseMenu"
RESUME_BUTTON = "ResumeButton"
MAIN_MENU_BUTTON = "MainMenuButton"
QUIT_BUTTON = "QuitButton"

TITLE = "Pause Menu"

# Drawn above the HUD.
PAUSE_MENU_Z_INDEX = 1

PAUSE_MENU_STYLE = {
    "position_type": "absolute",
    "display": "flex",
    "justify_content": "center",
    "align_items": "center",
    "size": ("100%", "100%"),
}

PAUSE_MENU_CONTAINER_STYLE = {
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


def build_pause_menu() -> Node:
    """Build the overlay with its title and the Resume, Main Menu and Quit buttons."""
    container = Node(
        style=dict(PAUSE_MENU_CONTAINER_STYLE),
        background=MENU_BACKGROUND_COLOR,
        children=[
            text_node(TITLE, TITLE_FONT_SIZE),
            button_node("Resume", RESUME_BUTTON, BUTTON_STYLE),
            button_node("Main Menu", MAIN_MENU_BUTTON, BUTTON_STYLE),
            button_node("Quit", QUIT_BUTTON, BUTTON_STYLE),
        ],
    )
    return Node(
        marker=PAUSE_MENU,
        style=dict(PAUSE_MENU_STYLE),
        z_index=PAUSE_MENU_Z_INDEX,
        children=[container],
    )


def interact_with_resume_button(
    button: Node, interaction: Interaction, simulation_state: StateMachine
) -> bool:
    """Recolour the Resume button; a click requests the running simulation.

    Returns True when the button was clicked.
    """
    button.background = button_color(interaction)
    if interaction is Interaction.CLICKED:
        simulation_state.set(SimulationState.RUNNING)
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