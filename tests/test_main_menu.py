import pytest

from ballgame.main_menu import (
    MAIN_MENU,
    PLAY_BUTTON,
    QUIT_BUTTON,
    build_main_menu,
    interact_with_play_button,
    interact_with_quit_button,
)
from ballgame.states import AppState, StateMachine
from ballgame.widgets import (
    HOVERED_BUTTON_COLOR,
    NORMAL_BUTTON_COLOR,
    PRESSED_BUTTON_COLOR,
    Interaction,
)


def test_root_is_marked_main_menu():
    menu = build_main_menu()
    assert menu.find(MAIN_MENU) is menu


def test_texts_in_order():
    texts = [node.text for node in build_main_menu().walk() if node.kind == "text"]
    assert texts == ["Bevy Ball Game", "Play", "Quit"]


def test_title_images():
    images = [node.image for node in build_main_menu().walk() if node.kind == "image"]
    assert images == ["sprites/ball_blue_large.png", "sprites/ball_red_large.png"]


def test_buttons_start_normal():
    menu = build_main_menu()
    for marker in (PLAY_BUTTON, QUIT_BUTTON):
        assert menu.find(marker).background == NORMAL_BUTTON_COLOR


def test_font_sizes():
    menu = build_main_menu()
    sizes = {node.text: node.font_size for node in menu.walk() if node.kind == "text"}
    assert sizes == {"Bevy Ball Game": 64.0, "Play": 32.0, "Quit": 32.0}


def test_play_click_requests_game():
    menu = build_main_menu()
    button = menu.find(PLAY_BUTTON)
    state = StateMachine(AppState.MAIN_MENU)
    assert interact_with_play_button(button, Interaction.CLICKED, state) is True
    assert button.background == PRESSED_BUTTON_COLOR
    assert state.apply() == (AppState.MAIN_MENU, AppState.GAME)


@pytest.mark.parametrize(
    "interaction, color",
    [(Interaction.HOVERED, HOVERED_BUTTON_COLOR), (Interaction.NONE, NORMAL_BUTTON_COLOR)],
)
def test_play_hover_and_none_only_recolor(interaction, color):
    button = build_main_menu().find(PLAY_BUTTON)
    state = StateMachine(AppState.MAIN_MENU)
    assert interact_with_play_button(button, interaction, state) is False
    assert button.background == color
    assert state.pending is None


def test_quit_click_asks_to_exit():
    button = build_main_menu().find(QUIT_BUTTON)
    assert interact_with_quit_button(button, Interaction.CLICKED) is True
    assert button.background == PRESSED_BUTTON_COLOR


def test_quit_hover_does_not_exit():
    button = build_main_menu().find(QUIT_BUTTON)
    assert interact_with_quit_button(button, Interaction.HOVERED) is False
    assert button.background == HOVERED_BUTTON_COLOR