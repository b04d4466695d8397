import pytest

from ballgame.pause_menu import (
    MAIN_MENU_BUTTON,
    PAUSE_MENU,
    PAUSE_MENU_Z_INDEX,
    QUIT_BUTTON,
    RESUME_BUTTON,
    build_pause_menu,
    interact_with_main_menu_button,
    interact_with_quit_button,
    interact_with_resume_button,
)
from ballgame.states import AppState, SimulationState, StateMachine
from ballgame.widgets import (
    HOVERED_BUTTON_COLOR,
    MENU_BACKGROUND_COLOR,
    NORMAL_BUTTON_COLOR,
    PRESSED_BUTTON_COLOR,
    TITLE_FONT_SIZE,
    Interaction,
    button_color,
)


@pytest.fixture
def menu():
    return build_pause_menu()


def test_root_is_marked_and_layered_above_hud(menu):
    assert menu.marker == PAUSE_MENU
    assert menu.z_index == PAUSE_MENU_Z_INDEX
    assert menu.z_index == 1
    assert menu.style["position_type"] == "absolute"


def test_container_has_translucent_background(menu):
    container = menu.children[0]
    assert container.background == MENU_BACKGROUND_COLOR
    assert container.style["flex_direction"] == "column"


def test_title_text(menu):
    title = menu.children[0].children[0]
    assert title.text == "Pause Menu"
    assert title.font_size == TITLE_FONT_SIZE


@pytest.mark.parametrize(
    "marker,label",
    [(RESUME_BUTTON, "Resume"), (MAIN_MENU_BUTTON, "Main Menu"), (QUIT_BUTTON, "Quit")],
)
def test_buttons_have_labels(menu, marker, label):
    button = menu.find(marker)
    assert button.kind == "button"
    assert [child.text for child in button.children] == [label]
    assert button.background == NORMAL_BUTTON_COLOR


def test_button_order(menu):
    markers = [child.marker for child in menu.children[0].children]
    assert markers == [None, RESUME_BUTTON, MAIN_MENU_BUTTON, QUIT_BUTTON]


def test_resume_click_requests_running(menu):
    button = menu.find(RESUME_BUTTON)
    state = StateMachine(SimulationState.PAUSED)
    assert interact_with_resume_button(button, Interaction.CLICKED, state) is True
    assert state.pending is SimulationState.RUNNING
    assert button.background == PRESSED_BUTTON_COLOR
    assert state.apply() == (SimulationState.PAUSED, SimulationState.RUNNING)


def test_resume_hover_only_recolours(menu):
    button = menu.find(RESUME_BUTTON)
    state = StateMachine(SimulationState.PAUSED)
    assert interact_with_resume_button(button, Interaction.HOVERED, state) is False
    assert state.pending is None
    assert button.background == HOVERED_BUTTON_COLOR


def test_main_menu_click_requests_main_menu(menu):
    button = menu.find(MAIN_MENU_BUTTON)
    state = StateMachine(AppState.GAME)
    assert interact_with_main_menu_button(button, Interaction.CLICKED, state) is True
    assert state.pending is AppState.MAIN_MENU
    assert button.background == PRESSED_BUTTON_COLOR


def test_main_menu_none_resets_colour(menu):
    button = menu.find(MAIN_MENU_BUTTON)
    state = StateMachine(AppState.GAME)
    interact_with_main_menu_button(button, Interaction.HOVERED, state)
    assert interact_with_main_menu_button(button, Interaction.NONE, state) is False
    assert button.background == NORMAL_BUTTON_COLOR
    assert state.pending is None


@pytest.mark.parametrize("interaction", list(Interaction))
def test_quit_button(menu, interaction):
    button = menu.find(QUIT_BUTTON)
    result = interact_with_quit_button(button, interaction)
    assert result is (interaction is Interaction.CLICKED)
    assert button.background == button_color(interaction)


def test_wrong_state_kind_rejected(menu):
    button = menu.find(RESUME_BUTTON)
    state = StateMachine(AppState.GAME)
    with pytest.raises(TypeError):
        interact_with_resume_button(button, Interaction.CLICKED, state)