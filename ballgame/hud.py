"""The in-game heads-up display showing score and enemy count."""

from __future__ import annotations

from .score import Score
from .widgets import MENU_BACKGROUND_COLOR, TITLE_FONT_SIZE, Node, image_node, text_node
from .world import World

HUD = "HUD"
SCORE_TEXT = "ScoreText"
ENEMY_TEXT = "EnemyText"

HUD_STYLE = {
    "display": "flex",
    "flex_direction": "row",
    "justify_content": "space_between",
    "align_items": "center",
    "size": ("100%", "15%"),
}

LHS_STYLE = {
    "display": "flex",
    "flex_direction": "row",
    "justify_content": "center",
    "align_items": "center",
    "size": ("200px", "80%"),
    "margin": ("32px", "0px", "0px", "0px"),
}

RHS_STYLE = {
    "display": "flex",
    "flex_direction": "row",
    "justify_content": "center",
    "align_items": "center",
    "size": ("200px", "80%"),
    "margin": ("0px", "32px", "0px", "0px"),
}

IMAGE_SIZE = 48.0


def build_hud() -> Node:
    """Build the score panel on the left and the enemy panel on the right."""
    left = Node(
        style=dict(LHS_STYLE),
        background=MENU_BACKGROUND_COLOR,
        children=[
            image_node("sprites/star.png", IMAGE_SIZE),
            text_node("0", TITLE_FONT_SIZE, marker=SCORE_TEXT),
        ],
    )
    right = Node(
        style=dict(RHS_STYLE),
        background=MENU_BACKGROUND_COLOR,
        children=[
            text_node("0", TITLE_FONT_SIZE, marker=ENEMY_TEXT),
            image_node("sprites/ball_red_large.png", IMAGE_SIZE),
        ],
    )
    return Node(marker=HUD, style=dict(HUD_STYLE), children=[left, right])


def _set_texts(hud: Node, marker: str, value: str) -> bool:
    changed = False
    for node in hud.find_all(marker):
        if node.text != value:
            node.text = value
            changed = True
    return changed


def update_score_text(hud: Node, score: Score) -> bool:
    """Show the current score; returns True if any text changed."""
    return _set_texts(hud, SCORE_TEXT, str(score.value))


def update_enemy_text(hud: Node, world: World) -> int:
    """Show how many enemies exist; returns that count."""
    count = len(world.enemies)
    _set_texts(hud, ENEMY_TEXT, str(count))
    return count