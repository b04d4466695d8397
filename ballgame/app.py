"""The windowed game: input, drawing and the main loop."""

from __future__ import annotations

import argparse
import random
from typing import Dict, List, Optional, Sequence, Tuple

import pygame

from .enemy import ENEMY_SIZE
from .game import DEFAULT_HEIGHT, DEFAULT_WIDTH, Game
from .hud import ENEMY_TEXT, SCORE_TEXT
from .keyboard import Key, Keyboard
from .main_menu import TITLE
from .player import PLAYER_SIZE
from .star import STAR_SIZE
from .widgets import MENU_BACKGROUND_COLOR, WHITE, Color, Interaction, Node

FPS = 60
CLEAR_COLOR = (102, 102, 102)
BLUE = (60, 110, 220)
RED = (210, 50, 50)
YELLOW = (240, 210, 40)

_KEYS: Dict[int, Key] = {
    pygame.K_g: Key.G,
    pygame.K_m: Key.M,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
}


def key_from_pygame(code: int) -> Optional[Key]:
    """The game key for a pygame key code, or None if the game ignores it."""
    return _KEYS.get(code)


def _rgba(color: Color) -> pygame.Color:
    return pygame.Color(*color.to_rgba8())


class _Renderer:
    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.buttons: List[Tuple[str, pygame.Rect]] = []
        self._fonts: Dict[int, pygame.font.Font] = {}

    def _font(self, size: float) -> pygame.font.Font:
        key = int(size)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.Font(None, key)
        return self._fonts[key]

    def _fill(self, rect: pygame.Rect, color: Color) -> None:
        surface = pygame.Surface(rect.size, pygame.SRCALPHA)
        surface.fill(_rgba(color))
        self.screen.blit(surface, rect.topleft)

    def _text(self, node: Node, center: Tuple[int, int]) -> None:
        font = self._font(node.font_size or 32.0)
        surface = font.render(node.text or "", True, _rgba(node.text_color or WHITE))
        self.screen.blit(surface, surface.get_rect(center=center))

    def draw(self, game: Game) -> None:
        self.screen.fill(CLEAR_COLOR)
        height = game.world.window.height

        def at(position) -> Tuple[int, int]:
            return round(position.x), round(height - position.y)

        for star in game.world.stars:
            pygame.draw.circle(self.screen, YELLOW, at(star.position), STAR_SIZE / 2)
        for enemy in game.world.enemies:
            pygame.draw.circle(self.screen, RED, at(enemy.position), ENEMY_SIZE / 2)
        if game.world.player is not None:
            pygame.draw.circle(self.screen, BLUE, at(game.world.player.position), PLAYER_SIZE / 2)
        if game.hud is not None:
            self._draw_hud(game.hud)
        self.buttons = []
        menu = game.active_menu()
        if menu is not None:
            self._draw_menu(menu)
        pygame.display.flip()

    def _draw_hud(self, hud: Node) -> None:
        width, height = self.screen.get_size()
        panel_height = max(64, int(height * 0.15 * 0.8))
        left = pygame.Rect(32, 8, 200, panel_height)
        right = pygame.Rect(width - 32 - 200, 8, 200, panel_height)
        for panel in (left, right):
            self._fill(panel, MENU_BACKGROUND_COLOR)
        pygame.draw.circle(self.screen, YELLOW, (left.left + 40, left.centery), STAR_SIZE / 2)
        self._text(hud.find(SCORE_TEXT), (left.centerx + 24, left.centery))
        self._text(hud.find(ENEMY_TEXT), (right.centerx - 24, right.centery))
        pygame.draw.circle(self.screen, RED, (right.right - 40, right.centery), 24)

    def _draw_menu(self, menu: Node) -> None:
        width, height = self.screen.get_size()
        inside_buttons = {
            id(child)
            for node in menu.walk()
            if node.kind == "button"
            for child in node.walk()
            if child is not node
        }
        items = [
            node
            for node in menu.walk()
            if node.kind == "button"
            or (node.kind == "text" and id(node) not in inside_buttons)
        ]
        gap = 8
        heights = [
            80 if node.kind == "button" else int((node.font_size or 32.0) * 1.2)
            for node in items
        ]
        total = sum(heights) + gap * max(len(items) - 1, 0)

        backdrop = next(
            (node.background for node in menu.walk() if node.kind == "node" and node.background),
            None,
        )
        if backdrop is not None:
            side = max(400, total + 32)
            box = pygame.Rect(0, 0, side, side)
            box.center = (width // 2, height // 2)
            self._fill(box, backdrop)

        y = (height - total) // 2
        for node, item_height in zip(items, heights):
            center = (width // 2, y + item_height // 2)
            if node.kind == "button":
                rect = pygame.Rect(0, 0, 200, 80)
                rect.center = center
                if node.background is not None:
                    self._fill(rect, node.background)
                for child in node.children:
                    if child.kind == "text":
                        self._text(child, rect.center)
                if node.marker is not None:
                    self.buttons.append((node.marker, rect))
            else:
                self._text(node, center)
            y += item_height + gap


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ballgame", description="Dodge the red balls, collect stars.")
    parser.add_argument("--width", type=float, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=float, default=DEFAULT_HEIGHT)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("window size must be positive")
    if args.frames is not None and args.frames < 1:
        parser.error("--frames must be at least 1")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until it is closed or quit."""
    args = _parse_args(argv)
    game = Game(args.width, args.height, random.Random(args.seed))

    pygame.display.init()
    pygame.font.init()
    try:
        screen = pygame.display.set_mode((int(args.width), int(args.height)))
        pygame.display.set_caption(TITLE)
        renderer = _Renderer(screen)
        clock = pygame.time.Clock()
        keyboard = Keyboard()
        interactions: Dict[str, Interaction] = {}
        shown_menu: Optional[Node] = None
        frame = 0
        running = True
        while running:
            delta = clock.tick(FPS) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    key = key_from_pygame(event.key)
                    if key is not None:
                        keyboard.press(key)
                elif event.type == pygame.KEYUP:
                    key = key_from_pygame(event.key)
                    if key is not None:
                        keyboard.release(key)

            menu = game.active_menu()
            if menu is not shown_menu:
                interactions.clear()
                shown_menu = menu
            pointer = pygame.mouse.get_pos()
            button_down = pygame.mouse.get_pressed()[0]
            for marker, rect in renderer.buttons:
                if rect.collidepoint(pointer):
                    interaction = Interaction.CLICKED if button_down else Interaction.HOVERED
                else:
                    interaction = Interaction.NONE
                if interactions.get(marker) is not interaction:
                    interactions[marker] = interaction
                    game.interact(marker, interaction)

            game.update(delta, keyboard)
            keyboard.end_frame()
            if game.exit_requested:
                running = False
            renderer.draw(game)

            frame += 1
            if args.frames is not None and frame >= args.frames:
                running = False
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())