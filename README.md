# ballgame

A small 2D arcade game. You play a blue ball. Collect the yellow stars that keep
appearing across the window, and keep away from the red balls that bounce off its
edges. When an enemy touches you the game ends and your final score is shown.

## Installing

```
pip install .
```

pygame is installed along with it.

## Playing

```
ballgame
```

Options:

| Option            | Meaning                                             | Default |
|-------------------|-----------------------------------------------------|---------|
| `--width W`       | Window width in pixels                              | 1280    |
| `--height H`      | Window height in pixels                             | 720     |
| `--seed N`        | Seed for the random placement of stars and enemies  | random  |
| `--frames N`      | Stop after this many frames                         | none    |

The game opens on the main menu. Click **Play** to start, or **Quit** to leave.

| Key                    | Action                                   |
|------------------------|------------------------------------------|
| Arrow keys / W A S D   | Move the player                          |
| Space                  | Pause or resume while in a game          |
| G                      | Start a game from any other screen       |
| M                      | Return to the main menu                  |
| Escape                 | Quit                                     |

A new game starts paused with the pause menu showing, so press Space (or click
**Resume**) to begin. It starts with 4 enemies and 10 stars. While the game runs, one
star appears every second and one enemy every five seconds. The score is shown in the
top left and the number of enemies in the top right.

The pause menu has **Resume**, **Main Menu** and **Quit**. The game-over screen shows
your final score and has **Restart**, **Main Menu** and **Quit**. Each final score is
added to a list of high scores, which is printed to the console whenever it changes.

## Using the game logic directly

The rules do not depend on a display, so you can drive them from code or from tests.
State changes requested during one call to `Game.update` take effect at the start of
the next one:

```python
import random

from ballgame.game import Game
from ballgame.keyboard import Key, Keyboard

game = Game(800, 600, random.Random(1))
keys = Keyboard()
keys.press(Key.G)
game.update(1 / 60, keys)   # G requests the game state
keys.end_frame()
game.update(1 / 60, keys)   # the game state is entered
print(game.app_state.current)                        # AppState.GAME
print(len(game.world.enemies), len(game.world.stars))  # 4 10
```

Menu buttons are driven with `Game.interact`, for example
`game.interact("PlayButton", Interaction.CLICKED)` with `Interaction` from
`ballgame.widgets`. `Game.active_menu()` returns the top-most menu on screen as a tree
of `Node` objects, or `None` during play.

## What it does not do

- There is no sound.
- The balls and stars are drawn as plain coloured circles and the text uses pygame's
  default font; no image or font files are loaded.
- High scores live only in memory and are lost when the program exits.

## Running the tests

```
pip install ".[test]"
pytest
```