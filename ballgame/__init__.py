"""A small 2D arcade game: collect stars and avoid bouncing enemies.

The game rules, states and menus work without a display; ``ballgame.app`` adds
a pygame window and the ``ballgame`` command.
"""

__version__ = "0.1.0"