"""Application and simulation states, the game-over event and a state machine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, Tuple, TypeVar


class AppState(Enum):
    """Top-level screen the application is showing."""

    MAIN_MENU = "main_menu"
    GAME = "game"
    GAME_OVER = "game_over"

    @classmethod
    def default(cls) -> "AppState":
        return cls.MAIN_MENU


class SimulationState(Enum):
    """Whether the game world is advancing."""

    RUNNING = "running"
    PAUSED = "paused"

    @classmethod
    def default(cls) -> "SimulationState":
        return cls.RUNNING


@dataclass(frozen=True)
class GameOver:
    """Sent when the player is hit; carries the final score."""

    score: int


S = TypeVar("S", bound=Enum)


class StateMachine(Generic[S]):
    """Holds a current state and a queued next state.

    A requested state takes effect only when :meth:`apply` is called, which
    happens once per frame. Requesting again before that replaces the request.
    """

    def __init__(self, initial: S) -> None:
        self._current: S = initial
        self._pending: Optional[S] = None

    @property
    def current(self) -> S:
        return self._current

    @property
    def pending(self) -> Optional[S]:
        return self._pending

    def set(self, state: S) -> None:
        """Queue ``state`` to be entered on the next :meth:`apply`."""
        if not isinstance(state, type(self._current)):
            raise TypeError(
                f"expected {type(self._current).__name__}, got {state!r}"
            )
        self._pending = state

    def apply(self) -> Optional[Tuple[S, S]]:
        """Enter the queued state.

        Returns ``(exited, entered)`` if a transition happened, else ``None``.
        Queuing the current state still counts as a transition (the state is
        exited and entered again).
        """
        if self._pending is None:
            return None
        exited, entered = self._current, self._pending
        self._current = entered
        self._pending = None
        return exited, entered

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StateMachine):
            return self._current == other._current and self._pending == other._pending
        return NotImplemented

    def __repr__(self) -> str:
        return f"StateMachine(current={self._current!r}, pending={self._pending!r})"