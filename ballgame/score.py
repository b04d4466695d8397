"""The running score, the high-score table and the systems reporting them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .states import GameOver


@dataclass
class Score:
    """Points gathered in the current game. Starts out marked as changed."""

    value: int = 0
    _changed: bool = field(default=True, repr=False, compare=False)

    def add_point(self) -> None:
        self.value += 1
        self._changed = True

    def take_changed(self) -> bool:
        """Return whether the score changed since last asked, and clear the flag."""
        changed, self._changed = self._changed, False
        return changed


@dataclass
class HighScores:
    """Final scores of finished games, in the order they ended."""

    scores: List[Tuple[str, int]] = field(default_factory=list)
    _changed: bool = field(default=True, repr=False, compare=False)

    def add(self, name: str, score: int) -> None:
        self.scores.append((name, score))
        self._changed = True

    def take_changed(self) -> bool:
        """Return whether the table changed since last asked, and clear the flag."""
        changed, self._changed = self._changed, False
        return changed


def update_score(score: Score) -> Optional[str]:
    """Print the score if it changed; return the printed line."""
    if score.take_changed():
        line = f"Score: {score.value}"
        print(line)
        return line
    return None


def update_high_scores(events: Iterable[GameOver], high_scores: HighScores) -> None:
    """Record every finished game under the name ``Player``."""
    for event in events:
        high_scores.add("Player", event.score)


def high_scores_updated(high_scores: HighScores) -> Optional[str]:
    """Print the table if it changed; return the printed line."""
    if high_scores.take_changed():
        line = f"High Scores: {high_scores!r}"
        print(line)
        return line
    return None