from ballgame.score import (
    HighScores,
    Score,
    high_scores_updated,
    update_high_scores,
    update_score,
)
from ballgame.states import GameOver


def test_score_starts_at_zero_and_changed():
    score = Score()
    assert score.value == 0
    assert score.take_changed()
    assert not score.take_changed()


def test_add_point_marks_changed():
    score = Score()
    score.take_changed()
    score.add_point()
    score.add_point()
    assert score.value == 2
    assert score.take_changed()


def test_update_score_prints_only_on_change(capsys):
    score = Score()
    assert update_score(score) == "Score: 0"
    assert "Score: 0" in capsys.readouterr().out
    assert update_score(score) is None
    score.add_point()
    assert update_score(score) == "Score: 1"


def test_update_high_scores_records_player():
    table = HighScores()
    update_high_scores([GameOver(3), GameOver(9)], table)
    assert table.scores == [("Player", 3), ("Player", 9)]


def test_high_scores_updated_reports_on_change(capsys):
    table = HighScores()
    table.take_changed()
    assert high_scores_updated(table) is None
    table.add("Player", 4)
    line = high_scores_updated(table)
    assert line is not None and line.startswith("High Scores: ")
    assert "('Player', 4)" in line
    assert line in capsys.readouterr().out
    assert high_scores_updated(table) is None


def test_new_high_scores_is_empty_and_changed():
    table = HighScores()
    assert table.scores == []
    assert table.take_changed()