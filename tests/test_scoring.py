import pytest

from game.scoring import ScoreBoard


def test_initial_scores():
    board = ScoreBoard()
    assert board.scores == {1: 0, 2: 0}
    assert board.turn_scores == {1: [0], 2: [0]}
    assert board.turn_count == {1: 0, 2: 0}


def test_increment_score():
    board = ScoreBoard()
    board.increment_score(1)
    board.increment_score(1)
    board.increment_score(2)
    assert board.get_score(1) == 2
    assert board.get_score(2) == 1
    assert board.turn_count == {1: 2, 2: 1}
    assert board.total_score() == 3
    assert board.score_difference() == 1


def test_record_turn_score_appends_to_history():
    board = ScoreBoard()
    board.increment_score(2)
    board.record_current_team_turn_score(2)
    board.record_turn_score(1, 0)
    assert board.turn_scores == {1: [0, 0], 2: [0, 1]}


def test_winner_and_tie():
    board = ScoreBoard()
    assert board.get_winner() is None
    assert board.is_tied()
    board.increment_score(2)
    assert board.get_winner() == 2
    board.increment_score(1)
    board.increment_score(1)
    assert board.get_winner() == 1
    assert not board.is_tied()


def test_reset_scores():
    board = ScoreBoard()
    board.increment_score(1)
    board.record_current_team_turn_score(1)
    board.reset_scores()
    assert board.scores == {1: 0, 2: 0}
    assert board.turn_scores == {1: [0], 2: [0]}
    assert board.turn_count == {1: 0, 2: 0}


def test_unknown_team_raises():
    board = ScoreBoard()
    with pytest.raises(ValueError):
        board.increment_score(3)
