import numpy as np
import pytest

from solitaire.game import SolitaireBoard
from solitaire.sim.runner import RunConfig, play_game, rounds_bound, run_many


def test_play_game_records_history():
    b = SolitaireBoard([6], final_pile_count=3)
    seen = []
    record = play_game(b, on_round=lambda j, board: seen.append((j, board.config_string())))
    assert record.initial == [6]
    assert record.history == [[5, 1], [4, 2], [3, 1, 2]]
    assert record.rounds == 3
    assert record.final == [3, 1, 2]
    assert seen == [(1, "5 1"), (2, "4 2"), (3, "3 1 2")]


def test_play_game_on_finished_board_plays_nothing():
    b = SolitaireBoard([1, 3, 2], final_pile_count=3)
    record = play_game(b)
    assert record.rounds == 0
    assert record.final == [1, 3, 2]


def test_play_game_round_limit():
    b = SolitaireBoard([6], final_pile_count=3)
    with pytest.raises(RuntimeError):
        play_game(b, max_rounds=1)


def test_rounds_bound():
    assert rounds_bound(3) == 6
    assert rounds_bound(9) == 72


def test_run_many_stats():
    stats = run_many(RunConfig(games=30, final_piles=4, seed=0))
    assert stats.games == 30
    assert stats.rounds.shape == (30,)
    assert 0 <= stats.min_rounds <= stats.mean_rounds <= stats.max_rounds <= rounds_bound(4)


def test_run_many_is_reproducible_with_seed():
    a = run_many(RunConfig(games=10, seed=42))
    b = run_many(RunConfig(games=10, seed=42))
    assert np.array_equal(a.rounds, b.rounds)


def test_run_many_zero_games():
    stats = run_many(RunConfig(games=0))
    assert stats.games == 0
    assert stats.mean_rounds == 0.0


def test_play_game_limit_equal_to_rounds_needed():
    b = SolitaireBoard([6], final_pile_count=3)
    record = play_game(b, max_rounds=3)
    assert record.rounds == 3
    assert b.is_done()
