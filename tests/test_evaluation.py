import numpy as np
import pytest

from tictree.core import Outcome, board_from_rows, play_moves
from tictree.evaluation import RandomPlayer, play_random_game, simulate_random_games


def test_random_games_track_exact_odds():
    result = simulate_random_games(4000, seed=0)
    freqs = result.frequencies()

    assert result.games_played == 4000
    assert result.x_wins + result.o_wins + result.ties == 4000
    assert 5 <= result.average_length <= 9
    assert np.isclose(freqs[Outcome.X_WIN], 737 / 1260, atol=0.04)
    assert np.isclose(freqs[Outcome.O_WIN], 121 / 420, atol=0.04)
    assert np.isclose(freqs[Outcome.TIE], 8 / 63, atol=0.04)


def test_random_game_replays_to_same_outcome():
    player = RandomPlayer(np.random.default_rng(3))
    record = play_random_game(player)

    assert 5 <= len(record.moves) <= 9
    assert play_moves(record.moves).outcome == record.outcome


def test_same_seed_same_results():
    first = simulate_random_games(50, seed=11)
    second = simulate_random_games(50, rng=np.random.default_rng(11))
    assert first == second


def test_random_player_rejects_finished_board():
    player = RandomPlayer(np.random.default_rng(0))
    with pytest.raises(ValueError):
        player.select(board_from_rows(["XXX", "OO ", "   "]))


def test_episodes_must_be_positive():
    with pytest.raises(ValueError):
        simulate_random_games(0)
