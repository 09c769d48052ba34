"""Monte Carlo playouts used to cross-check the exact enumeration."""

from .playout import PlayoutRecord, PlayoutResult, RandomPlayer, play_random_game, simulate_random_games

__all__ = ["PlayoutRecord", "PlayoutResult", "RandomPlayer", "play_random_game", "simulate_random_games"]
