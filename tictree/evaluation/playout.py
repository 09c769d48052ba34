from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from tictree.core import Board, Outcome, Position, apply_move, legal_moves, new_board


class RandomPlayer:
    """Picks uniformly among the legal moves of the side to move."""

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def select(self, board: Board) -> Position:
        moves = legal_moves(board)
        if not moves:
            raise ValueError("No legal moves on a finished board.")
        return moves[int(self.rng.integers(len(moves)))]


@dataclass
class PlayoutRecord:
    outcome: Outcome
    moves: List[Position] = field(default_factory=list)


@dataclass
class PlayoutResult:
    games_played: int
    x_wins: int
    o_wins: int
    ties: int
    average_length: float

    def frequencies(self) -> Dict[Outcome, float]:
        total = max(1, self.games_played)
        return {
            Outcome.X_WIN: self.x_wins / total,
            Outcome.O_WIN: self.o_wins / total,
            Outcome.TIE: self.ties / total,
        }


def play_random_game(player: RandomPlayer, board: Optional[Board] = None) -> PlayoutRecord:
    board = board.copy() if board is not None else new_board()
    moves: List[Position] = []
    while not board.is_terminal:
        move = player.select(board)
        apply_move(board, *move)
        moves.append(move)
    return PlayoutRecord(outcome=board.outcome, moves=moves)


def simulate_random_games(
    episodes: int,
    *,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> PlayoutResult:
    if episodes <= 0:
        raise ValueError("episodes must be positive")
    player = RandomPlayer(rng or np.random.default_rng(seed))

    x_wins = 0
    o_wins = 0
    ties = 0
    total_ply = 0

    for _ in range(episodes):
        record = play_random_game(player)
        total_ply += len(record.moves)
        if record.outcome is Outcome.X_WIN:
            x_wins += 1
        elif record.outcome is Outcome.O_WIN:
            o_wins += 1
        else:
            ties += 1

    return PlayoutResult(
        games_played=episodes,
        x_wins=x_wins,
        o_wins=o_wins,
        ties=ties,
        average_length=total_ply / episodes,
    )
