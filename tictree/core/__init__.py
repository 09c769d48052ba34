"""Core game logic for tictree."""

from .state import (
    Board,
    CellOccupiedError,
    GameOverError,
    Mark,
    MoveError,
    Outcome,
    OutOfBoundsError,
    Position,
)
from .rules import (
    BOARD_SIZE,
    apply_move,
    board_from_rows,
    detect_outcome,
    legal_moves,
    new_board,
    play_moves,
    successors,
    winning_lines,
)

__all__ = [
    "Board",
    "Mark",
    "Outcome",
    "Position",
    "MoveError",
    "GameOverError",
    "OutOfBoundsError",
    "CellOccupiedError",
    "BOARD_SIZE",
    "apply_move",
    "board_from_rows",
    "detect_outcome",
    "legal_moves",
    "new_board",
    "play_moves",
    "successors",
    "winning_lines",
]
