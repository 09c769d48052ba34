from __future__ import annotations

from functools import lru_cache
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .state import (
    EMPTY,
    Board,
    CellOccupiedError,
    GameOverError,
    GridArray,
    Mark,
    MoveError,
    Outcome,
    OutOfBoundsError,
    Position,
)

BOARD_SIZE = 3

_SYMBOLS = {" ": EMPTY, ".": EMPTY, "X": int(Mark.X), "O": int(Mark.O)}

Line = Tuple[Position, ...]


@lru_cache(maxsize=None)
def winning_lines() -> Tuple[Line, ...]:
    """Every line that wins the game, in the order outcome detection scans them."""
    rows = [tuple((r, c) for c in range(BOARD_SIZE)) for r in range(BOARD_SIZE)]
    cols = [tuple((r, c) for r in range(BOARD_SIZE)) for c in range(BOARD_SIZE)]
    main_diag = tuple((i, i) for i in range(BOARD_SIZE))
    anti_diag = tuple((i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE))
    return tuple(rows + cols + [main_diag, anti_diag])


def new_board() -> Board:
    grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    return Board(grid=grid, current=Mark.X, outcome=None)


def detect_outcome(grid: GridArray) -> Optional[Outcome]:
    """Rescan the whole grid; the first complete line in scan order decides the winner."""
    for line in winning_lines():
        first = int(grid[line[0]])
        if first == EMPTY:
            continue
        if all(int(grid[pos]) == first for pos in line[1:]):
            return Outcome.from_mark(Mark(first))

    if np.all(grid != EMPTY):
        return Outcome.TIE
    return None


def apply_move(board: Board, row: int, col: int) -> Board:
    """Place the current mark at (row, col), pass the turn and refresh the outcome.

    The board is modified in place and returned for convenience. Nothing is
    changed when the move is rejected.
    """
    if board.is_terminal:
        raise GameOverError()
    if not _in_bounds(row, col):
        raise OutOfBoundsError(row, col)

    occupant = board.cell(row, col)
    if occupant is not None:
        raise CellOccupiedError(occupant, row, col)

    board.grid[row, col] = board.current
    board.current = board.current.other()
    board.outcome = detect_outcome(board.grid)
    return board


def legal_moves(board: Board) -> List[Position]:
    if board.is_terminal:
        return []
    return [(int(r), int(c)) for r, c in np.argwhere(board.grid == EMPTY)]


def successors(board: Board) -> List[Board]:
    children: List[Board] = []
    for row, col in legal_moves(board):
        child = board.copy()
        try:
            apply_move(child, row, col)
        except MoveError as exc:
            raise AssertionError(f"legal move ({row}, {col}) rejected: {exc}") from exc
        children.append(child)
    return children


def play_moves(moves: Iterable[Position], board: Optional[Board] = None) -> Board:
    board = board if board is not None else new_board()
    for row, col in moves:
        apply_move(board, row, col)
    return board


def board_from_rows(rows: Sequence[str], current: Optional[Mark] = None) -> Board:
    """Build a board from strings such as ``["XO ", " X ", "  O"]``.

    The side to move is inferred from the mark counts unless given, and the
    outcome is recomputed from the grid.
    """
    if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
        raise ValueError(f"Expected {BOARD_SIZE} rows of {BOARD_SIZE} cells.")

    grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    for r, row in enumerate(rows):
        for c, symbol in enumerate(row.upper()):
            if symbol not in _SYMBOLS:
                raise ValueError(f"Unknown cell symbol {symbol!r} at ({r}, {c}).")
            grid[r, c] = _SYMBOLS[symbol]

    if current is None:
        x_count = int(np.count_nonzero(grid == Mark.X))
        o_count = int(np.count_nonzero(grid == Mark.O))
        current = Mark.X if x_count <= o_count else Mark.O

    return Board(grid=grid, current=current, outcome=detect_outcome(grid))


def _in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE
