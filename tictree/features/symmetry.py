from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Dict, Iterable, Tuple

import numpy as np

from tictree.core import BOARD_SIZE, Board, Position
from tictree.core.state import GridArray

BOARD_DIM = BOARD_SIZE

BoardKey = Tuple[bytes, int]


class Transform(Enum):
    IDENTITY = auto()
    ROT90 = auto()
    ROT180 = auto()
    ROT270 = auto()
    FLIP_H = auto()
    FLIP_V = auto()
    FLIP_MAIN_DIAG = auto()
    FLIP_ANTI_DIAG = auto()


def _identity(r: int, c: int) -> Position:
    return r, c


def _rot90(r: int, c: int) -> Position:
    return c, BOARD_DIM - 1 - r


def _rot180(r: int, c: int) -> Position:
    return BOARD_DIM - 1 - r, BOARD_DIM - 1 - c


def _rot270(r: int, c: int) -> Position:
    return BOARD_DIM - 1 - c, r


def _flip_h(r: int, c: int) -> Position:
    return r, BOARD_DIM - 1 - c


def _flip_v(r: int, c: int) -> Position:
    return BOARD_DIM - 1 - r, c


def _flip_main_diag(r: int, c: int) -> Position:
    return c, r


def _flip_anti_diag(r: int, c: int) -> Position:
    return BOARD_DIM - 1 - c, BOARD_DIM - 1 - r


_POSITION_FNS: Dict[Transform, Callable[[int, int], Position]] = {
    Transform.IDENTITY: _identity,
    Transform.ROT90: _rot90,
    Transform.ROT180: _rot180,
    Transform.ROT270: _rot270,
    Transform.FLIP_H: _flip_h,
    Transform.FLIP_V: _flip_v,
    Transform.FLIP_MAIN_DIAG: _flip_main_diag,
    Transform.FLIP_ANTI_DIAG: _flip_anti_diag,
}


def all_transforms() -> Iterable[Transform]:
    return list(_POSITION_FNS.keys())


def transform_position(transform: Transform, row: int, col: int) -> Position:
    return _POSITION_FNS[transform](row, col)


def transform_grid(grid: GridArray, transform: Transform) -> GridArray:
    result = np.zeros_like(grid)
    for (row, col), value in np.ndenumerate(grid):
        nr, nc = transform_position(transform, int(row), int(col))
        result[nr, nc] = value
    return result


def transform_board(board: Board, transform: Transform) -> Board:
    """Map the board under ``transform``; side to move and outcome are unchanged."""
    return Board(
        grid=transform_grid(board.grid, transform),
        current=board.current,
        outcome=board.outcome,
    )


def board_key(board: Board) -> BoardKey:
    return board.grid.tobytes(), int(board.current)


def canonical_key(board: Board) -> BoardKey:
    """Smallest key among the eight symmetric images of ``board``."""
    return min(
        (transform_grid(board.grid, transform).tobytes(), int(board.current))
        for transform in all_transforms()
    )
