from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

GridArray = NDArray[np.int8]

EMPTY = 0


class Mark(IntEnum):
    X = 1
    O = 2

    def other(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X


class Outcome(Enum):
    X_WIN = "x_win"
    O_WIN = "o_win"
    TIE = "tie"

    @staticmethod
    def from_mark(mark: Mark) -> "Outcome":
        return Outcome.X_WIN if mark is Mark.X else Outcome.O_WIN


class MoveError(ValueError):
    """Base class for moves rejected by the rules engine."""


class GameOverError(MoveError):
    def __init__(self) -> None:
        super().__init__("Cannot move on a finished game.")


class OutOfBoundsError(MoveError):
    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Position ({row}, {col}) is outside the board.")
        self.row = row
        self.col = col


class CellOccupiedError(MoveError):
    def __init__(self, occupant: Mark, row: int, col: int) -> None:
        super().__init__(f"Position ({row}, {col}) is already taken by {occupant.name}.")
        self.occupant = occupant
        self.row = row
        self.col = col


@dataclass
class Board:
    grid: GridArray  # shape (3, 3), dtype=np.int8, values 0 (empty) or a Mark
    current: Mark = Mark.X
    outcome: Optional[Outcome] = None

    def copy(self) -> "Board":
        return Board(grid=self.grid.copy(), current=self.current, outcome=self.outcome)

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not None

    @property
    def size(self) -> int:
        return int(self.grid.shape[0])

    @property
    def ply(self) -> int:
        return int(np.count_nonzero(self.grid))

    def cell(self, row: int, col: int) -> Optional[Mark]:
        value = int(self.grid[row, col])
        if value == EMPTY:
            return None
        return Mark(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.current == other.current
            and self.outcome == other.outcome
            and np.array_equal(self.grid, other.grid)
        )

    def __repr__(self) -> str:
        symbols = {EMPTY: ".", Mark.X: "X", Mark.O: "O"}
        board_str = "\n".join("".join(symbols[int(cell)] for cell in row) for row in self.grid)
        return f"Board(current={self.current.name}, outcome={self.outcome})\n{board_str}"


# Convenient tuple alias used across modules
Position = Tuple[int, int]
