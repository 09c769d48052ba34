import numpy as np

from tictree.core import Mark, board_from_rows, play_moves
from tictree.features import (
    Transform,
    all_transforms,
    board_key,
    canonical_key,
    transform_board,
    transform_position,
)


def test_transform_position_rot90_moves_corner() -> None:
    assert transform_position(Transform.ROT90, 0, 0) == (0, 2)
    assert transform_position(Transform.ROT90, 1, 1) == (1, 1)
    assert transform_position(Transform.FLIP_ANTI_DIAG, 0, 1) == (1, 2)


def test_transform_board_preserves_marks_and_turn() -> None:
    board = board_from_rows(["XO ", " X ", "   "])
    rotated = transform_board(board, Transform.ROT90)

    assert rotated.current == board.current == Mark.O
    assert rotated.cell(0, 2) == Mark.X
    assert rotated.cell(1, 2) == Mark.O
    for transform in all_transforms():
        mapped = transform_board(board, transform)
        assert np.count_nonzero(mapped.grid == Mark.X) == 2
        assert np.count_nonzero(mapped.grid == Mark.O) == 1


def test_canonical_key_merges_symmetric_openings() -> None:
    corners = {canonical_key(play_moves([move])) for move in [(0, 0), (0, 2), (2, 0), (2, 2)]}
    edges = {canonical_key(play_moves([move])) for move in [(0, 1), (1, 0), (1, 2), (2, 1)]}
    centre = canonical_key(play_moves([(1, 1)]))

    assert len(corners) == 1
    assert len(edges) == 1
    assert len(corners | edges | {centre}) == 3


def test_board_key_distinguishes_transformed_boards() -> None:
    board = play_moves([(0, 0)])
    flipped = transform_board(board, Transform.FLIP_H)

    assert board_key(board) != board_key(flipped)
    assert canonical_key(board) == canonical_key(flipped)
