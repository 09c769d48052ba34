"""Board symmetry helpers for tictree."""

from .symmetry import (
    BoardKey,
    Transform,
    all_transforms,
    board_key,
    canonical_key,
    transform_board,
    transform_grid,
    transform_position,
)

__all__ = [
    "BoardKey",
    "Transform",
    "all_transforms",
    "board_key",
    "canonical_key",
    "transform_board",
    "transform_grid",
    "transform_position",
]
