from typing import Dict, Tuple

import pytest

from tictree.core import Board, new_board, successors
from tictree.tree import GameTreeNode, build


@pytest.fixture(scope="session")
def full_tree() -> GameTreeNode:
    return build(new_board())


@pytest.fixture(scope="session")
def reachable_boards() -> Dict[Tuple[bytes, int], Board]:
    """Every distinct position reachable from the empty board by legal play."""
    start = new_board()
    seen = {(start.grid.tobytes(), int(start.current)): start}
    frontier = [start]
    while frontier:
        board = frontier.pop()
        for child in successors(board):
            key = (child.grid.tobytes(), int(child.current))
            if key not in seen:
                seen[key] = child
                frontier.append(child)
    return seen
