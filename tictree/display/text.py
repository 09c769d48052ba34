from __future__ import annotations

from typing import Optional

from tictree.core import Board, Mark, Outcome
from tictree.tree import GameTreeNode, outcome_probability

ROW_SEPARATOR = "-----"


def cell_symbol(mark: Optional[Mark]) -> str:
    if mark is None:
        return " "
    return mark.name


def render_board(board: Board) -> str:
    rows = [
        "|".join(cell_symbol(board.cell(r, c)) for c in range(board.size))
        for r in range(board.size)
    ]
    winner = board.outcome.name if board.outcome is not None else "None"
    return f"\n{ROW_SEPARATOR}\n".join(rows) + f"\nWinner: {winner}"


def render_tree(node: GameTreeNode) -> str:
    """Root board followed by every immediate child and its cached probabilities."""
    children = "\n\n".join(
        f"{render_board(edge.child.board)}\n"
        f"O wins: {edge.o_wins}\n"
        f"X wins: {edge.x_wins}\n"
        f"Ties: {edge.ties}"
        for edge in node.edges
    )
    return f"Current State:\n{render_board(node.board)}\n\n{children}"


def render_summary(node: GameTreeNode) -> str:
    x = outcome_probability(node, Outcome.X_WIN)
    o = outcome_probability(node, Outcome.O_WIN)
    tie = outcome_probability(node, Outcome.TIE)
    return f"X: {x}\nO: {o}\nTie: {tie}\nsum: {x + o + tie}"
