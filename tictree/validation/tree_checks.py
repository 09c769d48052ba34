from __future__ import annotations

import math

from tictree.core import Outcome, legal_moves
from tictree.tree import GameTreeNode, outcome_probability


class TreeConsistencyError(AssertionError):
    pass


def validate_node(node: GameTreeNode, *, atol: float = 1e-6) -> None:
    board = node.board
    if board.is_terminal != node.is_leaf:
        raise TreeConsistencyError(f"leaf flag disagrees with board outcome at ply {board.ply}")
    if not node.is_leaf and len(node.edges) != len(legal_moves(board)):
        raise TreeConsistencyError("edge count does not match the legal move count")

    probs = [outcome_probability(node, outcome) for outcome in Outcome]
    if not all(math.isfinite(p) for p in probs):
        raise TreeConsistencyError("probabilities contain non-finite values")
    if any(p < -atol or p > 1.0 + atol for p in probs):
        raise TreeConsistencyError("probabilities out of [0,1] range")
    if abs(sum(probs) - 1.0) > atol:
        raise TreeConsistencyError(f"probabilities sum to {sum(probs)!r}, expected 1")

    for edge in node.edges:
        for outcome in Outcome:
            if abs(edge.probability(outcome) - outcome_probability(edge.child, outcome)) > atol:
                raise TreeConsistencyError(f"cached {outcome.value} probability is stale for move {edge.move}")


def validate_tree(root: GameTreeNode, *, atol: float = 1e-6) -> int:
    """Check every node below ``root``; returns the number of nodes checked."""
    checked = 0
    for node in root.iter_nodes():
        validate_node(node, atol=atol)
        checked += 1
    return checked
