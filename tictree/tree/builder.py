from __future__ import annotations

import logging
import time
from typing import Dict, Iterator, List, Tuple

from tictree.core import Board, Outcome, Position, legal_moves, successors

logger = logging.getLogger(__name__)


class Edge:
    """Link to a child subtree with the child's outcome probabilities cached."""

    __slots__ = ("move", "child", "x_wins", "o_wins", "ties")

    def __init__(self, move: Position, child: "GameTreeNode") -> None:
        self.move: Position = move
        self.child: GameTreeNode = child
        self.x_wins: float = outcome_probability(child, Outcome.X_WIN)
        self.o_wins: float = outcome_probability(child, Outcome.O_WIN)
        self.ties: float = outcome_probability(child, Outcome.TIE)

    def probability(self, outcome: Outcome) -> float:
        if outcome is Outcome.X_WIN:
            return self.x_wins
        if outcome is Outcome.O_WIN:
            return self.o_wins
        return self.ties


class GameTreeNode:
    __slots__ = ("board", "edges")

    def __init__(self, board: Board, edges: Tuple[Edge, ...] = ()) -> None:
        self.board: Board = board
        self.edges: Tuple[Edge, ...] = edges

    @property
    def is_leaf(self) -> bool:
        return not self.edges

    @property
    def depth(self) -> int:
        return self.board.ply

    def child(self, row: int, col: int) -> "GameTreeNode":
        for edge in self.edges:
            if edge.move == (row, col):
                return edge.child
        raise KeyError(f"No child for move ({row}, {col}).")

    def iter_nodes(self) -> Iterator["GameTreeNode"]:
        """Pre-order walk over this node and every descendant."""
        stack: List[GameTreeNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(edge.child for edge in reversed(node.edges))


def build(board: Board) -> GameTreeNode:
    """Expand every legal continuation of ``board`` into a full game tree.

    The input board is copied, never modified.
    """
    start = time.perf_counter()
    root = _build_node(board)
    logger.info(
        "Built game tree from ply %d in %.2fs (x=%.4f o=%.4f tie=%.4f)",
        board.ply,
        time.perf_counter() - start,
        outcome_probability(root, Outcome.X_WIN),
        outcome_probability(root, Outcome.O_WIN),
        outcome_probability(root, Outcome.TIE),
    )
    return root


def _build_node(board: Board) -> GameTreeNode:
    if board.is_terminal:
        return GameTreeNode(board.copy())

    edges = tuple(
        Edge(move, _build_node(child))
        for move, child in zip(legal_moves(board), successors(board))
    )
    assert edges, "non-terminal board has no successors"
    return GameTreeNode(board.copy(), edges)


def outcome_probability(node: GameTreeNode, outcome: Outcome) -> float:
    """Probability of ``outcome`` when both sides pick uniformly among legal moves."""
    if node.board.is_terminal:
        return 1.0 if node.board.outcome is outcome else 0.0
    assert node.edges, "non-terminal node has no edges"
    return sum(edge.probability(outcome) for edge in node.edges) / len(node.edges)


def outcome_probabilities(node: GameTreeNode) -> Dict[Outcome, float]:
    return {outcome: outcome_probability(node, outcome) for outcome in Outcome}
