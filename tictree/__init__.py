"""Exhaustive tic-tac-toe game tree with uniform random play statistics."""

from . import core, features, tree, evaluation, validation, display
from .core import (
    Board,
    Mark,
    MoveError,
    Outcome,
    apply_move,
    legal_moves,
    new_board,
    successors,
)
from .tree import Edge, GameTreeNode, TreeStats, build, collect_tree_stats, outcome_probabilities, outcome_probability
from .evaluation import PlayoutResult, RandomPlayer, simulate_random_games
from .validation import TreeConsistencyError, validate_tree
from .display import render_board, render_summary, render_tree
from .config import EnumerationConfig, load_config

__all__ = [
    "core",
    "features",
    "tree",
    "evaluation",
    "validation",
    "display",
    "Board",
    "Mark",
    "MoveError",
    "Outcome",
    "apply_move",
    "legal_moves",
    "new_board",
    "successors",
    "Edge",
    "GameTreeNode",
    "TreeStats",
    "build",
    "collect_tree_stats",
    "outcome_probability",
    "outcome_probabilities",
    "PlayoutResult",
    "RandomPlayer",
    "simulate_random_games",
    "TreeConsistencyError",
    "validate_tree",
    "render_board",
    "render_summary",
    "render_tree",
    "EnumerationConfig",
    "load_config",
]
