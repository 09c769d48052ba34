"""Game tree construction and outcome aggregation."""

from .builder import Edge, GameTreeNode, build, outcome_probabilities, outcome_probability
from .stats import TreeStats, collect_tree_stats

__all__ = [
    "Edge",
    "GameTreeNode",
    "build",
    "outcome_probability",
    "outcome_probabilities",
    "TreeStats",
    "collect_tree_stats",
]
