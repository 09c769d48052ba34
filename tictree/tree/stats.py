from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Set

from tictree.core import Outcome
from tictree.features import BoardKey, board_key, canonical_key

from .builder import GameTreeNode


@dataclass
class TreeStats:
    nodes: int = 0
    leaves: int = 0
    max_depth: int = 0
    leaf_outcomes: Dict[Outcome, int] = field(default_factory=dict)
    leaves_by_depth: Dict[int, int] = field(default_factory=dict)
    distinct_positions: int = 0
    canonical_positions: int = 0

    def as_dict(self) -> Dict[str, object]:
        return {
            "nodes": self.nodes,
            "leaves": self.leaves,
            "max_depth": self.max_depth,
            "leaf_outcomes": {outcome.value: count for outcome, count in self.leaf_outcomes.items()},
            "leaves_by_depth": {str(depth): count for depth, count in sorted(self.leaves_by_depth.items())},
            "distinct_positions": self.distinct_positions,
            "canonical_positions": self.canonical_positions,
        }


def collect_tree_stats(root: GameTreeNode) -> TreeStats:
    outcomes: Counter = Counter()
    depths: Counter = Counter()
    positions: Dict[BoardKey, GameTreeNode] = {}
    nodes = 0
    max_depth = 0

    for node in root.iter_nodes():
        nodes += 1
        depth = node.depth
        max_depth = max(max_depth, depth)
        positions.setdefault(board_key(node.board), node)
        if node.is_leaf:
            outcomes[node.board.outcome] += 1
            depths[depth] += 1

    canonical: Set[BoardKey] = {canonical_key(node.board) for node in positions.values()}

    return TreeStats(
        nodes=nodes,
        leaves=sum(outcomes.values()),
        max_depth=max_depth,
        leaf_outcomes={outcome: outcomes.get(outcome, 0) for outcome in Outcome},
        leaves_by_depth=dict(depths),
        distinct_positions=len(positions),
        canonical_positions=len(canonical),
    )
