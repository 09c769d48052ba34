#!/usr/bin/env python3
"""Enumerate every tic-tac-toe game from the empty board and report outcome odds.

Example:
  python scripts/enumerate_tree.py --config configs/enumerate.yaml
  python scripts/enumerate_tree.py --json --no-validate
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Dict, List, Optional

from tictree import (
    EnumerationConfig,
    GameTreeNode,
    Outcome,
    build,
    collect_tree_stats,
    load_config,
    new_board,
    outcome_probabilities,
    render_summary,
    render_tree,
    validate_tree,
)

logger = logging.getLogger("enumerate_tree")


def build_config(args: argparse.Namespace) -> EnumerationConfig:
    cfg = load_config(args.config)
    return cfg.with_overrides(
        render_tree=False if args.no_tree else None,
        validate=False if args.no_validate else None,
        tolerance=args.tolerance,
        log_level=args.log_level,
    )


def summarize(root: GameTreeNode) -> Dict[str, object]:
    probs = outcome_probabilities(root)
    stats = collect_tree_stats(root)
    return {
        "x_wins": probs[Outcome.X_WIN],
        "o_wins": probs[Outcome.O_WIN],
        "ties": probs[Outcome.TIE],
        "sum": sum(probs.values()),
        "stats": stats.as_dict(),
    }


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default="configs/enumerate.yaml")
    parser.add_argument("--no-tree", action="store_true", help="Skip the per-move tree rendering")
    parser.add_argument("--no-validate", action="store_true", help="Skip the post-build consistency check")
    parser.add_argument("--tolerance", type=float)
    parser.add_argument("--log-level")
    parser.add_argument("--json", action="store_true", help="Print a JSON summary instead of text")
    args = parser.parse_args(argv)

    cfg = build_config(args)
    logging.basicConfig(
        level=getattr(logging, cfg.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    root = build(new_board())
    if cfg.validate:
        checked = validate_tree(root, atol=cfg.tolerance)
        logger.info("Validated %d nodes", checked)

    if args.json:
        print(json.dumps(summarize(root), indent=2))
        return

    if cfg.render_tree:
        print(render_tree(root))
    print("\n\n" + render_summary(root))


if __name__ == "__main__":
    main()
