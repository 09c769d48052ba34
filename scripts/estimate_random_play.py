#!/usr/bin/env python3
"""Compare Monte Carlo random playouts with the exact game tree probabilities."""

from __future__ import annotations

import argparse
import json
import logging
from typing import Dict, List, Optional

from tictree import (
    Outcome,
    PlayoutResult,
    build,
    load_config,
    new_board,
    outcome_probabilities,
    simulate_random_games,
)

logger = logging.getLogger("estimate_random_play")


def compare(result: PlayoutResult, exact: Dict[Outcome, float]) -> Dict[str, object]:
    empirical = result.frequencies()
    return {
        "games": result.games_played,
        "average_length": result.average_length,
        "outcomes": {
            outcome.value: {
                "empirical": empirical[outcome],
                "exact": exact[outcome],
                "abs_error": abs(empirical[outcome] - exact[outcome]),
            }
            for outcome in Outcome
        },
    }


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default="configs/enumerate.yaml")
    parser.add_argument("--episodes", type=int)
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)

    cfg = load_config(args.config).with_overrides(playout_episodes=args.episodes, seed=args.seed)
    logging.basicConfig(
        level=getattr(logging, cfg.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    exact = outcome_probabilities(build(new_board()))
    logger.info("Simulating %d random games (seed=%s)", cfg.playout_episodes, cfg.seed)
    result = simulate_random_games(cfg.playout_episodes, seed=cfg.seed)
    print(json.dumps(compare(result, exact), indent=2))


if __name__ == "__main__":
    main()
