import argparse
import json

from tictree.core import Outcome, board_from_rows
from tictree.evaluation import PlayoutResult
from tictree.tree import build

from scripts.enumerate_tree import build_config, summarize
from scripts.estimate_random_play import compare


def test_summarize_is_json_serialisable():
    root = build(board_from_rows(["XO ", "XO ", "   "]))
    summary = summarize(root)

    assert abs(summary["sum"] - 1.0) < 1e-9
    assert summary["stats"]["nodes"] == sum(1 for _ in root.iter_nodes())
    json.dumps(summary)


def test_build_config_flags_override_file(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("render_tree: true\nvalidate: true\n", encoding="utf-8")
    args = argparse.Namespace(
        config=str(path), no_tree=True, no_validate=False, tolerance=None, log_level="WARNING"
    )

    cfg = build_config(args)

    assert cfg.render_tree is False
    assert cfg.validate is True
    assert cfg.log_level == "WARNING"


def test_compare_reports_errors():
    result = PlayoutResult(games_played=10, x_wins=6, o_wins=3, ties=1, average_length=7.0)
    exact = {Outcome.X_WIN: 0.5, Outcome.O_WIN: 0.3, Outcome.TIE: 0.2}

    report = compare(result, exact)

    assert report["games"] == 10
    assert abs(report["outcomes"]["x_win"]["abs_error"] - 0.1) < 1e-12
    assert report["outcomes"]["tie"]["empirical"] == 0.1
