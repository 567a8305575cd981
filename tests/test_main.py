import argparse

import pytest

from wrapsnake.config import Config, TICK_MS
from wrapsnake.highscore import HighScoreStore
from wrapsnake.main import parse_args, save_high_score


def test_defaults():
    cfg = Config.from_args(parse_args([]))
    assert cfg.tick_ms == TICK_MS
    assert cfg.seed is None
    assert cfg.log_level == "INFO"


def test_overrides(tmp_path):
    path = str(tmp_path / "hs")
    args = parse_args(["--seed", "5", "--tick-ms", "80", "--high-score-file", path, "--log-level", "debug"])
    cfg = Config.from_args(args)
    assert (cfg.seed, cfg.tick_ms, cfg.high_score_path, cfg.log_level) == (5, 80, path, "DEBUG")


def test_non_positive_tick_rejected():
    with pytest.raises(ValueError):
        Config.from_args(argparse.Namespace(tick_ms=0))


def test_save_failure_is_logged(tmp_path, caplog):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    # parent "directory" is a regular file, so makedirs fails
    store = HighScoreStore(str(blocker / "hs"))
    save_high_score(store, 40)
    assert "Could not save high score" in caplog.text


def test_save_keeps_the_better_score(tmp_path):
    store = HighScoreStore(str(tmp_path / "hs"))
    save_high_score(store, 40)
    save_high_score(store, 30)
    assert store.load() == 40
    save_high_score(store, 90)
    assert store.load() == 90
