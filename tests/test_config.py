from pathlib import Path

import pytest

from mazerace.__main__ import parse_args
from mazerace.app.config import DEFAULT_LEADERBOARD_URL, RaceConfig


def test_defaults():
    config = RaceConfig()
    assert config.tick_interval_ms == 1000
    assert config.countdown_seconds == 3
    assert config.computer_lookahead == 3
    assert config.leaderboard_url == DEFAULT_LEADERBOARD_URL


@pytest.mark.parametrize("kwargs", [
    {"tick_interval_ms": 0},
    {"animation_ms": -5},
    {"countdown_seconds": -1},
    {"computer_lookahead": 0},
    {"max_generation_attempts": 0},
])
def test_validation(kwargs):
    with pytest.raises(ValueError):
        RaceConfig(**kwargs)


def test_environment_then_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("MAZERACE_LEADERBOARD_URL", "http://env.test/leaderboard")
    monkeypatch.setenv("MAZERACE_LEADERBOARD_PATH", str(tmp_path / "board.json"))

    config = RaceConfig.from_env(leaderboard_url=None)
    assert config.leaderboard_url == "http://env.test/leaderboard"
    assert config.leaderboard_path == Path(tmp_path / "board.json")

    config = RaceConfig.from_env(leaderboard_url="http://cli.test/leaderboard")
    assert config.leaderboard_url == "http://cli.test/leaderboard"


def test_command_line_arguments():
    args = parse_args(["--seed", "7", "--rows", "31", "--carve-chance", "0.3"])
    assert args.seed == 7
    assert args.rows == 31
    assert args.cols == 21
    assert args.carve_chance == 0.3
    assert args.leaderboard_url is None
