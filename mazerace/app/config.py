"""Configuration for the race driving loop."""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_LEADERBOARD_URL = "http://localhost:5000/leaderboard"
DEFAULT_LEADERBOARD_PATH = Path.home() / ".mazerace" / "leaderboard.json"


@dataclass
class RaceConfig:
    """Timing and collaborator settings for a race."""
    tick_interval_ms: int = 1000
    countdown_seconds: int = 3
    animation_ms: int = 500
    finish_delay_ms: int = 500
    computer_lookahead: int = 3
    max_generation_attempts: int = 10
    leaderboard_url: str = DEFAULT_LEADERBOARD_URL
    leaderboard_path: Path = DEFAULT_LEADERBOARD_PATH

    def __post_init__(self):
        if self.tick_interval_ms <= 0 or self.animation_ms <= 0:
            raise ValueError("Timer intervals must be positive")
        if self.countdown_seconds < 0:
            raise ValueError(f"Countdown must be non-negative, got {self.countdown_seconds}")
        if self.computer_lookahead < 1:
            raise ValueError(f"Computer lookahead must be at least 1, got {self.computer_lookahead}")
        if self.max_generation_attempts < 1:
            raise ValueError("At least one generation attempt is required")
        self.leaderboard_path = Path(self.leaderboard_path)

    @classmethod
    def from_env(cls, **overrides) -> "RaceConfig":
        """Defaults, then MAZERACE_* environment variables, then explicit overrides."""
        values = {}
        if "MAZERACE_LEADERBOARD_URL" in os.environ:
            values["leaderboard_url"] = os.environ["MAZERACE_LEADERBOARD_URL"]
        if "MAZERACE_LEADERBOARD_PATH" in os.environ:
            values["leaderboard_path"] = Path(os.environ["MAZERACE_LEADERBOARD_PATH"])
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
