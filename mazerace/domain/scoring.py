"""Race scoring: compare the player's run against the computer's."""

from dataclasses import dataclass
from typing import List


def _require_positive(**values: float) -> None:
    for name, value in values.items():
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")


def calculate_score(player_moves: int, player_time: float,
                    computer_moves: int, computer_time: float) -> int:
    """
    Score rewarding a player who is both faster and more efficient.

    score = 1000 * (computer_time / player_time)^2 * (computer_moves / player_moves)^2,
    rounded and clamped at zero. Matching the computer exactly scores 1000.

    Raises:
        ValueError: If any move count or time is not positive
    """
    _require_positive(player_moves=player_moves, player_time=player_time,
                      computer_moves=computer_moves, computer_time=computer_time)

    time_impact = (computer_time / player_time) ** 2
    move_impact = (computer_moves / player_moves) ** 2
    return max(0, round(1000 * time_impact * move_impact))


def percentage_difference(player_value: float, computer_value: float) -> float:
    """Relative difference of the player's value against the computer's, in percent."""
    _require_positive(computer_value=computer_value)
    return (player_value - computer_value) / computer_value * 100


@dataclass(frozen=True)
class RaceResult:
    """Outcome of one completed race."""
    player_moves: int
    player_time: float
    computer_moves: int
    computer_time: float

    def __post_init__(self):
        _require_positive(player_moves=self.player_moves, player_time=self.player_time,
                          computer_moves=self.computer_moves, computer_time=self.computer_time)

    @property
    def path_difference_pct(self) -> float:
        return percentage_difference(self.player_moves, self.computer_moves)

    @property
    def time_difference_pct(self) -> float:
        return percentage_difference(self.player_time, self.computer_time)

    @property
    def score(self) -> int:
        return calculate_score(self.player_moves, self.player_time,
                               self.computer_moves, self.computer_time)

    def summary(self) -> List[str]:
        """Human-readable comparison lines for the results panel."""
        path_diff = self.path_difference_pct
        time_diff = self.time_difference_pct

        if abs(path_diff) < 1:
            path_message = "Your path was the same length as the computer."
        elif path_diff > 0:
            path_message = f"Your path was {abs(path_diff):.1f}% longer than the computer."
        else:
            path_message = f"Your path was {abs(path_diff):.1f}% shorter than the computer."

        if abs(time_diff) < 1:
            time_message = "You solved the maze at the same speed as the computer."
        elif time_diff > 0:
            time_message = f"You solved the maze {abs(time_diff):.1f}% slower than the computer."
        else:
            time_message = f"You solved the maze {abs(time_diff):.1f}% faster than the computer."

        return [path_message, time_message]
