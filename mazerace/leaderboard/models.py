"""Leaderboard data models and in-memory ranking."""

from typing import List

from pydantic import BaseModel, Field, field_validator


class ScoreEntry(BaseModel):
    name: str = Field(..., max_length=40)
    score: float = Field(..., ge=0)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value


class LeaderboardStore:
    """Top-N scores held in memory, best first."""

    def __init__(self, size: int = 10):
        if size < 1:
            raise ValueError(f"Leaderboard size must be at least 1, got {size}")
        self.size = size
        self._entries: List[ScoreEntry] = []

    def add(self, entry: ScoreEntry) -> List[ScoreEntry]:
        """Insert an entry and return the new ranking."""
        self._entries.append(entry)
        # sort is stable, so equal scores keep submission order
        self._entries.sort(key=lambda e: e.score, reverse=True)
        del self._entries[self.size:]
        return self.top()

    def top(self) -> List[ScoreEntry]:
        return list(self._entries)
