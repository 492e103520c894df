"""Leaderboard client with a local JSON fallback."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

Entry = Dict[str, object]


def _is_valid_entry(entry) -> bool:
    """A stored entry needs a string name and a numeric score."""
    if not isinstance(entry, dict):
        return False
    score = entry.get("score")
    return (isinstance(entry.get("name"), str)
            and isinstance(score, (int, float)) and not isinstance(score, bool))


class LocalLeaderboard:
    """
    Leaderboard kept in a JSON file when the service is unreachable.
    Each player keeps only their best score.
    """

    def __init__(self, path, size: int = 5):
        self.path = Path(path)
        self.size = size

    def load(self) -> List[Entry]:
        """Load entries, returning an empty list for a missing or unreadable file."""
        if not self.path.exists():
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read local leaderboard %s: %s", self.path, e)
            return []

        if not isinstance(data, list):
            logger.warning("Local leaderboard %s is not a list, ignoring it", self.path)
            return []

        entries = [entry for entry in data if _is_valid_entry(entry)]
        if len(entries) < len(data):
            logger.warning("Dropped %d malformed entries from %s", len(data) - len(entries), self.path)
        return entries

    def submit(self, name: str, score: float) -> List[Entry]:
        """Record a score and return the updated ranking."""
        entries = self.load()
        existing = next((entry for entry in entries if entry.get("name") == name), None)

        if existing is not None:
            if score > existing["score"]:
                existing["score"] = score
        else:
            entries.append({"name": name, "score": score})

        entries.sort(key=lambda e: e["score"], reverse=True)
        del entries[self.size:]

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(entries, f, ensure_ascii=False, indent=2)
        return entries


class LeaderboardClient:
    """Submits and fetches scores over HTTP, falling back to local storage."""

    def __init__(self, url: str, local: Optional[LocalLeaderboard] = None,
                 timeout: float = 2.0, session: Optional[requests.Session] = None):
        self.url = url
        self.local = local
        self.timeout = timeout
        self._session = session or requests.Session()

    def submit(self, name: str, score: float) -> List[Entry]:
        """Submit a score and return the ranking it produced."""
        try:
            response = self._session.post(
                self.url, json={"name": name, "score": score}, timeout=self.timeout
            )
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logger.warning("Leaderboard service unavailable (%s), saving locally", e)
            if self.local is None:
                return []
            return self.local.submit(name, score)

    def top(self) -> List[Entry]:
        """Fetch the current ranking."""
        try:
            response = self._session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logger.warning("Leaderboard service unavailable (%s), loading local scores", e)
            if self.local is None:
                return []
            return self.local.load()
