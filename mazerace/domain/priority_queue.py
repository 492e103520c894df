"""Frontier queue for A* search with stable tie-breaking."""

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple


@dataclass(order=True)
class PriorityItem:
    """
    Entry in the frontier.

    Ordered by priority, then by insertion sequence, so entries with equal
    priority come out in the order they were discovered.
    """
    priority: int
    sequence: int
    data: Any = field(compare=False)


class FrontierQueue:
    """
    Binary heap frontier that tolerates duplicate entries.

    Pushing an item that is already queued adds a second entry instead of
    updating the first; the search's cost table decides which entries are
    still meaningful.
    """

    def __init__(self):
        self._heap: List[PriorityItem] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        """Check if the queue is empty."""
        return not self._heap

    def put(self, data: Any, priority: int) -> None:
        """Add an entry with the given priority."""
        heapq.heappush(self._heap, PriorityItem(priority, next(self._counter), data))

    def get(self) -> Optional[Tuple[Any, int]]:
        """
        Remove and return (data, priority) of the lowest-priority entry.
        Returns None if queue is empty.
        """
        if not self._heap:
            return None
        entry = heapq.heappop(self._heap)
        return entry.data, entry.priority

    def peek(self) -> Optional[Tuple[Any, int]]:
        """Look at the next entry without removing it."""
        if not self._heap:
            return None
        entry = self._heap[0]
        return entry.data, entry.priority

    def clear(self):
        """Remove all entries from the queue."""
        self._heap.clear()
