"""Random sources for maze carving, goal placement and computer pacing."""

import random
from typing import MutableSequence, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything the maze factory and the computer's pacing can draw from."""

    def random(self) -> float: ...

    def randint(self, a: int, b: int) -> int: ...

    def choice(self, seq: Sequence[T]) -> T: ...

    def shuffle(self, seq: MutableSequence) -> None: ...


class SeededRNG:
    """
    Reproducible random source.

    The same seed replays the same mazes, goals and computer pauses, so a
    round can be reproduced from its seed alone. A seed of None draws from
    system entropy.
    """

    def __init__(self, seed: Optional[int] = None):
        self.reseed(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def reseed(self, seed: Optional[int]):
        """Restart the sequence from a new seed."""
        self._seed = seed
        self._random = random.Random(seed)

    def random(self) -> float:
        """Float in [0.0, 1.0)."""
        return self._random.random()

    def randint(self, a: int, b: int) -> int:
        """Integer N with a <= N <= b."""
        return self._random.randint(a, b)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise ValueError("Cannot choose from an empty sequence")
        return self._random.choice(seq)

    def shuffle(self, seq: MutableSequence) -> None:
        self._random.shuffle(seq)

    def __repr__(self) -> str:
        return f"SeededRNG(seed={self._seed!r})"


# Shared source for callers that pass no rng
default_rng = SeededRNG()


def set_global_seed(seed: Optional[int]):
    """Reseed the shared source."""
    default_rng.reseed(seed)
