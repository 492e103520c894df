"""Shared fixtures for the maze race tests."""

import itertools

import pytest

from mazerace.utils.maze_factory import grid_from_rows


class FixedRNG:
    """Random source replaying fixed sequences; shuffle keeps the order."""

    def __init__(self, floats=(0.5,), ints=(0,), picks=(0,)):
        self._floats = itertools.cycle(floats)
        self._ints = itertools.cycle(ints)
        self._picks = itertools.cycle(picks)
        self.random_calls = 0

    def random(self):
        self.random_calls += 1
        return next(self._floats)

    def randint(self, a, b):
        return min(max(a, next(self._ints)), b)

    def choice(self, seq):
        return seq[next(self._picks) % len(seq)]

    def shuffle(self, seq):
        pass


@pytest.fixture
def fixed_rng():
    """Factory for fixed-sequence random sources."""
    return FixedRNG


@pytest.fixture
def corridor_grid():
    """Corridor with a junction at (1, 3) and a dead end below it."""
    return grid_from_rows([
        "#######",
        "#.....#",
        "###.###",
        "###.###",
        "#######",
    ])


@pytest.fixture(scope="session")
def qapp():
    """Core application for controller tests (no widgets needed)."""
    from PySide6.QtCore import QCoreApplication
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
