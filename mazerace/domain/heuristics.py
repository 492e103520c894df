"""Heuristic functions for A* pathfinding."""

from .types import Cell


def manhattan_distance(start: Cell, target: Cell) -> int:
    """
    Manhattan (L1) distance heuristic.
    Admissible for 4-directional movement with unit edge cost.
    """
    return abs(start[0] - target[0]) + abs(start[1] - target[1])
