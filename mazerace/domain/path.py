"""Path reconstruction and validation utilities."""

from typing import Dict, List, Optional
from .types import Cell, Direction, Grid
from .neighbors import direction_between, is_adjacent


def reconstruct_path(parents: Dict[Cell, Optional[Cell]], goal: Cell) -> List[Cell]:
    """
    Reconstruct the path from goal back to start using predecessor links.
    Returns the path from start to goal (reversed from the parent chain).
    """
    path = []
    current: Optional[Cell] = goal

    while current is not None:
        path.append(current)
        current = parents.get(current)

    return list(reversed(path))


def validate_path(path: List[Cell], grid: Grid) -> bool:
    """
    Validate that a path is walkable and connected.
    Every cell must be open and every consecutive pair 4-adjacent.
    """
    if not path:
        return False

    if not all(grid.is_open(cell) for cell in path):
        return False

    return all(is_adjacent(path[i - 1], path[i]) for i in range(1, len(path)))


def path_directions(path: List[Cell]) -> List[Direction]:
    """Direction vector of each segment of the path."""
    return [direction_between(path[i - 1], path[i]) for i in range(1, len(path))]
