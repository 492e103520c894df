"""Neighbor and direction helpers for 4-directional grid movement."""

from typing import List
from .types import Cell, Direction, Grid, DIRECTIONS


def step(cell: Cell, direction: Direction, distance: int = 1) -> Cell:
    """Cell reached by moving `distance` cells in `direction`."""
    return (cell[0] + direction[0] * distance, cell[1] + direction[1] * distance)


def direction_between(from_cell: Cell, to_cell: Cell) -> Direction:
    """
    Direction vector between two orthogonally adjacent cells.

    Raises:
        ValueError: If the cells are not 4-adjacent
    """
    delta = (to_cell[0] - from_cell[0], to_cell[1] - from_cell[1])
    if delta not in DIRECTIONS:
        raise ValueError(f"Invalid movement from {from_cell} to {to_cell}")
    return delta


def is_adjacent(a: Cell, b: Cell) -> bool:
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def is_junction(grid: Grid, cell: Cell) -> bool:
    """A cell with three or more open neighbors forces a movement decision."""
    return grid.count_open_neighbors(cell) >= 3


def get_neighbors(cell: Cell, grid: Grid) -> List[Cell]:
    """Open neighbors of a cell in up, right, down, left order."""
    return grid.open_neighbors(cell)
