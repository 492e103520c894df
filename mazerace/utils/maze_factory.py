"""Maze factory for carving, repairing, and building maze grids."""

import logging
from typing import Iterator, List, Optional
import numpy as np

from ..domain.types import Cell, Grid, Maze, MazeConfig, DIRECTIONS, OPEN, WALL
from ..domain.neighbors import step
from .rng import RandomSource, default_rng

logger = logging.getLogger(__name__)


class MazeBuilder:
    """
    Mutable all-wall grid used while a maze is being carved.

    `build()` hands the finished cells over as an immutable Grid; the
    builder accepts no further carving afterwards.
    """

    def __init__(self, rows: int, cols: int):
        if rows < 3 or cols < 3:
            raise ValueError(f"Grid dimensions must be at least 3x3, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._cells: Optional[np.ndarray] = np.full((rows, cols), WALL, dtype=np.uint8)

    def _require_open_builder(self) -> np.ndarray:
        if self._cells is None:
            raise RuntimeError("Maze has already been built")
        return self._cells

    def is_valid_cell(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_interior(self, cell: Cell) -> bool:
        """True for cells off the outer border."""
        row, col = cell
        return 0 < row < self.rows - 1 and 0 < col < self.cols - 1

    def is_wall(self, cell: Cell) -> bool:
        return self.is_valid_cell(cell) and self._require_open_builder()[cell] == WALL

    def is_open(self, cell: Cell) -> bool:
        return self.is_valid_cell(cell) and self._require_open_builder()[cell] == OPEN

    def carve(self, cell: Cell) -> None:
        """Open a cell."""
        if not self.is_valid_cell(cell):
            raise ValueError(f"Cannot carve {cell} outside a {self.rows}x{self.cols} grid")
        self._require_open_builder()[cell] = OPEN

    def build(self) -> Grid:
        """Transfer the carved cells into an immutable Grid."""
        cells = self._require_open_builder()
        self._cells = None
        return Grid(cells)


def carve_maze(builder: MazeBuilder, start: Cell, goal: Cell,
               carve_chance: float, rng: Optional[RandomSource] = None) -> None:
    """
    Carve a perfect maze on the 2-step lattice with optional extra loops.

    From each carved cell the four directions are visited in shuffled order.
    A cell two steps away that is still a wall gets opened together with the
    cell in between, and carving continues from there. After each direction
    has been handled, the adjacent cell in that direction is opened with
    probability `carve_chance`, provided it is interior and is neither the
    start nor the goal.

    Args:
        builder: All-wall builder to carve into
        start: Cell where carving begins
        goal: Goal cell, opened up front
        carve_chance: Probability of each extra loop-making opening
        rng: Random number generator to use (uses default if None)
    """
    if rng is None:
        rng = default_rng

    builder.carve(start)
    builder.carve(goal)

    def visit(cell: Cell) -> Iterator[Cell]:
        builder.carve(cell)
        directions = list(DIRECTIONS)
        rng.shuffle(directions)

        for direction in directions:
            far = step(cell, direction, 2)
            if builder.is_wall(far):
                builder.carve(step(cell, direction))
                yield far

            if rng.random() < carve_chance:
                adjacent = step(cell, direction)
                if builder.is_interior(adjacent) and adjacent != start and adjacent != goal:
                    builder.carve(adjacent)

    # Each generator resumes only after the cell it yielded is fully carved,
    # which reproduces the recursive visiting order without deep recursion.
    stack: List[Iterator[Cell]] = [visit(start)]
    while stack:
        try:
            far = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue
        stack.append(visit(far))


def ensure_goal_reachable(builder: MazeBuilder, goal: Cell,
                          rng: Optional[RandomSource] = None,
                          max_attempts: int = 1) -> bool:
    """
    Give an enclosed goal an open neighbor.

    When none of the goal's four orthogonal neighbors is open, one of the
    four is picked at random and carved if it is an in-bounds wall. A pick
    that lands outside the grid carves nothing, so a single attempt can
    leave the goal enclosed; `max_attempts` bounds how many picks are made.

    Returns:
        True if the goal ends with at least one open neighbor
    """
    if rng is None:
        rng = default_rng

    row, col = goal
    surroundings = [(row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)]

    for _ in range(max_attempts):
        if any(builder.is_open(cell) for cell in surroundings):
            return True

        chosen = rng.choice(surroundings)
        if builder.is_wall(chosen):
            builder.carve(chosen)

    accessible = any(builder.is_open(cell) for cell in surroundings)
    if not accessible:
        logger.warning("Goal %s is still enclosed after %d repair attempt(s)", goal, max_attempts)
    return accessible


def generate_maze(rows: int, cols: int, start: Cell, goal: Cell,
                  carve_chance: float, rng: Optional[RandomSource] = None) -> Grid:
    """
    Carve a maze and return it as an immutable Grid.

    No reachability repair is applied; see `create_maze` for the full round.

    Raises:
        ValueError: If the dimensions are too small or start/goal are out of bounds
    """
    builder = MazeBuilder(rows, cols)
    for name, cell in (("Start", start), ("Goal", goal)):
        if not builder.is_valid_cell(cell):
            raise ValueError(f"{name} cell {cell} is out of bounds")

    carve_maze(builder, start, goal, carve_chance, rng)
    return builder.build()


def choose_goal(config: MazeConfig, rng: Optional[RandomSource] = None) -> Cell:
    """Pick the round's goal at a random offset from the far corner."""
    if rng is None:
        rng = default_rng

    row = config.rows - (config.start[0] + rng.randint(0, config.goal_jitter))
    col = config.cols - (config.start[1] + rng.randint(0, config.goal_jitter))
    return (row, col)


def create_maze(config: Optional[MazeConfig] = None,
                rng: Optional[RandomSource] = None) -> Maze:
    """
    Build one round's maze: choose the goal, carve, repair, and freeze.

    Args:
        config: Maze parameters (defaults to the standard 21x21 maze)
        rng: Random number generator to use

    Returns:
        Maze with its immutable grid, start and goal
    """
    if config is None:
        config = MazeConfig()
    if rng is None:
        rng = default_rng

    goal = choose_goal(config, rng)
    builder = MazeBuilder(config.rows, config.cols)
    carve_maze(builder, config.start, goal, config.carve_chance, rng)
    ensure_goal_reachable(builder, goal, rng, config.repair_attempts)
    grid = builder.build()

    logger.debug(
        "Generated %dx%d maze, start=%s goal=%s open=%d",
        config.rows, config.cols, config.start, goal, grid.open_count(),
    )
    return Maze(grid=grid, start=config.start, goal=goal)


def grid_from_rows(rows: List[str], wall: str = "#") -> Grid:
    """
    Build a Grid from text rows, e.g. ["#####", "#...#", "#####"].
    Any character other than `wall` is open.
    """
    if not rows or any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("Rows must be non-empty and of equal length")

    cells = np.array(
        [[WALL if ch == wall else OPEN for ch in row] for row in rows],
        dtype=np.uint8,
    )
    return Grid(cells)
