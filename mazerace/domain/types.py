"""Core type definitions for maze generation and pathfinding."""

from dataclasses import dataclass
from typing import Iterator, List, Literal, Optional, Tuple
import numpy as np

# Grid position as (row, col)
Cell = Tuple[int, int]

# Cell occupancy values stored in the grid array
OPEN = 0
WALL = 1

# Cell classifications handed to the renderer
CellKind = Literal[
    "start", "end", "wall", "player", "computer",
    "player-path", "computer-path", "solver-path", "open"
]

# Fixed direction order: up, right, down, left
Direction = Tuple[int, int]
UP: Direction = (-1, 0)
RIGHT: Direction = (0, 1)
DOWN: Direction = (1, 0)
LEFT: Direction = (0, -1)
DIRECTIONS: Tuple[Direction, ...] = (UP, RIGHT, DOWN, LEFT)


class Grid:
    """
    Read-only ROWS x COLS occupancy grid.

    Backed by a numpy array where 1 marks a wall and 0 an open cell.
    Queries outside the grid answer False instead of raising.
    """

    def __init__(self, cells: np.ndarray):
        if cells.ndim != 2:
            raise ValueError(f"Grid must be two-dimensional, got shape {cells.shape}")
        self._cells = np.array(cells, dtype=np.uint8)
        self._cells.flags.writeable = False

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        return self._cells.shape[1]

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the underlying array."""
        return self._cells

    def is_valid_cell(self, cell: Cell) -> bool:
        """Check if cell is within grid bounds."""
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_open(self, cell: Cell) -> bool:
        """True for an in-bounds open cell."""
        return self.is_valid_cell(cell) and self._cells[cell] == OPEN

    def is_wall(self, cell: Cell) -> bool:
        """True for an in-bounds wall cell."""
        return self.is_valid_cell(cell) and self._cells[cell] == WALL

    def neighbors4(self, cell: Cell) -> List[Cell]:
        """In-bounds orthogonal neighbors in up, right, down, left order."""
        row, col = cell
        neighbors = []
        for dr, dc in DIRECTIONS:
            neighbor = (row + dr, col + dc)
            if self.is_valid_cell(neighbor):
                neighbors.append(neighbor)
        return neighbors

    def open_neighbors(self, cell: Cell) -> List[Cell]:
        """Open orthogonal neighbors in the fixed direction order."""
        return [n for n in self.neighbors4(cell) if self._cells[n] == OPEN]

    def count_open_neighbors(self, cell: Cell) -> int:
        return len(self.open_neighbors(cell))

    def open_cells(self) -> Iterator[Cell]:
        """Iterate open cells in row-major order."""
        for row, col in zip(*np.nonzero(self._cells == OPEN)):
            yield (int(row), int(col))

    def open_count(self) -> int:
        return int(np.count_nonzero(self._cells == OPEN))

    def to_text(self, wall: str = "#", open_: str = ".") -> str:
        """Render the grid as text, one line per row."""
        return "\n".join(
            "".join(wall if value == WALL else open_ for value in row)
            for row in self._cells
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self._cells.shape, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, open={self.open_count()})"


@dataclass(frozen=True)
class Maze:
    """A finished grid with its fixed start and per-round goal."""
    grid: Grid
    start: Cell
    goal: Cell


@dataclass
class MazeConfig:
    """Parameters for building one round's maze."""
    rows: int = 21
    cols: int = 21
    start: Cell = (3, 3)
    carve_chance: float = 0.16
    goal_jitter: int = 5
    repair_attempts: int = 1

    def __post_init__(self):
        if self.rows < 3 or self.cols < 3:
            raise ValueError(f"Maze must be at least 3x3, got {self.rows}x{self.cols}")
        row, col = self.start
        if not (0 < row < self.rows - 1 and 0 < col < self.cols - 1):
            raise ValueError(f"Start {self.start} must be an interior cell")
        if not (0.0 <= self.carve_chance <= 1.0):
            raise ValueError(f"Carve chance must be between 0.0 and 1.0, got {self.carve_chance}")
        if self.goal_jitter < 0:
            raise ValueError(f"Goal jitter must be non-negative, got {self.goal_jitter}")
        if self.repair_attempts < 1:
            raise ValueError(f"Repair attempts must be at least 1, got {self.repair_attempts}")
        # Smallest goal offset must still land inside the grid
        if self.rows - (row + self.goal_jitter) < 0 or self.cols - (col + self.goal_jitter) < 0:
            raise ValueError("Goal jitter pushes the goal outside the grid")


@dataclass
class PathfindingResult:
    """Result of a pathfinding operation."""
    path: Optional[List[Cell]] = None
    nodes_explored: int = 0
    found: bool = False

    @property
    def success(self) -> bool:
        """Whether pathfinding was successful."""
        return self.found and self.path is not None and len(self.path) > 0

    @property
    def moves(self) -> int:
        """Number of edges traversed along the path."""
        return len(self.path) - 1 if self.success else 0
