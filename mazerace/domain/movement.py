"""Movement resolution for the player and pacing for the computer opponent."""

from dataclasses import dataclass
from typing import List, Sequence, Tuple
from .types import Cell, Direction, Grid, DIRECTIONS
from .neighbors import direction_between, is_junction, step


def resolve_run(grid: Grid, position: Cell, direction: Direction, goal: Cell) -> List[Cell]:
    """
    Cells entered when moving from `position` as far as possible in `direction`.

    Movement continues while the next cell is open and stops after entering
    a junction or the goal. An empty list means the first step is blocked.
    """
    if direction not in DIRECTIONS:
        raise ValueError(f"Invalid direction {direction}")

    run = []
    current = position
    while True:
        nxt = step(current, direction)
        if not grid.is_open(nxt):
            break

        current = nxt
        run.append(current)

        if is_junction(grid, current) or current == goal:
            break

    return run


@dataclass(frozen=True)
class ComputerRun:
    """One straight run of the computer along its solution path."""
    cells: Tuple[Cell, ...]
    straight: bool

    @property
    def end(self) -> Cell:
        return self.cells[-1]


def plan_computer_run(grid: Grid, path: Sequence[Cell], index: int,
                      goal: Cell, lookahead: int = 3) -> ComputerRun:
    """
    Plan the next run of at most `lookahead` cells starting at `path[index]`.

    The run follows the path while it keeps the direction of its first step,
    stopping after a junction or at the goal. `straight` is True only when
    the full lookahead was covered without such a stop.

    Raises:
        ValueError: If `index` is already the last cell of the path
    """
    if not 0 <= index < len(path) - 1:
        raise ValueError(f"No path cell after index {index}")

    direction = direction_between(path[index], path[index + 1])
    cells = []
    straight = True

    for i in range(index + 1, min(index + 1 + lookahead, len(path))):
        cell = path[i]
        if direction_between(path[i - 1], cell) != direction:
            straight = False
            break

        cells.append(cell)
        if cell == goal:
            break
        if is_junction(grid, cell):
            straight = False
            break
    else:
        if len(cells) < lookahead:
            straight = False

    return ComputerRun(cells=tuple(cells), straight=straight)


def computer_pause_ms(open_neighbors: int, straight: bool, rng) -> float:
    """
    Thinking pause before the computer takes a run.

    Grows steeply with the number of options at the run's end and is
    halved for straight stretches.
    """
    exponent = max(open_neighbors, 1) - 1
    pause = 5 * 6 ** exponent + rng.randint(0, 8 * 3 ** exponent)
    if straight:
        pause *= 0.5
    return pause
