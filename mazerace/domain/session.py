"""Per-round race state: the maze, the solution, and both traversals."""

from dataclasses import dataclass, replace
from functools import cached_property
from typing import FrozenSet, Tuple
from .types import Cell, CellKind, Maze
from .scoring import RaceResult


@dataclass(frozen=True)
class Traversal:
    """Progress of one party through the maze."""
    position: Cell
    trail: Tuple[Cell, ...] = ()
    moves: int = 0
    elapsed_seconds: int = 0
    finished: bool = False

    def step_to(self, cell: Cell) -> "Traversal":
        """Move one cell, leaving the current position on the trail."""
        if self.finished:
            raise ValueError("Traversal already finished")
        return replace(
            self,
            position=cell,
            trail=self.trail + (self.position,),
            moves=self.moves + 1,
        )

    def tick(self) -> "Traversal":
        """Advance the elapsed-time counter by one second."""
        if self.finished:
            return self
        return replace(self, elapsed_seconds=self.elapsed_seconds + 1)

    def finish(self) -> "Traversal":
        """
        Freeze the traversal. Elapsed time is rounded up to one second so a
        finished run always has a positive time.
        """
        return replace(self, finished=True, elapsed_seconds=max(self.elapsed_seconds, 1))

    @cached_property
    def visited(self) -> FrozenSet[Cell]:
        return frozenset(self.trail)


@dataclass(frozen=True)
class GameSession:
    """Immutable snapshot of one round; updates return new sessions."""
    maze: Maze
    solution: Tuple[Cell, ...]
    player: Traversal
    computer: Traversal
    show_solution: bool = False

    @classmethod
    def new(cls, maze: Maze, solution) -> "GameSession":
        """Fresh round with both parties on the start cell."""
        return cls(
            maze=maze,
            solution=tuple(solution),
            player=Traversal(position=maze.start, trail=(maze.start,)),
            computer=Traversal(position=maze.start),
        )

    def with_player(self, player: Traversal) -> "GameSession":
        return replace(self, player=player)

    def with_computer(self, computer: Traversal) -> "GameSession":
        return replace(self, computer=computer)

    def toggle_solution(self) -> "GameSession":
        return replace(self, show_solution=not self.show_solution)

    @property
    def player_at_goal(self) -> bool:
        return self.player.position == self.maze.goal

    @property
    def computer_at_goal(self) -> bool:
        return self.computer.position == self.maze.goal

    def race_result(self) -> RaceResult:
        """
        Build the result once both parties have finished.

        Raises:
            ValueError: If either traversal is still running
        """
        if not (self.player.finished and self.computer.finished):
            raise ValueError("Both player and computer must finish before scoring")
        return RaceResult(
            player_moves=self.player.moves,
            player_time=self.player.elapsed_seconds,
            computer_moves=self.computer.moves,
            computer_time=self.computer.elapsed_seconds,
        )


def classify_cell(session: GameSession, cell: Cell) -> CellKind:
    """
    Classification of a cell for rendering.

    Priority: start, end, wall, computer, player, computer path,
    player path, solver path (when shown), open.
    """
    maze = session.maze
    if cell == maze.start:
        return "start"
    if cell == maze.goal:
        return "end"
    if not maze.grid.is_open(cell):
        return "wall"
    if cell == session.computer.position:
        return "computer"
    if cell == session.player.position:
        return "player"
    if cell in session.computer.visited:
        return "computer-path"
    if cell in session.player.visited:
        return "player-path"
    if session.show_solution and cell in session.solution:
        return "solver-path"
    return "open"
