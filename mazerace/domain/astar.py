"""Core A* pathfinding algorithm implementation."""

import logging
from typing import Dict, Optional
from .types import Cell, Grid, PathfindingResult
from .priority_queue import FrontierQueue
from .heuristics import manhattan_distance
from .neighbors import get_neighbors
from .path import reconstruct_path

logger = logging.getLogger(__name__)


class AStarSolver:
    """
    A* search over the open cells of a grid with unit edge cost.

    Frontier priority is cost-so-far plus Manhattan distance to the goal.
    A node is pushed again whenever a strictly cheaper cost is found for it;
    stale frontier entries are left in place and re-expanded harmlessly.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Reset the algorithm state."""
        self.frontier = FrontierQueue()
        self.costs: Dict[Cell, int] = {}
        self.parents: Dict[Cell, Optional[Cell]] = {}
        self.grid: Optional[Grid] = None
        self.start: Optional[Cell] = None
        self.goal: Optional[Cell] = None
        self.nodes_explored = 0
        self.current: Optional[Cell] = None

    def initialize(self, grid: Grid, start: Cell, goal: Cell):
        """Initialize the search with start and goal positions."""
        if not grid.is_valid_cell(start):
            raise ValueError(f"Start cell {start} is out of bounds")
        if not grid.is_valid_cell(goal):
            raise ValueError(f"Goal cell {goal} is out of bounds")

        self.reset()
        self.grid = grid
        self.start = start
        self.goal = goal

        self.costs[start] = 0
        self.parents[start] = None
        self.frontier.put(start, 0)

    def step(self) -> Optional[PathfindingResult]:
        """
        Execute one pop-and-relax step of the search.
        Returns PathfindingResult if the search is complete, None otherwise.
        """
        if self.grid is None or self.start is None or self.goal is None:
            raise ValueError("Algorithm not initialized")

        entry = self.frontier.get()
        if entry is None:
            return PathfindingResult(found=False, nodes_explored=self.nodes_explored)

        current, _ = entry
        self.current = current
        self.nodes_explored += 1

        if current == self.goal:
            return PathfindingResult(
                path=reconstruct_path(self.parents, self.goal),
                found=True,
                nodes_explored=self.nodes_explored,
            )

        new_cost = self.costs[current] + 1
        for neighbor in get_neighbors(current, self.grid):
            if neighbor not in self.costs or new_cost < self.costs[neighbor]:
                self.costs[neighbor] = new_cost
                self.parents[neighbor] = current
                self.frontier.put(neighbor, new_cost + manhattan_distance(neighbor, self.goal))

        return None

    def run_complete(self) -> PathfindingResult:
        """
        Run the search until the goal is popped or the frontier empties.
        Returns the final PathfindingResult.
        """
        while True:
            result = self.step()
            if result is not None:
                return result


def find_path(grid: Grid, start: Cell, goal: Cell) -> PathfindingResult:
    """
    Convenience function to run A* from start to goal.

    Args:
        grid: Finished maze grid (read only)
        start: Starting cell
        goal: Goal cell

    Returns:
        PathfindingResult; `found` is False when the goal is unreachable
        or either endpoint lies outside the grid
    """
    solver = AStarSolver()
    try:
        solver.initialize(grid, start, goal)
    except ValueError as e:
        logger.warning("Pathfinding rejected: %s", e)
        return PathfindingResult(found=False, nodes_explored=0)

    result = solver.run_complete()
    if not result.found:
        logger.warning(
            "No path from %s to %s after exploring %d nodes",
            start, goal, result.nodes_explored,
        )
    return result
