import pytest

from mazerace.domain.movement import computer_pause_ms, plan_computer_run, resolve_run
from mazerace.domain.types import UP, RIGHT, DOWN, LEFT
from mazerace.utils.maze_factory import grid_from_rows

CORRIDOR_PATH = [(1, 1), (1, 2), (1, 3), (2, 3), (3, 3)]


class MaxRNG:
    """Always draws the upper bound."""

    def randint(self, a, b):
        return b


def test_run_stops_after_junction(corridor_grid):
    assert resolve_run(corridor_grid, (1, 1), RIGHT, (3, 3)) == [(1, 2), (1, 3)]


def test_run_stops_at_wall(corridor_grid):
    assert resolve_run(corridor_grid, (1, 3), RIGHT, (3, 3)) == [(1, 4), (1, 5)]
    assert resolve_run(corridor_grid, (1, 3), DOWN, (1, 1)) == [(2, 3), (3, 3)]


def test_run_stops_at_goal(corridor_grid):
    assert resolve_run(corridor_grid, (1, 1), RIGHT, (1, 2)) == [(1, 2)]


def test_blocked_first_step_is_empty(corridor_grid):
    assert resolve_run(corridor_grid, (1, 1), UP, (3, 3)) == []
    assert resolve_run(corridor_grid, (1, 1), LEFT, (3, 3)) == []


def test_invalid_direction(corridor_grid):
    with pytest.raises(ValueError):
        resolve_run(corridor_grid, (1, 1), (1, 1), (3, 3))


def test_computer_run_stops_at_junction(corridor_grid):
    run = plan_computer_run(corridor_grid, CORRIDOR_PATH, 0, (3, 3))
    assert run.cells == ((1, 2), (1, 3))
    assert run.end == (1, 3)
    assert not run.straight


def test_computer_run_reaching_goal_counts_as_straight(corridor_grid):
    run = plan_computer_run(corridor_grid, CORRIDOR_PATH, 2, (3, 3))
    assert run.cells == ((2, 3), (3, 3))
    assert run.straight


def test_computer_run_covers_full_lookahead():
    grid = grid_from_rows([
        "#########",
        "#.......#",
        "#########",
    ])
    path = [(1, col) for col in range(1, 8)]
    run = plan_computer_run(grid, path, 0, (1, 7), lookahead=3)
    assert run.cells == ((1, 2), (1, 3), (1, 4))
    assert run.straight

    tail = plan_computer_run(grid, path, 5, (1, 7), lookahead=3)
    assert tail.cells == ((1, 7),)


def test_computer_run_needs_a_next_cell(corridor_grid):
    with pytest.raises(ValueError):
        plan_computer_run(corridor_grid, CORRIDOR_PATH, 4, (3, 3))


def test_pause_grows_with_options():
    rng = MaxRNG()
    assert computer_pause_ms(1, False, rng) == 13
    assert computer_pause_ms(2, False, rng) == 30 + 24
    assert computer_pause_ms(3, False, rng) == 180 + 72
    assert computer_pause_ms(1, True, rng) == 6.5
    assert computer_pause_ms(0, False, rng) == 13
