import pytest

from mazerace.domain.astar import AStarSolver, find_path
from mazerace.domain.heuristics import manhattan_distance
from mazerace.domain.path import validate_path, path_directions
from mazerace.domain.types import RIGHT, DOWN
from mazerace.utils.maze_factory import grid_from_rows


@pytest.fixture
def winding_grid():
    return grid_from_rows([
        "#####",
        "#...#",
        "###.#",
        "#...#",
        "#####",
    ])


def test_manhattan_distance():
    assert manhattan_distance((1, 1), (4, 3)) == 5
    assert manhattan_distance((2, 2), (2, 2)) == 0


def test_single_route(winding_grid):
    result = find_path(winding_grid, (1, 1), (3, 1))
    assert result.found
    assert result.path == [(1, 1), (1, 2), (1, 3), (2, 3), (3, 3), (3, 2), (3, 1)]
    assert result.moves == 6
    assert validate_path(result.path, winding_grid)


def test_shortest_of_two_routes():
    grid = grid_from_rows([
        "#######",
        "#.....#",
        "#.###.#",
        "#.###.#",
        "#.....#",
        "#######",
    ])
    result = find_path(grid, (1, 1), (4, 2))
    assert result.path == [(1, 1), (2, 1), (3, 1), (4, 1), (4, 2)]


def _pop_order(grid, start, goal):
    solver = AStarSolver()
    solver.initialize(grid, start, goal)
    popped = []
    result = None
    while result is None:
        result = solver.step()
        popped.append(solver.current)
    return solver, result, popped


def test_ties_resolve_in_direction_order():
    grid = grid_from_rows([
        "#####",
        "#...#",
        "#...#",
        "#...#",
        "#####",
    ])
    _, result, popped = _pop_order(grid, (1, 1), (3, 3))
    assert popped == [(1, 1), (1, 2), (2, 1), (1, 3), (2, 2), (3, 1), (2, 3), (3, 2), (3, 3)]
    assert result.nodes_explored == 9
    assert result.path == [(1, 1), (1, 2), (1, 3), (2, 3), (3, 3)]
    assert path_directions(result.path) == [RIGHT, RIGHT, DOWN, DOWN]


def test_cheaper_route_replaces_queued_cost():
    # (3, 3) is first reached from (3, 4) at cost 6, then from (3, 2) at cost 4
    # before its first entry is popped
    grid = grid_from_rows([
        "########",
        "#....#.#",
        "#.##.#.#",
        "#......#",
        "########",
    ])
    solver, result, popped = _pop_order(grid, (1, 1), (1, 6))

    assert popped.index((3, 4)) < popped.index((3, 2)) < popped.index((3, 3))
    assert solver.costs[(3, 3)] == 4
    assert solver.parents[(3, 3)] == (3, 2)
    # the superseded entry is still queued
    assert len(solver.frontier) == 1
    assert solver.frontier.peek() == ((3, 3), 11)

    assert result.moves == 9
    assert result.path == [(1, 1), (1, 2), (1, 3), (1, 4), (2, 4), (3, 4),
                           (3, 5), (3, 6), (2, 6), (1, 6)]
    assert result.nodes_explored == 14
    assert validate_path(result.path, grid)


def test_unreachable_goal():
    grid = grid_from_rows([
        "#####",
        "#.#.#",
        "#####",
    ])
    result = find_path(grid, (1, 1), (1, 3))
    assert not result.found
    assert result.path is None
    assert not result.success
    assert result.moves == 0
    assert result.nodes_explored == 1


def test_start_equals_goal(winding_grid):
    result = find_path(winding_grid, (1, 1), (1, 1))
    assert result.path == [(1, 1)]
    assert result.moves == 0


def test_out_of_bounds_endpoint_reports_no_path(winding_grid):
    result = find_path(winding_grid, (1, 1), (9, 9))
    assert not result.found
    assert result.nodes_explored == 0


def test_stepwise_search_matches_complete_run(winding_grid):
    solver = AStarSolver()
    with pytest.raises(ValueError):
        solver.step()

    solver.initialize(winding_grid, (1, 1), (3, 1))
    steps = 0
    result = None
    while result is None:
        result = solver.step()
        steps += 1

    assert result.path == find_path(winding_grid, (1, 1), (3, 1)).path
    assert steps == result.nodes_explored
    assert solver.current == (3, 1)


def test_validate_path_rejects_gaps_and_walls(winding_grid):
    assert not validate_path([], winding_grid)
    assert not validate_path([(1, 1), (1, 3)], winding_grid)
    assert not validate_path([(1, 1), (2, 1)], winding_grid)
