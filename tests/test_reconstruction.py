"""Tests for cost-gradient path reconstruction."""

import math

import numpy as np
import pytest

from rastar.costs import move_cost
from rastar.errors import ReconstructionFailed
from rastar.grid_map import GridMap
from rastar.reconstruction import construct_path, path_cost
from rastar.search import SearchEngine


def plan(grid, start, goal):
    result = SearchEngine(grid).find_path(start, goal)
    return construct_path(grid, start, goal, result.costs), result


def test_open_grid_straight_diagonal(free_grid):
    cells, result = plan(free_grid, 0, 24)
    assert cells == [0, 6, 12, 18, 24]
    assert path_cost(free_grid, cells) == pytest.approx(4 * math.sqrt(2))
    assert path_cost(free_grid, cells) == pytest.approx(result.goal_cost)


def test_wall_forces_detour_through_gap(free_grid, wall_grid):
    cells, result = plan(wall_grid, 0, 24)
    gap = wall_grid.cell_index(4, 2)

    assert cells[0] == 0
    assert cells[-1] == 24
    assert gap in cells
    assert all(wall_grid.is_free(c) for c in cells)
    assert path_cost(wall_grid, cells) == pytest.approx(result.goal_cost)
    assert path_cost(wall_grid, cells) > 4 * math.sqrt(2)


def test_tie_prefers_cheaper_predecessor():
    # Two optimal routes from (0,0) to (2,1): via (1,0) or via (1,1).
    # Both explain the goal cost exactly; (1,0) has the lower recorded cost.
    grid = GridMap(np.ones((3, 3), dtype=bool))
    cells, _ = plan(grid, 0, 7)
    assert cells == [0, 3, 7]


def test_adjacent_start_goal(free_grid):
    cells, _ = plan(free_grid, 12, 13)
    assert cells == [12, 13]


@pytest.mark.parametrize("seed", range(12))
def test_reconstructed_path_matches_search(seed, make_random_grid, shortest_costs):
    grid = make_random_grid(seed, width=12, height=10, density=0.25)
    free_cells = [i for i in range(grid.size) if grid.is_free(i)]

    for start, goal in zip(free_cells[::4], reversed(free_cells[::3])):
        if start == goal:
            continue
        true_costs = shortest_costs(grid, start)
        if np.isinf(true_costs[goal]):
            continue

        cells, result = plan(grid, start, goal)

        assert cells[0] == start
        assert cells[-1] == goal
        assert len(set(cells)) == len(cells)
        for a, b in zip(cells, cells[1:]):
            assert b in grid.neighbors(a)
            assert move_cost(grid, a, b) in (1.0, math.sqrt(2))
        assert path_cost(grid, cells) == pytest.approx(result.goal_cost)
        assert path_cost(grid, cells) == pytest.approx(true_costs[goal])


def test_unreached_goal_fails(free_grid):
    costs = np.full(free_grid.size, np.inf)
    costs[0] = 0.0
    with pytest.raises(ReconstructionFailed):
        construct_path(free_grid, 0, 24, costs)


def test_no_downhill_neighbour_fails(free_grid):
    costs = np.full(free_grid.size, np.inf)
    costs[0] = 0.0
    costs[24] = 5.0
    with pytest.raises(ReconstructionFailed):
        construct_path(free_grid, 0, 24, costs)


def test_start_must_have_zero_cost(free_grid):
    costs = np.full(free_grid.size, np.inf)
    costs[0] = 1.0
    costs[6] = 2.0
    with pytest.raises(ReconstructionFailed):
        construct_path(free_grid, 0, 6, costs)


def test_cost_array_size_must_match_grid(free_grid):
    with pytest.raises(ReconstructionFailed):
        construct_path(free_grid, 0, 24, np.zeros(10))


def test_descent_stuck_in_local_minimum_fails(free_grid):
    # Cell 12 has the lowest cost in its neighbourhood but is not the start
    costs = np.full(free_grid.size, np.inf)
    costs[0] = 0.0
    costs[12] = 0.5
    costs[18] = 1.0
    costs[24] = 2.0
    with pytest.raises(ReconstructionFailed):
        construct_path(free_grid, 0, 24, costs)


def test_path_cost():
    grid = GridMap(np.ones((3, 3), dtype=bool))
    assert path_cost(grid, [0]) == 0
    assert path_cost(grid, [0, 1, 5, 8]) == pytest.approx(2 + math.sqrt(2))
