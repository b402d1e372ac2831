"""Tests for move costs and the Euclidean heuristic."""

import math

import numpy as np
import pytest

from rastar.costs import CostModel, Heuristic, euclidean_heuristic, move_cost
from rastar.grid_map import GridMap


def test_orthogonal_and_diagonal_costs(free_grid):
    assert move_cost(free_grid, 12, 13) == 1.0
    assert move_cost(free_grid, 12, 7) == 1.0
    assert move_cost(free_grid, 12, 18) == pytest.approx(math.sqrt(2))
    assert move_cost(free_grid, 12, 6) == pytest.approx(math.sqrt(2))


def test_move_cost_is_symmetric():
    grid = GridMap(np.ones((4, 4), dtype=bool))
    for a in range(grid.size):
        for b in grid.neighbors(a):
            assert move_cost(grid, a, b) == move_cost(grid, b, a)


def test_diagonal_is_sqrt2_times_orthogonal(free_grid):
    ratio = move_cost(free_grid, 0, 6) / move_cost(free_grid, 0, 1)
    assert ratio == pytest.approx(math.sqrt(2))


@pytest.mark.parametrize("a, b", [(0, 0), (0, 2), (0, 10), (4, 5), (9, 10)])
def test_move_cost_rejects_non_adjacent(free_grid, a, b):
    # 4 -> 5 and 9 -> 10 are consecutive indices across a row boundary
    with pytest.raises(ValueError):
        move_cost(free_grid, a, b)


def test_cost_model_binds_grid(free_grid):
    model = CostModel(free_grid)
    assert model(0, 1) == move_cost(free_grid, 0, 1)


def test_heuristic_is_euclidean(free_grid):
    assert euclidean_heuristic(free_grid, 0, 24) == pytest.approx(4 * math.sqrt(2))
    assert euclidean_heuristic(free_grid, 0, 4) == pytest.approx(4.0)
    assert euclidean_heuristic(free_grid, 0, 7) == pytest.approx(math.sqrt(5))
    assert euclidean_heuristic(free_grid, 12, 12) == 0.0


def test_heuristic_binds_goal(free_grid):
    h = Heuristic(free_grid, goal=24)
    assert h(24) == 0.0
    assert h(0) == euclidean_heuristic(free_grid, 0, 24)


@pytest.mark.parametrize("seed", range(6))
def test_heuristic_is_admissible(seed, make_random_grid, shortest_costs):
    grid = make_random_grid(seed)
    free_cells = [i for i in range(grid.size) if grid.is_free(i)]
    for goal in free_cells[::5]:
        true_costs = shortest_costs(grid, goal)
        for cell in free_cells:
            if np.isfinite(true_costs[cell]):
                assert euclidean_heuristic(grid, cell, goal) <= true_costs[cell] + 1e-9


def test_heuristic_is_consistent():
    grid = GridMap(np.ones((6, 6), dtype=bool))
    goal = 21
    for a in range(grid.size):
        for b in grid.neighbors(a):
            h_a = euclidean_heuristic(grid, a, goal)
            h_b = euclidean_heuristic(grid, b, goal)
            assert h_a <= move_cost(grid, a, b) + h_b + 1e-9
