"""
Step costs and heuristic for the 8-connected grid.

Both work in cell units: an orthogonal step costs 1, a diagonal step
costs sqrt(2), and the heuristic is the straight-line distance between cell
centres. The heuristic never exceeds the step-cost distance, so it is
admissible and consistent.
"""

import math

from .grid_map import GridMap


DIAGONAL_COST = math.sqrt(2.0)
ORTHOGONAL_COST = 1.0


def move_cost(grid: GridMap, cell_a: int, cell_b: int) -> float:
    """
    Cost of moving between two adjacent cells.

    Args:
        grid: Grid the indices belong to
        cell_a: Source cell index
        cell_b: Target cell index

    Returns:
        1.0 for orthogonal moves, sqrt(2) for diagonal moves

    Raises:
        ValueError: If the cells are identical or not adjacent
    """
    row_a, col_a = grid.row_col(cell_a)
    row_b, col_b = grid.row_col(cell_b)
    dr = abs(row_a - row_b)
    dc = abs(col_a - col_b)

    if dr > 1 or dc > 1 or (dr == 0 and dc == 0):
        raise ValueError(f"Cells {cell_a} and {cell_b} are not adjacent")
    if dr and dc:
        return DIAGONAL_COST
    return ORTHOGONAL_COST


def euclidean_heuristic(grid: GridMap, cell: int, goal: int) -> float:
    """Euclidean distance between two cells in grid units."""
    row_a, col_a = grid.row_col(cell)
    row_b, col_b = grid.row_col(goal)
    return math.hypot(row_a - row_b, col_a - col_b)


class CostModel:
    """Move cost bound to one grid snapshot."""

    def __init__(self, grid: GridMap):
        self.grid = grid

    def __call__(self, cell_a: int, cell_b: int) -> float:
        return move_cost(self.grid, cell_a, cell_b)


class Heuristic:
    """Euclidean heuristic bound to one grid and goal."""

    def __init__(self, grid: GridMap, goal: int):
        self.grid = grid
        self.goal = goal

    def __call__(self, cell: int) -> float:
        return euclidean_heuristic(self.grid, cell, self.goal)
