"""
Path recovery from a search cost array.
"""

import math
from typing import List, Sequence

import numpy as np

from .costs import move_cost
from .errors import ReconstructionFailed
from .grid_map import GridMap


def construct_path(grid: GridMap, start: int, goal: int, costs: np.ndarray) -> List[int]:
    """
    Walk the cost array downhill from goal to start.

    At every step the walk moves to a free neighbour whose recorded cost is
    strictly lower than the current cell's. Among those it takes the one that
    best explains the current cost, i.e. the smallest
    ``costs[n] + move_cost(n, current)``; remaining ties go to the smaller
    ``costs[n]`` and then the lower cell index.

    Args:
        grid: Grid the search ran on
        start: Start cell index
        goal: Goal cell index
        costs: Cost array produced by a successful `SearchEngine.find_path`

    Returns:
        Cell indices from start to goal, inclusive

    Raises:
        ReconstructionFailed: If the cost array cannot be descended to start
    """
    if len(costs) != grid.size:
        raise ReconstructionFailed(
            f"Cost array has {len(costs)} entries, grid has {grid.size} cells")
    if not (grid.contains_index(start) and grid.contains_index(goal)):
        raise ReconstructionFailed(f"Start {start} or goal {goal} outside the grid")
    if costs[start] != 0.0:
        raise ReconstructionFailed(f"Start cell {start} has cost {costs[start]}, expected 0")
    if not math.isfinite(costs[goal]):
        raise ReconstructionFailed(f"Goal cell {goal} was never reached")

    path = [goal]
    current = goal
    # Costs strictly decrease along the walk, so it cannot revisit a cell
    for _ in range(grid.size):
        if current == start:
            path.reverse()
            return path

        current_cost = costs[current]
        best = None
        best_key = None
        for neighbor in grid.neighbors(current):
            neighbor_cost = costs[neighbor]
            if not neighbor_cost < current_cost:
                continue
            key = (neighbor_cost + move_cost(grid, neighbor, current), neighbor_cost, neighbor)
            if best_key is None or key < best_key:
                best, best_key = neighbor, key

        if best is None:
            raise ReconstructionFailed(
                f"No neighbour of cell {current} (cost {current_cost:.3f}) has a lower cost")

        path.append(best)
        current = best

    raise ReconstructionFailed(f"Backtrace from {goal} did not reach start {start}")


def path_cost(grid: GridMap, cells: Sequence[int]) -> float:
    """Total move cost along a sequence of adjacent cells."""
    return sum(move_cost(grid, a, b) for a, b in zip(cells, cells[1:]))
