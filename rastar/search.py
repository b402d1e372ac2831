"""
A* relaxation loop over a GridMap.

The search records only the best-known cost from the start for every cell
(the g-score array). There is no closed set and no parent table: a cell is
re-queued only on a strict cost improvement, and a popped entry whose total
cost no longer matches the cost array is discarded. The path is recovered
afterwards from the cost array by `rastar.reconstruction.construct_path`.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .costs import CostModel, Heuristic
from .errors import InvalidRequest, NoPathFound
from .frontier import Frontier
from .grid_map import GridMap

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Outcome of a successful search."""
    costs: np.ndarray          # best-known cost from start per cell index, inf if unreached
    start: int
    goal: int
    nodes_expanded: int = 0
    stale_skipped: int = 0

    @property
    def goal_cost(self) -> float:
        return float(self.costs[self.goal])


class SearchEngine:
    """
    A* search engine bound to one grid snapshot.

    All per-request state (cost array, frontier) is created inside
    `find_path`, so one engine can serve any number of sequential or
    concurrent requests.
    """

    def __init__(self, grid: GridMap, max_expansions: Optional[int] = None):
        self.grid = grid
        self.max_expansions = max_expansions
        self.move_cost = CostModel(grid)

    def validate(self, start: int, goal: int):
        """
        Check that a start/goal pair can be searched.

        Raises:
            InvalidRequest: If start == goal, or either cell is outside the grid or occupied
        """
        if start == goal:
            raise InvalidRequest(f"Start and goal are the same cell ({start})")
        for name, cell in (('start', start), ('goal', goal)):
            if not self.grid.contains_index(cell):
                raise InvalidRequest(f"The {name} cell {cell} is outside the grid")
            if not self.grid.is_free(cell):
                raise InvalidRequest(f"The {name} cell {cell} is occupied")

    def find_path(self, start: int, goal: int) -> SearchResult:
        """
        Run A* from start until the goal is expanded.

        Args:
            start: Start cell index
            goal: Goal cell index

        Returns:
            SearchResult whose cost array is final along an optimal path to goal

        Raises:
            InvalidRequest: If the request fails validation (no search is run)
            NoPathFound: If the frontier empties, or the expansion limit is hit,
                before the goal is reached
        """
        self.validate(start, goal)

        grid = self.grid
        heuristic = Heuristic(grid, goal)

        costs = np.full(grid.size, np.inf, dtype=np.float64)
        costs[start] = 0.0

        frontier = Frontier()
        frontier.insert(start, heuristic(start))

        nodes_expanded = 0
        stale_skipped = 0

        while frontier:
            total_cost, current = frontier.pop_min()

            if current == goal:
                logger.debug(f"Goal {goal} reached: cost={costs[goal]:.3f}, "
                             f"expanded={nodes_expanded}, stale={stale_skipped}")
                return SearchResult(costs=costs, start=start, goal=goal,
                                    nodes_expanded=nodes_expanded,
                                    stale_skipped=stale_skipped)

            current_cost = costs[current]
            if total_cost > current_cost + heuristic(current):
                stale_skipped += 1
                continue

            if self.max_expansions is not None and nodes_expanded >= self.max_expansions:
                raise NoPathFound(f"Expansion limit of {self.max_expansions} reached "
                                  f"before goal {goal}")
            nodes_expanded += 1

            for neighbor in grid.neighbors(current):
                tentative = current_cost + self.move_cost(current, neighbor)
                if tentative < costs[neighbor]:
                    costs[neighbor] = tentative
                    frontier.insert(neighbor, tentative + heuristic(neighbor))

        raise NoPathFound(f"No path from {start} to {goal}: frontier exhausted "
                          f"after {nodes_expanded} expansions")
