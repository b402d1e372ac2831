"""
Global planner plugin: world-coordinate requests in, world-coordinate paths out.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from .config import PlannerConfig, planner_config_from_dict
from .errors import OutOfBounds, PlanningError, InvalidRequest, ReconstructionFailed
from .grid_map import GridMap
from .reconstruction import construct_path
from .search import SearchEngine

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


@dataclass
class PlanResult:
    """Result of a planning request."""
    success: bool
    path: List[Point] = field(default_factory=list)   # world coordinates, start -> goal
    cells: List[int] = field(default_factory=list)    # grid cell indices, start -> goal
    total_cost: float = float('inf')                  # in world units
    planning_time: float = 0.0
    nodes_expanded: int = 0
    error: Optional[str] = None                       # PlanningError.kind on failure
    message: str = ""


class GlobalPlanner(ABC):
    """Interface a host navigation stack uses to drive a global planner."""

    @abstractmethod
    def initialize(self, grid_map: GridMap, config: Union[PlannerConfig, Dict[str, Any], None] = None):
        """Bind the planner to an occupancy grid snapshot."""

    @abstractmethod
    def make_plan(self, start: Point, goal: Point) -> PlanResult:
        """Plan from start to goal, both in world coordinates."""


class RAstarPlanner(GlobalPlanner):
    """
    A* global planner on a 2D occupancy grid.

    The planner only keeps the grid snapshot and its configuration between
    requests; every request runs on freshly allocated search state.

    Example:
        ```python
        planner = RAstarPlanner()
        planner.initialize(GridMap.from_occupancy(costmap, resolution=0.05))
        result = planner.make_plan((0.2, 0.3), (4.1, 2.7))
        if result.success:
            follow(result.path)
        ```
    """

    def __init__(self):
        self.grid_map: Optional[GridMap] = None
        self.config = PlannerConfig()
        self.initialized = False

        self.planning_statistics = {
            'total_plans': 0,
            'successful_plans': 0,
            'average_planning_time': 0.0,
            'average_nodes_expanded': 0.0,
        }

    def initialize(self, grid_map: GridMap, config: Union[PlannerConfig, Dict[str, Any], None] = None):
        """
        Bind the planner to a grid snapshot.

        Calling this again replaces the snapshot; the host does so whenever
        its map changes.

        Args:
            grid_map: Occupancy grid to plan on
            config: PlannerConfig, plain dict of its fields, or None for defaults
        """
        if isinstance(config, PlannerConfig):
            self.config = config
        else:
            self.config = planner_config_from_dict(config)

        self.grid_map = grid_map.inflate(self.config.inflation_radius)
        self.initialized = True

        logger.info(f"RAstar planner initialized: {self.grid_map.width}x{self.grid_map.height} cells, "
                    f"resolution={self.grid_map.resolution}, origin={self.grid_map.origin}, "
                    f"free cells={self.grid_map.free_count}")

    def _require_initialized(self):
        if not self.initialized:
            raise RuntimeError("RAstarPlanner has not been initialized, call initialize() first")

    def plan_cells(self, start_cell: int, goal_cell: int) -> List[int]:
        """
        Find the best cell path between two cell indices.

        Raises:
            InvalidRequest, NoPathFound, ReconstructionFailed
        """
        self._require_initialized()
        cells, _ = self._search(start_cell, goal_cell)
        return cells

    def _search(self, start_cell: int, goal_cell: int):
        engine = SearchEngine(self.grid_map, max_expansions=self.config.max_expansions)
        search_result = engine.find_path(start_cell, goal_cell)
        cells = construct_path(self.grid_map, start_cell, goal_cell, search_result.costs)
        return cells, search_result

    def make_plan(self, start: Point, goal: Point) -> PlanResult:
        """
        Plan a path between two world points.

        Never raises for planning failures: any error yields
        ``success=False`` with an empty path.

        Args:
            start: Start (x, y) in world coordinates
            goal: Goal (x, y) in world coordinates

        Returns:
            PlanResult
        """
        self._require_initialized()
        planning_start = time.time()
        grid = self.grid_map

        logger.info(f"Planning path: ({start[0]:.3f}, {start[1]:.3f}) -> ({goal[0]:.3f}, {goal[1]:.3f})")

        try:
            try:
                start_cell = grid.to_index(*start)
                goal_cell = grid.to_index(*goal)
            except OutOfBounds as e:
                raise InvalidRequest(str(e)) from e

            logger.debug(f"Grid cells: {start_cell} -> {goal_cell}")
            cells, search_result = self._search(start_cell, goal_cell)

        except PlanningError as e:
            planning_time = time.time() - planning_start
            if isinstance(e, ReconstructionFailed):
                logger.error(f"Path reconstruction failed: {e}")
            else:
                logger.warning(f"Planning failed ({e.kind}): {e}")
            result = PlanResult(success=False, planning_time=planning_time,
                                error=e.kind, message=str(e))
            self._update_statistics(result)
            return result

        path = [grid.to_world(cell) for cell in cells]
        planning_time = time.time() - planning_start
        result = PlanResult(
            success=True, path=path, cells=cells,
            total_cost=search_result.goal_cost * grid.resolution,
            planning_time=planning_time,
            nodes_expanded=search_result.nodes_expanded,
        )
        self._update_statistics(result)

        logger.info(f"Path found in {planning_time:.4f}s: {len(path)} waypoints, "
                    f"cost={result.total_cost:.3f}, expanded={result.nodes_expanded}")
        return result

    def _update_statistics(self, result: PlanResult):
        """Update planning statistics."""
        self.planning_statistics['total_plans'] += 1

        if result.success:
            self.planning_statistics['successful_plans'] += 1

            # Running averages
            n = self.planning_statistics['successful_plans']

            self.planning_statistics['average_planning_time'] = (
                (n - 1) * self.planning_statistics['average_planning_time'] + result.planning_time
            ) / n

            self.planning_statistics['average_nodes_expanded'] = (
                (n - 1) * self.planning_statistics['average_nodes_expanded'] + result.nodes_expanded
            ) / n

    def get_statistics(self) -> Dict[str, Any]:
        """Get planning statistics."""
        stats = self.planning_statistics.copy()

        if stats['total_plans'] > 0:
            stats['success_rate'] = stats['successful_plans'] / stats['total_plans']
        else:
            stats['success_rate'] = 0.0

        return stats
