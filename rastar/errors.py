"""
Error kinds raised by the planning core.

Core components raise these; only the planner boundary
(`RAstarPlanner.make_plan`) turns them into a failed `PlanResult`.
"""


class PlanningError(Exception):
    """Base class for all planning failures."""

    kind = "planning_error"


class InvalidRequest(PlanningError):
    """Start/goal outside the grid, occupied, or identical."""

    kind = "invalid_request"


class NoPathFound(PlanningError):
    """Frontier exhausted before the goal was expanded."""

    kind = "no_path_found"


class ReconstructionFailed(PlanningError):
    """Cost array inconsistent during the backtrace."""

    kind = "reconstruction_failed"


class OutOfBounds(PlanningError, ValueError):
    """Coordinate or index conversion outside the grid extents."""

    kind = "out_of_bounds"


class FrontierEmpty(PlanningError, IndexError):
    """pop_min() on an empty frontier."""

    kind = "frontier_empty"
