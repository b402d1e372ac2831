"""
Visualization setup utilities for Rerun.
"""

from typing import Sequence, Tuple

import numpy as np
import rerun as rr

from .grid_map import GridMap


def setup_planner_viewer_blueprint():
    """
    Set up the blueprint for the planner viewer.

    Returns:
        Blueprint configuration for Rerun viewer
    """
    blueprint = rr.blueprint.Blueprint(
        rr.blueprint.Horizontal(
            rr.blueprint.Spatial2DView(name="Plan (world)", origin="world"),
            rr.blueprint.Spatial2DView(name="Occupancy Grid", origin="grid"),
            column_shares=[2, 1]
        ),
        collapse_panels=False,
    )
    return blueprint


def create_occupancy_grid_image(grid_map: GridMap, cells: Sequence[int] = ()):
    """
    Create colored visualization of an occupancy grid.

    Args:
        grid_map: Grid to draw
        cells: Optional path cells to highlight

    Returns:
        Colored image array (H, W, 3) with uint8 dtype, top row = highest grid row
    """
    free = grid_map.free_mask
    grid_viz = np.zeros((*free.shape, 3), dtype=np.uint8)
    grid_viz[free] = [0, 255, 0]      # Green = free
    grid_viz[~free] = [255, 0, 0]     # Red = occupied
    for cell in cells:
        row, col = grid_map.row_col(cell)
        grid_viz[row, col] = [0, 255, 255]   # Cyan = path
    return np.flipud(grid_viz)


def log_occupancy_grid(grid_map: GridMap, entity_path: str = "world/map"):
    """
    Log the occupied cells of a grid as world-space points.

    Args:
        grid_map: Grid to log
        entity_path: Rerun entity path
    """
    rows, cols = np.nonzero(~grid_map.free_mask)
    if len(rows) == 0:
        return
    xs = grid_map.origin[0] + (cols + 0.5) * grid_map.resolution
    ys = grid_map.origin[1] + (rows + 0.5) * grid_map.resolution

    rr.log(
        entity_path,
        rr.Points2D(
            positions=np.column_stack([xs, ys]),
            colors=np.array([[1.0, 0.0, 0.0]]),
            radii=np.array([grid_map.resolution / 2]),
        )
    )


def log_plan(path: Sequence[Tuple[float, float]],
             color: Tuple[float, float, float, float] = (0.0, 1.0, 1.0, 1.0),
             entity_path: str = "world/plan",
             radius: float = 0.05):
    """
    Log a planned path as a line strip with start/goal markers.

    Args:
        path: World (x, y) waypoints
        color: RGBA in [0, 1]
        entity_path: Rerun entity path
        radius: Line radius in world units
    """
    if not path:
        return

    points = np.array(path, dtype=np.float64)
    rr.log(
        entity_path,
        rr.LineStrips2D(
            [points],
            colors=np.array([color]),
            radii=np.array([radius])
        )
    )

    start_color = np.array([0.0, 1.0, 0.0])  # Green
    goal_color = np.array([1.0, 0.0, 1.0])   # Magenta
    rr.log(
        f"{entity_path}/endpoints",
        rr.Points2D(
            positions=np.array([points[0], points[-1]]),
            colors=np.array([start_color, goal_color]),
            radii=np.array([radius * 3])
        )
    )


def show_plan(grid_map: GridMap, result, app_name: str = "RAstar Planner", spawn: bool = True):
    """
    Open a Rerun viewer with the grid and a plan result.

    Args:
        grid_map: Grid the plan was made on
        result: PlanResult
        app_name: Rerun application id
        spawn: Spawn a viewer process
    """
    rr.init(app_name, spawn=spawn)
    rr.send_blueprint(setup_planner_viewer_blueprint())

    log_occupancy_grid(grid_map)
    rr.log("grid/occupancy", rr.Image(create_occupancy_grid_image(grid_map, result.cells)))
    if result.success:
        log_plan(result.path, radius=grid_map.resolution / 3)
