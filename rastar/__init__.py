"""
A* global path planning on 2D occupancy grids.
"""

from .errors import (
    PlanningError,
    InvalidRequest,
    NoPathFound,
    ReconstructionFailed,
    OutOfBounds,
    FrontierEmpty
)
from .grid_map import GridMap
from .costs import move_cost, euclidean_heuristic, CostModel, Heuristic
from .frontier import Frontier, CellRecord
from .search import SearchEngine, SearchResult
from .reconstruction import construct_path, path_cost
from .planner import GlobalPlanner, RAstarPlanner, PlanResult
from .config import (
    MapConfig,
    PlannerConfig,
    DEFAULT_MAP_CONFIG,
    DEFAULT_PLANNER_CONFIG,
    map_config_from_dict,
    planner_config_from_dict
)
from .io_utils import (
    load_json,
    save_json,
    load_grid_map,
    occupancy_from_image,
    plan_to_dict,
    save_plan
)
from .visualization import (
    setup_planner_viewer_blueprint,
    create_occupancy_grid_image,
    log_occupancy_grid,
    log_plan,
    show_plan
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    'PlanningError',
    'InvalidRequest',
    'NoPathFound',
    'ReconstructionFailed',
    'OutOfBounds',
    'FrontierEmpty',
    # Grid
    'GridMap',
    # Costs
    'move_cost',
    'euclidean_heuristic',
    'CostModel',
    'Heuristic',
    # Search
    'Frontier',
    'CellRecord',
    'SearchEngine',
    'SearchResult',
    'construct_path',
    'path_cost',
    # Planner
    'GlobalPlanner',
    'RAstarPlanner',
    'PlanResult',
    # Config
    'MapConfig',
    'PlannerConfig',
    'DEFAULT_MAP_CONFIG',
    'DEFAULT_PLANNER_CONFIG',
    'map_config_from_dict',
    'planner_config_from_dict',
    # IO utilities
    'load_json',
    'save_json',
    'load_grid_map',
    'occupancy_from_image',
    'plan_to_dict',
    'save_plan',
    # Visualization
    'setup_planner_viewer_blueprint',
    'create_occupancy_grid_image',
    'log_occupancy_grid',
    'log_plan',
    'show_plan',
]
