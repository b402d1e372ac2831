#!/usr/bin/env python3
"""
Example: Planning a path around a wall.

This demonstrates how to build a grid, run the planner and
inspect the result, optionally viewing it in Rerun.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from rastar import GridMap, RAstarPlanner, PlannerConfig, show_plan


ROOM = [
    "..........",
    "..........",
    "....#.....",
    "....#.....",
    "....#.....",
    "....#.....",
    "....#.....",
    "....#.....",
    "..........",
    "..........",
]


def planning_example(resolution: float = 0.5, inflation: float = 0.0, visualize: bool = False):
    """Example of planning across a room with a wall in the middle."""
    grid_map = GridMap.from_strings(ROOM, resolution=resolution)
    print(f"Grid: {grid_map.width}x{grid_map.height} cells, {grid_map.free_count} free")

    planner = RAstarPlanner()
    planner.initialize(grid_map, PlannerConfig(inflation_radius=inflation))

    # Bottom-left to top-right, crossing the wall's column
    start = grid_map.to_world(grid_map.cell_index(4, 1))
    goal = grid_map.to_world(grid_map.cell_index(5, 8))
    print(f"Planning {start} -> {goal}...")

    result = planner.make_plan(start, goal)
    if not result.success:
        print(f"  No path: {result.error} ({result.message})")
        return

    print(f"  Waypoints: {len(result.path)}")
    print(f"  Cost: {result.total_cost:.3f}m")
    for x, y in result.path:
        print(f"    ({x:.2f}, {y:.2f})")

    if visualize:
        show_plan(planner.grid_map, result, app_name="RAstar Planning Example")
        print("Plan ready! Close the window when done.")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Planning example")
    parser.add_argument("--resolution", type=float, default=0.5,
                       help="Grid resolution (default: 0.5m)")
    parser.add_argument("--inflate", type=float, default=0.0,
                       help="Obstacle inflation radius (default: 0m)")
    parser.add_argument("--visualize", action="store_true", help="Show the plan in Rerun")
    args = parser.parse_args()

    planning_example(args.resolution, args.inflate, args.visualize)
