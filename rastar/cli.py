#!/usr/bin/env python3
"""
Plan a path on an occupancy map from the command line.
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import planner_config_from_dict
from .io_utils import load_grid_map, save_plan
from .planner import RAstarPlanner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Plan a path between two world points on an occupancy map",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Plan on a map image with metadata in map.json
  rastar-plan --map map.png --start 0.5 0.5 --goal 4.5 3.0

  # Inflate obstacles by 0.2m and export the plan
  rastar-plan --map map.png --start 0.5 0.5 --goal 4.5 3.0 --inflate 0.2 -o plan.json

  # Show the result in Rerun
  rastar-plan --map map.png --start 0.5 0.5 --goal 4.5 3.0 --visualize
        """
    )

    parser.add_argument("-m", "--map", type=Path, required=True,
                        help="Map image, .npy occupancy array or .json map")
    parser.add_argument("--meta", type=Path, help="Map metadata JSON (default: <map>.json)")
    parser.add_argument("--start", nargs=2, type=float, required=True, metavar=("X", "Y"),
                        help="Start position in world coordinates")
    parser.add_argument("--goal", nargs=2, type=float, required=True, metavar=("X", "Y"),
                        help="Goal position in world coordinates")
    parser.add_argument("--inflate", type=float, default=0.0,
                        help="Obstacle inflation radius in world units (default: 0)")
    parser.add_argument("--max-expansions", type=int, default=None,
                        help="Give up after this many node expansions")
    parser.add_argument("-o", "--output", type=Path, help="Output JSON file for the plan")
    parser.add_argument("--visualize", action="store_true", help="Show the plan in Rerun")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.map.exists():
        print(f"Error: {args.map} does not exist")
        return 1

    print(f"Loading map {args.map.name}...")
    try:
        grid_map = load_grid_map(args.map, args.meta)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    print(f"  Grid: {grid_map.width}x{grid_map.height} cells @ {grid_map.resolution}m")
    print(f"  Free cells: {grid_map.free_count:,} ({100 * grid_map.free_count / grid_map.size:.1f}%)")

    try:
        config = planner_config_from_dict({
            'inflation_radius': args.inflate,
            'max_expansions': args.max_expansions,
        })
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    planner = RAstarPlanner()
    planner.initialize(grid_map, config)

    result = planner.make_plan(tuple(args.start), tuple(args.goal))

    if result.success:
        print(f"  ✓ Found path with {len(result.path)} waypoints")
        print(f"  Path cost: {result.total_cost:.3f}")
        print(f"  Nodes expanded: {result.nodes_expanded:,} in {result.planning_time:.3f}s")
    else:
        print(f"  ✗ Planning failed ({result.error}): {result.message}")

    if args.output:
        if save_plan(result, args.output):
            print(f"\n✓ Exported plan to {args.output}")

    if args.visualize:
        from .visualization import show_plan
        show_plan(planner.grid_map, result)

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
