#!/usr/bin/env python3
"""
Benchmark the A* planner on random occupancy grids.

Generates random maps, plans between random free start/goal pairs and
reports success rate, path cost and timing statistics.
"""

import argparse
import sys
import numpy as np
from pathlib import Path
from tqdm import tqdm

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from rastar.grid_map import GridMap
from rastar.planner import RAstarPlanner
from rastar.io_utils import save_json


def random_grid(width, height, obstacle_density, rng, resolution=1.0):
    """Create a random grid with the given fraction of occupied cells."""
    free = rng.random((height, width)) >= obstacle_density
    return GridMap(free, resolution=resolution)


def random_free_point(grid_map, rng):
    """Pick the world coordinate of a random free cell centre."""
    rows, cols = np.nonzero(grid_map.free_mask)
    k = rng.integers(len(rows))
    return grid_map.to_world(grid_map.cell_index(int(rows[k]), int(cols[k])))


def run_benchmark(width, height, obstacle_density, num_maps, queries_per_map, seed=0):
    """
    Run the benchmark.

    Returns:
        Dictionary of aggregated statistics
    """
    rng = np.random.default_rng(seed)
    planner = RAstarPlanner()

    costs = []
    times = []
    expansions = []
    failures = {}

    total = num_maps * queries_per_map
    with tqdm(total=total, desc="Planning") as progress:
        for _ in range(num_maps):
            grid_map = random_grid(width, height, obstacle_density, rng)
            if grid_map.free_count < 2:
                progress.update(queries_per_map)
                continue
            planner.initialize(grid_map)

            for _ in range(queries_per_map):
                start = random_free_point(grid_map, rng)
                goal = random_free_point(grid_map, rng)
                result = planner.make_plan(start, goal)

                if result.success:
                    costs.append(result.total_cost)
                    times.append(result.planning_time)
                    expansions.append(result.nodes_expanded)
                else:
                    failures[result.error] = failures.get(result.error, 0) + 1
                progress.update(1)

    stats = planner.get_statistics()
    return {
        'grid': {'width': width, 'height': height, 'obstacle_density': obstacle_density},
        'queries': stats['total_plans'],
        'success_rate': stats['success_rate'],
        'failures': failures,
        'mean_cost': float(np.mean(costs)) if costs else None,
        'mean_time': float(np.mean(times)) if times else None,
        'max_time': float(np.max(times)) if times else None,
        'mean_expanded': float(np.mean(expansions)) if expansions else None,
    }


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark the A* planner on random grids",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default benchmark
  python benchmark_planner.py

  # Larger, denser maps
  python benchmark_planner.py --size 200 200 --density 0.3 --maps 5

  # Export statistics
  python benchmark_planner.py -o benchmark.json
        """
    )

    parser.add_argument("--size", nargs=2, type=int, default=[100, 100], metavar=("W", "H"),
                        help="Grid size in cells (default: 100 100)")
    parser.add_argument("--density", type=float, default=0.2,
                        help="Fraction of occupied cells (default: 0.2)")
    parser.add_argument("--maps", type=int, default=10, help="Number of random maps (default: 10)")
    parser.add_argument("--queries", type=int, default=20, help="Queries per map (default: 20)")
    parser.add_argument("--seed", type=int, default=0, help="Random seed (default: 0)")
    parser.add_argument("-o", "--output", type=Path, help="Output JSON file for statistics")

    args = parser.parse_args()

    if not 0.0 <= args.density < 1.0:
        print("Error: --density must be in [0, 1)")
        return 1

    print(f"Benchmarking on {args.maps} maps of {args.size[0]}x{args.size[1]} cells...")
    print("=" * 60)

    stats = run_benchmark(args.size[0], args.size[1], args.density,
                          args.maps, args.queries, args.seed)

    print("\n" + "=" * 60)
    print(f"Queries:       {stats['queries']}")
    print(f"Success rate:  {100 * stats['success_rate']:.1f}%")
    if stats['failures']:
        print(f"Failures:      {stats['failures']}")
    if stats['mean_cost'] is not None:
        print(f"Mean cost:     {stats['mean_cost']:.2f}")
        print(f"Mean time:     {1000 * stats['mean_time']:.2f} ms (max {1000 * stats['max_time']:.2f} ms)")
        print(f"Mean expanded: {stats['mean_expanded']:.0f} nodes")

    if args.output:
        if save_json(stats, args.output):
            print(f"\n✓ Exported statistics to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
