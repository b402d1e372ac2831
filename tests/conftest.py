"""Shared fixtures for the planner tests."""

import heapq
import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from rastar.costs import move_cost
from rastar.grid_map import GridMap


def dijkstra(grid: GridMap, source: int) -> np.ndarray:
    """Brute-force shortest path costs from source to every cell."""
    dist = np.full(grid.size, np.inf)
    dist[source] = 0.0
    heap = [(0.0, source)]
    while heap:
        d, cell = heapq.heappop(heap)
        if d > dist[cell]:
            continue
        for n in grid.neighbors(cell):
            nd = d + move_cost(grid, cell, n)
            if nd < dist[n]:
                dist[n] = nd
                heapq.heappush(heap, (nd, n))
    return dist


def random_grid(seed: int, width: int = 8, height: int = 8, density: float = 0.3) -> GridMap:
    rng = np.random.default_rng(seed)
    return GridMap(rng.random((height, width)) >= density)


@pytest.fixture
def shortest_costs():
    return dijkstra


@pytest.fixture
def make_random_grid():
    return random_grid


@pytest.fixture
def free_grid():
    """5x5 all-free grid, resolution 1, origin (0, 0)."""
    return GridMap(np.ones((5, 5), dtype=bool))


@pytest.fixture
def wall_grid():
    """5x5 grid with column 2 occupied except in row 4."""
    return GridMap.from_strings([
        "..#..",
        "..#..",
        "..#..",
        "..#..",
        ".....",
    ])
