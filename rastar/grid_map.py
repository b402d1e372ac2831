"""
Occupancy grid snapshot and grid/world conversions.

Cells are addressed by a linear index ``row * width + col``. Rows follow the
world ``y`` axis and columns the world ``x`` axis, both measured from the
grid origin in units of ``resolution``.
"""

import math
from typing import Iterable, List, Sequence, Tuple

import numpy as np
from scipy.ndimage import binary_dilation

from .errors import OutOfBounds


# Row/column offsets of the 8-connected neighbourhood, in ascending index order
NEIGHBOR_OFFSETS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


class GridMap:
    """
    Immutable occupancy grid snapshot.

    Example:
        ```python
        grid = GridMap(np.ones((5, 5), dtype=bool), resolution=1.0)
        grid.to_index(0.5, 0.5)   # -> 0
        grid.neighbors(0)         # -> [1, 5, 6]
        ```
    """

    def __init__(self, free_mask, resolution: float = 1.0,
                 origin: Tuple[float, float] = (0.0, 0.0)):
        """
        Args:
            free_mask: 2D array-like (height, width), truthy where a cell is free
            resolution: World units per cell
            origin: World coordinate (x, y) of the grid's lower-left corner

        Raises:
            ValueError: If the mask is not 2D/non-empty or resolution is not positive
        """
        mask = np.array(free_mask, dtype=bool)
        if mask.ndim != 2 or mask.size == 0:
            raise ValueError(f"free_mask must be a non-empty 2D array, got shape {mask.shape}")
        if resolution <= 0:
            raise ValueError(f"resolution must be positive, got {resolution}")

        mask.setflags(write=False)
        self._free = mask
        self.height, self.width = mask.shape
        self.resolution = float(resolution)
        self.origin = (float(origin[0]), float(origin[1]))

    @classmethod
    def from_occupancy(cls, values, resolution: float = 1.0,
                       origin: Tuple[float, float] = (0.0, 0.0),
                       free_threshold: int = 0) -> 'GridMap':
        """
        Build a grid from costmap/occupancy values.

        Cells with a value in ``[0, free_threshold]`` are free. Negative values
        (unknown space) and anything above the threshold are blocked.
        """
        values = np.asarray(values)
        free = (values >= 0) & (values <= free_threshold)
        return cls(free, resolution, origin)

    @classmethod
    def from_strings(cls, rows: Sequence[str], resolution: float = 1.0,
                     origin: Tuple[float, float] = (0.0, 0.0)) -> 'GridMap':
        """
        Build a grid from text rows, '#' blocked and anything else free.

        ``rows[0]`` is grid row 0.
        """
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise ValueError("All rows must have the same width")
        mask = [[ch != '#' for ch in row] for row in rows]
        return cls(mask, resolution, origin)

    # ------------------------------------------------------------------
    # Index arithmetic
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def free_mask(self) -> np.ndarray:
        """Read-only (height, width) boolean view of the free cells."""
        return self._free

    @property
    def free_count(self) -> int:
        return int(self._free.sum())

    def cell_index(self, row: int, col: int) -> int:
        return row * self.width + col

    def row_of(self, index: int) -> int:
        return index // self.width

    def col_of(self, index: int) -> int:
        return index % self.width

    def row_col(self, index: int) -> Tuple[int, int]:
        return divmod(index, self.width)

    def contains_index(self, index: int) -> bool:
        return 0 <= index < self.size

    def contains_cell(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    # ------------------------------------------------------------------
    # World <-> grid
    # ------------------------------------------------------------------

    def _world_to_row_col(self, x: float, y: float) -> Tuple[int, int]:
        col = math.floor((x - self.origin[0]) / self.resolution)
        row = math.floor((y - self.origin[1]) / self.resolution)
        return row, col

    def is_inside(self, x: float, y: float) -> bool:
        """Check whether world point (x, y) falls on a grid cell."""
        if not (math.isfinite(x) and math.isfinite(y)):
            return False
        row, col = self._world_to_row_col(x, y)
        return self.contains_cell(row, col)

    def to_index(self, x: float, y: float) -> int:
        """
        Convert world coordinates to a cell index.

        Raises:
            OutOfBounds: If (x, y) is outside the grid extents or not finite
        """
        if not (math.isfinite(x) and math.isfinite(y)):
            raise OutOfBounds(f"World point ({x}, {y}) is not finite")
        row, col = self._world_to_row_col(x, y)
        if not self.contains_cell(row, col):
            raise OutOfBounds(
                f"World point ({x:.3f}, {y:.3f}) maps to cell ({row}, {col}) "
                f"outside {self.height}x{self.width} grid"
            )
        return self.cell_index(row, col)

    def to_world(self, index: int) -> Tuple[float, float]:
        """
        Convert a cell index to the world coordinate of the cell centre.

        Raises:
            OutOfBounds: If the index is not a valid cell
        """
        if not self.contains_index(index):
            raise OutOfBounds(f"Cell index {index} outside grid of {self.size} cells")
        row, col = self.row_col(index)
        return self.map_to_world(col + 0.5, row + 0.5)

    def map_to_world(self, mx: float, my: float) -> Tuple[float, float]:
        """Convert continuous map coordinates (in cells) to world coordinates."""
        return (self.origin[0] + mx * self.resolution,
                self.origin[1] + my * self.resolution)

    # ------------------------------------------------------------------
    # Occupancy
    # ------------------------------------------------------------------

    def is_free(self, index: int) -> bool:
        """Occupancy lookup by linear index; cells outside the grid are never free."""
        if not self.contains_index(index):
            return False
        row, col = self.row_col(index)
        return bool(self._free[row, col])

    def is_free_cell(self, row: int, col: int) -> bool:
        """Occupancy lookup by (row, col); cells outside the grid are never free."""
        if not self.contains_cell(row, col):
            return False
        return bool(self._free[row, col])

    def neighbors(self, index: int) -> List[int]:
        """
        Free 8-connected neighbours of a cell.

        Offsets are applied to row/col rather than to the linear index, so a
        cell in the last column never sees the first column of the next row.
        """
        row, col = self.row_col(index)
        result = []
        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = row + dr, col + dc
            if self.is_free_cell(nr, nc):
                result.append(self.cell_index(nr, nc))
        return result

    # ------------------------------------------------------------------
    # Derived snapshots
    # ------------------------------------------------------------------

    def inflate(self, radius: float) -> 'GridMap':
        """
        Return a new grid with obstacles grown by ``radius`` world units.

        Args:
            radius: Inflation radius in world units; <= 0 returns this grid
        """
        if radius <= 0:
            return self

        radius_cells = radius / self.resolution
        r = int(math.ceil(radius_cells))
        yy, xx = np.mgrid[-r:r + 1, -r:r + 1]
        kernel = (xx ** 2 + yy ** 2) <= radius_cells ** 2

        occupied = binary_dilation(~self._free, structure=kernel)
        return GridMap(~occupied, self.resolution, self.origin)

    def with_blocked(self, cells: Iterable[int]) -> 'GridMap':
        """Return a copy of this grid with the given cell indices occupied."""
        mask = self._free.copy()
        for index in cells:
            if not self.contains_index(index):
                raise OutOfBounds(f"Cell index {index} outside grid of {self.size} cells")
            row, col = self.row_col(index)
            mask[row, col] = False
        return GridMap(mask, self.resolution, self.origin)

    def __repr__(self) -> str:
        return (f"GridMap(width={self.width}, height={self.height}, "
                f"resolution={self.resolution}, origin={self.origin})")
