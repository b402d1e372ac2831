"""
Input/Output utilities for maps and plans.
"""

import json
import numpy as np
from pathlib import Path
from typing import Dict, Any, Optional
from PIL import Image

from .config import MapConfig, map_config_from_dict
from .grid_map import GridMap


def load_json(file_path: Path) -> Optional[Dict[str, Any]]:
    """
    Load JSON file safely.

    Args:
        file_path: Path to JSON file

    Returns:
        Dictionary with JSON data, or None if loading fails
    """
    try:
        with open(file_path, 'r') as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        print(f"Error loading JSON from {file_path}: {e}")
        return None


def save_json(data: Dict[str, Any], file_path: Path, indent: int = 2) -> bool:
    """
    Save data to JSON file.

    Args:
        data: Dictionary to save
        file_path: Path to save JSON file
        indent: JSON indentation

    Returns:
        True if successful, False otherwise
    """
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w') as f:
            json.dump(data, f, indent=indent)
        return True
    except (OSError, TypeError) as e:
        print(f"Error saving JSON to {file_path}: {e}")
        return False


def occupancy_from_image(image: np.ndarray, config: MapConfig) -> np.ndarray:
    """
    Classify map image pixels into free / occupied / unknown.

    Follows the map_server convention: dark pixels are occupied unless
    ``negate`` is set, and the bottom image row is grid row 0.

    Args:
        image: Grayscale (H, W) or color (H, W, C) uint8 image
        config: Map thresholds

    Returns:
        int8 array (H, W) with 0=free, 100=occupied, -1=unknown, row 0 at the bottom
    """
    if image.ndim == 3:
        image = image[..., :3].mean(axis=2)
    pixels = image.astype(np.float64) / 255.0

    occupancy_prob = pixels if config.negate else 1.0 - pixels

    values = np.full(pixels.shape, -1, dtype=np.int8)
    values[occupancy_prob > config.occupied_thresh] = 100
    values[occupancy_prob < config.free_thresh] = 0
    return np.flipud(values)


def load_grid_map(map_path: Path, meta_path: Optional[Path] = None,
                  config: Optional[MapConfig] = None) -> GridMap:
    """
    Load an occupancy grid from an image or array file.

    Supported inputs:
        - image (PNG/PGM/...) with optional JSON metadata next to it
          (same stem, ``.json``) giving resolution, origin and thresholds
        - ``.npy`` occupancy array (0=free, >0 occupied, -1 unknown)
        - ``.json`` with an ``occupancy`` list of rows plus metadata keys

    Args:
        map_path: Path to the map file
        meta_path: Optional metadata JSON path (images only)
        config: Explicit MapConfig, overrides any metadata file

    Returns:
        GridMap snapshot, not inflated (see PlannerConfig.inflation_radius)

    Raises:
        ValueError: If the map or its metadata cannot be read
    """
    map_path = Path(map_path)
    suffix = map_path.suffix.lower()

    if suffix == '.json':
        data = load_json(map_path)
        if data is None or 'occupancy' not in data:
            raise ValueError(f"{map_path} has no 'occupancy' array")
        if config is None:
            config = map_config_from_dict(data)
        values = np.array(data['occupancy'], dtype=np.int16)

    elif suffix == '.npy':
        values = np.load(map_path)
        if config is None:
            config = _load_meta(meta_path or map_path.with_suffix('.json'))

    else:
        if config is None:
            config = _load_meta(meta_path or map_path.with_suffix('.json'))
        try:
            image = np.array(Image.open(map_path))
        except OSError as e:
            raise ValueError(f"Could not open map image {map_path}: {e}") from e
        values = occupancy_from_image(image, config)

    return GridMap.from_occupancy(values, config.resolution, config.origin,
                                  free_threshold=config.free_cost_threshold)


def _load_meta(meta_path: Path) -> MapConfig:
    if not meta_path.exists():
        return MapConfig()
    data = load_json(meta_path)
    if data is None:
        raise ValueError(f"Invalid map metadata: {meta_path}")
    return map_config_from_dict(data)


def plan_to_dict(result) -> Dict[str, Any]:
    """Convert a PlanResult into a JSON-serialisable dictionary."""
    return {
        'success': result.success,
        'error': result.error,
        'message': result.message,
        'total_cost': result.total_cost if result.success else None,
        'planning_time': result.planning_time,
        'nodes_expanded': result.nodes_expanded,
        'cells': [int(c) for c in result.cells],
        'path': [{'x': float(x), 'y': float(y)} for x, y in result.path],
    }


def save_plan(result, file_path: Path) -> bool:
    """
    Export a PlanResult as JSON.

    Returns:
        True if successful, False otherwise
    """
    return save_json(plan_to_dict(result), Path(file_path))
