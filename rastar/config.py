"""
Configuration utilities and default settings.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple


@dataclass
class MapConfig:
    """Configuration for loading occupancy map images."""
    resolution: float = 0.05          # world units per cell
    origin: Tuple[float, float] = (0.0, 0.0)
    negate: bool = False
    occupied_thresh: float = 0.65     # occupancy probability above which a pixel is blocked
    free_thresh: float = 0.196        # occupancy probability below which a pixel is free
    free_cost_threshold: int = 0      # occupancy values <= this are traversable


@dataclass
class PlannerConfig:
    """Configuration for the A* planner."""
    max_expansions: Optional[int] = None
    inflation_radius: float = 0.0


# Default configurations
DEFAULT_MAP_CONFIG = MapConfig()
DEFAULT_PLANNER_CONFIG = PlannerConfig()


def planner_config_from_dict(data: Optional[Dict[str, Any]]) -> PlannerConfig:
    """
    Build a PlannerConfig from a plain dictionary.

    Args:
        data: Mapping of field names to values, or None for defaults

    Returns:
        PlannerConfig instance

    Raises:
        ValueError: If the mapping contains unknown keys or invalid values
    """
    if not data:
        return PlannerConfig()

    known = {f.name for f in fields(PlannerConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown planner config keys: {', '.join(unknown)}")

    config = PlannerConfig(**data)
    if config.max_expansions is not None and config.max_expansions <= 0:
        raise ValueError("max_expansions must be positive")
    if config.inflation_radius < 0:
        raise ValueError("inflation_radius must be non-negative")
    return config


def map_config_from_dict(data: Optional[Dict[str, Any]]) -> MapConfig:
    """
    Build a MapConfig from map metadata (map_server style keys).

    Args:
        data: Metadata dictionary, or None for defaults

    Returns:
        MapConfig instance
    """
    if not data:
        return MapConfig()

    known = {f.name for f in fields(MapConfig)}
    values = {k: v for k, v in data.items() if k in known}
    if 'origin' in values:
        origin = values['origin']
        if len(origin) < 2:
            raise ValueError(f"Map origin needs x and y, got {origin!r}")
        values['origin'] = (float(origin[0]), float(origin[1]))
    config = MapConfig(**values)
    if config.resolution <= 0:
        raise ValueError("Map resolution must be positive")
    return config
