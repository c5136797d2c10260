"""Placement rules applied before a sensor is accepted into a layout."""

from __future__ import annotations

from excavation_monitor.models.geometry import Point3D
from excavation_monitor.models.pit import PitConfiguration
from excavation_monitor.models.sensors import WALL_DISPLACEMENT_CATEGORIES, SensorCategory

MAX_DISTANCE_FACTOR = 2.0
WALL_CROWN_ELEVATION = 1.0
WALL_CROWN_TOLERANCE = 2.0
GROUND_TOLERANCE = 1.0


def is_valid_sensor_position(
    config: PitConfiguration,
    category: SensorCategory,
    position: Point3D,
) -> bool:
    """Check that a sensor position is plausible for its category.

    - Anything beyond 2 × max(L, W) from the pit center is rejected
    - Wall-top displacement points must sit at the wall crown (y ≈ 1m)
    - Ground settlement points must sit at ground level (y ≈ 0)
    """
    max_distance = config.dimensions.max_edge * MAX_DISTANCE_FACTOR
    if position.radial_distance > max_distance:
        return False

    if category in WALL_DISPLACEMENT_CATEGORIES:
        return abs(position.y - WALL_CROWN_ELEVATION) < WALL_CROWN_TOLERANCE
    if category == SensorCategory.GROUND_SETTLEMENT:
        return abs(position.y) < GROUND_TOLERANCE
    return True
