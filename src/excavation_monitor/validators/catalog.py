"""Sensor category catalog: display names, minimum counts, layout constraints.

Values follow GB 50497-2019 (建筑基坑工程监测技术标准), chapter 5
(monitoring point layout). The tables are built once at import time and
exposed read-only.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

from excavation_monitor.models.sensors import SensorCategory


class Zone(str, Enum):
    """Preferred placement zone along a pit side."""

    MIDDLE = "middle"
    CORNER = "corner"  # convex (阳角) corner


class LayoutConstraint(BaseModel):
    """Placement rule for one sensor category."""

    model_config = ConfigDict(frozen=True)

    description: str
    min_points_per_side: int | None = None
    preferred_zones: tuple[Zone, ...] = ()
    min_points: int | None = None
    max_spacing: float | None = None
    min_points_per_level: int | None = None
    monitoring_range: float | None = None  # multiple of pit depth


DEFAULT_MINIMUM_COUNT = 1

DISPLAY_NAMES = MappingProxyType({
    SensorCategory.HORIZONTAL_DISPLACEMENT: "Wall-top horizontal displacement",
    SensorCategory.VERTICAL_DISPLACEMENT: "Wall-top vertical displacement",
    SensorCategory.DEEP_HORIZONTAL: "Deep horizontal displacement",
    SensorCategory.SUPPORT_FORCE: "Strut axial force",
    SensorCategory.ANCHOR_FORCE: "Anchor axial force",
    SensorCategory.WATER_LEVEL: "Groundwater level",
    SensorCategory.GROUND_SETTLEMENT: "Surrounding ground settlement",
    SensorCategory.WALL_INTERNAL_FORCE: "Retaining wall internal force",
    SensorCategory.PORE_PRESSURE: "Pore water pressure",
    SensorCategory.SOIL_PRESSURE: "Earth pressure",
})

MINIMUM_COUNTS = MappingProxyType({
    SensorCategory.HORIZONTAL_DISPLACEMENT: 8,
    SensorCategory.VERTICAL_DISPLACEMENT: 8,
    SensorCategory.DEEP_HORIZONTAL: 4,
    SensorCategory.SUPPORT_FORCE: 4,
    SensorCategory.ANCHOR_FORCE: 2,
    SensorCategory.WATER_LEVEL: 2,
    SensorCategory.GROUND_SETTLEMENT: 6,
})

LAYOUT_CONSTRAINTS = MappingProxyType({
    SensorCategory.HORIZONTAL_DISPLACEMENT: LayoutConstraint(
        description="Wall-top horizontal displacement points",
        min_points_per_side=3,
        preferred_zones=(Zone.MIDDLE, Zone.CORNER),
    ),
    SensorCategory.VERTICAL_DISPLACEMENT: LayoutConstraint(
        description="Wall-top vertical displacement points",
        min_points_per_side=3,
        preferred_zones=(Zone.MIDDLE, Zone.CORNER),
    ),
    SensorCategory.DEEP_HORIZONTAL: LayoutConstraint(
        description="Deep horizontal displacement points",
        min_points=2,
        max_spacing=50.0,  # sides longer than this get extra points
    ),
    SensorCategory.SUPPORT_FORCE: LayoutConstraint(
        description="Strut axial force points",
        min_points_per_level=2,
    ),
    SensorCategory.GROUND_SETTLEMENT: LayoutConstraint(
        description="Surrounding ground settlement points",
        monitoring_range=3.0,  # upper bound; 1-3 × depth
    ),
    SensorCategory.WATER_LEVEL: LayoutConstraint(
        description="Groundwater level points",
        min_points=2,  # pit center and perimeter
    ),
})


def display_name(category: SensorCategory | str) -> str:
    """Human-readable name of a category. Unknown values are returned as-is."""
    try:
        return DISPLAY_NAMES[SensorCategory(category)]
    except ValueError:
        return str(category)


def minimum_count(category: SensorCategory | str) -> int:
    """Minimum recommended number of points for a category."""
    try:
        return MINIMUM_COUNTS.get(SensorCategory(category), DEFAULT_MINIMUM_COUNT)
    except ValueError:
        return DEFAULT_MINIMUM_COUNT


def layout_constraint(category: SensorCategory | str) -> LayoutConstraint | None:
    """Placement rule for a category, if the standard defines one."""
    try:
        return LAYOUT_CONSTRAINTS.get(SensorCategory(category))
    except ValueError:
        return None
