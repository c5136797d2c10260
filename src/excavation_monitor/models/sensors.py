"""Monitoring sensor categories and placed sensors."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from excavation_monitor.models.geometry import Point3D


class SensorCategory(str, Enum):
    """Monitored quantity, following the GB 50497-2019 monitoring items."""

    HORIZONTAL_DISPLACEMENT = "horizontal-displacement"
    VERTICAL_DISPLACEMENT = "vertical-displacement"
    DEEP_HORIZONTAL = "deep-horizontal"
    SUPPORT_FORCE = "support-force"
    ANCHOR_FORCE = "anchor-force"
    WATER_LEVEL = "water-level"
    GROUND_SETTLEMENT = "ground-settlement"
    WALL_INTERNAL_FORCE = "wall-internal-force"
    PORE_PRESSURE = "pore-pressure"
    SOIL_PRESSURE = "soil-pressure"


WALL_DISPLACEMENT_CATEGORIES = frozenset(
    {SensorCategory.HORIZONTAL_DISPLACEMENT, SensorCategory.VERTICAL_DISPLACEMENT}
)


class PlacedSensor(BaseModel):
    """A monitoring point placed in the scene."""

    model_config = ConfigDict(frozen=True)

    category: SensorCategory
    position: Point3D
    id: int | None = Field(default=None, description="Index assigned by the placement host")
