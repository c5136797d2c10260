"""Pit, sensor and report data models."""

from excavation_monitor.models.geometry import Point2D, Point3D, Polygon2D
from excavation_monitor.models.pit import Composition, PitConfiguration, PitDimensions
from excavation_monitor.models.sensors import (
    WALL_DISPLACEMENT_CATEGORIES,
    PlacedSensor,
    SensorCategory,
)
from excavation_monitor.models.layout import SensorLayout
from excavation_monitor.models.report import (
    Compliance,
    IssueCode,
    LayoutCompliance,
    QuantityCompliance,
    RangeCompliance,
    SideDistribution,
    ValidationIssue,
    ValidationReport,
)

__all__ = [
    "Point2D",
    "Point3D",
    "Polygon2D",
    "Composition",
    "PitConfiguration",
    "PitDimensions",
    "WALL_DISPLACEMENT_CATEGORIES",
    "PlacedSensor",
    "SensorCategory",
    "SensorLayout",
    "Compliance",
    "IssueCode",
    "LayoutCompliance",
    "QuantityCompliance",
    "RangeCompliance",
    "SideDistribution",
    "ValidationIssue",
    "ValidationReport",
]
