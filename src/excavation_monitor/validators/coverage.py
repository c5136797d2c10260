"""Quantity, range and necessity checks.

- Density: sensors per meter of pit perimeter against a per-level target
- Range: share of sensors placed in the surrounding environment
- Necessity (GB 50497-2019, 3.0.1): whether the pit must be monitored at all
"""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType

from excavation_monitor.models.pit import PitConfiguration
from excavation_monitor.models.report import (
    IssueCode,
    QuantityCompliance,
    RangeCompliance,
    ValidationReport,
)
from excavation_monitor.models.sensors import PlacedSensor

BASE_DENSITY = MappingProxyType({1: 0.8, 2: 0.6, 3: 0.4})
DEFAULT_DENSITY = 0.5
DENSITY_TOLERANCE = 0.8
RANGE_FACTOR = 1.5
MIN_OUTSIDE_SHARE = 0.3
MONITORING_DEPTH_THRESHOLD = 5.0


def recommended_density(safety_level: int) -> float:
    """Target sensors per meter of perimeter for a safety level."""
    return BASE_DENSITY.get(safety_level, DEFAULT_DENSITY)


def check_sensor_quantity(
    config: PitConfiguration,
    sensors: Sequence[PlacedSensor],
) -> QuantityCompliance:
    """Overall sensor density along the perimeter. Emits no messages."""
    perimeter = config.dimensions.perimeter
    recommended = recommended_density(config.safety_level)
    density = len(sensors) / perimeter

    return QuantityCompliance(
        total=len(sensors),
        perimeter=perimeter,
        density=density,
        recommended=recommended,
        adequate=density >= recommended * DENSITY_TOLERANCE,
    )


def check_monitoring_range(
    config: PitConfiguration,
    sensors: Sequence[PlacedSensor],
    report: ValidationReport,
) -> RangeCompliance:
    """Check that enough sensors monitor the surroundings of the pit.

    A sensor counts as outside when its plan distance from the pit center
    exceeds max(L, W) / 2.
    """
    max_edge = config.dimensions.max_edge
    distances = [s.position.radial_distance for s in sensors]
    outside = sum(1 for d in distances if d > max_edge / 2)

    if outside < len(sensors) * MIN_OUTSIDE_SHARE:
        report.add(
            "warning",
            IssueCode.PERIPHERAL_SPARSE,
            "Place more monitoring points in the environment around the pit",
            outside=outside,
            total=len(sensors),
        )

    return RangeCompliance(
        total=len(sensors),
        outside=outside,
        max_distance=max(distances, default=0.0),
        recommended_max_distance=max_edge * RANGE_FACTOR,
    )


def check_monitoring_necessity(config: PitConfiguration, report: ValidationReport) -> None:
    """Add exactly one suggestion on whether monitoring is mandatory."""
    depth = config.dimensions.depth

    if config.safety_level <= 2:
        report.add(
            "suggestion",
            IssueCode.MONITORING_MANDATORY,
            "Safety level 1/2 pit: monitoring is mandatory",
        )
    elif depth >= MONITORING_DEPTH_THRESHOLD:
        report.add(
            "suggestion",
            IssueCode.MONITORING_ADVISED,
            f"Excavation depth ≥ {MONITORING_DEPTH_THRESHOLD:g}m: monitoring should be performed",
            depth=depth,
        )
    else:
        report.add(
            "suggestion",
            IssueCode.MONITORING_DISCRETIONARY,
            (
                f"Level 3 pit shallower than {MONITORING_DEPTH_THRESHOLD:g}m: "
                "monitoring is at the discretion of site conditions"
            ),
            depth=depth,
        )
