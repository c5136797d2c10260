"""Spatial layout checks (GB 50497-2019, chapter 5).

Checks that monitoring points sit where the standard wants them, not just
that there are enough of them:
- Wall-top displacement: at least 3 points per side, middle of each side
  and every convex corner covered
- Deep horizontal displacement: 4 points, 6 when a side exceeds 50m
- Ground settlement: points reach 2 × depth beyond the pit, at least 8

All checks run unconditionally and only emit warnings.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from excavation_monitor.models.pit import PitConfiguration, PitDimensions
from excavation_monitor.models.report import (
    DeepHorizontalLayout,
    GroundSettlementLayout,
    IssueCode,
    LayoutCompliance,
    SupportLayout,
    ValidationReport,
    WallDisplacementLayout,
)
from excavation_monitor.models.sensors import (
    WALL_DISPLACEMENT_CATEGORIES,
    PlacedSensor,
    SensorCategory,
)
from excavation_monitor.validators.catalog import layout_constraint
from excavation_monitor.validators.spatial import (
    analyze_distribution,
    identify_critical_positions,
    settlement_range,
)

SIDES = 4
DEEP_HORIZONTAL_POINTS = 4
DEEP_HORIZONTAL_POINTS_LONG_PIT = 6
SETTLEMENT_RANGE_FACTOR = 2.0
MIN_SETTLEMENT_POINTS = 8
MAX_SUPPORT_LEVELS = 3
SUPPORT_LEVEL_SPACING = 4.0


def check_sensor_layout(
    config: PitConfiguration,
    sensors: Sequence[PlacedSensor],
    report: ValidationReport,
) -> LayoutCompliance:
    """Run every layout check and collect their detail."""
    dims = config.dimensions
    return LayoutCompliance(
        wall_displacement=check_wall_displacement_layout(sensors, dims, report),
        deep_horizontal=check_deep_horizontal_layout(sensors, dims, report),
        ground_settlement=check_ground_settlement_layout(sensors, dims, report),
        support=support_layout(config),
    )


def check_wall_displacement_layout(
    sensors: Sequence[PlacedSensor],
    dims: PitDimensions,
    report: ValidationReport,
) -> WallDisplacementLayout:
    """Wall-top horizontal/vertical displacement points around the perimeter."""
    wall_sensors = [s for s in sensors if s.category in WALL_DISPLACEMENT_CATEGORIES]
    per_side = layout_constraint(SensorCategory.HORIZONTAL_DISPLACEMENT).min_points_per_side
    missing_middle, missing_corner = identify_critical_positions(
        wall_sensors, dims, min_per_side=per_side
    )

    if len(wall_sensors) < SIDES * per_side:
        report.add(
            "warning",
            IssueCode.WALL_SPARSE,
            (
                f"Too few wall-top displacement points ({len(wall_sensors)}); "
                f"place at least {per_side} on each side"
            ),
            count=len(wall_sensors),
            minimum=SIDES * per_side,
        )
    if missing_middle > 0:
        report.add(
            "warning",
            IssueCode.SIDE_MISSING_MIDDLE,
            f"{missing_middle} side(s) lack mid-side monitoring points",
            count=missing_middle,
        )
    if missing_corner > 0:
        report.add(
            "warning",
            IssueCode.CORNER_MISSING,
            f"{missing_corner} convex corner(s) lack a monitoring point",
            count=missing_corner,
        )

    return WallDisplacementLayout(
        total=len(wall_sensors),
        distribution=analyze_distribution(wall_sensors, dims),
        missing_middle=missing_middle,
        missing_corner=missing_corner,
    )


def check_deep_horizontal_layout(
    sensors: Sequence[PlacedSensor],
    dims: PitDimensions,
    report: ValidationReport,
) -> DeepHorizontalLayout:
    """Deep horizontal displacement (inclinometer) points, more on long pits."""
    deep_sensors = [s for s in sensors if s.category == SensorCategory.DEEP_HORIZONTAL]
    max_spacing = layout_constraint(SensorCategory.DEEP_HORIZONTAL).max_spacing
    recommended = (
        DEEP_HORIZONTAL_POINTS_LONG_PIT
        if dims.max_edge > max_spacing
        else DEEP_HORIZONTAL_POINTS
    )

    if len(deep_sensors) < recommended:
        report.add(
            "warning",
            IssueCode.DEEP_HORIZONTAL_SHORT,
            f"Increase deep horizontal displacement points to {recommended}",
            category=SensorCategory.DEEP_HORIZONTAL,
            count=len(deep_sensors),
            recommended=recommended,
        )

    return DeepHorizontalLayout(
        total=len(deep_sensors),
        distribution=analyze_distribution(deep_sensors, dims),
        recommended=recommended,
    )


def check_ground_settlement_layout(
    sensors: Sequence[PlacedSensor],
    dims: PitDimensions,
    report: ValidationReport,
) -> GroundSettlementLayout:
    """Surrounding ground settlement points: reach and density."""
    settlement_sensors = [
        s for s in sensors if s.category == SensorCategory.GROUND_SETTLEMENT
    ]
    actual_range = settlement_range(settlement_sensors, dims)
    required_range = dims.depth * SETTLEMENT_RANGE_FACTOR

    if actual_range < required_range:
        report.add(
            "warning",
            IssueCode.SETTLEMENT_RANGE_SHORT,
            (
                f"Ground settlement monitoring range too small; extend to "
                f"{required_range:g}m beyond the pit edge"
            ),
            category=SensorCategory.GROUND_SETTLEMENT,
            range=actual_range,
            required_range=required_range,
        )
    if len(settlement_sensors) < MIN_SETTLEMENT_POINTS:
        report.add(
            "warning",
            IssueCode.SETTLEMENT_SPARSE,
            (
                "Too few surrounding ground settlement points; densify around "
                "important protected structures"
            ),
            category=SensorCategory.GROUND_SETTLEMENT,
            count=len(settlement_sensors),
            minimum=MIN_SETTLEMENT_POINTS,
        )

    return GroundSettlementLayout(
        total=len(settlement_sensors),
        range=actual_range,
        required_range=required_range,
    )


def support_levels(config: PitConfiguration) -> int:
    """Expected number of internal strut levels.

    One level per 4m of depth, at most 3. Shallow level-3 pits (< 8m)
    are assumed unsupported.
    """
    depth = config.dimensions.depth
    if config.safety_level == 3 and depth < 8:
        return 0
    return min(math.floor(depth / SUPPORT_LEVEL_SPACING), MAX_SUPPORT_LEVELS)


def support_layout(config: PitConfiguration) -> SupportLayout:
    levels = support_levels(config)
    per_level = layout_constraint(SensorCategory.SUPPORT_FORCE).min_points_per_level
    return SupportLayout(levels=levels, min_points=levels * per_level)
