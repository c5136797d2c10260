"""Plan-view classification of sensor positions around the pit.

Pure geometry: which side of the footprint a sensor sits on, whether it is
in a corner or middle zone, and how far the sensors reach beyond the pit.
The layout checks in layout.py turn these numbers into messages.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from excavation_monitor.models.geometry import Point2D
from excavation_monitor.models.pit import PitDimensions
from excavation_monitor.models.report import SideDistribution
from excavation_monitor.models.sensors import PlacedSensor

SIDE_TOLERANCE = 2.0
CORNER_ZONE_TOLERANCE = 3.0
CORNER_SEARCH_RADIUS = 5.0
MIN_POINTS_PER_SIDE = 3


class Side(str, Enum):
    """Footprint side. East/west are the ±x edges, north/south the ±z edges."""

    EAST = "east"
    WEST = "west"
    NORTH = "north"
    SOUTH = "south"


def classify_side(
    x: float,
    z: float,
    half_length: float,
    half_width: float,
    tolerance: float = SIDE_TOLERANCE,
) -> Side | None:
    """Side whose edge line the point lies near, or None.

    Tested in order east, west, north, south; a corner point therefore
    belongs to the east or west side.
    """
    if abs(x - half_length) < tolerance:
        return Side.EAST
    if abs(x + half_length) < tolerance:
        return Side.WEST
    if abs(z - half_width) < tolerance:
        return Side.NORTH
    if abs(z + half_width) < tolerance:
        return Side.SOUTH
    return None


def is_corner_zone(
    x: float,
    z: float,
    half_length: float,
    half_width: float,
    tolerance: float = CORNER_ZONE_TOLERANCE,
) -> bool:
    """True if the point is near any of the four footprint corners."""
    return (
        abs(abs(x) - half_length) < tolerance
        and abs(abs(z) - half_width) < tolerance
    )


def is_middle_zone(x: float, z: float, half_length: float, half_width: float) -> bool:
    """True if the point lies in the central half of either axis."""
    return abs(x) < half_length / 2 or abs(z) < half_width / 2


def analyze_distribution(
    sensors: Iterable[PlacedSensor], dims: PitDimensions
) -> SideDistribution:
    """Count sensors per side and per zone."""
    hl, hw = dims.half_length, dims.half_width
    counts = {side: 0 for side in Side}
    corners = 0
    middle = 0

    for sensor in sensors:
        x, z = sensor.position.x, sensor.position.z
        side = classify_side(x, z, hl, hw)
        if side is not None:
            counts[side] += 1
        if is_corner_zone(x, z, hl, hw):
            corners += 1
        if is_middle_zone(x, z, hl, hw):
            middle += 1

    return SideDistribution(
        east=counts[Side.EAST],
        west=counts[Side.WEST],
        north=counts[Side.NORTH],
        south=counts[Side.SOUTH],
        corners=corners,
        middle=middle,
    )


def sensors_by_side(
    sensors: Iterable[PlacedSensor], dims: PitDimensions
) -> dict[Side, list[PlacedSensor]]:
    """Group sensors by the side they sit on. Unclassified sensors are dropped."""
    groups: dict[Side, list[PlacedSensor]] = {side: [] for side in Side}
    for sensor in sensors:
        side = classify_side(
            sensor.position.x, sensor.position.z, dims.half_length, dims.half_width
        )
        if side is not None:
            groups[side].append(sensor)
    return groups


def uncovered_corners(
    sensors: Iterable[PlacedSensor],
    dims: PitDimensions,
    radius: float = CORNER_SEARCH_RADIUS,
) -> list[Point2D]:
    """Footprint corners with no sensor strictly within radius."""
    points = [s.position.plan for s in sensors]
    return [
        corner
        for corner in dims.footprint.vertices
        if not any(p.distance_to(corner) < radius for p in points)
    ]


def identify_critical_positions(
    sensors: Iterable[PlacedSensor],
    dims: PitDimensions,
    min_per_side: int = MIN_POINTS_PER_SIDE,
) -> tuple[int, int]:
    """Return (sides lacking middle coverage, corners lacking a sensor)."""
    sensors = list(sensors)
    groups = sensors_by_side(sensors, dims)
    missing_middle = sum(1 for members in groups.values() if len(members) < min_per_side)
    missing_corner = len(uncovered_corners(sensors, dims))
    return missing_middle, missing_corner


def settlement_range(sensors: Iterable[PlacedSensor], dims: PitDimensions) -> float:
    """Furthest reach of the sensors beyond the pit boundary.

    The boundary is approximated by a circle of radius max(L, W) / 2.
    Never negative; 0 when there are no sensors.
    """
    boundary = dims.max_edge / 2
    return max([0.0, *(s.position.radial_distance - boundary for s in sensors)])
