"""Presence and count checks for required / recommended monitoring items."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from excavation_monitor.models.report import IssueCode, ValidationReport
from excavation_monitor.models.sensors import PlacedSensor, SensorCategory
from excavation_monitor.validators.catalog import display_name, minimum_count


def count_by_category(sensors: Sequence[PlacedSensor]) -> Counter[SensorCategory]:
    return Counter(s.category for s in sensors)


def check_required_sensors(
    required: Sequence[SensorCategory],
    sensors: Sequence[PlacedSensor],
    report: ValidationReport,
) -> dict[SensorCategory, int]:
    """Error per absent required item, warning per item below its minimum count.

    Returns the count of each required item.
    """
    counts = count_by_category(sensors)
    compliance: dict[SensorCategory, int] = {}

    for category in required:
        count = counts[category]
        compliance[category] = count
        minimum = minimum_count(category)

        if count == 0:
            report.add(
                "error",
                IssueCode.MISSING_REQUIRED,
                f"Missing required monitoring item: {display_name(category)}",
                category=category,
            )
        elif count < minimum:
            report.add(
                "warning",
                IssueCode.INSUFFICIENT_COUNT,
                (
                    f"Not enough {display_name(category)} points ({count}); "
                    f"recommend at least {minimum}"
                ),
                category=category,
                count=count,
                minimum=minimum,
            )

    return compliance


def check_recommended_sensors(
    recommended: Sequence[SensorCategory],
    sensors: Sequence[PlacedSensor],
    report: ValidationReport,
) -> dict[SensorCategory, int]:
    """Suggestion per absent recommended item. Returns the count of each item."""
    counts = count_by_category(sensors)
    compliance: dict[SensorCategory, int] = {}

    for category in recommended:
        count = counts[category]
        compliance[category] = count
        if count == 0:
            report.add(
                "suggestion",
                IssueCode.RECOMMENDED_ABSENT,
                f"Consider adding: {display_name(category)}",
                category=category,
            )

    return compliance
