"""Layout validation entry point.

Runs every check against a pit configuration and its sensors and
returns a fresh ValidationReport. Nothing raises for a bad layout;
every finding ends up in the report.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from excavation_monitor.models.pit import PitConfiguration
from excavation_monitor.models.report import Compliance, IssueCode, ValidationReport
from excavation_monitor.models.sensors import PlacedSensor
from excavation_monitor.validators.coverage import (
    check_monitoring_necessity,
    check_monitoring_range,
    check_sensor_quantity,
)
from excavation_monitor.validators.layout import check_sensor_layout
from excavation_monitor.validators.presence import (
    check_recommended_sensors,
    check_required_sensors,
)
from excavation_monitor.validators.requirements import resolve

logger = logging.getLogger(__name__)


def validate_layout(
    config: PitConfiguration, sensors: Sequence[PlacedSensor]
) -> ValidationReport:
    """Validate a sensor layout against GB 50497-2019.

    An undefined (composition, safety level) pair yields a single error and
    a report without compliance detail.
    """
    report = ValidationReport()
    composition = getattr(config.composition, "value", config.composition)

    requirements = resolve(config.composition, config.safety_level)
    if requirements is None:
        report.add(
            "error",
            IssueCode.REQUIREMENT_NOT_FOUND,
            (
                f"No monitoring requirements found for {composition} pit "
                f"of safety level {config.safety_level}"
            ),
            composition=composition,
            safety_level=config.safety_level,
        )
        logger.info("Requirement lookup failed for %s / %s", composition, config.safety_level)
        return report

    required = check_required_sensors(requirements.required, sensors, report)
    recommended = check_recommended_sensors(requirements.recommended, sensors, report)
    layout = check_sensor_layout(config, sensors, report)
    quantity = check_sensor_quantity(config, sensors)
    coverage = check_monitoring_range(config, sensors, report)
    check_monitoring_necessity(config, report)

    report.compliance = Compliance(
        required=required,
        recommended=recommended,
        layout=layout,
        quantity=quantity,
        range=coverage,
    )

    logger.debug(
        "Validated %d sensors for %s level %s: %d errors, %d warnings, %d suggestions",
        len(sensors),
        composition,
        config.safety_level,
        len(report.errors),
        len(report.warnings),
        len(report.suggestions),
    )
    return report
