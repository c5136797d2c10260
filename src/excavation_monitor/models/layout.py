"""Sensor layout: a pit configuration plus the sensors placed around it.

This is the file format the CLI reads and writes. The validator itself
only ever sees the configuration and the sensor list.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from excavation_monitor.models.geometry import Point3D
from excavation_monitor.models.pit import PitConfiguration
from excavation_monitor.models.sensors import PlacedSensor, SensorCategory

logger = logging.getLogger(__name__)


class SensorLayout(BaseModel):
    """A pit and its monitoring points."""

    config: PitConfiguration
    sensors: list[PlacedSensor] = Field(default_factory=list)

    # ── Persistence ───────────────────────────────────────────────────

    @classmethod
    def load(cls, path: str | Path) -> SensorLayout:
        """Load a layout from a JSON file."""
        path = Path(path)
        return cls.model_validate_json(path.read_text())

    def save(self, path: str | Path) -> Path:
        """Save the layout to a JSON file. Creates parent dirs if needed."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))
        return path

    # ── Placement ─────────────────────────────────────────────────────

    def place_sensor(
        self, category: SensorCategory | str, position: Point3D
    ) -> PlacedSensor | None:
        """Place a sensor if its position suits the category.

        Returns the placed sensor, or None when the position is rejected.
        """
        from excavation_monitor.validators.placement import is_valid_sensor_position

        category = SensorCategory(category)
        if not is_valid_sensor_position(self.config, category, position):
            logger.debug("Rejected %s at %s", category.value, position)
            return None

        sensor = PlacedSensor(category=category, position=position, id=len(self.sensors))
        self.sensors.append(sensor)
        return sensor

    def remove_sensor(self, index: int) -> None:
        """Remove the sensor at index and renumber the rest. Out-of-range is a no-op."""
        if not 0 <= index < len(self.sensors):
            return
        del self.sensors[index]
        self.sensors = [s.model_copy(update={"id": i}) for i, s in enumerate(self.sensors)]

    def clear_sensors(self) -> None:
        self.sensors = []
