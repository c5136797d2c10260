"""Tests for single-sensor placement rules."""

import pytest

from excavation_monitor.models import PitConfiguration, PitDimensions, Point3D, SensorCategory
from excavation_monitor.validators.placement import is_valid_sensor_position

CONFIG = PitConfiguration(
    composition="soil",
    safety_level=1,
    dimensions=PitDimensions(length=30, width=20, depth=10),
)


class TestPlacement:
    def test_too_far_from_pit(self):
        # Limit is 2 × 30m
        far = Point3D(x=61, y=0, z=0)
        for category in SensorCategory:
            assert not is_valid_sensor_position(CONFIG, category, far)

    def test_at_distance_limit(self):
        assert is_valid_sensor_position(
            CONFIG, SensorCategory.WATER_LEVEL, Point3D(x=60, y=0, z=0)
        )

    @pytest.mark.parametrize(
        "category",
        [SensorCategory.HORIZONTAL_DISPLACEMENT, SensorCategory.VERTICAL_DISPLACEMENT],
    )
    @pytest.mark.parametrize("y,ok", [(1.0, True), (-0.9, True), (2.9, True), (3.0, False), (-5.0, False)])
    def test_wall_points_on_crown(self, category, y, ok):
        assert is_valid_sensor_position(CONFIG, category, Point3D(x=15, y=y, z=0)) is ok

    @pytest.mark.parametrize("y,ok", [(0.0, True), (0.5, True), (-1.0, False), (1.5, False)])
    def test_settlement_points_at_ground(self, y, ok):
        position = Point3D(x=30, y=y, z=0)
        assert is_valid_sensor_position(CONFIG, SensorCategory.GROUND_SETTLEMENT, position) is ok

    @pytest.mark.parametrize(
        "category",
        [
            SensorCategory.WATER_LEVEL,
            SensorCategory.DEEP_HORIZONTAL,
            SensorCategory.SUPPORT_FORCE,
            SensorCategory.PORE_PRESSURE,
        ],
    )
    def test_other_categories_anywhere_in_range(self, category):
        assert is_valid_sensor_position(CONFIG, category, Point3D(x=0, y=-10, z=0))
