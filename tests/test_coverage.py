"""Tests for density, range coverage and monitoring necessity."""

import pytest

from excavation_monitor.models import (
    IssueCode,
    PitConfiguration,
    PitDimensions,
    PlacedSensor,
    Point3D,
    SensorCategory,
    ValidationReport,
)
from excavation_monitor.validators.coverage import (
    check_monitoring_necessity,
    check_monitoring_range,
    check_sensor_quantity,
    recommended_density,
)


def _config(level=1, length=30, width=20, depth=10):
    return PitConfiguration(
        composition="soil",
        safety_level=level,
        dimensions=PitDimensions(length=length, width=width, depth=depth),
    )


def _at(points, category=SensorCategory.WATER_LEVEL):
    return [
        PlacedSensor(category=category, position=Point3D(x=x, y=0, z=z))
        for x, z in points
    ]


def _n_sensors(n):
    return _at([(0, 0)] * n)


class TestQuantity:
    @pytest.mark.parametrize("level,expected", [(1, 0.8), (2, 0.6), (3, 0.4), (4, 0.5)])
    def test_recommended_density(self, level, expected):
        assert recommended_density(level) == expected

    def test_inadequate_density(self):
        result = check_sensor_quantity(_config(), _n_sensors(40))
        assert result.total == 40
        assert result.perimeter == 100
        assert result.density == pytest.approx(0.4)
        assert result.recommended == 0.8
        assert result.adequate is False

    def test_adequate_within_tolerance(self):
        """80% of the recommended density is enough."""
        result = check_sensor_quantity(_config(), _n_sensors(70))
        assert result.adequate is True

    def test_no_sensors(self):
        result = check_sensor_quantity(_config(level=3), [])
        assert result.density == 0.0
        assert result.adequate is False

    def test_density_falls_as_perimeter_grows(self):
        sensors = _n_sensors(70)
        results = [
            check_sensor_quantity(_config(length=length), sensors)
            for length in (30, 35, 40, 60, 100)
        ]
        densities = [r.density for r in results]
        assert all(a > b for a, b in zip(densities, densities[1:]))

        adequacy = [r.adequate for r in results]
        assert adequacy[0] is True
        assert adequacy[-1] is False
        # once inadequate, never adequate again
        first_false = adequacy.index(False)
        assert not any(adequacy[first_false:])


class TestRange:
    def test_no_sensors(self):
        report = ValidationReport()
        result = check_monitoring_range(_config(), [], report)
        assert report.issues == []
        assert result.total == 0
        assert result.outside == 0
        assert result.max_distance == 0.0
        assert result.recommended_max_distance == 45.0

    def test_all_inside_warns(self):
        report = ValidationReport()
        result = check_monitoring_range(_config(), _at([(0, 0), (10, 0), (15, 0)]), report)
        assert result.outside == 0
        assert result.max_distance == 15.0
        assert [i.code for i in report.issues] == [IssueCode.PERIPHERAL_SPARSE]
        assert report.issues[0].severity == "warning"

    def test_outside_threshold_is_half_max_edge(self):
        report = ValidationReport()
        result = check_monitoring_range(_config(), _at([(15.1, 0), (0, 14)]), report)
        assert result.outside == 1
        assert report.issues == []

    def test_enough_outside_points(self):
        report = ValidationReport()
        sensors = _at([(20, 0)] * 4 + [(0, 0)] * 6)
        result = check_monitoring_range(_config(), sensors, report)
        assert result.outside == 4
        assert report.issues == []

    def test_below_thirty_percent_warns(self):
        report = ValidationReport()
        sensors = _at([(20, 0)] * 2 + [(0, 0)] * 8)
        check_monitoring_range(_config(), sensors, report)
        assert len(report.warnings) == 1


class TestNecessity:
    def _suggestion(self, level, depth):
        report = ValidationReport()
        check_monitoring_necessity(_config(level=level, depth=depth), report)
        assert len(report.issues) == 1
        assert report.issues[0].severity == "suggestion"
        return report.issues[0].code

    @pytest.mark.parametrize("level", [1, 2])
    @pytest.mark.parametrize("depth", [2, 10])
    def test_mandatory_regardless_of_depth(self, level, depth):
        assert self._suggestion(level, depth) == IssueCode.MONITORING_MANDATORY

    def test_level_3_shallow_is_discretionary(self):
        assert self._suggestion(3, 3) == IssueCode.MONITORING_DISCRETIONARY

    def test_level_3_deep_should_monitor(self):
        assert self._suggestion(3, 6) == IssueCode.MONITORING_ADVISED

    def test_level_3_at_five_meters_should_monitor(self):
        assert self._suggestion(3, 5) == IssueCode.MONITORING_ADVISED
