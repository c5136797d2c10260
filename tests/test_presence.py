"""Tests for required / recommended presence and count checks."""

from excavation_monitor.models import (
    IssueCode,
    PlacedSensor,
    Point3D,
    SensorCategory,
    ValidationReport,
)
from excavation_monitor.validators.presence import (
    check_recommended_sensors,
    check_required_sensors,
)

HD = SensorCategory.HORIZONTAL_DISPLACEMENT
VD = SensorCategory.VERTICAL_DISPLACEMENT
DH = SensorCategory.DEEP_HORIZONTAL
WL = SensorCategory.WATER_LEVEL
AF = SensorCategory.ANCHOR_FORCE


def _many(category, n):
    return [
        PlacedSensor(category=category, position=Point3D(x=i, y=0, z=0))
        for i in range(n)
    ]


class TestRequired:
    def test_all_missing_one_error_each_in_order(self):
        report = ValidationReport()
        counts = check_required_sensors((HD, VD, DH), [], report)

        assert counts == {HD: 0, VD: 0, DH: 0}
        assert [i.category for i in report.issues] == [HD, VD, DH]
        assert all(i.severity == "error" for i in report.issues)
        assert all(i.code == IssueCode.MISSING_REQUIRED for i in report.issues)
        assert "Wall-top horizontal displacement" in report.errors[0]

    def test_sufficient_count_is_silent(self):
        report = ValidationReport()
        counts = check_required_sensors((HD,), _many(HD, 8), report)
        assert counts == {HD: 8}
        assert report.issues == []

    def test_below_minimum_is_warning_not_error(self):
        report = ValidationReport()
        check_required_sensors((HD, WL), _many(HD, 8) + _many(WL, 1), report)

        assert report.errors == []
        assert len(report.warnings) == 1
        issue = report.issues[0]
        assert issue.code == IssueCode.INSUFFICIENT_COUNT
        assert issue.category == WL
        assert issue.context == {"count": 1, "minimum": 2}
        assert "at least 2" in issue.message

    def test_other_categories_ignored(self):
        report = ValidationReport()
        counts = check_required_sensors((WL,), _many(AF, 5), report)
        assert counts == {WL: 0}
        assert len(report.errors) == 1


class TestRecommended:
    def test_absent_is_suggestion(self):
        report = ValidationReport()
        counts = check_recommended_sensors((AF, WL), _many(WL, 1), report)

        assert counts == {AF: 0, WL: 1}
        assert report.errors == []
        assert report.warnings == []
        assert report.suggestions == ["Consider adding: Anchor axial force"]

    def test_present_below_minimum_is_silent(self):
        """Recommended items only need to be present."""
        report = ValidationReport()
        check_recommended_sensors((AF,), _many(AF, 1), report)
        assert report.issues == []

    def test_empty_list(self):
        report = ValidationReport()
        assert check_recommended_sensors((), _many(AF, 1), report) == {}
        assert report.issues == []
