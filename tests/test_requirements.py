"""Tests for the requirement matrix and the category catalog."""

import pytest

from excavation_monitor.models import Composition, SensorCategory
from excavation_monitor.validators import (
    display_name,
    layout_constraint,
    minimum_count,
    resolve,
)
from excavation_monitor.validators.catalog import Zone
from excavation_monitor.validators.requirements import REQUIREMENTS

ALL_CLASSES = [(c, level) for c in ("soil", "rock", "soil-rock") for level in (1, 2, 3)]


class TestResolve:
    @pytest.mark.parametrize("composition,level", ALL_CLASSES)
    def test_all_nine_classes_defined(self, composition, level):
        reqs = resolve(composition, level)
        assert reqs is not None
        assert len(reqs.required) > 0

    def test_matrix_is_exactly_nine_entries(self):
        assert len(REQUIREMENTS) == 9

    def test_accepts_enum(self):
        assert resolve(Composition.ROCK, 3) == resolve("rock", 3)

    @pytest.mark.parametrize(
        "composition,level",
        [("unknown", 1), ("soil", 0), ("soil", 4), ("rock", -1), ("SOIL", 1), (None, 1)],
    )
    def test_undefined_classes_not_found(self, composition, level):
        assert resolve(composition, level) is None

    def test_soil_level_1(self):
        reqs = resolve("soil", 1)
        assert reqs.required == (
            SensorCategory.HORIZONTAL_DISPLACEMENT,
            SensorCategory.VERTICAL_DISPLACEMENT,
            SensorCategory.DEEP_HORIZONTAL,
            SensorCategory.SUPPORT_FORCE,
            SensorCategory.WATER_LEVEL,
            SensorCategory.GROUND_SETTLEMENT,
        )
        assert reqs.recommended == (SensorCategory.ANCHOR_FORCE,)
        assert SensorCategory.SOIL_PRESSURE in reqs.optional

    def test_rock_level_3_is_lightest(self):
        reqs = resolve("rock", 3)
        assert reqs.required == (SensorCategory.HORIZONTAL_DISPLACEMENT,)
        assert reqs.recommended == (SensorCategory.GROUND_SETTLEMENT,)

    def test_soil_rock_level_1_has_no_recommended(self):
        reqs = resolve("soil-rock", 1)
        assert SensorCategory.ANCHOR_FORCE in reqs.required
        assert reqs.recommended == ()

    def test_stricter_levels_require_at_least_as_much(self):
        for composition in ("soil", "rock", "soil-rock"):
            counts = [len(resolve(composition, level).required) for level in (1, 2, 3)]
            assert counts == sorted(counts, reverse=True)

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            REQUIREMENTS[(Composition.SOIL, 4)] = REQUIREMENTS[(Composition.SOIL, 3)]


class TestCatalog:
    def test_every_category_has_a_display_name(self):
        for category in SensorCategory:
            assert display_name(category) != category.value

    def test_display_name_from_string(self):
        assert display_name("water-level") == "Groundwater level"

    def test_unknown_display_name_passes_through(self):
        assert display_name("strain-gauge") == "strain-gauge"

    @pytest.mark.parametrize(
        "category,expected",
        [
            (SensorCategory.HORIZONTAL_DISPLACEMENT, 8),
            (SensorCategory.VERTICAL_DISPLACEMENT, 8),
            (SensorCategory.DEEP_HORIZONTAL, 4),
            (SensorCategory.SUPPORT_FORCE, 4),
            (SensorCategory.ANCHOR_FORCE, 2),
            (SensorCategory.WATER_LEVEL, 2),
            (SensorCategory.GROUND_SETTLEMENT, 6),
            (SensorCategory.PORE_PRESSURE, 1),
            ("strain-gauge", 1),
        ],
    )
    def test_minimum_counts(self, category, expected):
        assert minimum_count(category) == expected

    def test_wall_displacement_constraint(self):
        constraint = layout_constraint(SensorCategory.HORIZONTAL_DISPLACEMENT)
        assert constraint.min_points_per_side == 3
        assert constraint.preferred_zones == (Zone.MIDDLE, Zone.CORNER)

    def test_deep_horizontal_spacing(self):
        assert layout_constraint("deep-horizontal").max_spacing == 50.0

    def test_no_constraint_for_pore_pressure(self):
        assert layout_constraint(SensorCategory.PORE_PRESSURE) is None
