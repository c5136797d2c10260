"""Sensor layout validation against GB 50497-2019.

Static tables:
- requirements: monitoring items per pit composition and safety level
- catalog: display names, minimum counts and layout constraints per category

Checks, run in this order by validate_layout:
- presence: required items present and numerous enough, recommended items present
- layout: wall-top, deep horizontal and ground settlement point distribution
- coverage: perimeter density, peripheral range, monitoring necessity

Helpers:
- spatial: side / corner classification of positions around the footprint
- placement: plausibility of a single sensor position
"""

from excavation_monitor.validators.catalog import (
    display_name,
    layout_constraint,
    minimum_count,
)
from excavation_monitor.validators.engine import validate_layout
from excavation_monitor.validators.requirements import RequirementSet, resolve

__all__ = [
    "display_name",
    "layout_constraint",
    "minimum_count",
    "validate_layout",
    "RequirementSet",
    "resolve",
]
