"""Validation report: tagged issues plus per-axis compliance detail.

The report is rebuilt from scratch on every validation run. Issues keep
their emission order; ``errors``, ``warnings`` and ``suggestions`` are the
rendered messages of each severity in that order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, computed_field

from excavation_monitor.models.sensors import SensorCategory


class IssueCode(str, Enum):
    """What a validation issue is about."""

    REQUIREMENT_NOT_FOUND = "requirement-not-found"
    MISSING_REQUIRED = "missing-required"
    INSUFFICIENT_COUNT = "insufficient-count"
    RECOMMENDED_ABSENT = "recommended-absent"
    WALL_SPARSE = "wall-sparse"
    SIDE_MISSING_MIDDLE = "side-missing-middle"
    CORNER_MISSING = "corner-missing"
    DEEP_HORIZONTAL_SHORT = "deep-horizontal-short"
    SETTLEMENT_RANGE_SHORT = "settlement-range-short"
    SETTLEMENT_SPARSE = "settlement-sparse"
    PERIPHERAL_SPARSE = "peripheral-sparse"
    MONITORING_MANDATORY = "monitoring-mandatory"
    MONITORING_ADVISED = "monitoring-advised"
    MONITORING_DISCRETIONARY = "monitoring-discretionary"


@dataclass
class ValidationIssue:
    """A single validation finding."""

    severity: str  # "error" | "warning" | "suggestion"
    code: IssueCode
    message: str
    category: SensorCategory | None = None
    context: dict[str, Any] = field(default_factory=dict)


# ── Compliance sub-reports ────────────────────────────────────────────


class SideDistribution(BaseModel):
    """Sensor counts per pit side and zone."""

    east: int = 0
    west: int = 0
    north: int = 0
    south: int = 0
    corners: int = 0
    middle: int = 0


class WallDisplacementLayout(BaseModel):
    total: int
    distribution: SideDistribution
    missing_middle: int = Field(description="Sides with fewer than the per-side minimum")
    missing_corner: int = Field(description="Footprint corners with no nearby sensor")


class DeepHorizontalLayout(BaseModel):
    total: int
    distribution: SideDistribution
    recommended: int


class GroundSettlementLayout(BaseModel):
    total: int
    range: float = Field(description="Furthest sensor beyond the pit boundary (m)")
    required_range: float


class SupportLayout(BaseModel):
    """Expected internal support levels and the force points they need."""

    levels: int
    min_points: int


class LayoutCompliance(BaseModel):
    wall_displacement: WallDisplacementLayout
    deep_horizontal: DeepHorizontalLayout
    ground_settlement: GroundSettlementLayout
    support: SupportLayout


class QuantityCompliance(BaseModel):
    total: int
    perimeter: float
    density: float
    recommended: float
    adequate: bool


class RangeCompliance(BaseModel):
    total: int
    outside: int
    max_distance: float
    recommended_max_distance: float


class Compliance(BaseModel):
    required: dict[SensorCategory, int]
    recommended: dict[SensorCategory, int]
    layout: LayoutCompliance
    quantity: QuantityCompliance
    range: RangeCompliance


# ── Report ────────────────────────────────────────────────────────────


class ValidationReport(BaseModel):
    """Outcome of one validation run.

    ``compliance`` is None when the requirement lookup failed; that means
    "not evaluated", never "passed".
    """

    issues: list[ValidationIssue] = Field(default_factory=list)
    compliance: Compliance | None = None

    def add(
        self,
        severity: str,
        code: IssueCode,
        message: str,
        category: SensorCategory | None = None,
        **context: Any,
    ) -> ValidationIssue:
        issue = ValidationIssue(
            severity=severity,
            code=code,
            message=message,
            category=category,
            context=context,
        )
        self.issues.append(issue)
        return issue

    def _messages(self, severity: str) -> list[str]:
        return [i.message for i in self.issues if i.severity == severity]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def errors(self) -> list[str]:
        return self._messages("error")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def warnings(self) -> list[str]:
        return self._messages("warning")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def suggestions(self) -> list[str]:
        return self._messages("suggestion")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def issues_with(self, code: IssueCode) -> list[ValidationIssue]:
        """All issues carrying a given code, in emission order."""
        return [i for i in self.issues if i.code == code]
