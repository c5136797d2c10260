"""Excavation pit configuration.

The pit footprint is a rectangle centered on the origin: length runs
along x, width along z, depth down the y axis.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from excavation_monitor.models.geometry import Point2D, Polygon2D


class Composition(str, Enum):
    """Ground material surrounding the pit.

    SOIL: soil pit (土质基坑)
    ROCK: rock pit (岩体基坑)
    SOIL_ROCK: mixed soil/rock pit (土岩组合基坑)
    """

    SOIL = "soil"
    ROCK = "rock"
    SOIL_ROCK = "soil-rock"


class PitDimensions(BaseModel):
    """Pit extents in meters."""

    model_config = ConfigDict(frozen=True)

    length: float = Field(gt=0, description="Extent along x in meters")
    width: float = Field(gt=0, description="Extent along z in meters")
    depth: float = Field(gt=0, description="Excavation depth in meters")

    @property
    def half_length(self) -> float:
        return self.length / 2

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def max_edge(self) -> float:
        """Longer of the two plan dimensions."""
        return max(self.length, self.width)

    @property
    def perimeter(self) -> float:
        """Footprint perimeter, 2 × (length + width)."""
        return 2 * (self.length + self.width)

    @property
    def footprint(self) -> Polygon2D:
        """Plan-view rectangle, corners ordered NE, NW, SW, SE."""
        hl, hw = self.half_length, self.half_width
        return Polygon2D(
            vertices=(
                Point2D(x=hl, y=hw),
                Point2D(x=-hl, y=hw),
                Point2D(x=-hl, y=-hw),
                Point2D(x=hl, y=-hw),
            )
        )


class PitConfiguration(BaseModel):
    """Pit composition, safety level and geometry.

    Composition and safety level are kept loose (any string / integer) so
    that a combination the standard does not define can still be handed
    to the validator, which reports it instead of raising.
    """

    model_config = ConfigDict(frozen=True)

    composition: Composition | str = Field(description="'soil', 'rock' or 'soil-rock'")
    safety_level: int = Field(description="1 (most stringent) to 3")
    dimensions: PitDimensions
