"""Geometric primitives for pit and sensor positions.

Scene convention: y is the vertical (depth) axis, x/z span the horizontal
plane with the pit center at the origin. Plan-view helpers (Point2D,
Polygon2D) use x for scene x and y for scene z.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, field_validator


class Point2D(BaseModel):
    """2D point in the plan view (meters)."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        """Euclidean distance to another point."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)


class Point3D(BaseModel):
    """3D scene point (meters). y is vertical."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    @property
    def plan(self) -> Point2D:
        """Projection onto the horizontal plane."""
        return Point2D(x=self.x, y=self.z)

    @property
    def radial_distance(self) -> float:
        """Horizontal distance from the pit center."""
        return math.sqrt(self.x**2 + self.z**2)


class Polygon2D(BaseModel):
    """Closed plan-view polygon, at least 3 vertices, first vertex not repeated."""

    model_config = ConfigDict(frozen=True)

    vertices: tuple[Point2D, ...]

    @field_validator("vertices")
    @classmethod
    def at_least_3_vertices(cls, v: tuple[Point2D, ...]) -> tuple[Point2D, ...]:
        if len(v) < 3:
            raise ValueError("Polygon must have at least 3 vertices")
        return v
