"""Plan-view rendering of a sensor layout using matplotlib.

Draws the pit footprint, the pit boundary circle used by the range
checks, the required ground settlement reach and every sensor colored
by category.
"""

from __future__ import annotations

from pathlib import Path

import matplotlib
matplotlib.use("Agg")  # headless rendering
import matplotlib.pyplot as plt
import numpy as np

from excavation_monitor.models.layout import SensorLayout
from excavation_monitor.models.sensors import SensorCategory
from excavation_monitor.validators.catalog import display_name
from excavation_monitor.validators.layout import SETTLEMENT_RANGE_FACTOR

_CATEGORY_COLORS = {
    SensorCategory.HORIZONTAL_DISPLACEMENT: "#E53935",
    SensorCategory.VERTICAL_DISPLACEMENT: "#FB8C00",
    SensorCategory.DEEP_HORIZONTAL: "#8E24AA",
    SensorCategory.SUPPORT_FORCE: "#3949AB",
    SensorCategory.ANCHOR_FORCE: "#00897B",
    SensorCategory.WATER_LEVEL: "#1E88E5",
    SensorCategory.GROUND_SETTLEMENT: "#43A047",
    SensorCategory.WALL_INTERNAL_FORCE: "#6D4C41",
    SensorCategory.PORE_PRESSURE: "#00ACC1",
    SensorCategory.SOIL_PRESSURE: "#757575",
}


def _circle(radius: float, samples: int = 181) -> tuple[np.ndarray, np.ndarray]:
    theta = np.linspace(0.0, 2 * np.pi, samples)
    return radius * np.cos(theta), radius * np.sin(theta)


def render_plan(
    layout: SensorLayout,
    output_path: str | Path,
    title: str | None = None,
    dpi: int = 150,
    show_ranges: bool = True,
) -> Path:
    """Render a top-down view of the pit and its sensors to PNG.

    Args:
        layout: The layout to render.
        output_path: Output image path.
        title: Plot title (defaults to a composition/level summary).
        dpi: Image resolution.
        show_ranges: Draw the pit boundary circle and settlement reach.

    Returns:
        Path to the output image.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    dims = layout.config.dimensions

    fig, ax = plt.subplots(1, 1, figsize=(10, 10))
    ax.set_aspect("equal")
    ax.set_facecolor("#FAFAFA")

    # Footprint
    vs = dims.footprint.vertices
    xs = [v.x for v in vs] + [vs[0].x]
    ys = [v.y for v in vs] + [vs[0].y]
    ax.fill(xs, ys, color="#D7CCC8", alpha=0.5, zorder=1)
    ax.plot(xs, ys, color="#5D4037", linewidth=2.5, zorder=2)

    if show_ranges:
        boundary = dims.max_edge / 2
        cx, cy = _circle(boundary)
        ax.plot(cx, cy, color="#9E9E9E", linestyle="--", linewidth=1, zorder=2)
        rx, ry = _circle(boundary + dims.depth * SETTLEMENT_RANGE_FACTOR)
        ax.plot(rx, ry, color="#43A047", linestyle=":", linewidth=1, zorder=2)

    for category in SensorCategory:
        members = [s for s in layout.sensors if s.category == category]
        if not members:
            continue
        ax.scatter(
            [s.position.x for s in members],
            [s.position.z for s in members],
            s=40,
            color=_CATEGORY_COLORS[category],
            edgecolors="black",
            linewidths=0.5,
            label=f"{display_name(category)} ({len(members)})",
            zorder=3,
        )

    if layout.sensors:
        ax.legend(loc="upper right", fontsize=8)

    composition = getattr(layout.config.composition, "value", layout.config.composition)
    ax.set_title(
        title
        or (
            f"{composition} pit, level {layout.config.safety_level}, "
            f"{dims.length:g} × {dims.width:g} × {dims.depth:g} m"
        )
    )
    ax.set_xlabel("x (m)")
    ax.set_ylabel("z (m)")
    ax.grid(True, alpha=0.3)

    fig.savefig(output_path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)
    return output_path
