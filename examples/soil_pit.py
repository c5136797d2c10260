"""Level-1 soil pit, 30m × 20m × 10m deep: proof of concept.

Places wall-top displacement points at the side midpoints and corners,
inclinometers at the side midpoints, a ring of settlement points 20m
outside the pit and two water level wells, then validates the layout.

   z (north)
   ↑
   |
   +--- x (east)

Layout (top view):
   (-15,10) ------- (15,10)
      |                |
   W  |      pit       |  E
      |                |
   (-15,-10) ------ (15,-10)
"""

import json
import math
from pathlib import Path

from excavation_monitor.models import (
    PitConfiguration,
    PitDimensions,
    Point3D,
    SensorCategory,
    SensorLayout,
)
from excavation_monitor.validators import validate_layout

LENGTH = 30.0
WIDTH = 20.0
DEPTH = 10.0
HL, HW = LENGTH / 2, WIDTH / 2

layout = SensorLayout(
    config=PitConfiguration(
        composition="soil",
        safety_level=1,
        dimensions=PitDimensions(length=LENGTH, width=WIDTH, depth=DEPTH),
    )
)

# --- Wall-top displacement: three per side plus corners ---
wall_points = [
    (HL, -5), (HL, 0), (HL, 5),
    (-HL, -5), (-HL, 0), (-HL, 5),
    (-8, HW), (0, HW), (8, HW),
    (-8, -HW), (0, -HW), (8, -HW),
    (HL, HW), (-HL, HW), (-HL, -HW), (HL, -HW),
]
for x, z in wall_points:
    layout.place_sensor(SensorCategory.HORIZONTAL_DISPLACEMENT, Point3D(x=x, y=1, z=z))
    layout.place_sensor(SensorCategory.VERTICAL_DISPLACEMENT, Point3D(x=x, y=1, z=z))

# --- Deep horizontal displacement: side midpoints, just behind the wall ---
for x, z in [(HL + 1, 0), (-HL - 1, 0), (0, HW + 1), (0, -HW - 1)]:
    layout.place_sensor(SensorCategory.DEEP_HORIZONTAL, Point3D(x=x, y=-DEPTH, z=z))

# --- Struts: two per level ---
for x in (-5, 5):
    layout.place_sensor(SensorCategory.SUPPORT_FORCE, Point3D(x=x, y=-2, z=0))
    layout.place_sensor(SensorCategory.SUPPORT_FORCE, Point3D(x=0, y=-6, z=x))

# --- Water level: pit center and perimeter ---
layout.place_sensor(SensorCategory.WATER_LEVEL, Point3D(x=0, y=-DEPTH, z=0))
layout.place_sensor(SensorCategory.WATER_LEVEL, Point3D(x=HL + 5, y=0, z=0))

# --- Ground settlement: ring 2 × depth beyond the pit boundary ---
radius = max(LENGTH, WIDTH) / 2 + 2 * DEPTH
for i in range(8):
    angle = 2 * math.pi * i / 8
    layout.place_sensor(
        SensorCategory.GROUND_SETTLEMENT,
        Point3D(x=radius * math.cos(angle), y=0, z=radius * math.sin(angle)),
    )

report = validate_layout(layout.config, layout.sensors)
print(json.dumps(report.model_dump(mode="json"), indent=2, ensure_ascii=False))

out = Path(__file__).parent / "output" / "soil_pit.json"
layout.save(out)
print(f"Saved layout to {out}")
