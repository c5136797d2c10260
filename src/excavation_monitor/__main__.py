"""Excavation Monitor CLI.

Usage:
    python -m excavation_monitor <command> [args] [options]

Layouts are JSON files holding a pit configuration and its sensors.
Every command prints JSON to stdout with an "ok" flag.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from excavation_monitor import __version__
from excavation_monitor.models.geometry import Point3D
from excavation_monitor.models.layout import SensorLayout
from excavation_monitor.models.report import ValidationReport
from excavation_monitor.models.sensors import SensorCategory
from excavation_monitor.validators import validate_layout
from excavation_monitor.validators.catalog import (
    display_name,
    layout_constraint,
    minimum_count,
)
from excavation_monitor.validators.requirements import resolve

app = typer.Typer(
    name="excavation_monitor",
    help="Excavation Monitor: GB 50497-2019 sensor layout validation.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(message: str) -> None:
    _output({"ok": False, "error": message})
    raise typer.Exit(1)


def _load_layout(path: Path) -> SensorLayout:
    """Load a layout file, turning missing/malformed files into JSON errors."""
    if not path.exists():
        _fail(f"Layout not found: {path}")
    if not path.is_file():
        _fail(f"Layout is not a file: {path}")
    try:
        return SensorLayout.load(path)
    except ValidationError as e:
        _fail(f"Invalid layout {path}: {e.error_count()} error(s): {e.errors()[0]['msg']}")
    except UnicodeDecodeError:
        _fail(f"Invalid layout {path}: not UTF-8 text")
    except OSError as e:
        _fail(f"Cannot read layout {path}: {e.strerror}")


def _validate_json(report: ValidationReport) -> dict:
    """Structured validation result with per-severity counts."""
    data = report.model_dump(mode="json")
    data["counts"] = {
        "errors": len(report.errors),
        "warnings": len(report.warnings),
        "suggestions": len(report.suggestions),
    }
    return data


def _category_info(category: SensorCategory) -> dict:
    return {
        "category": category.value,
        "name": display_name(category),
        "minimum_count": minimum_count(category),
    }


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Excavation pit monitoring layout tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def version() -> None:
    """Show version."""
    typer.echo(f"excavation-monitor v{__version__}")


@app.command()
def validate(layout_file: Path = typer.Argument(..., help="Layout JSON file")):
    """Validate a sensor layout against the monitoring standard."""
    layout = _load_layout(layout_file)
    report = validate_layout(layout.config, layout.sensors)
    _output({"ok": True, "validation": _validate_json(report)})


@app.command()
def requirements(
    composition: str = typer.Argument(..., help="soil, rock or soil-rock"),
    safety_level: int = typer.Argument(..., help="1 (most stringent) to 3"),
):
    """Show the monitoring items required for a pit class."""
    reqs = resolve(composition, safety_level)
    if reqs is None:
        _fail(f"No monitoring requirements for {composition} pit of safety level {safety_level}")

    _output({
        "ok": True,
        "composition": composition,
        "safety_level": safety_level,
        "required": [_category_info(c) for c in reqs.required],
        "recommended": [_category_info(c) for c in reqs.recommended],
        "optional": [_category_info(c) for c in reqs.optional],
    })


@app.command()
def categories():
    """List sensor categories with names, minimum counts and layout rules."""
    items = []
    for category in SensorCategory:
        info = _category_info(category)
        constraint = layout_constraint(category)
        info["layout"] = (
            constraint.model_dump(mode="json", exclude_none=True) if constraint else None
        )
        items.append(info)
    _output({"ok": True, "categories": items})


@app.command()
def place(
    layout_file: Path = typer.Argument(..., help="Layout JSON file"),
    category: SensorCategory = typer.Argument(..., help="Sensor category"),
    x: float = typer.Argument(..., help="x (m)"),
    y: float = typer.Argument(..., help="y, vertical (m)"),
    z: float = typer.Argument(..., help="z (m)"),
):
    """Add a sensor to a layout if its position suits the category."""
    layout = _load_layout(layout_file)
    sensor = layout.place_sensor(category, Point3D(x=x, y=y, z=z))
    if sensor is None:
        _fail(f"Cannot place {category.value} at ({x:g}, {y:g}, {z:g})")

    layout.save(layout_file)
    _output({
        "ok": True,
        "sensor": sensor.model_dump(mode="json"),
        "total": len(layout.sensors),
    })


@app.command()
def remove(
    layout_file: Path = typer.Argument(..., help="Layout JSON file"),
    index: int = typer.Argument(..., help="Sensor index (0-based)"),
):
    """Remove a sensor by index; remaining sensors are renumbered."""
    layout = _load_layout(layout_file)
    if not 0 <= index < len(layout.sensors):
        _fail(f"No sensor at index {index} ({len(layout.sensors)} placed)")

    removed = layout.sensors[index]
    layout.remove_sensor(index)
    layout.save(layout_file)
    _output({
        "ok": True,
        "removed": removed.model_dump(mode="json"),
        "total": len(layout.sensors),
    })


@app.command()
def clear(layout_file: Path = typer.Argument(..., help="Layout JSON file")):
    """Remove every sensor, keeping the pit configuration."""
    layout = _load_layout(layout_file)
    count = len(layout.sensors)
    layout.clear_sensors()
    layout.save(layout_file)
    _output({"ok": True, "removed": count, "total": 0})


@app.command()
def render(
    layout_file: Path = typer.Argument(..., help="Layout JSON file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output PNG path"),
):
    """Render a plan view of the layout to PNG."""
    from excavation_monitor.export.plan import render_plan

    layout = _load_layout(layout_file)
    out = output or layout_file.with_suffix(".png")
    path = render_plan(layout, out)
    _output({"ok": True, "rendered": str(path)})


if __name__ == "__main__":
    app()
