"""
Helpers to turn JSON comparison outputs into a compact, human-readable
console summary. Useful for quickly scanning saved comparison files.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

INCH = '"'


def _fmt_float(value: Any, unit: str = "", default: str = "n/a", digits: int = 2) -> str:
    """Safely format a float with optional unit suffix."""
    try:
        fval = float(value)
    except (TypeError, ValueError):
        return default
    suffix = unit if unit in (INCH, "%") else (f" {unit}" if unit else "")
    if abs(fval) >= 1000:
        return f"{fval:,.0f}{suffix}"
    return f"{fval:.{digits}f}{suffix}"


def _fmt_signed(value: Any, unit: str = "", digits: int = 1) -> str:
    """Format a change with an explicit sign."""
    try:
        fval = float(value)
    except (TypeError, ValueError):
        return "n/a"
    return f"{fval:+.{digits}f}{unit}"


def _print_tire(label: str, tire: dict[str, Any] | None) -> None:
    if not tire:
        print(f"{label}: unknown")
        return
    measured = " (measured)" if tire.get("used_measured_data") else ""
    print(
        f"{label}: {tire.get('size', '?')} | "
        f"dia {_fmt_float(tire.get('diameter'), INCH, digits=1)}{measured} | "
        f"width {_fmt_float(tire.get('width'), INCH, digits=1)} | "
        f"{_fmt_float(tire.get('revolutions_per_mile'), 'rev/mi', digits=0)}"
    )


def _print_lines(title: str, lines: list[str], max_items: int) -> None:
    if not lines:
        return
    print(f"  {title}:")
    for line in lines[:max_items]:
        print(f"    - {line}")


def render_comparison(data: dict[str, Any], max_items: int = 4) -> None:
    """
    Print a human-friendly summary of a comparison dict.

    Args:
        data: Comparison result as produced by ComparisonResult.model_dump()
        max_items: Max list entries to show per section
    """
    _print_tire("Current", data.get("current"))
    _print_tire("New", data.get("new"))
    print(f"Usage: {data.get('usage_category', '?')}")

    diffs = data.get("differences")
    if diffs:
        diameter = diffs.get("diameter", {})
        print(
            f"\nDiameter {_fmt_signed(diameter.get('absolute'), INCH)} "
            f"({_fmt_signed(diameter.get('percentage'), '%')}), "
            f"ground clearance {_fmt_signed(diffs.get('ground_clearance_gain'), INCH)}"
        )

    speedo = data.get("speedometer_error")
    if speedo:
        print(f"Speedometer: {speedo.get('summary', '')}")
        for reading in speedo.get("readings", [])[:max_items]:
            print(f"  {reading.get('correction', '')}")

    impact = data.get("drivetrain_impact")
    if impact:
        egr = impact.get("effective_gear_ratio", {})
        rpm = impact.get("rpm", {})
        print(
            f"\nEffective ratio {_fmt_float(egr.get('original'), digits=3)} -> "
            f"{_fmt_float(egr.get('new'), digits=3)} ({_fmt_signed(egr.get('change_percentage'), '%')})"
        )
        print(f"  {rpm.get('summary', '')}")
        print(
            f"  Crawl ratio {_fmt_float(impact.get('crawl_ratio'), digits=1)}:1, "
            f"restoration ratio {_fmt_float(impact.get('restoration_ratio'), digits=2)}"
        )

    rotational = data.get("rotational_physics")
    if rotational:
        inertia = rotational.get("changes", {}).get("rotational_inertia", {})
        print(
            f"\nRotational inertia {_fmt_signed(inertia.get('factor'), '%')} "
            f"[{inertia.get('category', '?')}] confidence {rotational.get('overall_confidence', '?')}"
        )
        print(f"  {rotational.get('summary', '')}")

    stress = data.get("drivetrain_stress")
    if stress:
        print(f"\nDrivetrain stress {stress.get('score', '?')}/100 [{stress.get('classification', '?')}]")
        for name, component in (stress.get("breakdown") or {}).items():
            print(
                f"  {name:<9} score {component.get('score', '?'):>3} "
                f"x {component.get('weight', 0):.2f} = {component.get('contribution', '?')}"
            )
        bias = stress.get("usage_bias") or {}
        if bias.get("adjustment"):
            print(f"  usage bias x{bias.get('multiplier')} ({bias.get('adjustment'):+d})")
        regear = stress.get("regearing") or {}
        suggestion = regear.get("suggested_gear_increase")
        print(f"  Regearing: {regear.get('recommendation', '?')} ({regear.get('urgency', '?')})")
        if suggestion:
            print(f"    e.g. {suggestion.get('example', '')}")
        _print_lines("Recommendations", stress.get("recommendations") or [], max_items)
    else:
        print("\nDrivetrain stress: n/a (no axle gear ratio)")

    clearance = data.get("clearance_probability")
    if clearance:
        print(
            f"\nClearance ({clearance.get('suspension_type', '?')}): "
            f"{clearance.get('probability', '?')}% [{clearance.get('risk_class', '?')}]"
        )
        print(f"  {clearance.get('summary', '')}")
        warnings = [
            f"{w.get('component')} ({w.get('severity')})"
            for w in clearance.get("component_warnings") or []
        ]
        _print_lines("Components", warnings, max_items)
        lift = clearance.get("lift_recommendation") or {}
        print(f"  Lift: {lift.get('message', '')}")

    guidance = data.get("regearing_guidance")
    if guidance:
        print(f"\nReal-world: {guidance.get('consensus', '')} (~{guidance.get('likelihood', '?')}% regear)")
        print(f"  {guidance.get('recommendation', '')}")

    gears = data.get("gear_recommendations")
    if gears:
        print(
            f"\nGear options ({gears.get('profile', '?')}, target {gears.get('target_rpm', '?')} RPM "
            f"@ {_fmt_float(gears.get('test_speed_mph'), 'mph', digits=0)}): "
            f"{(gears.get('necessity') or {}).get('level', '?')}"
        )
        for option in (gears.get("options") or [])[:max_items]:
            impact = option.get("impact") or {}
            print(
                f"  {option.get('label', '?'):>5} [{option.get('score', '?')}] "
                f"{impact.get('highway_rpm', '?')} RPM, crawl {_fmt_float(impact.get('crawl_ratio'), digits=1)}:1 "
                f"- {option.get('verdict', '')}"
            )

    warnings = data.get("compatibility_warnings") or []
    if warnings:
        print("\nWarnings:")
        for w in warnings:
            print(f"  - [{w.get('severity', '?')}] {w.get('message', '')}")


def print_readable_output(json_path: Path, max_items: int = 4) -> None:
    """
    Print a human-friendly summary of a comparison JSON file.

    Args:
        json_path: Path to the JSON output file.
        max_items: Max list entries to show per section.
    """
    data = json.loads(Path(json_path).read_text())
    render_comparison(data, max_items=max_items)
