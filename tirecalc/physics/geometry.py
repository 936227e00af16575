"""
Tire size parsing and geometry.

Provides:
- Parsing of P-metric, LT-metric and flotation size strings
- Resolution of a TireSpec into a tire with a known diameter
- Circumference, revolutions per mile and tire-to-tire differences
- Compatibility warnings for extreme combinations

ASSUMPTIONS:
- Metric diameters use the measured-size table where one exists, since
  advertised dimensions run large (285/75R17 calculates to 33.8" but
  measures 32.8")
- Flotation sizes state the overall diameter directly
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Optional

from tirecalc.models.inputs import TireSpec
from tirecalc.models.outputs import (
    CompatibilityWarning,
    DimensionChange,
    ResolvedTire,
    TireDifferences,
)
from tirecalc.physics.units import MILE_IN_INCHES, mm_to_in

logger = logging.getLogger(__name__)


# Real-world measured diameters (inches) for common metric sizes
MEASURED_TIRE_DIAMETERS: dict[str, float] = {
    "285/75R17": 32.8,
    "285/75R16": 32.8,
    "265/70R17": 31.6,
    "255/75R17": 32.1,
    "285/70R17": 32.7,
    "315/70R17": 34.4,
    "265/70R16": 30.6,
    "265/65R17": 30.6,
    "275/70R17": 32.2,
    "275/65R18": 32.1,
    "245/75R17": 31.5,
    "275/70R18": 33.2,
    "305/70R17": 33.8,
    "295/70R17": 33.3,
    "295/70R18": 34.3,
    "305/65R18": 33.5,
    "285/75R18": 34.8,
    "295/75R16": 33.4,
}

_FLOTATION_RE = re.compile(r"^(\d+(?:\.\d+)?)\s*X\s*(\d+(?:\.\d+)?)\s*(?:R|-)\s*(\d+(?:\.\d+)?)")
_METRIC_RE = re.compile(r"^(P|LT)?\s*(\d{3})\s*/\s*(\d{2})\s*Z?R\s*(\d+(?:\.\d+)?)")


@dataclass(frozen=True)
class ParsedTireSize:
    """Dimensions extracted from a size string (inches)."""
    format: str
    diameter: float
    width: float
    rim_diameter: float
    aspect_ratio: int
    sidewall_height: float
    used_measured_data: bool = False


def parse_tire_size(size: str) -> ParsedTireSize:
    """
    Parse a tire size string.

    Supported formats:
        - P-metric: 265/70R17, P265/70R17
        - LT-metric: LT285/75R16
        - Flotation: 35x12.50R17, 33x10.50-15

    Raises:
        ValueError: If the string matches none of the formats
    """
    if not isinstance(size, str) or not size.strip():
        raise ValueError("Tire size must be a non-empty string")

    normalized = size.strip().upper()

    flotation = _FLOTATION_RE.match(normalized)
    if flotation:
        diameter = float(flotation.group(1))
        width = float(flotation.group(2))
        rim = float(flotation.group(3))
        if rim >= diameter:
            raise ValueError(f"Rim diameter exceeds overall diameter in {size!r}")
        sidewall = (diameter - rim) / 2
        return ParsedTireSize(
            format="Flotation",
            diameter=diameter,
            width=width,
            rim_diameter=rim,
            aspect_ratio=round(sidewall / width * 100),
            sidewall_height=sidewall,
        )

    metric = _METRIC_RE.match(normalized)
    if metric:
        prefix, width_mm, aspect, rim = metric.groups()
        width_mm = int(width_mm)
        aspect = int(aspect)
        rim = float(rim)
        sidewall = mm_to_in(width_mm * aspect / 100)

        key = f"{width_mm}/{aspect}R{rim:g}"
        measured = MEASURED_TIRE_DIAMETERS.get(key)
        diameter = measured if measured is not None else rim + 2 * sidewall

        return ParsedTireSize(
            format="LT-metric" if prefix == "LT" else "P-metric",
            diameter=diameter,
            width=mm_to_in(width_mm),
            rim_diameter=rim,
            aspect_ratio=aspect,
            sidewall_height=sidewall,
            used_measured_data=measured is not None,
        )

    raise ValueError(
        f"Unable to parse tire size: {size!r}. "
        "Supported formats: 265/70R17, LT285/75R16, 35x12.50R17"
    )


def calculate_circumference(diameter: float) -> float:
    """Rolling circumference in inches."""
    if diameter <= 0:
        raise ValueError("Diameter must be positive")
    return math.pi * diameter


def calculate_revolutions_per_mile(circumference: float) -> float:
    """Revolutions per mile for a circumference in inches."""
    if circumference <= 0:
        raise ValueError("Circumference must be positive")
    return MILE_IN_INCHES / circumference


def resolve_tire(spec: TireSpec) -> Optional[ResolvedTire]:
    """
    Resolve a TireSpec into a tire with a known diameter.

    Numeric fields supplied on the TireSpec win over parsed ones. An
    unparseable size falls back to the supplied numbers; with no diameter
    at all, None is returned and callers skip diameter-based stages.
    """
    parsed: Optional[ParsedTireSize] = None
    if spec.size:
        try:
            parsed = parse_tire_size(spec.size)
        except ValueError as e:
            logger.debug("Falling back to numeric fields for %r: %s", spec.size, e)

    diameter = spec.diameter if spec.diameter is not None else (parsed.diameter if parsed else None)
    if diameter is None:
        logger.debug("No diameter available for tire %r", spec.size)
        return None

    width = spec.width if spec.width is not None else (parsed.width if parsed else None)
    circumference = calculate_circumference(diameter)

    return ResolvedTire(
        size=spec.size or f'{diameter:g}"',
        format=parsed.format if parsed else None,
        diameter=diameter,
        width=width,
        rim_diameter=parsed.rim_diameter if parsed else None,
        aspect_ratio=parsed.aspect_ratio if parsed else None,
        sidewall_height=parsed.sidewall_height if parsed else None,
        circumference=circumference,
        revolutions_per_mile=calculate_revolutions_per_mile(circumference),
        used_measured_data=bool(parsed and parsed.used_measured_data and spec.diameter is None),
        weight=spec.weight,
    )


def _change(current: float, new: float) -> DimensionChange:
    delta = new - current
    return DimensionChange(absolute=delta, percentage=delta / current * 100)


def calculate_differences(current: ResolvedTire, new: ResolvedTire) -> TireDifferences:
    """
    Compare two resolved tires.

    Width and sidewall changes are None when either tire lacks them.
    Ground clearance gain is half the diameter change (axle height).
    """
    width = None
    if current.width and new.width:
        width = _change(current.width, new.width)

    sidewall = None
    if current.sidewall_height and new.sidewall_height:
        sidewall = _change(current.sidewall_height, new.sidewall_height)

    diameter = _change(current.diameter, new.diameter)

    return TireDifferences(
        diameter=diameter,
        width=width,
        sidewall=sidewall,
        circumference=_change(current.circumference, new.circumference),
        revolutions_per_mile=_change(current.revolutions_per_mile, new.revolutions_per_mile),
        ground_clearance_gain=diameter.absolute / 2,
    )


def check_compatibility(current: ResolvedTire, new: ResolvedTire) -> list[CompatibilityWarning]:
    """
    Flag extreme tire combinations.

    Warnings are advisory; results are always produced regardless.
    """
    warnings = []
    diameter_pct = (new.diameter - current.diameter) / current.diameter * 100

    if diameter_pct > 15:
        warnings.append(CompatibilityWarning(
            severity="critical",
            message="Diameter increase >15% is EXTREME",
            detail="Serious drivetrain damage likely without significant modifications. "
                   "Re-gearing is mandatory. Transmission, CV axles and wheel bearings will be severely stressed.",
        ))
    elif diameter_pct > 10:
        warnings.append(CompatibilityWarning(
            severity="important",
            message="Diameter increase >10%",
            detail="Re-gearing strongly recommended to avoid drivetrain strain and poor performance.",
        ))

    if diameter_pct < -10:
        warnings.append(CompatibilityWarning(
            severity="important",
            message="Diameter decrease >10%",
            detail="Significant reduction in ground clearance and off-road capability.",
        ))

    if current.width and new.width:
        width_pct = (new.width - current.width) / current.width * 100
        if width_pct > 20:
            warnings.append(CompatibilityWarning(
                severity="important",
                message="Significant width increase",
                detail="Verify fender clearance and consider wheel offset changes. "
                       "Rubbing likely at full lock or articulation.",
            ))

    if (
        current.rim_diameter is not None
        and new.rim_diameter is not None
        and current.rim_diameter != new.rim_diameter
    ):
        warnings.append(CompatibilityWarning(
            severity="info",
            message="Wheel diameter change",
            detail="Different wheels required. Check bolt pattern, hub bore and load rating.",
        ))

    if (
        current.aspect_ratio is not None
        and new.aspect_ratio is not None
        and new.aspect_ratio < 60 <= current.aspect_ratio
    ):
        warnings.append(CompatibilityWarning(
            severity="advisory",
            message="Low profile tire for off-road",
            detail="Aspect ratios below 60 leave sidewalls and wheels exposed to rock damage.",
        ))

    return warnings
