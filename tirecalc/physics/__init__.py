"""
Physics calculations for tire comparisons.

This module provides:
- Unit handling with pint (speeds, circumferences, wheel RPM)
- Tire size parsing and geometry
- Rotational inertia and tire weight estimates
- Drivetrain kinematics (effective ratio, RPM, crawl ratio)

All calculations use simplified models suitable for planning an upgrade.
NOT a substitute for measuring the vehicle.
"""

from tirecalc.physics.units import ureg, Q_, mm_to_in, in_to_mm, wheel_rpm, MILE_IN_INCHES
from tirecalc.physics.geometry import (
    MEASURED_TIRE_DIAMETERS,
    ParsedTireSize,
    parse_tire_size,
    calculate_circumference,
    calculate_revolutions_per_mile,
    resolve_tire,
    calculate_differences,
    check_compatibility,
)
from tirecalc.physics.rotation import (
    REFERENCE_TIRE_WEIGHTS,
    estimate_tire_weight,
    calculate_inertia_factor,
    categorize_inertia_factor,
    calculate_rotational_physics,
)
from tirecalc.physics.drivetrain import (
    STANDARD_GEAR_RATIOS,
    calculate_effective_gear_ratio,
    calculate_restoration_ratio,
    calculate_engine_rpm,
    calculate_crawl_ratio,
    nearest_standard_ratio,
    format_ratio,
    calculate_speedometer_error,
    calculate_drivetrain_impact,
)

__all__ = [
    # Units
    "ureg",
    "Q_",
    "mm_to_in",
    "in_to_mm",
    "wheel_rpm",
    "MILE_IN_INCHES",
    # Geometry
    "MEASURED_TIRE_DIAMETERS",
    "ParsedTireSize",
    "parse_tire_size",
    "calculate_circumference",
    "calculate_revolutions_per_mile",
    "resolve_tire",
    "calculate_differences",
    "check_compatibility",
    # Rotation
    "REFERENCE_TIRE_WEIGHTS",
    "estimate_tire_weight",
    "calculate_inertia_factor",
    "categorize_inertia_factor",
    "calculate_rotational_physics",
    # Drivetrain
    "STANDARD_GEAR_RATIOS",
    "calculate_effective_gear_ratio",
    "calculate_restoration_ratio",
    "calculate_engine_rpm",
    "calculate_crawl_ratio",
    "nearest_standard_ratio",
    "format_ratio",
    "calculate_speedometer_error",
    "calculate_drivetrain_impact",
]
