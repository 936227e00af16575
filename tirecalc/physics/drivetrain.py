"""
Drivetrain kinematics for a tire change.

Provides effective gear ratio, engine RPM, crawl ratio, speedometer error
and standard ring-and-pinion ratio lookup.

ASSUMPTIONS:
- A taller tire behaves like a numerically lower axle ratio:
  effective = axle x (current diameter / new diameter)
- Crawl ratio depends only on gearing, never on tire size
- Speedometers are calibrated to the current tire
"""

from tirecalc.models.inputs import ComparisonOptions, DrivetrainConfig
from tirecalc.models.outputs import (
    DrivetrainImpact,
    EffectiveGearRatio,
    ResolvedTire,
    RpmChange,
    SpeedometerError,
    SpeedReading,
)
from tirecalc.physics.units import wheel_rpm


# Commercially available ring-and-pinion ratios (sorted)
STANDARD_GEAR_RATIOS: list[float] = [
    3.07, 3.21, 3.31, 3.42, 3.45, 3.55, 3.73, 3.909, 3.92, 4.10, 4.27, 4.30,
    4.56, 4.88, 5.13, 5.29, 5.38, 5.71, 5.86,
]


def calculate_effective_gear_ratio(
    axle_ratio: float,
    current_diameter: float,
    new_diameter: float,
) -> float:
    """Axle ratio as experienced on the new tire."""
    if axle_ratio <= 0:
        raise ValueError("Axle ratio must be positive")
    if current_diameter <= 0 or new_diameter <= 0:
        raise ValueError("Diameters must be positive")
    return axle_ratio / (new_diameter / current_diameter)


def calculate_restoration_ratio(
    axle_ratio: float,
    current_diameter: float,
    new_diameter: float,
) -> float:
    """Axle ratio that gives the new tire the original effective ratio."""
    if current_diameter <= 0:
        raise ValueError("Diameters must be positive")
    return axle_ratio * (new_diameter / current_diameter)


def calculate_engine_rpm(
    speed_mph: float,
    tire_diameter: float,
    axle_ratio: float,
    transmission_ratio: float = 1.0,
) -> float:
    """Engine RPM at a road speed (no torque converter slip)."""
    return wheel_rpm(speed_mph, tire_diameter) * axle_ratio * transmission_ratio


def calculate_crawl_ratio(
    axle_ratio: float,
    drivetrain: DrivetrainConfig,
    options: ComparisonOptions,
) -> float:
    """Axle x transfer case low x first gear. Configured values win over option defaults."""
    transfer_low = drivetrain.transfer_case_ratio or options.transfer_case_low_ratio
    first_gear = drivetrain.transmission_first_gear or options.first_gear_ratio
    return axle_ratio * transfer_low * first_gear


def nearest_standard_ratio(target: float) -> float:
    """
    Smallest standard ratio at or above target.

    Targets beyond the deepest ratio return the deepest ratio.
    """
    for ratio in STANDARD_GEAR_RATIOS:
        if ratio >= target - 1e-9:
            return ratio
    return STANDARD_GEAR_RATIOS[-1]


def format_ratio(ratio: float) -> str:
    """Format a gear ratio as it is sold: 4.10, 3.909, 4.56."""
    text = f"{ratio:.3f}".rstrip("0")
    decimals = len(text.split(".")[1])
    return text + "0" * max(0, 2 - decimals)


def calculate_speedometer_error(
    current: ResolvedTire,
    new: ResolvedTire,
    test_speeds: list[float],
) -> SpeedometerError:
    """Indicated vs actual speed when the speedometer still expects the current tire."""
    ratio = new.diameter / current.diameter

    readings = []
    for speed in test_speeds:
        actual = speed * ratio
        readings.append(SpeedReading(
            indicated=speed,
            actual=actual,
            error=actual - speed,
            error_percentage=(actual - speed) / speed * 100,
            correction=f"{speed:g} mph indicated = {actual:.1f} mph actual",
        ))

    if ratio > 1:
        summary = "Speedometer will read SLOWER than actual speed"
    elif ratio < 1:
        summary = "Speedometer will read FASTER than actual speed"
    else:
        summary = "No speedometer error"

    return SpeedometerError(ratio=ratio, summary=summary, readings=readings)


def calculate_drivetrain_impact(
    current: ResolvedTire,
    new: ResolvedTire,
    drivetrain: DrivetrainConfig,
    options: ComparisonOptions,
) -> DrivetrainImpact | None:
    """
    Effective gearing, highway RPM and crawl ratio.

    Returns:
        DrivetrainImpact, or None when no axle ratio is configured
    """
    axle = drivetrain.axle_gear_ratio
    if axle is None:
        return None

    effective = calculate_effective_gear_ratio(axle, current.diameter, new.diameter)
    effective_change = effective - axle
    effective_pct = effective_change / axle * 100

    if effective_pct < -5:
        effective_summary = "Effective gearing is LOWER (taller) - reduced acceleration, lower RPM"
    elif effective_pct > 5:
        effective_summary = "Effective gearing is HIGHER (shorter) - improved acceleration, higher RPM"
    else:
        effective_summary = "Minimal effective gear ratio change"

    speed = options.highway_speed_mph
    top_gear = options.transmission_top_gear
    rpm_original = calculate_engine_rpm(speed, current.diameter, axle, top_gear)
    rpm_new = calculate_engine_rpm(speed, new.diameter, axle, top_gear)
    rpm_change = rpm_new - rpm_original

    return DrivetrainImpact(
        effective_gear_ratio=EffectiveGearRatio(
            original=axle,
            new=effective,
            change=effective_change,
            change_percentage=effective_pct,
            summary=effective_summary,
        ),
        rpm=RpmChange(
            original=rpm_original,
            new=rpm_new,
            change=rpm_change,
            change_percentage=rpm_change / rpm_original * 100,
            test_speed_mph=speed,
            summary=(
                f"{abs(rpm_change):.0f} RPM {'increase' if rpm_change > 0 else 'decrease'} "
                f"at {speed:g} mph"
            ),
        ),
        crawl_ratio=calculate_crawl_ratio(axle, drivetrain, options),
        restoration_ratio=calculate_restoration_ratio(axle, current.diameter, new.diameter),
    )
