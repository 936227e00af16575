"""
Unit registry and helpers for dimensional calculations.

Uses pint library to keep the tire math dimensionally honest. The public
API works in US customary units (inches, pounds, mph); metric section
widths from tire sizes are converted here.
"""

import math

import pint

# Create a shared unit registry for the entire application
ureg = pint.UnitRegistry()

# Shorthand for creating quantities
Q_ = ureg.Quantity

# One mile expressed in inches (63,360)
MILE_IN_INCHES = Q_(1, "mile").to("inch").magnitude


def magnitude_in(quantity: pint.Quantity, unit: str) -> float:
    """Get the magnitude of a quantity in specified units."""
    return quantity.to(unit).magnitude


def mm_to_in(value_mm: float) -> float:
    """Convert millimeters to inches."""
    return magnitude_in(Q_(value_mm, "mm"), "inch")


def in_to_mm(value_in: float) -> float:
    """Convert inches to millimeters."""
    return magnitude_in(Q_(value_in, "inch"), "mm")


def wheel_rpm(speed_mph: float, tire_diameter_in: float) -> float:
    """
    Wheel revolutions per minute at a road speed.

    rpm = speed / circumference, with the unit algebra left to pint.
    """
    if tire_diameter_in <= 0:
        raise ValueError("Tire diameter must be positive")
    speed = Q_(speed_mph, "mph")
    circumference = Q_(math.pi * tire_diameter_in, "inch")
    return magnitude_in(speed / circumference, "1/minute")
