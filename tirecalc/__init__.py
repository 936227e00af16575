"""
Tire Upgrade Calculator (tirecalc)

Compares a current and a proposed tire size for an off-road vehicle:
effective gearing, rotational physics, drivetrain stress, clearance risk
and real-world regearing guidance.

WARNING: Estimates only. Measure and test fit before buying tires or gears.

Usage:
    python -m tirecalc make-example
    python -m tirecalc compare --input example_input.json
    python -m tirecalc quick --current 265/70R17 --new 285/75R17 --gear-ratio 3.909
    python -m tirecalc serve --port 8000
"""

__version__ = "0.1.0"
__author__ = "Tire Upgrade Calculator Project"

from tirecalc.models.inputs import (
    ComparisonOptions,
    ComparisonRequest,
    DrivetrainConfig,
    SuspensionType,
    TireSpec,
    UsageCategory,
)
from tirecalc.models.outputs import ComparisonResult, RiskLevel
from tirecalc.engine.comparison import TireComparator, calculate_tire_comparison

__all__ = [
    "ComparisonOptions",
    "ComparisonRequest",
    "DrivetrainConfig",
    "SuspensionType",
    "TireSpec",
    "UsageCategory",
    "ComparisonResult",
    "RiskLevel",
    "TireComparator",
    "calculate_tire_comparison",
]
