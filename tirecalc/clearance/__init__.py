"""
Clearance probability for tire upgrades.

Predicts rubbing risk from suspension type, lift and tire growth, with
component warnings, lift and trimming guidance.
"""

from tirecalc.clearance.rules import (
    ClearanceParams,
    WarningRule,
    WARNING_RULES,
    VEHICLE_SUSPENSION_RULES,
)
from tirecalc.clearance.assessor import (
    assess_clearance,
    assess_tire_clearance,
    classify_clearance,
    get_vehicle_suspension_type,
)

__all__ = [
    "ClearanceParams",
    "WarningRule",
    "WARNING_RULES",
    "VEHICLE_SUSPENSION_RULES",
    "assess_clearance",
    "assess_tire_clearance",
    "classify_clearance",
    "get_vehicle_suspension_type",
]
