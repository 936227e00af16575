"""
Clearance probability assessment.

Estimates the chance that a taller or wider tire rubs, for the given
front suspension and lift.

ASSUMPTIONS:
- Probability = base + diameter slope x effective growth + width term,
  where effective growth = max(0, diameter increase - lift x lift offset)
- IFS: base 8, 25 pts per inch, 1" of lift clears 1" of growth,
  width beyond +0.5" costs 12 pts per inch, capped at 95
- Solid axle: base 4, 18 pts per inch, 1" of lift clears 1.5" of growth,
  width beyond +1.0" costs 8 pts per inch, capped at 90
- 37"+ on IFS and 40"+ on a solid axle always need major work
"""

import logging
import math
from typing import Optional

from tirecalc.clearance.rules import (
    ClearanceContext,
    ClearanceParams,
    evaluate_warning_rules,
    match_vehicle_suspension,
)
from tirecalc.models.inputs import DrivetrainConfig, SuspensionType
from tirecalc.models.outputs import (
    ClearanceResult,
    LiftRecommendation,
    ResolvedTire,
    RiskLevel,
    TrimmingAssessment,
)

logger = logging.getLogger(__name__)


SUSPENSION_PROFILES = {
    SuspensionType.IFS: {
        "base": 8.0,
        "diameter_slope": 25.0,
        "lift_offset": 1.0,
        "width_allowance": 0.5,
        "width_slope": 12.0,
        "cap": 95.0,
        "large_tire_diameter": 37.0,
        "large_tire_floor": 65.0,
        "lift_multiplier": 0.85,
    },
    SuspensionType.SOLID_AXLE: {
        "base": 4.0,
        "diameter_slope": 18.0,
        "lift_offset": 1.5,
        "width_allowance": 1.0,
        "width_slope": 8.0,
        "cap": 90.0,
        "large_tire_diameter": 40.0,
        "large_tire_floor": 60.0,
        "lift_multiplier": 0.75,
    },
}

# Integer bands: below LOW_BELOW is LOW, above HIGH_ABOVE is HIGH
LOW_BELOW = 30
HIGH_ABOVE = 70

SUSPENSION_NOTES = {
    SuspensionType.IFS: [
        "IFS vehicles have more restrictive clearance due to upper control arms",
        "Full compression (stuffing the suspension) is the critical measurement point",
        "Dynamic clearance while flexing off-road needs more space than static clearance",
    ],
    SuspensionType.SOLID_AXLE: [
        "Solid axle vehicles have more clearance flexibility than IFS",
        "Check clearance at full droop and full compression",
        "Wheel offset and backspacing significantly affect clearance",
    ],
}


def classify_clearance(probability: int) -> RiskLevel:
    """Band a rubbing probability. Both 30 and 70 are MODERATE."""
    if probability < LOW_BELOW:
        return RiskLevel.LOW
    if probability > HIGH_ABOVE:
        return RiskLevel.HIGH
    return RiskLevel.MODERATE


def get_vehicle_suspension_type(vehicle_name: str) -> SuspensionType:
    """
    Front suspension type for a vehicle name.

    Unknown vehicles are treated as IFS, the more restrictive layout.
    """
    suspension = match_vehicle_suspension(vehicle_name or "")
    if suspension is None:
        logger.debug("Unknown vehicle %r, assuming IFS", vehicle_name)
        return SuspensionType.IFS
    return suspension


def _rub_probability(params: ClearanceParams) -> tuple[int, bool]:
    """
    Rubbing probability for the params.

    Returns:
        Tuple of (probability, large_tire) where large_tire marks the
        size floor for the suspension type
    """
    profile = SUSPENSION_PROFILES[params.suspension_type]

    effective_growth = max(0.0, params.diameter_increase - params.lift_height * profile["lift_offset"])
    excess_width = max(0.0, params.width_increase - profile["width_allowance"])

    probability = (
        profile["base"]
        + effective_growth * profile["diameter_slope"]
        + excess_width * profile["width_slope"]
    )
    probability = min(probability, profile["cap"])

    large_tire = params.new_diameter >= profile["large_tire_diameter"]
    if large_tire:
        probability = max(probability, profile["large_tire_floor"])

    return int(round(probability)), large_tire


def _primary_issue(params: ClearanceParams, risk_class: RiskLevel, large_tire: bool) -> Optional[str]:
    ifs = params.suspension_type is SuspensionType.IFS
    if large_tire:
        if ifs:
            return '37"+ tires require extensive modifications on IFS'
        return '40"+ tires require significant modifications'
    if risk_class is RiskLevel.LOW:
        return None
    if risk_class is RiskLevel.MODERATE:
        return "UCA contact at full compression" if ifs else "Fender liner contact at full compression"
    if ifs:
        return "UCA contact, CMC and fender liner trimming required"
    return "Fender trimming or flat fenders required"


def _round_up_half_inch(value: float) -> float:
    return math.ceil(value * 2) / 2


def _lift_recommendation(params: ClearanceParams, risk_class: RiskLevel) -> LiftRecommendation:
    multiplier = SUSPENSION_PROFILES[params.suspension_type]["lift_multiplier"]
    ideal = max(0.0, params.diameter_increase) * multiplier
    recommended = _round_up_half_inch(ideal)
    additional = _round_up_half_inch(max(0.0, ideal - params.lift_height))

    if risk_class is RiskLevel.LOW:
        if params.lift_height > 0:
            message = f'Current {params.lift_height:g}" lift is adequate for this tire size'
        else:
            message = "No lift needed for this tire size"
        return LiftRecommendation(
            required=False,
            current_adequate=True,
            additional_needed=0.0,
            recommended=recommended,
            message=message,
        )

    if additional > 0:
        message = f'Recommend {recommended:g}" total lift ({additional:g}" more) for proper clearance'
    else:
        message = f'Lift is at the recommended {recommended:g}"; trimming is still needed for full clearance'
    return LiftRecommendation(
        required=True,
        current_adequate=False,
        additional_needed=additional,
        recommended=recommended,
        message=message,
    )


def _trimming_assessment(params: ClearanceParams, probability: int, risk_class: RiskLevel) -> TrimmingAssessment:
    if risk_class is RiskLevel.LOW:
        extent, trim_probability = "minimal", 10
    elif risk_class is RiskLevel.MODERATE:
        extent, trim_probability = ("minor", 50) if probability < 50 else ("moderate", 75)
    else:
        extent, trim_probability = "extensive", 90

    areas = []
    if extent != "minimal":
        if params.suspension_type is SuspensionType.IFS and params.diameter_increase > 2:
            areas.append("Cab mount chop (CMC)")
        areas.append("Fender liners")
    if extent in ("moderate", "extensive"):
        areas.append("Inner fender wells")
    if extent == "extensive":
        areas.extend(["Pinch welds", "Bump stops"])

    if extent == "minimal":
        message = "Little or no trimming expected"
    else:
        message = f"{extent.capitalize()} trimming likely needed"

    return TrimmingAssessment(extent=extent, probability=trim_probability, areas=areas, message=message)


def _summary(params: ClearanceParams, probability: int, risk_class: RiskLevel, primary_issue: Optional[str]) -> str:
    if risk_class is RiskLevel.LOW:
        fit = "your current lift" if params.lift_height > 0 else "minimal or no modifications"
        return f"Low clearance risk ({probability}% chance of rubbing). This tire size should fit with {fit}."
    if risk_class is RiskLevel.MODERATE:
        return (
            f"Moderate clearance risk ({probability}% chance of rubbing). "
            f"{primary_issue or 'Some modifications may be required'}. "
            "Expect minor trimming or a small lift."
        )
    tail = (
        "IFS clearance is challenging with this tire size."
        if params.suspension_type is SuspensionType.IFS
        else "Plan for extensive trimming or additional lift."
    )
    return (
        f"High clearance risk ({probability}% chance of rubbing). "
        f"{primary_issue or 'Significant modifications required'}. {tail}"
    )


def assess_clearance(params: ClearanceParams) -> ClearanceResult:
    """
    Assess fitment risk for a tire change.

    Args:
        params: Suspension, lift and tire growth

    Returns:
        ClearanceResult with probability, risk class, warnings, lift and
        trimming guidance
    """
    probability, large_tire = _rub_probability(params)

    risk_class = classify_clearance(probability)
    if large_tire:
        risk_class = RiskLevel.HIGH

    ctx = ClearanceContext(params=params, probability=probability, risk_class=risk_class)
    primary_issue = _primary_issue(params, risk_class, large_tire)

    return ClearanceResult(
        suspension_type=params.suspension_type.label,
        probability=probability,
        risk_class=risk_class,
        primary_issue=primary_issue,
        component_warnings=evaluate_warning_rules(ctx),
        lift_recommendation=_lift_recommendation(params, risk_class),
        trimming_assessment=_trimming_assessment(params, probability, risk_class),
        notes=list(SUSPENSION_NOTES[params.suspension_type]),
        summary=_summary(params, probability, risk_class, primary_issue),
    )


def assess_tire_clearance(
    current: ResolvedTire,
    new: ResolvedTire,
    drivetrain: DrivetrainConfig,
) -> Optional[ClearanceResult]:
    """
    Clearance for a resolved tire pair.

    Returns None unless the drivetrain names a suspension type or a
    vehicle. Width growth counts as zero when either width is unknown.
    """
    suspension = drivetrain.suspension_type
    if suspension is None:
        if not drivetrain.vehicle_type:
            logger.debug("No suspension type or vehicle; skipping clearance")
            return None
        suspension = get_vehicle_suspension_type(drivetrain.vehicle_type)

    width_increase = 0.0
    if current.width is not None and new.width is not None:
        width_increase = new.width - current.width

    return assess_clearance(ClearanceParams(
        suspension_type=suspension,
        lift_height=drivetrain.lift_height,
        diameter_increase=new.diameter - current.diameter,
        width_increase=width_increase,
        new_diameter=new.diameter,
        new_width=new.width,
    ))
