"""
Rotational physics estimates for a tire change.

Provides:
- Tire weight estimation from diameter (and width when known)
- Weight and diameter deltas
- A rotational inertia proxy and its effect on acceleration and braking

ASSUMPTIONS:
- Inertia proxy: (weight delta% + 1.5 x diameter delta%) / 2. Radius
  growth matters more than mass (I = m r^2); the model linearizes it.
- 1% more rotational inertia costs roughly 0.4% acceleration and 0.3%
  braking performance
- Weights come from a piecewise-linear fit of typical all-terrain tires
"""

import logging
from typing import Optional

from tirecalc.models.outputs import (
    DiameterChange,
    ImpactEstimate,
    PerformanceImpact,
    ResolvedTire,
    RiskLevel,
    RotationalChanges,
    RotationalInertiaChange,
    RotationalPhysicsResult,
    TireWeightEstimate,
    UnsprungMassImpact,
    WeightChange,
    WeightConfidence,
)

logger = logging.getLogger(__name__)


# (diameter in, weight lbs) for typical all-terrain tires of nominal width
REFERENCE_TIRE_WEIGHTS: list[tuple[float, float]] = [
    (26.0, 34.0),
    (28.0, 38.0),
    (30.0, 44.0),
    (31.0, 48.0),
    (32.0, 52.0),
    (33.0, 57.0),
    (34.0, 62.0),
    (35.0, 68.0),
    (37.0, 78.0),
    (40.0, 95.0),
    (42.0, 108.0),
]

# Nominal section width is about a third of overall diameter
NOMINAL_WIDTH_RATIO = 0.33
# Weight change per inch of width beyond nominal (fraction)
WIDTH_WEIGHT_SENSITIVITY = 0.04
MIN_TIRE_WEIGHT_LBS = 10.0

DIAMETER_INERTIA_WEIGHT = 1.5
ACCELERATION_COEFFICIENT = -0.4
BRAKING_COEFFICIENT = -0.3

# |factor| thresholds: below MODERATE is LOW, at or above HIGH is HIGH
INERTIA_MODERATE_THRESHOLD = 5.0
INERTIA_HIGH_THRESHOLD = 10.0

TIRES_PER_VEHICLE = 4


def _interpolate_reference_weight(diameter: float) -> tuple[float, bool]:
    """
    Piecewise-linear weight lookup.

    Returns:
        Tuple of (weight_lbs, within_reference_range)
    """
    points = REFERENCE_TIRE_WEIGHTS
    if diameter < points[0][0]:
        (d0, w0), (d1, w1) = points[0], points[1]
        inside = False
    elif diameter > points[-1][0]:
        (d0, w0), (d1, w1) = points[-2], points[-1]
        inside = False
    else:
        inside = True
        for (d0, w0), (d1, w1) in zip(points, points[1:]):
            if d0 <= diameter <= d1:
                break

    weight = w0 + (w1 - w0) * (diameter - d0) / (d1 - d0)
    return max(MIN_TIRE_WEIGHT_LBS, weight), inside


def estimate_tire_weight(diameter: float, width: Optional[float] = None) -> tuple[float, WeightConfidence]:
    """
    Estimate the weight of one tire.

    Args:
        diameter: Overall diameter in inches
        width: Section width in inches (optional)

    Returns:
        Tuple of (weight_lbs, confidence). Confidence is LOW when the
        diameter lies outside the reference table (extrapolated).
    """
    if diameter <= 0:
        raise ValueError("Diameter must be positive")

    weight, inside = _interpolate_reference_weight(diameter)

    if width is not None:
        nominal_width = diameter * NOMINAL_WIDTH_RATIO
        weight *= 1 + (width - nominal_width) * WIDTH_WEIGHT_SENSITIVITY
        weight = max(MIN_TIRE_WEIGHT_LBS, weight)

    confidence = WeightConfidence.HIGH if inside else WeightConfidence.LOW
    return round(weight, 1), confidence


def _tire_weight(tire: ResolvedTire) -> TireWeightEstimate:
    if tire.weight is not None:
        return TireWeightEstimate(
            tire=tire.size,
            weight_lbs=tire.weight,
            diameter_inches=tire.diameter,
            confidence=WeightConfidence.HIGH,
            source="user-provided",
        )

    weight, confidence = estimate_tire_weight(tire.diameter, tire.width)
    source = "interpolated estimate" if confidence is WeightConfidence.HIGH else "extrapolated estimate"
    return TireWeightEstimate(
        tire=tire.size,
        weight_lbs=weight,
        diameter_inches=tire.diameter,
        confidence=confidence,
        source=source,
    )


def calculate_inertia_factor(weight_delta_pct: float, diameter_delta_pct: float) -> float:
    """Rotational inertia proxy from weight and diameter changes (percent)."""
    return (weight_delta_pct + diameter_delta_pct * DIAMETER_INERTIA_WEIGHT) / 2


def categorize_inertia_factor(factor: float) -> tuple[RiskLevel, str]:
    """Bucket an inertia factor by magnitude."""
    magnitude = abs(factor)
    if magnitude >= INERTIA_HIGH_THRESHOLD:
        return RiskLevel.HIGH, "Significant impact on vehicle dynamics"
    if magnitude >= INERTIA_MODERATE_THRESHOLD:
        return RiskLevel.MODERATE, "Noticeable impact on acceleration feel"
    return RiskLevel.LOW, "Minimal impact on acceleration and braking"


def _recommendations_for(category: RiskLevel) -> list[str]:
    if category is RiskLevel.HIGH:
        return [
            "Expect noticeable reduction in acceleration",
            "Braking distances may increase 5-10%",
            "Consider regearing to compensate for performance loss",
            "Upgraded brakes recommended",
            "Transmission may hunt for gears more frequently",
        ]
    if category is RiskLevel.MODERATE:
        return [
            "Slight reduction in acceleration performance",
            "Braking feel may be less responsive",
            "Monitor transmission behavior (may shift differently)",
            "Consider regearing if frequently towing or off-roading",
        ]
    return [
        "Negligible change in daily driving performance",
        "No regearing required unless other factors dictate",
    ]


def _acceleration_description(impact_pct: float) -> str:
    if abs(impact_pct) <= 3:
        return "Negligible change in acceleration times"
    example = 8.0 * (1 - impact_pct / 100)
    direction = "slower" if impact_pct < 0 else "faster"
    return (
        f"Approximately {abs(impact_pct):.1f}% {direction} acceleration "
        f"(e.g., 8.0s 0-60 -> {example:.1f}s)"
    )


def _braking_description(factor: float) -> str:
    magnitude = abs(factor)
    if magnitude > INERTIA_HIGH_THRESHOLD:
        return "Increased braking distances; brake upgrade recommended"
    if magnitude > INERTIA_MODERATE_THRESHOLD:
        return "Slightly increased braking effort required"
    return "No significant change in braking performance"


def _unsprung_description(increase_lbs: float) -> str:
    if increase_lbs > 40:
        return "Significant increase in unsprung mass; ride quality may suffer"
    if increase_lbs > 20:
        return "Moderate increase in unsprung mass; suspension may feel slightly busier"
    return "Minimal impact on ride quality"


def _summary(factor: float, all_four_lbs: float) -> str:
    magnitude = abs(factor)
    if magnitude < 2:
        return f"Negligible rotational impact ({factor:.1f}% change). Daily driving feel will be virtually identical."
    if magnitude < INERTIA_MODERATE_THRESHOLD:
        return (
            f"Minor rotational impact ({factor:.1f}% change). You may notice slightly "
            "less responsive acceleration, especially when loaded."
        )
    if magnitude < INERTIA_HIGH_THRESHOLD:
        return (
            f"MODERATE rotational impact ({factor:.1f}% change). Expect noticeably softer "
            f"acceleration. {abs(all_four_lbs):.0f} lbs of rotating mass change across all four corners."
        )
    return (
        f"HIGH rotational impact ({factor:.1f}% change). Acceleration will feel significantly "
        f"slower; regearing and brake upgrades deserve a look. "
        f"{abs(all_four_lbs):.0f} lbs of rotating mass change across all four corners."
    )


def calculate_rotational_physics(current: ResolvedTire, new: ResolvedTire) -> RotationalPhysicsResult:
    """
    Estimate the rotational consequences of swapping current for new.

    Args:
        current: Tire on the vehicle now
        new: Proposed tire

    Returns:
        RotationalPhysicsResult with deltas, inertia proxy and performance impact
    """
    current_weight = _tire_weight(current)
    new_weight = _tire_weight(new)

    weight_delta = new_weight.weight_lbs - current_weight.weight_lbs
    weight_delta_pct = weight_delta / current_weight.weight_lbs * 100

    diameter_delta = new.diameter - current.diameter
    diameter_delta_pct = diameter_delta / current.diameter * 100

    factor = calculate_inertia_factor(weight_delta_pct, diameter_delta_pct)
    category, category_description = categorize_inertia_factor(factor)

    acceleration_pct = factor * ACCELERATION_COEFFICIENT
    braking_pct = factor * BRAKING_COEFFICIENT
    all_four = weight_delta * TIRES_PER_VEHICLE

    both_high = (
        current_weight.confidence is WeightConfidence.HIGH
        and new_weight.confidence is WeightConfidence.HIGH
    )

    notes = [
        f"{w.tire} weight is estimated beyond the reference range"
        for w in (current_weight, new_weight)
        if w.confidence is WeightConfidence.LOW
    ]
    notes.append("Actual impact varies by driving style and vehicle weight")
    notes.append("Performance impact figures come from a simplified model")

    return RotationalPhysicsResult(
        current=current_weight,
        new=new_weight,
        changes=RotationalChanges(
            weight=WeightChange(
                delta_lbs=weight_delta,
                delta_pct=weight_delta_pct,
                all_four_tires_lbs=all_four,
            ),
            diameter=DiameterChange(delta_inches=diameter_delta, delta_pct=diameter_delta_pct),
            rotational_inertia=RotationalInertiaChange(
                factor=factor,
                category=category,
                description=category_description,
            ),
        ),
        performance_impact=PerformanceImpact(
            acceleration=ImpactEstimate(
                impact_pct=acceleration_pct,
                description=_acceleration_description(acceleration_pct),
            ),
            braking=ImpactEstimate(
                impact_pct=braking_pct,
                description=_braking_description(factor),
            ),
            unsprung_mass=UnsprungMassImpact(
                increase_lbs=all_four,
                description=_unsprung_description(all_four),
            ),
        ),
        overall_confidence=WeightConfidence.HIGH if both_high else WeightConfidence.LOW,
        notes=notes,
        recommendations=_recommendations_for(category),
        summary=_summary(factor, all_four),
    )
