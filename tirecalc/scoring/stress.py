"""
Drivetrain stress scoring for tire upgrades.

Combines four components into a 0-100 score (higher = more stress):
- Diameter change (30%)
- Weight / rotational inertia change (25%)
- Effective gear ratio loss (35%)
- Vehicle weight (10%) - heavier vehicles absorb a tire change better

Bands: 0-30 LOW, 31-60 MODERATE, 61-100 HIGH.
"""

import logging
import math
from typing import Optional

from tirecalc.models.inputs import ComparisonOptions, DrivetrainConfig, UsageCategory
from tirecalc.models.outputs import (
    ComponentScore,
    DrivetrainStressResult,
    RegearingAdvice,
    ResolvedTire,
    RiskLevel,
    RotationalPhysicsResult,
    StressBreakdown,
    SuggestedGearIncrease,
    UsageBias,
)
from tirecalc.physics.drivetrain import (
    calculate_effective_gear_ratio,
    calculate_restoration_ratio,
    format_ratio,
    nearest_standard_ratio,
)
from tirecalc.physics.rotation import calculate_rotational_physics

logger = logging.getLogger(__name__)


COMPONENT_WEIGHTS = {
    "diameter": 0.30,
    "weight": 0.25,
    "gearing": 0.35,
    "vehicle": 0.10,
}
assert math.isclose(sum(COMPONENT_WEIGHTS.values()), 1.0), "Stress weights must sum to 1.0"

USAGE_BIAS = {
    UsageCategory.DAILY_DRIVER: 1.15,
    UsageCategory.WEEKEND_TRAIL: 1.0,
    UsageCategory.ROCK_CRAWLING: 0.85,
    UsageCategory.OVERLAND: 0.85,
    UsageCategory.SAND_DESERT: 1.0,
    UsageCategory.SNOW: 1.0,
}

# Upper bounds (inclusive) of the LOW and MODERATE bands
LOW_MAX = 30
MODERATE_MAX = 60
# MODERATE scores above this move urgency from "eventually" to "soon"
MODERATE_SOON_FROM = 46

URGENT_THRESHOLD = 75
# Diameter growth (inches) that always scores above URGENT_THRESHOLD
LARGE_INCREASE_INCHES = 5.4
TRANSMISSION_WARNING_THRESHOLD = 50

CRITICAL_PREFIX = "CRITICAL: "
URGENT_PREFIX = "URGENT: "


def classify_stress(score: int) -> RiskLevel:
    """Classify an integer stress score into its band."""
    if score <= LOW_MAX:
        return RiskLevel.LOW
    if score <= MODERATE_MAX:
        return RiskLevel.MODERATE
    return RiskLevel.HIGH


def is_critical_recommendation(text: str) -> bool:
    """Whether a recommendation carries a critical tag."""
    return text.startswith((CRITICAL_PREFIX, URGENT_PREFIX))


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


class DrivetrainStressScorer:
    """
    Scores the drivetrain stress of a tire change.

    Scoring Philosophy:
    - Each component is scored 0 to 100 independently
    - contribution = round(component score x weight fraction)
    - The composite is the sum of contributions, then biased for usage
    - A 5.4" or larger diameter increase never scores 75 or below; the
      lift is reported in usage_bias.adjustment
    """

    DIAMETER_SCALE = 8.0  # points per % of diameter change
    INERTIA_SCALE = 6.0  # points per % of rotational inertia factor
    GEARING_SCALE = 7.0  # points per % of effective ratio lost
    VEHICLE_SCALE = 200.0
    VEHICLE_BASELINE = 50.0

    def __init__(self, usage: UsageCategory = UsageCategory.WEEKEND_TRAIL, reference_weight_lbs: float = 4500.0):
        """
        Initialize scorer.

        Args:
            usage: Intended use of the vehicle
            reference_weight_lbs: Vehicle weight that scores the baseline
        """
        self.usage = usage
        self.reference_weight_lbs = reference_weight_lbs

    def score(
        self,
        current: ResolvedTire,
        new: ResolvedTire,
        drivetrain: DrivetrainConfig,
        rotational: Optional[RotationalPhysicsResult] = None,
    ) -> Optional[DrivetrainStressResult]:
        """
        Score a tire change.

        Args:
            current: Tire on the vehicle now
            new: Proposed tire
            drivetrain: Drivetrain configuration (needs axle_gear_ratio)
            rotational: Precomputed rotational physics (computed if None)

        Returns:
            DrivetrainStressResult, or None when no axle ratio is configured.
            Large diameter changes always produce a result.
        """
        axle = drivetrain.axle_gear_ratio
        if axle is None:
            logger.debug("No axle gear ratio; skipping drivetrain stress")
            return None

        if rotational is None:
            rotational = calculate_rotational_physics(current, new)

        diameter_pct = (new.diameter - current.diameter) / current.diameter * 100
        effective = calculate_effective_gear_ratio(axle, current.diameter, new.diameter)
        effective_pct = (effective - axle) / axle * 100
        vehicle_weight = drivetrain.vehicle_weight or self.reference_weight_lbs

        breakdown = StressBreakdown(
            diameter=self._component("diameter", self._score_diameter(diameter_pct)),
            weight=self._component("weight", self._score_inertia(rotational.changes.rotational_inertia.factor)),
            gearing=self._component("gearing", self._score_gearing(effective_pct)),
            vehicle=self._component("vehicle", self._score_vehicle(vehicle_weight)),
        )

        composite = breakdown.composite
        multiplier = USAGE_BIAS.get(self.usage, 1.0)
        final = int(round(_clamp(composite * multiplier)))
        if round(new.diameter - current.diameter, 3) >= LARGE_INCREASE_INCHES:
            final = max(final, URGENT_THRESHOLD + 1)

        classification = classify_stress(final)

        return DrivetrainStressResult(
            score=final,
            classification=classification,
            severity=self._severity(classification),
            breakdown=breakdown,
            usage_bias=UsageBias(
                category=self.usage,
                multiplier=multiplier,
                adjustment=final - composite,
            ),
            regearing=self._regearing_advice(final, classification, axle, current, new, diameter_pct),
            recommendations=self._recommendations(final, classification, diameter_pct, effective_pct),
            summary=self._summary(final, diameter_pct),
            diameter_change_pct=diameter_pct,
            effective_gear_ratio_change_pct=effective_pct,
        )

    def _component(self, name: str, score: float) -> ComponentScore:
        rounded = int(round(_clamp(score)))
        fraction = COMPONENT_WEIGHTS[name]
        return ComponentScore(
            score=rounded,
            weight=fraction,
            contribution=int(round(rounded * fraction)),
        )

    def _score_diameter(self, diameter_pct: float) -> float:
        """Magnitude of diameter change; >12% saturates."""
        return abs(diameter_pct) * self.DIAMETER_SCALE

    def _score_inertia(self, inertia_factor: float) -> float:
        """Magnitude of the rotational inertia proxy."""
        return abs(inertia_factor) * self.INERTIA_SCALE

    def _score_gearing(self, effective_pct: float) -> float:
        """
        Loss of effective ratio only.

        Smaller tires numerically raise the effective ratio and add no
        gearing stress.
        """
        return max(0.0, -effective_pct) * self.GEARING_SCALE

    def _score_vehicle(self, vehicle_weight_lbs: float) -> float:
        """
        Lighter than the reference scores above baseline, heavier below.

        3500 lbs -> ~100, 4500 lbs -> 50, 6000 lbs -> 0.
        """
        factor = self.reference_weight_lbs / vehicle_weight_lbs
        return (factor - 1) * self.VEHICLE_SCALE + self.VEHICLE_BASELINE

    @staticmethod
    def _severity(classification: RiskLevel) -> str:
        return {
            RiskLevel.LOW: "minimal",
            RiskLevel.MODERATE: "significant",
            RiskLevel.HIGH: "severe",
        }[classification]

    def _regearing_advice(
        self,
        score: int,
        classification: RiskLevel,
        axle: float,
        current: ResolvedTire,
        new: ResolvedTire,
        diameter_pct: float,
    ) -> RegearingAdvice:
        if classification is RiskLevel.LOW:
            return RegearingAdvice(recommendation="optional", priority="low", urgency="optional")

        if classification is RiskLevel.MODERATE:
            recommendation, priority = "recommended", "medium"
            urgency = "soon" if score >= MODERATE_SOON_FROM else "eventually"
        else:
            recommendation, priority, urgency = "essential", "high", "immediate"

        suggested = None
        if new.diameter > current.diameter:
            restoration = calculate_restoration_ratio(axle, current.diameter, new.diameter)
            target = nearest_standard_ratio(restoration)
            suggested = SuggestedGearIncrease(
                percent_increase=round(abs(diameter_pct), 1),
                current_ratio=axle,
                restoration_ratio=restoration,
                target_ratio=target,
                example=f"{format_ratio(axle)} → {format_ratio(target)}",
                reasoning="Numerically higher gears compensate for the larger tire diameter",
            )

        return RegearingAdvice(
            recommendation=recommendation,
            priority=priority,
            urgency=urgency,
            suggested_gear_increase=suggested,
        )

    def _recommendations(
        self,
        score: int,
        classification: RiskLevel,
        diameter_pct: float,
        effective_pct: float,
    ) -> list[str]:
        recommendations = []

        if classification is RiskLevel.LOW:
            recommendations.append("Drivetrain stress is minimal - no immediate action required")
            recommendations.append("Vehicle will stay close to stock performance")
            if abs(diameter_pct) < 3:
                recommendations.append("Tire size change is within tolerance for stock gearing")
        elif classification is RiskLevel.MODERATE:
            recommendations.append("Drivetrain stress is noticeable - regearing recommended for best performance")
            recommendations.append("You may experience sluggish acceleration and transmission hunting")
            recommendations.append("Consider regearing if you frequently tow, off-road, or drive in mountains")
            if self.usage is UsageCategory.DAILY_DRIVER:
                recommendations.append("Daily driving will feel less responsive - regearing strongly advised")
            if effective_pct < -5:
                recommendations.append("Effective gear ratio loss is large enough to affect driveability")
        else:
            recommendations.append(CRITICAL_PREFIX + "Drivetrain stress is severe - regearing is essential")
            recommendations.append("Expect sharply reduced acceleration and possible transmission issues")
            recommendations.append("Engine will work harder to move the vehicle, increasing wear")
            recommendations.append("Fuel economy will suffer from inefficient power delivery")
            if score >= URGENT_THRESHOLD:
                recommendations.append(URGENT_PREFIX + "Do not drive this setup long-term without regearing")
                recommendations.append(URGENT_PREFIX + "Transmission may overheat or fail prematurely")
            if self.usage is UsageCategory.DAILY_DRIVER:
                recommendations.append("Daily driving is not recommended until regeared")
            if self.usage is UsageCategory.ROCK_CRAWLING:
                recommendations.append("Even for rock crawling, this stress level calls for lower gearing")

        if score >= TRANSMISSION_WARNING_THRESHOLD:
            recommendations.append("Monitor transmission temperatures - consider an auxiliary cooler")

        return recommendations

    def _summary(self, score: int, diameter_pct: float) -> str:
        if score < 20:
            return (
                f"Drivetrain stress is negligible ({score}/100). This tire change will barely "
                "affect performance and no regearing is necessary."
            )
        if score <= LOW_MAX:
            return (
                f"Drivetrain stress is LOW ({score}/100). Performance impact will be minor. "
                "Regearing is optional."
            )
        if score < TRANSMISSION_WARNING_THRESHOLD:
            tail = ", especially for daily driving" if self.usage is UsageCategory.DAILY_DRIVER else " for best performance"
            return (
                f"Drivetrain stress is MODERATE ({score}/100). Expect reduced acceleration and "
                f"possible transmission hunting. Regearing is recommended{tail}."
            )
        if score <= MODERATE_MAX:
            return (
                f"Drivetrain stress is MODERATE-HIGH ({score}/100). Expect sluggish performance "
                "and extra transmission wear. Regearing is strongly recommended."
            )
        if score < URGENT_THRESHOLD:
            return (
                f"Drivetrain stress is HIGH ({score}/100). Performance will suffer significantly "
                "without regearing. Regearing is essential."
            )
        return (
            f"{CRITICAL_PREFIX}Drivetrain stress is SEVERE ({score}/100). This "
            f"{abs(diameter_pct):.1f}% diameter change needs regearing before regular driving."
        )


def calculate_drivetrain_stress(
    current: ResolvedTire,
    new: ResolvedTire,
    drivetrain: DrivetrainConfig,
    usage: UsageCategory = UsageCategory.WEEKEND_TRAIL,
    rotational: Optional[RotationalPhysicsResult] = None,
    options: Optional[ComparisonOptions] = None,
) -> Optional[DrivetrainStressResult]:
    """Score drivetrain stress. None only when the axle ratio is missing."""
    options = options or ComparisonOptions()
    scorer = DrivetrainStressScorer(usage, options.reference_vehicle_weight_lbs)
    return scorer.score(current, new, drivetrain, rotational)
