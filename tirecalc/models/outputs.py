"""
Output models for tire comparisons.

Every result is created fresh per calculation and never mutated. Any
section may be None when the inputs it needs were not supplied.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from tirecalc.models.inputs import UsageCategory


class ResultModel(BaseModel):
    """Base for immutable result objects."""
    model_config = {"frozen": True}


class RiskLevel(str, Enum):
    """Three-band classification shared by stress and clearance results."""
    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"


class WeightConfidence(str, Enum):
    """How well-supported a tire weight figure is."""
    HIGH = "high"
    LOW = "low"


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

class ResolvedTire(ResultModel):
    """
    A tire with a known diameter plus derived rotational geometry.

    Dimensions in inches.
    """
    size: str = Field(..., description="Display label as given")
    format: Optional[str] = Field(default=None, description="P-metric, LT-metric, Flotation, or None if supplied numerically")
    diameter: float = Field(..., gt=0, description="Overall diameter")
    width: Optional[float] = Field(default=None, description="Section width")
    rim_diameter: Optional[float] = Field(default=None, description="Wheel diameter")
    aspect_ratio: Optional[int] = Field(default=None, description="Aspect ratio (percent)")
    sidewall_height: Optional[float] = Field(default=None, description="Sidewall height")
    circumference: float = Field(..., description="Rolling circumference (pi * d)")
    revolutions_per_mile: float = Field(..., description="Revolutions per mile")
    used_measured_data: bool = Field(
        default=False,
        description="Diameter came from the measured-size table instead of the formula"
    )
    weight: Optional[float] = Field(default=None, description="User-supplied weight in lbs")


class DimensionChange(ResultModel):
    """Absolute and relative change of one dimension."""
    absolute: float = Field(..., description="New minus current")
    percentage: float = Field(..., description="Change relative to current, in percent")


class TireDifferences(ResultModel):
    """Dimensional differences between the current and new tire."""
    diameter: DimensionChange
    width: Optional[DimensionChange] = None
    sidewall: Optional[DimensionChange] = None
    circumference: DimensionChange
    revolutions_per_mile: DimensionChange
    ground_clearance_gain: float = Field(..., description="Axle height change in inches (half the diameter change)")


class SpeedReading(ResultModel):
    """Speedometer reading vs true speed at one indicated speed."""
    indicated: float
    actual: float
    error: float
    error_percentage: float
    correction: str


class SpeedometerError(ResultModel):
    """Speedometer error caused by the diameter change."""
    ratio: float = Field(..., description="new diameter / current diameter")
    summary: str
    readings: list[SpeedReading] = Field(default_factory=list)


class EffectiveGearRatio(ResultModel):
    """Axle ratio as the vehicle effectively experiences it on the new tire."""
    original: float
    new: float
    change: float
    change_percentage: float
    summary: str


class RpmChange(ResultModel):
    """Engine RPM at highway speed, before and after."""
    original: float
    new: float
    change: float
    change_percentage: float
    test_speed_mph: float
    summary: str


class DrivetrainImpact(ResultModel):
    """Kinematic effect of the tire change on the drivetrain."""
    effective_gear_ratio: EffectiveGearRatio
    rpm: RpmChange
    crawl_ratio: float = Field(..., description="Axle x transfer case low x first gear (tire independent)")
    restoration_ratio: float = Field(..., description="Axle ratio that restores the original effective ratio")


class CompatibilityWarning(ResultModel):
    """Advisory note about a tire combination. Never blocks a calculation."""
    severity: str = Field(..., description="critical, important, advisory or info")
    message: str
    detail: str


# ---------------------------------------------------------------------------
# Rotational physics
# ---------------------------------------------------------------------------

class TireWeightEstimate(ResultModel):
    """Weight of one tire and how much to trust it."""
    tire: str
    weight_lbs: float
    diameter_inches: float
    confidence: WeightConfidence
    source: str


class WeightChange(ResultModel):
    delta_lbs: float
    delta_pct: float
    all_four_tires_lbs: float


class DiameterChange(ResultModel):
    delta_inches: float
    delta_pct: float


class RotationalInertiaChange(ResultModel):
    """Simplified proxy for the change in rotating inertia."""
    factor: float = Field(..., description="(weight delta% + 1.5 x diameter delta%) / 2")
    category: RiskLevel
    description: str


class RotationalChanges(ResultModel):
    weight: WeightChange
    diameter: DiameterChange
    rotational_inertia: RotationalInertiaChange


class ImpactEstimate(ResultModel):
    """Percent change in a performance figure. Negative = worse."""
    impact_pct: float
    description: str


class UnsprungMassImpact(ResultModel):
    increase_lbs: float
    description: str


class PerformanceImpact(ResultModel):
    acceleration: ImpactEstimate
    braking: ImpactEstimate
    unsprung_mass: UnsprungMassImpact


class RotationalPhysicsResult(ResultModel):
    """Weight, diameter and rotational inertia changes with performance impact."""
    current: TireWeightEstimate
    new: TireWeightEstimate
    changes: RotationalChanges
    performance_impact: PerformanceImpact
    overall_confidence: WeightConfidence
    notes: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    summary: str


# ---------------------------------------------------------------------------
# Drivetrain stress
# ---------------------------------------------------------------------------

class ComponentScore(ResultModel):
    """One weighted stress component."""
    score: int = Field(..., ge=0, le=100, description="Component score 0-100")
    weight: float = Field(..., gt=0, le=1, description="Weight fraction in the composite")
    contribution: int = Field(..., ge=0, le=100, description="round(score x weight)")


class StressBreakdown(ResultModel):
    diameter: ComponentScore
    weight: ComponentScore
    gearing: ComponentScore
    vehicle: ComponentScore

    @property
    def composite(self) -> int:
        """Sum of component contributions."""
        return (
            self.diameter.contribution
            + self.weight.contribution
            + self.gearing.contribution
            + self.vehicle.contribution
        )


class UsageBias(ResultModel):
    """Adjustment applied to the composite for the intended use."""
    category: UsageCategory
    multiplier: float
    adjustment: int = Field(..., description="Points added to the composite (may be negative)")


class SuggestedGearIncrease(ResultModel):
    """How much numerically higher the axle gears should be."""
    percent_increase: float
    current_ratio: float
    restoration_ratio: float
    target_ratio: float = Field(..., description="Nearest standard ratio at or above the restoration ratio")
    example: str
    reasoning: str


class RegearingAdvice(ResultModel):
    recommendation: str = Field(..., description="optional, recommended or essential")
    priority: str = Field(..., description="low, medium or high")
    urgency: str = Field(..., description="optional, eventually, soon or immediate")
    suggested_gear_increase: Optional[SuggestedGearIncrease] = None


class DrivetrainStressResult(ResultModel):
    """Weighted 0-100 drivetrain stress score with classification and advice."""
    score: int = Field(..., ge=0, le=100)
    classification: RiskLevel
    severity: str
    breakdown: StressBreakdown
    usage_bias: UsageBias
    regearing: RegearingAdvice
    recommendations: list[str] = Field(
        default_factory=list,
        description="Ordered advice; critical entries start with 'CRITICAL:' or 'URGENT:'"
    )
    summary: str
    diameter_change_pct: float
    effective_gear_ratio_change_pct: float


# ---------------------------------------------------------------------------
# Clearance
# ---------------------------------------------------------------------------

class ComponentWarning(ResultModel):
    """A part likely to contact or need work with the new tire."""
    component: str
    risk: RiskLevel
    description: str
    severity: str = Field(..., description="critical, moderate or minor")


class LiftRecommendation(ResultModel):
    required: bool
    current_adequate: bool
    additional_needed: float = Field(..., ge=0, description="Inches of lift beyond the installed lift")
    recommended: float = Field(..., ge=0, description="Total recommended lift in inches")
    message: str


class TrimmingAssessment(ResultModel):
    extent: str = Field(..., description="minimal, minor, moderate or extensive")
    probability: int = Field(..., ge=0, le=100)
    areas: list[str] = Field(default_factory=list)
    message: str


class ClearanceResult(ResultModel):
    """Fitment risk for the new tire on the given suspension."""
    suspension_type: str = Field(..., description="'IFS' or 'Solid Axle'")
    probability: int = Field(..., ge=0, le=100, description="Chance of rubbing, percent")
    risk_class: RiskLevel
    primary_issue: Optional[str] = None
    component_warnings: list[ComponentWarning] = Field(default_factory=list)
    lift_recommendation: LiftRecommendation
    trimming_assessment: TrimmingAssessment
    notes: list[str] = Field(default_factory=list)
    summary: str


# ---------------------------------------------------------------------------
# Regearing guidance
# ---------------------------------------------------------------------------

class RegearingGuidance(ResultModel):
    """What owners actually do at this stress level, in plain language."""
    tier: str
    consensus: str
    likelihood: int = Field(..., ge=0, le=100, description="Percent of owners who regear at this tier")
    reality_check: str
    recommendation: str
    why_regear: list[str] = Field(default_factory=list)
    why_not_regear: list[str] = Field(default_factory=list)
    cost_context: str
    transmission_note: Optional[str] = None


# ---------------------------------------------------------------------------
# Gear ratio recommendations
# ---------------------------------------------------------------------------

class RegearNecessity(ResultModel):
    """How pressing a regear is, from the diameter change alone."""
    level: str = Field(..., description="optional, consider, recommended or strongly_recommended")
    reason: str
    diameter_change_pct: float
    effective_ratio_change_pct: float


class GearRatioImpact(ResultModel):
    """What one candidate ratio does on the new tire."""
    highway_rpm: int = Field(..., description="Engine RPM at the profile test speed")
    crawl_ratio: float
    restoration_pct: float = Field(
        ...,
        description="Effective ratio vs the original axle ratio, percent (0 = fully restored)"
    )
    acceleration: str = Field(..., description="improved, similar or reduced")
    fuel_economy: str = Field(..., description="improved, similar or reduced")
    highway_comfort: str = Field(..., description="comfortable, moderate or high RPM")


class GearRatioOption(ResultModel):
    """A standard ratio scored against the usage profile."""
    ratio: float
    label: str = Field(..., description="Ratio as sold, e.g. '4.56'")
    kind: str = Field(..., description="restoration or optimal")
    impact: GearRatioImpact
    score: int = Field(..., description="Suitability for the usage profile (higher is better)")
    pros: list[str] = Field(default_factory=list)
    cons: list[str] = Field(default_factory=list)
    verdict: str


class GearRecommendations(ResultModel):
    """Ranked ring-and-pinion choices for the new tire, best first."""
    usage_category: UsageCategory
    profile: str = Field(..., description="Usage profile name")
    priority: str = Field(..., description="What the profile optimizes for")
    target_rpm: int = Field(..., description="Target engine RPM at the test speed")
    test_speed_mph: float
    current_ratio: float
    restoration_ratio: float = Field(..., description="Ratio that restores the original effective gearing")
    optimal_ratio: float = Field(..., description="Ratio that hits the profile target on the new tire")
    necessity: RegearNecessity
    options: list[GearRatioOption] = Field(default_factory=list)
    cost_estimate: str
    considerations: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------

class ComparisonResult(ResultModel):
    """
    Complete output of a tire comparison.

    Consumers must treat every section as possibly None.
    """
    usage_category: UsageCategory
    current: Optional[ResolvedTire] = None
    new: Optional[ResolvedTire] = None
    differences: Optional[TireDifferences] = None
    speedometer_error: Optional[SpeedometerError] = None
    drivetrain_impact: Optional[DrivetrainImpact] = None
    rotational_physics: Optional[RotationalPhysicsResult] = None
    drivetrain_stress: Optional[DrivetrainStressResult] = None
    clearance_probability: Optional[ClearanceResult] = None
    regearing_guidance: Optional[RegearingGuidance] = None
    gear_recommendations: Optional[GearRecommendations] = None
    compatibility_warnings: list[CompatibilityWarning] = Field(default_factory=list)
