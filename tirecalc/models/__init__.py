"""
Pydantic models for tire comparison inputs and outputs.
"""

from tirecalc.models.inputs import (
    UsageCategory,
    SuspensionType,
    TireSpec,
    DrivetrainConfig,
    ComparisonOptions,
    ComparisonRequest,
    EXAMPLE_REQUEST,
    example_request,
)
from tirecalc.models.outputs import (
    RiskLevel,
    WeightConfidence,
    ResolvedTire,
    DimensionChange,
    TireDifferences,
    SpeedReading,
    SpeedometerError,
    EffectiveGearRatio,
    RpmChange,
    DrivetrainImpact,
    CompatibilityWarning,
    TireWeightEstimate,
    RotationalPhysicsResult,
    ComponentScore,
    StressBreakdown,
    UsageBias,
    SuggestedGearIncrease,
    RegearingAdvice,
    DrivetrainStressResult,
    ComponentWarning,
    LiftRecommendation,
    TrimmingAssessment,
    ClearanceResult,
    RegearingGuidance,
    RegearNecessity,
    GearRatioImpact,
    GearRatioOption,
    GearRecommendations,
    ComparisonResult,
)

__all__ = [
    "UsageCategory",
    "SuspensionType",
    "TireSpec",
    "DrivetrainConfig",
    "ComparisonOptions",
    "ComparisonRequest",
    "EXAMPLE_REQUEST",
    "example_request",
    "RiskLevel",
    "WeightConfidence",
    "ResolvedTire",
    "DimensionChange",
    "TireDifferences",
    "SpeedReading",
    "SpeedometerError",
    "EffectiveGearRatio",
    "RpmChange",
    "DrivetrainImpact",
    "CompatibilityWarning",
    "TireWeightEstimate",
    "RotationalPhysicsResult",
    "ComponentScore",
    "StressBreakdown",
    "UsageBias",
    "SuggestedGearIncrease",
    "RegearingAdvice",
    "DrivetrainStressResult",
    "ComponentWarning",
    "LiftRecommendation",
    "TrimmingAssessment",
    "ClearanceResult",
    "RegearingGuidance",
    "RegearNecessity",
    "GearRatioImpact",
    "GearRatioOption",
    "GearRecommendations",
    "ComparisonResult",
]
