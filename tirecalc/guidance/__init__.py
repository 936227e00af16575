"""
Regearing guidance: what owners do in practice, and which ratio to pick.
"""

from tirecalc.guidance.gear_selection import (
    USE_CASE_PROFILES,
    GearRatioSelector,
    recommend_gear_ratios,
)
from tirecalc.guidance.regearing import guidance_tier, synthesize_regearing_guidance

__all__ = [
    "USE_CASE_PROFILES",
    "GearRatioSelector",
    "guidance_tier",
    "recommend_gear_ratios",
    "synthesize_regearing_guidance",
]
