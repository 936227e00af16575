"""
Tests for real-world regearing guidance.
"""

import pytest

from tirecalc.guidance.regearing import (
    NO_REGEAR_RECOMMENDATION,
    TIER_GUIDANCE,
    guidance_tier,
    synthesize_regearing_guidance,
)
from tirecalc.models.inputs import UsageCategory
from tirecalc.scoring.stress import calculate_drivetrain_stress


class TestTiers:
    """Tests for score tiers."""

    @pytest.mark.parametrize("score,tier", [
        (0, "minimal"),
        (19, "minimal"),
        (20, "small"),
        (45, "small"),
        (46, "moderate"),
        (60, "moderate"),
        (61, "large"),
        (80, "large"),
        (81, "extreme"),
        (100, "extreme"),
    ])
    def test_tier_bounds(self, score, tier):
        """Test tier boundaries."""
        assert guidance_tier(score) == tier

    def test_likelihood_rises_with_tier(self):
        """Test likelihood ordering across tiers."""
        order = ["minimal", "small", "moderate", "large", "extreme"]
        likelihoods = [TIER_GUIDANCE[t]["likelihood"] for t in order]
        assert likelihoods == sorted(likelihoods)


class TestSynthesis:
    """Tests for synthesize_regearing_guidance."""

    def test_none_without_stress(self):
        """Test that no stress result means no guidance."""
        assert synthesize_regearing_guidance(None) is None

    def test_identical_tires_no_regear(self, tacoma_current, tacoma_drivetrain):
        """Test an unchanged tire recommends no regearing."""
        stress = calculate_drivetrain_stress(tacoma_current, tacoma_current, tacoma_drivetrain)
        guidance = synthesize_regearing_guidance(stress)
        assert guidance.tier == "minimal"
        assert guidance.recommendation == NO_REGEAR_RECOMMENDATION

    def test_tacoma_most_skip(self, tacoma_current, tacoma_new, tacoma_drivetrain):
        """Test a MODERATE stress score still reads as optional in practice."""
        stress = calculate_drivetrain_stress(tacoma_current, tacoma_new, tacoma_drivetrain)
        guidance = synthesize_regearing_guidance(stress)
        assert guidance.tier == "small"
        assert guidance.likelihood == 20
        assert "DON'T" in guidance.consensus
        assert guidance.recommendation.startswith("Optional")
        assert guidance.why_regear and guidance.why_not_regear
        assert guidance.cost_context

    def test_daily_driver_override(self, tacoma_current, tacoma_new, tacoma_drivetrain):
        """Test daily drivers see a higher likelihood in the same tier."""
        stress = calculate_drivetrain_stress(
            tacoma_current, tacoma_new, tacoma_drivetrain, usage=UsageCategory.DAILY_DRIVER
        )
        guidance = synthesize_regearing_guidance(stress, UsageCategory.DAILY_DRIVER)
        assert guidance.tier == "small"
        assert guidance.likelihood == 30

    def test_jeep_daily_driver_large(self, jeep_current, jeep_new, jeep_drivetrain):
        """Test a HIGH stress score lands in the large tier."""
        stress = calculate_drivetrain_stress(
            jeep_current, jeep_new, jeep_drivetrain, usage=UsageCategory.DAILY_DRIVER
        )
        guidance = synthesize_regearing_guidance(stress, UsageCategory.DAILY_DRIVER)
        assert guidance.tier == "large"
        assert guidance.likelihood == 80
        assert guidance.recommendation.startswith("Strongly recommended")

    def test_rock_crawling_moderate_override(self, jeep_current, jeep_new, jeep_drivetrain):
        """Test rock crawlers get the lower-gearing-is-fine advice."""
        stress = calculate_drivetrain_stress(
            jeep_current, jeep_new, jeep_drivetrain, usage=UsageCategory.ROCK_CRAWLING
        )
        guidance = synthesize_regearing_guidance(stress, UsageCategory.ROCK_CRAWLING)
        assert guidance.tier == "moderate"
        assert "rock crawlers" in guidance.recommendation

    def test_guidance_lists_are_copies(self, tacoma_current, tacoma_new, tacoma_drivetrain):
        """Test results do not share list objects with the tier table."""
        stress = calculate_drivetrain_stress(tacoma_current, tacoma_new, tacoma_drivetrain)
        guidance = synthesize_regearing_guidance(stress)
        assert guidance.why_regear is not TIER_GUIDANCE["small"]["why_regear"]
