"""
Tests for physics calculations.

Tests tire geometry, rotational physics and drivetrain kinematics.
"""

import logging
import math

import pytest

from tirecalc.models.inputs import ComparisonOptions, DrivetrainConfig, TireSpec
from tirecalc.models.outputs import RiskLevel, WeightConfidence
from tirecalc.physics.drivetrain import (
    STANDARD_GEAR_RATIOS,
    calculate_drivetrain_impact,
    calculate_effective_gear_ratio,
    calculate_engine_rpm,
    calculate_restoration_ratio,
    calculate_speedometer_error,
    format_ratio,
    nearest_standard_ratio,
)
from tirecalc.physics.geometry import (
    calculate_circumference,
    calculate_differences,
    calculate_revolutions_per_mile,
    check_compatibility,
    parse_tire_size,
    resolve_tire,
)
from tirecalc.physics.rotation import (
    calculate_inertia_factor,
    calculate_rotational_physics,
    categorize_inertia_factor,
    estimate_tire_weight,
)
from tirecalc.physics.units import MILE_IN_INCHES, in_to_mm, mm_to_in, wheel_rpm


class TestUnits:
    """Tests for units.py module."""

    def test_mile_in_inches(self):
        """Test that one mile is 63,360 inches."""
        assert MILE_IN_INCHES == pytest.approx(63360.0)

    def test_mm_inch_conversion(self):
        """Test millimeter/inch conversions."""
        assert mm_to_in(25.4) == pytest.approx(1.0)
        assert in_to_mm(1.0) == pytest.approx(25.4)

    def test_wheel_rpm(self):
        """Test wheel RPM from speed and diameter."""
        # 60 mph = 63,360 in/min; one turn of a 1/pi inch tire is 1 inch
        assert wheel_rpm(60.0, 1 / math.pi) == pytest.approx(63360.0, rel=1e-6)

    def test_wheel_rpm_invalid_diameter(self):
        """Test that zero diameter raises error."""
        with pytest.raises(ValueError):
            wheel_rpm(60.0, 0.0)


class TestTireSizeParsing:
    """Tests for parse_tire_size."""

    def test_p_metric_uses_measured_diameter(self):
        """Test that a listed metric size uses the measured diameter."""
        parsed = parse_tire_size("265/70R17")
        assert parsed.format == "P-metric"
        assert parsed.diameter == 31.6
        assert parsed.used_measured_data is True
        assert parsed.aspect_ratio == 70
        assert parsed.rim_diameter == 17
        assert parsed.width == pytest.approx(265 / 25.4)
        assert parsed.sidewall_height == pytest.approx(265 * 0.70 / 25.4)

    def test_p_metric_formula(self):
        """Test the calculated diameter for an unlisted size."""
        parsed = parse_tire_size("P225/65R17")
        expected = 17 + 2 * (225 * 0.65 / 25.4)
        assert parsed.diameter == pytest.approx(expected)
        assert parsed.used_measured_data is False

    def test_lt_metric(self):
        """Test LT-metric prefix."""
        parsed = parse_tire_size("LT285/75R16")
        assert parsed.format == "LT-metric"
        assert parsed.diameter == 32.8

    def test_flotation(self):
        """Test flotation size states the diameter directly."""
        parsed = parse_tire_size("35x12.50R17")
        assert parsed.format == "Flotation"
        assert parsed.diameter == 35.0
        assert parsed.width == 12.5
        assert parsed.rim_diameter == 17.0
        assert parsed.sidewall_height == pytest.approx(9.0)

    def test_flotation_dash_and_case(self):
        """Test bias-ply dash notation and lowercase input."""
        parsed = parse_tire_size(" 33x10.50-15 ")
        assert parsed.diameter == 33.0
        assert parsed.rim_diameter == 15.0

    def test_z_rated(self):
        """Test that a Z speed rating before R is accepted."""
        parsed = parse_tire_size("275/40ZR20")
        assert parsed.rim_diameter == 20

    @pytest.mark.parametrize("size", ["", "garbage", "R17", "35x12.50"])
    def test_unparseable_raises(self, size):
        """Test that unsupported strings raise ValueError."""
        with pytest.raises(ValueError):
            parse_tire_size(size)


class TestTireResolution:
    """Tests for resolve_tire."""

    def test_resolves_metrics(self):
        """Test circumference and revolutions per mile."""
        tire = resolve_tire(TireSpec(size="265/70R17"))
        assert tire.diameter == 31.6
        assert tire.circumference == pytest.approx(math.pi * 31.6)
        assert tire.revolutions_per_mile == pytest.approx(63360 / (math.pi * 31.6))

    def test_numeric_fields_override_parsed(self):
        """Test that a supplied diameter wins over the parsed one."""
        tire = resolve_tire(TireSpec(size="285/75R17", diameter=33.1))
        assert tire.diameter == 33.1
        assert tire.used_measured_data is False

    def test_unparseable_falls_back_to_numbers(self):
        """Test fallback to numeric fields for a malformed size."""
        tire = resolve_tire(TireSpec(size="mystery tire", diameter=34.0, width=11.5))
        assert tire.diameter == 34.0
        assert tire.width == 11.5
        assert tire.format is None

    def test_unknown_diameter_returns_none(self, caplog):
        """Test that no diameter at all yields None and logs why."""
        with caplog.at_level(logging.DEBUG, logger="tirecalc.physics.geometry"):
            assert resolve_tire(TireSpec(size="mystery tire")) is None
        assert "mystery tire" in caplog.text

    def test_numeric_only_label(self):
        """Test the display label for a numeric-only tire."""
        tire = resolve_tire(TireSpec(diameter=35.0))
        assert tire.size == '35"'

    def test_circumference_invalid(self):
        """Test that helpers reject non-positive values."""
        with pytest.raises(ValueError):
            calculate_circumference(0)
        with pytest.raises(ValueError):
            calculate_revolutions_per_mile(-1)


class TestDifferences:
    """Tests for calculate_differences and check_compatibility."""

    def test_tacoma_differences(self, tacoma_current, tacoma_new):
        """Test diameter change and ground clearance gain."""
        diffs = calculate_differences(tacoma_current, tacoma_new)
        assert diffs.diameter.absolute == pytest.approx(1.2)
        assert diffs.diameter.percentage == pytest.approx(1.2 / 31.6 * 100)
        assert diffs.ground_clearance_gain == pytest.approx(0.6)
        assert diffs.revolutions_per_mile.absolute < 0
        assert diffs.width is not None

    def test_width_none_when_unknown(self):
        """Test that width change is None without both widths."""
        current = resolve_tire(TireSpec(diameter=31.0))
        new = resolve_tire(TireSpec(size="33x12.50R17"))
        assert calculate_differences(current, new).width is None

    def test_no_warnings_for_small_change(self, tacoma_current, tacoma_new):
        """Test a routine upgrade produces no compatibility warnings."""
        assert check_compatibility(tacoma_current, tacoma_new) == []

    def test_extreme_diameter_warning(self, tacoma_current):
        """Test >15% diameter increase is critical."""
        new = resolve_tire(TireSpec(size="37x12.50R17"))
        warnings = check_compatibility(tacoma_current, new)
        assert warnings[0].severity == "critical"

    def test_rim_change_warning(self):
        """Test that a wheel diameter change is flagged as info."""
        current = resolve_tire(TireSpec(size="265/70R17"))
        new = resolve_tire(TireSpec(size="275/65R18"))
        messages = [w.message for w in check_compatibility(current, new)]
        assert "Wheel diameter change" in messages

    def test_low_profile_warning(self):
        """Test that dropping below a 60 aspect ratio is advisory."""
        current = resolve_tire(TireSpec(size="265/70R17"))
        new = resolve_tire(TireSpec(size="285/55R20"))
        severities = {w.message: w.severity for w in check_compatibility(current, new)}
        assert severities.get("Low profile tire for off-road") == "advisory"


class TestRotationalPhysics:
    """Tests for rotation.py module."""

    def test_weight_in_reference_range(self):
        """Test interpolated weight has high confidence."""
        weight, confidence = estimate_tire_weight(33.0)
        assert weight == 57.0
        assert confidence is WeightConfidence.HIGH

    def test_weight_interpolates(self):
        """Test linear interpolation between reference points."""
        weight, _ = estimate_tire_weight(31.6)
        assert weight == pytest.approx(50.4)

    def test_weight_extrapolated_low_confidence(self):
        """Test weights outside the table are flagged."""
        small, small_conf = estimate_tire_weight(24.0)
        large, large_conf = estimate_tire_weight(44.0)
        assert small_conf is WeightConfidence.LOW
        assert large_conf is WeightConfidence.LOW
        assert small < 34.0
        assert large > 108.0

    def test_weight_monotonic_in_diameter(self):
        """Test that bigger tires never weigh less."""
        weights = [estimate_tire_weight(d / 2)[0] for d in range(40, 100)]
        assert weights == sorted(weights)

    def test_wider_tire_heavier(self):
        """Test width adjustment."""
        narrow, _ = estimate_tire_weight(35.0, 10.5)
        wide, _ = estimate_tire_weight(35.0, 12.5)
        assert wide > narrow

    def test_inertia_factor_formula(self):
        """Test (w% + 1.5 x d%) / 2."""
        assert calculate_inertia_factor(10.0, 4.0) == pytest.approx(8.0)
        assert calculate_inertia_factor(0.0, 0.0) == 0.0

    @pytest.mark.parametrize("factor,expected", [
        (0.0, RiskLevel.LOW),
        (4.99, RiskLevel.LOW),
        (5.0, RiskLevel.MODERATE),
        (9.99, RiskLevel.MODERATE),
        (10.0, RiskLevel.HIGH),
        (-12.0, RiskLevel.HIGH),
    ])
    def test_inertia_categories(self, factor, expected):
        """Test category thresholds on |factor|."""
        category, _ = categorize_inertia_factor(factor)
        assert category is expected

    def test_tacoma_rotational_physics(self, tacoma_current, tacoma_new):
        """Test factor is computed from the realized deltas."""
        result = calculate_rotational_physics(tacoma_current, tacoma_new)
        changes = result.changes
        expected = (changes.weight.delta_pct + changes.diameter.delta_pct * 1.5) / 2
        assert changes.rotational_inertia.factor == pytest.approx(expected)
        assert changes.rotational_inertia.factor == pytest.approx(9.30, abs=0.05)
        assert changes.rotational_inertia.category is RiskLevel.MODERATE
        assert result.performance_impact.acceleration.impact_pct == pytest.approx(expected * -0.4)
        assert result.performance_impact.braking.impact_pct == pytest.approx(expected * -0.3)
        assert changes.weight.all_four_tires_lbs == pytest.approx(changes.weight.delta_lbs * 4)
        assert result.overall_confidence is WeightConfidence.HIGH

    def test_user_weight_overrides_estimate(self):
        """Test that a known tire weight is used as-is."""
        current = resolve_tire(TireSpec(size="265/70R17", weight=48.0))
        new = resolve_tire(TireSpec(size="35x12.50R17", weight=72.5))
        result = calculate_rotational_physics(current, new)
        assert result.current.weight_lbs == 48.0
        assert result.new.weight_lbs == 72.5
        assert result.new.source == "user-provided"
        assert result.new.confidence is WeightConfidence.HIGH

    def test_extrapolated_lowers_overall_confidence(self):
        """Test that one extrapolated weight lowers overall confidence."""
        current = resolve_tire(TireSpec(size="35x12.50R17"))
        new = resolve_tire(TireSpec(size="44x15.50R20"))
        result = calculate_rotational_physics(current, new)
        assert result.overall_confidence is WeightConfidence.LOW
        assert any("reference range" in note for note in result.notes)

    def test_identical_tires(self, tacoma_current):
        """Test zero deltas for identical tires."""
        result = calculate_rotational_physics(tacoma_current, tacoma_current)
        assert result.changes.diameter.delta_pct == 0
        assert result.changes.weight.delta_lbs == 0
        assert result.changes.rotational_inertia.category is RiskLevel.LOW


class TestDrivetrainKinematics:
    """Tests for drivetrain.py module."""

    def test_effective_ratio(self):
        """Test that a taller tire lowers the effective ratio."""
        effective = calculate_effective_gear_ratio(4.10, 32.7, 35.0)
        assert effective == pytest.approx(4.10 * 32.7 / 35.0)
        assert effective < 4.10

    def test_effective_ratio_invalid(self):
        """Test that non-positive inputs raise error."""
        with pytest.raises(ValueError):
            calculate_effective_gear_ratio(0, 31.0, 33.0)
        with pytest.raises(ValueError):
            calculate_effective_gear_ratio(4.10, 0, 33.0)

    def test_restoration_ratio(self):
        """Test the ratio that restores the original effective gearing."""
        restoration = calculate_restoration_ratio(3.909, 31.6, 32.8)
        assert calculate_effective_gear_ratio(restoration, 31.6, 32.8) == pytest.approx(3.909)

    def test_engine_rpm(self):
        """Test RPM against the speed x ratio x 336 / diameter rule of thumb."""
        rpm = calculate_engine_rpm(65.0, 31.6, 3.909)
        assert rpm == pytest.approx(65 * 3.909 * 336 / 31.6, rel=0.01)

    def test_standard_ratios_sorted(self):
        """Test the ratio list is ascending."""
        assert STANDARD_GEAR_RATIOS == sorted(STANDARD_GEAR_RATIOS)

    @pytest.mark.parametrize("target,expected", [
        (3.0, 3.07),
        (4.0574, 4.10),
        (4.10, 4.10),
        (4.45, 4.56),
        (7.0, 5.86),
    ])
    def test_nearest_standard_ratio(self, target, expected):
        """Test smallest standard ratio at or above the target."""
        assert nearest_standard_ratio(target) == expected

    @pytest.mark.parametrize("ratio,expected", [
        (4.1, "4.10"),
        (3.909, "3.909"),
        (4.56, "4.56"),
        (5.0, "5.00"),
    ])
    def test_format_ratio(self, ratio, expected):
        """Test gear ratio display."""
        assert format_ratio(ratio) == expected

    def test_speedometer_error(self, tacoma_current, tacoma_new):
        """Test speedometer reads slow on a taller tire."""
        error = calculate_speedometer_error(tacoma_current, tacoma_new, [30, 60])
        assert error.ratio == pytest.approx(32.8 / 31.6)
        assert "SLOWER" in error.summary
        assert error.readings[1].actual == pytest.approx(60 * 32.8 / 31.6)
        assert error.readings[1].error_percentage == pytest.approx((32.8 / 31.6 - 1) * 100)

    def test_speedometer_no_error(self, tacoma_current):
        """Test identical tires give no error."""
        error = calculate_speedometer_error(tacoma_current, tacoma_current, [60])
        assert error.summary == "No speedometer error"
        assert error.readings[0].error == 0

    def test_drivetrain_impact(self, tacoma_current, tacoma_new, tacoma_drivetrain):
        """Test effective ratio, RPM drop and tire-independent crawl ratio."""
        impact = calculate_drivetrain_impact(
            tacoma_current, tacoma_new, tacoma_drivetrain, ComparisonOptions()
        )
        assert impact.effective_gear_ratio.new == pytest.approx(3.909 * 31.6 / 32.8)
        assert impact.rpm.new < impact.rpm.original
        assert impact.rpm.test_speed_mph == 65.0
        assert impact.crawl_ratio == pytest.approx(3.909 * 2.5 * 3.5)

    def test_drivetrain_impact_uses_config_ratios(self, tacoma_current, tacoma_new):
        """Test that configured transfer case and first gear override defaults."""
        drivetrain = DrivetrainConfig(
            axle_gear_ratio=4.10,
            transfer_case_ratio=4.0,
            transmission_first_gear=4.7,
        )
        impact = calculate_drivetrain_impact(tacoma_current, tacoma_new, drivetrain, ComparisonOptions())
        assert impact.crawl_ratio == pytest.approx(4.10 * 4.0 * 4.7)

    def test_drivetrain_impact_without_ratio(self, tacoma_current, tacoma_new):
        """Test that no axle ratio means no drivetrain impact."""
        impact = calculate_drivetrain_impact(
            tacoma_current, tacoma_new, DrivetrainConfig(vehicle_weight=4500), ComparisonOptions()
        )
        assert impact is None
