"""
Tests for Pydantic input and output models.
"""

import pytest
from pydantic import ValidationError

from tirecalc.models.inputs import (
    ComparisonOptions,
    ComparisonRequest,
    DrivetrainConfig,
    SuspensionType,
    TireSpec,
    UsageCategory,
    example_request,
)
from tirecalc.models.outputs import ComponentScore, StressBreakdown


class TestTireSpec:
    """Tests for TireSpec validation."""

    def test_size_only(self):
        """Test that a size label alone is valid."""
        spec = TireSpec(size="285/75R17")
        assert spec.size == "285/75R17"
        assert spec.diameter is None

    def test_numeric_only(self):
        """Test that a diameter without a size is valid."""
        spec = TireSpec(diameter=33.0, width=12.5)
        assert spec.size == ""
        assert spec.diameter == 33.0

    def test_negative_diameter_fails(self):
        """Test that a non-positive diameter is rejected."""
        with pytest.raises(ValidationError):
            TireSpec(diameter=-1.0)
        with pytest.raises(ValidationError):
            TireSpec(diameter=0.0)

    def test_negative_weight_fails(self):
        """Test that a non-positive tire weight is rejected."""
        with pytest.raises(ValidationError):
            TireSpec(size="35x12.50R17", weight=-5)

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_numbers_fail(self, value):
        """Test that infinite or NaN dimensions are rejected."""
        with pytest.raises(ValidationError):
            TireSpec(size="35x12.50R17", diameter=value)
        with pytest.raises(ValidationError):
            TireSpec(size="35x12.50R17", weight=value)

    def test_frozen(self):
        """Test that input models cannot be mutated."""
        spec = TireSpec(size="285/75R17")
        with pytest.raises(ValidationError):
            spec.size = "315/70R17"


class TestDrivetrainConfig:
    """Tests for DrivetrainConfig validation."""

    def test_empty_config_valid(self):
        """Test that every field is optional."""
        config = DrivetrainConfig()
        assert config.axle_gear_ratio is None
        assert config.lift_height == 0.0

    def test_non_positive_ratio_fails(self):
        """Test that a zero gear ratio is rejected."""
        with pytest.raises(ValidationError):
            DrivetrainConfig(axle_gear_ratio=0)

    def test_negative_lift_fails(self):
        """Test that negative lift is rejected."""
        with pytest.raises(ValidationError):
            DrivetrainConfig(lift_height=-1.0)

    def test_infinite_weight_fails(self):
        """Test that an infinite vehicle weight or lift is rejected."""
        with pytest.raises(ValidationError):
            DrivetrainConfig(vehicle_weight=float("inf"))
        with pytest.raises(ValidationError):
            DrivetrainConfig(lift_height=float("inf"))

    def test_suspension_from_string(self):
        """Test that suspension type parses from its JSON value."""
        config = DrivetrainConfig(suspension_type="solid_axle")
        assert config.suspension_type is SuspensionType.SOLID_AXLE
        assert config.suspension_type.label == "Solid Axle"


class TestComparisonOptions:
    """Tests for ComparisonOptions defaults."""

    def test_empty_dict_equals_defaults(self):
        """Test that {} produces the default options."""
        assert ComparisonOptions.model_validate({}) == ComparisonOptions()

    def test_defaults(self):
        """Test default option values."""
        options = ComparisonOptions()
        assert options.highway_speed_mph == 65.0
        assert options.speedometer_test_speeds == [30.0, 45.0, 60.0, 75.0]
        assert options.reference_vehicle_weight_lbs == 4500.0

    def test_unknown_keys_ignored(self):
        """Test that unknown option keys are ignored."""
        options = ComparisonOptions.model_validate({"future_flag": True})
        assert options == ComparisonOptions()

    @pytest.mark.parametrize("speeds", [[0], [0, 30], [-10.0], [float("inf")]])
    def test_test_speeds_must_be_positive(self, speeds):
        """Test that zero, negative or infinite indicated speeds are rejected."""
        with pytest.raises(ValidationError):
            ComparisonOptions.model_validate({"speedometer_test_speeds": speeds})

    def test_infinite_highway_speed_fails(self):
        """Test that an infinite highway speed is rejected."""
        with pytest.raises(ValidationError):
            ComparisonOptions(highway_speed_mph=float("inf"))


class TestUsageCategory:
    """Tests for UsageCategory."""

    def test_all_have_display_names(self):
        """Test that every category has a display name."""
        for usage in UsageCategory:
            assert usage.display_name

    def test_from_value(self):
        """Test lookup by JSON value."""
        assert UsageCategory("daily_driver") is UsageCategory.DAILY_DRIVER


class TestComparisonRequest:
    """Tests for ComparisonRequest."""

    def test_example_request_valid(self):
        """Test that the example request validates."""
        request = example_request()
        assert request.current_tire.size == "265/70R17"
        assert request.drivetrain.axle_gear_ratio == 3.909
        assert request.usage_category is UsageCategory.WEEKEND_TRAIL

    def test_defaults(self):
        """Test that drivetrain, options and usage default."""
        request = ComparisonRequest(
            current_tire={"size": "265/70R17"},
            new_tire={"size": "285/75R17"},
        )
        assert request.drivetrain == DrivetrainConfig()
        assert request.options == ComparisonOptions()
        assert request.usage_category is UsageCategory.WEEKEND_TRAIL

    def test_json_round_trip(self):
        """Test that the example survives JSON serialization."""
        request = example_request()
        restored = ComparisonRequest.model_validate_json(request.model_dump_json())
        assert restored == request


class TestStressBreakdown:
    """Tests for StressBreakdown."""

    def test_composite_sums_contributions(self):
        """Test that composite is the sum of contributions."""
        breakdown = StressBreakdown(
            diameter=ComponentScore(score=30, weight=0.30, contribution=9),
            weight=ComponentScore(score=56, weight=0.25, contribution=14),
            gearing=ComponentScore(score=26, weight=0.35, contribution=9),
            vehicle=ComponentScore(score=50, weight=0.10, contribution=5),
        )
        assert breakdown.composite == 37

    def test_component_score_bounds(self):
        """Test that component scores stay within 0-100."""
        with pytest.raises(ValidationError):
            ComponentScore(score=101, weight=0.3, contribution=30)
