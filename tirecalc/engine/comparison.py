"""
Tire comparison orchestrator.

Runs every calculation stage over one pair of tires:
geometry -> rotational physics -> drivetrain stress -> clearance -> guidance
-> gear ratio recommendations.

A stage whose inputs are missing yields None and the rest carry on.
Nothing here keeps state between calls.
"""

import logging
from typing import Any, Optional, Union

from tirecalc.clearance.assessor import assess_tire_clearance
from tirecalc.guidance.gear_selection import recommend_gear_ratios
from tirecalc.guidance.regearing import synthesize_regearing_guidance
from tirecalc.models.inputs import (
    ComparisonOptions,
    ComparisonRequest,
    DrivetrainConfig,
    TireSpec,
    UsageCategory,
)
from tirecalc.models.outputs import ComparisonResult
from tirecalc.physics.drivetrain import calculate_drivetrain_impact, calculate_speedometer_error
from tirecalc.physics.geometry import calculate_differences, check_compatibility, resolve_tire
from tirecalc.physics.rotation import calculate_rotational_physics
from tirecalc.scoring.stress import calculate_drivetrain_stress

logger = logging.getLogger(__name__)


class TireComparator:
    """
    Compares a current and a proposed tire for one vehicle.

    Stages that need a drivetrain value (axle ratio, suspension) are
    skipped, not failed, when that value is absent.
    """

    def __init__(
        self,
        current_tire: TireSpec,
        new_tire: TireSpec,
        drivetrain: Optional[DrivetrainConfig] = None,
        options: Optional[ComparisonOptions] = None,
        usage: UsageCategory = UsageCategory.WEEKEND_TRAIL,
    ):
        """
        Initialize comparator.

        Args:
            current_tire: Tire on the vehicle now
            new_tire: Proposed tire
            drivetrain: Drivetrain configuration (empty if None)
            options: Calculation options (defaults if None)
            usage: Intended use of the vehicle
        """
        self.current_tire = current_tire
        self.new_tire = new_tire
        self.drivetrain = drivetrain or DrivetrainConfig()
        self.options = options or ComparisonOptions()
        self.usage = usage

    def compare(self) -> ComparisonResult:
        """Run all stages and assemble the result."""
        current = resolve_tire(self.current_tire)
        new = resolve_tire(self.new_tire)

        if current is None or new is None:
            logger.debug("Tire diameter unknown; only resolved tires are reported")
            return ComparisonResult(usage_category=self.usage, current=current, new=new)

        rotational = calculate_rotational_physics(current, new)
        stress = calculate_drivetrain_stress(
            current,
            new,
            self.drivetrain,
            usage=self.usage,
            rotational=rotational,
            options=self.options,
        )

        return ComparisonResult(
            usage_category=self.usage,
            current=current,
            new=new,
            differences=calculate_differences(current, new),
            speedometer_error=calculate_speedometer_error(current, new, self.options.speedometer_test_speeds),
            drivetrain_impact=calculate_drivetrain_impact(current, new, self.drivetrain, self.options),
            rotational_physics=rotational,
            drivetrain_stress=stress,
            clearance_probability=assess_tire_clearance(current, new, self.drivetrain),
            regearing_guidance=synthesize_regearing_guidance(stress, self.usage),
            gear_recommendations=recommend_gear_ratios(current, new, self.drivetrain, self.usage, self.options),
            compatibility_warnings=check_compatibility(current, new),
        )


def _as_model(value: Any, model: type) -> Any:
    if value is None or isinstance(value, model):
        return value
    return model.model_validate(value)


def calculate_tire_comparison(
    current_tire: Union[TireSpec, dict],
    new_tire: Union[TireSpec, dict],
    drivetrain_config: Union[DrivetrainConfig, dict, None] = None,
    options: Union[ComparisonOptions, dict, None] = None,
    usage_category: Union[UsageCategory, str] = UsageCategory.WEEKEND_TRAIL,
) -> ComparisonResult:
    """
    Compare two tires.

    Accepts models or plain dicts. An empty options dict behaves exactly
    like no options.

    Args:
        current_tire: Tire on the vehicle now
        new_tire: Proposed tire
        drivetrain_config: Drivetrain configuration
        options: Calculation options
        usage_category: Intended use of the vehicle

    Returns:
        ComparisonResult; any section may be None

    Raises:
        pydantic.ValidationError: If an input is malformed (e.g. negative diameter)
    """
    comparator = TireComparator(
        _as_model(current_tire, TireSpec),
        _as_model(new_tire, TireSpec),
        _as_model(drivetrain_config, DrivetrainConfig),
        _as_model(options, ComparisonOptions),
        UsageCategory(usage_category),
    )
    return comparator.compare()


def compare_request(request: ComparisonRequest) -> ComparisonResult:
    """Run a comparison from a complete request model."""
    return calculate_tire_comparison(
        request.current_tire,
        request.new_tire,
        request.drivetrain,
        request.options,
        request.usage_category,
    )
