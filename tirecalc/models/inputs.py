"""
Input models for tire comparisons.

These models describe the two tires, the vehicle drivetrain and the
calculation options. Estimates only - NOT an engineering certification.
"""

from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, Field


class UsageCategory(str, Enum):
    """How the vehicle is mostly driven. Biases scores, never gates them."""
    DAILY_DRIVER = "daily_driver"
    WEEKEND_TRAIL = "weekend_trail"
    ROCK_CRAWLING = "rock_crawling"
    OVERLAND = "overland"
    SAND_DESERT = "sand_desert"
    SNOW = "snow"

    @property
    def display_name(self) -> str:
        """Human-readable label."""
        return USAGE_DISPLAY_NAMES[self]


USAGE_DISPLAY_NAMES = {
    UsageCategory.DAILY_DRIVER: "Daily Driver",
    UsageCategory.WEEKEND_TRAIL: "Weekend Trail",
    UsageCategory.ROCK_CRAWLING: "Rock Crawling",
    UsageCategory.OVERLAND: "Overlanding / Expedition",
    UsageCategory.SAND_DESERT: "Sand / Desert",
    UsageCategory.SNOW: "Snow",
}


class SuspensionType(str, Enum):
    """Front suspension layout."""
    IFS = "ifs"
    SOLID_AXLE = "solid_axle"

    @property
    def label(self) -> str:
        return "IFS" if self is SuspensionType.IFS else "Solid Axle"


class TireSpec(BaseModel):
    """
    A tire as described by the user.

    `size` is a display label that the geometry resolver may parse when
    `diameter`/`width` are not supplied. Dimensions in inches, weight in lbs.
    """
    size: str = Field(default="", description="Tire size label, e.g. '285/75R17' or '35x12.50R17'")
    diameter: Optional[float] = Field(
        default=None,
        gt=0,
        description="Overall diameter in inches. If None, parsed from size."
    )
    width: Optional[float] = Field(
        default=None,
        gt=0,
        description="Section width in inches. If None, parsed from size."
    )
    weight: Optional[float] = Field(
        default=None,
        gt=0,
        description="Known tire weight in lbs. If None, estimated from diameter."
    )

    model_config = {"frozen": True, "allow_inf_nan": False}


class DrivetrainConfig(BaseModel):
    """
    Drivetrain and chassis parameters.

    `axle_gear_ratio` is required for the stress and regearing sections;
    without it those sections are omitted, not failed.
    """
    axle_gear_ratio: Optional[float] = Field(
        default=None,
        gt=0,
        description="Ring-and-pinion ratio, e.g. 3.909 or 4.10"
    )
    transfer_case_ratio: Optional[float] = Field(
        default=None,
        gt=0,
        description="Transfer case low-range ratio (defaults to options value)"
    )
    transmission_first_gear: Optional[float] = Field(
        default=None,
        gt=0,
        description="Transmission first gear ratio (defaults to options value)"
    )
    vehicle_weight: Optional[float] = Field(
        default=None,
        gt=0,
        description="Vehicle curb weight in lbs (defaults to 4500 reference)"
    )
    vehicle_type: Optional[str] = Field(
        default=None,
        description="Vehicle name, e.g. 'Toyota Tacoma'. Used for suspension lookup."
    )
    suspension_type: Optional[SuspensionType] = Field(
        default=None,
        description="Front suspension type. Overrides the vehicle lookup."
    )
    lift_height: float = Field(
        default=0.0,
        ge=0,
        description="Installed suspension lift in inches (0 for stock)"
    )

    model_config = {"frozen": True, "allow_inf_nan": False}


class ComparisonOptions(BaseModel):
    """
    Calculation options.

    Every field has a default, so an empty options object changes nothing.
    Unknown keys are ignored.
    """
    highway_speed_mph: float = Field(default=65.0, gt=0, description="Speed used for RPM comparison")
    speedometer_test_speeds: list[Annotated[float, Field(gt=0, allow_inf_nan=False)]] = Field(
        default_factory=lambda: [30.0, 45.0, 60.0, 75.0],
        description="Indicated speeds (mph) for the speedometer error table"
    )
    reference_vehicle_weight_lbs: float = Field(
        default=4500.0,
        gt=0,
        description="Vehicle weight assumed when none is given"
    )
    transmission_top_gear: float = Field(default=1.0, gt=0, description="Top gear ratio for RPM")
    transfer_case_low_ratio: float = Field(default=2.5, gt=0, description="Default low-range ratio")
    first_gear_ratio: float = Field(default=3.5, gt=0, description="Default first gear ratio")

    model_config = {"frozen": True, "extra": "ignore", "allow_inf_nan": False}


EXAMPLE_REQUEST = {
    "current_tire": {"size": "265/70R17"},
    "new_tire": {"size": "285/75R17"},
    "drivetrain": {
        "axle_gear_ratio": 3.909,
        "vehicle_weight": 4500,
        "vehicle_type": "Toyota Tacoma",
        "lift_height": 0,
    },
    "options": {},
    "usage_category": "weekend_trail",
}


class ComparisonRequest(BaseModel):
    """Complete request for a tire comparison (CLI files and HTTP body)."""
    current_tire: TireSpec = Field(..., description="Tire currently on the vehicle")
    new_tire: TireSpec = Field(..., description="Proposed tire")
    drivetrain: DrivetrainConfig = Field(
        default_factory=DrivetrainConfig,
        description="Drivetrain configuration"
    )
    options: ComparisonOptions = Field(
        default_factory=ComparisonOptions,
        description="Calculation options"
    )
    usage_category: UsageCategory = Field(
        default=UsageCategory.WEEKEND_TRAIL,
        description="Primary use of the vehicle"
    )

    model_config = {
        "json_schema_extra": {
            "example": EXAMPLE_REQUEST,
        }
    }


def example_request() -> ComparisonRequest:
    """A Tacoma going from stock 265/70R17 to 285/75R17 on 3.909 gears."""
    return ComparisonRequest.model_validate(EXAMPLE_REQUEST)
