"""
Pytest configuration and shared fixtures.
"""

import pytest

from tirecalc.models.inputs import DrivetrainConfig, SuspensionType, TireSpec
from tirecalc.models.outputs import ResolvedTire
from tirecalc.physics.geometry import resolve_tire


@pytest.fixture
def tacoma_current() -> ResolvedTire:
    """Stock Tacoma tire, 265/70R17 (31.6" measured)."""
    return resolve_tire(TireSpec(size="265/70R17"))


@pytest.fixture
def tacoma_new() -> ResolvedTire:
    """Common 33" upgrade, 285/75R17 (32.8" measured)."""
    return resolve_tire(TireSpec(size="285/75R17"))


@pytest.fixture
def tacoma_drivetrain() -> DrivetrainConfig:
    """Tacoma with 3.909 gears at the reference weight."""
    return DrivetrainConfig(
        axle_gear_ratio=3.909,
        vehicle_weight=4500,
        vehicle_type="Toyota Tacoma",
    )


@pytest.fixture
def jeep_current() -> ResolvedTire:
    """Wrangler tire, 285/70R17 (32.7" measured)."""
    return resolve_tire(TireSpec(size="285/70R17"))


@pytest.fixture
def jeep_new() -> ResolvedTire:
    """35x12.50R17 flotation tire."""
    return resolve_tire(TireSpec(size="35x12.50R17"))


@pytest.fixture
def jeep_drivetrain() -> DrivetrainConfig:
    """Wrangler with 4.10 gears and a solid front axle."""
    return DrivetrainConfig(
        axle_gear_ratio=4.10,
        suspension_type=SuspensionType.SOLID_AXLE,
    )


@pytest.fixture
def tacoma_request() -> dict:
    """Tacoma comparison request as plain JSON data."""
    return {
        "current_tire": {"size": "265/70R17"},
        "new_tire": {"size": "285/75R17"},
        "drivetrain": {
            "axle_gear_ratio": 3.909,
            "vehicle_weight": 4500,
            "vehicle_type": "Toyota Tacoma",
        },
        "options": {},
        "usage_category": "weekend_trail",
    }
