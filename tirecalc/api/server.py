"""
FastAPI server for the tire upgrade calculator.

Provides REST API endpoints over the comparison engine.
WARNING: Estimates only. Always test fit before buying.
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from tirecalc import __version__
from tirecalc.clearance.assessor import get_vehicle_suspension_type
from tirecalc.engine.comparison import compare_request
from tirecalc.guidance.gear_selection import USE_CASE_PROFILES
from tirecalc.models.inputs import ComparisonRequest, UsageCategory, example_request
from tirecalc.models.outputs import ComparisonResult
from tirecalc.physics.drivetrain import STANDARD_GEAR_RATIOS, format_ratio
from tirecalc.scoring.stress import USAGE_BIAS


app = FastAPI(
    title="Tire Upgrade Calculator API",
    description="""
    Compare a current and a proposed tire size: effective gearing, rotational
    physics, drivetrain stress, clearance risk and regearing guidance.

    **WARNING**: Estimates only. Measure and test fit before buying.
    """,
    version=__version__,
)

# Enable CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


class SuspensionLookupResponse(BaseModel):
    """Vehicle suspension lookup response."""
    vehicle: str
    suspension_type: str
    label: str


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check if the API is running."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/example", response_model=ComparisonRequest, tags=["Reference"])
async def get_example():
    """Get an example comparison request."""
    return example_request()


@app.post("/compare", response_model=ComparisonResult, tags=["Comparison"])
async def compare(request: ComparisonRequest):
    """
    Compare two tires.

    Sections whose inputs are missing come back as null (for example no
    axle_gear_ratio means no drivetrain_stress and no regearing_guidance).
    """
    try:
        return compare_request(request)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")


@app.get("/usage-categories", tags=["Reference"])
async def list_usage_categories():
    """Get the supported usage categories, their stress bias and gearing targets."""
    return {
        "usage_categories": [u.value for u in UsageCategory],
        "display_names": {u.value: u.display_name for u in UsageCategory},
        "stress_multipliers": {u.value: USAGE_BIAS[u] for u in UsageCategory},
        "target_rpm_at_65": {u.value: USE_CASE_PROFILES[u].target_rpm for u in UsageCategory},
    }


@app.get("/gear-ratios", tags=["Reference"])
async def list_gear_ratios():
    """Get the commercially available ring-and-pinion ratios."""
    return {
        "gear_ratios": STANDARD_GEAR_RATIOS,
        "labels": [format_ratio(r) for r in STANDARD_GEAR_RATIOS],
    }


@app.get("/vehicles/{name}/suspension", response_model=SuspensionLookupResponse, tags=["Reference"])
async def vehicle_suspension(name: str):
    """Look up front suspension type. Unknown vehicles are reported as IFS."""
    suspension = get_vehicle_suspension_type(name)
    return SuspensionLookupResponse(
        vehicle=name,
        suspension_type=suspension.value,
        label=suspension.label,
    )
