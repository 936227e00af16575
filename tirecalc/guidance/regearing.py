"""
Real-world regearing guidance.

Translates a drivetrain stress score into what owners actually do at that
level. The stress score says how hard the drivetrain works; this module
says how many people pay to fix it. Same math, calmer tone.

Tiers by stress score:
    minimal   < 20
    small     20-45
    moderate  46-60
    large     61-80
    extreme   > 80
"""

from typing import Optional

from tirecalc.models.inputs import UsageCategory
from tirecalc.models.outputs import DrivetrainStressResult, RegearingGuidance


# (upper bound inclusive, tier)
TIER_BOUNDS: list[tuple[int, str]] = [
    (19, "minimal"),
    (45, "small"),
    (60, "moderate"),
    (80, "large"),
    (100, "extreme"),
]

NO_REGEAR_RECOMMENDATION = "No regearing needed"

TIER_GUIDANCE = {
    "minimal": {
        "likelihood": 5,
        "consensus": "Almost nobody regears for a change this small",
        "reality_check": "This tire size change is negligible. Stock gears are perfectly fine.",
        "recommendation": NO_REGEAR_RECOMMENDATION,
        "why_regear": [
            "Already planning to go much bigger later",
            "Want the exact factory feel restored",
        ],
        "why_not_regear": [
            "Tire change is too small to matter",
            "Performance impact is imperceptible",
            "Not worth the $2,000-3,000 cost",
        ],
        "cost_context": "$2,000-3,000 for parts + labor",
        "transmission_note": "Automatic and manual transmissions both handle this fine.",
    },
    "small": {
        "likelihood": 20,
        "consensus": "Most people DON'T regear at this level",
        "reality_check": (
            "About 80% of owners run this kind of upgrade on stock gears indefinitely. "
            "They accept slightly slower acceleration as the trade-off."
        ),
        "recommendation": "Optional. Most people run this setup on stock gears for years with no issues.",
        "why_regear": [
            "Planning to go larger later",
            "Daily driving with an automatic feels too sluggish",
            "Frequent towing or mountain driving",
            "Heavy off-road use or rock crawling",
            "4-cylinder engine with little torque to spare",
        ],
        "why_not_regear": [
            "Cost: $2,000-3,000+ for regearing",
            "V6/V8 engine has sufficient torque",
            "Weekend trail use only",
            "Can live with a 1-2 MPG loss and slightly slower acceleration",
            "Already running 4.10 or deeper gears",
        ],
        "cost_context": "$2,000-3,000 for parts + labor. This is the #1 reason people skip regearing.",
        "transmission_note": "Automatics feel the impact more. Manuals handle stock gears better.",
    },
    "moderate": {
        "likelihood": 40,
        "consensus": "About half of owners regear at this level",
        "reality_check": "About 40% regear. Many weekend wheelers run this setup on stock gears without issues.",
        "recommendation": "About a 50/50 split. Depends on your tolerance for reduced performance.",
        "why_regear": [
            "Daily driving with an automatic (transmission hunting, sluggish)",
            "Automatic transmission heat in mountains or traffic",
            "Power loss noticeably affects driveability",
            "Transmission won't hold top gear on the highway",
            "Want factory-like performance back",
        ],
        "why_not_regear": [
            "Weekend use only, reduced power is tolerable",
            "Cost: $2,500-3,500 is a major investment",
            "Manual transmission, driver picks the gear",
            "Rock crawling, where lower effective gearing is welcome",
            "Already running deep gears (4.56+)",
        ],
        "cost_context": "$2,500-3,500. Weigh this against the quality-of-life improvement.",
        "transmission_note": (
            "Automatics often need regearing at this level. Manuals tolerate it better. "
            "Monitor transmission temps if staying stock."
        ),
    },
    "large": {
        "likelihood": 80,
        "consensus": "Most people regear at this level",
        "reality_check": (
            "About 80% of owners regear. The rest often see transmission issues "
            "or add auxiliary coolers."
        ),
        "recommendation": "Strongly recommended. Transmission problems are common without regearing at this level.",
        "why_regear": [
            "Severe performance loss without regearing",
            "Automatic transmission overheating (common)",
            "Transmission stays in low gears or refuses to upshift",
            "Fuel economy drops sharply",
            "Engine lugging and excessive wear",
            "Close to mandatory for daily driving",
        ],
        "why_not_regear": [
            "Pure trail rig with very limited street use",
            "Auxiliary transmission cooler already installed",
            "Manual transmission and patience for slow acceleration",
            "Temporary setup before going even bigger",
        ],
        "cost_context": "$2,500-4,000. Expensive but close to necessary at this level.",
        "transmission_note": (
            "Automatic transmissions will overheat and hunt. Manual transmissions barely "
            "tolerate this; expect very sluggish performance."
        ),
    },
    "extreme": {
        "likelihood": 95,
        "consensus": "Nearly everyone regears at this level",
        "reality_check": (
            "This is extreme. Virtually everyone regears immediately. Those who don't "
            "have dedicated trail rigs with minimal street use."
        ),
        "recommendation": "Essential. Do not drive on the street without regearing.",
        "why_regear": [
            "Transmission failure likely without regearing",
            "Severe drivetrain stress and component wear",
            "Engine cannot move the vehicle efficiently",
            "Highway driving becomes a struggle",
            "Not enough power to merge or climb safely",
        ],
        "why_not_regear": [
            "Trailered rig with no street driving",
            "Competition rock crawler only",
        ],
        "cost_context": "$3,000-5,000+, but necessary for any street use",
        "transmission_note": (
            "Automatic transmissions WILL overheat and fail. Manual transmissions will be "
            "dangerously underpowered."
        ),
    },
}

# (tier, usage) -> field overrides
USAGE_OVERRIDES = {
    ("small", UsageCategory.DAILY_DRIVER): {
        "likelihood": 30,
        "reality_check": (
            "About 70% of daily drivers run this kind of upgrade on stock gears indefinitely. "
            "They accept slightly slower acceleration as the trade-off."
        ),
        "recommendation": "Optional. Most skip it, but daily drivers benefit most if they do regear.",
    },
    ("moderate", UsageCategory.DAILY_DRIVER): {
        "likelihood": 60,
        "reality_check": "About 60% of daily drivers regear due to sluggish performance and transmission hunting.",
        "recommendation": "Recommended for daily drivers. Most regear to avoid transmission hunting and power loss.",
    },
    ("moderate", UsageCategory.ROCK_CRAWLING): {
        "recommendation": "Optional. Many rock crawlers prefer the lower effective gearing and don't regear.",
    },
}


def guidance_tier(score: int) -> str:
    """Tier name for a stress score."""
    for upper, tier in TIER_BOUNDS:
        if score <= upper:
            return tier
    return TIER_BOUNDS[-1][1]


def synthesize_regearing_guidance(
    stress: Optional[DrivetrainStressResult],
    usage: UsageCategory = UsageCategory.WEEKEND_TRAIL,
) -> Optional[RegearingGuidance]:
    """
    Owner-practice guidance for a stress result.

    Args:
        stress: Drivetrain stress result (None when no axle ratio was given)
        usage: Intended use of the vehicle

    Returns:
        RegearingGuidance, or None when stress is None
    """
    if stress is None:
        return None

    tier = guidance_tier(stress.score)
    fields = dict(TIER_GUIDANCE[tier])
    fields.update(USAGE_OVERRIDES.get((tier, usage), {}))

    return RegearingGuidance(
        tier=tier,
        consensus=fields["consensus"],
        likelihood=fields["likelihood"],
        reality_check=fields["reality_check"],
        recommendation=fields["recommendation"],
        why_regear=list(fields["why_regear"]),
        why_not_regear=list(fields["why_not_regear"]),
        cost_context=fields["cost_context"],
        transmission_note=fields["transmission_note"],
    )
