"""
Ring-and-pinion ratio recommendations for a new tire.

Two ideal ratios are worked out for the new tire:
- restoration: brings the effective ratio back to the original
- optimal: puts highway RPM on the usage profile's target (and, for
  crawling, keeps the crawl ratio above the profile minimum)

The two standard ratios closest to each are scored against the usage
profile and returned best first.

ASSUMPTIONS:
- Profiles target engine RPM at 65 mph in the transmission's top gear
- Regear cost (gears + installation, both axles) is a flat range
"""

from dataclasses import dataclass
from typing import Optional

from tirecalc.models.inputs import ComparisonOptions, DrivetrainConfig, UsageCategory
from tirecalc.models.outputs import (
    GearRatioImpact,
    GearRatioOption,
    GearRecommendations,
    RegearNecessity,
    ResolvedTire,
)
from tirecalc.physics.drivetrain import (
    STANDARD_GEAR_RATIOS,
    calculate_crawl_ratio,
    calculate_effective_gear_ratio,
    calculate_engine_rpm,
    calculate_restoration_ratio,
    format_ratio,
)
from tirecalc.physics.units import wheel_rpm


PROFILE_TEST_SPEED_MPH = 65.0


@dataclass(frozen=True)
class UsageProfile:
    """Gearing goals for one kind of use."""
    name: str
    priority: str  # fuel_economy, balanced, torque, power_band or power
    target_rpm: int  # at PROFILE_TEST_SPEED_MPH
    description: str
    min_crawl_ratio: Optional[float] = None


USE_CASE_PROFILES: dict[UsageCategory, UsageProfile] = {
    UsageCategory.DAILY_DRIVER: UsageProfile(
        name="Daily Driver",
        priority="fuel_economy",
        target_rpm=2200,
        description="Prioritizes fuel economy and highway driving comfort",
    ),
    UsageCategory.WEEKEND_TRAIL: UsageProfile(
        name="Weekend Trail",
        priority="balanced",
        target_rpm=2400,
        description="Balanced for street driving with weekend off-road capability",
    ),
    UsageCategory.ROCK_CRAWLING: UsageProfile(
        name="Rock Crawling",
        priority="torque",
        target_rpm=2600,
        description="Maximum low-end torque and crawl control",
        min_crawl_ratio=50.0,
    ),
    UsageCategory.OVERLAND: UsageProfile(
        name="Overlanding / Expedition",
        priority="power_band",
        target_rpm=2300,
        description="Maintains power band for loaded vehicle, long highway miles",
    ),
    UsageCategory.SAND_DESERT: UsageProfile(
        name="Sand / Desert",
        priority="power",
        target_rpm=2500,
        description="Maintains power delivery for momentum-based terrain",
    ),
    UsageCategory.SNOW: UsageProfile(
        name="Snow",
        priority="balanced",
        target_rpm=2400,
        description="Balanced gearing for variable traction conditions",
    ),
}

CANDIDATES_PER_TARGET = 2
BASE_OPTION_SCORE = 50

# Crawl ratio bands for the torque priority
GOOD_CRAWL_RATIO = 50.0
POOR_CRAWL_RATIO = 40.0

REGEAR_COST_ESTIMATE = "$1,400-2,700 total ($800-1,500 gears, $600-1,200 installation)"

REGEAR_CONSIDERATIONS = [
    "Re-gearing requires professional installation and setup",
    "Both front and rear axles should be re-geared together for 4WD/AWD vehicles",
    "Locker installation can be done simultaneously to save labor costs",
    "Gear ratio change may require speedometer recalibration",
]


def closest_standard_ratios(target: float, count: int = CANDIDATES_PER_TARGET) -> list[float]:
    """Standard ratios nearest to target; ties keep the shallower ratio first."""
    return sorted(STANDARD_GEAR_RATIOS, key=lambda r: abs(r - target))[:count]


def assess_regear_necessity(diameter_change_pct: float, effective_ratio_change_pct: float) -> RegearNecessity:
    """Grade the need to regear by the size of the diameter change."""
    magnitude = abs(diameter_change_pct)
    if magnitude > 10:
        level = "strongly_recommended"
        reason = "Diameter change >10% will significantly impact performance and drivetrain stress"
    elif magnitude > 5:
        level = "recommended"
        reason = "Noticeable performance impact. Re-gearing will improve drivability"
    elif magnitude > 3:
        level = "consider"
        reason = "Minor performance impact. Re-gearing depends on use case and budget"
    else:
        level = "optional"
        reason = "Tire size change is minimal"

    return RegearNecessity(
        level=level,
        reason=reason,
        diameter_change_pct=diameter_change_pct,
        effective_ratio_change_pct=effective_ratio_change_pct,
    )


class GearRatioSelector:
    """
    Ranks standard axle ratios for a tire change and a usage profile.

    Candidates are the ratios nearest the restoration and the optimal
    ratio; each is scored on highway RPM against the profile target plus
    the profile's own priority.
    """

    def __init__(
        self,
        current: ResolvedTire,
        new: ResolvedTire,
        axle_ratio: float,
        drivetrain: DrivetrainConfig,
        usage: UsageCategory = UsageCategory.WEEKEND_TRAIL,
        options: Optional[ComparisonOptions] = None,
    ):
        """
        Initialize selector.

        Args:
            current: Tire on the vehicle now
            new: Proposed tire
            axle_ratio: Installed axle ratio
            drivetrain: Drivetrain configuration (transfer case and first gear)
            usage: Intended use of the vehicle
            options: Calculation options (defaults if None)
        """
        self.current = current
        self.new = new
        self.axle_ratio = axle_ratio
        self.drivetrain = drivetrain
        self.usage = usage
        self.options = options or ComparisonOptions()
        self.profile = USE_CASE_PROFILES[usage]

        self.restoration_ratio = calculate_restoration_ratio(axle_ratio, current.diameter, new.diameter)
        self.optimal_ratio = self._optimal_ratio()

    def _optimal_ratio(self) -> float:
        """Ratio that puts the new tire on the target RPM, deepened for crawl if needed."""
        rpm_per_unit_ratio = (
            wheel_rpm(PROFILE_TEST_SPEED_MPH, self.new.diameter) * self.options.transmission_top_gear
        )
        optimal = self.profile.target_rpm / rpm_per_unit_ratio

        if self.profile.min_crawl_ratio is not None:
            # Crawl ratio is linear in the axle ratio
            min_axle = self.profile.min_crawl_ratio / calculate_crawl_ratio(1.0, self.drivetrain, self.options)
            optimal = max(optimal, min_axle)

        return optimal

    def generate_options(self) -> list[GearRatioOption]:
        """
        Score every candidate ratio.

        Returns:
            GearRatioOption list sorted by score, deeper ratio first on ties
        """
        restoration = closest_standard_ratios(self.restoration_ratio)
        optimal = closest_standard_ratios(self.optimal_ratio)

        options = []
        for ratio in sorted(set(restoration) | set(optimal), reverse=True):
            kind = "restoration" if ratio in restoration else "optimal"
            options.append(self._build_option(ratio, kind))

        options.sort(key=lambda o: (o.score, o.ratio), reverse=True)
        return options

    def _impact(self, ratio: float) -> GearRatioImpact:
        rpm = int(round(calculate_engine_rpm(
            PROFILE_TEST_SPEED_MPH, self.new.diameter, ratio, self.options.transmission_top_gear
        )))
        effective = calculate_effective_gear_ratio(ratio, self.current.diameter, self.new.diameter)
        restoration_pct = (effective - self.axle_ratio) / self.axle_ratio * 100

        if restoration_pct > 2:
            acceleration = "improved"
        elif restoration_pct < -2:
            acceleration = "reduced"
        else:
            acceleration = "similar"

        if rpm < 2200:
            fuel_economy = "improved"
        elif rpm > 2500:
            fuel_economy = "reduced"
        else:
            fuel_economy = "similar"

        if rpm < 2400:
            comfort = "comfortable"
        elif rpm < 2700:
            comfort = "moderate"
        else:
            comfort = "high RPM"

        return GearRatioImpact(
            highway_rpm=rpm,
            crawl_ratio=round(calculate_crawl_ratio(ratio, self.drivetrain, self.options), 1),
            restoration_pct=restoration_pct,
            acceleration=acceleration,
            fuel_economy=fuel_economy,
            highway_comfort=comfort,
        )

    def _build_option(self, ratio: float, kind: str) -> GearRatioOption:
        impact = self._impact(ratio)
        score, pros, cons = self._score_option(impact)
        return GearRatioOption(
            ratio=ratio,
            label=format_ratio(ratio),
            kind=kind,
            impact=impact,
            score=score,
            pros=pros,
            cons=cons,
            verdict=self._verdict(score),
        )

    def _score_option(self, impact: GearRatioImpact) -> tuple[int, list[str], list[str]]:
        score = BASE_OPTION_SCORE
        pros: list[str] = []
        cons: list[str] = []

        rpm_off = abs(impact.highway_rpm - self.profile.target_rpm)
        if rpm_off < 100:
            score += 30
            pros.append("Ideal RPM for intended use")
        elif rpm_off < 200:
            score += 20
            pros.append("Good RPM range for intended use")
        elif rpm_off > 400:
            score -= 20
            cons.append("RPM significantly off target")

        priority = self.profile.priority
        if priority == "fuel_economy":
            if impact.fuel_economy == "improved":
                score += 20
                pros.append("Better fuel economy")
            elif impact.fuel_economy == "reduced":
                score -= 15
                cons.append("Reduced fuel economy")
        elif priority == "torque":
            if impact.crawl_ratio >= GOOD_CRAWL_RATIO:
                score += 25
                pros.append("Excellent crawl ratio for technical terrain")
            elif impact.crawl_ratio < POOR_CRAWL_RATIO:
                score -= 15
                cons.append("Crawl ratio may be insufficient for difficult rock crawling")
        elif priority == "power":
            if impact.acceleration == "improved":
                score += 20
                pros.append("Improved acceleration and power delivery")
            elif impact.acceleration == "reduced":
                score -= 15
                cons.append("Reduced acceleration")
        elif priority == "balanced":
            if abs(impact.restoration_pct) < 5:
                score += 20
                pros.append("Well-balanced performance restoration")

        if impact.highway_comfort == "comfortable":
            pros.append("Comfortable highway cruising RPM")
        elif impact.highway_comfort == "high RPM":
            cons.append("High RPM on highway - may be loud and hurt fuel economy")

        return score, pros, cons

    @staticmethod
    def _verdict(score: int) -> str:
        if score >= 80:
            return "Excellent choice for your use case"
        if score >= 65:
            return "Good option for your use case"
        if score >= 50:
            return "Acceptable but not ideal"
        return "Not recommended for your use case"

    def generate_result(self) -> GearRecommendations:
        """Ranked options with the ideal ratios and regear context."""
        diameter_pct = (self.new.diameter - self.current.diameter) / self.current.diameter * 100
        effective = calculate_effective_gear_ratio(self.axle_ratio, self.current.diameter, self.new.diameter)

        return GearRecommendations(
            usage_category=self.usage,
            profile=self.profile.name,
            priority=self.profile.priority,
            target_rpm=self.profile.target_rpm,
            test_speed_mph=PROFILE_TEST_SPEED_MPH,
            current_ratio=self.axle_ratio,
            restoration_ratio=self.restoration_ratio,
            optimal_ratio=self.optimal_ratio,
            necessity=assess_regear_necessity(
                diameter_pct, (effective - self.axle_ratio) / self.axle_ratio * 100
            ),
            options=self.generate_options(),
            cost_estimate=REGEAR_COST_ESTIMATE,
            considerations=list(REGEAR_CONSIDERATIONS),
        )


def recommend_gear_ratios(
    current: ResolvedTire,
    new: ResolvedTire,
    drivetrain: DrivetrainConfig,
    usage: UsageCategory = UsageCategory.WEEKEND_TRAIL,
    options: Optional[ComparisonOptions] = None,
) -> Optional[GearRecommendations]:
    """Ranked axle ratio choices. None when no axle ratio is configured."""
    if drivetrain.axle_gear_ratio is None:
        return None
    selector = GearRatioSelector(current, new, drivetrain.axle_gear_ratio, drivetrain, usage, options)
    return selector.generate_result()
