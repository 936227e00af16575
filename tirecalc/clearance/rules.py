"""
Declarative rule tables for clearance assessment.

Rules are evaluated in table order. Adding a warning or a vehicle is a
table edit; the assessor itself does not change.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from tirecalc.models.inputs import SuspensionType
from tirecalc.models.outputs import ComponentWarning, RiskLevel


@dataclass(frozen=True)
class ClearanceParams:
    """
    Inputs to the clearance assessor.

    Attributes:
        suspension_type: Front suspension layout
        lift_height: Installed lift (in)
        diameter_increase: New minus current diameter (in)
        width_increase: New minus current section width (in)
        new_diameter: New tire diameter (in)
        new_width: New tire width (in), if known
    """
    suspension_type: SuspensionType
    lift_height: float
    diameter_increase: float
    width_increase: float
    new_diameter: float
    new_width: Optional[float] = None


@dataclass(frozen=True)
class ClearanceContext:
    """Params plus the computed probability, as seen by warning rules."""
    params: ClearanceParams
    probability: int
    risk_class: RiskLevel

    @property
    def is_ifs(self) -> bool:
        return self.params.suspension_type is SuspensionType.IFS


@dataclass(frozen=True)
class WarningRule:
    """
    One predicate -> warning rule.

    `risk` None means the warning inherits the overall risk class.
    Severity escalates when the probability exceeds `escalate_above`.
    """
    component: str
    description: str
    applies: Callable[[ClearanceContext], bool]
    severity: str
    risk: Optional[RiskLevel] = None
    escalate_above: Optional[int] = None
    escalated_severity: str = "critical"

    def build(self, ctx: ClearanceContext) -> ComponentWarning:
        severity = self.severity
        if self.escalate_above is not None and ctx.probability > self.escalate_above:
            severity = self.escalated_severity
        return ComponentWarning(
            component=self.component,
            risk=self.risk or ctx.risk_class,
            description=self.description,
            severity=severity,
        )


WARNING_RULES: tuple[WarningRule, ...] = (
    WarningRule(
        component="Upper Control Arms (UCAs)",
        description="Tire may contact the UCA at full compression. Aftermarket UCAs give more clearance.",
        applies=lambda c: c.is_ifs and c.params.diameter_increase >= 2.0,
        severity="moderate",
        escalate_above=70,
    ),
    WarningRule(
        component="Cab Mount Chop (CMC)",
        description="Cab mount trimming likely required to turn to full lock without rubbing.",
        applies=lambda c: c.is_ifs and c.params.diameter_increase > 1.0 and c.params.lift_height == 0,
        severity="moderate",
        risk=RiskLevel.MODERATE,
    ),
    WarningRule(
        component="Fender Liners",
        description="Fender liner trimming or removal may be necessary.",
        applies=lambda c: c.params.width_increase >= 1.5,
        severity="minor",
        risk=RiskLevel.MODERATE,
    ),
    WarningRule(
        component="Brake Lines",
        description="Extended brake lines may be required for adequate flex.",
        applies=lambda c: c.params.diameter_increase >= 3.0,
        severity="moderate",
        risk=RiskLevel.MODERATE,
    ),
    WarningRule(
        component="Fender Wells",
        description="Fender trimming or flat fenders may be required.",
        applies=lambda c: not c.is_ifs and c.probability > 50,
        severity="minor",
        escalate_above=70,
        escalated_severity="moderate",
    ),
    WarningRule(
        component="Bump Stops",
        description="Bump stop trimming or relocation may be needed.",
        applies=lambda c: not c.is_ifs and c.params.diameter_increase > 4.0,
        severity="minor",
        risk=RiskLevel.MODERATE,
    ),
    WarningRule(
        component="Mud Flaps",
        description="Mud flaps will likely need to be removed or relocated.",
        applies=lambda c: c.params.width_increase > 2.0,
        severity="minor",
        risk=RiskLevel.LOW,
    ),
    WarningRule(
        component="Speedometer/ABS",
        description="Speedometer recalibration required. ABS and traction control may behave differently.",
        applies=lambda c: c.params.diameter_increase > 5.0,
        severity="minor",
        risk=RiskLevel.LOW,
    ),
)


def evaluate_warning_rules(ctx: ClearanceContext, rules: tuple[WarningRule, ...] = WARNING_RULES) -> list[ComponentWarning]:
    """Warnings of every rule that applies, in table order."""
    return [rule.build(ctx) for rule in rules if rule.applies(ctx)]


# Ordered (name fragments, suspension) rules. First match wins, so more
# specific names come first ("broncosport" before "bronco").
VEHICLE_SUSPENSION_RULES: tuple[tuple[tuple[str, ...], SuspensionType], ...] = (
    (("broncosport",), SuspensionType.IFS),
    (
        ("wrangler", "gladiator", "bronco", "defender", "landcruiser70", "gwagon", "gclass"),
        SuspensionType.SOLID_AXLE,
    ),
    (
        (
            "tacoma", "4runner", "fjcruiser", "tundra", "sequoia", "frontier", "xterra",
            "ranger", "colorado", "canyon", "silverado", "sierra", "f150", "f250",
        ),
        SuspensionType.IFS,
    ),
)


def normalize_vehicle_name(name: str) -> str:
    """Lowercase and strip everything but letters and digits."""
    return re.sub(r"[^a-z0-9]", "", name.lower())


def match_vehicle_suspension(name: str) -> Optional[SuspensionType]:
    """Suspension type from the vehicle table, or None if unlisted."""
    normalized = normalize_vehicle_name(name)
    for fragments, suspension in VEHICLE_SUSPENSION_RULES:
        if any(fragment in normalized for fragment in fragments):
            return suspension
    return None
