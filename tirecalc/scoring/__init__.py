"""
Drivetrain stress scoring for tire changes.

Weighs diameter, rotating mass, effective gearing and vehicle weight into
a single 0-100 score.
"""

from tirecalc.scoring.stress import DrivetrainStressScorer, calculate_drivetrain_stress, classify_stress

__all__ = ["DrivetrainStressScorer", "calculate_drivetrain_stress", "classify_stress"]
