"""
Comparison engine.

Runs every calculation over a current/new tire pair and assembles a
ComparisonResult.
"""

from tirecalc.engine.comparison import TireComparator, calculate_tire_comparison, compare_request

__all__ = ["TireComparator", "calculate_tire_comparison", "compare_request"]
