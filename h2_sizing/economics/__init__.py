"""
H2 Sizing Economics Package

Cylinder count and capital cost derived from a simulated storage trajectory.
"""

from h2_sizing.economics.models import SizingResult
from h2_sizing.economics.sizing import (
    SizingEvaluator,
    zero_supply_days,
    number_of_cylinders,
    capital_cost,
)

__all__ = [
    "SizingResult",
    "SizingEvaluator",
    "zero_supply_days",
    "number_of_cylinders",
    "capital_cost",
]
