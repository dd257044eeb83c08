"""
Sizing evaluation: turns run aggregates into cylinder and capital figures.

    zero_supply_days    = ceil(zero_supply_hours / 24)
    number_of_cylinders = ceil(peak_stock / cylinder_capacity)
    capital_cost        = number_of_cylinders * cylinder_cost_per_unit
"""

import math
import logging
from typing import TYPE_CHECKING

from h2_sizing.config.dispatch_config import DispatchConfig
from h2_sizing.core.constants import HOURS_PER_DAY
from h2_sizing.core.types import Cost, Hours
from h2_sizing.economics.models import SizingResult

if TYPE_CHECKING:
    from h2_sizing.simulation.state import StateSnapshot

logger = logging.getLogger(__name__)

# Ratios within this many ULPs of an integer count as exact multiples of the cylinder size
_CYLINDER_RATIO_ULPS = 4


def zero_supply_days(zero_supply_hours: Hours) -> int:
    """Days touched by zero-supply hours, rounding partial days up."""
    return -(-int(zero_supply_hours) // HOURS_PER_DAY)


def number_of_cylinders(peak_stock: float, cylinder_capacity: float) -> int:
    """
    Cylinders required to hold the peak stock.

    A peak stock of exactly k cylinder volumes needs k cylinders, also when
    floating-point division lands a hair above k.
    """
    ratio = peak_stock / cylinder_capacity
    nearest = round(ratio)
    if abs(ratio - nearest) <= _CYLINDER_RATIO_ULPS * math.ulp(ratio):
        return int(nearest)
    return math.ceil(ratio)


def capital_cost(cylinders: int, cylinder_cost_per_unit: Cost) -> Cost:
    return cylinders * cylinder_cost_per_unit


class SizingEvaluator:
    """
    Pure post-processing of simulation aggregates.

    The config must have passed ConfigValidator (cylinder_capacity > 0).

    Example:
        >>> evaluator = SizingEvaluator(config)
        >>> result = evaluator.evaluate(outcome.totals)
        >>> result.number_of_cylinders
    """

    def __init__(self, config: DispatchConfig):
        self.config = config

    def evaluate(self, totals: 'StateSnapshot') -> SizingResult:
        cylinders = number_of_cylinders(totals.peak_stock, self.config.cylinder_capacity)
        result = SizingResult(
            total_hydrogen_generated=totals.generated,
            total_hydrogen_supplied=totals.supplied,
            total_hydrogen_vented=totals.vented,
            peak_stock=totals.peak_stock,
            zero_supply_hours=totals.zero_supply_hours,
            zero_supply_days=zero_supply_days(totals.zero_supply_hours),
            number_of_cylinders=cylinders,
            capital_cost=capital_cost(cylinders, self.config.cylinder_cost_per_unit),
        )
        logger.debug(f"Sizing: peak {totals.peak_stock:.1f} NM3 -> {cylinders} cylinders")
        return result
