"""
Hourly dispatch transition for hydrogen storage.

Each simulated hour runs the same transition:

    generation        = profile[t] / base_stack_capacity * installed_capacity
    stock_pre_supply  = stock + generation
    supply            = tier rate, capped at stock_pre_supply
    stock_after       = stock_pre_supply - supply
    vent              = venting strategy(stock_after, generation, supply)
    stock_next        = stock_after - vent

Tier selection (strict comparisons, evaluated in order):
    - stock_pre_supply > stock_high_threshold  -> HIGH (supply_rate_high)
    - stock_pre_supply > supply_rate_low       -> LOW  (supply_rate_low)
    - otherwise                                -> ZERO (no supply)

An hour is a zero-supply hour when the selected tier rate is <= 0, before
the availability cap is applied.

Venting Strategies:
    Abstract base class VentingStrategy defines the interface.
    - CompoundVentingStrategy: vents the hour's unsupplied generation when
      storage is exceeded and generation beats the high supply rate.
    - CapacityExcessVentingStrategy: vents whatever stock exceeds capacity.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Tuple

from h2_sizing.config.dispatch_config import DispatchConfig
from h2_sizing.core.enums import DispatchTier, VentingRule
from h2_sizing.core.types import FlowRate, VolumeNM3


@dataclass(frozen=True)
class HourlyDispatch:
    """
    Result of one hourly transition.

    Attributes:
        generation (float): Scaled generation this hour (NM3).
        stock_pre_supply (float): Stock after adding generation (NM3).
        tier (DispatchTier): Supply tier selected.
        supply (float): Volume dispatched to the client (NM3).
        vent (float): Volume vented (NM3).
        stock (float): Stock carried into the next hour (NM3).
        zero_supply (bool): Whether the hour counts as a zero-supply hour.
    """
    generation: VolumeNM3
    stock_pre_supply: VolumeNM3
    tier: DispatchTier
    supply: VolumeNM3
    vent: VolumeNM3
    stock: VolumeNM3
    zero_supply: bool


class VentingStrategy(ABC):
    """Abstract base class for venting decisions."""

    @abstractmethod
    def vent(self, stock_after_supply: float, generation: float, supply: float,
             config: DispatchConfig) -> float:
        """
        Volume to vent this hour.

        Args:
            stock_after_supply (float): Stock left after client supply (NM3).
            generation (float): This hour's generation (NM3).
            supply (float): This hour's supply after the availability cap (NM3).
            config (DispatchConfig): Run configuration.

        Returns:
            float: Vented volume (NM3).
        """
        pass


class CompoundVentingStrategy(VentingStrategy):
    """
    Vent unsupplied generation when storage is full during a strong hour.

    Fires only if stock_after_supply > storage_capacity AND
    generation > supply_rate_high; then vent = generation - supply.
    Stock already held above capacity is not released.
    """

    def vent(self, stock_after_supply: float, generation: float, supply: float,
             config: DispatchConfig) -> float:
        if stock_after_supply > config.storage_capacity and generation > config.supply_rate_high:
            return generation - supply
        return 0.0


class CapacityExcessVentingStrategy(VentingStrategy):
    """Vent exactly the stock held above storage capacity."""

    def vent(self, stock_after_supply: float, generation: float, supply: float,
             config: DispatchConfig) -> float:
        if stock_after_supply > config.storage_capacity:
            return stock_after_supply - config.storage_capacity
        return 0.0


VENTING_STRATEGIES: Dict[VentingRule, VentingStrategy] = {
    VentingRule.COMPOUND: CompoundVentingStrategy(),
    VentingRule.CAPACITY_EXCESS: CapacityExcessVentingStrategy(),
}


def select_tier(stock_pre_supply: VolumeNM3, config: DispatchConfig) -> Tuple[DispatchTier, FlowRate]:
    """Pick the supply tier and its nominal rate for the available stock."""
    if stock_pre_supply > config.stock_high_threshold:
        return DispatchTier.HIGH, config.supply_rate_high
    if stock_pre_supply > config.supply_rate_low:
        return DispatchTier.LOW, config.supply_rate_low
    return DispatchTier.ZERO, 0.0


def dispatch_hour(stock: VolumeNM3, profile_value: float, config: DispatchConfig,
                  strategy: VentingStrategy = None) -> HourlyDispatch:
    """
    Advance storage by one hour.

    Args:
        stock (float): Stock at the start of the hour (NM3).
        profile_value (float): Normalized profile value for the hour.
        config (DispatchConfig): Run configuration.
        strategy (VentingStrategy, optional): Overrides the strategy named
            by ``config.venting_rule``.

    Returns:
        HourlyDispatch: Flows and resulting stock for the hour.
    """
    if strategy is None:
        strategy = VENTING_STRATEGIES[config.venting_rule]

    generation = profile_value / config.base_stack_capacity * config.installed_capacity
    stock_pre_supply = stock + generation

    tier, supply = select_tier(stock_pre_supply, config)
    zero_supply = supply <= 0.0
    supply = min(supply, stock_pre_supply)

    stock_after_supply = stock_pre_supply - supply
    vent = strategy.vent(stock_after_supply, generation, supply, config)

    return HourlyDispatch(
        generation=generation,
        stock_pre_supply=stock_pre_supply,
        tier=tier,
        supply=supply,
        vent=vent,
        stock=stock_after_supply - vent,
        zero_supply=zero_supply,
    )
