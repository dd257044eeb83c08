import pytest

from h2_sizing.config.dispatch_config import DispatchConfig
from h2_sizing.core.enums import DispatchTier, VentingRule
from h2_sizing.simulation.dispatch import (
    CapacityExcessVentingStrategy,
    CompoundVentingStrategy,
    dispatch_hour,
    select_tier,
)


@pytest.fixture
def unit_config():
    """Profile values map 1:1 to NM3 of generation."""
    return DispatchConfig(
        installed_capacity=1.0,
        base_stack_capacity=1.0,
        stock_high_threshold=100.0,
        supply_rate_high=80.0,
        supply_rate_low=50.0,
        storage_capacity=1000.0,
    )


def test_generation_scaled_to_installed_capacity(flat_config):
    config = flat_config.with_overrides(installed_capacity=700.0)
    step = dispatch_hour(0.0, 350.0, config)
    assert step.generation == 700.0


def test_flat_profile_first_hour(flat_config):
    """350 NM3 arrives, 350 > 100 selects the low tier."""
    step = dispatch_hour(0.0, 350.0, flat_config)

    assert step.stock_pre_supply == 350.0
    assert step.tier == DispatchTier.LOW
    assert step.supply == 100.0
    assert step.vent == 0.0
    assert step.stock == 250.0
    assert not step.zero_supply


def test_flat_profile_crosses_high_threshold(flat_config):
    step = dispatch_hour(1750.0, 350.0, flat_config)

    assert step.stock_pre_supply == 2100.0
    assert step.tier == DispatchTier.HIGH
    assert step.supply == 500.0
    assert step.stock == 1600.0


def test_tier_thresholds_are_strict(unit_config):
    # Exactly at the high threshold: low tier
    assert select_tier(100.0, unit_config) == (DispatchTier.LOW, 50.0)
    # Exactly at the low rate: no supply
    assert select_tier(50.0, unit_config) == (DispatchTier.ZERO, 0.0)
    assert select_tier(100.0001, unit_config) == (DispatchTier.HIGH, 80.0)


def test_zero_tier_counts_as_zero_supply(unit_config):
    step = dispatch_hour(0.0, 50.0, unit_config)

    assert step.tier == DispatchTier.ZERO
    assert step.supply == 0.0
    assert step.zero_supply
    assert step.stock == 50.0


def test_zero_rate_tier_counts_as_zero_supply(unit_config):
    config = unit_config.with_overrides(supply_rate_low=0.0)
    step = dispatch_hour(0.0, 10.0, config)

    assert step.tier == DispatchTier.LOW
    assert step.supply == 0.0
    assert step.zero_supply


def test_supply_capped_at_available_stock(unit_config):
    config = unit_config.with_overrides(stock_high_threshold=0.0, supply_rate_high=500.0)
    step = dispatch_hour(0.0, 100.0, config)

    assert step.tier == DispatchTier.HIGH
    assert step.supply == 100.0
    assert step.stock == 0.0
    # Capped supply is still a supplying hour
    assert not step.zero_supply


def test_compound_venting_fires_when_storage_full_and_generation_high(venting_config):
    """Storage exceeded and generation above the high rate: vent = generation - supply."""
    step = dispatch_hour(100.0, 1000.0, venting_config)

    assert step.generation == 1000.0
    assert step.tier == DispatchTier.HIGH
    assert step.supply == 300.0
    assert step.vent == pytest.approx(700.0)
    assert step.stock == pytest.approx(100.0)
    assert step.stock <= step.stock_pre_supply - step.supply


def test_compound_venting_ignores_overflow_with_low_generation(unit_config):
    """Stock above capacity is kept when generation does not beat the high rate."""
    config = unit_config.with_overrides(stock_high_threshold=1e6, supply_rate_low=10.0,
                                        supply_rate_high=300.0, storage_capacity=60.0)
    step = dispatch_hour(0.0, 100.0, config)

    assert step.vent == 0.0
    assert step.stock == 90.0
    assert step.stock > config.storage_capacity


def test_capacity_excess_venting_releases_overflow(venting_config):
    config = venting_config.with_overrides(venting_rule=VentingRule.CAPACITY_EXCESS)
    step = dispatch_hour(100.0, 1000.0, config)

    assert step.vent == pytest.approx(650.0)
    assert step.stock == pytest.approx(config.storage_capacity)


def test_capacity_excess_venting_with_low_generation(unit_config):
    config = unit_config.with_overrides(stock_high_threshold=1e6, supply_rate_low=10.0,
                                        supply_rate_high=300.0, storage_capacity=60.0,
                                        venting_rule=VentingRule.CAPACITY_EXCESS)
    step = dispatch_hour(0.0, 100.0, config)

    assert step.vent == pytest.approx(30.0)
    assert step.stock == pytest.approx(60.0)


def test_explicit_strategy_overrides_config(venting_config):
    step = dispatch_hour(100.0, 1000.0, venting_config, CapacityExcessVentingStrategy())
    assert step.vent == pytest.approx(650.0)


def test_venting_strategies_do_nothing_below_capacity(venting_config):
    for strategy in (CompoundVentingStrategy(), CapacityExcessVentingStrategy()):
        assert strategy.vent(150.0, 1000.0, 300.0, venting_config) == 0.0
