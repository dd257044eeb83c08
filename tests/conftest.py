"""
Pytest configuration and fixtures for h2_sizing testing.

This file sets up common fixtures, test configuration, and hooks for pytest.
"""

import pytest
import numpy as np
from pathlib import Path


def pytest_configure(config):
    """Configure pytest settings."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture(scope="session")
def repo_root() -> Path:
    return Path(__file__).parent.parent


@pytest.fixture
def flat_profile():
    """Ten hours at the reference stack size (350 NM3/h each)."""
    from h2_sizing.data.profile import HourlyProfile
    return HourlyProfile([350.0] * 10)


@pytest.fixture
def flat_config():
    """Configuration paired with flat_profile: no venting, tiers switch at 2000 NM3."""
    from h2_sizing.config.dispatch_config import DispatchConfig
    return DispatchConfig(
        installed_capacity=350.0,
        base_stack_capacity=350.0,
        stock_high_threshold=2000.0,
        supply_rate_high=500.0,
        supply_rate_low=100.0,
        storage_capacity=100000.0,
        cylinder_capacity=26.0,
        cylinder_cost_per_unit=32500.0,
    )


@pytest.fixture
def venting_config():
    """Small store that saturates during a 1000 NM3 generation spike."""
    from h2_sizing.config.dispatch_config import DispatchConfig
    return DispatchConfig(
        installed_capacity=100.0,
        base_stack_capacity=100.0,
        stock_high_threshold=1000.0,
        supply_rate_high=300.0,
        supply_rate_low=50.0,
        storage_capacity=150.0,
        cylinder_capacity=10.0,
        cylinder_cost_per_unit=1000.0,
    )


@pytest.fixture
def spike_profile():
    from h2_sizing.data.profile import HourlyProfile
    return HourlyProfile([100.0, 100.0, 1000.0])


@pytest.fixture
def rng():
    return np.random.default_rng(42)
