"""
Integer-based enumerations for the dispatch simulation.

IntEnum keeps tier codes storable in NumPy trajectory arrays
(dtype=np.int8) without a lookup table.
"""

from enum import Enum, IntEnum


class DispatchTier(IntEnum):
    """
    Supply bracket selected for one simulated hour.

    Examples:
        tiers = trajectory.tier
        high_hours = int(np.count_nonzero(tiers == DispatchTier.HIGH))
    """
    ZERO = 0   # Pre-supply stock at or below the low supply rate
    LOW = 1    # Pre-supply stock above the low supply rate
    HIGH = 2   # Pre-supply stock above the high stock threshold


class VentingRule(str, Enum):
    """
    How gas is released once storage is saturated.

    COMPOUND vents the hour's unsupplied generation, but only when the stock
    after supply exceeds storage capacity AND the hour's generation exceeds
    the high supply rate.

    CAPACITY_EXCESS vents exactly the stock held above storage capacity,
    regardless of the hour's generation.
    """
    COMPOUND = "compound"
    CAPACITY_EXCESS = "capacity_excess"
