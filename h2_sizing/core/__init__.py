from h2_sizing.core.exceptions import (
    H2SizingError,
    ProfileError,
    InvalidProfile,
    DataUnavailable,
    ConfigurationError,
    InvalidConfig,
    SimulationError,
    ExportError,
)
from h2_sizing.core.enums import DispatchTier, VentingRule

__all__ = [
    'H2SizingError',
    'ProfileError',
    'InvalidProfile',
    'DataUnavailable',
    'ConfigurationError',
    'InvalidConfig',
    'SimulationError',
    'ExportError',
    'DispatchTier',
    'VentingRule',
]
