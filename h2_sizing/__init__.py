"""
Hydrogen Storage Sizing - Main Package

Sizes hydrogen storage for a production facility by simulating, hour by
hour, how generated gas accumulates in storage, is dispatched to a client
under tiered supply rules, and is vented when storage saturates:
- Hourly profile loading and CSV round-tripping
- Dispatch configuration validation
- Deterministic hourly dispatch simulation
- Cylinder count and capital cost evaluation
- Memoized evaluation and parallel parameter sweeps
"""

__version__ = "1.0.0"
__author__ = "Hydrogen Production Team"

from h2_sizing.core import *
from h2_sizing.config import *
from h2_sizing.data import *
from h2_sizing.economics import *
from h2_sizing.simulation import *
from h2_sizing.simulation.runner import (
    SizingOutcome,
    evaluate,
    evaluate_text,
    build_sweep,
    run_parameter_sweep,
    run_sizing_from_config,
)

__all__ = [
    # Errors
    'H2SizingError',
    'ProfileError',
    'InvalidProfile',
    'DataUnavailable',
    'ConfigurationError',
    'InvalidConfig',
    'SimulationError',
    'ExportError',

    # Enums
    'DispatchTier',
    'VentingRule',

    # Configuration
    'DispatchConfig',
    'ConfigValidator',
    'ValidationResult',
    'ConfigLoader',
    'SizingScenario',
    'load_scenario',

    # Profiles
    'HourlyProfile',
    'ProfileLoader',
    'ProfileParseReport',
    'SkippedToken',

    # Simulation
    'DispatchSimulator',
    'SimulationOutcome',
    'Trajectory',
    'SimulationCache',
    'simulate',

    # Evaluation
    'SizingResult',
    'SizingEvaluator',

    # Runner
    'SizingOutcome',
    'evaluate',
    'evaluate_text',
    'build_sweep',
    'run_parameter_sweep',
    'run_sizing_from_config',
]
