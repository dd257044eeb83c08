from h2_sizing.config.dispatch_config import DispatchConfig
from h2_sizing.config.validator import ConfigValidator, ValidationResult
from h2_sizing.config.loaders import ConfigLoader, SizingScenario, load_scenario

__all__ = [
    'DispatchConfig',
    'ConfigValidator',
    'ValidationResult',
    'ConfigLoader',
    'SizingScenario',
    'load_scenario',
]
