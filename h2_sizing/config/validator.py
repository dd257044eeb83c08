"""
ConfigValidator: Validates a dispatch configuration before simulation.
"""

import logging
import math
import numbers
from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

from h2_sizing.core.exceptions import InvalidConfig

if TYPE_CHECKING:
    from h2_sizing.config.dispatch_config import DispatchConfig

logger = logging.getLogger(__name__)

# Checked in this order; the first violation wins.
_STRICTLY_POSITIVE = (
    'installed_capacity',
    'base_stack_capacity',
    'storage_capacity',
    'cylinder_capacity',
)
_NON_NEGATIVE = (
    'cylinder_cost_per_unit',
    'supply_rate_high',
    'supply_rate_low',
    'stock_high_threshold',
    'initial_stock',
)


@dataclass
class ValidationResult:
    """
    Outcome of a non-raising validation.

    Attributes:
        error (InvalidConfig, optional): First violation found, if any.
        warnings (List[str]): Legal but degenerate settings worth surfacing.
    """
    error: Optional[InvalidConfig] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


class ConfigValidator:
    """
    Validates a DispatchConfig for internal consistency.

    Example:
        >>> ConfigValidator(config).validate()          # raises InvalidConfig
        >>> result = ConfigValidator(config).check()    # never raises
        >>> if not result.ok:
        ...     print(result.error.field, result.error.reason)
    """

    def __init__(self, config: 'DispatchConfig'):
        self.config = config

    def validate(self) -> List[str]:
        """
        Validate the configuration, failing fast on the first violation.

        Checks:
        1. Every numeric field is a finite number.
        2. Capacities (installed, base stack, storage, cylinder) are > 0.
        3. Cylinder cost, supply rates, high threshold and initial stock are >= 0.

        Returns:
            List[str]: Warnings for degenerate but accepted settings.

        Raises:
            InvalidConfig: On the first field that violates a check.
        """
        self._validate_finite()
        for name in _STRICTLY_POSITIVE:
            if getattr(self.config, name) <= 0:
                raise InvalidConfig(name, f"must be > 0, got {getattr(self.config, name)}")
        for name in _NON_NEGATIVE:
            if getattr(self.config, name) < 0:
                raise InvalidConfig(name, f"must be >= 0, got {getattr(self.config, name)}")

        warnings = self._collect_warnings()
        for message in warnings:
            logger.warning(message)
        return warnings

    def check(self) -> ValidationResult:
        """Validate without raising; the violation is returned instead."""
        try:
            warnings = self.validate()
        except InvalidConfig as e:
            return ValidationResult(error=e)
        return ValidationResult(warnings=warnings)

    def _validate_finite(self) -> None:
        for name in _STRICTLY_POSITIVE + _NON_NEGATIVE:
            value = getattr(self.config, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidConfig(name, f"must be a number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidConfig(name, f"must be finite, got {value}")

    def _collect_warnings(self) -> List[str]:
        warnings = []
        cfg = self.config
        if cfg.supply_rate_high < cfg.supply_rate_low:
            warnings.append(
                f"supply_rate_high ({cfg.supply_rate_high}) is below supply_rate_low "
                f"({cfg.supply_rate_low}): the high tier dispatches less than the low tier"
            )
        if cfg.initial_stock > cfg.storage_capacity:
            warnings.append(
                f"initial_stock ({cfg.initial_stock}) exceeds storage_capacity ({cfg.storage_capacity})"
            )
        return warnings
