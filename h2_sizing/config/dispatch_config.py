"""
Configuration dataclass for storage dispatch sizing runs.

DispatchConfig is an immutable, hashable value: it doubles as part of the
memoization key for simulation results and is never mutated during a run.
"""

from dataclasses import dataclass, asdict, fields, replace
from typing import Dict, Any

from h2_sizing.core import constants
from h2_sizing.core.enums import VentingRule
from h2_sizing.core.exceptions import InvalidConfig


@dataclass(frozen=True)
class DispatchConfig:
    """
    Dispatch and sizing parameters for one simulation run.

    Defaults reproduce the reference sizing workbook.

    Attributes:
        installed_capacity (float): Installed stack size (NM3/h).
        base_stack_capacity (float): Stack size the hourly profile was
            normalized against (NM3/h).
        stock_high_threshold (float): Stock above which the high supply
            rate is dispatched (NM3).
        supply_rate_high (float): High supply rate (NM3/h).
        supply_rate_low (float): Base supply rate (NM3/h).
        storage_capacity (float): Total storage volume (NM3).
        cylinder_capacity (float): Volume held by one cylinder (NM3).
        cylinder_cost_per_unit (float): Capital cost of one cylinder.
        initial_stock (float): Stock at hour 0 (NM3).
        venting_rule (VentingRule): Venting behaviour once storage saturates.
    """
    installed_capacity: float = constants.INSTALLED_CAPACITY
    base_stack_capacity: float = constants.BASE_STACK_CAPACITY
    stock_high_threshold: float = constants.STOCK_HIGH_THRESHOLD
    supply_rate_high: float = constants.SUPPLY_RATE_HIGH
    supply_rate_low: float = constants.SUPPLY_RATE_LOW
    storage_capacity: float = constants.STORAGE_CAPACITY
    cylinder_capacity: float = constants.CYLINDER_CAPACITY
    cylinder_cost_per_unit: float = constants.CYLINDER_COST_PER_UNIT
    initial_stock: float = 0.0
    venting_rule: VentingRule = VentingRule.COMPOUND

    def __post_init__(self):
        # Accept plain strings from YAML/JSON or CLI input
        if not isinstance(self.venting_rule, VentingRule):
            try:
                rule = VentingRule(self.venting_rule)
            except ValueError as e:
                choices = ', '.join(r.value for r in VentingRule)
                raise InvalidConfig('venting_rule', f"must be one of {choices}, got {self.venting_rule!r}") from e
            object.__setattr__(self, 'venting_rule', rule)

    @property
    def scale_factor(self) -> float:
        """Multiplier turning a normalized profile value into NM3/h."""
        return self.installed_capacity / self.base_stack_capacity

    def validate(self) -> None:
        """Validate configuration parameters (raises InvalidConfig)."""
        from h2_sizing.config.validator import ConfigValidator
        ConfigValidator(self).validate()

    def with_overrides(self, **changes: Any) -> 'DispatchConfig':
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['venting_rule'] = self.venting_rule.value
        return data

    @classmethod
    def field_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DispatchConfig':
        """
        Build a config from a flat mapping of snake_case field names.

        Missing fields keep their workbook defaults.

        Raises:
            TypeError: If the mapping contains unknown fields.
        """
        return cls(**data)
