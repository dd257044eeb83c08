import math

import pytest

from h2_sizing.config.dispatch_config import DispatchConfig
from h2_sizing.config.validator import ConfigValidator
from h2_sizing.core.exceptions import ConfigurationError, InvalidConfig


def test_default_config_is_valid():
    """Reference workbook values pass validation without warnings."""
    assert ConfigValidator(DispatchConfig()).validate() == []


def test_zero_cylinder_capacity_rejected():
    config = DispatchConfig(cylinder_capacity=0.0)
    with pytest.raises(InvalidConfig) as exc_info:
        ConfigValidator(config).validate()

    assert exc_info.value.field == "cylinder_capacity"
    assert "> 0" in exc_info.value.reason


@pytest.mark.parametrize("field", [
    "installed_capacity", "base_stack_capacity", "storage_capacity", "cylinder_capacity",
])
@pytest.mark.parametrize("value", [0.0, -1.0])
def test_capacities_must_be_positive(field, value):
    with pytest.raises(InvalidConfig) as exc_info:
        DispatchConfig(**{field: value}).validate()
    assert exc_info.value.field == field


@pytest.mark.parametrize("field", [
    "cylinder_cost_per_unit", "supply_rate_high", "supply_rate_low", "stock_high_threshold", "initial_stock",
])
def test_non_negative_fields(field):
    with pytest.raises(InvalidConfig) as exc_info:
        DispatchConfig(**{field: -0.01}).validate()
    assert exc_info.value.field == field

    # Zero is allowed
    DispatchConfig(**{field: 0.0}).validate()


@pytest.mark.parametrize("value", [math.nan, math.inf])
def test_non_finite_values_rejected(value):
    with pytest.raises(InvalidConfig, match="finite"):
        DispatchConfig(storage_capacity=value).validate()


def test_non_numeric_value_rejected():
    with pytest.raises(InvalidConfig, match="must be a number"):
        DispatchConfig(supply_rate_low="100").validate()


def test_fail_fast_reports_first_field_only():
    config = DispatchConfig(installed_capacity=0.0, cylinder_capacity=0.0)
    with pytest.raises(InvalidConfig) as exc_info:
        config.validate()
    assert exc_info.value.field == "installed_capacity"


def test_invalid_config_is_configuration_error():
    with pytest.raises(ConfigurationError):
        DispatchConfig(base_stack_capacity=0.0).validate()


def test_inverted_supply_rates_warn_but_pass(caplog):
    config = DispatchConfig(supply_rate_high=100.0, supply_rate_low=500.0)

    with caplog.at_level("WARNING"):
        warnings = ConfigValidator(config).validate()

    assert len(warnings) == 1
    assert "supply_rate_high" in warnings[0]
    assert "below supply_rate_low" in caplog.text


def test_check_returns_typed_result():
    ok = ConfigValidator(DispatchConfig()).check()
    assert ok.ok
    assert ok.error is None

    bad = ConfigValidator(DispatchConfig(cylinder_capacity=0.0)).check()
    assert not bad.ok
    assert isinstance(bad.error, InvalidConfig)
    assert bad.error.field == "cylinder_capacity"


def test_config_is_hashable_and_immutable():
    a = DispatchConfig()
    b = DispatchConfig()
    assert hash(a) == hash(b)
    assert a == b
    with pytest.raises(AttributeError):
        a.storage_capacity = 1.0


def test_venting_rule_accepts_strings():
    from h2_sizing.core.enums import VentingRule
    config = DispatchConfig(venting_rule="capacity_excess")
    assert config.venting_rule is VentingRule.CAPACITY_EXCESS
    assert config.to_dict()["venting_rule"] == "capacity_excess"


def test_unknown_venting_rule_raises_invalid_config():
    with pytest.raises(InvalidConfig, match="compound, capacity_excess") as excinfo:
        DispatchConfig(venting_rule="sometimes")
    assert excinfo.value.field == "venting_rule"


def test_scale_factor_and_overrides():
    config = DispatchConfig(installed_capacity=700.0, base_stack_capacity=350.0)
    assert config.scale_factor == 2.0
    assert config.with_overrides(installed_capacity=350.0).scale_factor == 1.0
