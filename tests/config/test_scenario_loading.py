import json
from pathlib import Path

import pytest

from h2_sizing.config.dispatch_config import DispatchConfig
from h2_sizing.config.loaders import ConfigLoader, load_scenario
from h2_sizing.core.enums import VentingRule
from h2_sizing.core.exceptions import ConfigurationError, InvalidConfig


def test_load_yaml_scenario(tmp_path):
    """Test loading a YAML scenario."""
    yaml_content = """
name: "Test Plant"
version: "1.0"
dispatch:
  installed_capacity: 9000
  storage_capacity: 50000
  cylinder_capacity: 30
  venting_rule: capacity_excess
"""
    config_file = tmp_path / "test_config.yaml"
    config_file.write_text(yaml_content)

    scenario = load_scenario(config_file)

    assert scenario.name == "Test Plant"
    assert scenario.config.installed_capacity == 9000
    assert scenario.config.storage_capacity == 50000
    assert scenario.config.venting_rule is VentingRule.CAPACITY_EXCESS
    # Unspecified fields keep workbook defaults
    assert scenario.config.supply_rate_high == DispatchConfig().supply_rate_high
    assert scenario.profile_path is None


def test_load_camel_case_keys(tmp_path):
    """Keys as posted by the sizing web form are accepted."""
    config_file = tmp_path / "form.yaml"
    config_file.write_text(
        "dispatch:\n"
        "  installedCapacity: 11000\n"
        "  stockHighThreshold: 70000\n"
        "  cylinderCostPerUnit: 30000\n"
    )
    scenario = load_scenario(config_file)

    assert scenario.name == "form"
    assert scenario.config.stock_high_threshold == 70000
    assert scenario.config.cylinder_cost_per_unit == 30000


def test_load_json_scenario(tmp_path):
    config_file = tmp_path / "scenario.json"
    config_file.write_text(json.dumps({"name": "json", "dispatch": {"supply_rate_low": 5000}}))

    scenario = load_scenario(config_file)
    assert scenario.config.supply_rate_low == 5000


def test_profile_file_resolved_relative_to_scenario(tmp_path):
    config_file = tmp_path / "scenario.yaml"
    config_file.write_text("profile_file: profiles/site.csv\ndispatch: {}\n")

    scenario = load_scenario(config_file)
    assert scenario.profile_path == tmp_path / "profiles" / "site.csv"


def test_shipped_default_scenario_matches_workbook(repo_root):
    scenario = load_scenario(repo_root / "configs" / "default_sizing.yaml")
    assert scenario.config == DispatchConfig()


def test_load_nonexistent_file():
    with pytest.raises(ConfigurationError, match="not found"):
        load_scenario("nonexistent_config.yaml")


def test_unknown_field_fails_schema(tmp_path):
    config_file = tmp_path / "bad.yaml"
    config_file.write_text("dispatch:\n  electrolyzer_efficiency: 0.7\n")
    with pytest.raises(ConfigurationError, match="Schema validation failed"):
        load_scenario(config_file)


def test_wrong_type_fails_schema(tmp_path):
    config_file = tmp_path / "bad.yaml"
    config_file.write_text("dispatch:\n  storage_capacity: lots\n")
    with pytest.raises(ConfigurationError, match="Schema validation failed"):
        load_scenario(config_file)


def test_missing_dispatch_section_fails_schema(tmp_path):
    config_file = tmp_path / "bad.yaml"
    config_file.write_text("name: empty\n")
    with pytest.raises(ConfigurationError, match="Schema validation failed"):
        load_scenario(config_file)


def test_invalid_value_raises_invalid_config(tmp_path):
    config_file = tmp_path / "bad.yaml"
    config_file.write_text("dispatch:\n  cylinder_capacity: 0\n")
    with pytest.raises(InvalidConfig) as exc_info:
        load_scenario(config_file)
    assert exc_info.value.field == "cylinder_capacity"


def test_malformed_yaml(tmp_path):
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("dispatch: [unclosed\n")
    with pytest.raises(ConfigurationError, match="Failed to parse YAML"):
        load_scenario(config_file)


def test_non_mapping_root(tmp_path):
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigurationError, match="must be a mapping"):
        load_scenario(config_file)


def test_load_dict_from_form_payload():
    scenario = ConfigLoader().load_dict({"dispatch": {"supplyRateHigh": 8000}}, name="web")
    assert scenario.name == "web"
    assert scenario.config.supply_rate_high == 8000


def test_missing_schema_file_raises(tmp_path):
    with pytest.raises(ConfigurationError, match="Could not load schema"):
        ConfigLoader(schema_path=tmp_path / "missing.json")


@pytest.mark.parametrize("suffix", [".yaml", ".json"])
def test_unreadable_scenario_path_raises_configuration_error(tmp_path, suffix):
    directory = tmp_path / f"scenario{suffix}"
    directory.mkdir()

    with pytest.raises(ConfigurationError, match="Cannot read configuration file"):
        load_scenario(directory)
