"""
Configuration loading with validation.

Supports YAML and JSON scenario files with JSON Schema validation. Keys may be
given in snake_case or in the camelCase used by the sizing web form
(``installedCapacity``); both map onto DispatchConfig fields.
"""

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional

import jsonschema
import yaml

from h2_sizing.config.dispatch_config import DispatchConfig
from h2_sizing.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


@dataclass(frozen=True)
class SizingScenario:
    """
    A named dispatch configuration, optionally bound to a profile file.

    Attributes:
        name (str): Scenario label used in logs and reports.
        config (DispatchConfig): Validated dispatch configuration.
        profile_path (Path, optional): CSV profile, resolved relative to the
            scenario file. None means the bundled reference profile.
    """
    name: str
    config: DispatchConfig
    profile_path: Optional[Path] = None


def _to_snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub('_', key).lower()


class ConfigLoader:
    """
    Scenario loader with schema validation.

    Example:
        loader = ConfigLoader()
        scenario = loader.load_yaml("configs/default_sizing.yaml")
        result = simulate(profile, scenario.config)
    """

    def __init__(self, schema_path: Path = None):
        """
        Initialize configuration loader.

        Args:
            schema_path: Path to JSON schema file (uses default if None)
        """
        if schema_path is None:
            schema_path = Path(__file__).parent / "schemas" / "dispatch_schema_v1.json"

        self.schema_path = schema_path
        self.schema = self._load_schema()

    def _load_schema(self) -> Dict[str, Any]:
        """Load JSON schema from file."""
        try:
            with open(self.schema_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not load schema from {self.schema_path}: {e}") from e

    def load(self, config_path: Path | str) -> SizingScenario:
        """Load a scenario, choosing the parser from the file suffix."""
        config_path = Path(config_path)
        if config_path.suffix.lower() == '.json':
            return self.load_json(config_path)
        return self.load_yaml(config_path)

    def load_yaml(self, config_path: Path | str) -> SizingScenario:
        """
        Load a scenario from a YAML file.

        Args:
            config_path: Path to YAML scenario file

        Returns:
            SizingScenario instance

        Raises:
            ConfigurationError: If file not found or parsing fails
            InvalidConfig: If a dispatch field fails validation
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration file {config_path}: {e}") from e

        return self._dict_to_scenario(config_dict, config_path)

    def load_json(self, config_path: Path | str) -> SizingScenario:
        """
        Load a scenario from a JSON file.

        Args:
            config_path: Path to JSON scenario file

        Returns:
            SizingScenario instance
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_dict = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Failed to parse JSON: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration file {config_path}: {e}") from e

        return self._dict_to_scenario(config_dict, config_path)

    def load_dict(self, config_dict: Dict[str, Any], name: str = "scenario") -> SizingScenario:
        """Build a scenario from an in-memory mapping (e.g. a web form payload)."""
        return self._dict_to_scenario(config_dict, Path(f"{name}.yaml"))

    def _dict_to_scenario(self, config_dict: Any, source: Path) -> SizingScenario:
        """
        Convert a raw mapping to a validated SizingScenario.

        Raises:
            ConfigurationError: If schema validation or construction fails
            InvalidConfig: If a dispatch field fails validation
        """
        if not isinstance(config_dict, dict):
            raise ConfigurationError(f"Configuration root must be a mapping, got {type(config_dict).__name__}")

        normalized = dict(config_dict)
        if isinstance(normalized.get('dispatch'), dict):
            normalized['dispatch'] = {
                _to_snake_case(key): value for key, value in normalized['dispatch'].items()
            }
        if 'profileFile' in normalized:
            normalized['profile_file'] = normalized.pop('profileFile')

        try:
            jsonschema.validate(instance=normalized, schema=self.schema)
            logger.debug("JSON schema validation passed")
        except jsonschema.ValidationError as e:
            raise ConfigurationError(f"Schema validation failed: {e.message}") from e

        config = DispatchConfig.from_dict(normalized['dispatch'])
        config.validate()

        profile_path = None
        if normalized.get('profile_file'):
            profile_path = Path(normalized['profile_file'])
            if not profile_path.is_absolute():
                profile_path = source.parent / profile_path

        name = normalized.get('name') or source.stem
        logger.info(f"Loaded sizing scenario: {name}")
        return SizingScenario(name=name, config=config, profile_path=profile_path)


def load_scenario(config_path: Path | str) -> SizingScenario:
    """Load a sizing scenario from a YAML or JSON file."""
    return ConfigLoader().load(config_path)
