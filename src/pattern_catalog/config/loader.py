"""Configuration loading from files and environment variables."""
import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from pattern_catalog import ENV_PREFIX
from pattern_catalog.domain.exceptions import ConfigurationError
from pattern_catalog.infrastructure.logging.logger import get_logger

CONFIG_FILE_ENV = f"{ENV_PREFIX}_CONFIG"
DEFAULT_CONFIG_FILES = ("pattern_catalog.yaml", "pattern_catalog.yml", "pattern_catalog.json")


class ConfigurationLoader:
    """
    Loads raw configuration dictionaries.

    Sources, lowest precedence first:
    - a config file (explicit path, ``PATTERN_CATALOG_CONFIG``, or a default file
      in the working directory)
    - environment variables ``PATTERN_CATALOG_<SECTION>__<KEY>``
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None, search_dir: Optional[str] = None):
        self._environ = environ if environ is not None else os.environ
        self._search_dir = Path(search_dir) if search_dir else Path.cwd()
        self._logger = get_logger(__name__)

    def load_from_file(self, path: str) -> Dict[str, Any]:
        """Load a JSON or YAML configuration file."""
        file_path = Path(path)
        if not file_path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                if file_path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")

        self._logger.debug("Loaded configuration from %s", file_path)
        return data

    def find_config_file(self) -> Optional[str]:
        """Locate a config file from the environment or the search directory."""
        env_path = self._environ.get(CONFIG_FILE_ENV)
        if env_path:
            return env_path

        for name in DEFAULT_CONFIG_FILES:
            candidate = self._search_dir / name
            if candidate.is_file():
                return str(candidate)
        return None

    def load_configuration(self, config_file: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from the given file or from default locations."""
        path = config_file or self.find_config_file()
        if path is None:
            self._logger.debug("No configuration file found, using defaults")
            return {}
        return self.load_from_file(path)

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply ``PATTERN_CATALOG_<SECTION>__<KEY>`` overrides.

        Values are parsed as YAML scalars so ``true``, ``3`` and ``[a, b]`` keep
        their types.
        """
        prefix = f"{ENV_PREFIX}_"
        result = copy.deepcopy(config_data)

        for env_key, raw_value in self._environ.items():
            if not env_key.startswith(prefix) or env_key == CONFIG_FILE_ENV:
                continue

            path = [part.lower() for part in env_key[len(prefix):].split("__") if part]
            if not path:
                continue

            try:
                value = yaml.safe_load(raw_value)
            except yaml.YAMLError:
                value = raw_value

            target = result
            for part in path[:-1]:
                node = target.get(part)
                if not isinstance(node, dict):
                    node = {}
                    target[part] = node
                target = node
            target[path[-1]] = value
            self._logger.debug("Applied environment override %s", env_key)

        return result
