"""
Runtime settings for optionstore.

Settings cascade: defaults -> JSON settings file -> explicit overrides.
They choose the default storage adapter and configure logging; they are not
the application options managed by the Configurator.
"""

import json
import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional

from .defaults import CONFIG_ENV_VAR, DEFAULT_CONFIG
from .schemas import ConfigSchema, ConfigValidationError


logger = logging.getLogger(__name__)


class RuntimeSettings:
    """Loads, merges and validates runtime settings."""

    def __init__(self):
        self._config: Dict[str, Any] = deepcopy(DEFAULT_CONFIG)
        self._config_path: Optional[Path] = None

    @classmethod
    def load(cls, config_path: Optional[str] = None,
             overrides: Optional[Dict[str, Any]] = None) -> "RuntimeSettings":
        """
        Load settings in cascade order.

        Args:
            config_path: JSON settings file; falls back to $OPTIONSTORE_CONFIG
            overrides: Values merged last, e.g. {"storage": {"adapter": "memory"}}

        Returns:
            Validated settings

        Raises:
            ConfigValidationError: If a settings file is invalid or validation fails
        """
        settings = cls()

        if config_path is None:
            config_path = os.environ.get(CONFIG_ENV_VAR) or None

        if config_path:
            settings._config_path = Path(config_path)
            if settings._config_path.exists():
                file_config = settings._load_json_config(settings._config_path)
                settings._merge_config(settings._config, file_config)
                logger.info(f"Loaded settings from: {config_path}")
            else:
                logger.debug(f"Settings file not found, using defaults: {config_path}")

        if overrides:
            settings._merge_config(settings._config, overrides)

        try:
            ConfigSchema.validate_config(settings._config)
        except ConfigValidationError as e:
            logger.error(f"Settings validation failed: {e}")
            raise

        return settings

    @staticmethod
    def _load_json_config(config_path: Path) -> Dict[str, Any]:
        """Load settings from a JSON file."""
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)

            if not isinstance(config, dict):
                raise ConfigValidationError(f"Settings file must contain a JSON object: {config_path}")

            return config

        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON in settings file {config_path}: {e}") from e
        except OSError as e:
            raise ConfigValidationError(f"Cannot read settings file {config_path}: {e}") from e

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override into base (modified in place)."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = deepcopy(value)

    @property
    def config_path(self) -> Optional[Path]:
        return self._config_path

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting using dot notation.

        Args:
            key: Setting key in dot notation (e.g., 'storage.adapter')
            default: Value returned if the key is missing
        """
        value = self._config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def as_dict(self) -> Dict[str, Any]:
        """Deep copy of the merged settings."""
        return deepcopy(self._config)
