"""
Runtime settings validation for optionstore.
"""

from typing import Any, Dict


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigSchema:
    """Runtime settings validator."""

    VALID_ADAPTERS = ["qsettings", "database", "memory"]
    VALID_FORMATS = ["native", "ini"]
    VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    @staticmethod
    def validate_config(config: Dict[str, Any]) -> None:
        """Validate complete settings dictionary."""
        if not isinstance(config, dict):
            raise ConfigValidationError("Configuration must be a dictionary")
        ConfigSchema._validate_storage(config.get("storage", {}))
        ConfigSchema._validate_logging(config.get("logging", {}))

    @staticmethod
    def _validate_storage(storage: Dict[str, Any]) -> None:
        """Validate storage configuration."""
        if not isinstance(storage, dict):
            raise ConfigValidationError("storage must be an object")

        if "adapter" in storage:
            adapter = storage["adapter"]
            if not isinstance(adapter, str) or adapter.lower() not in ConfigSchema.VALID_ADAPTERS:
                raise ConfigValidationError(f"adapter must be one of: {ConfigSchema.VALID_ADAPTERS}")

        if "force_local_storage" in storage:
            if not isinstance(storage["force_local_storage"], bool):
                raise ConfigValidationError("force_local_storage must be a boolean")

        if "settings_format" in storage:
            if storage["settings_format"] not in ConfigSchema.VALID_FORMATS:
                raise ConfigValidationError(f"settings_format must be one of: {ConfigSchema.VALID_FORMATS}")

        if "database_file" in storage:
            database_file = storage["database_file"]
            if not isinstance(database_file, str) or not database_file:
                raise ConfigValidationError("database_file must be a non-empty string")

    @staticmethod
    def _validate_logging(logging_config: Dict[str, Any]) -> None:
        """Validate logging configuration."""
        if not isinstance(logging_config, dict):
            raise ConfigValidationError("logging must be an object")

        if "level" in logging_config:
            level = logging_config["level"]
            if not isinstance(level, str) or level.upper() not in ConfigSchema.VALID_LOG_LEVELS:
                raise ConfigValidationError(f"logging level must be one of: {ConfigSchema.VALID_LOG_LEVELS}")

        for flag in ("console_enabled", "file_enabled"):
            if flag in logging_config and not isinstance(logging_config[flag], bool):
                raise ConfigValidationError(f"logging {flag} must be a boolean")

        if "file_path" in logging_config and not isinstance(logging_config["file_path"], str):
            raise ConfigValidationError("logging file_path must be a string")
