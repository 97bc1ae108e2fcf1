"""
Runtime settings module for optionstore.

This module handles the cascading settings system:
Defaults -> Settings File -> Overrides -> Final Settings
"""

from .manager import RuntimeSettings
from .defaults import DEFAULT_CONFIG
from .schemas import ConfigSchema, ConfigValidationError

__all__ = [
    "RuntimeSettings",
    "DEFAULT_CONFIG",
    "ConfigSchema",
    "ConfigValidationError",
]
