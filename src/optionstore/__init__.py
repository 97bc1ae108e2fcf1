"""
optionstore - application settings persistence.

Resolves option names to a per-user or machine-wide settings store, stores
values as strings and falls back to declared defaults for unset options.
Built with Python 3, PySide6 (QSettings) and SQLAlchemy.
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .core.configurator import Configurator
from .core.library import OptionLibrary
from .core.options import OptionDescriptor, OptionTable
from .adapters import StorageAdapter, StorageScope, create_adapter
from .exceptions import (
    OptionStoreError,
    NotInitialized,
    InvalidPath,
    UnknownOption,
    MissingMetadata,
    StorageAccessDenied,
    TypeConversionFailure,
    InvalidAdapter,
)

__all__ = [
    "__version__",
    "__license__",
    "Configurator",
    "OptionLibrary",
    "OptionDescriptor",
    "OptionTable",
    "StorageAdapter",
    "StorageScope",
    "create_adapter",
    "OptionStoreError",
    "NotInitialized",
    "InvalidPath",
    "UnknownOption",
    "MissingMetadata",
    "StorageAccessDenied",
    "TypeConversionFailure",
    "InvalidAdapter",
]
