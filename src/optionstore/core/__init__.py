"""
Core components of optionstore.

Name handling, type coercion, the option library and declarative option
tables. The Configurator lives in optionstore.core.configurator.
"""

from .names import SEPARATOR, normalize_name, join_name
from .conversion import change_type
from .library import OptionLibrary
from .options import OptionDescriptor, OptionTable

__all__ = [
    "SEPARATOR",
    "normalize_name",
    "join_name",
    "change_type",
    "OptionLibrary",
    "OptionDescriptor",
    "OptionTable",
]
