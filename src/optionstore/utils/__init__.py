"""
Utility modules for optionstore.
"""

from .log_utils import setup_logging
from .privileges import is_elevated

__all__ = [
    "setup_logging",
    "is_elevated",
]
