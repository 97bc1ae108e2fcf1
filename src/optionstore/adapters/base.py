"""
Storage adapter contract for optionstore.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from ..core.names import normalize_name, split_name
from ..utils import privileges


logger = logging.getLogger(__name__)


class StorageScope(Enum):
    """Where values are stored."""
    USER = "user"      # Per-user store (e.g. HKEY_CURRENT_USER)
    SYSTEM = "system"  # Machine-wide store (e.g. HKEY_LOCAL_MACHINE)


class StorageAdapter(ABC):
    """
    Base class for backing stores.

    Adapters read and write string values under a root path such as
    'Company\\Product'. Missing values read as the empty string; only
    access failures raise.
    """

    def __init__(self, force_local_storage: bool, path: str):
        """
        Args:
            force_local_storage: Always use the per-user scope, even when elevated
            path: Root path of the stored options, e.g. 'Company\\Product'
        """
        self.force_local_storage = force_local_storage
        self.path = normalize_name(path)

    @classmethod
    def from_settings(cls, force_local_storage: bool, path: str,
                      settings: Optional[Dict[str, Any]] = None, **options) -> "StorageAdapter":
        """Create an adapter from the 'storage' runtime settings section."""
        return cls(force_local_storage, path, **options)

    @property
    def is_elevated(self) -> bool:
        return privileges.is_elevated()

    def resolve_scope(self) -> StorageScope:
        """Pick the storage scope for the current call."""
        if self.is_elevated and not self.force_local_storage:
            return StorageScope.SYSTEM
        return StorageScope.USER

    @staticmethod
    def split_name(name: str) -> Tuple[str, str]:
        """Split an option name into (group, leaf)."""
        return split_name(normalize_name(name))

    @abstractmethod
    def get(self, name: str) -> str:
        """Get the stored string, or '' if the value or its group is missing."""

    @abstractmethod
    def set(self, name: str, value: str) -> None:
        """Store a string, creating missing groups."""

    @abstractmethod
    def delete(self, name: str) -> None:
        """Remove a stored value. Missing values are ignored."""

    @abstractmethod
    def clear(self, name: str) -> None:
        """Overwrite a stored value with '' so the default is returned again."""

    def close(self) -> None:
        """Release resources held by the adapter."""

    def __repr__(self) -> str:
        return (f"<{type(self).__name__}(path='{self.path}', "
                f"force_local_storage={self.force_local_storage})>")
