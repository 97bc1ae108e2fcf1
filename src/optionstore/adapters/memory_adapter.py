"""
In-process storage adapter.
"""

from typing import Dict, Tuple

from ..core.names import normalize_name
from .base import StorageAdapter, StorageScope


class MemoryAdapter(StorageAdapter):
    """Keeps values in a dict for the lifetime of the adapter."""

    def __init__(self, force_local_storage: bool, path: str):
        super().__init__(force_local_storage, path)
        self._values: Dict[Tuple[StorageScope, str], str] = {}

    def _key(self, name: str) -> Tuple[StorageScope, str]:
        return self.resolve_scope(), normalize_name(name)

    def get(self, name: str) -> str:
        return self._values.get(self._key(name), "")

    def set(self, name: str, value: str) -> None:
        self._values[self._key(name)] = value

    def delete(self, name: str) -> None:
        self._values.pop(self._key(name), None)

    def clear(self, name: str) -> None:
        self._values[self._key(name)] = ""

    def contains(self, name: str) -> bool:
        """Whether a value (possibly empty) exists in the current scope."""
        return self._key(name) in self._values
