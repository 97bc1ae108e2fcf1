"""
Storage adapters for optionstore.

Each adapter implements get/set/delete/clear for one kind of backing store.
"""

import logging
from typing import Any, Dict, Optional, Type, Union

from ..exceptions import InvalidAdapter
from .base import StorageAdapter, StorageScope
from .database_adapter import DatabaseAdapter
from .memory_adapter import MemoryAdapter
from .qsettings_adapter import QSettingsAdapter


logger = logging.getLogger(__name__)

ADAPTER_TYPES: Dict[str, Type[StorageAdapter]] = {
    "qsettings": QSettingsAdapter,
    "database": DatabaseAdapter,
    "memory": MemoryAdapter,
}


def create_adapter(kind: Union[str, Type[StorageAdapter]], force_local_storage: bool, path: str,
                   settings: Optional[Dict[str, Any]] = None, **options) -> StorageAdapter:
    """
    Create a storage adapter.

    Args:
        kind: Registered adapter name or a StorageAdapter subclass
        force_local_storage: Always use the per-user scope
        path: Root path of the stored options
        settings: Runtime settings supplying adapter defaults
        **options: Adapter specific options, overriding the settings

    Raises:
        InvalidAdapter: If kind does not name a StorageAdapter
    """
    if isinstance(kind, str):
        adapter_type = ADAPTER_TYPES.get(kind.lower())
        if adapter_type is None:
            raise InvalidAdapter(
                f"Unknown adapter '{kind}', expected one of: {list(ADAPTER_TYPES)}"
            )
    elif isinstance(kind, type) and issubclass(kind, StorageAdapter):
        adapter_type = kind
    else:
        raise InvalidAdapter("AdapterType must implement StorageAdapter!")

    adapter = adapter_type.from_settings(force_local_storage, path, settings, **options)
    logger.info(f"Using {adapter!r}")
    return adapter


__all__ = [
    "ADAPTER_TYPES",
    "StorageAdapter",
    "StorageScope",
    "DatabaseAdapter",
    "MemoryAdapter",
    "QSettingsAdapter",
    "create_adapter",
]
