"""
Configurator for optionstore.

Stores options within the per-user or machine-wide scope according to
privileges. Options are stored as empty values while not actively set, and
read back as their declared defaults.
"""

import logging
import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Type, Union

from ..adapters import StorageAdapter, create_adapter
from ..config.manager import RuntimeSettings
from ..exceptions import InvalidPath, NotInitialized, UnknownOption
from .conversion import change_type
from .library import OptionLibrary
from .names import normalize_name
from .options import OptionTable


logger = logging.getLogger(__name__)


class Configurator:
    """
    Reads and writes configuration options through a storage adapter.

    One Configurator is meant to be created per process and handed to the
    code that needs configuration access. It does no locking: callers that
    share it between threads must synchronize themselves.
    """

    def __init__(self, library: Optional[OptionLibrary] = None,
                 settings: Optional[RuntimeSettings] = None):
        self._initialized = False
        self._adapter: Optional[StorageAdapter] = None
        self._path = ""
        self._force_local_storage = False
        self._settings = settings if settings is not None else RuntimeSettings.load()
        self._tables: Dict[Type[Enum], OptionTable] = {}
        self._library = library if library is not None else OptionLibrary()
        self._subscribed = False

    def init(self, path: str, adapter: Union[str, Type[StorageAdapter], None] = None,
             force_local_storage: Optional[bool] = None,
             options: Union[OptionTable, Iterable[OptionTable], None] = None,
             **adapter_options) -> None:
        """
        Initialize configuration.

        Args:
            path: Root path of the configuration, e.g. 'Company' or 'Company:Product'
                (':' , '/' and '\\' are interchangeable)
            adapter: Adapter name or StorageAdapter subclass; defaults to the
                'storage.adapter' setting
            force_local_storage: Store per-user even when elevated; defaults to
                the 'storage.force_local_storage' setting
            options: Option table(s) scanned into the library after initialization
            **adapter_options: Passed to the adapter constructor

        Raises:
            InvalidPath: If path is empty
            InvalidAdapter: If adapter does not name a StorageAdapter
            MissingMetadata: If an option table lacks a descriptor for a member
        """
        if path is None or not str(path).strip():
            raise InvalidPath("Empty value not allowed on path!")

        if adapter is None:
            adapter = self._settings.get('storage.adapter', 'qsettings')
        if force_local_storage is None:
            force_local_storage = bool(self._settings.get('storage.force_local_storage', False))

        normalized = normalize_name(str(path).strip())
        new_adapter = create_adapter(
            adapter, force_local_storage, normalized, self._settings.as_dict(), **adapter_options
        )

        if self._adapter is not None and self._adapter is not new_adapter:
            self._adapter.close()

        self._adapter = new_adapter
        self._path = normalized
        self._force_local_storage = force_local_storage
        self._initialized = True
        self._subscribe(self._library)

        logger.info(f"Configuration initialized: {self._path} (force_local_storage={force_local_storage})")

        if options is not None:
            tables = [options] if isinstance(options, OptionTable) else list(options)
            for table in tables:
                self.register_options(table)

    # Properties ---------------------------------------------------------
    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def path(self) -> str:
        return self._path

    @property
    def force_local_storage(self) -> bool:
        return self._force_local_storage

    @property
    def adapter(self) -> Optional[StorageAdapter]:
        return self._adapter

    @property
    def settings(self) -> RuntimeSettings:
        return self._settings

    @property
    def library(self) -> OptionLibrary:
        """Library of all configuration options and their default values."""
        return self._library

    @library.setter
    def library(self, library: OptionLibrary) -> None:
        self._unsubscribe()
        self._library = library
        if self._initialized:
            self._subscribe(library)
            for name in library:
                self._init_option(name)

    # Option access ------------------------------------------------------
    def is_set(self, name: str) -> bool:
        """
        Is an option actively set? False while it holds its default.

        Args:
            name: Option name, may contain '\\', ':' or '/' for grouping, e.g. 'NETWORK:CLIENTIP'
        """
        name = self._clean_and_check_name(name)
        return self._adapter.get(name) != ""

    def get(self, name: str, value_type: Any = str) -> Any:
        """
        Get an option value.

        Args:
            name: Option name, may contain '\\', ':' or '/' for grouping
            value_type: Type of the returned value

        Raises:
            UnknownOption: If the option is not registered
            TypeConversionFailure: If the value cannot be converted
        """
        name = self._clean_and_check_name(name)
        if self._library.is_non_persistent(name):
            value = self._library[name]
        else:
            value = self._adapter.get(name)
            if value is None or value == "":
                value = self._library[name]
        logger.debug(f"Get option {name} = {value!r}")
        return change_type(value, value_type)

    def get_str(self, name: str) -> str:
        return self.get(name, str)

    def get_int(self, name: str) -> int:
        return self.get(name, int)

    def get_float(self, name: str) -> float:
        return self.get(name, float)

    def get_bool(self, name: str) -> bool:
        return self.get(name, bool)

    def get_uuid(self, name: str) -> uuid.UUID:
        return self.get(name, uuid.UUID)

    def get_datetime(self, name: str) -> datetime:
        return self.get(name, datetime)

    def set(self, name: str, value: Any) -> None:
        """
        Set an option value.

        Persistent options are stored as str(value); None stores an empty
        value so the default is returned again.
        """
        name = self._clean_and_check_name(name)
        if self._library.is_non_persistent(name):
            self._library[name] = value
            return
        serialized = "" if value is None else str(value)
        logger.debug(f"Set option {name} = {serialized!r}")
        self._adapter.set(name, serialized)

    def delete(self, name: str) -> None:
        """Delete a stored option."""
        name = self._clean_and_check_name(name)
        if self._library.is_non_persistent(name):
            return
        self._adapter.delete(name)

    def delete_all(self) -> None:
        """Delete all stored options."""
        self._check_initialized()
        for name in self._library.persistent_names():
            self._adapter.delete(name)

    def clear(self, name: str) -> None:
        """Clear a stored option so its default is returned in future."""
        name = self._clean_and_check_name(name)
        if self._library.is_non_persistent(name):
            return
        self._adapter.clear(name)

    def clear_all(self) -> None:
        """Clear all stored options so their defaults are returned in future."""
        self._check_initialized()
        for name in self._library.persistent_names():
            self._adapter.clear(name)

    # Option tables ------------------------------------------------------
    def register_options(self, table: OptionTable) -> int:
        """Scan an option table into the library. Returns the number of options added."""
        self._check_initialized()
        added = table.register(self._library)
        self._tables[table.enum_type] = table
        return added

    def _table_for(self, member: Enum) -> OptionTable:
        self._check_initialized()
        table = self._tables.get(type(member))
        if table is None:
            raise UnknownOption(str(member))
        return table

    def option_name(self, member: Enum) -> str:
        """Full option name declared for an enum member."""
        return self._table_for(member).name(member)

    def get_option(self, member: Enum, value_type: Any = None) -> Any:
        """
        Get the value of an enum-declared option.

        value_type defaults to the declared value type, else str.
        """
        descriptor = self._table_for(member).descriptor(member)
        if value_type is None:
            value_type = descriptor.value_type or str
        return self.get(descriptor.full_name, value_type)

    def set_option(self, member: Enum, value: Any) -> None:
        """Set the value of an enum-declared option."""
        self.set(self.option_name(member), value)

    # Internals ----------------------------------------------------------
    def _subscribe(self, library: OptionLibrary) -> None:
        if not self._subscribed:
            library.add_listener(self._on_item_added)
            self._subscribed = True

    def _unsubscribe(self) -> None:
        if self._subscribed:
            self._library.remove_listener(self._on_item_added)
            self._subscribed = False

    def _on_item_added(self, name: str, value: Any) -> None:
        self._init_option(name)

    def _init_option(self, name: str) -> None:
        """Write an empty placeholder for a persistent option that is not set."""
        if self._library.is_non_persistent(name):
            return
        name = self._clean_and_check_name(name)
        if self._adapter.get(name) != "":
            return
        self._adapter.set(name, "")

    def _check_initialized(self) -> None:
        if not self._initialized:
            raise NotInitialized("Initialize Configuration first!")
        if self._adapter is None:
            raise NotInitialized("No configuration adapter found!")

    def _clean_and_check_name(self, name: str) -> str:
        """Check state and return the normalized name of a registered option."""
        self._check_initialized()
        name = normalize_name(name)
        if name not in self._library:
            raise UnknownOption(name)
        return name

    def close(self) -> None:
        """Release the adapter. The configurator must be initialized again before use."""
        if self._adapter is not None:
            self._adapter.close()
        self._unsubscribe()
        self._adapter = None
        self._initialized = False

    def __repr__(self) -> str:
        return (f"<Configurator(path='{self._path}', initialized={self._initialized}, "
                f"options={len(self._library)})>")
