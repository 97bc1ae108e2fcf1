"""
Option library for optionstore.

An insertion-ordered registry of option names and their default values.
Newly added persistent options are announced to direct listeners, whose
exceptions reach the caller of add(), and then through a Qt signal for
outside observers.
"""

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional, Set, Tuple

from PySide6.QtCore import QObject, Signal

from ..exceptions import UnknownOption
from .names import normalize_name


logger = logging.getLogger(__name__)


class OptionLibrary(QObject):
    """Registry of configuration options with default values."""

    # Signals
    item_added = Signal(str, object)  # name, default value

    def __init__(self, defaults: Optional[Dict[str, Any]] = None):
        super().__init__()
        self._values: Dict[str, Any] = {}
        self._non_persistent: Set[str] = set()
        self._listeners: List[Callable[[str, Any], None]] = []

        for name, value in (defaults or {}).items():
            self.add(name, value)

    def add(self, name: str, default_value: Any = None) -> bool:
        """
        Add a persistent option.

        Duplicate names are ignored.

        Args:
            name: Option name, may contain ':', '/' or '\\' for grouping
            default_value: Value returned while the option is not actively set

        Returns:
            True if the option was inserted
        """
        name = normalize_name(name)
        if name in self._values:
            return False
        self._values[name] = default_value
        logger.debug(f"Registered option: {name} (default={default_value!r})")
        self._notify(name, default_value)
        return True

    def add_non_persistent(self, name: str, default_value: Any = None) -> bool:
        """Add an option that lives in memory only and is never stored."""
        name = normalize_name(name)
        if name in self._values:
            return False
        self._values[name] = default_value
        self._non_persistent.add(name)
        logger.debug(f"Registered non-persistent option: {name}")
        return True

    def add_bare(self, name: str) -> bool:
        """Add a persistent option without a default value."""
        name = normalize_name(name)
        if name in self._values:
            return False
        self._values[name] = None
        logger.debug(f"Registered option without default: {name}")
        self._notify(name, "")
        return True

    def add_listener(self, callback: Callable[[str, Any], None]) -> None:
        """
        Call callback(name, default) for every persistent option added from now on.

        Unlike slots connected to item_added, exceptions raised by a listener
        propagate out of add() and add_bare(). The option stays registered.
        """
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[str, Any], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self, name: str, value: Any) -> None:
        for callback in list(self._listeners):
            callback(name, value)
        self.item_added.emit(name, value)

    def is_non_persistent(self, name: str) -> bool:
        return normalize_name(name) in self._non_persistent

    def persistent_names(self) -> List[str]:
        """Names of all options that are written to storage, in registration order."""
        return [name for name in self._values if name not in self._non_persistent]

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(normalize_name(name), default)

    def keys(self) -> List[str]:
        return list(self._values)

    def items(self) -> List[Tuple[str, Any]]:
        return list(self._values.items())

    def __getitem__(self, name: str) -> Any:
        key = normalize_name(name)
        if key not in self._values:
            raise UnknownOption(key)
        return self._values[key]

    def __setitem__(self, name: str, value: Any) -> None:
        key = normalize_name(name)
        if key not in self._values:
            raise UnknownOption(key)
        self._values[key] = value

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"<OptionLibrary(options={len(self._values)}, non_persistent={len(self._non_persistent)})>"
