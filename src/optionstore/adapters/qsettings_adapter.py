"""
Platform settings store adapter for optionstore.

Uses QSettings, which maps to the registry on Windows, property lists on
macOS and ini files under the XDG config directories elsewhere.
"""

import logging
from typing import Any, Dict, List, Optional

from PySide6.QtCore import QSettings

from ..core.names import SEPARATOR, segments
from ..exceptions import InvalidPath, StorageAccessDenied
from .base import StorageAdapter, StorageScope


logger = logging.getLogger(__name__)

SETTINGS_FORMATS = {
    "native": QSettings.Format.NativeFormat,
    "ini": QSettings.Format.IniFormat,
}


class QSettingsAdapter(StorageAdapter):
    """
    Stores options with QSettings.

    The first segment of the root path is the organization and the second the
    application; further segments prefix every key. 'Company\\Product\\Beta'
    and option 'Application\\Style' end up as
    HKCU\\Software\\Company\\Product\\Beta\\Application\\Style on Windows.
    """

    def __init__(self, force_local_storage: bool, path: str, settings_format: str = "native"):
        super().__init__(force_local_storage, path)

        parts = segments(self.path)
        if not parts:
            raise InvalidPath("Empty value not allowed on path!")
        self.organization = parts[0]
        self.application = parts[1] if len(parts) > 1 else ""
        self._key_prefix: List[str] = list(parts[2:])

        if settings_format not in SETTINGS_FORMATS:
            raise ValueError(
                f"settings_format must be one of: {list(SETTINGS_FORMATS)}"
            )
        self.settings_format = settings_format

    @classmethod
    def from_settings(cls, force_local_storage: bool, path: str,
                      settings: Optional[Dict[str, Any]] = None, **options) -> "QSettingsAdapter":
        storage = (settings or {}).get('storage', {})
        options.setdefault('settings_format', storage.get('settings_format', 'native'))
        return cls(force_local_storage, path, **options)

    def _open(self) -> QSettings:
        """Open the settings object for the scope of the current call."""
        scope = self.resolve_scope()
        qt_scope = (QSettings.Scope.SystemScope if scope == StorageScope.SYSTEM
                    else QSettings.Scope.UserScope)
        settings = QSettings(
            SETTINGS_FORMATS[self.settings_format],
            qt_scope,
            self.organization,
            self.application,
        )
        # User scope must not read through to machine-wide values
        settings.setFallbacksEnabled(False)
        return settings

    def _qt_key(self, name: str) -> str:
        """Translate an option name into a '/' separated QSettings key."""
        group, leaf = self.split_name(name)
        parts = list(self._key_prefix)
        if group:
            parts.extend(part for part in group.split(SEPARATOR) if part)
        parts.append(leaf)
        return "/".join(parts)

    def _check_status(self, settings: QSettings, action: str, name: str) -> None:
        if settings.status() == QSettings.Status.AccessError:
            logger.error(f"Access denied while trying to {action} '{name}' in {settings.fileName()}")
            raise StorageAccessDenied(
                f"Cannot {action} option '{name}': access to {settings.fileName()} denied"
            )

    def get(self, name: str) -> str:
        settings = self._open()
        value = settings.value(self._qt_key(name), "", type=str)
        self._check_status(settings, "read", name)
        if value is None:
            return ""
        return str(value)

    def set(self, name: str, value: str) -> None:
        settings = self._open()
        settings.setValue(self._qt_key(name), value)
        settings.sync()
        self._check_status(settings, "write", name)
        logger.debug(f"Stored '{name}' in {settings.fileName()}")

    def delete(self, name: str) -> None:
        settings = self._open()
        settings.remove(self._qt_key(name))
        settings.sync()
        self._check_status(settings, "delete", name)

    def clear(self, name: str) -> None:
        self.set(name, "")

    def file_name(self) -> str:
        """Location of the store used by the current scope."""
        return self._open().fileName()
