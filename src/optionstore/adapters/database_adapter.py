"""
SQLite storage adapter for optionstore.
"""

import getpass
import logging
from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from ..database.connection import DatabaseManager
from ..database.models import StoredOption
from ..exceptions import StorageAccessDenied
from .base import StorageAdapter, StorageScope


logger = logging.getLogger(__name__)

# SQLite messages that mean the store cannot be opened or written
_ACCESS_ERRORS = (
    'readonly database',
    'read-only',
    'unable to open database',
    'permission denied',
    'access denied',
)


class DatabaseAdapter(StorageAdapter):
    """
    Stores options as rows of a SQLite database.

    Rows are keyed by root path, scope, group and key. The user scope is
    qualified with the login name so several users can share one file.
    """

    def __init__(self, force_local_storage: bool, path: str, database_path: str = ":memory:"):
        super().__init__(force_local_storage, path)
        self.database_manager = DatabaseManager(database_path)
        with self._translate_errors("open", database_path):
            try:
                self.database_manager.initialize_database()
            except PermissionError as e:
                raise StorageAccessDenied(f"Cannot create option database {database_path}: {e}") from e

    @classmethod
    def from_settings(cls, force_local_storage: bool, path: str,
                      settings: Optional[Dict[str, Any]] = None, **options) -> "DatabaseAdapter":
        storage = (settings or {}).get('storage', {})
        if storage.get('database_file'):
            options.setdefault('database_path', storage['database_file'])
        return cls(force_local_storage, path, **options)

    def _scope_key(self) -> str:
        scope = self.resolve_scope()
        if scope == StorageScope.SYSTEM:
            return scope.value
        return f"{scope.value}:{getpass.getuser()}"

    @contextmanager
    def _translate_errors(self, action: str, name: str) -> Generator[None, None, None]:
        try:
            yield
        except OperationalError as e:
            message = str(e).lower()
            if any(pattern in message for pattern in _ACCESS_ERRORS):
                logger.error(f"Access denied while trying to {action} '{name}': {e}")
                raise StorageAccessDenied(f"Cannot {action} option '{name}': {e.orig}") from e
            raise

    def _find(self, session: Session, name: str) -> Optional[StoredOption]:
        group, leaf = self.split_name(name)
        return (
            session.query(StoredOption)
            .filter_by(root_path=self.path, scope=self._scope_key(), group_path=group, key=leaf)
            .one_or_none()
        )

    def get(self, name: str) -> str:
        with self._translate_errors("read", name):
            with self.database_manager.get_session() as session:
                row = self._find(session, name)
                return row.value if row is not None and row.value is not None else ""

    def set(self, name: str, value: str) -> None:
        with self._translate_errors("write", name):
            with self.database_manager.get_session() as session:
                row = self._find(session, name)
                if row is None:
                    group, leaf = self.split_name(name)
                    row = StoredOption(
                        root_path=self.path,
                        scope=self._scope_key(),
                        group_path=group,
                        key=leaf,
                    )
                    session.add(row)
                row.value = value
        logger.debug(f"Stored '{name}' in {self.database_manager.database_path}")

    def delete(self, name: str) -> None:
        with self._translate_errors("delete", name):
            with self.database_manager.get_session() as session:
                row = self._find(session, name)
                if row is not None:
                    session.delete(row)

    def clear(self, name: str) -> None:
        self.set(name, "")

    def close(self) -> None:
        self.database_manager.close()
