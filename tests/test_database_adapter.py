"""
Tests for the SQLite database adapter.
"""

import sqlite3

import pytest
from sqlalchemy.exc import OperationalError

from optionstore.adapters.database_adapter import DatabaseAdapter
from optionstore.core.configurator import Configurator
from optionstore.database import DatabaseManager, StoredOption
from optionstore.exceptions import StorageAccessDenied


@pytest.fixture
def database_file(tmp_path):
    return tmp_path / "data" / "options.db"


@pytest.fixture
def adapter(database_file):
    adapter = DatabaseAdapter(False, "Company:Product", database_path=str(database_file))
    yield adapter
    adapter.close()


def _rows(adapter):
    with adapter.database_manager.get_session() as session:
        return [
            (row.root_path, row.scope, row.group_path, row.key, row.value)
            for row in session.query(StoredOption).order_by(StoredOption.id)
        ]


class TestDatabaseAdapter:
    """Test database storage."""

    def test_creates_database(self, adapter, database_file):
        assert database_file.exists()

    def test_missing_value_reads_empty(self, adapter):
        assert adapter.get("Missing\\Group\\Key") == ""

    def test_set_and_get(self, adapter):
        adapter.set("Application\\Localization\\Language", "de-DE")

        assert adapter.get("Application:Localization:Language") == "de-DE"
        rows = _rows(adapter)
        assert len(rows) == 1
        root_path, scope, group_path, key, value = rows[0]
        assert root_path == "Company\\Product"
        assert scope.startswith("user:")
        assert group_path == "Application\\Localization"
        assert key == "Language"
        assert value == "de-DE"

    def test_set_updates_existing_row(self, adapter):
        adapter.set("Style", "1")
        adapter.set("Style", "2")

        assert adapter.get("Style") == "2"
        assert len(_rows(adapter)) == 1

    def test_clear_keeps_row(self, adapter):
        adapter.set("Style", "1")

        adapter.clear("Style")

        assert adapter.get("Style") == ""
        assert [row[4] for row in _rows(adapter)] == [""]

    def test_delete_removes_row(self, adapter):
        adapter.set("Style", "1")

        adapter.delete("Style")
        adapter.delete("Style")  # Absent values are ignored

        assert _rows(adapter) == []

    def test_values_persist(self, adapter, database_file):
        adapter.set("Style", "5")

        other = DatabaseAdapter(False, "Company\\Product", database_path=str(database_file))
        try:
            assert other.get("Style") == "5"
        finally:
            other.close()

    def test_root_paths_are_separate(self, adapter, database_file):
        adapter.set("Style", "5")

        other = DatabaseAdapter(False, "Company\\Other", database_path=str(database_file))
        try:
            assert other.get("Style") == ""
        finally:
            other.close()

    def test_system_scope_when_elevated(self, adapter, monkeypatch):
        adapter.set("Style", "user")
        monkeypatch.setattr("optionstore.utils.privileges.is_elevated", lambda: True)

        assert adapter.get("Style") == ""
        adapter.set("Style", "system")

        scopes = sorted(row[1] for row in _rows(adapter))
        assert scopes[0] == "system"
        assert scopes[1].startswith("user:")

    def test_in_memory_database(self):
        adapter = DatabaseAdapter(False, "Company")
        try:
            adapter.set("Style", "1")
            assert adapter.get("Style") == "1"
        finally:
            adapter.close()

    def test_access_denied(self, adapter, monkeypatch):
        def readonly(*args, **kwargs):
            raise OperationalError(
                "UPDATE stored_options", {}, sqlite3.OperationalError("attempt to write a readonly database")
            )

        monkeypatch.setattr(adapter, "_find", readonly)

        with pytest.raises(StorageAccessDenied):
            adapter.set("Style", "1")

    def test_other_errors_propagate(self, adapter, monkeypatch):
        def broken(*args, **kwargs):
            raise OperationalError("SELECT", {}, sqlite3.OperationalError("no such table: stored_options"))

        monkeypatch.setattr(adapter, "_find", broken)

        with pytest.raises(OperationalError):
            adapter.get("Style")


class TestDatabaseManager:
    """Test the database manager."""

    def test_session_requires_initialization(self, tmp_path):
        manager = DatabaseManager(str(tmp_path / "options.db"))
        with pytest.raises(RuntimeError, match="Database not initialized"):
            with manager.get_session():
                pass

    def test_rollback_on_error(self, tmp_path):
        manager = DatabaseManager(str(tmp_path / "options.db"))
        manager.initialize_database()
        try:
            with pytest.raises(ValueError):
                with manager.get_session() as session:
                    session.add(StoredOption(root_path="C", scope="user:x", group_path="", key="K", value="v"))
                    raise ValueError("boom")

            with manager.get_session() as session:
                assert session.query(StoredOption).count() == 0
        finally:
            manager.close()

    def test_empty_key_is_rejected(self):
        with pytest.raises(ValueError):
            StoredOption(root_path="C", scope="user:x", group_path="", key="")


class TestConfiguratorWithDatabase:
    """Test the configurator end to end on the database adapter."""

    def test_round_trip(self, database_file, settings):
        config = Configurator(settings=settings)
        config.init("Company:Product", adapter="database", database_path=str(database_file))
        try:
            config.library.add("App\\Style", 0)

            assert config.get_int("App\\Style") == 0
            config.set("App\\Style", 5)
            assert config.get_int("App\\Style") == 5
            config.clear("App\\Style")
            assert config.get_int("App\\Style") == 0
            assert config.is_set("App\\Style") is False
        finally:
            config.close()
