"""
Shared fixtures for optionstore tests.
"""

from typing import List, Tuple

import pytest

from optionstore.adapters.memory_adapter import MemoryAdapter
from optionstore.config.manager import RuntimeSettings
from optionstore.core.configurator import Configurator


class RecordingAdapter(MemoryAdapter):
    """Memory adapter that records every call."""

    def __init__(self, force_local_storage: bool, path: str):
        super().__init__(force_local_storage, path)
        self.calls: List[Tuple[str, str]] = []

    def get(self, name: str) -> str:
        self.calls.append(("get", name))
        return super().get(name)

    def set(self, name: str, value: str) -> None:
        self.calls.append(("set", name))
        super().set(name, value)

    def delete(self, name: str) -> None:
        self.calls.append(("delete", name))
        super().delete(name)

    def clear(self, name: str) -> None:
        self.calls.append(("clear", name))
        super().clear(name)

    def calls_for(self, name: str) -> List[Tuple[str, str]]:
        return [call for call in self.calls if call[1] == name]


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Run as a non-elevated process without a settings file."""
    monkeypatch.delenv("OPTIONSTORE_CONFIG", raising=False)
    monkeypatch.setattr("optionstore.utils.privileges.is_elevated", lambda: False)


@pytest.fixture
def settings():
    return RuntimeSettings.load(overrides={"storage": {"adapter": "memory"}})


@pytest.fixture
def configurator(settings):
    """Initialized configurator backed by a RecordingAdapter."""
    config = Configurator(settings=settings)
    config.init("Company:Product", adapter=RecordingAdapter)
    return config
