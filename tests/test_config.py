"""
Tests for runtime settings.
"""

import json
import logging
import tempfile
from pathlib import Path
import pytest

from optionstore.config.manager import RuntimeSettings
from optionstore.config.schemas import ConfigValidationError
from optionstore.utils.log_utils import setup_logging


class TestRuntimeSettings:
    """Test runtime settings loading."""

    def test_load_default_settings(self):
        """Test loading default settings."""
        settings = RuntimeSettings.load()

        assert settings.get('storage.adapter') == 'qsettings'
        assert settings.get('storage.force_local_storage') is False
        assert settings.get('logging.level') == 'WARNING'
        assert settings.config_path is None

    def test_cascading_settings(self):
        """Test file settings override defaults and overrides win last."""
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "optionstore.json"
            with open(config_path, 'w') as f:
                json.dump({
                    "storage": {"adapter": "database", "database_file": "/tmp/options.db"},
                    "logging": {"level": "DEBUG"},
                }, f)

            settings = RuntimeSettings.load(
                config_path=str(config_path),
                overrides={"logging": {"level": "INFO"}},
            )

            assert settings.get('storage.adapter') == 'database'
            assert settings.get('storage.database_file') == '/tmp/options.db'
            assert settings.get('storage.settings_format') == 'native'  # From defaults
            assert settings.get('logging.level') == 'INFO'  # From overrides

    def test_settings_file_from_environment(self, tmp_path, monkeypatch):
        """Test the settings file can be named by environment variable."""
        config_path = tmp_path / "env.json"
        config_path.write_text(json.dumps({"storage": {"adapter": "memory"}}), encoding="utf-8")
        monkeypatch.setenv("OPTIONSTORE_CONFIG", str(config_path))

        settings = RuntimeSettings.load()

        assert settings.get('storage.adapter') == 'memory'
        assert settings.config_path == config_path

    def test_missing_settings_file_uses_defaults(self, tmp_path):
        settings = RuntimeSettings.load(config_path=str(tmp_path / "missing.json"))
        assert settings.get('storage.adapter') == 'qsettings'

    def test_get_with_dot_notation(self):
        """Test getting settings with dot notation."""
        settings = RuntimeSettings.load()

        assert settings.get('nonexistent.key') is None
        assert settings.get('nonexistent.key', 'default') == 'default'
        assert isinstance(settings.get('storage'), dict)

    def test_as_dict_is_a_copy(self):
        settings = RuntimeSettings.load()
        data = settings.as_dict()
        data['storage']['adapter'] = 'memory'
        assert settings.get('storage.adapter') == 'qsettings'

    def test_invalid_json(self):
        """Test handling of invalid JSON."""
        with tempfile.TemporaryDirectory() as temp_dir:
            invalid_path = Path(temp_dir) / "invalid.json"
            with open(invalid_path, 'w') as f:
                f.write("{ invalid json }")

            with pytest.raises(ConfigValidationError):
                RuntimeSettings.load(config_path=str(invalid_path))

    def test_non_object_root(self, tmp_path):
        config_path = tmp_path / "list.json"
        config_path.write_text("[1, 2, 3]", encoding="utf-8")

        with pytest.raises(ConfigValidationError, match="JSON object"):
            RuntimeSettings.load(config_path=str(config_path))

    @pytest.mark.parametrize("overrides", [
        {"storage": {"adapter": "registry"}},
        {"storage": {"force_local_storage": "yes"}},
        {"storage": {"settings_format": "xml"}},
        {"storage": {"database_file": ""}},
        {"logging": {"level": "LOUD"}},
        {"logging": {"file_enabled": 1}},
    ])
    def test_invalid_values(self, overrides):
        """Test validation rejects invalid settings."""
        with pytest.raises(ConfigValidationError):
            RuntimeSettings.load(overrides=overrides)


class TestSetupLogging:
    """Test logging setup."""

    @pytest.fixture
    def basic_config(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        return calls

    def test_defaults_log_to_console(self, basic_config):
        setup_logging()

        assert len(basic_config) == 1
        kwargs = basic_config[0]
        assert kwargs["level"] == logging.WARNING
        assert kwargs["format"] == "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        assert [type(h) for h in kwargs["handlers"]] == [logging.StreamHandler]

    def test_file_logging(self, basic_config, tmp_path):
        log_file = tmp_path / "logs" / "optionstore.log"

        setup_logging(log_level="debug", log_file_path=str(log_file))

        kwargs = basic_config[0]
        assert kwargs["level"] == logging.DEBUG
        file_handlers = [h for h in kwargs["handlers"] if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert log_file.parent.exists()
        for handler in file_handlers:
            handler.close()

    def test_fallback_to_console(self, basic_config):
        setup_logging(logging_config={"level": "ERROR", "console_enabled": False, "file_enabled": False})

        kwargs = basic_config[0]
        assert kwargs["level"] == logging.ERROR
        assert len(kwargs["handlers"]) == 1
