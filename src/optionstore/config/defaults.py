"""
Default runtime settings for optionstore.
"""

import os
from pathlib import Path


# Get platform-specific default paths
def get_default_paths():
    """Get platform-specific default paths."""
    home = Path.home()

    if os.name == 'nt':  # Windows
        local_data = Path(os.environ.get('LOCALAPPDATA', home / 'AppData' / 'Local'))
        data_dir = local_data / 'optionstore'
    else:  # Linux/macOS
        data_dir = Path(os.environ.get('XDG_DATA_HOME', home / '.local' / 'share')) / 'optionstore'

    return {
        'data_dir': data_dir,
    }


_default_paths = get_default_paths()

# Environment variable naming a JSON file with overrides
CONFIG_ENV_VAR = "OPTIONSTORE_CONFIG"

DEFAULT_CONFIG = {
    "storage": {
        # 'qsettings', 'database' or 'memory'
        "adapter": "qsettings",
        # Store per-user even when running elevated
        "force_local_storage": False,
        # QSettings format: 'native' (registry/plist/ini) or 'ini'
        "settings_format": "native",
        # SQLite file used by the database adapter
        "database_file": str(_default_paths['data_dir'] / "options.db"),
    },
    "logging": {
        "level": "WARNING",
        "console_enabled": True,
        "file_enabled": False,
        "file_path": str(_default_paths['data_dir'] / "optionstore.log"),
    },
}
