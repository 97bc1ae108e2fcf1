"""
Logging setup for applications using optionstore.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from ..config.defaults import DEFAULT_CONFIG


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: Optional[str] = None, log_file_path: Optional[str] = None,
                  logging_config: Optional[dict] = None) -> None:
    """
    Setup logging with settings from the 'logging' section of the runtime settings.

    Args:
        log_level: Level name, overrides the configured level
        log_file_path: Log file, overrides the configured path and enables file logging
        logging_config: 'logging' settings section; defaults to DEFAULT_CONFIG
    """
    if logging_config is None:
        logging_config = DEFAULT_CONFIG.get('logging', {})

    if log_level is None:
        log_level = logging_config.get('level', 'WARNING')

    file_enabled = logging_config.get('file_enabled', False) or log_file_path is not None
    console_enabled = logging_config.get('console_enabled', True)
    if log_file_path is None:
        log_file_path = logging_config.get('file_path', 'optionstore.log')

    handlers = []
    if console_enabled:
        handlers.append(logging.StreamHandler(sys.stdout))
    if file_enabled:
        log_path = Path(log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_path)))

    # Fallback to console if no handlers enabled
    if not handlers:
        handlers.append(logging.StreamHandler(sys.stdout))

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=LOG_FORMAT,
        handlers=handlers,
    )
