"""
Privilege detection for optionstore.
"""

import ctypes
import logging
import os


logger = logging.getLogger(__name__)


def is_elevated() -> bool:
    """
    Check whether the current process runs with administrative rights.

    Evaluated on every call; privileges may change during a process lifetime.
    """
    if os.name == 'nt':  # Windows
        try:
            return bool(ctypes.windll.shell32.IsUserAnAdmin())
        except (AttributeError, OSError) as e:
            logger.debug(f"Cannot query administrator state: {e}")
            return False
    geteuid = getattr(os, "geteuid", None)
    if geteuid is None:
        return False
    return geteuid() == 0
