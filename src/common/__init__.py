# Common utilities and shared modules
"""
Shared components used by every MaxDefense module:
- Project configuration
- Logging configuration
"""

from .config import get_settings, Settings, PROJECT_ROOT, DATA_DIR
from .logging import setup_logging

__all__ = [
    "get_settings",
    "Settings",
    "PROJECT_ROOT",
    "DATA_DIR",
    "setup_logging",
]
