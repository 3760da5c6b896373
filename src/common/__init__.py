# Common utilities and shared modules
"""
Shared components used by the blog API builder:
- Logging configuration
- Project configuration
"""

from .config import BuildConfig, Settings, settings, PROJECT_ROOT
from .logging import setup_logging

__all__ = [
    "BuildConfig",
    "Settings",
    "settings",
    "PROJECT_ROOT",
    "setup_logging",
]
