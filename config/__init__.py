"""
Config Package - Application configuration and logging setup.
"""

from config.settings import Settings, get_settings
from config.logging import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
]
