# core/__init__.py
"""
PASSMETER Core Module
=====================

Application plumbing shared by the UI and the entry point.

Public API:
    - Configuration: Config, strength_config_from_settings
    - Logging: LoggingConfig
    - Utilities: SingletonMeta
"""

from .config import Config, strength_config_from_settings
from .logging_config import LoggingConfig
from .singleton import SingletonMeta

__all__ = [
    "Config",
    "strength_config_from_settings",
    "LoggingConfig",
    "SingletonMeta",
]
