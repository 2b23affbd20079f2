"""
singleton.py — PASSMETER
========================
The one place that implements the singleton pattern for the project.

SingletonMeta makes a plain (non-QObject) class return the same instance
on every call:

    class Config(metaclass=SingletonMeta): ...
    Config() is Config.get_instance()  # True

Creation uses double-checked locking. clear_instance() exists for tests
that need a fresh object.
"""
from __future__ import annotations

import threading
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


class SingletonMeta(type):
    """Thread-safe singleton metaclass."""

    _instances: Dict[type, Any] = {}
    _lock: threading.Lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            with cls._lock:
                if cls not in cls._instances:
                    cls._instances[cls] = super().__call__(*args, **kwargs)
                    logger.debug(f"[Singleton] Created: {cls.__name__}")
        return cls._instances[cls]

    def get_instance(cls, *args, **kwargs):
        return cls(*args, **kwargs)

    def clear_instance(cls) -> None:
        """Drop the cached instance (tests only)."""
        with cls._lock:
            if cls._instances.pop(cls, None) is not None:
                logger.debug(f"[Singleton] Cleared: {cls.__name__}")


__all__ = ["SingletonMeta"]
