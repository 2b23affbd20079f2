"""
core/paths.py — PASSMETER
=========================
Single source of truth for filesystem locations.

  - BASE_DIR / config_path() → files shipped with the app (read-only)
  - get_user_data_dir()      → writable per-user data (logs)
      - Windows: %APPDATA%/PASSMETER/
      - Linux/Mac: ~/.local/share/PASSMETER/
      - PASSMETER_DATA_DIR overrides both
"""

import os
import sys
from pathlib import Path

from constants import SettingKeys
from version import APP_NAME


if getattr(sys, "frozen", False):
    # PyInstaller EXE: bundled files live in sys._MEIPASS
    BASE_DIR = Path(sys._MEIPASS)
else:
    BASE_DIR = Path(__file__).resolve().parent.parent


def config_path(filename: str = "") -> Path:
    """Shipped config directory, or a file inside it."""
    p = BASE_DIR / "config"
    return p / filename if filename else p


def get_user_data_dir() -> Path:
    """
    Writable per-user data directory, created on first use.
    """
    override = os.getenv(SettingKeys.DATA_DIR)
    if override:
        user_dir = Path(override)
    else:
        if sys.platform == "win32":
            appdata = os.getenv("APPDATA") or str(Path.home() / "AppData" / "Roaming")
            base = Path(appdata)
        else:
            base = Path.home() / ".local" / "share"
        user_dir = base / APP_NAME

    user_dir.mkdir(parents=True, exist_ok=True)
    return user_dir


def logs_path(filename: str = "") -> Path:
    """Log directory inside the user data dir."""
    p = get_user_data_dir() / "logs"
    p.mkdir(parents=True, exist_ok=True)
    return p / filename if filename else p
