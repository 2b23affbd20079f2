"""
tests/conftest.py
=================
Shared pytest fixtures — offscreen Qt, isolated configuration.
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest


# ─── Qt application (session-scoped) ─────────────────────────────────────────

@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


# ─── Configuration isolation ─────────────────────────────────────────────────

@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No PASSMETER_* / LOG_LEVEL from the outer environment; data dir in tmp."""
    for key in list(os.environ):
        if key.startswith("PASSMETER_") or key == "LOG_LEVEL":
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("PASSMETER_DATA_DIR", str(tmp_path / "data"))
    return monkeypatch


@pytest.fixture
def fresh_config(clean_env, tmp_path):
    """Factory for a Config singleton bound to a tmp JSON file and no .env."""
    from core.config import Config

    def _make(settings=None):
        import json
        Config.clear_instance()
        cfg_file = tmp_path / "settings.json"
        if settings is not None:
            cfg_file.write_text(json.dumps(settings), encoding="utf-8")
        return Config(config_file=cfg_file, env_file=tmp_path / "missing.env")

    yield _make
    Config.clear_instance()
