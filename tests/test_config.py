# -*- coding: utf-8 -*-
"""
tests/test_config.py
======================
Tests for core.config — env / JSON / default precedence and the
strength options built from them.
"""
import json
import os

import pytest
from core.config import Config, get_log_level, strength_config_from_settings
from exceptions import ConfigurationError
from utils.password_utils import StrengthConfig


class TestConfig:

    def test_is_singleton(self, fresh_config):
        cfg = fresh_config({})
        assert Config.get_instance() is cfg

    def test_json_value(self, fresh_config):
        cfg = fresh_config({"PASSMETER_MIN_LENGTH": 10})
        assert cfg.get("PASSMETER_MIN_LENGTH") == 10

    def test_env_overrides_json(self, fresh_config, clean_env):
        clean_env.setenv("PASSMETER_MIN_LENGTH", "14")
        cfg = fresh_config({"PASSMETER_MIN_LENGTH": 10})
        assert cfg.get_int("PASSMETER_MIN_LENGTH") == 14

    def test_default_when_missing(self, fresh_config):
        cfg = fresh_config({})
        assert cfg.get("NOPE", "fallback") == "fallback"
        assert cfg.get("NOPE") is None

    def test_required_missing_raises(self, fresh_config):
        cfg = fresh_config({})
        with pytest.raises(ConfigurationError):
            cfg.get("NOPE", required=True)

    def test_get_bool_strings(self, fresh_config, clean_env):
        clean_env.setenv("PASSMETER_REQUIRE_NUMBERS", "off")
        cfg = fresh_config({})
        assert cfg.get_bool("PASSMETER_REQUIRE_NUMBERS", True) is False

    def test_broken_json_falls_back_to_empty(self, clean_env, tmp_path):
        Config.clear_instance()
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        cfg = Config(config_file=bad, env_file=tmp_path / "none.env")
        assert cfg.get("PASSMETER_MIN_LENGTH") is None
        Config.clear_instance()

    def test_set_persist(self, fresh_config, tmp_path):
        cfg = fresh_config({})
        cfg.set("PASSMETER_MIN_LENGTH", 11, persist=True)
        assert '"PASSMETER_MIN_LENGTH": 11' in (tmp_path / "settings.json").read_text(encoding="utf-8")

    def test_reload_picks_up_rewritten_json(self, fresh_config, tmp_path):
        cfg = fresh_config({"PASSMETER_MIN_LENGTH": 10})
        (tmp_path / "settings.json").write_text(
            json.dumps({"PASSMETER_MIN_LENGTH": 16}), encoding="utf-8"
        )
        assert cfg.get("PASSMETER_MIN_LENGTH") == 10
        cfg.reload()
        assert cfg.get("PASSMETER_MIN_LENGTH") == 16
        assert strength_config_from_settings(cfg).min_length == 16

    def test_env_file_loaded(self, clean_env, tmp_path):
        Config.clear_instance()
        env_file = tmp_path / ".env"
        env_file.write_text("PASSMETER_MIN_LENGTH=9\n", encoding="utf-8")
        try:
            cfg = Config(config_file=tmp_path / "none.json", env_file=env_file)
            assert cfg.get_int("PASSMETER_MIN_LENGTH") == 9
        finally:
            # load_dotenv writes straight into os.environ
            os.environ.pop("PASSMETER_MIN_LENGTH", None)
            Config.clear_instance()


class TestStrengthConfigFromSettings:

    def test_defaults_when_unset(self, fresh_config):
        assert strength_config_from_settings(fresh_config({})) == StrengthConfig()

    def test_from_json(self, fresh_config):
        cfg = fresh_config({
            "PASSMETER_MIN_LENGTH": 12,
            "PASSMETER_REQUIRE_SPECIAL_CHARS": False,
        })
        sc = strength_config_from_settings(cfg)
        assert sc.min_length == 12
        assert sc.require_special_chars is False
        assert sc.require_uppercase is True

    def test_from_env_strings(self, fresh_config, clean_env):
        clean_env.setenv("PASSMETER_MIN_LENGTH", " 6 ")
        clean_env.setenv("PASSMETER_PREVENT_COMMON_PATTERNS", "no")
        sc = strength_config_from_settings(fresh_config({}))
        assert sc.min_length == 6
        assert sc.prevent_common_patterns is False

    @pytest.mark.parametrize("key,value", [
        ("PASSMETER_MIN_LENGTH", "eight"),
        ("PASSMETER_MIN_LENGTH", "-3"),
        ("PASSMETER_REQUIRE_NUMBERS", "maybe"),
    ])
    def test_malformed_values_raise(self, fresh_config, clean_env, key, value):
        clean_env.setenv(key, value)
        with pytest.raises(ConfigurationError):
            strength_config_from_settings(fresh_config({}))

    def test_bool_min_length_rejected(self, fresh_config):
        with pytest.raises(ConfigurationError):
            strength_config_from_settings(fresh_config({"PASSMETER_MIN_LENGTH": True}))


def test_log_level(fresh_config, clean_env):
    fresh_config({})
    assert get_log_level() == "INFO"
    clean_env.setenv("LOG_LEVEL", "debug")
    assert get_log_level() == "DEBUG"
