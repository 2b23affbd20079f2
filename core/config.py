"""
Configuration Manager with Environment Variables Support

Usage:
    from core.config import Config, strength_config_from_settings

    cfg = Config.get_instance()
    level = cfg.get("LOG_LEVEL", "INFO")
    strength_config = strength_config_from_settings(cfg)

Priority order for every key:
    1. Environment variable (.env is loaded into the environment first)
    2. JSON configuration file (config/settings.json)
    3. Default value
"""
import os
import json
import logging
from typing import Any, Optional, Dict
from pathlib import Path

from dotenv import load_dotenv

from constants import SettingKeys
from core.paths import config_path
from core.singleton import SingletonMeta
from exceptions import ConfigurationError, InvalidValueError

logger = logging.getLogger(__name__)

_TRUE_VALUES = ('true', '1', 'yes', 'on')
_FALSE_VALUES = ('false', '0', 'no', 'off')


class Config(metaclass=SingletonMeta):
    """
    Unified configuration manager that supports:
    - Environment variables (.env)
    - JSON configuration files
    - Default values
    - Type conversion
    """

    def __init__(self, config_file: Optional[Path] = None, env_file: Optional[Path] = None):
        self._env_loaded = False
        self._config_cache: Dict[str, Any] = {}
        self._config_file_path = Path(config_file) if config_file else config_path("settings.json")
        self._env_file_path = Path(env_file) if env_file else Path(".env")

        self._load_env()
        self._load_json_config()

    def _load_env(self):
        """Load environment variables from .env file"""
        if self._env_file_path.exists():
            load_dotenv(self._env_file_path)
            self._env_loaded = True
            logger.info(f"Environment variables loaded from {self._env_file_path}")
        else:
            logger.debug(".env file not found, using system environment only")

    def _load_json_config(self):
        """Load configuration from JSON file"""
        if not self._config_file_path.exists():
            logger.debug(f"Config file not found: {self._config_file_path}")
            self._config_cache = {}
            return

        try:
            with open(self._config_file_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load config file: {e}")
            self._config_cache = {}
            return

        if not isinstance(loaded, dict):
            logger.error(f"Config file {self._config_file_path} must hold a JSON object")
            self._config_cache = {}
            return

        self._config_cache = loaded
        logger.info(f"Configuration loaded from {self._config_file_path}")

    def get(
            self,
            key: str,
            default: Any = None,
            required: bool = False,
            from_env: bool = True
    ) -> Any:
        """
        Get configuration value.

        Raises:
            ConfigurationError: If required=True and key not found
        """
        if from_env:
            env_value = os.getenv(key)
            if env_value is not None:
                return env_value

        if key in self._config_cache:
            return self._config_cache[key]

        if default is not None:
            return default

        if required:
            raise ConfigurationError(
                f"Required configuration '{key}' not found. "
                f"Set it in .env or {self._config_file_path}"
            )

        return None

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value"""
        value = self.get(key, default)

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            return value.strip().lower() in _TRUE_VALUES

        return bool(value)

    def get_int(self, key: str, default: int = 0) -> int:
        """Get integer configuration value"""
        value = self.get(key, default)

        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid int value for '{key}': {value}, using default")
            return default

    def set(self, key: str, value: Any, persist: bool = False):
        """
        Set configuration value.

        Args:
            key: Configuration key
            value: Configuration value
            persist: Save to JSON config file
        """
        self._config_cache[key] = value

        if persist:
            self._save_json_config()

    def _save_json_config(self):
        """Save configuration to JSON file"""
        try:
            self._config_file_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self._config_file_path, 'w', encoding='utf-8') as f:
                json.dump(self._config_cache, f, indent=4, ensure_ascii=False)

            logger.info(f"Configuration saved to {self._config_file_path}")
        except OSError as e:
            raise ConfigurationError(
                "Failed to save config file", detail=str(e)
            ) from e

    def reload(self):
        """Reload configuration from files"""
        self._load_env()
        self._load_json_config()
        logger.info("Configuration reloaded")


# ─── Strength options ────────────────────────────────────────────────────────

_STRENGTH_FLAG_KEYS = {
    "require_uppercase": SettingKeys.REQUIRE_UPPERCASE,
    "require_lowercase": SettingKeys.REQUIRE_LOWERCASE,
    "require_numbers": SettingKeys.REQUIRE_NUMBERS,
    "require_special_chars": SettingKeys.REQUIRE_SPECIAL_CHARS,
    "prevent_repeated_chars": SettingKeys.PREVENT_REPEATED_CHARS,
    "prevent_common_patterns": SettingKeys.PREVENT_COMMON_PATTERNS,
}


def _strict_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Config '{key}' must be a boolean", detail=f"got {value!r}")


def _strict_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"Config '{key}' must be an integer", detail=f"got {value!r}")
    try:
        return int(str(value).strip())
    except ValueError:
        raise ConfigurationError(
            f"Config '{key}' must be an integer", detail=f"got {value!r}"
        ) from None


def strength_config_from_settings(cfg: Optional[Config] = None):
    """
    Build a StrengthConfig from PASSMETER_* settings.

    Unset keys keep the StrengthConfig defaults. Malformed values raise
    ConfigurationError instead of silently falling back.
    """
    from utils.password_utils import StrengthConfig

    cfg = cfg or Config.get_instance()
    options: Dict[str, Any] = {}

    raw_min_length = cfg.get(SettingKeys.MIN_LENGTH)
    if raw_min_length is not None:
        options["min_length"] = _strict_int(SettingKeys.MIN_LENGTH, raw_min_length)

    for field_name, key in _STRENGTH_FLAG_KEYS.items():
        raw = cfg.get(key)
        if raw is not None:
            options[field_name] = _strict_bool(key, raw)

    try:
        strength_config = StrengthConfig(**options)
    except InvalidValueError as e:
        raise ConfigurationError("Invalid strength configuration", detail=str(e)) from e

    logger.debug(f"Strength configuration: {strength_config}")
    return strength_config


def get_log_level() -> str:
    """Get logging level"""
    return str(Config.get_instance().get(SettingKeys.LOG_LEVEL, default="INFO")).upper()
