# src/contentguard/core/managers/config_manager.py
import json
import logging
from typing import Any, Dict, Optional, Tuple

from contentguard.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Singleton holding the toolchain settings: logging levels ('debug'), formatter
    options ('formatter'), guideline extensions and score weights ('content'),
    the structure audit ('semantic') and CLI behaviour ('cli').

    Values come from settings.json and can be overridden for a single run
    with `--set key=value` on the command line.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self._config: Dict[str, Any] = {}
        self.reset()
        logger.debug("ConfigManager initialized.")

    def get_all(self) -> Dict[str, Any]:
        return self._config

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Safely retrieves a nested value from the configuration.
        e.g., 'formatter.max_line_length'.
        """
        value = self._config
        for key in key_path.split('.'):
            if not isinstance(value, dict):
                return default
            value = value.get(key)
        return value if value is not None else default

    def section(self, name: str) -> Dict[str, Any]:
        """A copy of one top-level settings section; empty when missing or not a mapping."""
        value = self._config.get(name)
        return dict(value) if isinstance(value, dict) else {}

    def set_nested(self, key_path: str, value: Any) -> None:
        """
        Sets a nested value in the in-memory configuration, creating sections as needed.

        Raises:
            ValueError: If a key on the path already holds a non-section value.
        """
        keys = key_path.split('.')
        d = self._config
        for key in keys[:-1]:
            d = d.setdefault(key, {})
            if not isinstance(d, dict):
                raise ValueError(f"Cannot set '{key_path}': '{key}' is not a settings section")
        d[keys[-1]] = value
        logger.info("Configuration updated: %s = %r", key_path, value)

    def apply_override(self, assignment: str) -> Tuple[str, Any]:
        """
        Applies one 'key.path=value' override. The value is read as JSON
        (numbers, booleans, lists, objects) and kept as a plain string otherwise.

        Returns:
            Tuple[str, Any]: The key path and the stored value.

        Raises:
            ValueError: If the assignment has no '=' or an empty key.
        """
        key_path, sep, raw = assignment.partition("=")
        key_path = key_path.strip()
        if not sep or not key_path or "" in key_path.split('.'):
            raise ValueError(f"Invalid setting '{assignment}', expected KEY=VALUE")
        try:
            value = json.loads(raw)
        except json.JSONDecodeError:
            value = raw
        self.set_nested(key_path, value)
        return key_path, value

    def reset(self):
        """Reloads the configuration from settings.json, dropping every override."""
        config_path = PathUtils.get_settings_file()
        if not config_path.exists():
            logger.warning("settings.json not found at %s. Using empty config.", config_path)
            self._config = {}
            return
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load settings.json: %s", e, exc_info=True)
            self._config = {}
            return
        if not isinstance(loaded, dict):
            logger.error("settings.json must contain a JSON object, got %s.", type(loaded).__name__)
            loaded = {}
        self._config = loaded
        logger.debug("Configuration has been (re)loaded from settings.json.")


# The global singleton instance that the entire application will use.
config_manager = ConfigManager()
