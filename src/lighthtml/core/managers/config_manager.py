# src/lighthtml/core/managers/config_manager.py
import json
import logging
from typing import Any, Dict, Optional

from lighthtml.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Read-only access to the bundled settings.json.
    Missing or unreadable settings leave an empty config, so every caller
    falls back to its own default.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._config = {}
            cls._instance.reset()
        return cls._instance

    def get_all(self) -> Dict[str, Any]:
        return self._config

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """Looks up a dotted key such as 'network.time_out'."""
        value = self._config
        for key in key_path.split('.'):
            if not isinstance(value, dict):
                return default
            value = value.get(key)
        return default if value is None else value

    def reset(self):
        """(Re)loads settings.json from the package directory."""
        config_path = PathUtils.get_settings_file()
        if not config_path.exists():
            logger.warning("settings.json not found at %s. Using empty config.", config_path)
            self._config = {}
            return
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                self._config = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Failed to load %s: %s", config_path, e, exc_info=True)
            self._config = {}


config_manager = ConfigManager()
