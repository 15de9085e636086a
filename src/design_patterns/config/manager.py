"""Unified configuration management for the application."""
from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from design_patterns.config.schemas import AppConfig, DemoConfig, LoggingConfig
from design_patterns.domain.core.exceptions import ConfigurationError


logger = logging.getLogger(__name__)

ENV_PREFIX = "DESIGN_PATTERNS_"

# Environment variable suffix -> (section, key)
ENV_OVERRIDES = {
    "LOG_LEVEL": ("logging", "level"),
    "LOG_DESTINATION": ("logging", "destination"),
    "LOG_FILE": ("logging", "file_path"),
}


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is read lazily from an optional JSON or YAML file, then
    environment variable overrides are applied and the result is validated
    against the pydantic schemas.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self.load_from_file(self._config_file)

        config_data = self.apply_environment_overrides(config_data)

        try:
            app_config = AppConfig.from_dict(config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        logger.debug("Configuration loaded from %s", self._config_file or "defaults")
        return app_config

    @staticmethod
    def load_from_file(config_file: str) -> Dict[str, Any]:
        """Read a JSON or YAML configuration file into a dictionary."""
        path = Path(config_file)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {config_file}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping at the top level"
            )
        return data

    @staticmethod
    def apply_environment_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply ``DESIGN_PATTERNS_*`` environment variables on top of file values."""
        result = dict(config_data)
        for suffix, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(f"{ENV_PREFIX}{suffix}")
            if value is None:
                continue
            section_data = dict(result.get(section) or {})
            section_data[key] = value
            result[section] = section_data
            logger.debug("Applied environment override %s%s", ENV_PREFIX, suffix)
        return result

    def get_logging_config(self) -> LoggingConfig:
        return self.app_config.logging

    def get_demo_config(self) -> DemoConfig:
        return self.app_config.demo

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None
