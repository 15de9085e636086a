"""Configuration schemas."""

from .app_schema import AppConfig, validate_config
from .demo_schema import PATTERN_NAMES, DemoConfig
from .logging_schema import LogDestination, LoggingConfig

__all__ = [
    "AppConfig",
    "DemoConfig",
    "LogDestination",
    "LoggingConfig",
    "PATTERN_NAMES",
    "validate_config",
]
