"""Configuration package."""

from design_patterns.config.manager import ConfigurationManager
from design_patterns.config.schemas import (
    PATTERN_NAMES,
    AppConfig,
    DemoConfig,
    LogDestination,
    LoggingConfig,
)

__all__ = [
    "AppConfig",
    "ConfigurationManager",
    "DemoConfig",
    "LogDestination",
    "LoggingConfig",
    "PATTERN_NAMES",
]
