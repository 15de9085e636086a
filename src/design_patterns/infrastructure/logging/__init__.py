"""Logging infrastructure."""

from design_patterns.infrastructure.logging.logger import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
