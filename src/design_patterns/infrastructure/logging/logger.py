import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, List, Optional

import structlog

from design_patterns.config.schemas.logging_schema import LogDestination, LoggingConfig

# Keys already shown by the handler format or rendered on their own line
_RESERVED_KEYS = ("event", "logger", "level", "timestamp", "exception")


def _render_event(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> str:
    """Render a structlog event as ``event key=value ...``."""
    event = str(event_dict.get("event", ""))
    extras = [
        f"{key}={value!r}"
        for key, value in event_dict.items()
        if key not in _RESERVED_KEYS
    ]
    rendered = " ".join([event] + extras)
    if "exception" in event_dict:
        rendered = f"{rendered}\n{event_dict['exception']}"
    return rendered


class DetailedFormatter(structlog.stdlib.ProcessorFormatter):
    """Formatter that includes caller information for both stdlib and structlog records."""

    def format(self, record: logging.LogRecord) -> str:
        # Add method name and line number to the record
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def _build_formatter(log_format: str) -> logging.Formatter:
    return DetailedFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _render_event,
        ],
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
        ],
        fmt=log_format,
    )


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up logging for the application.

    Standard library loggers and structlog loggers share the same handlers,
    so pattern modules can keep using ``get_logger(__name__)`` while the CLI
    emits structured lifecycle events.

    Args:
        config: Logging configuration. Defaults are used when omitted.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.upper()))

    formatter = _build_formatter(config.format)
    handlers: List[logging.Handler] = []

    if config.destination in (LogDestination.FILE, LogDestination.BOTH):
        log_file = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if config.destination in (LogDestination.CONSOLE, LogDestination.BOTH):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logger = structlog.get_logger("design_patterns").bind()
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination.value,
    )
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the module logger used throughout the package."""
    return logging.getLogger(name)
