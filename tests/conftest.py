import logging

import pytest
import structlog

from design_patterns.infrastructure.patterns.singleton_registry import SingletonRegistry
from design_patterns.patterns.creational.singleton import SharedValueHolder


@pytest.fixture(autouse=True)
def reset_singletons():
    """Give every test a fresh shared holder and an empty singleton registry."""
    SharedValueHolder.reset_instance()
    SingletonRegistry.get_instance().reset()
    yield
    SharedValueHolder.reset_instance()
    SingletonRegistry.get_instance().reset()


@pytest.fixture
def restore_logging():
    """Undo handler and structlog changes made by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def demo_config():
    from design_patterns.config.schemas import DemoConfig

    return DemoConfig()
