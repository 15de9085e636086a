"""Lazy singleton holding one shared text value."""

import threading
from typing import Optional

from design_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

_CONSTRUCTION_TOKEN = object()


class SharedValueHolder:
    """
    Globally accessible, lazily created container for a single text value.

    Only one instance exists per process. It is created on the first call to
    ``get_instance()``; calling the class directly is rejected, so the
    accessor is the only construction path.

    Thread-safe singleton implementation.
    """

    _instance: Optional["SharedValueHolder"] = None
    _lock = threading.Lock()

    def __init__(self, _token: object = None) -> None:
        if _token is not _CONSTRUCTION_TOKEN:
            raise TypeError(
                f"{type(self).__name__} cannot be instantiated directly; "
                "use get_instance()"
            )
        self._value = ""

    @classmethod
    def get_instance(cls) -> "SharedValueHolder":
        """Return the shared instance, creating it on first access."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(_CONSTRUCTION_TOKEN)
                    logger.debug("Created shared %s instance", cls.__name__)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance so the next access builds a fresh one."""
        with cls._lock:
            cls._instance = None

    def get_value(self) -> str:
        """Return the stored value, empty until first set."""
        return self._value

    def set_value(self, value: str) -> None:
        """Overwrite the stored value for every holder of the instance."""
        self._value = value
        logger.debug("Shared value set to %r", value)
