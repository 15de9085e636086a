"""Process-wide registry of singleton instances."""

import threading
from typing import Any, Dict, Optional, Type, TypeVar, cast

from design_patterns.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Registry holding at most one instance per registered class.

    The registry is itself a singleton. Creation of both the registry and the
    instances it hands out uses double-checked locking, so concurrent first
    calls always observe the same object.

    Thread-safe singleton implementation.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        """Initialize singleton registry."""
        self._instances: Dict[Type[Any], Any] = {}
        self._instances_lock = threading.RLock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get the process-wide registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of ``singleton_class``, creating it on first use.

        Constructor arguments are only used when the instance is created;
        later calls return the existing instance unchanged.
        """
        instance = self._instances.get(singleton_class)
        if instance is None:
            with self._instances_lock:
                instance = self._instances.get(singleton_class)
                if instance is None:
                    instance = singleton_class(*args, **kwargs)
                    self._instances[singleton_class] = instance
                    self._logger.debug("Created singleton instance of %s", singleton_class.__name__)
        return cast(T, instance)

    def register(self, singleton_class: Type[T], instance: T) -> None:
        """Register an existing instance, replacing any previous one."""
        with self._instances_lock:
            self._instances[singleton_class] = instance
        self._logger.debug("Registered singleton instance of %s", singleton_class.__name__)

    def has(self, singleton_class: Type[Any]) -> bool:
        """Check whether an instance of ``singleton_class`` exists."""
        return singleton_class in self._instances

    def reset(self, singleton_class: Optional[Type[Any]] = None) -> None:
        """Drop one instance, or every instance when no class is given."""
        with self._instances_lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)
