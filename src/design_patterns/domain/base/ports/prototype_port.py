"""Prototype port for self-copying objects."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T", bound="PrototypePort")


class PrototypePort(ABC, Generic[T]):
    """Port for objects able to produce an independent copy of themselves."""

    @abstractmethod
    def clone(self) -> T:
        """Return a new instance equal to, but independent of, this one."""
