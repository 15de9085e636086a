"""Component port for the decorator pattern."""

from abc import ABC, abstractmethod


class ComponentPort(ABC):
    """Port for objects that decorators can wrap."""

    @abstractmethod
    def execute(self) -> str:
        """Run the component and return a trace of what ran."""
