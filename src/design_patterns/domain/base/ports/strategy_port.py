"""Strategy port for interchangeable behaviors."""

from abc import ABC, abstractmethod


class StrategyPort(ABC):
    """Port for a behavior that a context delegates to."""

    @abstractmethod
    def execute(self, data: str) -> str:
        """Process the given data and return a description of the outcome."""
