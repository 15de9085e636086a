"""Builder port for stepwise object construction."""

from abc import ABC, abstractmethod


class BuilderPort(ABC):
    """Port declaring the construction steps shared by all builders."""

    @abstractmethod
    def reset(self) -> None:
        """Discard the current product and start a fresh one."""

    @abstractmethod
    def build_engine(self) -> "BuilderPort":
        """Install the engine."""

    @abstractmethod
    def build_tire(self) -> "BuilderPort":
        """Install the tires."""

    @abstractmethod
    def build_maker(self) -> "BuilderPort":
        """Stamp the maker."""
