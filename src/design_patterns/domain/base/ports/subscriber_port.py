"""Subscriber port for publisher/subscriber notifications."""

from abc import ABC, abstractmethod


class StateSourcePort(ABC):
    """Read-only view of a publisher handed to subscribers on notification."""

    @abstractmethod
    def get_state(self) -> str:
        """Return the publisher's current state."""


class SubscriberPort(ABC):
    """Port for anything that reacts to publisher notifications."""

    @abstractmethod
    def update(self, publisher: StateSourcePort) -> None:
        """React to a state change of the given publisher."""
