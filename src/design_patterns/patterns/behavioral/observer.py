"""Observer pattern: a publisher notifying an ordered set of subscribers."""

import threading
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from design_patterns.domain.base.ports.subscriber_port import StateSourcePort, SubscriberPort
from design_patterns.infrastructure.logging.logger import get_logger


class Publisher(StateSourcePort):
    """
    Subject that manages subscribers and notifies them of state changes.

    Subscribers are kept in subscription order and compared by identity, so
    a handle is stored at most once. Subscribing a present handle and
    unsubscribing an absent one are both no-ops.

    Notification works on a snapshot of the subscriber list taken when the
    pass starts: a handle removed by another handle's reaction is still
    notified in that pass, and a handle added during the pass is first
    notified in the next one. A subscriber that raises is logged and the
    pass continues with the remaining subscribers.
    """

    def __init__(self, initial_state: str = ""):
        self._subscribers: List[SubscriberPort] = []
        self._state = initial_state
        self._lock = threading.RLock()
        self._logger = get_logger(__name__)

    def subscribe(self, subscriber: SubscriberPort) -> None:
        """Register a subscriber if it is not already registered."""
        with self._lock:
            if self._index_of(subscriber) is None:
                self._subscribers.append(subscriber)
                self._logger.debug("Subscribed %r", subscriber)

    def unsubscribe(self, subscriber: SubscriberPort) -> None:
        """Unregister a subscriber if it is registered."""
        with self._lock:
            index = self._index_of(subscriber)
            if index is not None:
                del self._subscribers[index]
                self._logger.debug("Unsubscribed %r", subscriber)

    def notify_subscribers(self) -> None:
        """Call ``update`` on every subscriber, in subscription order."""
        with self._lock:
            snapshot = tuple(self._subscribers)

        self._logger.debug("Notifying %d subscribers", len(snapshot))
        for subscriber in snapshot:
            try:
                subscriber.update(self)
            except Exception as e:
                self._logger.error("Subscriber %r failed: %s", subscriber, e, exc_info=True)
                # Continue with other subscribers

    def set_state(self, state: str) -> None:
        """Change the state and notify subscribers."""
        with self._lock:
            self._state = state
        self._logger.info('Publisher: state changed to "%s"', state)
        self.notify_subscribers()

    def main_business_logic(self) -> None:
        """Example business logic: stamp the state with the current time."""
        self.set_state(f"Updated at {datetime.now(timezone.utc).isoformat()}")

    def get_state(self) -> str:
        return self._state

    @property
    def subscribers(self) -> Tuple[SubscriberPort, ...]:
        with self._lock:
            return tuple(self._subscribers)

    def _index_of(self, subscriber: SubscriberPort) -> Optional[int]:
        for index, existing in enumerate(self._subscribers):
            if existing is subscriber:
                return index
        return None

    def __contains__(self, subscriber: object) -> bool:
        with self._lock:
            return any(existing is subscriber for existing in self._subscribers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscribers)


class RecordingSubscriber(SubscriberPort):
    """Subscriber that remembers every state it was notified with."""

    label = "Subscriber"
    template = "[{label}] Notified. Publisher state: {state}"

    def __init__(self, sink: Optional[Callable[[str], None]] = None) -> None:
        self.received_states: List[str] = []
        self._sink = sink
        self._logger = get_logger(__name__)

    def update(self, publisher: StateSourcePort) -> None:
        state = publisher.get_state()
        self.received_states.append(state)
        message = self.describe(state)
        self._logger.info(message)
        if self._sink is not None:
            self._sink(message)

    def describe(self, state: str) -> str:
        return self.template.format(label=self.label, state=state)

    def __repr__(self) -> str:
        return f"<{self.label}>"


class ConcreteSubscriberA(RecordingSubscriber):
    """A concrete subscriber that reacts to publisher updates."""

    label = "ConcreteSubscriberA"


class ConcreteSubscriberB(RecordingSubscriber):
    """Another concrete subscriber with different reaction behavior."""

    label = "ConcreteSubscriberB"
    template = "[{label}] Received update. Current state: {state}"


class CallbackSubscriber(SubscriberPort):
    """Adapts a plain callable taking the publisher into a subscriber."""

    def __init__(self, callback: Callable[[StateSourcePort], None], name: str = ""):
        self._callback = callback
        self.name = name or getattr(callback, "__name__", "callback")

    def update(self, publisher: StateSourcePort) -> None:
        self._callback(publisher)

    def __repr__(self) -> str:
        return f"<CallbackSubscriber {self.name}>"
