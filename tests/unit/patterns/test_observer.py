"""Tests for the publisher/subscriber registry."""

import logging
from typing import List
from unittest.mock import Mock

import pytest

from design_patterns.domain.base.ports.subscriber_port import StateSourcePort, SubscriberPort
from design_patterns.patterns.behavioral.observer import (
    CallbackSubscriber,
    ConcreteSubscriberA,
    ConcreteSubscriberB,
    Publisher,
)

pytestmark = pytest.mark.unit


class TestSubscriber(SubscriberPort):
    """Subscriber that appends its name and the seen state to a shared log."""

    __test__ = False

    def __init__(self, name: str, log: List[str]):
        self.name = name
        self.log = log

    def update(self, publisher: StateSourcePort) -> None:
        self.log.append(f"{self.name}:{publisher.get_state()}")


class TestPublisherSubscriptions:
    """Test subscribe/unsubscribe bookkeeping."""

    def test_subscribe_adds_in_order(self):
        publisher = Publisher()
        first, second = Mock(spec=SubscriberPort), Mock(spec=SubscriberPort)

        publisher.subscribe(first)
        publisher.subscribe(second)

        assert publisher.subscribers == (first, second)
        assert len(publisher) == 2

    def test_duplicate_subscribe_is_noop(self):
        publisher = Publisher()
        subscriber = Mock(spec=SubscriberPort)

        publisher.subscribe(subscriber)
        publisher.subscribe(subscriber)

        assert publisher.subscribers == (subscriber,)

    def test_duplicate_subscribe_notifies_once(self):
        """Subscribing twice results in one notification per pass."""
        publisher = Publisher()
        subscriber = Mock(spec=SubscriberPort)
        publisher.subscribe(subscriber)
        publisher.subscribe(subscriber)

        publisher.notify_subscribers()

        subscriber.update.assert_called_once_with(publisher)

    def test_subscribers_compared_by_identity(self):
        """Equal but distinct subscribers are both kept."""

        class AlwaysEqual(ConcreteSubscriberA):
            def __eq__(self, other):
                return True

            __hash__ = object.__hash__

        publisher = Publisher()
        first, second = AlwaysEqual(), AlwaysEqual()
        publisher.subscribe(first)
        publisher.subscribe(second)

        assert len(publisher) == 2

    def test_unsubscribe_unknown_is_noop(self):
        """Removing a non-member neither raises nor affects other subscribers."""
        publisher = Publisher()
        member = Mock(spec=SubscriberPort)
        stranger = Mock(spec=SubscriberPort)
        publisher.subscribe(member)

        publisher.unsubscribe(stranger)
        publisher.notify_subscribers()

        assert publisher.subscribers == (member,)
        member.update.assert_called_once_with(publisher)
        stranger.update.assert_not_called()

    def test_unsubscribe_twice_is_noop(self):
        publisher = Publisher()
        subscriber = Mock(spec=SubscriberPort)
        publisher.subscribe(subscriber)

        publisher.unsubscribe(subscriber)
        publisher.unsubscribe(subscriber)

        assert len(publisher) == 0

    def test_contains(self):
        publisher = Publisher()
        subscriber = ConcreteSubscriberA()
        publisher.subscribe(subscriber)

        assert subscriber in publisher
        assert ConcreteSubscriberA() not in publisher

    def test_resubscribe_moves_to_end(self):
        """A handle subscribed again after removal goes to the back of the order."""
        log: List[str] = []
        publisher = Publisher()
        a, b = TestSubscriber("a", log), TestSubscriber("b", log)
        publisher.subscribe(a)
        publisher.subscribe(b)

        publisher.unsubscribe(a)
        publisher.subscribe(a)
        publisher.set_state("s")

        assert log == ["b:s", "a:s"]


class TestPublisherNotification:
    """Test notification dispatch."""

    def test_state_defaults_to_empty(self):
        assert Publisher().get_state() == ""

    def test_set_state_updates_then_notifies(self):
        """Subscribers observe the new state during notification."""
        log: List[str] = []
        publisher = Publisher()
        publisher.subscribe(TestSubscriber("a", log))

        publisher.set_state("X")

        assert publisher.get_state() == "X"
        assert log == ["a:X"]

    def test_notifies_in_subscription_order(self):
        log: List[str] = []
        publisher = Publisher()
        for name in ("a", "b", "c"):
            publisher.subscribe(TestSubscriber(name, log))

        publisher.set_state("s")

        assert log == ["a:s", "b:s", "c:s"]

    def test_unsubscribed_handle_skipped_order_kept(self):
        """After removing b only the remaining handles run, in original order."""
        log: List[str] = []
        publisher = Publisher()
        a, b, c = (TestSubscriber(name, log) for name in ("a", "b", "c"))
        for subscriber in (a, b, c):
            publisher.subscribe(subscriber)

        publisher.unsubscribe(b)
        publisher.set_state("s")

        assert log == ["a:s", "c:s"]

    def test_notify_with_no_subscribers(self):
        publisher = Publisher()

        publisher.notify_subscribers()
        publisher.set_state("nobody listens")

        assert publisher.get_state() == "nobody listens"

    def test_unsubscribe_during_notification_uses_snapshot(self):
        """A handle removed by an earlier handle's reaction still runs in that pass."""
        log: List[str] = []
        publisher = Publisher()
        b = TestSubscriber("b", log)

        def remove_b(pub):
            log.append("remover")
            publisher.unsubscribe(b)

        publisher.subscribe(CallbackSubscriber(remove_b))
        publisher.subscribe(b)

        publisher.notify_subscribers()
        assert log == ["remover", "b:"]

        log.clear()
        publisher.notify_subscribers()
        assert log == ["remover"]

    def test_subscribe_during_notification_waits_for_next_pass(self):
        log: List[str] = []
        publisher = Publisher()
        late = TestSubscriber("late", log)

        publisher.subscribe(CallbackSubscriber(lambda pub: publisher.subscribe(late)))

        publisher.set_state("first")
        assert log == []

        publisher.set_state("second")
        assert log == ["late:second"]

    def test_failing_subscriber_does_not_stop_others(self, caplog):
        log: List[str] = []
        publisher = Publisher()

        def explode(pub):
            raise RuntimeError("boom")

        publisher.subscribe(CallbackSubscriber(explode, name="exploder"))
        publisher.subscribe(TestSubscriber("after", log))

        with caplog.at_level(logging.ERROR):
            publisher.set_state("s")

        assert log == ["after:s"]
        assert any("exploder" in message and "boom" in message for message in caplog.messages)

    def test_main_business_logic_stamps_state(self):
        publisher = Publisher()
        subscriber = ConcreteSubscriberA()
        publisher.subscribe(subscriber)

        publisher.main_business_logic()

        assert publisher.get_state().startswith("Updated at ")
        assert subscriber.received_states == [publisher.get_state()]


class TestConcreteSubscribers:
    """Test the bundled subscribers."""

    def test_records_states_and_reports_to_sink(self):
        lines: List[str] = []
        publisher = Publisher()
        subscriber_a = ConcreteSubscriberA(sink=lines.append)
        subscriber_b = ConcreteSubscriberB(sink=lines.append)
        publisher.subscribe(subscriber_a)
        publisher.subscribe(subscriber_b)

        publisher.set_state("X")

        assert subscriber_a.received_states == ["X"]
        assert subscriber_b.received_states == ["X"]
        assert lines == [
            "[ConcreteSubscriberA] Notified. Publisher state: X",
            "[ConcreteSubscriberB] Received update. Current state: X",
        ]

    def test_subscriber_logs_reaction(self, caplog):
        publisher = Publisher()
        publisher.subscribe(ConcreteSubscriberB())

        with caplog.at_level(logging.INFO, logger="design_patterns.patterns.behavioral.observer"):
            publisher.set_state("Y")

        assert "[ConcreteSubscriberB] Received update. Current state: Y" in caplog.messages

    def test_callback_subscriber_receives_publisher(self):
        seen = []
        publisher = Publisher(initial_state="ready")
        publisher.subscribe(CallbackSubscriber(lambda pub: seen.append(pub.get_state())))

        publisher.notify_subscribers()

        assert seen == ["ready"]

    def test_callback_subscriber_name_defaults_to_function_name(self):
        def on_change(pub):
            pass

        assert CallbackSubscriber(on_change).name == "on_change"
        assert CallbackSubscriber(on_change, name="custom").name == "custom"
