"""Behavioral patterns."""

from design_patterns.patterns.behavioral.observer import (
    CallbackSubscriber,
    ConcreteSubscriberA,
    ConcreteSubscriberB,
    Publisher,
)
from design_patterns.patterns.behavioral.strategy import (
    ConcreteStrategyA,
    ConcreteStrategyB,
    Context,
)

__all__ = [
    "CallbackSubscriber",
    "ConcreteStrategyA",
    "ConcreteStrategyB",
    "ConcreteSubscriberA",
    "ConcreteSubscriberB",
    "Context",
    "Publisher",
]
