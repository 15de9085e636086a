"""Domain ports - the abstract interfaces every pattern implementation honours."""

from design_patterns.domain.base.ports.builder_port import BuilderPort
from design_patterns.domain.base.ports.component_port import ComponentPort
from design_patterns.domain.base.ports.creator_port import CreatorPort, ProductPort
from design_patterns.domain.base.ports.prototype_port import PrototypePort
from design_patterns.domain.base.ports.strategy_port import StrategyPort
from design_patterns.domain.base.ports.subscriber_port import (
    StateSourcePort,
    SubscriberPort,
)

__all__ = [
    "BuilderPort",
    "ComponentPort",
    "CreatorPort",
    "ProductPort",
    "PrototypePort",
    "StateSourcePort",
    "StrategyPort",
    "SubscriberPort",
]
