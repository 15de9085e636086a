"""
Demonstration drivers for each pattern.

Every driver runs its pattern end to end and returns the narration lines the
CLI prints. Drivers read their settings from the shared configuration manager
unless a DemoConfig is passed in.
"""

from typing import Callable, Dict, List, Optional

from design_patterns.config.manager import ConfigurationManager
from design_patterns.config.schemas import DemoConfig
from design_patterns.domain.core.exceptions import InvalidStateError
from design_patterns.infrastructure.patterns.singleton_access import get_singleton
from design_patterns.patterns.behavioral.observer import (
    ConcreteSubscriberA,
    ConcreteSubscriberB,
    Publisher,
)
from design_patterns.patterns.behavioral.strategy import (
    ConcreteStrategyA,
    ConcreteStrategyB,
    Context,
)
from design_patterns.patterns.creational.builder import CarBuilder, Director, TruckBuilder
from design_patterns.patterns.creational.factory_method import (
    ConcreteCreatorA,
    ConcreteCreatorB,
)
from design_patterns.patterns.creational.prototype import (
    FancyTruck,
    FancyTruckExtras,
    PrototypeRegistry,
    TruckProps,
)
from design_patterns.patterns.creational.singleton import SharedValueHolder
from design_patterns.patterns.structural.decorator import ConcreteComponent, ConcreteDecorator

DemoFunction = Callable[[DemoConfig], List[str]]


def _demo_config(config: Optional[DemoConfig]) -> DemoConfig:
    if config is not None:
        return config
    return get_singleton(ConfigurationManager).get_demo_config()


def run_singleton_demo(config: Optional[DemoConfig] = None) -> List[str]:
    config = _demo_config(config)
    instance = SharedValueHolder.get_instance()
    lines = [f"Initial value: {instance.get_value()!r}"]

    instance.set_value(config.singleton_value)
    lines.append(f"Updated value: {instance.get_value()!r}")

    again = SharedValueHolder.get_instance()
    lines.append(f"Second access returns the same instance: {again is instance}")
    lines.append(f"Value seen through second access: {again.get_value()!r}")
    return lines


def run_factory_method_demo(config: Optional[DemoConfig] = None) -> List[str]:
    lines = []
    for creator in (ConcreteCreatorA(), ConcreteCreatorB()):
        product = creator.create_product()
        lines.append(product.do_stuff())
    return lines


def run_builder_demo(config: Optional[DemoConfig] = None) -> List[str]:
    car_builder = CarBuilder()
    director = Director(car_builder)
    director.make()
    car = car_builder.get_result()

    truck_builder = TruckBuilder()
    director.change_builder(truck_builder)
    director.make()
    truck = truck_builder.get_result()

    return [
        f"Built car: engine={car.engine}, tire={car.tire}, maker={car.maker}",
        f"Built truck: engine={truck.engine}, tire={truck.tire}, maker={truck.maker}",
    ]


def run_prototype_demo(config: Optional[DemoConfig] = None) -> List[str]:
    original = FancyTruck(
        TruckProps(maker="Volvo", engine="V8 diesel", tires=6, capacity_tons=12, vin="VIN-0001"),
        FancyTruckExtras(has_off_road_package=True, light_bar_lumens=12000),
    )
    registry = PrototypeRegistry()
    registry.register("fancy-truck", original)

    clone = registry.create("fancy-truck")
    clone.update(vin="VIN-0002", light_bar_lumens=8000)

    return [
        f"Original: {original.describe()}",
        f"Clone: {clone.describe()}",
        f"Clone is a distinct object: {clone is not original}",
        f"Original VIN after changing the clone: {original.vin}",
    ]


def run_strategy_demo(config: Optional[DemoConfig] = None) -> List[str]:
    config = _demo_config(config)
    context = Context()
    lines = []
    try:
        context.do_something(config.strategy_payload)
    except InvalidStateError as e:
        lines.append(f"Without a strategy: {e}")

    for strategy in (ConcreteStrategyA(), ConcreteStrategyB()):
        context.set_strategy(strategy)
        lines.append(context.do_something(config.strategy_payload))
    return lines


def run_observer_demo(config: Optional[DemoConfig] = None) -> List[str]:
    config = _demo_config(config)
    first_state, second_state = config.observer_states
    lines: List[str] = []

    publisher = Publisher()
    subscriber_a = ConcreteSubscriberA(sink=lines.append)
    subscriber_b = ConcreteSubscriberB(sink=lines.append)
    publisher.subscribe(subscriber_a)
    publisher.subscribe(subscriber_b)

    lines.append(f'Publisher: state changed to "{first_state}"')
    publisher.set_state(first_state)

    publisher.unsubscribe(subscriber_b)
    lines.append(f"Unsubscribed {subscriber_b.label}")

    lines.append(f'Publisher: state changed to "{second_state}"')
    publisher.set_state(second_state)
    return lines


def run_decorator_demo(config: Optional[DemoConfig] = None) -> List[str]:
    component = ConcreteComponent()
    decorated = ConcreteDecorator(component)
    twice = ConcreteDecorator(decorated)
    return [
        f"Plain component: {component.execute()}",
        f"Decorated: {decorated.execute()}",
        f"Decorated twice: {twice.execute()}",
        decorated.extra(),
    ]


DEMOS: Dict[str, DemoFunction] = {
    "singleton": run_singleton_demo,
    "factory-method": run_factory_method_demo,
    "builder": run_builder_demo,
    "prototype": run_prototype_demo,
    "strategy": run_strategy_demo,
    "observer": run_observer_demo,
    "decorator": run_decorator_demo,
}

TITLES = {
    "singleton": "Singleton Pattern",
    "factory-method": "Factory Method Pattern",
    "builder": "Builder Pattern",
    "prototype": "Prototype Pattern",
    "strategy": "Strategy Pattern",
    "observer": "Observer Pattern",
    "decorator": "Decorator Pattern",
}
