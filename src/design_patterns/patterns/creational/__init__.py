"""Creational patterns."""

from design_patterns.patterns.creational.builder import (
    Car,
    CarBuilder,
    Director,
    TruckBuilder,
)
from design_patterns.patterns.creational.factory_method import (
    ConcreteCreatorA,
    ConcreteCreatorB,
    ConcreteProductA,
    ConcreteProductB,
)
from design_patterns.patterns.creational.prototype import (
    FancyTruck,
    FancyTruckExtras,
    PrototypeRegistry,
    TruckProps,
)
from design_patterns.patterns.creational.singleton import SharedValueHolder

__all__ = [
    "Car",
    "CarBuilder",
    "ConcreteCreatorA",
    "ConcreteCreatorB",
    "ConcreteProductA",
    "ConcreteProductB",
    "Director",
    "FancyTruck",
    "FancyTruckExtras",
    "PrototypeRegistry",
    "SharedValueHolder",
    "TruckBuilder",
    "TruckProps",
]
