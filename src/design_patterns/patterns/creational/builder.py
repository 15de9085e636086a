"""Builder pattern: stepwise construction of cars and trucks."""

from dataclasses import dataclass
from typing import Optional

from design_patterns.domain.base.ports.builder_port import BuilderPort
from design_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Car:
    """Product assembled by CarBuilder."""
    engine: Optional[str] = None
    tire: Optional[str] = None
    maker: Optional[str] = None


@dataclass
class Truck:
    """Product assembled by TruckBuilder."""
    engine: Optional[str] = None
    tire: Optional[str] = None
    maker: Optional[str] = None


class CarBuilder(BuilderPort):
    """Concrete builder used to construct Car objects."""

    def __init__(self) -> None:
        self._car = Car()

    def reset(self) -> None:
        self._car = Car()

    def build_engine(self) -> "CarBuilder":
        self._car.engine = "Car Engine"
        return self

    def build_tire(self) -> "CarBuilder":
        self._car.tire = "Car Tire"
        return self

    def build_maker(self) -> "CarBuilder":
        self._car.maker = "Car Maker"
        return self

    def get_result(self) -> Car:
        """Return the car assembled so far."""
        return self._car


class TruckBuilder(BuilderPort):
    """Concrete builder used to construct Truck objects."""

    def __init__(self) -> None:
        self._truck = Truck()

    def reset(self) -> None:
        self._truck = Truck()

    def build_engine(self) -> "TruckBuilder":
        self._truck.engine = "Truck Engine"
        return self

    def build_tire(self) -> "TruckBuilder":
        self._truck.tire = "Truck Tire"
        return self

    def build_maker(self) -> "TruckBuilder":
        self._truck.maker = "Truck Maker"
        return self

    def get_result(self) -> Truck:
        """Return the truck assembled so far."""
        return self._truck


class Director:
    """
    Runs a builder's steps in the standard order.

    The director knows the sequence, the builder knows the parts. Builders
    can be swapped at runtime with ``change_builder``.
    """

    def __init__(self, builder: BuilderPort):
        self._builder = builder

    @property
    def builder(self) -> BuilderPort:
        return self._builder

    def change_builder(self, builder: BuilderPort) -> None:
        self._builder = builder

    def make(self) -> None:
        """Build a complete product: reset, engine, tire, maker."""
        logger.debug("Director building with %s", type(self._builder).__name__)
        self._builder.reset()
        self._builder.build_engine()
        self._builder.build_tire()
        self._builder.build_maker()
