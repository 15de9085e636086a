"""Prototype pattern: trucks that copy themselves, plus a registry of named prototypes."""

import threading
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, List, Optional

from design_patterns.domain.base.ports.prototype_port import PrototypePort
from design_patterns.domain.core.exceptions import PrototypeNotFoundError
from design_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


@dataclass
class TruckProps:
    """Flat value bag describing a truck."""

    maker: str
    engine: str
    tires: int
    capacity_tons: float
    vin: Optional[str] = None


@dataclass
class FancyTruckExtras:
    """Extension value bag carried by fancy trucks."""

    has_off_road_package: bool
    light_bar_lumens: int


class Truck(PrototypePort["Truck"]):
    """
    Concrete prototype representing a generic truck.

    The truck keeps its own copy of the props it was built from, so neither
    the caller's props nor any clone share state with it.
    """

    def __init__(self, props: TruckProps):
        self._props = replace(props)

    def clone(self) -> "Truck":
        return Truck(self._props)

    @property
    def props(self) -> TruckProps:
        """A copy of the current props."""
        return replace(self._props)

    @property
    def maker(self) -> str:
        return self._props.maker

    @property
    def engine(self) -> str:
        return self._props.engine

    @property
    def tires(self) -> int:
        return self._props.tires

    @property
    def capacity_tons(self) -> float:
        return self._props.capacity_tons

    @property
    def vin(self) -> Optional[str]:
        return self._props.vin

    def update(self, **changes: Any) -> None:
        """
        Change fields in place.

        Raises:
            TypeError: If a name is not a truck field
        """
        self._props = replace(self._props, **changes)

    def describe(self) -> str:
        """Human-readable summary of the truck."""
        return (
            f"{self._props.maker} truck with {self._props.engine} engine, "
            f"{self._props.tires} tires, capacity {self._props.capacity_tons} tons"
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._props == other._props

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._props!r})"


class FancyTruck(Truck):
    """Truck with an additional bag of upgrade fields."""

    _EXTRA_FIELDS = frozenset(f.name for f in fields(FancyTruckExtras))

    def __init__(self, props: TruckProps, extras: FancyTruckExtras):
        super().__init__(props)
        self._extras = replace(extras)

    def clone(self) -> "FancyTruck":
        return FancyTruck(self._props, self._extras)

    @property
    def extras(self) -> FancyTruckExtras:
        """A copy of the current extras."""
        return replace(self._extras)

    @property
    def has_off_road_package(self) -> bool:
        return self._extras.has_off_road_package

    @property
    def light_bar_lumens(self) -> int:
        return self._extras.light_bar_lumens

    def update(self, **changes: Any) -> None:
        extra_changes = {k: v for k, v in changes.items() if k in self._EXTRA_FIELDS}
        base_changes = {k: v for k, v in changes.items() if k not in self._EXTRA_FIELDS}
        # Validate both parts before mutating either
        props = replace(self._props, **base_changes)
        extras = replace(self._extras, **extra_changes)
        self._props, self._extras = props, extras

    def describe(self) -> str:
        off_road = (
            "with off-road package" if self._extras.has_off_road_package else "standard trim"
        )
        return f"{super().describe()}, {off_road}, light bar: {self._extras.light_bar_lumens} lm"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._props == other._props and self._extras == other._extras

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._props!r}, {self._extras!r})"


class PrototypeRegistry:
    """
    Catalog of named prototypes.

    ``create`` never hands out a registered prototype itself, only clones of
    it, so callers cannot alter the catalog through what they receive.
    """

    def __init__(self) -> None:
        self._prototypes: Dict[str, PrototypePort] = {}
        self._lock = threading.Lock()

    def register(self, name: str, prototype: PrototypePort) -> None:
        """Register a prototype, replacing any previous one with the same name."""
        with self._lock:
            self._prototypes[name] = prototype
        logger.debug("Registered prototype %s", name)

    def unregister(self, name: str) -> None:
        """Remove a prototype; unknown names are ignored."""
        with self._lock:
            self._prototypes.pop(name, None)

    def create(self, name: str) -> PrototypePort:
        """
        Clone the prototype registered under ``name``.

        Raises:
            PrototypeNotFoundError: If no prototype has that name
        """
        with self._lock:
            prototype = self._prototypes.get(name)
        if prototype is None:
            raise PrototypeNotFoundError(name)
        return prototype.clone()

    def names(self) -> List[str]:
        with self._lock:
            return list(self._prototypes)

    def __contains__(self, name: object) -> bool:
        return name in self._prototypes

    def __len__(self) -> int:
        return len(self._prototypes)
