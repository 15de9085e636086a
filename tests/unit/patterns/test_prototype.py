"""Tests for prototype trucks and the prototype registry."""

import pytest

from design_patterns.domain.core.exceptions import PrototypeNotFoundError, ResourceNotFoundError
from design_patterns.patterns.creational.prototype import (
    FancyTruck,
    FancyTruckExtras,
    PrototypeRegistry,
    Truck,
    TruckProps,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def props():
    return TruckProps(maker="Volvo", engine="V8 diesel", tires=6, capacity_tons=12, vin="VIN-1")


@pytest.fixture
def extras():
    return FancyTruckExtras(has_off_road_package=True, light_bar_lumens=12000)


class TestTruck:
    """Test cases for Truck."""

    def test_clone_is_equal_but_distinct(self, props):
        truck = Truck(props)

        copy = truck.clone()

        assert copy == truck
        assert copy is not truck
        assert type(copy) is Truck

    def test_mutating_clone_leaves_original(self, props):
        truck = Truck(props)
        copy = truck.clone()

        copy.update(vin="VIN-2", tires=8)

        assert copy.vin == "VIN-2"
        assert copy.tires == 8
        assert truck.vin == "VIN-1"
        assert truck.tires == 6
        assert copy != truck

    def test_constructor_copies_props(self, props):
        truck = Truck(props)

        props.maker = "Scania"

        assert truck.maker == "Volvo"

    def test_props_property_returns_copy(self, props):
        truck = Truck(props)

        truck.props.maker = "Scania"

        assert truck.maker == "Volvo"

    def test_update_rejects_unknown_field(self, props):
        truck = Truck(props)

        with pytest.raises(TypeError):
            truck.update(wings=2)

    def test_vin_is_optional(self):
        truck = Truck(TruckProps(maker="MAN", engine="I6", tires=4, capacity_tons=3.5))

        assert truck.vin is None

    def test_describe(self, props):
        assert Truck(props).describe() == (
            "Volvo truck with V8 diesel engine, 6 tires, capacity 12 tons"
        )

    def test_not_hashable(self, props):
        with pytest.raises(TypeError):
            hash(Truck(props))


class TestFancyTruck:
    """Test cases for FancyTruck."""

    def test_clone_copies_base_and_extension_fields(self, props, extras):
        truck = FancyTruck(props, extras)

        copy = truck.clone()

        assert type(copy) is FancyTruck
        assert copy == truck
        assert copy is not truck
        assert copy.maker == "Volvo"
        assert copy.has_off_road_package is True
        assert copy.light_bar_lumens == 12000

    def test_mutating_clone_extension_leaves_original(self, props, extras):
        truck = FancyTruck(props, extras)
        copy = truck.clone()

        copy.update(light_bar_lumens=500, engine="V6")

        assert copy.light_bar_lumens == 500
        assert copy.engine == "V6"
        assert truck.light_bar_lumens == 12000
        assert truck.engine == "V8 diesel"

    def test_update_with_unknown_field_changes_nothing(self, props, extras):
        truck = FancyTruck(props, extras)

        with pytest.raises(TypeError):
            truck.update(light_bar_lumens=1, wings=2)

        assert truck.light_bar_lumens == 12000

    def test_not_equal_to_plain_truck(self, props, extras):
        assert FancyTruck(props, extras) != Truck(props)

    def test_describe(self, props, extras):
        assert FancyTruck(props, extras).describe() == (
            "Volvo truck with V8 diesel engine, 6 tires, capacity 12 tons, "
            "with off-road package, light bar: 12000 lm"
        )

    def test_describe_standard_trim(self, props):
        truck = FancyTruck(props, FancyTruckExtras(has_off_road_package=False, light_bar_lumens=0))

        assert "standard trim" in truck.describe()


class TestPrototypeRegistry:
    """Test cases for PrototypeRegistry."""

    def test_create_returns_clone(self, props):
        registry = PrototypeRegistry()
        prototype = Truck(props)
        registry.register("basic", prototype)

        truck = registry.create("basic")

        assert truck == prototype
        assert truck is not prototype

    def test_created_copies_are_independent(self, props):
        registry = PrototypeRegistry()
        registry.register("basic", Truck(props))

        first = registry.create("basic")
        first.update(maker="Scania")

        assert registry.create("basic").maker == "Volvo"

    def test_unknown_name_raises(self):
        registry = PrototypeRegistry()

        with pytest.raises(PrototypeNotFoundError) as exc_info:
            registry.create("missing")

        assert isinstance(exc_info.value, ResourceNotFoundError)
        assert exc_info.value.name == "missing"
        assert "missing" in str(exc_info.value)

    def test_register_replaces_and_unregister_removes(self, props, extras):
        registry = PrototypeRegistry()
        registry.register("truck", Truck(props))
        registry.register("truck", FancyTruck(props, extras))

        assert isinstance(registry.create("truck"), FancyTruck)
        assert registry.names() == ["truck"]

        registry.unregister("truck")
        registry.unregister("truck")

        assert "truck" not in registry
        assert len(registry) == 0
