"""Product and creator ports for the factory method pattern."""

from abc import ABC, abstractmethod


class ProductPort(ABC):
    """Port for products returned by a creator."""

    label: str = "Product"

    @abstractmethod
    def do_stuff(self) -> str:
        """Execute the primary operation of the product."""


class CreatorPort(ABC):
    """Port declaring the factory method.

    Concrete creators decide which product class gets instantiated, clients
    only ever depend on this interface.
    """

    @abstractmethod
    def create_product(self) -> ProductPort:
        """Create a new product."""

    def some_operation(self) -> str:
        """Create a product through the factory method and run it."""
        product = self.create_product()
        return product.do_stuff()
