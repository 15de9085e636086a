"""Factory method: concrete creators decide which product to build."""

from design_patterns.domain.base.ports.creator_port import CreatorPort, ProductPort
from design_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ConcreteProductA(ProductPort):
    """Product built by ConcreteCreatorA."""

    label = "ConcreteProductA"

    def do_stuff(self) -> str:
        message = f"{self.label} doing work..."
        logger.info(message)
        return message


class ConcreteProductB(ProductPort):
    """Product built by ConcreteCreatorB."""

    label = "ConcreteProductB"

    def do_stuff(self) -> str:
        message = f"{self.label} doing work..."
        logger.info(message)
        return message


class ConcreteCreatorA(CreatorPort):
    """Creator for ConcreteProductA."""

    def create_product(self) -> ProductPort:
        return ConcreteProductA()


class ConcreteCreatorB(CreatorPort):
    """Creator for ConcreteProductB."""

    def create_product(self) -> ProductPort:
        return ConcreteProductB()
