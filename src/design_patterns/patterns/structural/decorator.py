"""Decorator pattern: wrappers that extend a component at runtime."""

from design_patterns.domain.base.ports.component_port import ComponentPort
from design_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ConcreteComponent(ComponentPort):
    """Core component that decorators wrap."""

    label = "ConcreteComponent"

    def execute(self) -> str:
        logger.info("[%s] Executing core behavior...", self.label)
        return self.label


class BaseDecorator(ComponentPort):
    """
    Decorator honouring the component contract by forwarding to its wrappee.

    Decorators are components themselves, so they can wrap one another to any
    depth.
    """

    label = "BaseDecorator"

    def __init__(self, component: ComponentPort):
        self._wrappee = component

    @property
    def wrappee(self) -> ComponentPort:
        return self._wrappee

    def execute(self) -> str:
        return self._wrappee.execute()

    def extra(self) -> str:
        """Additional behavior that decorators may override."""
        message = f"[{self.label}] Executing additional behavior..."
        logger.info(message)
        return message


class ConcreteDecorator(BaseDecorator):
    """Decorator that runs steps before and after the wrapped component."""

    label = "ConcreteDecorator"

    def execute(self) -> str:
        logger.info("[%s] Before execution", self.label)
        result = super().execute()
        logger.info("[%s] After execution", self.label)
        return f"{self.label}({result})"

    def extra(self) -> str:
        message = f"[{self.label}] Executing specialized extra behavior..."
        logger.info(message)
        return message
