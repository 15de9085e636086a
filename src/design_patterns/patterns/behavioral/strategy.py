"""Strategy pattern: a context delegating to a swappable behavior."""

from typing import Optional

from design_patterns.domain.base.ports.strategy_port import StrategyPort
from design_patterns.domain.core.exceptions import StrategyNotSetError
from design_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ConcreteStrategyA(StrategyPort):
    """First concrete strategy implementation."""

    label = "ConcreteStrategyA"

    def execute(self, data: str) -> str:
        message = f"[{self.label}] Processing data: {data}"
        logger.info(message)
        return message


class ConcreteStrategyB(StrategyPort):
    """Second concrete strategy implementation."""

    label = "ConcreteStrategyB"

    def execute(self, data: str) -> str:
        message = f"[{self.label}] Handling data differently: {data}"
        logger.info(message)
        return message


class Context:
    """Context that runs whichever strategy is currently assigned."""

    def __init__(self, strategy: Optional[StrategyPort] = None):
        self._strategy = strategy

    @property
    def strategy(self) -> Optional[StrategyPort]:
        return self._strategy

    def set_strategy(self, strategy: StrategyPort) -> None:
        """Assign the strategy used by subsequent calls."""
        self._strategy = strategy

    def do_something(self, data: str) -> str:
        """
        Forward ``data`` unchanged to the assigned strategy.

        Returns:
            The strategy's result

        Raises:
            StrategyNotSetError: If no strategy has been assigned
        """
        if self._strategy is None:
            raise StrategyNotSetError(type(self).__name__)
        return self._strategy.execute(data)
