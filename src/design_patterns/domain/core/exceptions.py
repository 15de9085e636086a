# src/design_patterns/domain/core/exceptions.py
from typing import List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class InvalidStateError(DomainException):
    """Raised when an operation is invoked on an object in the wrong state."""
    def __init__(self, message: str, state: Optional[str] = None):
        super().__init__(message)
        self.state = state


class StrategyNotSetError(InvalidStateError):
    """Raised when a context is asked to run before a strategy is assigned."""
    def __init__(self, context_name: str = "Context"):
        super().__init__(
            f"{context_name} cannot run: strategy has not been set.",
            state="no_strategy",
        )
        self.context_name = context_name


class ResourceNotFoundError(DomainException):
    """Raised when a requested resource cannot be found."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} with ID {resource_id} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class PrototypeNotFoundError(ResourceNotFoundError):
    """Raised when no prototype is registered under the requested name."""
    def __init__(self, name: str):
        super().__init__("Prototype", name)
        self.name = name


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
