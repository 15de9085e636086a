"""Core domain primitives shared by every pattern module."""

from design_patterns.domain.core.exceptions import (
    ConfigurationError,
    DomainException,
    InvalidStateError,
    PrototypeNotFoundError,
    ResourceNotFoundError,
    StrategyNotSetError,
)

__all__ = [
    "ConfigurationError",
    "DomainException",
    "InvalidStateError",
    "PrototypeNotFoundError",
    "ResourceNotFoundError",
    "StrategyNotSetError",
]
