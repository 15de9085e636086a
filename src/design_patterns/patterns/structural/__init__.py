"""Structural patterns."""

from design_patterns.patterns.structural.decorator import (
    BaseDecorator,
    ConcreteComponent,
    ConcreteDecorator,
)

__all__ = ["BaseDecorator", "ConcreteComponent", "ConcreteDecorator"]
