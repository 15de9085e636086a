"""Base domain abstractions."""
