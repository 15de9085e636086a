"""Demonstration run configuration schema."""

from typing import List

from pydantic import BaseModel, Field, field_validator

PATTERN_NAMES = [
    "singleton",
    "factory-method",
    "builder",
    "prototype",
    "strategy",
    "observer",
    "decorator",
]


class DemoConfig(BaseModel):
    """Settings for the pattern demonstrations."""

    patterns: List[str] = Field(
        default_factory=lambda: list(PATTERN_NAMES),
        description="Patterns to demonstrate, in order",
    )
    singleton_value: str = Field(
        "some output", description="Value stored in the shared singleton"
    )
    observer_states: List[str] = Field(
        default_factory=lambda: ["X", "Y"],
        description="States published before and after unsubscribing a listener",
    )
    strategy_payload: str = Field(
        "some data", description="Data handed to each strategy"
    )

    @field_validator("patterns")
    @classmethod
    def validate_patterns(cls, v: List[str]) -> List[str]:
        """Validate pattern names."""
        unknown = [name for name in v if name not in PATTERN_NAMES]
        if unknown:
            raise ValueError(f"Unknown patterns {unknown}; must be among {PATTERN_NAMES}")
        return v

    @field_validator("observer_states")
    @classmethod
    def validate_observer_states(cls, v: List[str]) -> List[str]:
        """The observer demo publishes exactly two states."""
        if len(v) != 2:
            raise ValueError("observer_states must contain exactly two states")
        return v
