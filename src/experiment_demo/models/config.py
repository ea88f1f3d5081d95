"""Demonstration configuration.

Holds the literal inputs of the demonstration run. The defaults are the
values the console output is defined against.
"""

from pydantic import BaseModel, Field


def _default_numbers() -> list[int]:
    return list(range(1, 11))


class DemoConfig(BaseModel):
    """Inputs for a single demonstration run."""

    numbers: list[int] = Field(
        default_factory=_default_numbers,
        description="Integers to sum (default 1..10)",
    )
    fibonacci_n: int = Field(default=10, ge=0, description="Fibonacci term to compute")
    point_x: int = Field(default=42, description="X coordinate written to the point")
    point_y: int = Field(default=84, description="Y coordinate written to the point")
