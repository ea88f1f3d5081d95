"""Core computations and error types."""

from experiment_demo.core.exceptions import (
    ExperimentError,
    InvalidSizeError,
    LabelOverflowError,
    PointNotInitializedError,
)
from experiment_demo.core.fibonacci import calculate_fibonacci
from experiment_demo.core.summation import sum_array

__all__ = [
    "ExperimentError",
    "InvalidSizeError",
    "LabelOverflowError",
    "PointNotInitializedError",
    "calculate_fibonacci",
    "sum_array",
]
