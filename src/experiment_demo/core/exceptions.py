"""Exceptions raised by the demonstration.

All errors carry a human-readable message, a stable error code and a
details dict describing the offending values.
"""

from typing import Any


class ExperimentError(Exception):
    """Base exception for demonstration errors."""

    def __init__(
        self,
        message: str,
        code: str = "EXPERIMENT_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class InvalidSizeError(ExperimentError):
    """Requested element count does not fit the sequence."""

    def __init__(self, size: int, available: int):
        super().__init__(
            f"Cannot sum {size} elements from a sequence of {available}",
            code="INVALID_SIZE",
            details={"size": size, "available": available},
        )


class LabelOverflowError(ExperimentError):
    """Formatted label does not fit the record's label capacity."""

    def __init__(self, label: str, capacity: int):
        super().__init__(
            f"Label '{label}' ({len(label)} chars) exceeds capacity of {capacity}",
            code="LABEL_OVERFLOW",
            details={"label": label, "length": len(label), "capacity": capacity},
        )


class PointNotInitializedError(ExperimentError):
    """Point label was read before the first update."""

    def __init__(self) -> None:
        super().__init__(
            "Point has not been updated yet; its label is undefined",
            code="POINT_NOT_INITIALIZED",
        )
