"""Fibonacci, array summation and point record demonstration.

Run it with:
    python -m experiment_demo
"""

from experiment_demo.core.fibonacci import calculate_fibonacci
from experiment_demo.core.summation import sum_array
from experiment_demo.driver import DemoResult, run_demo
from experiment_demo.models.config import DemoConfig
from experiment_demo.models.point import PointRecord

__all__ = [
    "DemoConfig",
    "DemoResult",
    "PointRecord",
    "calculate_fibonacci",
    "run_demo",
    "sum_array",
]
