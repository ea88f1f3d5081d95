"""Demonstration driver.

Sums an array, computes a Fibonacci number, updates a point record and
prints the results followed by a comparison of the two numbers.

Usage:
    python -m experiment_demo

    # Or via entry point
    experiment-demo
"""

import logging
import sys
from dataclasses import dataclass

from experiment_demo.core.fibonacci import calculate_fibonacci
from experiment_demo.core.summation import sum_array
from experiment_demo.models.config import DemoConfig
from experiment_demo.models.point import PointRecord

logger = logging.getLogger(__name__)

SUM_GREATER_MESSAGE = "Array sum is greater"
FIBONACCI_GREATER_MESSAGE = "Fibonacci is greater or equal"


@dataclass
class DemoResult:
    """Values produced by a demonstration run."""

    total: int
    fib_result: int
    point: PointRecord
    message: str


def run_demo(config: DemoConfig | None = None) -> DemoResult:
    """Run the demonstration and print its results to stdout.

    Args:
        config: Inputs for the run (defaults reproduce the standard output)

    Returns:
        DemoResult with the computed values and the updated point
    """
    config = config or DemoConfig()

    numbers = list(config.numbers)
    total = sum_array(numbers, len(numbers))
    print(f"Sum of array: {total}")

    fib_result = calculate_fibonacci(config.fibonacci_n)
    print(f"Fibonacci({config.fibonacci_n}): {fib_result}")

    point = PointRecord()
    point.update(config.point_x, config.point_y)
    print(f"Point: {point.label} at ({point.x}, {point.y})")

    if total > fib_result:
        message = SUM_GREATER_MESSAGE
    else:
        message = FIBONACCI_GREATER_MESSAGE
    print(message)

    logger.debug(f"Demo finished: total={total}, fib={fib_result}")
    return DemoResult(total=total, fib_result=fib_result, point=point, message=message)


def main() -> int:
    """Run the demonstration with default inputs."""
    # Diagnostics go to stderr so stdout carries only the results
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    run_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())
