"""Iterative array summation."""

import logging
from collections.abc import Sequence

from experiment_demo.core.exceptions import InvalidSizeError

logger = logging.getLogger(__name__)


def sum_array(values: Sequence[int], size: int) -> int:
    """Sum the first ``size`` elements of a sequence.

    Args:
        values: Integers to add up
        size: Number of leading elements to include

    Returns:
        Arithmetic sum of ``values[0:size]`` (0 when ``size`` is 0)

    Raises:
        InvalidSizeError: If ``size`` is negative or larger than ``values``
    """
    if size < 0 or size > len(values):
        raise InvalidSizeError(size, len(values))

    total = 0
    for i in range(size):
        total += values[i]

    logger.debug(f"Summed {size} elements: {total}")
    return total
