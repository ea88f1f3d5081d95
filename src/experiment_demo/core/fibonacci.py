"""Recursive Fibonacci calculation."""


def calculate_fibonacci(n: int) -> int:
    """Calculate the nth Fibonacci number recursively.

    Uses plain double recursion without memoization, so the running time
    grows exponentially with ``n``.

    Values of ``n`` at or below 1 are returned unchanged, which means a
    negative ``n`` yields itself rather than an error.
    """
    if n <= 1:
        return n
    return calculate_fibonacci(n - 1) + calculate_fibonacci(n - 2)
