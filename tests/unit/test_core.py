"""Tests for the core computations."""

import pytest

from experiment_demo.core.exceptions import ExperimentError, InvalidSizeError
from experiment_demo.core.fibonacci import calculate_fibonacci
from experiment_demo.core.summation import sum_array


class TestFibonacci:
    """Tests for calculate_fibonacci."""

    def test_base_cases(self):
        """Test the seed values of the sequence."""
        assert calculate_fibonacci(0) == 0
        assert calculate_fibonacci(1) == 1

    def test_tenth_term(self):
        """Test the term printed by the demo."""
        assert calculate_fibonacci(10) == 55

    def test_known_terms(self):
        """Test the first terms against the known sequence."""
        expected = [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144]
        assert [calculate_fibonacci(n) for n in range(len(expected))] == expected

    @pytest.mark.parametrize("n", range(2, 20))
    def test_recurrence(self, n):
        """Test F(n) = F(n-1) + F(n-2)."""
        assert calculate_fibonacci(n) == calculate_fibonacci(n - 1) + calculate_fibonacci(n - 2)

    def test_negative_input_returned_unchanged(self):
        """Test that negative n comes back as-is."""
        assert calculate_fibonacci(-1) == -1
        assert calculate_fibonacci(-7) == -7


class TestSumArray:
    """Tests for sum_array."""

    def test_one_to_ten(self):
        """Test the sum used by the demo."""
        assert sum_array(list(range(1, 11)), 10) == 55

    def test_empty(self):
        """Test that an empty sequence sums to zero."""
        assert sum_array([], 0) == 0

    def test_order_independent(self):
        """Test that element order does not change the sum."""
        values = [7, -3, 12, 0, 5]
        assert sum_array(values, 5) == sum_array(list(reversed(values)), 5)
        assert sum_array(values, 5) == sum_array(sorted(values), 5)

    def test_prefix_only(self):
        """Test that only the first size elements are added."""
        assert sum_array([1, 2, 3, 4], 2) == 3

    def test_accepts_tuple(self):
        """Test summing a tuple."""
        assert sum_array((10, -4, 6), 3) == 12

    def test_size_too_large(self):
        """Test error when size exceeds the sequence length."""
        with pytest.raises(InvalidSizeError) as exc_info:
            sum_array([1, 2, 3], 4)

        error = exc_info.value
        assert error.code == "INVALID_SIZE"
        assert error.details == {"size": 4, "available": 3}
        assert isinstance(error, ExperimentError)

    def test_negative_size(self):
        """Test error on a negative size."""
        with pytest.raises(InvalidSizeError):
            sum_array([1, 2, 3], -1)
