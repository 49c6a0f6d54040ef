import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.numbers import factorial_digits, fibonacci


def test_fibonacci_first_terms():
    assert fibonacci(1) == 0
    assert fibonacci(2) == 1


def test_fibonacci_tenth():
    assert fibonacci(10) == 34


@given(st.integers(min_value=3, max_value=300))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


@pytest.mark.parametrize("n", [0, -1, -10])
def test_fibonacci_rejects_small_n(n):
    with pytest.raises(ValueError):
        fibonacci(n)


def test_factorial_digits_small():
    assert factorial_digits(0) == [1]
    assert factorial_digits(1) == [1]


@given(st.integers(min_value=0, max_value=200))
def test_factorial_digits_match_math(n):
    digits = factorial_digits(n)
    assert "".join(map(str, digits)) == str(math.factorial(n))


@given(st.integers(min_value=0, max_value=100))
def test_factorial_digits_are_decimal(n):
    digits = factorial_digits(n)
    assert all(0 <= d <= 9 for d in digits)
    assert digits[0] != 0


def test_factorial_digits_rejects_negative():
    with pytest.raises(ValueError):
        factorial_digits(-1)