"""Number sequences: Fibonacci terms and factorial digits."""

from __future__ import annotations

__all__ = ["fibonacci", "factorial_digits"]


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number counting from 1, so that 1 -> 0 and 2 -> 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    current, following = 0, 1
    for _ in range(n - 1):
        current, following = following, current + following
    return current


def factorial_digits(n: int) -> list[int]:
    """Return the decimal digits of n!, most significant first."""
    if n < 0:
        raise ValueError("n must not be negative")
    digits = [1]  # least significant first while multiplying
    for factor in range(n, 1, -1):
        carry = 0
        for i, digit in enumerate(digits):
            carry, digits[i] = divmod(digit * factor + carry, 10)
        while carry:
            carry, digit = divmod(carry, 10)
            digits.append(digit)
    return digits[::-1]