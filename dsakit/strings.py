"""String problems: unique-character windows, Roman numerals and palindromes."""

from __future__ import annotations

from collections import Counter

__all__ = [
    "longest_unique_substring",
    "roman_value",
    "roman_to_int",
    "smallest_distinct_window",
    "reverse_string",
    "is_palindrome",
]

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def longest_unique_substring(text: str) -> int:
    """Return the length of the longest substring without a repeated character."""
    seen: set[str] = set()
    first = 0
    best = 0
    for second, char in enumerate(text):
        while char in seen:
            seen.discard(text[first])
            first += 1
        seen.add(char)
        best = max(best, second - first + 1)
    return best


def roman_value(symbol: str) -> int:
    """Return the value of one Roman numeral symbol, or 0 if it is not one."""
    return _ROMAN.get(symbol, 0)


def roman_to_int(text: str) -> int:
    """Convert a Roman numeral to an integer; unknown symbols count as 0."""
    if not text:
        raise ValueError("empty Roman numeral")
    values = [roman_value(char) for char in text]
    total = values[-1]
    for current, following in zip(values, values[1:]):
        total += -current if current < following else current
    return total


def smallest_distinct_window(text: str) -> int:
    """Return the length of the shortest substring holding every distinct character."""
    if not text:
        return 0
    missing = len(set(text))
    counts: Counter[str] = Counter()
    best = len(text)
    left = 0
    for right, char in enumerate(text):
        if counts[char] == 0:
            missing -= 1
        counts[char] += 1
        while missing == 0:
            best = min(best, right - left + 1)
            counts[text[left]] -= 1
            if counts[text[left]] == 0:
                missing += 1
            left += 1
    return best


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same backwards."""
    return text == text[::-1]