# dsakit

A small collection of classic array and string algorithms, written as plain
functions that take ordinary Python iterables, sequences and strings. It has
no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.sorting`

Every function accepts any iterable, returns a new sorted list and leaves its
input unchanged.

- `bubble_sort(values)`: ascending; stops early once a pass makes no swap
- `insertion_sort(values)`, `insertion_sort_descending(values)`
- `selection_sort(values)`, `selection_sort_descending(values)`

### `dsakit.searching`

- `binary_search(values, key)`: an index of `key` in an ascending sequence, or
  `-1` if it is absent
- `contains_sorted(values, key)`: whether an ascending sequence holds `key`
- `find_index(values, key)`: the first index of `key` by linear scan; when
  nothing matches it returns `len(values)`
- `aggressive_cows(stalls, k)`: the largest minimum distance at which `k` cows
  can be placed in the given stall positions; raises `ValueError` when no
  stalls are given or no distance of at least 1 allows the placement

### `dsakit.numbers`

- `fibonacci(n)`: the `n`-th Fibonacci number, counting from
  `fibonacci(1) == 0` and `fibonacci(2) == 1`; raises `ValueError` for `n < 1`
- `factorial_digits(n)`: the decimal digits of `n!` as a list, most
  significant first; raises `ValueError` for negative `n`

### `dsakit.sums`

- `three_sum(values, target)`: whether three distinct elements add up to
  `target`
- `can_split_equal(values)`: whether some prefix sums to the same value as the
  rest of the sequence
- `max_subarray_sum(values)`: Kadane's maximum sum of a non-empty contiguous
  run; raises `ValueError` on empty input
- `max_difference(values)`: largest `values[j] - values[i]` with `i <= j`
  (so never below 0); raises `ValueError` for fewer than two values
- `prefix_sums(values)`, `suffix_sums(values)`: running totals from the left
  and from the right
- `trap_rain_water(heights)`: units of water held between the bars; 0 for an
  empty input

### `dsakit.strings`

- `longest_unique_substring(text)`: length of the longest substring with no
  repeated character
- `roman_value(symbol)`: value of one Roman numeral symbol, or 0 for anything
  else
- `roman_to_int(text)`: converts a Roman numeral, counting unknown symbols as
  0; raises `ValueError` for an empty string
- `smallest_distinct_window(text)`: length of the shortest substring holding
  every distinct character of `text` (0 for an empty string)
- `reverse_string(text)`, `is_palindrome(text)`

## Example

```python
from dsakit.sorting import bubble_sort
from dsakit.searching import binary_search
from dsakit.sums import max_subarray_sum
from dsakit.strings import roman_to_int

values = bubble_sort([5, 455, 56, 574, 578])
print(values)                                             # [5, 56, 455, 574, 578]
print(binary_search(values, 56))                          # 1
print(max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4]))  # 6
print(roman_to_int("MCMXCIV"))                            # 1994
```

## What it does not do

`dsakit` is a library only. It installs no command-line program and does not
read input from the terminal; call the functions from your own code.