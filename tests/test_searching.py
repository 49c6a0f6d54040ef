import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.searching import aggressive_cows, binary_search, contains_sorted, find_index

STL_EXAMPLE = sorted([5, 455, 56, 574, 578])


def test_binary_search_finds_every_element():
    for value in STL_EXAMPLE:
        assert STL_EXAMPLE[binary_search(STL_EXAMPLE, value)] == value


def test_binary_search_missing():
    assert binary_search(STL_EXAMPLE, 57) == -1
    assert binary_search([], 1) == -1


@given(st.lists(st.integers(-100, 100), unique=True), st.integers(-100, 100))
def test_binary_search_property(data, key):
    data.sort()
    index = binary_search(data, key)
    if key in data:
        assert data[index] == key
    else:
        assert index == -1


def test_contains_sorted_source_example():
    assert contains_sorted(STL_EXAMPLE, 56) is True
    assert contains_sorted(STL_EXAMPLE, 57) is False
    assert contains_sorted([], 56) is False


@given(st.lists(st.integers(-50, 50)), st.integers(-50, 50))
def test_contains_sorted_matches_membership(data, key):
    data.sort()
    assert contains_sorted(data, key) == (key in data)


def test_find_index_source_example():
    assert STL_EXAMPLE[find_index(STL_EXAMPLE, 56)] == 56


def test_find_index_missing_returns_length():
    assert find_index(STL_EXAMPLE, 1) == len(STL_EXAMPLE)


@given(st.lists(st.integers(0, 5)), st.integers(0, 5))
def test_find_index_is_first_occurrence(data, key):
    index = find_index(data, key)
    if key in data:
        assert index == data.index(key)
    else:
        assert index == len(data)


def test_aggressive_cows_known_cases():
    assert aggressive_cows([1, 2, 4, 8, 9], 3) == 3
    assert aggressive_cows([10, 1, 2, 7, 5], 3) == 4


def test_aggressive_cows_two_cows_use_full_span():
    stalls = [4, 17, 9, 30]
    assert aggressive_cows(stalls, 2) == max(stalls) - min(stalls)


def test_aggressive_cows_does_not_mutate():
    stalls = [9, 1, 5]
    aggressive_cows(stalls, 2)
    assert stalls == [9, 1, 5]


def test_aggressive_cows_errors():
    with pytest.raises(ValueError):
        aggressive_cows([], 2)
    with pytest.raises(ValueError):
        aggressive_cows([3, 3, 3], 2)
    with pytest.raises(ValueError):
        aggressive_cows([1, 2], 3)


@given(
    st.lists(st.integers(0, 200), min_size=2, max_size=12, unique=True),
    st.integers(2, 4),
)
def test_aggressive_cows_bounds(stalls, k):
    if k > len(stalls):
        with pytest.raises(ValueError):
            aggressive_cows(stalls, k)
    else:
        result = aggressive_cows(stalls, k)
        assert 1 <= result <= (max(stalls) - min(stalls)) // (k - 1)