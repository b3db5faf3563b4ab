import operator
import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from rxutil.timsort import (
    MIN_MERGE,
    binary_sort,
    count_run_and_make_ascending,
    min_run_length,
    timsort,
)


@given(st.integers(min_value=0, max_value=2 * MIN_MERGE - 1))
def test_min_run_length_small_is_identity(n):
    assert min_run_length(n) == n


@given(st.integers(min_value=2 * MIN_MERGE, max_value=10**7))
def test_min_run_length_bounds(n):
    result = min_run_length(n)
    assert MIN_MERGE <= result <= 2 * MIN_MERGE


def test_min_run_length_power_of_two():
    assert min_run_length(64) == MIN_MERGE


def test_min_run_length_negative_raises():
    with pytest.raises(ValueError):
        min_run_length(-1)


def test_count_run_reverses_strictly_descending():
    items = [3, 2, 1, 5]
    length = count_run_and_make_ascending(items, 0, len(items))
    assert length == 3
    assert items == [1, 2, 3, 5]


def test_count_run_non_decreasing_untouched():
    items = [2, 2, 1]
    length = count_run_and_make_ascending(items, 0, len(items))
    assert length == 2
    assert items == [2, 2, 1]


def test_count_run_single_element():
    items = [7, 1]
    assert count_run_and_make_ascending(items, 1, 2) == 1


def test_count_run_empty_range_raises():
    with pytest.raises(ValueError):
        count_run_and_make_ascending([1, 2], 1, 1)


@given(st.lists(st.integers(), min_size=1, max_size=60))
def test_count_run_prefix_is_sorted(data):
    items = list(data)
    length = count_run_and_make_ascending(items, 0, len(items))
    assert 1 <= length <= len(items)
    assert items[:length] == sorted(items[:length])
    assert sorted(items) == sorted(data)


@given(st.lists(st.integers(), max_size=80), st.data())
def test_binary_sort_sorts_range(data, draw):
    prefix = draw.draw(st.integers(min_value=0, max_value=len(data)))
    items = sorted(data[:prefix]) + data[prefix:]
    binary_sort(items, 0, len(items), prefix)
    assert items == sorted(data)


def test_binary_sort_only_touches_range():
    items = [9, 5, 4, 3, 0]
    binary_sort(items, 1, 4, 1)
    assert items == [9, 3, 4, 5, 0]


def test_binary_sort_is_stable():
    pairs = [(1, "a"), (0, "b"), (1, "c"), (0, "d")]
    items = list(pairs)
    binary_sort(items, 0, len(items), 0, lambda x, y: x[0] < y[0])
    assert items == sorted(pairs, key=lambda p: p[0])


def test_binary_sort_bad_start_raises():
    with pytest.raises(ValueError):
        binary_sort([1, 2, 3], 1, 3, 0)


@given(st.lists(st.integers(min_value=-50, max_value=50), max_size=400))
def test_timsort_matches_sorted(data):
    items = list(data)
    timsort(items)
    assert items == sorted(data)


@given(st.lists(st.tuples(st.integers(0, 5), st.integers()), max_size=300))
def test_timsort_is_stable_with_key(data):
    items = list(data)
    timsort(items, key=operator.itemgetter(0))
    assert items == sorted(data, key=operator.itemgetter(0))


@given(st.lists(st.tuples(st.integers(0, 5), st.integers()), max_size=300))
def test_timsort_descending_is_stable(data):
    items = list(data)
    timsort(items, less=operator.gt, key=operator.itemgetter(0))
    assert items == sorted(data, key=operator.itemgetter(0), reverse=True)


@pytest.mark.parametrize("size", [0, 1, 31, 32, 64, 65, 1000, 5000])
def test_timsort_random_sizes(size):
    rng = random.Random(size)
    data = [rng.randint(-1000, 1000) for _ in range(size)]
    items = list(data)
    timsort(items)
    assert items == sorted(data)


@pytest.mark.parametrize(
    "data",
    [
        list(range(2000)),
        list(range(2000, 0, -1)),
        [1] * 500,
        list(range(300)) + list(range(300)),
        [i % 7 for i in range(1500)],
    ],
)
def test_timsort_structured_inputs(data):
    items = list(data)
    timsort(items)
    assert items == sorted(data)


def test_timsort_strings_with_key():
    words = ["Banana", "apple", "cherry", "Apple"]
    items = list(words)
    timsort(items, key=str.lower)
    assert items == sorted(words, key=str.lower)