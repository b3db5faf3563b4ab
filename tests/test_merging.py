import bisect
import operator

import pytest
from hypothesis import given
from hypothesis import strategies as st

from rxutil.merging import MergeState, Run, gallop_left, gallop_right, timmerge


sorted_ints = st.lists(st.integers(min_value=-20, max_value=20), max_size=200).map(sorted)


@given(sorted_ints, st.integers(min_value=-25, max_value=25), st.data())
def test_gallop_left_matches_bisect_left(seq, key, data):
    if not seq:
        seq = [0]
    hint = data.draw(st.integers(min_value=0, max_value=len(seq) - 1))
    assert gallop_left(key, seq, 0, len(seq), hint, operator.lt) == bisect.bisect_left(seq, key)


@given(sorted_ints, st.integers(min_value=-25, max_value=25), st.data())
def test_gallop_right_matches_bisect_right(seq, key, data):
    if not seq:
        seq = [0]
    hint = data.draw(st.integers(min_value=0, max_value=len(seq) - 1))
    assert gallop_right(key, seq, 0, len(seq), hint, operator.lt) == bisect.bisect_right(seq, key)


def test_gallop_offsets_are_relative_to_base():
    seq = [100, 100, 1, 2, 2, 2, 3]
    assert gallop_left(2, seq, 2, 5, 0, operator.lt) == 1
    assert gallop_right(2, seq, 2, 5, 4, operator.lt) == 4


def test_gallop_rejects_bad_arguments():
    with pytest.raises(ValueError):
        gallop_left(1, [], 0, 0, 0, operator.lt)
    with pytest.raises(ValueError):
        gallop_right(1, [1, 2], 0, 2, 2, operator.lt)


@given(sorted_ints, sorted_ints)
def test_timmerge_sorts_two_sorted_halves(first, second):
    items = first + second
    timmerge(items, len(first))
    assert items == sorted(first + second)


@given(
    st.lists(st.integers(min_value=0, max_value=5), max_size=150),
    st.lists(st.integers(min_value=0, max_value=5), max_size=150),
)
def test_timmerge_is_stable_with_key(first_keys, second_keys):
    first = sorted((k, "a", i) for i, k in enumerate(first_keys))
    second = sorted((k, "b", i) for i, k in enumerate(second_keys))
    items = first + second
    timmerge(items, len(first), key=lambda t: t[0])
    assert items == sorted(first + second, key=lambda t: t[0])


@given(sorted_ints, sorted_ints)
def test_timmerge_with_reversed_ordering(first, second):
    first = first[::-1]
    second = second[::-1]
    items = first + second
    timmerge(items, len(first), less=operator.gt)
    assert items == sorted(first + second, reverse=True)


def test_timmerge_single_large_element_first_run():
    items = [50, 1, 2, 3, 4]
    timmerge(items, 1)
    assert items == [1, 2, 3, 4, 50]


def test_timmerge_single_small_element_second_run():
    items = [10, 20, 30, 40, 0]
    timmerge(items, 4)
    assert items == [0, 10, 20, 30, 40]


def test_timmerge_long_interleaved_runs_exercise_galloping():
    first = list(range(0, 400, 2)) + list(range(1000, 1100))
    second = list(range(500, 700)) + list(range(1, 400, 2))
    second.sort()
    items = first + second
    timmerge(items, len(first))
    assert items == sorted(first + second)


def test_timmerge_empty_halves_leave_items_unchanged():
    items = [3, 1, 2]
    timmerge(items, 0)
    assert items == [3, 1, 2]
    timmerge(items, 3)
    assert items == [3, 1, 2]


def test_timmerge_rejects_out_of_range_middle():
    with pytest.raises(ValueError):
        timmerge([1, 2, 3], 4)
    with pytest.raises(ValueError):
        timmerge([1, 2, 3], -1)


def test_merge_state_force_collapse_merges_all_runs():
    runs = [[1, 5, 9], [2, 3], [0, 7, 8, 10], [4, 6]]
    items = [x for run in runs for x in run]
    state = MergeState(items)
    base = 0
    for run in runs:
        state.push_run(base, len(run))
        base += len(run)
    state.merge_force_collapse()
    assert items == sorted(items)
    assert state.pending == [Run(0, len(items))]


@given(st.lists(st.lists(st.integers(min_value=-50, max_value=50), min_size=1, max_size=40), min_size=1, max_size=12))
def test_merge_state_collapse_then_force_collapse(runs):
    runs = [sorted(run) for run in runs]
    items = [x for run in runs for x in run]
    expected = sorted(items)
    state = MergeState(items)
    base = 0
    for run in runs:
        state.push_run(base, len(run))
        state.merge_collapse()
        base += len(run)
    state.merge_force_collapse()
    assert items == expected
    assert len(state.pending) == 1
    assert state.pending[0].length == len(expected)


def test_merge_at_rejects_invalid_position():
    state = MergeState([1, 2, 3, 4])
    state.push_run(0, 1)
    state.push_run(1, 1)
    state.push_run(2, 1)
    state.push_run(3, 1)
    with pytest.raises(ValueError):
        state.merge_at(0)


def test_merge_at_third_from_top_keeps_top_run():
    items = [1, 4, 2, 3, 0]
    state = MergeState(items)
    state.push_run(0, 2)
    state.push_run(2, 2)
    state.push_run(4, 1)
    state.merge_at(0)
    assert items[:4] == [1, 2, 3, 4]
    assert state.pending == [Run(0, 4), Run(4, 1)]


def test_merge_consecutive_runs_requires_adjacent_runs():
    state = MergeState([1, 2, 3, 4])
    with pytest.raises(ValueError):
        state.merge_consecutive_runs(0, 1, 2, 2)
    with pytest.raises(ValueError):
        state.merge_consecutive_runs(0, 0, 0, 2)