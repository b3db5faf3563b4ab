import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from rxutil.numeric import is_null_zero, rx_erf, vmnorm


def test_vmnorm_picks_largest_weighted_magnitude():
    assert vmnorm([1.0, -3.0], [1.0, 1.0]) == 3.0


def test_vmnorm_uses_weights():
    assert vmnorm([2.0, -3.0], [5.0, 0.0]) == 10.0


def test_vmnorm_empty_is_zero():
    assert vmnorm([], []) == 0.0


def test_vmnorm_never_negative_with_negative_weights():
    assert vmnorm([1.0, 2.0], [-1.0, -2.0]) == 0.0


def test_vmnorm_ignores_nan():
    assert vmnorm([math.nan, 2.0], [1.0, 1.0]) == 2.0


def test_vmnorm_length_mismatch_raises():
    with pytest.raises(ValueError):
        vmnorm([1.0, 2.0], [1.0])


@given(
    st.lists(
        st.tuples(
            st.floats(-1e6, 1e6, allow_nan=False),
            st.floats(0, 1e6, allow_nan=False),
        ),
        max_size=30,
    )
)
def test_vmnorm_bounds_each_product(pairs):
    v = [p[0] for p in pairs]
    w = [p[1] for p in pairs]
    norm = vmnorm(v, w)
    assert norm >= 0.0
    assert all(abs(a) * b <= norm for a, b in pairs)


def test_rx_erf_zero_and_limits():
    assert rx_erf([0.0, math.inf, -math.inf]) == [0.0, 1.0, -1.0]


@given(st.floats(-10, 10, allow_nan=False))
def test_rx_erf_is_odd_and_bounded(x):
    forward, backward = rx_erf([x, -x])
    assert forward == -backward
    assert -1.0 <= forward <= 1.0


def test_rx_erf_is_monotone():
    values = rx_erf([-2.0, -0.5, 0.0, 0.5, 2.0])
    assert values == sorted(values)
    assert len(values) == 5


def test_is_null_zero_none():
    assert is_null_zero(None) is True


def test_is_null_zero_zero_matrix():
    assert is_null_zero([[0, 0], [0.0, 0]]) is True


def test_is_null_zero_nonzero_matrix():
    assert is_null_zero([[0, 1], [0, 0]]) is False


def test_is_null_zero_plain_vector_is_false():
    assert is_null_zero([0.0, 0.0]) is False


def test_is_null_zero_empty_matrix_is_false():
    assert is_null_zero([[]]) is False


def test_is_null_zero_list_ending_with_zero_matrix():
    assert is_null_zero([[[1, 2]], [[0, 0]]]) is True


def test_is_null_zero_list_scans_from_end():
    assert is_null_zero([[[0]], [[1]]]) is True
    assert is_null_zero([[[1]], [[2]]]) is False


def test_is_null_zero_list_with_non_matrix_last_is_false():
    assert is_null_zero([[[0]], "text"]) is False


def test_is_null_zero_mapping_of_matrices():
    assert is_null_zero({"a": [[3]], "b": [[0, 0]]}) is True
    assert is_null_zero({"a": [[0]], "b": 5}) is False


def test_is_null_zero_scalar_is_false():
    assert is_null_zero(0) is False
    assert is_null_zero([]) is False