import math

import pytest
from hypothesis import given, strategies as st

from dsakit.arithmetic import (
    clear_bit,
    clear_bits_range,
    clear_last_bits,
    count_set_bits,
    count_set_bits_fast,
    gcd,
    get_bit,
    set_bit,
    update_bit,
)

positions = st.integers(min_value=0, max_value=40)
numbers = st.integers(min_value=0, max_value=2**40)


def test_clear_last_bits_worked_example():
    assert clear_last_bits(15, 2) == 12


def test_clear_bits_range_worked_example():
    assert clear_bits_range(31, 1, 3) == 17


@given(numbers, positions)
def test_set_then_get_is_one(n, x):
    assert get_bit(set_bit(n, x), x) == 1


@given(numbers, positions)
def test_clear_then_get_is_zero(n, x):
    assert get_bit(clear_bit(n, x), x) == 0


@given(numbers, positions, st.sampled_from([0, 1]))
def test_update_bit_sets_value_and_keeps_others(n, x, v):
    result = update_bit(n, x, v)
    assert get_bit(result, x) == v
    assert clear_bit(result, x) == clear_bit(n, x)


def test_update_bit_rejects_non_bit():
    with pytest.raises(ValueError):
        update_bit(5, 1, 2)


@given(numbers, positions)
def test_clear_last_bits_leaves_low_bits_zero(n, x):
    result = clear_last_bits(n, x)
    assert result % (1 << x) == 0
    assert result >> x == n >> x


@given(numbers, st.integers(0, 20), st.integers(0, 20))
def test_clear_bits_range_clears_only_range(n, a, b):
    i, j = min(a, b), max(a, b)
    result = clear_bits_range(n, i, j)
    for pos in range(0, 45):
        if i <= pos <= j:
            assert get_bit(result, pos) == 0
        else:
            assert get_bit(result, pos) == get_bit(n, pos)


@given(numbers)
def test_count_methods_agree(n):
    assert count_set_bits(n) == count_set_bits_fast(n) == bin(n).count("1")


def test_count_set_bits_all_ones():
    assert count_set_bits(15) == 4
    assert count_set_bits_fast(15) == 4


@pytest.mark.parametrize("func", [count_set_bits, count_set_bits_fast])
def test_count_rejects_negative(func):
    with pytest.raises(ValueError):
        func(-1)


@given(st.integers(1, 10**9), st.integers(1, 10**9))
def test_gcd_matches_math(m, n):
    assert gcd(m, n) == math.gcd(m, n)


def test_gcd_zero_divisor_rejected():
    with pytest.raises(ValueError):
        gcd(10, 0)