from hypothesis import given, strategies as st

from dsakit.searching import (
    binary_search,
    count_occurrences,
    linear_search,
    lower_bound,
    upper_bound,
)

SORTED = [10, 20, 40, 40, 40, 70, 100, 130, 560]


def test_bounds_of_forty():
    assert lower_bound(SORTED, 40) == 2
    assert upper_bound(SORTED, 40) == 5
    assert count_occurrences(SORTED, 40) == 3


def test_binary_search_presence():
    assert binary_search(SORTED, 130)
    assert not binary_search(SORTED, 50)
    assert not binary_search([], 1)


def test_linear_search_missing():
    assert linear_search([10, 20, 40, 70, 100], 55) is None


@given(st.lists(st.integers(-20, 20)), st.integers(-20, 20))
def test_linear_search_finds_first(items, key):
    index = linear_search(items, key)
    if key in items:
        assert items[index] == key
        assert key not in items[:index]
    else:
        assert index is None


@given(st.lists(st.integers(-20, 20)), st.integers(-20, 20))
def test_sorted_search_invariants(items, key):
    items = sorted(items)
    lo, hi = lower_bound(items, key), upper_bound(items, key)
    assert all(x < key for x in items[:lo])
    assert all(x > key for x in items[hi:])
    assert count_occurrences(items, key) == items.count(key)
    assert binary_search(items, key) == (key in items)