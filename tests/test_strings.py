from hypothesis import given, strategies as st

from dsakit.strings import reverse_string, sort_strings, tokenize


@given(st.text())
def test_reverse_round_trip(text):
    assert reverse_string(reverse_string(text)) == text
    assert len(reverse_string(text)) == len(text)


def test_reverse_simple():
    assert reverse_string("abc") == "cba"


@given(st.lists(st.text(max_size=8)))
def test_sort_strings_order(strings):
    result = sort_strings(strings)
    assert sorted(result) == sorted(strings)
    for a, b in zip(result, result[1:]):
        assert len(a) > len(b) or (len(a) == len(b) and a <= b)


def test_sort_strings_ties():
    assert sort_strings(["bb", "a", "ccc", "aa"]) == ["ccc", "aa", "bb", "a"]


def test_tokenize_sentence():
    assert tokenize("Today is a preety day") == ["Today", "is", "a", "preety", "day"]


def test_tokenize_multiple_delimiters_skip_empty():
    assert tokenize(",a,, b;c ", ",; ") == ["a", "b", "c"]


def test_tokenize_no_delimiters():
    assert tokenize("abc", "") == ["abc"]
    assert tokenize("", " ") == []