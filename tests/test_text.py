from itertools import groupby

import pytest

from drillbox.text import (
    check_inclusion,
    frequency_sort,
    is_anagram,
    is_isomorphic,
    roman_to_int,
)


@pytest.mark.parametrize(
    ("s", "t", "expected"),
    [("listen", "silent", True), ("hello", "bello", False), ("ab", "abc", False)],
)
def test_is_anagram(s, t, expected):
    assert is_anagram(s, t) is expected


def test_is_anagram_is_symmetric():
    assert is_anagram("silent", "listen") == is_anagram("listen", "silent")


@pytest.mark.parametrize("text", ["tree", "cccaaa", "Aabb", "", "mississippi"])
def test_frequency_sort_is_permutation(text):
    assert sorted(frequency_sort(text)) == sorted(text)


@pytest.mark.parametrize("text", ["tree", "cccaaa", "Aabb", "mississippi"])
def test_frequency_sort_groups_in_falling_order(text):
    result = frequency_sort(text)
    runs = [(char, len(list(group))) for char, group in groupby(result)]
    chars = [char for char, _ in runs]
    counts = [count for _, count in runs]
    assert len(chars) == len(set(chars))
    assert counts == sorted(counts, reverse=True)
    assert all(count == text.count(char) for char, count in runs)


def test_frequency_sort_tree():
    assert frequency_sort("tree") in {"eetr", "eert"}


@pytest.mark.parametrize(
    ("s", "t", "expected"),
    [
        ("egg", "add", True),
        ("foo", "bar", False),
        ("paper", "title", True),
        ("badc", "baba", False),
        ("ab", "a", False),
        ("", "", True),
    ],
)
def test_is_isomorphic(s, t, expected):
    assert is_isomorphic(s, t) is expected


def test_is_isomorphic_is_symmetric():
    for s, t in [("egg", "add"), ("badc", "baba"), ("paper", "title")]:
        assert is_isomorphic(s, t) == is_isomorphic(t, s)


@pytest.mark.parametrize(
    ("s1", "s2", "expected"),
    [
        ("ab", "eidbaooo", True),
        ("ab", "eidboaoo", False),
        ("abc", "ab", False),
        ("abc", "cba", True),
        ("", "anything", True),
    ],
)
def test_check_inclusion(s1, s2, expected):
    assert check_inclusion(s1, s2) is expected


def test_check_inclusion_match_at_end():
    assert check_inclusion("ba", "xxxxab") is True


def test_check_inclusion_of_any_substring():
    haystack = "eidbaooo"
    assert check_inclusion(haystack[2:5][::-1], haystack) is True


@pytest.mark.parametrize(
    ("numeral", "value"),
    [("I", 1), ("V", 5), ("X", 10), ("L", 50), ("C", 100), ("D", 500), ("M", 1000),
     ("IV", 4), ("IX", 9), ("XL", 40), ("XC", 90), ("CD", 400), ("CM", 900)],
)
def test_roman_symbols(numeral, value):
    assert roman_to_int(numeral) == value


def test_roman_numeral_is_sum_of_parts():
    assert roman_to_int("MCMXCIV") == (
        roman_to_int("M") + roman_to_int("CM") + roman_to_int("XC") + roman_to_int("IV")
    )


def test_roman_repeated_symbols_add():
    assert roman_to_int("MMM") == 3 * roman_to_int("M")


def test_roman_empty_is_zero():
    assert roman_to_int("") == 0


def test_roman_invalid_character_raises():
    with pytest.raises(ValueError):
        roman_to_int("XIZ")