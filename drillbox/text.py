"""String exercises: anagrams, frequency ordering, isomorphism, permutations, Roman numerals."""

from __future__ import annotations

from collections import Counter

__all__ = [
    "is_anagram",
    "frequency_sort",
    "is_isomorphic",
    "check_inclusion",
    "roman_to_int",
]

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
    "IV": 4,
    "IX": 9,
    "XL": 40,
    "XC": 90,
    "CD": 400,
    "CM": 900,
}


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` is a rearrangement of the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def frequency_sort(s: str) -> str:
    """Return ``s`` with characters grouped and ordered by falling frequency."""
    return "".join(char * count for char, count in Counter(s).most_common())


def is_isomorphic(s: str, t: str) -> bool:
    """Return True if a one-to-one character mapping turns ``s`` into ``t``."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for cs, ct in zip(s, t):
        if forward.setdefault(cs, ct) != ct:
            return False
        if backward.setdefault(ct, cs) != cs:
            return False
    return True


def check_inclusion(s1: str, s2: str) -> bool:
    """Return True if some permutation of ``s1`` is a substring of ``s2``."""
    n = len(s1)
    if n > len(s2):
        return False
    target = Counter(s1)
    window = Counter(s2[:n])
    if window == target:
        return True
    for incoming, outgoing in zip(s2[n:], s2):
        window[incoming] += 1
        window[outgoing] -= 1
        if not window[outgoing]:
            del window[outgoing]
        if window == target:
            return True
    return False


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer.

    Subtractive pairs such as IV and CM are read as one symbol.
    Raises ValueError on a character that is not a Roman digit.
    """
    result = 0
    i = 0
    n = len(s)
    while i < n:
        pair = s[i:i + 2]
        if len(pair) == 2 and pair in _ROMAN_VALUES:
            result += _ROMAN_VALUES[pair]
            i += 2
            continue
        symbol = s[i]
        if symbol not in _ROMAN_VALUES:
            raise ValueError(f"invalid Roman numeral character: {symbol!r}")
        result += _ROMAN_VALUES[symbol]
        i += 1
    return result