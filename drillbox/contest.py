"""Contest exercises: common gemstone minerals and password strength."""

from __future__ import annotations

import string
from collections.abc import Iterable
from enum import Enum

__all__ = [
    "CharacterType",
    "gemstones",
    "minimum_number",
    "missing_character_types",
    "MIN_PASSWORD_LENGTH",
    "SPECIAL_CHARACTERS",
]

MIN_PASSWORD_LENGTH = 6
SPECIAL_CHARACTERS = "!@#$%^&*()-+"


class CharacterType(Enum):
    """A class of character a strong password must contain."""

    LOWERCASE = (string.ascii_lowercase, "Add at least 1 lowercase letter (a-z)")
    UPPERCASE = (string.ascii_uppercase, "Add at least 1 uppercase letter (A-Z)")
    DIGIT = (string.digits, "Add at least 1 number (0-9)")
    SPECIAL = (SPECIAL_CHARACTERS, "Add at least 1 special character (#, @, etc.)")

    def __init__(self, alphabet: str, advice: str) -> None:
        self.alphabet = alphabet
        self.advice = advice

    def matches(self, char: str) -> bool:
        """Return True if ``char`` belongs to this class."""
        return char in self.alphabet


def gemstones(rocks: Iterable[str]) -> int:
    """Count the minerals that occur in every rock.

    Each rock is a string of mineral letters; a gemstone is a mineral
    found at least once in each rock.
    """
    rock_list = list(rocks)
    if not rock_list:
        raise ValueError("gemstones() requires at least one rock")
    common = set(rock_list[0])
    for rock in rock_list[1:]:
        common &= set(rock)
    return len(common)


def missing_character_types(password: str) -> list[CharacterType]:
    """Return the character classes ``password`` lacks, in a fixed order."""
    return [
        kind
        for kind in CharacterType
        if not any(kind.matches(char) for char in password)
    ]


def minimum_number(password: str) -> int:
    """Return how many characters must be added to make ``password`` strong.

    A strong password is at least six characters long and holds a digit,
    a lowercase letter, an uppercase letter and a special character.
    """
    missing = len(missing_character_types(password))
    return max(missing, MIN_PASSWORD_LENGTH - len(password))