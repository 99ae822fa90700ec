"""Number exercises: even/odd segregation and fast exponentiation."""

from __future__ import annotations

from collections.abc import MutableSequence

__all__ = ["segregate_even_odd", "power"]


def segregate_even_odd(arr: MutableSequence[int]) -> None:
    """Reorder ``arr`` in place: sorted evens first, then sorted odds."""
    evens = sorted(x for x in arr if x % 2 == 0)
    odds = sorted(x for x in arr if x % 2 != 0)
    arr[:] = evens + odds


def power(x: float, n: int) -> float:
    """Return ``x`` raised to the integer power ``n`` by repeated squaring.

    A negative exponent inverts the base first, so a zero base with a
    negative exponent raises ZeroDivisionError.
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"exponent must be an int, not {type(n).__name__}")

    base = float(x)
    exponent = n
    if exponent < 0:
        base = 1.0 / base
        exponent = -exponent

    result = 1.0
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return result