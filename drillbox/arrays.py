"""Array exercises: circular subarray sums, chunking, rotation and reordering."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from itertools import accumulate

__all__ = [
    "max_circular_sum",
    "max_chunks_to_sorted",
    "rotate",
    "sum_of_subarray_sums",
    "wave",
]


def max_circular_sum(arr: Sequence[int]) -> int:
    """Return the largest sum of a non-empty subarray of a circular array.

    Runs Kadane's algorithm for the maximum and the minimum subarray at once.
    The wrap-around answer is the total minus the minimum subarray. When that
    minimum covers the whole array, every element is negative and only the
    ordinary maximum is valid.
    """
    if not arr:
        raise ValueError("max_circular_sum() requires a non-empty sequence")

    first = arr[0]
    best_max = best_min = first
    run_max = run_min = 0
    total = 0
    for value in arr:
        run_max = max(run_max + value, value)
        best_max = max(best_max, run_max)
        run_min = min(run_min + value, value)
        best_min = min(best_min, run_min)
        total += value

    if best_min == total:
        return best_max
    return max(best_max, total - best_min)


def max_chunks_to_sorted(arr: Sequence[int]) -> int:
    """Count the chunks a permutation of 0..n-1 can be split into.

    Sorting each chunk on its own and joining them must give the sorted
    array. A chunk can end at index i when the largest value seen so far is i.
    """
    running_max = accumulate(arr, max)
    return sum(1 for index, peak in enumerate(running_max) if peak == index)


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places, in place.

    A ``k`` larger than the length wraps around. An empty sequence is left as it is.
    """
    n = len(nums)
    if n == 0:
        return
    k %= n
    if k == 0:
        return
    nums[:] = [*nums[n - k:], *nums[: n - k]]


def sum_of_subarray_sums(arr: Sequence[int]) -> int:
    """Return the sum of the sums of all contiguous subarrays.

    The element at index i appears in (i + 1) * (n - i) subarrays.
    """
    n = len(arr)
    return sum(value * (i + 1) * (n - i) for i, value in enumerate(arr))


def wave(arr: Sequence[int]) -> list[int]:
    """Return a copy of ``arr`` with each adjacent pair swapped.

    Applied to a sorted array this gives a wave: a[0] >= a[1] <= a[2] >= ...
    An odd final element stays where it is.
    """
    result = list(arr)
    result[0:-1:2], result[1::2] = result[1::2], result[0:-1:2]
    return result