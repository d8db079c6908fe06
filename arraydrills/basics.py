"""Single-pass queries over integer sequences."""

from __future__ import annotations

import heapq
import operator
from collections.abc import Iterable, Sequence
from functools import reduce

__all__ = [
    "largest_element",
    "second_largest_element",
    "is_sorted_rotated",
    "linear_search",
    "max_consecutive_ones",
    "missing_number",
    "single_number",
    "sorted_union",
    "leaders",
]


def _require_items(nums: Sequence[int]) -> None:
    if not nums:
        raise ValueError("sequence must not be empty")


def largest_element(nums: Sequence[int]) -> int:
    """Return the largest value in a non-empty sequence."""
    _require_items(nums)
    largest = nums[0]
    for value in nums[1:]:
        if value > largest:
            largest = value
    return largest


def second_largest_element(nums: Sequence[int]) -> int:
    """Return the largest value strictly below the maximum, or -1 if there is none.

    The search starts from -1, so values below -1 are never reported.
    """
    _require_items(nums)
    largest = nums[0]
    second = -1
    for value in nums[1:]:
        if value > largest:
            second, largest = largest, value
        elif second < value < largest:
            second = value
    return second


def is_sorted_rotated(nums: Sequence[int]) -> bool:
    """Tell whether the sequence is a rotation of a non-decreasing sequence."""
    if len(nums) <= 2:
        return True
    drops = sum(1 for left, right in zip(nums, nums[1:]) if left > right)
    if nums[-1] > nums[0]:
        drops += 1
    return drops <= 1


def linear_search(nums: Iterable[int], target: int) -> int:
    """Return the index of the first occurrence of target, or -1."""
    return next((index for index, value in enumerate(nums) if value == target), -1)


def max_consecutive_ones(nums: Iterable[int]) -> int:
    """Return the length of the longest run of 1s."""
    best = 0
    current = 0
    for value in nums:
        if value == 1:
            current += 1
            best = max(best, current)
        else:
            current = 0
    return best


def missing_number(nums: Sequence[int]) -> int:
    """Return the one value of 0..n absent from a sequence of n distinct values."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(operator.xor, nums, 0)


def sorted_union(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list without repeated values."""
    result: list[int] = []
    for value in heapq.merge(nums1, nums2):
        if not result or result[-1] != value:
            result.append(value)
    return result


def leaders(nums: Sequence[int]) -> list[int]:
    """Return, in order, the values strictly greater than everything to their right."""
    found: list[int] = []
    current = None
    for value in reversed(nums):
        if current is None or value > current:
            current = value
            found.append(value)
    found.reverse()
    return found