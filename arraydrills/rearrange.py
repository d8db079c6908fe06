"""In-place and copying rearrangements of integer lists."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import groupby

__all__ = [
    "rearrange_by_sign",
    "remove_duplicates",
    "sort_colors",
    "count_sort_colors",
    "move_zeroes",
    "rotate",
    "next_permutation",
    "merge_sorted",
]


def rearrange_by_sign(nums: Sequence[int]) -> list[int]:
    """Return a list alternating non-negative and negative values, starting non-negative.

    The relative order within each sign is kept. Both signs must occur equally often.
    """
    positives = [value for value in nums if value >= 0]
    negatives = [value for value in nums if value < 0]
    if len(positives) != len(negatives):
        raise ValueError("the sequence needs as many negative as non-negative values")
    return [value for pair in zip(positives, negatives) for value in pair]


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list so its first k items are its distinct values; return k.

    Items past position k are left as they were.
    """
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in one pass.

    Any value other than 0 or 2 is treated as belonging to the middle band.
    """
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[mid], nums[low] = nums[low], nums[mid]
            low += 1
            mid += 1
        elif nums[mid] == 2:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1
        else:
            mid += 1


def count_sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place by counting each value.

    Only 0, 1 and 2 are written back, from the front; any other value is dropped,
    leaving the tail positions it would have taken unchanged.
    """
    counts = Counter(nums)
    ordered = [color for color in range(3) for _ in range(counts[color])]
    nums[: len(ordered)] = ordered


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end in place, keeping the order of the other values."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def rotate(nums: list[int], k: int) -> None:
    """Rotate the list to the right by k places in place."""
    if k < 0:
        raise ValueError("k must not be negative")
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = nums[-k:] + nums[:-k]


def next_permutation(nums: list[int]) -> None:
    """Rearrange the list into its next lexicographic permutation in place.

    The last permutation wraps round to the first, that is, to ascending order.
    """
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]),
        -1,
    )
    if pivot == -1:
        nums.reverse()
        return
    successor = next(
        i for i in range(len(nums) - 1, pivot, -1) if nums[i] > nums[pivot]
    )
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1 :] = nums[:pivot:-1]


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first n items of nums2 into nums1, whose first m items are sorted.

    nums1 must have room for m + n items; the merged result fills its first m + n
    positions.
    """
    if m < 0 or n < 0:
        raise ValueError("m and n must not be negative")
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for m + n items")
    if len(nums2) < n:
        raise ValueError("nums2 holds fewer than n items")
    i, j, k = m - 1, n - 1, m + n - 1
    while j >= 0:
        if i >= 0 and nums1[i] > nums2[j]:
            nums1[k] = nums1[i]
            i -= 1
        else:
            nums1[k] = nums2[j]
            j -= 1
        k -= 1