"""Counting, voting and window problems over integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

__all__ = [
    "majority_element",
    "most_frequent",
    "longest_subarray_with_sum",
    "max_subarray_sum",
    "count_subarrays_with_sum",
    "max_profit",
    "product_except_self",
    "longest_consecutive",
    "three_sum",
    "rescue_boats",
    "find_duplicate",
]


def _require_items(nums: Sequence[int]) -> None:
    if not nums:
        raise ValueError("sequence must not be empty")


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than half the time, found by voting.

    If no value holds a majority the result is the last surviving candidate.
    """
    _require_items(nums)
    candidate = nums[0]
    votes = 0
    for value in nums:
        if votes == 0:
            candidate = value
        votes += 1 if value == candidate else -1
    return candidate


def most_frequent(nums: Sequence[int]) -> int:
    """Return the value with the highest count; ties go to the value seen first."""
    _require_items(nums)
    value, _ = Counter(nums).most_common(1)[0]
    return value


def longest_subarray_with_sum(nums: Sequence[int], k: int) -> int:
    """Return the length of the longest contiguous run summing to k, or 0.

    The sliding window is only correct for non-negative values.
    """
    left = 0
    total = 0
    best = 0
    for right, value in enumerate(nums):
        total += value
        while total > k and left <= right:
            total -= nums[left]
            left += 1
        if total == k and left <= right:
            best = max(best, right - left + 1)
    return best


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Return the largest sum of any non-empty contiguous run."""
    _require_items(nums)
    current = best = nums[0]
    for value in nums[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def count_subarrays_with_sum(nums: Iterable[int], k: int) -> int:
    """Count the contiguous runs whose values sum to k."""
    prefix_counts: Counter[int] = Counter({0: 1})
    prefix = 0
    count = 0
    for value in nums:
        prefix += value
        count += prefix_counts[prefix - k]
        prefix_counts[prefix] += 1
    return count


def max_profit(prices: Iterable[int]) -> int:
    """Return the best gain from one buy followed by one later sale, or 0."""
    lowest: int | None = None
    best = 0
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        best = max(best, price - lowest)
    return best


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other value."""
    n = len(nums)
    result = [1] * n
    running = 1
    for index in range(n):
        result[index] = running
        running *= nums[index]
    running = 1
    for index in reversed(range(n)):
        result[index] *= running
        running *= nums[index]
    return result


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers present."""
    values = sorted(set(nums))
    if not values:
        return 0
    best = current = 1
    for previous, value in zip(values, values[1:]):
        if value == previous + 1:
            current += 1
            best = max(best, current)
        else:
            current = 1
    return best


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct ascending triplet of values summing to zero."""
    values = sorted(nums)
    n = len(values)
    found: list[list[int]] = []
    for i, first in enumerate(values):
        if first > 0:
            break
        if i > 0 and first == values[i - 1]:
            continue
        low, high = i + 1, n - 1
        while low < high:
            total = first + values[low] + values[high]
            if total > 0:
                high -= 1
            elif total < 0:
                low += 1
            else:
                low_value, high_value = values[low], values[high]
                found.append([first, low_value, high_value])
                while low < high and values[low] == low_value:
                    low += 1
                while low < high and values[high] == high_value:
                    high -= 1
    return found


def rescue_boats(people: Iterable[int], limit: int) -> int:
    """Return the fewest boats, each holding at most two people within limit."""
    weights = sorted(people)
    boats = 0
    left, right = 0, len(weights) - 1
    while left <= right:
        if weights[left] + weights[right] <= limit:
            left += 1
        right -= 1
        boats += 1
    return boats


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value among n + 1 values drawn from 1..n.

    Uses cycle detection, so the sequence itself is never modified.
    """
    _require_items(nums)
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    entry = nums[0]
    while slow != entry:
        slow = nums[slow]
        entry = nums[entry]
    return slow