"""Problems solved with sets, counters and dictionaries."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

__all__ = [
    "reverse_digits",
    "count_distinct_integers",
    "max_string_pairs",
    "unique_occurrences",
    "is_anagram",
    "two_sum",
    "two_sum_two_pass",
    "longest_unique_substring",
]


def reverse_digits(x: int) -> int:
    """Return x with its decimal digits reversed; values below 1 give 0."""
    if x <= 0:
        return 0
    return int(str(x)[::-1])


def count_distinct_integers(nums: Iterable[int]) -> int:
    """Count distinct values among the numbers and their digit reversals."""
    seen: set[int] = set()
    for value in nums:
        seen.add(value)
        seen.add(reverse_digits(value))
    return len(seen)


def max_string_pairs(words: Sequence[str]) -> int:
    """Count the words whose reversal matches an earlier word."""
    reversed_seen: set[str] = set()
    for word in words:
        if word not in reversed_seen:
            reversed_seen.add(word[::-1])
    return len(words) - len(reversed_seen)


def unique_occurrences(nums: Iterable[int]) -> bool:
    """Tell whether every distinct value occurs a different number of times."""
    counts = Counter(nums)
    return len(set(counts.values())) == len(counts)


def is_anagram(s: str, t: str) -> bool:
    """Tell whether t uses exactly the characters of s."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of the first pair adding to target, found in one pass.

    The earlier index comes first; an empty list means there is no such pair.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    return []


def two_sum_two_pass(nums: Sequence[int], target: int) -> list[int]:
    """Return indices of a pair adding to target, using a full index map.

    The first index is the earliest that has a partner; the partner is the last
    occurrence of the needed value. An empty list means there is no such pair.
    """
    last_index = {value: index for index, value in enumerate(nums)}
    for index, value in enumerate(nums):
        partner = last_index.get(target - value)
        if partner is not None and partner != index:
            return [index, partner]
    return []


def longest_unique_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    left = 0
    best = 0
    for right, char in enumerate(s):
        if last_seen.get(char, -1) >= left:
            left = last_seen[char] + 1
        last_seen[char] = right
        best = max(best, right - left + 1)
    return best