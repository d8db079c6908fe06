from collections import Counter

from hypothesis import given, strategies as st

from arraydrills.hashing import (
    count_distinct_integers,
    is_anagram,
    longest_unique_substring,
    max_string_pairs,
    reverse_digits,
    two_sum,
    two_sum_two_pass,
    unique_occurrences,
)

short_text = st.text(alphabet="abcde", max_size=30)


@given(st.integers(min_value=1, max_value=10**9).filter(lambda x: x % 10 != 0))
def test_reverse_digits_twice_is_identity(x):
    assert reverse_digits(reverse_digits(x)) == x


@given(st.integers(max_value=0))
def test_reverse_digits_of_non_positive_is_zero(x):
    assert reverse_digits(x) == 0


def test_reverse_digits_drops_trailing_zeros():
    assert reverse_digits(1200) == 21


@given(st.lists(st.integers(min_value=1, max_value=10**6)))
def test_count_distinct_integers_bounds(nums):
    distinct = len(set(nums))
    result = count_distinct_integers(nums)
    assert distinct <= result <= 2 * distinct


def test_count_distinct_integers_with_palindromes_only():
    nums = [11, 121, 7, 11]
    assert count_distinct_integers(nums) == len(set(nums))


def test_max_string_pairs_counts_reversed_partners():
    assert max_string_pairs(["cd", "ac", "dc", "ca", "zz"]) == 2


def test_max_string_pairs_without_partners():
    assert max_string_pairs(["ab", "cd", "ef"]) == 0


@given(st.lists(st.text(alphabet="xyz", min_size=2, max_size=2), unique=True))
def test_max_string_pairs_does_not_change_input(words):
    original = list(words)
    result = max_string_pairs(words)
    assert words == original
    assert 0 <= result <= len(words) // 2 + 1


@given(st.lists(st.integers(min_value=0, max_value=5)))
def test_unique_occurrences_matches_count_distinctness(nums):
    counts = list(Counter(nums).values())
    assert unique_occurrences(nums) == (sorted(set(counts)) == sorted(counts))


def test_unique_occurrences_false_when_counts_repeat():
    assert unique_occurrences([1, 2]) is False


@given(short_text)
def test_is_anagram_accepts_reordering(s):
    assert is_anagram(s, "".join(sorted(s)))
    assert is_anagram(s, s[::-1])


@given(short_text)
def test_is_anagram_rejects_extra_character(s):
    assert not is_anagram(s, s + "a")
    assert not is_anagram(s + "a", s + "b")


def test_two_sum_worked_example():
    assert two_sum([2, 7, 11, 15], 9) == [0, 1]


@given(st.lists(st.integers(min_value=-20, max_value=20), max_size=15), st.integers(min_value=-40, max_value=40))
def test_two_sum_result_is_valid_pair(nums, target):
    result = two_sum(nums, target)
    if result:
        i, j = result
        assert i < j
        assert nums[i] + nums[j] == target
    else:
        assert all(
            nums[a] + nums[b] != target
            for a in range(len(nums))
            for b in range(a + 1, len(nums))
        )


@given(st.lists(st.integers(min_value=-20, max_value=20), max_size=15), st.integers(min_value=-40, max_value=40))
def test_two_sum_two_pass_result_is_valid_pair(nums, target):
    result = two_sum_two_pass(nums, target)
    if result:
        i, j = result
        assert i != j
        assert nums[i] + nums[j] == target
    assert bool(result) == bool(two_sum(nums, target))


def test_two_sum_two_pass_same_value_twice():
    nums = [3, 3]
    assert two_sum_two_pass(nums, 6) == [0, 1]


def test_two_sum_without_pair_is_empty():
    assert two_sum([1, 2], 10) == []
    assert two_sum_two_pass([5], 10) == []


def test_longest_unique_substring_worked_example():
    assert longest_unique_substring("abcabcbb") == 3


@given(short_text)
def test_longest_unique_substring_bounds(s):
    result = longest_unique_substring(s)
    assert result <= len(set(s))
    assert (result == 0) == (s == "")


@given(st.text(alphabet="abcdefghij", max_size=10, min_size=0).map(lambda t: "".join(dict.fromkeys(t))))
def test_longest_unique_substring_of_distinct_chars_is_whole(s):
    assert longest_unique_substring(s) == len(s)
    assert longest_unique_substring(s + s) == len(s)