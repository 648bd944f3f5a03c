from hypothesis import given
from hypothesis import strategies as st

from dsakit.subsequences import (
    lcs_length,
    longest_common_subsequence,
    longest_common_substring,
    longest_increasing_subsequence,
    longest_palindromic_subsequence,
    longest_repeating_subsequence,
    min_deletions_to_palindrome,
    min_insertions_to_palindrome,
    shortest_common_supersequence,
    shortest_common_supersequence_length,
)

texts = st.text(alphabet="abcd", max_size=12)


def _is_subsequence(small, big):
    remaining = iter(big)
    return all(ch in remaining for ch in small)


def test_lis_edge_cases():
    assert longest_increasing_subsequence([]) == 0
    assert longest_increasing_subsequence([7, 7, 7]) == 1
    assert longest_increasing_subsequence([5, 4, 3, 2, 1]) == 1
    assert longest_increasing_subsequence([1, 2, 3, 4]) == 4


@given(st.lists(st.integers(-20, 20), max_size=15))
def test_lis_matches_lcs_with_sorted_unique(nums):
    expected = lcs_length(nums, sorted(set(nums)))
    assert longest_increasing_subsequence(nums) == expected
    assert longest_increasing_subsequence(nums) <= len(nums)


def test_lcs_source_example():
    result = longest_common_subsequence("ABCDEF", "ABXYDVEYF")
    assert result == "ABDEF"
    assert lcs_length("ABCDEF", "ABXYDVEYF") == len(result)


@given(texts, texts)
def test_lcs_is_common_subsequence(first, second):
    result = longest_common_subsequence(first, second)
    assert _is_subsequence(result, first)
    assert _is_subsequence(result, second)
    assert len(result) == lcs_length(first, second)
    assert lcs_length(first, second) == lcs_length(second, first)


@given(texts)
def test_lcs_with_itself(text):
    assert longest_common_subsequence(text, text) == text


@given(texts, texts)
def test_common_substring_bounds(first, second):
    result = longest_common_substring(first, second)
    assert result <= lcs_length(first, second)
    assert longest_common_substring(first, first) == len(first)


def test_common_substring_disjoint_alphabets():
    assert longest_common_substring("abc", "xyz") == 0


def test_lps_source_example():
    assert longest_palindromic_subsequence("agbgcgbcat") == 7


@given(texts)
def test_lps_of_palindrome_is_whole(text):
    palindrome = text + text[::-1]
    assert longest_palindromic_subsequence(palindrome) == len(palindrome)
    assert min_deletions_to_palindrome(palindrome) == 0
    assert min_insertions_to_palindrome(palindrome) == 0


@given(texts)
def test_deletions_and_insertions_agree(text):
    deletions = min_deletions_to_palindrome(text)
    assert deletions == len(text) - longest_palindromic_subsequence(text)
    assert min_insertions_to_palindrome(text) == deletions


def test_repeating_subsequence_small():
    assert longest_repeating_subsequence("aabb") == 2
    assert longest_repeating_subsequence("abcd") == 0


@given(texts)
def test_repeating_subsequence_of_doubled_text(text):
    assert longest_repeating_subsequence(text + text) >= len(text)


@given(texts, texts)
def test_scs_contains_both(first, second):
    result = shortest_common_supersequence(first, second)
    assert _is_subsequence(first, result)
    assert _is_subsequence(second, result)
    assert len(result) == shortest_common_supersequence_length(first, second)
    assert len(result) == len(first) + len(second) - lcs_length(first, second)


def test_scs_with_empty_string():
    assert shortest_common_supersequence("", "abc") == "abc"
    assert shortest_common_supersequence("abc", "") == "abc"