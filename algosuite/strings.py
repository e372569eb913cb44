"""String algorithms: sliding windows, palindromes and bracket matching."""

from __future__ import annotations

from collections import Counter

__all__ = [
    "length_of_longest_substring",
    "longest_palindrome",
    "is_valid_parentheses",
    "min_window",
    "find_repeated_dna_sequences",
    "longest_substring_k_repeating",
    "character_replacement",
    "check_inclusion",
    "count_palindromic_substrings",
]

_CLOSERS = {")": "(", "]": "[", "}": "{"}
_DNA_SEQUENCE_LENGTH = 10


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for end, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = end
        best = max(best, end - start + 1)
    return best


def _palindrome_span(s: str, left: int, right: int) -> int:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return right - left - 1


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring; the earliest one wins ties."""
    if not s:
        return ""
    start = end = 0
    for centre in range(len(s)):
        span = max(
            _palindrome_span(s, centre, centre),
            _palindrome_span(s, centre, centre + 1),
        )
        if span > end - start:
            start = centre - (span - 1) // 2
            end = centre + span // 2
    return s[start : end + 1]


def is_valid_parentheses(s: str) -> bool:
    """Return True if every bracket in ``s`` is closed in the right order.

    An empty string is not considered valid.
    """
    if not s:
        return False
    stack: list[str] = []
    for ch in s:
        if stack and _CLOSERS.get(ch) == stack[-1]:
            stack.pop()
        else:
            stack.append(ch)
    return not stack


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` holding every character of ``t``.

    Returns an empty string when no such window exists.
    """
    if not t:
        return ""
    need = Counter(t)
    required = len(need)
    have: Counter[str] = Counter()
    formed = 0
    best_start = 0
    best_len: int | None = None
    left = 0
    for right, ch in enumerate(s):
        have[ch] += 1
        if ch in need and have[ch] == need[ch]:
            formed += 1
        while formed == required:
            width = right - left + 1
            if best_len is None or width < best_len:
                best_len = width
                best_start = left
            outgoing = s[left]
            have[outgoing] -= 1
            if outgoing in need and have[outgoing] < need[outgoing]:
                formed -= 1
            left += 1
    if best_len is None:
        return ""
    return s[best_start : best_start + best_len]


def find_repeated_dna_sequences(s: str) -> list[str]:
    """Return every 10-letter sequence occurring more than once in ``s``.

    Sequences are listed in the order of their first occurrence.
    """
    size = _DNA_SEQUENCE_LENGTH
    if len(s) < size:
        return []
    counts = Counter(s[i : i + size] for i in range(len(s) - size + 1))
    return [sequence for sequence, count in counts.items() if count > 1]


def longest_substring_k_repeating(s: str, k: int) -> int:
    """Return the length of the longest substring whose characters each occur at least ``k`` times."""
    if len(s) < k:
        return 0
    counts = Counter(s)
    for mid, ch in enumerate(s):
        if counts[ch] < k:
            after = mid + 1
            while after < len(s) and counts[s[after]] < k:
                after += 1
            return max(
                longest_substring_k_repeating(s[:mid], k),
                longest_substring_k_repeating(s[after:], k),
            )
    return len(s)


def character_replacement(s: str, k: int) -> int:
    """Return the longest run of one character reachable by replacing at most ``k`` characters."""
    counts: Counter[str] = Counter()
    start = 0
    max_freq = 0
    best = 0
    for end, ch in enumerate(s):
        counts[ch] += 1
        max_freq = max(max_freq, counts[ch])
        if (end - start + 1) - max_freq > k:
            counts[s[start]] -= 1
            start += 1
        best = max(best, end - start + 1)
    return best


def check_inclusion(s1: str, s2: str) -> bool:
    """Return True if some permutation of ``s1`` is a substring of ``s2``."""
    target = Counter(s1)
    window: Counter[str] = Counter()
    width = len(s1)
    for j, ch in enumerate(s2):
        window[ch] += 1
        if j >= width:
            outgoing = s2[j - width]
            window[outgoing] -= 1
            if not window[outgoing]:
                del window[outgoing]
        if window == target:
            return True
    return False


def count_palindromic_substrings(s: str) -> int:
    """Return how many substrings of ``s`` (counted by position) are palindromes."""
    n = len(s)
    # is_pal[j] holds whether s[i:j+1] is a palindrome for the current i.
    is_pal = [False] * n
    count = 0
    for i in reversed(range(n)):
        for j in reversed(range(i, n)):
            if j == i:
                is_pal[j] = True
            elif j == i + 1:
                is_pal[j] = s[i] == s[j]
            else:
                is_pal[j] = s[i] == s[j] and is_pal[j - 1]
            count += is_pal[j]
    return count