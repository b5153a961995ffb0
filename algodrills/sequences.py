"""Dynamic programming over strings and sequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def length_of_lis(nums: Sequence) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list = []
    for value in nums:
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
    return len(tails)


def is_interleave(s1: str, s2: str, s3: str) -> bool:
    """Tell whether ``s3`` is an interleaving of ``s1`` and ``s2``."""
    m, n = len(s1), len(s2)
    if m + n != len(s3):
        return False
    row = [False] * (n + 1)
    row[0] = True
    for j in range(1, n + 1):
        row[j] = row[j - 1] and s2[j - 1] == s3[j - 1]
    for i in range(1, m + 1):
        row[0] = row[0] and s1[i - 1] == s3[i - 1]
        for j in range(1, n + 1):
            row[j] = (row[j - 1] and s2[j - 1] == s3[i + j - 1]) or (
                row[j] and s1[i - 1] == s3[i + j - 1]
            )
    return row[n]


def _lcs_table(a: Sequence, b: Sequence) -> list[list[int]]:
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, x in enumerate(a, start=1):
        above, current = table[i - 1], table[i]
        for j, y in enumerate(b, start=1):
            if x == y:
                current[j] = above[j - 1] + 1
            else:
                current[j] = max(above[j], current[j - 1])
    return table


def lcs_length(s1: Sequence, s2: Sequence) -> int:
    """Return the length of the longest common subsequence."""
    return _lcs_table(s1, s2)[len(s1)][len(s2)]


def longest_common_subsequence(s1: str, s2: str) -> str:
    """Return one longest common subsequence of two strings."""
    table = _lcs_table(s1, s2)
    i, j = len(s1), len(s2)
    picked: list[str] = []
    while i > 0 and j > 0:
        if s1[i - 1] == s2[j - 1]:
            picked.append(s1[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            j -= 1
        else:
            i -= 1
    return "".join(reversed(picked))


def longest_common_substring(s1: str, s2: str) -> int:
    """Return the length of the longest common contiguous substring."""
    best = 0
    previous = [0] * (len(s2) + 1)
    for x in s1:
        current = [0] * (len(s2) + 1)
        for j, y in enumerate(s2, start=1):
            if x == y:
                current[j] = previous[j - 1] + 1
                best = max(best, current[j])
        previous = current
    return best


def longest_palindromic_subsequence(s: str) -> int:
    """Return the length of the longest palindromic subsequence."""
    return lcs_length(s, s[::-1])


def longest_repeating_subsequence(s: str) -> int:
    """Return the length of the longest subsequence occurring twice at distinct positions."""
    n = len(s)
    table = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        for j in range(1, n + 1):
            if s[i - 1] == s[j - 1] and i != j:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i][j - 1], table[i - 1][j])
    return table[n][n]


def shortest_common_supersequence(a: str, b: str) -> str:
    """Return one shortest string that has both ``a`` and ``b`` as subsequences."""
    table = _lcs_table(a, b)
    i, j = len(a), len(b)
    built: list[str] = []
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            built.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            built.append(b[j - 1])
            j -= 1
        else:
            built.append(a[i - 1])
            i -= 1
    built.extend(reversed(a[:i]))
    built.extend(reversed(b[:j]))
    return "".join(reversed(built))


def shortest_common_supersequence_length(a: Sequence, b: Sequence) -> int:
    """Return the length of the shortest common supersequence."""
    return len(a) + len(b) - lcs_length(a, b)


def min_deletions_to_palindrome(s: str) -> int:
    """Return the fewest characters to delete so that ``s`` becomes a palindrome."""
    return len(s) - longest_palindromic_subsequence(s)


def min_insertions_to_palindrome(s: str) -> int:
    """Return the fewest characters to insert so that ``s`` becomes a palindrome."""
    return len(s) - longest_palindromic_subsequence(s)