from __future__ import annotations

from typing import List

from ..models import Match


def compute_lps(pattern: str) -> List[int]:
    """
    Build the longest-proper-prefix-suffix table for pattern.
    lps[i] is the length of the longest proper prefix of pattern[: i + 1]
    that is also a suffix of it.
    """
    lps = [0] * len(pattern)
    length = 0
    i = 1

    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length != 0:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1

    return lps


def kmp_search(text: str, pattern: str) -> List[Match]:
    """Return every occurrence of pattern in text, overlapping ones included."""
    matches: List[Match] = []
    txt_len = len(text)
    pat_len = len(pattern)
    if pat_len == 0 or txt_len == 0:
        return matches

    lps = compute_lps(pattern)
    i = 0  # index into text
    j = 0  # index into pattern

    while i < txt_len:
        if pattern[j] == text[i]:
            i += 1
            j += 1

        if j == pat_len:
            start = i - j
            matches.append(Match(index=start, length=pat_len, text=text[start:i]))
            j = lps[j - 1]
        elif i < txt_len and pattern[j] != text[i]:
            if j != 0:
                j = lps[j - 1]
            else:
                i += 1

    return matches
