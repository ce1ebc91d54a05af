from __future__ import annotations

from typing import Dict, List

from ..models import Match


def build_bad_char_table(pattern: str) -> Dict[str, int]:
    """Map each character of pattern to the index of its last occurrence."""
    return {char: idx for idx, char in enumerate(pattern)}


def boyer_moore_search(text: str, pattern: str) -> List[Match]:
    """Bad-character Boyer-Moore returning every occurrence of pattern in text."""
    matches: List[Match] = []
    n = len(text)
    m = len(pattern)
    if m == 0 or n == 0:
        return matches

    last = build_bad_char_table(pattern)
    s = 0
    while s <= n - m:
        j = m - 1
        while j >= 0 and pattern[j] == text[s + j]:
            j -= 1

        if j < 0:
            matches.append(Match(index=s, length=m, text=text[s : s + m]))
            if s + m < n:
                s += max(1, m - last.get(text[s + m], -1))
            else:
                s += 1
        else:
            s += max(1, j - last.get(text[s + j], -1))

    return matches
