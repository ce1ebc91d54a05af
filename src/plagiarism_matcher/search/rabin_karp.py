from __future__ import annotations

from typing import List

from ..config import RABIN_KARP_BASE, RABIN_KARP_MODULUS
from ..models import Match


def polynomial_hash(
    value: str,
    length: int,
    base: int = RABIN_KARP_BASE,
    modulus: int = RABIN_KARP_MODULUS,
) -> int:
    """Hash the first length characters of value as a base-`base` polynomial."""
    result = 0
    for char in value[:length]:
        result = (result * base + ord(char)) % modulus
    return result


def rabin_karp_search(
    text: str,
    pattern: str,
    base: int = RABIN_KARP_BASE,
    modulus: int = RABIN_KARP_MODULUS,
) -> List[Match]:
    """
    Rolling-hash search over text. The hash is exact integer arithmetic
    modulo a prime, and every hash hit is confirmed character by character
    before it is reported, so collisions never surface as matches.
    """
    matches: List[Match] = []
    n = len(text)
    m = len(pattern)
    if m == 0 or n == 0 or m > n:
        return matches

    high_order = pow(base, m - 1, modulus)
    pattern_hash = polynomial_hash(pattern, m, base, modulus)
    window_hash = polynomial_hash(text, m, base, modulus)

    for i in range(n - m + 1):
        if window_hash == pattern_hash and text[i : i + m] == pattern:
            matches.append(Match(index=i, length=m, text=text[i : i + m]))
        if i < n - m:
            window_hash = (window_hash - ord(text[i]) * high_order) % modulus
            window_hash = (window_hash * base + ord(text[i + m])) % modulus

    return matches
