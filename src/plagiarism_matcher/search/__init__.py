from __future__ import annotations

from typing import Callable, Dict, List

from ..models import Algorithm, Match
from .boyer_moore import boyer_moore_search, build_bad_char_table
from .kmp import compute_lps, kmp_search
from .rabin_karp import polynomial_hash, rabin_karp_search

SearchFunction = Callable[[str, str], List[Match]]

__all__ = [
    "SearchFunction",
    "SEARCH_FUNCTIONS",
    "boyer_moore_search",
    "build_bad_char_table",
    "compute_lps",
    "get_search_function",
    "kmp_search",
    "polynomial_hash",
    "rabin_karp_search",
]

SEARCH_FUNCTIONS: Dict[Algorithm, SearchFunction] = {
    Algorithm.KMP: kmp_search,
    Algorithm.BOYER_MOORE: boyer_moore_search,
    Algorithm.RABIN_KARP: rabin_karp_search,
}


def get_search_function(algorithm: Algorithm | str) -> SearchFunction:
    """Look up the search(text, pattern) callable for an algorithm tag."""
    return SEARCH_FUNCTIONS[Algorithm.parse(algorithm)]
