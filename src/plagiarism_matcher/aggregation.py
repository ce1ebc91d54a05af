from __future__ import annotations

import logging
from typing import Iterable, List

from .models import Algorithm, Match
from .search import get_search_function

logger = logging.getLogger(__name__)


def aggregate(
    target: str, patterns: Iterable[str], algorithm: Algorithm | str
) -> List[Match]:
    """
    Search target for every pattern and concatenate the raw hits.
    Hits keep pattern order, then in-pattern order; duplicates from
    overlapping windows are left for merge_matches to collapse.
    """
    search = get_search_function(algorithm)
    matches: List[Match] = []
    pattern_count = 0
    for pattern in patterns:
        pattern_count += 1
        matches.extend(search(target, pattern))
    logger.debug(
        "Aggregated %s raw matches from %s patterns using %s",
        len(matches),
        pattern_count,
        Algorithm.parse(algorithm).label,
    )
    return matches
