from __future__ import annotations

from typing import Iterable

from .models import Match

LOW_SEVERITY_CEILING = 20.0
MODERATE_SEVERITY_CEILING = 50.0


def score_matches(merged_matches: Iterable[Match], source_length: int) -> float:
    """Percentage of the source covered by merged matches, clamped to [0, 100]."""
    if source_length <= 0:
        return 0.0
    matched_chars = sum(match.length for match in merged_matches)
    percentage = (matched_chars / source_length) * 100
    return round(min(100.0, max(0.0, percentage)), 2)


def severity_label(percentage: float) -> str:
    """Bucket a plagiarism percentage into low / moderate / high."""
    if percentage < LOW_SEVERITY_CEILING:
        return "low"
    if percentage < MODERATE_SEVERITY_CEILING:
        return "moderate"
    return "high"
