from __future__ import annotations

from typing import List, TypedDict

from .config import MatcherConfig
from .models import AnalysisResult, Match
from .scoring import severity_label
from .textutils import normalize_text


class SegmentPayload(TypedDict, total=False):
    index: int
    length: int
    text: str
    source_index: int


class ReportPayload(TypedDict):
    algorithm: str
    plagiarism_percentage: float
    severity: str
    time_taken_ms: float
    matched_characters: int
    total_segments: int
    segments: List[SegmentPayload]
    more_matches: int


def truncate_for_display(text: str, limit: int) -> str:
    """Cut text to limit characters, marking the cut with an ellipsis."""
    if limit <= 0 or len(text) <= limit:
        return text
    return text[:limit] + "..."


def build_report(
    result: AnalysisResult,
    config: MatcherConfig | None = None,
    source_text: str | None = None,
) -> ReportPayload:
    """Create a JSON-serializable summary of an analysis for display."""
    cfg = config or MatcherConfig()
    normalized_source = normalize_text(source_text) if source_text is not None else None
    shown = result.matches[: max(0, cfg.max_display_matches)]
    segments = [
        _segment_dict(match, cfg.display_text_limit, normalized_source)
        for match in shown
    ]
    return {
        "algorithm": result.algorithm.label,
        "plagiarism_percentage": result.plagiarism_percentage,
        "severity": severity_label(result.plagiarism_percentage),
        "time_taken_ms": round(result.time_taken_ms, 3),
        "matched_characters": result.matched_characters,
        "total_segments": len(result.matches),
        "segments": segments,
        "more_matches": len(result.matches) - len(segments),
    }


def _segment_dict(
    match: Match, text_limit: int, normalized_source: str | None
) -> SegmentPayload:
    payload: SegmentPayload = {
        "index": match.index,
        "length": match.length,
        "text": truncate_for_display(match.text, text_limit),
    }
    if normalized_source is not None:
        # First place the matched span appears in the source, -1 when it was
        # stitched from pieces that never occur contiguously there.
        payload["source_index"] = normalized_source.find(match.text)
    return payload
