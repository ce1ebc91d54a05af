from __future__ import annotations

import logging
import time
from typing import Dict

from .aggregation import aggregate
from .config import DEFAULT_MIN_MATCH_LENGTH, MatcherConfig
from .merging import merge_matches
from .models import Algorithm, AnalysisResult
from .scoring import score_matches
from .textutils import normalize_text
from .windowing import generate_patterns, validate_window_length

logger = logging.getLogger(__name__)


def analyze(
    doc1: str,
    doc2: str,
    algorithm: Algorithm | str = Algorithm.KMP,
    min_match_length: int = DEFAULT_MIN_MATCH_LENGTH,
) -> AnalysisResult:
    """
    Measure how much of doc1 (the source) reappears verbatim in doc2.

    Both documents are normalized, doc1 is cut into every window of
    min_match_length characters, and each window is searched for in doc2.
    Reported match offsets index into the normalized doc2.

    Work grows with len(doc1) * len(doc2): there is one search per source
    window and each search is linear in the target. Very large documents
    should be split by the caller; nothing here checks for cancellation.
    """
    selected = Algorithm.parse(algorithm)
    validate_window_length(min_match_length)
    start = time.perf_counter()

    source = normalize_text(doc1)
    target = normalize_text(doc2)
    patterns = generate_patterns(source, min_match_length)
    raw_matches = aggregate(target, patterns, selected)
    merged = merge_matches(raw_matches)
    percentage = score_matches(merged, len(source))

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    logger.info(
        "%s analysis: %s patterns, %s raw matches, %s spans, %.2f%% in %.3f ms",
        selected.label,
        len(patterns),
        len(raw_matches),
        len(merged),
        percentage,
        elapsed_ms,
    )
    return AnalysisResult(
        matches=merged,
        time_taken_ms=elapsed_ms,
        algorithm=selected,
        plagiarism_percentage=percentage,
    )


def analyze_with_config(doc1: str, doc2: str, config: MatcherConfig) -> AnalysisResult:
    """Convenience wrapper reading algorithm and window length from config."""
    return analyze(doc1, doc2, config.algorithm, config.min_match_length)


def compare_algorithms(
    doc1: str, doc2: str, min_match_length: int = DEFAULT_MIN_MATCH_LENGTH
) -> Dict[Algorithm, AnalysisResult]:
    """Run every algorithm over the same inputs, keyed by algorithm."""
    return {
        algorithm: analyze(doc1, doc2, algorithm, min_match_length)
        for algorithm in Algorithm
    }
