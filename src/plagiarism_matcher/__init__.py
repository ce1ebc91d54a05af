"""
plagiarism_matcher package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import MatcherConfig, config_from_dict, config_from_yaml, load_config
from .engine import analyze, analyze_with_config, compare_algorithms
from .models import Algorithm, AnalysisResult, Match
from .textutils import normalize_text

__all__ = [
    "Algorithm",
    "AnalysisResult",
    "Match",
    "MatcherConfig",
    "analyze",
    "analyze_with_config",
    "compare_algorithms",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "normalize_text",
]

__version__ = "0.1.0"
