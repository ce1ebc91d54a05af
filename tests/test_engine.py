import pytest

from plagiarism_matcher.config import MatcherConfig
from plagiarism_matcher.engine import analyze, analyze_with_config, compare_algorithms
from plagiarism_matcher.errors import InvalidMatchLengthError, UnknownAlgorithmError
from plagiarism_matcher.models import Algorithm, Match
from plagiarism_matcher.textutils import normalize_text

ALGORITHMS = ["kmp", "boyer-moore", "rabin-karp"]

SOURCE = "The quick brown fox jumps over the lazy dog repeatedly"
TARGET = "A quick brown fox jumps over a lazy dog in the park"


def test_analyze_finds_shared_phrase_with_kmp():
    result = analyze(SOURCE, TARGET, "kmp", min_match_length=20)

    assert result.algorithm is Algorithm.KMP
    assert result.matches == [Match(index=1, length=28, text=" quick brown fox jumps over ")]
    assert any("quick brown fox jumps" in m.text for m in result.matches)
    assert result.plagiarism_percentage == 51.85
    assert result.time_taken_ms >= 0


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_identical_documents_score_100(algorithm: str):
    text = "identical text content here for testing purposes and more"
    result = analyze(text, text, algorithm)

    assert result.plagiarism_percentage == 100.0
    assert result.matches == [Match(0, len(text), text)]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_short_source_yields_empty_result(algorithm: str):
    result = analyze("abc", "abc and a much longer target document", algorithm)

    assert result.matches == []
    assert result.plagiarism_percentage == 0.0


def test_empty_documents_are_not_errors():
    assert analyze("", "anything at all in the target text").plagiarism_percentage == 0.0
    assert analyze("a reasonably long source document here", "").matches == []


def test_no_shared_windows_scores_zero():
    result = analyze(
        "completely unrelated sentence about astronomy",
        "a different paragraph discussing cooking recipes",
        "boyer-moore",
    )

    assert result.matches == []
    assert result.plagiarism_percentage == 0.0


def test_matches_index_into_normalized_target():
    source = "Shared Phrase, Copied Verbatim!"
    target = "Intro... shared phrase copied verbatim -- outro"
    result = analyze(source, target, "rabin-karp", min_match_length=10)
    normalized_target = normalize_text(target)

    assert result.matches
    for match in result.matches:
        assert normalized_target[match.index : match.index + match.length] == match.text


@pytest.mark.parametrize("length", [0, -1])
def test_invalid_min_match_length_rejected(length: int):
    with pytest.raises(InvalidMatchLengthError):
        analyze(SOURCE, TARGET, "kmp", min_match_length=length)


def test_unknown_algorithm_rejected():
    with pytest.raises(UnknownAlgorithmError):
        analyze(SOURCE, TARGET, "bogus")


def test_algorithms_agree_on_covered_length():
    source = (
        "Data structures and algorithms form the backbone of computer science. "
        "Searching for patterns in text is a classic problem with many solutions."
    )
    target = (
        "Every student learns that data structures and algorithms form the backbone "
        "of computer science, and that searching for patterns in text is a classic problem."
    )
    results = compare_algorithms(source, target, min_match_length=12)

    covered = {alg: r.matched_characters for alg, r in results.items()}
    percentages = {r.plagiarism_percentage for r in results.values()}
    assert set(results) == set(Algorithm)
    assert len(set(covered.values())) == 1
    assert len(percentages) == 1
    assert next(iter(covered.values())) > 0


def test_analyze_with_config_uses_config_values():
    config = MatcherConfig(algorithm="rabin-karp", min_match_length=5)
    result = analyze_with_config("abcdefgh", "xxabcdefghxx", config)

    assert result.algorithm is Algorithm.RABIN_KARP
    assert result.matches == [Match(2, 8, "abcdefgh")]
    assert result.plagiarism_percentage == 100.0
