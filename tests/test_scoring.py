import pytest

from plagiarism_matcher.models import Match
from plagiarism_matcher.scoring import score_matches, severity_label


def test_score_matches_percentage_rounded():
    matches = [Match(0, 10, "x" * 10), Match(20, 5, "y" * 5)]

    assert score_matches(matches, 45) == 33.33


def test_score_matches_clamped_to_100():
    assert score_matches([Match(0, 80, "z" * 80)], 40) == 100.0


def test_score_matches_zero_source_length():
    assert score_matches([Match(0, 5, "abcde")], 0) == 0.0


def test_score_matches_no_matches():
    assert score_matches([], 100) == 0.0


@pytest.mark.parametrize(
    "percentage,label",
    [(0.0, "low"), (19.99, "low"), (20.0, "moderate"), (49.9, "moderate"), (50.0, "high"), (100.0, "high")],
)
def test_severity_label_bands(percentage: float, label: str):
    assert severity_label(percentage) == label
