import pytest

from plagiarism_matcher.errors import InvalidMatchLengthError
from plagiarism_matcher.windowing import generate_patterns, iter_pattern_windows


def test_generate_patterns_slides_one_character_at_a_time():
    patterns = generate_patterns("abcdef", 4)

    assert patterns == ["abcd", "bcde", "cdef"]


def test_generate_patterns_window_equal_to_source():
    assert generate_patterns("abc", 3) == ["abc"]


def test_generate_patterns_short_source_yields_nothing():
    assert generate_patterns("abc", 20) == []
    assert generate_patterns("", 1) == []


def test_iter_pattern_windows_reports_offsets():
    windows = list(iter_pattern_windows("hello world", 5))

    assert windows[0] == (0, "hello")
    assert windows[-1] == (6, "world")
    assert len(windows) == len("hello world") - 5 + 1


@pytest.mark.parametrize("bad_length", [0, -3, 2.5, "20", True])
def test_generate_patterns_rejects_invalid_lengths(bad_length):
    with pytest.raises(InvalidMatchLengthError):
        generate_patterns("some source text", bad_length)


def test_invalid_length_is_a_value_error():
    with pytest.raises(ValueError):
        iter_pattern_windows("text", 0)
