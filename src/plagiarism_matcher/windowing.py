from __future__ import annotations

from typing import Iterator, List, Tuple

from .errors import InvalidMatchLengthError


def validate_window_length(window_length: object) -> int:
    """Return window_length unchanged when it is a positive integer."""
    if isinstance(window_length, bool) or not isinstance(window_length, int):
        raise InvalidMatchLengthError(
            f"Minimum match length must be an integer, got {window_length!r}."
        )
    if window_length <= 0:
        raise InvalidMatchLengthError(
            f"Minimum match length must be positive, got {window_length}."
        )
    return window_length


def iter_pattern_windows(source: str, window_length: int) -> Iterator[Tuple[int, str]]:
    """Yield (offset, window) pairs over source with a stride of one character."""
    validate_window_length(window_length)
    last_start = len(source) - window_length
    return (
        (start, source[start : start + window_length])
        for start in range(last_start + 1)
    )


def generate_patterns(source: str, window_length: int) -> List[str]:
    """
    Create every overlapping window of exactly window_length characters.
    Sources shorter than the window produce no patterns.
    """
    return [pattern for _, pattern in iter_pattern_windows(source, window_length)]
