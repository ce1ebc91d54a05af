from __future__ import annotations

import re

# Anything that is not a letter, digit or whitespace. Underscore is punctuation here.
NON_WORD_RE = re.compile(r"[^\w\s]|_", re.UNICODE)
WHITESPACE_RE = re.compile(r"\s+", re.UNICODE)


def normalize_text(value: object) -> str:
    """Lowercase, blank out punctuation and collapse whitespace.

    Every offset reported by the engine refers to positions in this
    normalized form, never in the raw input.
    """
    if not isinstance(value, str):
        value = str(value)
    normalized = value.lower()
    normalized = NON_WORD_RE.sub(" ", normalized)
    normalized = WHITESPACE_RE.sub(" ", normalized)
    return normalized.strip()
