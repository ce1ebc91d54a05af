from __future__ import annotations

from typing import Iterable, List

from .models import Match


def merge_matches(matches: Iterable[Match]) -> List[Match]:
    """
    Coalesce touching or overlapping matches into disjoint spans.

    The sweep sorts by start offset (stable on ties) and keeps one open
    span; a match starting at or before the open span's end extends it.
    Each merged span's text is stitched from the pieces it absorbed, so it
    still equals the covered slice of the target.
    """
    ordered = sorted(matches, key=lambda match: match.index)
    if not ordered:
        return []

    merged: List[Match] = []
    current = ordered[0]
    for candidate in ordered[1:]:
        if candidate.index <= current.end:
            if candidate.end > current.end:
                overlap = current.end - candidate.index
                current = Match(
                    index=current.index,
                    length=candidate.end - current.index,
                    text=current.text + candidate.text[overlap:],
                )
        else:
            merged.append(current)
            current = candidate
    merged.append(current)
    return merged
