from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .errors import UnknownAlgorithmError


class Algorithm(str, Enum):
    """Exact-match search algorithms the engine can run."""

    KMP = "kmp"
    BOYER_MOORE = "boyer-moore"
    RABIN_KARP = "rabin-karp"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value: "Algorithm | str") -> "Algorithm":
        """Resolve an enum member, value or display label into an Algorithm."""
        if isinstance(value, Algorithm):
            return value
        normalized = str(value).strip().lower().replace("_", "-").replace(" ", "-")
        for member in cls:
            if normalized in (member.value, member.label.lower()):
                return member
        raise UnknownAlgorithmError(
            f"Unknown algorithm '{value}'. Expected one of: "
            + ", ".join(member.value for member in cls)
        )


_LABELS = {
    Algorithm.KMP: "KMP",
    Algorithm.BOYER_MOORE: "Boyer-Moore",
    Algorithm.RABIN_KARP: "Rabin-Karp",
}


@dataclass(slots=True, frozen=True)
class Match:
    """A located occurrence inside the normalized target text."""

    index: int
    length: int
    text: str

    @property
    def end(self) -> int:
        return self.index + self.length


@dataclass(slots=True)
class AnalysisResult:
    """Outcome of comparing a source document against a target document."""

    matches: list[Match] = field(default_factory=list)
    time_taken_ms: float = 0.0
    algorithm: Algorithm = Algorithm.KMP
    plagiarism_percentage: float = 0.0

    @property
    def matched_characters(self) -> int:
        return sum(match.length for match in self.matches)
