from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

DEFAULT_MIN_MATCH_LENGTH = 20

# Rolling hash parameters shared by every Rabin-Karp invocation.
RABIN_KARP_BASE = 101
RABIN_KARP_MODULUS = 2_305_843_009_213_693_951  # 2**61 - 1


@dataclass(slots=True)
class MatcherConfig:
    """Configuration options for a document comparison run."""

    algorithm: str = "kmp"
    min_match_length: int = DEFAULT_MIN_MATCH_LENGTH
    display_text_limit: int = 100
    max_display_matches: int = 10

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


INT_FIELDS = ("min_match_length", "display_text_limit", "max_display_matches")


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(MatcherConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    for key in INT_FIELDS:
        if key in kwargs:
            kwargs[key] = _coerce_int(key, kwargs[key])
    if "algorithm" in kwargs:
        kwargs["algorithm"] = str(kwargs["algorithm"])
    return kwargs


def _coerce_int(name: str, value: Any) -> int:
    """Accept ints and integer-valued strings from YAML, reject everything else."""
    message = f"Configuration value '{name}' must be an integer, got {value!r}."
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(message)
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(message) from exc


def config_from_dict(data: Mapping[str, Any] | None) -> MatcherConfig:
    """Build a MatcherConfig from a dictionary-like input."""
    if data is None:
        return MatcherConfig()
    return MatcherConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> MatcherConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> MatcherConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return MatcherConfig()
    return config_from_yaml(path)
