from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, TypedDict

import typer
import yaml

from .config import DEFAULT_MIN_MATCH_LENGTH, MatcherConfig, load_config
from .engine import analyze_with_config, compare_algorithms
from .errors import DocumentExtractionError, InvalidMatchLengthError, UnknownAlgorithmError
from .extraction import extract_text
from .report import build_report

app = typer.Typer(help="Plagiarism Matcher CLI.", no_args_is_help=True)


class BenchmarkEntry(TypedDict):
    algorithm: str
    time_taken_ms: float
    plagiarism_percentage: float
    matched_characters: int
    segments: int


@app.command()
def compare(
    source: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, help="Document checked for copying."
    ),
    target: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, help="Document searched for copied text."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    algorithm: str | None = typer.Option(
        None,
        "--algorithm",
        "-a",
        help="Search algorithm: 'kmp', 'boyer-moore' or 'rabin-karp'.",
    ),
    min_match_length: int | None = typer.Option(
        None, "--min-match-length", "-m", help="Characters per source window."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline details."),
) -> None:
    """Compare two documents and emit a JSON report."""
    _configure_logging(verbose)
    try:
        cfg = load_config(config)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _apply_overrides(cfg, algorithm, min_match_length)
    source_text = _read_document(source)
    target_text = _read_document(target)
    try:
        result = analyze_with_config(source_text, target_text, cfg)
    except (InvalidMatchLengthError, UnknownAlgorithmError) as exc:
        raise typer.BadParameter(str(exc)) from exc
    report = build_report(result, cfg, source_text=source_text)
    typer.echo(json.dumps(report, indent=2))


@app.command()
def benchmark(
    source: Path = typer.Option(..., exists=True, readable=True, dir_okay=False),
    target: Path = typer.Option(..., exists=True, readable=True, dir_okay=False),
    min_match_length: int = typer.Option(
        DEFAULT_MIN_MATCH_LENGTH,
        "--min-match-length",
        "-m",
        help="Characters per source window.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline details."),
) -> None:
    """Run every algorithm on the same documents and report their timings."""
    _configure_logging(verbose)
    source_text = _read_document(source)
    target_text = _read_document(target)
    try:
        results = compare_algorithms(source_text, target_text, min_match_length)
    except InvalidMatchLengthError as exc:
        raise typer.BadParameter(str(exc)) from exc
    entries: List[BenchmarkEntry] = [
        {
            "algorithm": algorithm.label,
            "time_taken_ms": round(result.time_taken_ms, 3),
            "plagiarism_percentage": result.plagiarism_percentage,
            "matched_characters": result.matched_characters,
            "segments": len(result.matches),
        }
        for algorithm, result in results.items()
    ]
    typer.echo(json.dumps({"algorithms": entries}, indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = MatcherConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s"
        )


def _apply_overrides(
    config: MatcherConfig, algorithm: str | None, min_match_length: int | None
) -> None:
    """Apply CLI overrides to the loaded configuration when provided."""
    if algorithm:
        config.algorithm = algorithm
    if min_match_length is not None:
        config.min_match_length = min_match_length


def _read_document(path: Path) -> str:
    """Extract text from a supported document, surfacing failures as bad parameters."""
    try:
        return extract_text(path)
    except DocumentExtractionError as exc:
        raise typer.BadParameter(str(exc)) from exc


if __name__ == "__main__":
    main()
