"""Command line tools for clockwords.

Commands:
    clockwords scan "See you tomorrow at 5pm" --now 2026-02-07T14:30:00Z --json
    clockwords languages
    clockwords benchmark --iterations 1000
"""

from __future__ import annotations

import json
import time
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer
from dateutil.parser import isoparse
from rich.console import Console
from rich.table import Table

from clockwords.config import load_settings, settings_from_env
from clockwords.errors import ClockwordsError
from clockwords.lang import LANGUAGES
from clockwords.scanner import default_scanner, scanner_for_languages

console = Console()
app = typer.Typer(help="Find relative time expressions in text")

BENCHMARK_SCENARIOS = {
    "no keywords": (
        "This text has absolutely no time related words in it. "
        "It should be rejected very quickly."
    ),
    "single match": "I will see you tomorrow at 5pm.",
    "several matches": (
        "I saw him yesterday. He said he would come back in 2 days. "
        "Maybe last week was better."
    ),
}


def _parse_now(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return isoparse(value)
    except ValueError as exc:
        raise typer.BadParameter(f"'{value}' is not an ISO 8601 timestamp") from exc


@app.command("scan")
def scan(
    text: str = typer.Argument(..., help="Text to scan"),
    now: Optional[str] = typer.Option(None, "--now", help="Reference time (ISO 8601, default: current UTC time)"),
    languages: Optional[List[str]] = typer.Option(None, "--lang", "-l", help="Language code (repeatable)"),
    no_partial: bool = typer.Option(False, "--no-partial", help="Do not report keywords still being typed"),
    max_matches: Optional[int] = typer.Option(None, "--max", min=0, help="Maximum number of matches"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings JSON file"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Scan TEXT and print the time expressions found."""
    reference = _parse_now(now)
    try:
        settings = load_settings(config_path) if config_path else settings_from_env()
    except (ClockwordsError, FileNotFoundError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    updates = {}
    if no_partial:
        updates["report_partial"] = False
    if max_matches is not None:
        updates["max_matches"] = max_matches
    parser_config = settings.parser.model_copy(update=updates)

    scanner = scanner_for_languages(languages or settings.languages, parser_config)
    matches = scanner.scan(text, now=reference)

    if output_json:
        typer.echo(json.dumps([{**match.to_dict(), "text": match.text(text)} for match in matches]))
        return

    if not matches:
        console.print("[yellow]No time expressions found[/yellow]")
        return

    table = Table(title=f"{len(matches)} time expression(s)")
    table.add_column("Text", style="cyan")
    table.add_column("Span")
    table.add_column("Kind")
    table.add_column("Confidence")
    table.add_column("Resolved", style="green")
    for match in matches:
        resolved = match.resolved.to_dict()
        if resolved["type"] == "point":
            shown = resolved["instant"]
        else:
            shown = f"{resolved['start']} -> {resolved['end']}"
        table.add_row(
            match.text(text),
            f"{match.span.start}-{match.span.end}",
            match.kind.value,
            match.confidence.name.lower(),
            shown,
        )
    console.print(table)


@app.command("languages")
def languages() -> None:
    """List the built-in languages."""
    table = Table(title="Built-in languages")
    table.add_column("Code", style="cyan")
    table.add_column("Name")
    table.add_column("Rules", justify="right")
    table.add_column("Keywords", justify="right")
    table.add_column("Prefixes", justify="right")
    for code, language_cls in LANGUAGES.items():
        language = language_cls()
        table.add_row(
            code,
            language.name,
            str(len(language.rules)),
            str(len(language.keywords)),
            str(len(language.prefixes)),
        )
    console.print(table)


@app.command("benchmark")
def benchmark(
    iterations: int = typer.Option(1000, "--iterations", "-n", min=1, help="Scans per scenario"),
) -> None:
    """Time the scanner on reference texts."""
    scanner = default_scanner()
    table = Table(title=f"Scan timings ({iterations} iterations)")
    table.add_column("Scenario", style="cyan")
    table.add_column("Matches", justify="right")
    table.add_column("Mean (µs)", justify="right")
    for label, text in BENCHMARK_SCENARIOS.items():
        matches = scanner.scan(text)
        started = time.perf_counter()
        for _ in range(iterations):
            scanner.scan(text)
        elapsed = time.perf_counter() - started
        table.add_row(label, str(len(matches)), f"{elapsed / iterations * 1e6:.1f}")
    console.print(table)


if __name__ == "__main__":
    app()
