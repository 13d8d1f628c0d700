"""CLI for decision-audit: parse / classify / analyze commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from decision_audit.analysis.service import AnalysisReport, AnalysisService
from decision_audit.core.config import AnalysisConfig, AppSettings
from decision_audit.core.logging_config import setup_logging
from decision_audit.exceptions import TextExtractionError
from decision_audit.extractors.plain_text import PlainTextExtractor
from decision_audit.fingerprint.classifier import classify as classify_text
from decision_audit.formatters.json_formatter import JSONFormatter
from decision_audit.models import ExtractedText, Fingerprint, ParseResult
from decision_audit.parsing.parser import parse as parse_text

app = typer.Typer(name="decision-audit", help="Fact extraction and fingerprinting for decision letters")
console = Console()


def _configure(verbose: bool) -> AppSettings:
    settings = AppSettings()
    if verbose:
        settings.observability.log_level = "DEBUG"
    setup_logging(settings.observability)
    return settings


def _load(path: Path) -> ExtractedText:
    """Read a letter file, turning extraction failures into CLI errors."""
    try:
        return PlainTextExtractor().extract(path)
    except TextExtractionError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc


def _claims_table(result: ParseResult) -> Table:
    table = Table(title="Conditions")
    table.add_column("Name", style="cyan")
    table.add_column("Rating", justify="right")
    table.add_column("DC")
    table.add_column("Effective")
    for claim in result.claims:
        table.add_row(
            claim.name,
            f"{claim.rating_percent}%" if claim.rating_percent is not None else "?",
            claim.diagnostic_code or "?",
            claim.effective_date or "?",
        )
    return table


def _print_facts(result: ParseResult) -> None:
    facts = result.facts
    combined = facts.combined_rating_stated
    console.print(f"Combined rating (stated): {f'{combined}%' if combined is not None else 'not found'}")
    console.print(f"Effective dates: {', '.join(facts.effective_dates) or 'not found'}")
    console.print(f"Diagnostic codes: {', '.join(facts.diagnostic_codes) or 'not found'}")
    console.print(f"Sections: {', '.join(s.value for s in facts.sections.found) or 'none'}")
    console.print(f"Extraction confidence: [bold]{result.extraction_confidence.value}[/bold]")


def _print_fingerprint(fingerprint: Fingerprint) -> None:
    table = Table(title="Fingerprint")
    table.add_column("Signal")
    for label in fingerprint.signals:
        table.add_row(label)
    console.print(table)
    verdict = "[green]looks like a decision letter[/green]" if fingerprint.looks_like_target else (
        "[yellow]does not look like a decision letter[/yellow]"
    )
    console.print(
        f"Score {fingerprint.score}, confidence [bold]{fingerprint.confidence.value}[/bold]: {verdict}"
    )


@app.command()
def parse(
    letter: Path = typer.Argument(..., help="Decision letter as a .txt file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write ParseResult JSON here"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Extract claims and document facts from a letter."""
    _configure(verbose)
    extracted = _load(letter)
    result = parse_text(extracted.text)

    if output:
        JSONFormatter().format_to_file(result, output)
        console.print(f"[green]ParseResult saved to {output}[/green]")
    else:
        console.print_json(JSONFormatter().format(result).decode("utf-8"))


@app.command()
def classify(
    letter: Path = typer.Argument(..., help="Decision letter as a .txt file"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Score how much a file looks like a decision letter."""
    _configure(verbose)
    extracted = _load(letter)
    result = parse_text(extracted.text)
    _print_fingerprint(classify_text(extracted.text, result))


@app.command()
def analyze(
    letter: Path = typer.Argument(..., help="Decision letter as a .txt file"),
    consent: bool = typer.Option(False, "--consent", help="Allow cloud processing"),
    enable_ai: Optional[bool] = typer.Option(None, "--enable-ai/--disable-ai"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the report JSON here"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Parse, fingerprint and gate a letter in one pass."""
    settings = _configure(verbose)
    config: AnalysisConfig = settings.analysis
    if enable_ai is not None:
        config = config.model_copy(update={"enable_ai": enable_ai})

    extracted = _load(letter)
    report: AnalysisReport = AnalysisService(config).analyze(extracted, consent=consent)

    console.print(_claims_table(report.result))
    _print_facts(report.result)
    _print_fingerprint(report.fingerprint)

    if report.gate.allowed:
        console.print("[green]Analysis hand-off allowed[/green]")
    else:
        console.print("[yellow]Analysis hand-off blocked:[/yellow]")
        for reason in report.gate.reasons:
            console.print(f"  - {escape(reason)}")

    if output:
        JSONFormatter().format_to_file(report, output)
        console.print(f"[green]Report saved to {output}[/green]")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default AUDIT_API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Port (default AUDIT_API_PORT)"),
) -> None:
    """Run the HTTP API with uvicorn (needs the ``serve`` extra)."""
    import uvicorn

    settings = AppSettings()
    uvicorn.run(
        "decision_audit.api.app:app",
        host=host or settings.api.host,
        port=port or settings.api.port,
        log_config=None,
    )


if __name__ == "__main__":
    app()
