"""CLI entry point for reposcore."""

import logging
from pathlib import Path

# Load .env file if it exists
from dotenv import load_dotenv
load_dotenv()

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from reposcore import __version__
from reposcore.adapters import ScoreSourceError, load_source
from reposcore.analyzers.aggregator import RepositoryAggregator
from reposcore.analyzers.rates import format_rate
from reposcore.config import ReportSettings
from reposcore.reports.generator import OutputDirectoryError, ReportGenerator, write_dashboard
from reposcore.reports.rows import build_rows, format_total

app = typer.Typer(help="Contribution score reports for source repositories.")

console = Console()


def setup_logging(level: str) -> None:
    """Send log records through rich at the given level."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


@app.command()
def generate(
    inputs: list[Path] = typer.Argument(..., help="Score files (.json or .csv), one per repository"),
    output_dir: Path | None = typer.Option(None, "--output-dir", "-o", help="Root output folder"),
    skip_chart: bool = typer.Option(False, "--skip-chart", help="Do not render PNG charts"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level"),
) -> None:
    """Generate per-repository reports and the combined dashboard."""
    overrides = {}
    if output_dir is not None:
        overrides["output_dir"] = output_dir
    if log_level is not None:
        overrides["log_level"] = log_level

    try:
        settings = ReportSettings.model_validate({**ReportSettings.from_env().model_dump(), **overrides})
    except ValidationError as e:
        console.print("[red]Invalid settings[/red]")
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    setup_logging(settings.log_level)

    aggregator = RepositoryAggregator()

    summary = Table(title="Generated Reports")
    summary.add_column("Repository", style="cyan")
    summary.add_column("Users", justify="right")
    summary.add_column("Top User", style="green")
    summary.add_column("Files", justify="right")

    for path in inputs:
        try:
            repo = load_source(path)
        except ScoreSourceError as e:
            console.print(f"[red]Could not load {e.path}[/red]")
            console.print(f"[red]{escape(e.reason)}[/red]")
            raise typer.Exit(1)

        try:
            generator = ReportGenerator(repo.scores, repo.repo_name, settings.output_dir, settings=settings)
        except OutputDirectoryError as e:
            console.print(f"[red]Failed to create output directory: {e.path}[/red]")
            console.print(f"[red]{escape(str(e.error))}[/red]")
            raise typer.Exit(1)

        written = generator.generate_all(summary=repo.state, chart=not skip_chart)
        aggregator.ingest(repo.repo_name, repo.scores)

        top = generator.rows[0].user if generator.rows else "-"
        summary.add_row(repo.repo_name, str(len(repo.scores)), top, str(len(written)))

    try:
        index_path = write_dashboard(aggregator, settings.output_dir, settings=settings)
    except OutputDirectoryError as e:
        console.print(f"[red]Failed to create output directory: {e.path}[/red]")
        console.print(f"[red]{escape(str(e.error))}[/red]")
        raise typer.Exit(1)

    console.print(summary)
    console.print(f"[green]Dashboard written to {index_path}[/green]")


@app.command()
def show(
    input_file: Path = typer.Argument(..., help="Score file (.json or .csv)"),
    top: int = typer.Option(10, "--top", "-n", help="Number of users to show"),
) -> None:
    """Show the ranked scores of one repository."""
    try:
        repo = load_source(input_file)
    except ScoreSourceError as e:
        console.print(f"[red]Could not load {e.path}[/red]")
        console.print(f"[red]{escape(e.reason)}[/red]")
        raise typer.Exit(1)

    rows = build_rows(repo.scores)
    if not rows:
        console.print(f"[yellow]No scores in {input_file}[/yellow]")
        return

    table = Table(title=f"{repo.repo_name}: Top {min(top, len(rows))} Contributors")
    table.add_column("Rank", style="dim", width=6)
    table.add_column("User", style="cyan")
    table.add_column("Total", justify="right", style="green")
    table.add_column("PR rate", justify="right")
    table.add_column("Issue rate", justify="right")

    for row in rows[:top]:
        table.add_row(
            str(row.rank),
            row.user,
            format_total(row.total),
            f"{format_rate(row.pr_rate)}%",
            f"{format_rate(row.is_rate)}%",
        )

    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"reposcore {__version__}")


if __name__ == "__main__":
    app()
