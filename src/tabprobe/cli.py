"""CLI for tabprobe.

Provides commands for analyzing tabular files and serving the upload API.

Usage:
    tabprobe analyze sales.csv
    tabprobe analyze report.xlsx --preview 10
    tabprobe analyze data.txt --kind delimited-text --json
    tabprobe serve --port 5000
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table as RichTable

from tabprobe.analysis import AnalysisResult, analyze_file
from tabprobe.core.config import get_settings
from tabprobe.core.exceptions import LoadError
from tabprobe.core.logging import configure_logging
from tabprobe.core.models import SourceKind

app = typer.Typer(
    name="tabprobe",
    help="Infer the schema of a CSV or Excel file and summarize its numeric columns.",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
    ] = "WARNING",
    log_format: Annotated[
        str,
        typer.Option("--log-format", help="Log output format: console or json"),
    ] = "console",
) -> None:
    """tabprobe - tabular file analysis."""
    configure_logging(log_level=log_level, log_format=log_format)


@app.command()
def analyze(
    source: Annotated[
        Path,
        typer.Argument(
            help="Path to a .csv, .xlsx or .xls file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    kind: Annotated[
        SourceKind | None,
        typer.Option(
            "--kind",
            "-k",
            help="Source kind (default: derived from the file extension)",
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the analysis result as JSON"),
    ] = False,
    preview: Annotated[
        int | None,
        typer.Option("--preview", "-p", min=0, help="Number of preview rows to show"),
    ] = None,
) -> None:
    """Analyze a tabular file.

    Examples:

        tabprobe analyze sales.csv

        tabprobe analyze export.xlsx --json
    """
    settings = get_settings()
    if preview is not None:
        settings = settings.model_copy(update={"preview_rows": preview})

    try:
        result = analyze_file(source, kind, settings=settings)
    except LoadError as e:
        console.print(f"[red]Failed to analyze file:[/red] {e}")
        raise typer.Exit(1) from e

    if as_json:
        payload = {"filename": source.name, **result.to_payload()}
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    _print_summary(source.name, result)


@app.command()
def serve(
    host: Annotated[str | None, typer.Option("--host", help="Bind address")] = None,
    port: Annotated[int | None, typer.Option("--port", help="Bind port")] = None,
) -> None:
    """Serve the upload API."""
    from tabprobe.api.server import main as run_server

    run_server(host=host, port=port)


def _format_number(value: float) -> str:
    if value == int(value) and abs(value) < 1e15:
        return str(int(value))
    return f"{value:.4g}"


def _print_summary(filename: str, result: AnalysisResult) -> None:
    """Render an analysis result with rich tables."""
    console.print(f"\n[bold]{filename}[/bold]")
    console.print(f"  Rows: {result.row_count}")
    console.print(f"  Columns: {result.column_count}")

    if not result.column_names:
        console.print("\n[yellow]No data rows found.[/yellow]")
        return

    columns_table = RichTable(title="Columns")
    columns_table.add_column("Name", style="cyan")
    columns_table.add_column("Type")
    for label in ("Count", "Mean", "Min", "Max", "Sum", "Median", "Q1", "Q3"):
        columns_table.add_column(label, justify="right")

    for name in result.column_names:
        stats = result.numeric_stats.get(name)
        cells = [name, result.data_types[name].value]
        if stats is None:
            cells.extend(["-"] * 8)
        else:
            cells.append(str(stats.count))
            cells.extend(
                _format_number(v)
                for v in (
                    stats.mean,
                    stats.min,
                    stats.max,
                    stats.sum,
                    stats.median,
                    stats.q1,
                    stats.q3,
                )
            )
        columns_table.add_row(*cells)
    console.print(columns_table)

    if result.preview:
        preview_table = RichTable(title=f"Preview (first {len(result.preview)} rows)")
        for name in result.column_names:
            preview_table.add_column(name)
        for row in result.preview:
            values = (row.get(name) for name in result.column_names)
            preview_table.add_row(*("" if value is None else str(value) for value in values))
        console.print(preview_table)


if __name__ == "__main__":
    app()
