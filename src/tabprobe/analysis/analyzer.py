"""Analysis orchestrator.

Loads a tabular source, runs type inference and numeric statistics over the
same rows, and assembles the AnalysisResult. A LoadError aborts the whole
analysis; no partial result is ever returned.

Usage:
    from tabprobe.analysis import analyze, analyze_file

    with open("sales.xlsx", "rb") as f:
        result = analyze(f, SourceKind.SPREADSHEET)

    result = analyze_file("sales.csv")
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import BinaryIO

from tabprobe.analysis.models import AnalysisResult
from tabprobe.analysis.statistics import compute_numeric_stats
from tabprobe.analysis.typing import infer_column_types
from tabprobe.core.config import Settings, get_settings
from tabprobe.core.exceptions import LoadError
from tabprobe.core.logging import get_logger
from tabprobe.core.models import LoadedTable, SourceKind
from tabprobe.sources import kind_from_filename, load_table

logger = get_logger(__name__)


def analyze_table(table: LoadedTable, preview_rows: int = 5) -> AnalysisResult:
    """Summarize an already loaded table."""
    rows = table.rows
    columns = table.column_names

    data_types = infer_column_types(rows, columns)
    numeric_stats = compute_numeric_stats(rows, columns)

    return AnalysisResult(
        row_count=table.row_count,
        column_count=table.column_count,
        column_names=columns,
        data_types=data_types,
        numeric_stats=numeric_stats,
        preview=tuple(dict(row) for row in rows[:preview_rows]),
    )


def analyze(
    source: BinaryIO | bytes,
    kind: SourceKind,
    settings: Settings | None = None,
    source_name: str | None = None,
) -> AnalysisResult:
    """Load and analyze a byte source of the declared kind.

    Args:
        source: Readable binary stream or raw bytes
        kind: Declared source kind
        settings: Application settings (defaults to the cached settings)
        source_name: Label used in logs and error messages

    Returns:
        AnalysisResult

    Raises:
        LoadError: If the source cannot be parsed as `kind`
    """
    settings = settings or get_settings()
    start_time = time.time()
    logger.info("analysis_started", source=source_name, source_kind=SourceKind(kind).value)

    table = load_table(source, kind, settings=settings, source_name=source_name)
    result = analyze_table(table, preview_rows=settings.preview_rows)

    logger.info(
        "analysis_completed",
        source=source_name,
        rows=result.row_count,
        columns=result.column_count,
        numeric_columns=len(result.numeric_stats),
        duration_seconds=round(time.time() - start_time, 4),
    )
    return result


def analyze_file(
    path: str | Path,
    kind: SourceKind | None = None,
    settings: Settings | None = None,
) -> AnalysisResult:
    """Analyze a file on disk, taking the kind from its extension when omitted.

    Raises:
        LoadError: If the file is missing, unreadable, or cannot be parsed
    """
    path = Path(path)
    if kind is None:
        kind = kind_from_filename(path.name)

    try:
        with path.open("rb") as f:
            return analyze(f, kind, settings=settings, source_name=path.name)
    except OSError as e:
        raise LoadError(f"Cannot open file: {e.strerror or e}", source=str(path)) from e
