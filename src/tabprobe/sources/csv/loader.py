"""Delimited-text loader - every cell is kept as raw text."""

from __future__ import annotations

import csv
import io
from collections.abc import Callable, Sequence

import pandas as pd

from tabprobe.core.config import Settings, get_settings
from tabprobe.core.exceptions import LoadError
from tabprobe.core.logging import get_logger
from tabprobe.core.models import LoadedTable, SourceKind
from tabprobe.sources.base import LoaderBase, build_table

logger = get_logger(__name__)


def unique_names(names: Sequence[str]) -> list[str]:
    """Make header names unique, suffixing repeats as name.1, name.2, ..."""
    used: set[str] = set()
    result = []
    for name in names:
        candidate = name
        suffix = 0
        while candidate in used:
            suffix += 1
            candidate = f"{name}.{suffix}"
        used.add(candidate)
        result.append(candidate)
    return result


class CSVLoader(LoaderBase):
    """Loader for delimited text files.

    Delimited text is untyped: the header line supplies the column names
    verbatim and every field stays a string, so type decisions are left to
    the analysis stage. Empty fields stay "", fields missing from a short
    line become None, and extra fields on a long line are dropped.
    """

    def __init__(self, settings: Settings | None = None):
        settings = settings or get_settings()
        self.encoding = settings.csv_encoding
        self.delimiter = settings.csv_delimiter

    @property
    def source_kind(self) -> SourceKind:
        return SourceKind.DELIMITED_TEXT

    def load(self, data: bytes, source_name: str | None = None) -> LoadedTable:
        try:
            text = data.decode(self.encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise LoadError(f"Source is not valid {self.encoding} text: {e}", source=source_name) from e

        if not text.strip():
            return LoadedTable.empty(self.source_kind)

        # The header is read as an ordinary record so that its width, not the
        # widest line, fixes the column count.
        options = {
            "sep": self.delimiter,
            "header": None,
            "dtype": str,
            "keep_default_na": False,
            "skip_blank_lines": True,
            "engine": "python",
        }
        try:
            width = pd.read_csv(io.StringIO(text), nrows=1, **options).shape[1]
            frame = pd.read_csv(
                io.StringIO(text),
                on_bad_lines=self._truncate_long_line(width, source_name),
                **options,
            )
        except pd.errors.EmptyDataError:
            return LoadedTable.empty(self.source_kind)
        except (pd.errors.ParserError, csv.Error, ValueError) as e:
            raise LoadError(f"Failed to parse delimited text: {e}", source=source_name) from e

        records = frame.itertuples(index=False, name=None)
        header = next(records, None)
        if header is None:
            return LoadedTable.empty(self.source_kind)

        names = unique_names(["" if pd.isna(name) else str(name) for name in header])
        table = build_table(names, records, self.source_kind)
        logger.debug(
            "delimited_text_loaded",
            source=source_name,
            rows=table.row_count,
            columns=table.column_count,
        )
        return table

    @staticmethod
    def _truncate_long_line(width: int, source_name: str | None) -> Callable[[list[str]], list[str]]:
        """Build an on_bad_lines handler that keeps the first `width` fields."""

        def handler(bad_line: list[str]) -> list[str]:
            logger.warning(
                "csv_line_truncated",
                source=source_name,
                expected_fields=width,
                actual_fields=len(bad_line),
            )
            return bad_line[:width]

        return handler
