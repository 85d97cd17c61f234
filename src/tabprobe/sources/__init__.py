"""Tabular sources - turn raw bytes into rows and an ordered column list."""

from __future__ import annotations

from typing import BinaryIO

from tabprobe.core.config import Settings
from tabprobe.core.models import LoadedTable, SourceKind
from tabprobe.sources.base import LoaderBase, build_table, kind_from_filename, read_source, to_cell
from tabprobe.sources.csv import CSVLoader
from tabprobe.sources.spreadsheet import SpreadsheetLoader


def get_loader(kind: SourceKind, settings: Settings | None = None) -> LoaderBase:
    """Return the loader for a source kind."""
    if kind is SourceKind.SPREADSHEET:
        return SpreadsheetLoader()
    return CSVLoader(settings)


def load_table(
    source: BinaryIO | bytes,
    kind: SourceKind,
    settings: Settings | None = None,
    source_name: str | None = None,
) -> LoadedTable:
    """Load a byte source of the declared kind.

    Raises:
        LoadError: If the source cannot be read or parsed as `kind`
    """
    data = read_source(source, source_name)
    return get_loader(SourceKind(kind), settings).load(data, source_name=source_name)


__all__ = [
    "CSVLoader",
    "LoaderBase",
    "SpreadsheetLoader",
    "build_table",
    "get_loader",
    "kind_from_filename",
    "load_table",
    "read_source",
    "to_cell",
]
