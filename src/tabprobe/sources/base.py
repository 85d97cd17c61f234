"""Base loader interface and helpers shared by all tabular sources."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from datetime import date, datetime, time
from pathlib import PurePath
from types import MappingProxyType
from typing import Any, BinaryIO

import numpy as np
import pandas as pd

from tabprobe.core.exceptions import LoadError, UnsupportedSourceError
from tabprobe.core.models import CellValue, LoadedTable, Row, SourceKind

_EXTENSION_KINDS: dict[str, SourceKind] = {
    ".csv": SourceKind.DELIMITED_TEXT,
    ".xlsx": SourceKind.SPREADSHEET,
    ".xls": SourceKind.SPREADSHEET,
}


class LoaderBase(ABC):
    """Turns raw bytes of one source kind into a LoadedTable."""

    @property
    @abstractmethod
    def source_kind(self) -> SourceKind:
        """Kind of source this loader parses."""

    @abstractmethod
    def load(self, data: bytes, source_name: str | None = None) -> LoadedTable:
        """Parse the bytes into rows and an ordered column list.

        Raises:
            LoadError: If the bytes cannot be parsed as this loader's kind
        """


def kind_from_filename(filename: str) -> SourceKind:
    """Map a file name to its source kind by extension (case-insensitive)."""
    suffix = PurePath(filename).suffix.lower()
    kind = _EXTENSION_KINDS.get(suffix)
    if kind is None:
        raise UnsupportedSourceError(
            f"Unsupported file extension '{suffix or '(none)'}'. "
            f"Expected one of: {', '.join(sorted(_EXTENSION_KINDS))}",
            source=filename,
        )
    return kind


def read_source(source: BinaryIO | bytes, source_name: str | None = None) -> bytes:
    """Read a whole byte source into memory."""
    if isinstance(source, bytes | bytearray | memoryview):
        return bytes(source)
    try:
        data = source.read()
    except (OSError, ValueError) as e:
        raise LoadError(f"Unreadable source stream: {e}", source=source_name) from e
    if isinstance(data, str):
        raise LoadError("Source stream must be opened in binary mode", source=source_name)
    return data


def to_cell(value: Any) -> CellValue:
    """Normalize a parser-produced value to a raw cell value.

    Strings pass through verbatim. Missing markers (None, NaN, NaT) become None.
    numpy scalars become Python scalars and temporal values become ISO-8601 text.
    """
    if isinstance(value, str):
        return value
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, bool | np.bool_):
        return bool(value)
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float):
        return None if math.isnan(value) else value
    if isinstance(value, int):
        return value
    if isinstance(value, datetime | date | time):
        return value.isoformat()
    if pd.isna(value):
        return None
    return str(value)


def build_table(
    column_names: Sequence[Any],
    records: Iterable[Sequence[Any]],
    source_kind: SourceKind,
) -> LoadedTable:
    """Assemble immutable rows keyed by column name.

    A source with no data rows yields an empty table with no columns.
    """
    names = tuple(str(name) for name in column_names)
    rows: list[Row] = []
    for record in records:
        cells = [to_cell(value) for value in record]
        # Short records are padded with absent cells
        cells.extend([None] * (len(names) - len(cells)))
        rows.append(MappingProxyType(dict(zip(names, cells, strict=False))))

    if not rows:
        return LoadedTable.empty(source_kind)
    return LoadedTable(rows=tuple(rows), column_names=names, source_kind=source_kind)
