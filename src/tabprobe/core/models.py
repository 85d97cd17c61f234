"""Base models and types used across all modules.

This module contains the fundamental types that don't belong to any specific
module (sources, analysis, api).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

# A raw cell as produced by a loader. None means the cell is absent.
CellValue = str | int | float | bool | None
Row = Mapping[str, CellValue]


# === Enums ===


class SourceKind(str, Enum):
    """Kind of tabular source a loader understands."""

    DELIMITED_TEXT = "delimited-text"
    SPREADSHEET = "spreadsheet"


class InferredType(str, Enum):
    """Semantic type assigned to a column from its sample value."""

    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    STRING = "string"
    UNKNOWN = "unknown"


# === Loaded data ===


@dataclass(frozen=True)
class LoadedTable:
    """Rows and column order produced by a loader.

    Rows share the key set of column_names, in that order.
    """

    rows: tuple[Row, ...]
    column_names: tuple[str, ...]
    source_kind: SourceKind

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.column_names)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @classmethod
    def empty(cls, source_kind: SourceKind) -> LoadedTable:
        """A table with no rows and no columns."""
        return cls(rows=(), column_names=(), source_kind=source_kind)
