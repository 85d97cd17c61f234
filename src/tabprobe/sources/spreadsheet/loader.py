"""Spreadsheet loader - first sheet only, header from the first row."""

from __future__ import annotations

import io

import pandas as pd

from tabprobe.core.exceptions import LoadError, UnsupportedSourceError
from tabprobe.core.logging import get_logger
from tabprobe.core.models import LoadedTable, SourceKind
from tabprobe.sources.base import LoaderBase, build_table

logger = get_logger(__name__)

# File signatures used to pick the reader engine
_ZIP_MAGIC = b"PK\x03\x04"
_OLE2_MAGIC = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"


def detect_engine(data: bytes) -> str:
    """Pick the pandas Excel engine from the workbook signature.

    xlsx workbooks are zip containers (openpyxl); legacy xls workbooks are
    OLE2 compound documents (xlrd).
    """
    if data.startswith(_ZIP_MAGIC):
        return "openpyxl"
    if data.startswith(_OLE2_MAGIC):
        return "xlrd"
    raise UnsupportedSourceError("Not an xlsx or xls workbook")


class SpreadsheetLoader(LoaderBase):
    """Loader for xlsx/xls workbooks.

    Only the first sheet is read. Its first row supplies the column names;
    empty cells become None and rows with no values at all are skipped.
    Cell values keep the type the workbook stores (numbers, booleans, text);
    date and time cells are rendered as ISO-8601 text.
    """

    @property
    def source_kind(self) -> SourceKind:
        return SourceKind.SPREADSHEET

    def load(self, data: bytes, source_name: str | None = None) -> LoadedTable:
        if not data:
            raise LoadError("Spreadsheet source is empty", source=source_name)

        try:
            engine = detect_engine(data)
        except UnsupportedSourceError as e:
            raise UnsupportedSourceError(e.message, source=source_name) from e

        try:
            frame = pd.read_excel(
                io.BytesIO(data),
                sheet_name=0,
                header=0,
                dtype=object,
                engine=engine,
            )
        except Exception as e:
            raise LoadError(f"Failed to read spreadsheet: {e}", source=source_name) from e

        frame = frame.dropna(how="all")
        table = build_table(
            frame.columns,
            frame.itertuples(index=False, name=None),
            self.source_kind,
        )
        logger.debug(
            "spreadsheet_loaded",
            source=source_name,
            engine=engine,
            rows=table.row_count,
            columns=table.column_count,
        )
        return table
