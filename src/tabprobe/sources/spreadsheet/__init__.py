"""Spreadsheet (xlsx/xls) source loader."""

from tabprobe.sources.spreadsheet.loader import SpreadsheetLoader, detect_engine

__all__ = [
    "SpreadsheetLoader",
    "detect_engine",
]
