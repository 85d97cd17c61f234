"""Core module - configuration, logging, errors, and shared models."""

from tabprobe.core.config import Settings, get_settings
from tabprobe.core.exceptions import LoadError, UnsupportedSourceError, UploadTooLargeError
from tabprobe.core.models import (
    CellValue,
    InferredType,
    LoadedTable,
    Row,
    SourceKind,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "LoadError",
    "UnsupportedSourceError",
    "UploadTooLargeError",
    # Models - enums
    "InferredType",
    "SourceKind",
    # Models - base data structures
    "CellValue",
    "LoadedTable",
    "Row",
]
