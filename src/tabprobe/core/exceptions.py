"""Errors raised while loading tabular sources.

LoadError is the only error the analysis core raises. Missing values,
non-numeric cells and empty tables are ordinary data conditions.
"""

from __future__ import annotations


class LoadError(Exception):
    """A byte source could not be parsed as its declared tabular kind."""

    def __init__(self, message: str, source: str | None = None):
        self.message = message
        self.source = source
        super().__init__(f"{source}: {message}" if source else message)


class UnsupportedSourceError(LoadError):
    """The source is not one of the supported tabular kinds."""


class UploadTooLargeError(LoadError):
    """An uploaded payload exceeds the configured size limit."""

    def __init__(self, size: int, limit: int, source: str | None = None):
        self.size = size
        self.limit = limit
        super().__init__(f"payload of {size} bytes exceeds limit of {limit} bytes", source)
