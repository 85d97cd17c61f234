"""Delimited-text source loader."""

from tabprobe.sources.csv.loader import CSVLoader

__all__ = [
    "CSVLoader",
]
