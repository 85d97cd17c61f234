"""tabprobe - schema inference and summary statistics for tabular files."""

from tabprobe.analysis import AnalysisResult, NumericStats, analyze, analyze_file
from tabprobe.core import InferredType, LoadError, SourceKind

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "InferredType",
    "LoadError",
    "NumericStats",
    "SourceKind",
    "analyze",
    "analyze_file",
]
