"""Tabular analysis engine.

- typing: one inferred type per column from a single sample
- statistics: numeric descriptive statistics per column
- analyzer: load + analyze orchestration
"""

from tabprobe.analysis.analyzer import analyze, analyze_file, analyze_table
from tabprobe.analysis.models import AnalysisResult, NumericStats
from tabprobe.analysis.statistics import compute_column_stats, compute_numeric_stats
from tabprobe.analysis.typing import infer_column_types, infer_value_type

__all__ = [
    "AnalysisResult",
    "NumericStats",
    "analyze",
    "analyze_file",
    "analyze_table",
    "compute_column_stats",
    "compute_numeric_stats",
    "infer_column_types",
    "infer_value_type",
]
