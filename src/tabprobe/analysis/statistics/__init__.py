"""Statistical profiling module.

Computes count, sum, mean, min, max and nearest-index median/quartiles
for columns holding numeric values.
"""

from tabprobe.analysis.statistics.profiler import (
    compute_column_stats,
    compute_numeric_stats,
    numeric_values,
)

__all__ = [
    "compute_column_stats",
    "compute_numeric_stats",
    "numeric_values",
]
