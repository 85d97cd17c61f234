"""Numeric statistics for loaded rows.

For every column, the values that parse as finite numbers are collected
(numeric text is coerced); everything else is silently discarded. Columns
with no numeric values are left out of the result entirely.

Percentiles use a fixed nearest-index rule on the ascending sort, with
zero-based indexing and no interpolation:

    median = sorted[floor(n / 2)]
    q1     = sorted[floor(n * 0.25)]
    q3     = sorted[floor(n * 0.75)]

For even n the median is the upper middle element, not the average of
the two middle elements.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from tabprobe.analysis.models import NumericStats
from tabprobe.analysis.values import parse_number
from tabprobe.core.models import Row


def _nearest_index(ordered: np.ndarray, fraction: float) -> float:
    return float(ordered[math.floor(ordered.size * fraction)])


def compute_column_stats(values: Sequence[float]) -> NumericStats | None:
    """Describe a column's numeric values.

    Returns:
        NumericStats, or None when there are no values
    """
    if not values:
        return None

    array = np.asarray(values, dtype=float)
    ordered = np.sort(array)
    count = int(array.size)
    total = float(array.sum())

    return NumericStats(
        count=count,
        mean=total / count,
        min=float(ordered[0]),
        max=float(ordered[-1]),
        sum=total,
        median=_nearest_index(ordered, 0.5),
        q1=_nearest_index(ordered, 0.25),
        q3=_nearest_index(ordered, 0.75),
    )


def numeric_values(rows: Sequence[Row], column: str) -> list[float]:
    """Values of one column that parse as finite numbers, in row order."""
    parsed = (parse_number(row.get(column)) for row in rows)
    return [value for value in parsed if value is not None]


def compute_numeric_stats(
    rows: Sequence[Row],
    column_names: Sequence[str],
) -> dict[str, NumericStats]:
    """Compute statistics for every column with at least one numeric value.

    Args:
        rows: Loaded rows
        column_names: Columns in display order

    Returns:
        Mapping of column name to NumericStats, in column order. Columns
        without numeric values are absent.
    """
    stats: dict[str, NumericStats] = {}
    for column in column_names:
        column_stats = compute_column_stats(numeric_values(rows, column))
        if column_stats is not None:
            stats[column] = column_stats
    return stats
