"""Column type inference from a single sample value.

Each column is typed from the first row's value only. This is fast and
deterministic but can misclassify a column whose first value is atypical
(for example a numeric ID column whose first cell is blank).

Decision order, first match wins:
    1. absent value                          -> unknown
    2. finite number or numeric text         -> number
    3. boolean or "true"/"false" text        -> boolean
    4. text that parses as a date/time       -> date
    5. anything else                         -> string

So "0" is a number even though it could loosely mean false.
"""

from __future__ import annotations

from collections.abc import Sequence

from tabprobe.analysis.values import is_boolean, is_date, parse_number
from tabprobe.core.models import CellValue, InferredType, Row


def infer_value_type(value: CellValue) -> InferredType:
    """Classify one sample value."""
    if value is None:
        return InferredType.UNKNOWN
    if parse_number(value) is not None:
        return InferredType.NUMBER
    if is_boolean(value):
        return InferredType.BOOLEAN
    if is_date(value):
        return InferredType.DATE
    return InferredType.STRING


def infer_column_types(
    rows: Sequence[Row],
    column_names: Sequence[str],
) -> dict[str, InferredType]:
    """Assign one type per column from the first row's values.

    Args:
        rows: Loaded rows
        column_names: Columns in display order

    Returns:
        Mapping of every column name to its inferred type, in column order
    """
    sample = rows[0] if rows else {}
    return {column: infer_value_type(sample.get(column)) for column in column_names}
