"""Type inference module.

Assigns a semantic type (number, boolean, date, string, unknown) to each
column from a single sample value.
"""

from tabprobe.analysis.typing.inference import infer_column_types, infer_value_type

__all__ = [
    "infer_column_types",
    "infer_value_type",
]
