"""Analysis result models.

Pydantic models for the structures the analysis produces:
- NumericStats: descriptive statistics of a column's numeric values
- AnalysisResult: the complete summary of one tabular source

Both are immutable. AnalysisResult serializes by alias to the wire shape
(rows, columns, columnNames, dataTypes, numericStats, preview).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from tabprobe.core.models import InferredType


class NumericStats(BaseModel):
    """Statistics for a column's numeric values.

    median, q1 and q3 are nearest-index picks from the ascending sort,
    not interpolated quantiles.
    """

    model_config = ConfigDict(frozen=True)

    count: int
    mean: float
    min: float
    max: float
    sum: float
    median: float
    q1: float
    q3: float


class AnalysisResult(BaseModel):
    """Summary of one tabular source."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    row_count: int = Field(alias="rows")
    column_count: int = Field(alias="columns")
    column_names: tuple[str, ...] = Field(default=(), alias="columnNames")
    data_types: dict[str, InferredType] = Field(default_factory=dict, alias="dataTypes")
    numeric_stats: dict[str, NumericStats] = Field(default_factory=dict, alias="numericStats")
    preview: tuple[dict[str, Any], ...] = ()

    def to_payload(self) -> dict[str, Any]:
        """JSON-compatible dict in the wire shape."""
        return self.model_dump(mode="json", by_alias=True)
