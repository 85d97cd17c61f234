"""Pydantic schemas for API responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from tabprobe.analysis.models import AnalysisResult, NumericStats
from tabprobe.core.models import InferredType


class UploadResponse(BaseModel):
    """Successful analysis of an uploaded file."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = "File analyzed successfully"
    filename: str
    rows: int
    columns: int
    column_names: list[str] = Field(alias="columnNames")
    data_types: dict[str, InferredType] = Field(alias="dataTypes")
    numeric_stats: dict[str, NumericStats] = Field(alias="numericStats")
    preview: list[dict[str, Any]]

    @classmethod
    def from_result(cls, filename: str, result: AnalysisResult) -> "UploadResponse":
        return cls(
            filename=filename,
            rows=result.row_count,
            columns=result.column_count,
            column_names=list(result.column_names),
            data_types=result.data_types,
            numeric_stats=result.numeric_stats,
            preview=list(result.preview),
        )


class ErrorResponse(BaseModel):
    """Error payload."""

    error: str
    details: str | None = None


class HealthResponse(BaseModel):
    """Health check payload."""

    status: str
    message: str
    timestamp: str
