"""File upload and analysis endpoint."""

from pathlib import PurePath
from typing import Annotated
from uuid import uuid4

from fastapi import APIRouter, File, UploadFile
from fastapi.responses import JSONResponse

from tabprobe.analysis import analyze_file
from tabprobe.api.deps import SettingsDep
from tabprobe.api.schemas import ErrorResponse, UploadResponse
from tabprobe.api.storage import scoped_upload
from tabprobe.core.exceptions import LoadError, UploadTooLargeError
from tabprobe.core.logging import get_logger, log_context
from tabprobe.sources import kind_from_filename

logger = get_logger(__name__)

router = APIRouter()


def _error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    payload = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=payload.model_dump(exclude_none=True))


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def upload_file(
    settings: SettingsDep,
    file: Annotated[UploadFile | None, File(description="CSV or Excel file")] = None,
) -> UploadResponse | JSONResponse:
    """Analyze an uploaded CSV or Excel file."""
    if file is None or not file.filename:
        return _error(400, "No file uploaded")

    filename = file.filename
    extension = PurePath(filename).suffix.lower()
    allowed = {ext.lower() for ext in settings.allowed_extensions}
    if extension not in allowed:
        return _error(400, "Invalid file type. Please upload CSV or Excel files.")

    request_id = uuid4().hex
    with log_context(request_id=request_id, filename=filename):
        try:
            kind = kind_from_filename(filename)
            with scoped_upload(
                file.file,
                filename,
                max_bytes=settings.max_upload_bytes,
                base_dir=settings.upload_dir,
                request_id=request_id,
            ) as path:
                result = analyze_file(path, kind, settings=settings)
        except UploadTooLargeError:
            limit_mb = settings.max_upload_bytes // (1024 * 1024)
            logger.warning("upload_rejected_too_large", limit_bytes=settings.max_upload_bytes)
            return _error(400, f"File too large. Maximum size is {limit_mb}MB.")
        except LoadError as e:
            logger.error("upload_analysis_failed", error=str(e))
            return _error(500, "Failed to analyze file", details=str(e))

    return UploadResponse.from_result(filename, result)
