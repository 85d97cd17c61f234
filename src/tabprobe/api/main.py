"""FastAPI app factory for the upload service."""

from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tabprobe.api import routers
from tabprobe.api.schemas import HealthResponse
from tabprobe.core.config import Settings, get_settings
from tabprobe.core.logging import get_logger

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    title: str = "tabprobe",
    version: str = "0.1.0",
) -> FastAPI:
    """Build the upload API around one Settings instance.

    Args:
        settings: Application settings (default: cached environment settings)
        title: API title
        version: API version

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=title,
        version=version,
        description="Schema inference and summary statistics for uploaded tabular files",
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(routers.upload.router, tags=["analysis"])

    @app.get("/health", response_model=HealthResponse)  # type: ignore[untyped-decorator]
    async def health_check() -> HealthResponse:
        """Liveness probe."""
        return HealthResponse(
            status="OK",
            message="tabprobe analysis service is running",
            timestamp=datetime.now(UTC).isoformat(),
        )

    logger.debug("app_created", max_upload_bytes=settings.max_upload_bytes)
    return app
