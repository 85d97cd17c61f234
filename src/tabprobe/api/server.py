"""API server entry point.

Usage:
    # Via script
    tabprobe-api

    # Via uvicorn directly
    uvicorn tabprobe.api.main:create_app --factory --reload
"""

from tabprobe.core.config import get_settings
from tabprobe.core.logging import configure_logging, get_logger

logger = get_logger(__name__)


def main(host: str | None = None, port: int | None = None) -> None:
    """Start the API server."""
    import uvicorn

    settings = get_settings()
    configure_logging(log_level=settings.log_level, log_format=settings.log_format)

    host = host or settings.api_host
    port = port or settings.api_port
    logger.info("server_starting", host=host, port=port)

    uvicorn.run(
        "tabprobe.api.main:create_app",
        factory=True,
        host=host,
        port=port,
    )


if __name__ == "__main__":
    main()
