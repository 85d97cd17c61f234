"""structlog setup for tabprobe.

The CLI logs to stderr in human-readable form; the API server can switch
to one JSON object per line with `log_format="json"`.

Usage:
    from tabprobe.core.logging import configure_logging, get_logger, log_context

    configure_logging(log_level="DEBUG")
    logger = get_logger(__name__)

    with log_context(request_id="4f1c", filename="sales.csv"):
        logger.info("analysis_started", source_kind="delimited-text")
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator, MutableMapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.typing import FilteringBoundLogger, Processor

# Fields bound for the current request only (request_id, filename)
_request_context: ContextVar[dict[str, Any] | None] = ContextVar("request_context", default=None)


def _merge_request_context(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Copy the active request fields into every event."""
    context = _request_context.get()
    if context:
        for key, value in context.items():
            event_dict.setdefault(key, value)
    return event_dict


def _renderer(log_format: str, color: bool) -> list[Processor]:
    if log_format == "json":
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [
        structlog.dev.ConsoleRenderer(
            colors=color,
            exception_formatter=structlog.dev.plain_traceback,
        )
    ]


def configure_logging(
    log_level: str = "INFO",
    log_format: str = "console",
    show_timestamps: bool = True,
    color: bool = True,
) -> None:
    """Set up structlog and the stdlib root logger.

    Args:
        log_level: Minimum level name, e.g. "DEBUG" or "WARNING"
        log_format: "console" or "json"
        show_timestamps: Prefix events with an ISO-8601 UTC timestamp
        color: Colorize console output
    """
    level = logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO)

    processors: list[Processor] = []
    if show_timestamps:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))
    processors += [
        structlog.contextvars.merge_contextvars,
        _merge_request_context,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        *_renderer(log_format, color),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    # pandas, openpyxl and uvicorn log through the stdlib
    logging.basicConfig(
        format="%(message)s",
        level=level,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Return a structlog logger, usually for `__name__`."""
    return cast(FilteringBoundLogger, structlog.get_logger(name))


@contextmanager
def log_context(**fields: Any) -> Iterator[dict[str, Any]]:
    """Bind fields to every event logged inside the block.

    Nested blocks add to the outer fields; the outer set is restored on exit.
    """
    merged = {**(_request_context.get() or {}), **fields}
    token = _request_context.set(merged)
    try:
        yield merged
    finally:
        _request_context.reset(token)


def current_log_context() -> dict[str, Any]:
    """Copy of the fields bound by the enclosing log_context blocks."""
    return dict(_request_context.get() or {})


configure_logging()
