"""
Structured logging configuration using structlog.

Machine-readable JSON logs or human-readable console logs,
selected by the LOG_FORMAT setting.
"""

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from structlog.types import Processor

from steam_catalog.config import get_settings

# Bound on every logger returned by get_logger
SERVICE_NAME = "steam_catalog"


def setup_logging() -> None:
    """
    Configure structured logging for the application.

    Sets up structlog with a JSON renderer or a console renderer
    depending on the configured log format.
    """
    settings = get_settings()

    # Processors applied before rendering, whatever the output format
    shared_processors: list["Processor"] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.logging.include_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if settings.logging.format == "json":
        # One JSON object per line for log collectors
        processors = [
            *shared_processors,
            structlog.processors.JSONRenderer(),
        ]
    else:
        # Plain key=value lines without ANSI colors
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    # Logs go to stderr so that CLI output on stdout stays valid JSON
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.logging.level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # Route stdlib logging through the same stream and level
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, settings.logging.level),
    )


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)
        **initial_context: Extra context values to bind to the logger

    Returns:
        structlog.BoundLogger: Logger bound to the service name and
        any extra context

    Example:
        >>> logger = get_logger(__name__, component="system")
        >>> logger.info("User registered", user_id="u_0")
    """
    return structlog.get_logger(name).bind(service=SERVICE_NAME, **initial_context)
