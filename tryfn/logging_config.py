"""Structured logging configuration using structlog + rich.

Library loggers wrap stdlib loggers under the ``tryfn`` namespace, so
nothing is printed until the host application enables those levels,
either through ``setup_logging`` or its own logging configuration.
"""

import logging
import sys

import structlog
from rich.traceback import install as install_rich_traceback

from tryfn.config import Settings


def setup_logging(
    *,
    json_logs: bool | None = None,
    log_level: str | None = None,
    rich_tracebacks: bool | None = None,
) -> None:
    """Configure structlog with rich console output or JSON formatting.

    Arguments left as None fall back to the TRYFN_* settings, which are
    read here rather than at import time.

    Args:
        json_logs: If True, output JSON logs. Otherwise, console rendering.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rich_tracebacks: If True, install the rich traceback handler.
    """
    if json_logs is None or log_level is None or rich_tracebacks is None:
        settings = Settings()
        if json_logs is None:
            json_logs = settings.json_logs
        if log_level is None:
            log_level = settings.log_level
        if rich_tracebacks is None:
            rich_tracebacks = settings.rich_tracebacks

    level = getattr(logging, log_level.upper())

    if rich_tracebacks:
        install_rich_traceback(show_locals=True, width=120)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        renderers: list[structlog.types.Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderers = [
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=[*shared_processors, *renderers],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    logging.getLogger("tryfn").setLevel(level)


def get_logger(name: str = "tryfn") -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Logger name under the ``tryfn`` namespace (typically __name__).

    Returns:
        A structlog logger writing through the stdlib logger of that name.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
