"""Structured logging for the library.

Until the embedding application opts in with ``configure_logging`` (or
its own ``structlog.configure``), events go to the standard ``logging``
tree under ``easyconfig`` and are silent unless that logger is enabled.
"""

import logging
import sys
from typing import TextIO

import structlog

from easyconfig.settings import get_settings


LIBRARY_LOGGER = "easyconfig"

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


def configure_logging(
    level: int | None = None,
    output: TextIO = sys.stderr,
    json_format: bool | None = None,
) -> None:
    """Configure structlog output for an application using the library.

    Sets up structlog with JSON output format and standard processors
    for timestamps, log levels, and context binding. Arguments left as
    None are read from ``EASYCONFIG_LOG_LEVEL`` / ``EASYCONFIG_LOG_JSON``.

    Args:
        level: Logging level (default: from settings, INFO).
        output: Output stream (default: stderr).
        json_format: Whether to use JSON format (default: from settings, True).
    """
    if level is None or json_format is None:
        settings = get_settings()
        if level is None:
            level = settings.log_level_number
        if json_format is None:
            json_format = settings.log_json

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a bound logger instance.

    Uses the structlog configuration when one is installed. Otherwise
    wraps the stdlib logger of the same name, so nothing is printed
    unless the application enables it.

    Args:
        name: Optional logger name (default: the library logger).

    Returns:
        Bound logger instance.
    """
    if structlog.is_configured():
        configured: structlog.stdlib.BoundLogger = structlog.get_logger(name)
        return configured

    logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
        logging.getLogger(name or LIBRARY_LOGGER),
        processors=[structlog.stdlib.render_to_log_kwargs],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    return logger
