"""
Structured logging configuration.

This module provides utilities for configuring and using structured logging.
Loggers handed out here always sit on top of a standard library logger, so a
library that never calls ``configure_logging`` stays silent unless the host
application enables the ``argbind`` logger.
"""

import logging
import sys
from enum import Enum

import structlog


class LogFormat(str, Enum):
    """Log format options."""

    JSON = "json"
    CONSOLE = "console"
    PLAIN = "plain"


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Args:
        name: Optional logger name

    Returns:
        A structured logger
    """
    return structlog.wrap_logger(  # type: ignore
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


def configure_logging(
    level: int | str = logging.WARNING,
    log_format: LogFormat = LogFormat.CONSOLE,
) -> None:
    """Configure stdlib logging and structlog for applications using the parser.

    Args:
        level: Minimum level, either a ``logging`` constant or its name
        log_format: Renderer used for emitted events
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    if log_format == LogFormat.JSON:
        renderer = structlog.processors.JSONRenderer()
    elif log_format == LogFormat.PLAIN:
        renderer = structlog.processors.KeyValueRenderer(key_order=["event"])
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
