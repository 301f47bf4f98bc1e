"""
Mysterio Logging Configuration

Structured logging setup using structlog with JSON output on request
and human-readable output for development.
"""

import logging
import sys
from typing import TextIO

import structlog


def _base_processors() -> list:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def configure_default_logging() -> None:
    """Route structlog through stdlib logging unless the application already configured it.

    Stdlib handlers and levels are left untouched, so with no logging setup
    at all only warnings and above are emitted, on stderr.
    """
    if structlog.is_configured():
        return

    structlog.configure(
        processors=[*_base_processors(), structlog.dev.ConsoleRenderer(colors=False)],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def setup_logging(
    log_level: str = "WARNING",
    environment: str = "local",
    enable_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Setup structured logging configuration.

    Logs go to stderr unless another *stream* is given, so that command
    output written to stdout stays machine readable.

    Raises:
        ValueError: If *log_level* is not a logging level name.
    """
    level = logging.getLevelNamesMapping().get(log_level.upper())
    if level is None:
        raise ValueError(f"Invalid log level {log_level!r}")

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stderr,
        level=level,
        force=True,
    )

    processors = _base_processors()

    if environment == "production" or enable_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)
