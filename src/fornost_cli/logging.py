"""
Structured logging configuration.

Logs are written to stderr so stdout stays reserved for command output
(tables and JSON). Call ``setup_logging`` once at startup; modules obtain
loggers with ``structlog.get_logger(__name__)``.

Usage:
    from fornost_cli.logging import setup_logging

    setup_logging(level="DEBUG", format_type="console")
"""

from __future__ import annotations

import logging
import sys
from typing import Literal

import structlog
from structlog.typing import Processor

LogFormat = Literal["console", "json"]


def setup_logging(level: str = "WARNING", format_type: LogFormat = "console") -> None:
    """
    Configure structlog for the CLI.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: 'console' for human-readable output, 'json' for JSON lines

    Raises:
        ValueError: If level is not a known level name
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if format_type == "json":
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
