"""Logging configuration for glossa.

Usage:
    from glossa.logging import configure_logging, get_logger

    configure_logging(level="DEBUG")
    log = get_logger(__name__)
    log.debug("file skipped", path="src/app/broken.py")
"""

from __future__ import annotations

import logging
import sys

import structlog

from glossa.logging.formatters import GlossaRenderer


def configure_logging(
    *,
    level: str = "WARNING",
    colors: bool | None = None,
    json_output: bool = False,
) -> None:
    """Configure structlog for command-line use.

    Log lines are written to stderr; stdout is reserved for command output
    (including ``--json`` payloads).

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        colors: Enable colors (auto-detect TTY/FORCE_COLOR if None)
        json_output: Emit JSON log lines instead of the themed renderer
    """
    if colors is None:
        colors = sys.stderr.isatty()

    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(format="%(message)s", level=log_level, stream=sys.stderr)

    renderer: structlog.typing.Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = GlossaRenderer(colors=colors)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Optional logger name (usually module __name__)
    """
    return structlog.get_logger(name)
