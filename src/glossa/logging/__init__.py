"""Structured logging for glossa.

Usage:
    from glossa.logging import configure_logging, get_logger

    # Once, in the CLI callback
    configure_logging(level="DEBUG")

    # In modules
    log = get_logger(__name__)
    log.debug("format failed", format="flat-json", path="en.json")
"""

from glossa.logging.config import configure_logging, get_logger
from glossa.logging.formatters import GlossaRenderer

__all__ = [
    "GlossaRenderer",
    "configure_logging",
    "get_logger",
]
