"""Logging setup for the console.

The menu transcript owns stdout, so structlog events are written to stderr.
"""

import logging
import sys

import structlog


def configure_logging(level: int = logging.WARNING) -> None:
    """Route structlog events to stderr, dropping anything below level.

    Args:
        level: Minimum stdlib logging level to emit (default: WARNING).
    """
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
